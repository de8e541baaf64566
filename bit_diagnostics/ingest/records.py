from __future__ import annotations

import re
from typing import Iterable, List, Optional

from bit_diagnostics.errors import EmptyPartitionError, ParseError, WidthMismatchError
from bit_diagnostics.models.profile import DecodeProfile
from bit_diagnostics.models.records import MAX_WIDTH, RecordSet


_BINARY_RE = re.compile(r"[01]+")


def parse_records(
    lines: Iterable[str],
    *,
    profile: Optional[DecodeProfile] = None,
) -> RecordSet:
    """Parse binary record strings into a :class:`RecordSet`.

    Parameters
    ----------
    lines:
        Ordered record strings, e.g. the lines of a report. Surrounding
        whitespace (including the newline) is stripped.
    profile:
        Decode options. ``expected_width`` pins the bit-width and
        ``skip_blank_lines`` controls blank-line handling.

    Returns
    -------
    RecordSet
        Records in input order with the common width.

    Raises
    ------
    ParseError
        A line contains anything other than '0'/'1', or is blank while
        ``skip_blank_lines`` is False.
    WidthMismatchError
        A record length differs from the dataset width.
    EmptyPartitionError
        No records were found.
    """
    profile = profile or DecodeProfile()
    width = profile.expected_width
    values: List[int] = []

    for i, raw in enumerate(lines):
        s = raw.strip()
        if not s:
            if profile.skip_blank_lines:
                continue
            raise ParseError(raw, i, reason="blank record")
        if _BINARY_RE.fullmatch(s) is None:
            raise ParseError(raw, i)
        if len(s) > MAX_WIDTH:
            raise ParseError(raw, i, reason=f"record wider than {MAX_WIDTH} bits")

        if width is None:
            width = len(s)
        elif len(s) != width:
            raise WidthMismatchError(width, len(s), index=i)

        values.append(int(s, 2))

    if not values:
        raise EmptyPartitionError("Report contains no records")

    return RecordSet(values=values, width=int(width))


def records_from_values(values: Iterable[int], width: int) -> RecordSet:
    """Build a :class:`RecordSet` from pre-parsed integers, checking they fit ``width`` bits."""
    w = int(width)
    if not (1 <= w <= MAX_WIDTH):
        raise ValueError(f"width must be in [1, {MAX_WIDTH}], got {width}")

    checked: List[int] = []
    for i, v in enumerate(values):
        v = int(v)
        if v < 0:
            raise ValueError(f"Record {i} is negative: {v}")
        if v.bit_length() > w:
            raise WidthMismatchError(w, v.bit_length(), index=i)
        checked.append(v)

    return RecordSet(values=checked, width=w)
