"""Recursive partition filter (positional elimination).

Starting from a bit index and walking towards bit 0, the candidate records are
split into those with the bit set and those with it clear, and one side is kept:

=============  ==================  ==================
keep_largest   sizes differ        sizes equal
=============  ==================  ==================
True           strictly larger     set side (bit = 1)
False          strictly smaller    clear side (bit = 0)
=============  ==================  ==================

The tie-break is asymmetric on purpose; it is not a symmetric "prefer
majority" rule. The walk is an explicit loop, so depth is bounded by the start
bit and no bit below 0 is ever inspected.
"""

from __future__ import annotations

from typing import List

import numpy as np

from bit_diagnostics.errors import EmptyPartitionError
from bit_diagnostics.models.records import MAX_WIDTH, Partition
from bit_diagnostics.models.results import FilterResult, PartitionStep


def partition_by_bit(values: np.ndarray, bit: int) -> Partition:
    """Split ``values`` on ``bit``; both sides preserve input order."""
    v = np.asarray(values, dtype=np.uint64)
    b = int(bit)
    if not (0 <= b < MAX_WIDTH):
        raise ValueError(f"bit must be in [0, {MAX_WIDTH - 1}], got {bit}")
    is_set = ((v >> np.uint64(b)) & np.uint64(1)).astype(bool)
    return Partition(bit=b, set_part=v[is_set], clear_part=v[~is_set])


def _kept_side(part: Partition, keep_largest: bool) -> str:
    if part.n_set == part.n_clear:
        return "set" if keep_largest else "clear"
    set_is_larger = part.n_set > part.n_clear
    return "set" if set_is_larger == keep_largest else "clear"


def partition_filter(values: np.ndarray, start_bit: int, *, keep_largest: bool) -> FilterResult:
    """Eliminate candidates bit by bit until one record survives.

    Parameters
    ----------
    values:
        Candidate records (1-D), all sharing one bit-width.
    start_bit:
        First bit to partition on, walking down to bit 0. The decode pipeline
        passes ``W - 2`` because the top bit was already split using gamma.
    keep_largest:
        True keeps the larger side (ties -> bit set), False the smaller side
        (ties -> bit clear).

    Returns
    -------
    FilterResult
        Survivor, applied steps and warnings.

    Raises
    ------
    EmptyPartitionError
        The input is empty, or the rule selects an empty side (every candidate
        shares the bit while the smaller side is requested).

    Notes
    -----
    - A single candidate is returned as is, whatever ``keep_largest`` or
      ``start_bit``.
    - If several candidates survive bit 0 (duplicate records), the first one in
      input order is returned and a warning is recorded. The same applies when
      ``start_bit`` is below 0.
    """
    cand = np.asarray(values, dtype=np.uint64)
    if cand.ndim != 1:
        raise ValueError(f"values must be 1D, got shape {cand.shape}")
    if cand.size == 0:
        raise EmptyPartitionError("Cannot filter an empty record set", bit=int(start_bit))

    keep_largest = bool(keep_largest)
    if cand.size == 1:
        return FilterResult(value=int(cand[0]), keep_largest=keep_largest)

    bit = int(start_bit)
    if bit >= MAX_WIDTH:
        raise ValueError(f"start_bit must be < {MAX_WIDTH}, got {start_bit}")
    if bit < 0:
        return FilterResult(
            value=int(cand[0]),
            keep_largest=keep_largest,
            warnings=(f"no bit left to split {cand.size} candidates; kept the first in input order",),
        )

    steps: List[PartitionStep] = []
    warnings: List[str] = []
    while True:
        part = partition_by_bit(cand, bit)
        kept = _kept_side(part, keep_largest)
        steps.append(PartitionStep(bit=bit, n_set=part.n_set, n_clear=part.n_clear, kept=kept))
        cand = part.set_part if kept == "set" else part.clear_part

        if cand.size == 0:
            rule = "largest" if keep_largest else "smallest"
            raise EmptyPartitionError(
                f"Keeping the {rule} side at bit {bit} leaves no candidates "
                f"(set={part.n_set}, clear={part.n_clear})",
                bit=bit,
            )
        if cand.size == 1 or bit == 0:
            break
        bit -= 1

    if cand.size > 1:
        warnings.append(f"{cand.size} candidates survive bit 0; kept the first in input order")

    return FilterResult(
        value=int(cand[0]),
        keep_largest=keep_largest,
        steps=tuple(steps),
        warnings=tuple(warnings),
    )


def recursive_partition_filter(values: np.ndarray, start_bit: int, *, keep_largest: bool) -> int:
    """Shortcut for ``partition_filter(...).value``."""
    return partition_filter(values, start_bit, keep_largest=keep_largest).value
