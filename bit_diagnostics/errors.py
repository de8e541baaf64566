"""Typed failures raised while decoding a diagnostic report.

All errors derive from :class:`DecodeError`, itself a ``ValueError``, so
callers that already guard decode calls with ``except ValueError`` keep
working. None of them is transient: decoding is deterministic, so the host
should abort the decode and report the message.
"""

from __future__ import annotations

from typing import Optional


class DecodeError(ValueError):
    """Base class for every decode failure."""


class WidthMismatchError(DecodeError):
    """Records of one dataset do not share the same bit-width."""

    def __init__(self, expected: int, found: int, index: Optional[int] = None):
        self.expected = int(expected)
        self.found = int(found)
        self.index = index
        where = f" at record {index}" if index is not None else ""
        super().__init__(f"Record width mismatch{where}: expected {self.expected} bits, got {self.found}")


class EmptyPartitionError(DecodeError):
    """A counting or filtering step would operate on zero records."""

    def __init__(self, message: str, bit: Optional[int] = None):
        self.bit = bit
        super().__init__(message)


class ParseError(DecodeError):
    """A record string is not a valid binary literal."""

    def __init__(self, line: str, index: int, reason: str = "not a binary string"):
        self.line = line
        self.index = int(index)
        super().__init__(f"Record {index}: {reason}: {line[:60]!r}")
