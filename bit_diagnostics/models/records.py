from __future__ import annotations

from dataclasses import dataclass

import numpy as np


# Records are held as uint64, which bounds the dataset bit-width.
MAX_WIDTH = 64


@dataclass(frozen=True)
class RecordSet:
    """
    Ordered set of fixed-width unsigned records from one diagnostic report.

    Notes
    - The bit-width belongs to the dataset, not to individual records.
    - ``values`` is a read-only uint64 copy in original report order.
    - Values wider than ``width`` are a caller precondition failure; use
      :func:`~bit_diagnostics.ingest.records.records_from_values` to validate.
    """
    values: np.ndarray
    width: int

    def __post_init__(self) -> None:
        w = int(self.width)
        if not (1 <= w <= MAX_WIDTH):
            raise ValueError(f"width must be in [1, {MAX_WIDTH}], got {self.width}")
        v = np.array(self.values, dtype=np.uint64)
        if v.ndim != 1:
            raise ValueError(f"Expected 1D record array, got shape {v.shape}")
        v.flags.writeable = False
        object.__setattr__(self, "values", v)
        object.__setattr__(self, "width", w)

    @property
    def n_records(self) -> int:
        return int(self.values.size)

    @property
    def top_bit(self) -> int:
        return self.width - 1

    def __len__(self) -> int:
        return self.n_records


@dataclass(frozen=True)
class BitCounts:
    """Per-bit population counts of a RecordSet.

    Attributes
    ----------
    counts:
        int64 array of shape ``(W,)``. ``counts[i]`` is the number of records
        with bit ``i`` set (bit 0 = least significant).
    n_records:
        Total number of records that were folded in.
    """

    counts: np.ndarray
    n_records: int

    def __post_init__(self) -> None:
        c = np.array(self.counts, dtype=np.int64)
        if c.ndim != 1:
            raise ValueError(f"counts must be 1D, got shape {c.shape}")
        c.flags.writeable = False
        object.__setattr__(self, "counts", c)
        object.__setattr__(self, "n_records", int(self.n_records))

    @property
    def width(self) -> int:
        return int(self.counts.size)

    def ones(self, bit: int) -> int:
        return int(self.counts[bit])

    def zeros(self, bit: int) -> int:
        return self.n_records - int(self.counts[bit])

    @property
    def tie_bits(self) -> np.ndarray:
        """Bit positions with ``count == N // 2``, clear in both gamma and epsilon."""
        return np.flatnonzero(self.counts == self.n_records // 2)


@dataclass(frozen=True)
class Partition:
    """Split of a candidate array on one bit; both sides keep original order."""

    bit: int
    set_part: np.ndarray
    clear_part: np.ndarray

    @property
    def n_set(self) -> int:
        return int(self.set_part.size)

    @property
    def n_clear(self) -> int:
        return int(self.clear_part.size)
