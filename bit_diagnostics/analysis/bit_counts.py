"""Per-bit population counts of a record set.

Functions
---------
count_bits
    Fold every record into a length-``W`` accumulator of set-bit counts.
"""

from __future__ import annotations

import numpy as np

from bit_diagnostics.errors import EmptyPartitionError
from bit_diagnostics.models.records import MAX_WIDTH, BitCounts


def count_bits(values: np.ndarray, width: int) -> BitCounts:
    """Count, for each bit position, how many records have that bit set.

    Parameters
    ----------
    values:
        1-D array (or sequence) of unsigned records.
    width:
        Dataset bit-width ``W``. Only bits ``0..W-1`` are counted; higher bits of
        an oversized record are ignored, so callers must validate width upstream.

    Returns
    -------
    BitCounts
        ``counts[i]`` is the number of records whose bit ``i`` is 1.

    Notes
    -----
    The accumulation is a plain sum over records, so record order does not
    affect the result.
    """
    v = np.asarray(values, dtype=np.uint64)
    if v.ndim != 1:
        raise ValueError(f"values must be 1D, got shape {v.shape}")
    if v.size == 0:
        raise EmptyPartitionError("Cannot count bits of an empty record set")

    w = int(width)
    if not (1 <= w <= MAX_WIDTH):
        raise ValueError(f"width must be in [1, {MAX_WIDTH}], got {width}")

    shifts = np.arange(w, dtype=np.uint64)
    bits = (v[:, None] >> shifts[None, :]) & np.uint64(1)  # (N, W)
    counts = bits.astype(np.int64).sum(axis=0)

    return BitCounts(counts=counts, n_records=int(v.size))
