"""Value synthesis from per-bit counts.

Gamma takes, bit by bit, the value held by a strict majority of records;
epsilon the value held by a strict minority. Both compare against
``N // 2`` (integer division), so a bit set in exactly ``N // 2`` records is
clear in *both* values, for odd as well as even ``N``.
"""

from __future__ import annotations

from enum import Enum
from typing import Tuple

import numpy as np

from bit_diagnostics.models.records import BitCounts


class BitRule(Enum):
    """
    Per-bit decision rule used to build a value from BitCounts.

    - MAJORITY: bit set iff ``count > total // 2``
    - MINORITY: bit set iff ``count < total // 2``
    """
    MAJORITY = "majority"
    MINORITY = "minority"

    def holds(self, count: int, total: int) -> bool:
        half = int(total) // 2
        if self is BitRule.MAJORITY:
            return int(count) > half
        return int(count) < half

    def mask(self, counts: np.ndarray, total: int) -> np.ndarray:
        """Vectorised :meth:`holds` over a counts array."""
        c = np.asarray(counts, dtype=np.int64)
        half = int(total) // 2
        if self is BitRule.MAJORITY:
            return c > half
        return c < half


def synthesize(counts: BitCounts, rule: BitRule) -> int:
    """Compose an integer whose bit ``i`` is set iff ``rule`` holds for ``counts[i]``."""
    selected = np.flatnonzero(rule.mask(counts.counts, counts.n_records))
    value = 0
    for i in selected:
        value |= 1 << int(i)
    return value


def gamma_epsilon(counts: BitCounts) -> Tuple[int, int]:
    """Return ``(gamma, epsilon)`` for the given counts."""
    return synthesize(counts, BitRule.MAJORITY), synthesize(counts, BitRule.MINORITY)
