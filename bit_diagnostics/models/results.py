from __future__ import annotations

"""Result containers for the decode workflow.

Design goals
------------
- Full traceability: each rating carries the partition steps that produced it.
- Immutable: all dataclasses are frozen.
- Serializable: metadata can be written to JSON sidecars or table headers.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, Tuple

import numpy as np

from .profile import DecodeProfile
from .records import BitCounts


@dataclass(frozen=True)
class PartitionStep:
    """One elimination step of the partition filter."""

    bit: int
    n_set: int
    n_clear: int
    kept: str  # "set" | "clear"

    @property
    def n_kept(self) -> int:
        return self.n_set if self.kept == "set" else self.n_clear


@dataclass(frozen=True)
class FilterResult:
    """Survivor of :func:`~bit_diagnostics.analysis.partition.partition_filter`.

    Attributes
    ----------
    value:
        The surviving record.
    keep_largest:
        Keep-rule the filter ran with.
    steps:
        Partition steps in the order they were applied (most significant first).
    warnings:
        Non-fatal notes, e.g. several identical survivors at bit 0.
    """

    value: int
    keep_largest: bool
    steps: Tuple[PartitionStep, ...] = ()
    warnings: Tuple[str, ...] = ()

    @property
    def n_steps(self) -> int:
        return len(self.steps)


@dataclass(frozen=True)
class DiagnosticReport:
    """Decoded diagnostic values of one record set.

    Attributes
    ----------
    width, n_records:
        Dataset shape.
    counts:
        Per-bit population counts the synthesis was computed from.
    gamma, epsilon:
        Majority / minority values.
    o2, co2:
        Filter results for the O2 (keep largest) and CO2 (keep smallest) ratings.
    profile:
        Options the decode ran with.
    timestamp:
        ISO-8601 timestamp when the report was created.
    warnings:
        Non-fatal notes collected across the whole decode.
    """

    width: int
    n_records: int
    counts: BitCounts
    gamma: int
    epsilon: int
    o2: FilterResult
    co2: FilterResult
    profile: DecodeProfile
    timestamp: str
    warnings: Tuple[str, ...] = ()

    @staticmethod
    def now_iso() -> str:
        """Return current UTC time as ISO-8601 string."""
        return datetime.now(timezone.utc).isoformat(timespec="seconds").replace("+00:00", "Z")

    @property
    def o2_rating(self) -> int:
        return self.o2.value

    @property
    def co2_rating(self) -> int:
        return self.co2.value

    @property
    def power_consumption(self) -> int:
        return self.gamma * self.epsilon

    @property
    def life_support_rating(self) -> int:
        return self.o2_rating * self.co2_rating

    def as_tuple(self) -> Tuple[int, int, int, int]:
        """Return ``(gamma, epsilon, o2_rating, co2_rating)``."""
        return (self.gamma, self.epsilon, self.o2_rating, self.co2_rating)

    def to_metadata_dict(self) -> Dict[str, Any]:
        """Export values and provenance as a flat dictionary."""
        d: Dict[str, Any] = {
            "decode_timestamp": self.timestamp,
            "decode_width": self.width,
            "decode_n_records": self.n_records,
            "gamma": self.gamma,
            "epsilon": self.epsilon,
            "o2_rating": self.o2_rating,
            "co2_rating": self.co2_rating,
            "power_consumption": self.power_consumption,
            "life_support_rating": self.life_support_rating,
            "o2_n_steps": self.o2.n_steps,
            "co2_n_steps": self.co2.n_steps,
            "tie_bits": ",".join(str(int(b)) for b in self.counts.tie_bits),
        }
        for k, v in self.profile.to_dict().items():
            d[f"profile_{k}"] = v
        if self.warnings:
            d["warnings"] = " | ".join(self.warnings)
        return d

    def bit_table(self):
        """Return the per-bit synthesis as a pandas DataFrame, most significant bit first."""
        import pandas as pd

        bits = np.arange(self.width - 1, -1, -1, dtype=int)
        ones = self.counts.counts[bits]
        ties = np.isin(bits, self.counts.tie_bits)
        return pd.DataFrame({
            "bit": bits,
            "ones": ones,
            "zeros": self.n_records - ones,
            "gamma_bit": [(self.gamma >> int(b)) & 1 for b in bits],
            "epsilon_bit": [(self.epsilon >> int(b)) & 1 for b in bits],
            "tie": ties,
        })
