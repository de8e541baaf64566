"""Decode pipeline: record set -> gamma, epsilon, O2 rating, CO2 rating.

Control flow
------------
records -> count_bits -> BitCounts -> gamma_epsilon -> (gamma, epsilon)
records -> seed split on the top bit using gamma -> partition_filter (largest)  -> O2
                                                 -> partition_filter (smallest) -> CO2

The four values only depend on the record set. Any failure aborts the whole
decode; no partial report is produced.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

import numpy as np

from bit_diagnostics.errors import EmptyPartitionError, WidthMismatchError
from bit_diagnostics.ingest.records import parse_records
from bit_diagnostics.models.profile import DecodeProfile
from bit_diagnostics.models.records import RecordSet
from bit_diagnostics.models.results import DiagnosticReport

from .bit_counts import count_bits
from .partition import partition_by_bit, partition_filter
from .synthesis import gamma_epsilon


def seed_partitions(records: RecordSet, gamma: int) -> Tuple[np.ndarray, np.ndarray]:
    """Split the full record set on its top bit using gamma's top bit.

    Returns
    -------
    o2_seed, co2_seed
        Records whose top bit equals gamma's top bit, and the rest.
    """
    top = records.top_bit
    part = partition_by_bit(records.values, top)
    if (int(gamma) >> top) & 1:
        return part.set_part, part.clear_part
    return part.clear_part, part.set_part


def decode_report(records: RecordSet, *, profile: Optional[DecodeProfile] = None) -> DiagnosticReport:
    """Compute the four diagnostic values of a record set.

    Parameters
    ----------
    records:
        Parsed report. Must be non-empty.
    profile:
        Decode options; defaults reproduce the reference decoder.

    Returns
    -------
    DiagnosticReport
        Values, per-rating partition traces and collected warnings.
    """
    profile = profile or DecodeProfile()
    if profile.expected_width is not None and records.width != int(profile.expected_width):
        raise WidthMismatchError(int(profile.expected_width), records.width)

    counts = count_bits(records.values, records.width)
    gamma, epsilon = gamma_epsilon(counts)

    warnings: List[str] = []
    ties = counts.tie_bits
    if ties.size:
        warnings.append(
            f"half of the records set bits {ties.tolist()}: clear in both gamma and epsilon"
        )

    if records.n_records == 1:
        # A lone record is its own survivor for both ratings.
        o2_seed = co2_seed = records.values
        start_bit = records.top_bit
    elif profile.seed_from_gamma:
        o2_seed, co2_seed = seed_partitions(records, gamma)
        top = records.top_bit
        if o2_seed.size == 0:
            raise EmptyPartitionError(f"O2 seed set is empty after splitting on bit {top}", bit=top)
        if co2_seed.size == 0:
            raise EmptyPartitionError(f"CO2 seed set is empty after splitting on bit {top}", bit=top)
        start_bit = top - 1
    else:
        o2_seed = co2_seed = records.values
        start_bit = records.top_bit

    o2 = partition_filter(o2_seed, start_bit, keep_largest=True)
    co2 = partition_filter(co2_seed, start_bit, keep_largest=False)

    warnings.extend(f"o2: {w}" for w in o2.warnings)
    warnings.extend(f"co2: {w}" for w in co2.warnings)

    return DiagnosticReport(
        width=records.width,
        n_records=records.n_records,
        counts=counts,
        gamma=gamma,
        epsilon=epsilon,
        o2=o2,
        co2=co2,
        profile=profile,
        timestamp=DiagnosticReport.now_iso(),
        warnings=tuple(warnings),
    )


def decode_lines(lines: Iterable[str], *, profile: Optional[DecodeProfile] = None) -> DiagnosticReport:
    """Parse binary record strings and decode them in one call."""
    records = parse_records(lines, profile=profile)
    return decode_report(records, profile=profile)
