"""Analysis package.

Design principle:
  - Ingest produces validated :class:`~bit_diagnostics.models.records.RecordSet` objects.
  - Analysis consumes a RecordSet and produces derived values.

Every function here is pure: inputs are never mutated and no state survives a
call, so the four values may be computed independently (or concurrently) by a
caller.
"""

from .bit_counts import count_bits
from .synthesis import BitRule, gamma_epsilon, synthesize
from .partition import partition_by_bit, partition_filter, recursive_partition_filter
from .decode import decode_lines, decode_report, seed_partitions

__all__ = [
    "BitRule",
    "count_bits",
    "decode_lines",
    "decode_report",
    "gamma_epsilon",
    "partition_by_bit",
    "partition_filter",
    "recursive_partition_filter",
    "seed_partitions",
    "synthesize",
]
