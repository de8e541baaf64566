from .profile import DecodeProfile
from .records import MAX_WIDTH, BitCounts, Partition, RecordSet
from .results import DiagnosticReport, FilterResult, PartitionStep

__all__ = [
    "MAX_WIDTH",
    "BitCounts",
    "DecodeProfile",
    "DiagnosticReport",
    "FilterResult",
    "Partition",
    "PartitionStep",
    "RecordSet",
]
