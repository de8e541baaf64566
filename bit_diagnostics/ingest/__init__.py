"""Ingest package - boundary parser for diagnostic reports.

This package handles:
- Validating binary record strings ('0'/'1' only)
- Enforcing one common bit-width per dataset
- Building RecordSet objects from strings or pre-parsed integers

Design principle:
- Reading files and splitting lines is the caller's job; this package only
  consumes an already-split sequence of lines
- Malformed input is rejected with a typed error, never repaired
"""

from .records import parse_records, records_from_values

__all__ = [
    "parse_records",
    "records_from_values",
]
