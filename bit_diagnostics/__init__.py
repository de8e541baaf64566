"""Bit Diagnostics -- decoding tools for fixed-width binary diagnostic reports.

A diagnostic report is an ordered list of equal-length binary strings. This
package turns such a report into four unsigned integers:

- gamma / epsilon: per-bit majority / minority values across all records
- O2 / CO2 ratings: the single record surviving a positional elimination that
  keeps, bit by bit, the majority (O2) or minority (CO2) partition

Key principles:
- Pure functions over immutable inputs: no shared state between decodes
- Exact threshold rules: ties are reproduced, never "fixed"
- Full traceability: every partition step and fallback is recorded

Main subpackages:
- analysis: Bit counting, value synthesis, partition filtering, orchestration
- ingest: Boundary parser from binary strings to a RecordSet
- models: Data models (RecordSet, BitCounts, DiagnosticReport, DecodeProfile)
- validation: Golden reference check on the reference report
"""

__all__ = []
