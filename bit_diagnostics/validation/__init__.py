"""Validation utilities.

This package contains *non-interactive* tooling to check the decoder against
the reference report and its known values.
"""

from .golden import REFERENCE_RECORDS, REFERENCE_VALUES, ValidationResult, run_golden_check

__all__ = [
    "REFERENCE_RECORDS",
    "REFERENCE_VALUES",
    "ValidationResult",
    "run_golden_check",
]
