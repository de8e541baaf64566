"""Golden reference check for the decode pipeline.

Examples
--------
>>> from bit_diagnostics.validation.golden import run_golden_check
>>> run_golden_check().ok
True
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

from bit_diagnostics.analysis.decode import decode_lines
from bit_diagnostics.errors import DecodeError
from bit_diagnostics.models.profile import DecodeProfile


REFERENCE_RECORDS: Tuple[str, ...] = (
    "00100",
    "11110",
    "10110",
    "10111",
    "10101",
    "01111",
    "00111",
    "11100",
    "10000",
    "11001",
    "00010",
    "01010",
)

REFERENCE_VALUES: Dict[str, int] = {
    "gamma": 22,
    "epsilon": 9,
    "o2_rating": 23,
    "co2_rating": 10,
}


@dataclass(frozen=True)
class ValidationResult:
    """
    Result of checking one report against expected values.

    Attributes
    ----------
    ok:
        True if no errors were found.
    errors:
        Mismatches or decode failures; the decoder should not be trusted.
    warnings:
        Warnings collected by the decode itself.
    """
    ok: bool
    errors: List[str]
    warnings: List[str]

    def raise_if_errors(self) -> None:
        """Raise ValueError if errors exist."""
        if self.errors:
            msg = "Validation failed:\n" + "\n".join(f"- {e}" for e in self.errors)
            raise ValueError(msg)


def run_golden_check(
    records: Sequence[str] = REFERENCE_RECORDS,
    expected: Mapping[str, int] = REFERENCE_VALUES,
    *,
    profile: Optional[DecodeProfile] = None,
) -> ValidationResult:
    """Decode ``records`` and compare every key of ``expected`` with the report.

    Keys of ``expected`` are report attribute names (``gamma``, ``o2_rating``,
    ``power_consumption``, ...). A decode failure is reported as an error
    instead of being raised.
    """
    errors: List[str] = []
    try:
        report = decode_lines(records, profile=profile)
    except DecodeError as exc:
        return ValidationResult(ok=False, errors=[f"decode failed: {exc}"], warnings=[])

    for key, want in expected.items():
        if not hasattr(report, key):
            errors.append(f"unknown report value '{key}'")
            continue
        got = getattr(report, key)
        if got != want:
            errors.append(f"{key}: expected {want}, got {got}")

    return ValidationResult(ok=(len(errors) == 0), errors=errors, warnings=list(report.warnings))
