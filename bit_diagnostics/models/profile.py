"""Decode profile -- bundles every option that affects a decode.

A DecodeProfile groups the decode options into one frozen dataclass.
It can be:

- Constructed directly with defaults that reproduce the reference decoder
- Overridden field-by-field via ``dataclasses.replace()``
- Serialized to/from a dict for JSON provenance
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class DecodeProfile:
    """Frozen configuration for :func:`~bit_diagnostics.analysis.decode.decode_report`.

    Optional fields (defaults reproduce the reference decoder)
    -----------------------------------------------------------
    expected_width : int or None
        If set, every parsed record must have exactly this many bits.
        ``None`` infers the width from the first record.
    seed_from_gamma : bool
        If True, the first split on the most significant bit reuses gamma's
        top bit and both rating filters start one bit lower.
        If False, both filters start from the full record set at the top bit.
    skip_blank_lines : bool
        If True, blank or whitespace-only lines are ignored by the parser.
        If False, they are rejected with a ParseError.
    """

    expected_width: Optional[int] = None
    seed_from_gamma: bool = True
    skip_blank_lines: bool = True

    def __post_init__(self) -> None:
        if self.expected_width is not None and int(self.expected_width) <= 0:
            raise ValueError(f"expected_width must be > 0, got {self.expected_width}")

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-friendly dict."""
        return asdict(self)

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> DecodeProfile:
        """Reconstruct from a dict (e.g. loaded from JSON). Unknown keys are rejected."""
        return cls(**dict(d))
