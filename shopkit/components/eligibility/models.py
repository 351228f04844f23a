"""
Eligibility component models.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from shopkit.domain.values import ValidationError

INVALID_COUNTRY_CODE = "Invalid country code"
INVALID_AGE = "Invalid age"

DEFAULT_DRIVING_AGES: dict[str, int] = {"US": 16, "UK": 17}


@dataclass(frozen=True)
class DrivingEligibilityOutput:
    """Outcome of a driving eligibility check."""

    ok: bool
    can_drive: bool = False
    minimum_age: int | None = None
    error: ValidationError | None = None


@dataclass(frozen=True)
class EligibilityConfig:
    """Minimum legal driving age per supported country code."""

    driving_ages: dict[str, int] = field(
        default_factory=lambda: dict(DEFAULT_DRIVING_AGES)
    )
