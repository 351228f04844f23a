"""
Eligibility component.

Table-driven driving eligibility by country.
"""

from __future__ import annotations

from shopkit.domain.values import ValidationError, is_finite_number
from shopkit.rules.models import Rules

from .models import (
    INVALID_AGE,
    INVALID_COUNTRY_CODE,
    DrivingEligibilityOutput,
    EligibilityConfig,
)


def check_driving_eligibility(
    age: object,
    country_code: object,
    config: EligibilityConfig | None = None,
) -> DrivingEligibilityOutput:
    """
    Check whether a person of the given age may drive in a country.

    Args:
        age: Age in years
        country_code: Supported country code (e.g. "US", "UK")
        config: Optional eligibility config

    Returns:
        DrivingEligibilityOutput; ok=False for an unsupported country
        or a non-numeric age
    """
    config = config or EligibilityConfig()

    minimum_age = (
        config.driving_ages.get(country_code) if isinstance(country_code, str) else None
    )
    if minimum_age is None:
        return DrivingEligibilityOutput(
            ok=False,
            error=ValidationError(
                "invalid_country_code", INVALID_COUNTRY_CODE, "country_code"
            ),
        )

    if not is_finite_number(age):
        return DrivingEligibilityOutput(
            ok=False,
            minimum_age=minimum_age,
            error=ValidationError("invalid_age", INVALID_AGE, "age"),
        )

    return DrivingEligibilityOutput(
        ok=True,
        can_drive=age >= minimum_age,  # type: ignore[operator]
        minimum_age=minimum_age,
    )


def can_drive(
    age: object,
    country_code: object,
    config: EligibilityConfig | None = None,
) -> bool | str:
    """True/False eligibility, or an "Invalid ..." message for bad input."""
    result = check_driving_eligibility(age, country_code, config)
    if result.error is not None:
        return result.error.message
    return result.can_drive


def load_config_from_rules(rules: Rules) -> EligibilityConfig:
    """Load EligibilityConfig from rules.yaml."""
    return EligibilityConfig(driving_ages=dict(rules.eligibility.driving_ages))
