"""
Eligibility component.

Public API for age/country driving eligibility.
"""

from .component import can_drive, check_driving_eligibility, load_config_from_rules
from .models import (
    DEFAULT_DRIVING_AGES,
    INVALID_AGE,
    INVALID_COUNTRY_CODE,
    DrivingEligibilityOutput,
    EligibilityConfig,
)

__all__ = [
    # Functions
    "can_drive",
    "check_driving_eligibility",
    "load_config_from_rules",
    # Models
    "DrivingEligibilityOutput",
    "EligibilityConfig",
    "DEFAULT_DRIVING_AGES",
    "INVALID_AGE",
    "INVALID_COUNTRY_CODE",
]
