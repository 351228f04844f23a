"""
Validation component.

Public API for username, price range and user input validation.
"""

from .component import (
    check_user_input,
    is_price_in_range,
    is_valid_username,
    load_config_from_rules,
    validate_user_input,
)
from .models import (
    INVALID_AGE,
    INVALID_USERNAME,
    VALIDATION_SUCCESS,
    UserInputOutput,
    ValidationConfig,
)

__all__ = [
    # Functions
    "check_user_input",
    "is_price_in_range",
    "is_valid_username",
    "load_config_from_rules",
    "validate_user_input",
    # Models
    "UserInputOutput",
    "ValidationConfig",
    "INVALID_AGE",
    "INVALID_USERNAME",
    "VALIDATION_SUCCESS",
]
