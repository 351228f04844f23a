"""
Validation component.

Pure predicate and composite validators for user-supplied input.

Key behaviors:
- is_valid_username: inclusive length bounds, non-strings rejected
- is_price_in_range: inclusive at both ends
- check_user_input: collects username then age errors
- validate_user_input: string summary of check_user_input
"""

from __future__ import annotations

from shopkit.domain.values import ValidationError, is_finite_number
from shopkit.rules.models import Rules

from .models import (
    INVALID_AGE,
    INVALID_USERNAME,
    UserInputOutput,
    ValidationConfig,
)

# --- Pure Functions ---


def is_valid_username(
    username: object = None,
    config: ValidationConfig | None = None,
) -> bool:
    """
    Check a username against the configured length bounds.

    Args:
        username: Candidate username; anything but a str is invalid
        config: Optional validation config

    Returns:
        True iff username is a str with min <= len <= max
    """
    config = config or ValidationConfig()

    if not isinstance(username, str):
        return False

    return config.username_min <= len(username) <= config.username_max


def is_price_in_range(price: float, min_price: float, max_price: float) -> bool:
    """True iff min_price <= price <= max_price."""
    return min_price <= price <= max_price


def check_user_input(
    username: object,
    age: object,
    config: ValidationConfig | None = None,
) -> UserInputOutput:
    """
    Validate a username/age pair.

    Username must be a str of input_username_min..input_username_max
    characters; age must be a number in age_min..age_max.

    Args:
        username: Candidate username
        age: Candidate age
        config: Optional validation config

    Returns:
        UserInputOutput with collected errors
    """
    config = config or ValidationConfig()
    errors: list[ValidationError] = []

    if (
        not isinstance(username, str)
        or len(username) < config.input_username_min
        or len(username) > config.input_username_max
    ):
        errors.append(
            ValidationError(
                code="invalid_username",
                message=INVALID_USERNAME,
                field="username",
            )
        )

    if (
        not is_finite_number(age)
        or age < config.age_min  # type: ignore[operator]
        or age > config.age_max  # type: ignore[operator]
    ):
        errors.append(
            ValidationError(
                code="invalid_age",
                message=INVALID_AGE,
                field="age",
            )
        )

    return UserInputOutput(is_valid=not errors, errors=errors)


def validate_user_input(
    username: object,
    age: object,
    config: ValidationConfig | None = None,
) -> str:
    """
    Validate a username/age pair and return a human-readable message.

    Returns "Validation successful" or the invalid field messages,
    e.g. "Invalid username, Invalid age".
    """
    return check_user_input(username, age, config).message


# --- Configuration Loader ---


def load_config_from_rules(rules: Rules) -> ValidationConfig:
    """
    Load ValidationConfig from rules.yaml.

    Args:
        rules: Validated rules

    Returns:
        ValidationConfig instance
    """
    accounts = rules.accounts
    return ValidationConfig(
        username_min=accounts.username.min,
        username_max=accounts.username.max,
        input_username_min=accounts.user_input.username_min,
        input_username_max=accounts.user_input.username_max,
        age_min=accounts.user_input.age_min,
        age_max=accounts.user_input.age_max,
    )
