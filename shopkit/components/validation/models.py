"""
Validation component models.

Data models for username, price range and user input validation.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from shopkit.domain.values import ValidationError

# --- Messages ---

INVALID_USERNAME = "Invalid username"
INVALID_AGE = "Invalid age"
VALIDATION_SUCCESS = "Validation successful"


# --- Output Models ---


@dataclass(frozen=True)
class UserInputOutput:
    """Result of validating a username/age pair."""

    is_valid: bool
    errors: list[ValidationError] = field(default_factory=list)

    @property
    def message(self) -> str:
        """Human-readable summary; error messages joined in field order."""
        if self.is_valid:
            return VALIDATION_SUCCESS
        return ", ".join(e.message for e in self.errors)


# --- Configuration ---


@dataclass(frozen=True)
class ValidationConfig:
    """
    Validation bounds from rules.

    The username bounds for is_valid_username and validate_user_input
    are independent settings.
    """

    username_min: int = 5
    username_max: int = 15
    input_username_min: int = 3
    input_username_max: int = 15
    age_min: int = 18
    age_max: int = 100
