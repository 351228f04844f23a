"""
Shared value types for the functional core.

Runtime input checks are explicit: a "number" is an int or float that is
not a bool, and validation failures are reported as ValidationError values
rather than raised.
"""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class ValidationError:
    """Validation error with an actionable message."""

    code: str
    message: str
    field: str | None = None


def is_number(value: object) -> bool:
    """True for int/float values; bools are not numbers here."""
    return isinstance(value, int | float) and not isinstance(value, bool)


def is_finite_number(value: object) -> bool:
    return is_number(value) and math.isfinite(value)  # type: ignore[arg-type]
