"""
Availability component models.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class StoreHoursConfig:
    """
    Store opening hours, local time.

    Online during [opening_hour, closing_hour).
    """

    opening_hour: int = 8
    closing_hour: int = 20
