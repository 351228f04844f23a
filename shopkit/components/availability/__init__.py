"""
Availability component.

Public API for store opening hours.
"""

from .component import is_online, load_config_from_rules
from .models import StoreHoursConfig

__all__ = [
    "is_online",
    "load_config_from_rules",
    "StoreHoursConfig",
]
