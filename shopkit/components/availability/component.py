"""
Availability component.

Time-of-day check for whether the store is taking orders.
"""

from __future__ import annotations

from shopkit.core.ports.clock import ClockPort
from shopkit.rules.models import Rules

from .models import StoreHoursConfig


def is_online(clock: ClockPort, config: StoreHoursConfig | None = None) -> bool:
    """
    True iff the clock's current hour is in [opening_hour, closing_hour).

    07:59 and 20:00 are both outside the default hours.
    """
    config = config or StoreHoursConfig()
    current_hour = clock.now().hour
    return config.opening_hour <= current_hour < config.closing_hour


def load_config_from_rules(rules: Rules) -> StoreHoursConfig:
    """Load StoreHoursConfig from rules.yaml."""
    return StoreHoursConfig(
        opening_hour=rules.store.opening_hour,
        closing_hour=rules.store.closing_hour,
    )
