"""
Clock port.

Ambient wall-clock access for time-dependent business rules
(holiday discount, store opening hours). Production reads the
system clock; tests inject a fixed instant.
"""

from __future__ import annotations

from datetime import datetime
from typing import Protocol


class ClockPort(Protocol):
    def now(self) -> datetime:
        """Return current local time."""
        ...
