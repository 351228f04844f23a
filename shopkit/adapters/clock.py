from datetime import datetime, timedelta


class SystemClock:
    def now(self) -> datetime:
        return datetime.now()


class FixedClock:
    """
    Clock that returns a set instant.

    Useful for deterministic testing of time-dependent rules.
    """

    def __init__(self, instant: datetime) -> None:
        self._instant = instant

    @classmethod
    def at(cls, text: str, fmt: str = "%Y-%m-%d %H:%M") -> "FixedClock":
        """Build from a local time string, e.g. FixedClock.at("2024-12-25 00:01")."""
        return cls(datetime.strptime(text, fmt))

    def now(self) -> datetime:
        return self._instant

    def set(self, instant: datetime) -> None:
        self._instant = instant

    def advance(self, delta: timedelta) -> None:
        self._instant = self._instant + delta
