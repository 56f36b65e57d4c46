"""
Local Time Adapter.

Implements the TimePort interface for the dealership's configured timezone.
Calendar logic only ever sees ``today()``; the adapters decide what "today"
means.

Key behaviors:
- today: Current date in the configured timezone, not the host's
- FrozenTimeAdapter pins the clock for deterministic tests
"""

from __future__ import annotations

from datetime import UTC, date, datetime, timedelta
from zoneinfo import ZoneInfo


class LocalTimeAdapter:
    """Time adapter for a fixed IANA timezone."""

    def __init__(self, tz_name: str = "UTC") -> None:
        """
        Initialize with specified timezone.

        Args:
            tz_name: IANA timezone name (default: UTC)
        """
        self._tz = ZoneInfo(tz_name)

    def today(self) -> date:
        """Current calendar date in the configured timezone."""
        return datetime.now(self._tz).date()


class FrozenTimeAdapter:
    """
    Time adapter that returns a fixed time.

    Useful for deterministic testing.
    """

    def __init__(self, frozen_utc: datetime, tz_name: str = "UTC") -> None:
        """
        Initialize with frozen time.

        Args:
            frozen_utc: The UTC instant the clock is pinned to
            tz_name: IANA timezone name deciding the local date
        """
        self._frozen_utc = frozen_utc.replace(tzinfo=UTC)
        self._tz = ZoneInfo(tz_name)

    @classmethod
    def on(cls, day: date, tz_name: str = "UTC") -> FrozenTimeAdapter:
        """Frozen at local noon of ``day``, so the local date is ``day``."""
        local_noon = datetime(day.year, day.month, day.day, 12, tzinfo=ZoneInfo(tz_name))
        return cls(local_noon.astimezone(UTC), tz_name)

    def today(self) -> date:
        return self._frozen_utc.astimezone(self._tz).date()

    def advance(self, delta: timedelta) -> None:
        """Advance frozen time by delta (for testing)."""
        self._frozen_utc = self._frozen_utc + delta


def create_time_adapter(tz_name: str = "UTC") -> LocalTimeAdapter:
    """Factory function to create a time adapter."""
    return LocalTimeAdapter(tz_name)
