from __future__ import annotations

from datetime import datetime, timedelta, timezone

from tiny_time.ports.clock import Clock


class FixedClock(Clock):
    """Clock frozen at a given moment until explicitly advanced."""

    def __init__(self, moment: datetime) -> None:
        if moment.tzinfo is None:
            moment = moment.replace(tzinfo=timezone.utc)
        self._moment = moment

    def now(self) -> datetime:
        return self._moment

    def advance(self, delta: timedelta) -> None:
        self._moment = self._moment + delta
