from __future__ import annotations

from datetime import datetime, timezone

from tiny_time.ports.clock import Clock


class SystemClock(Clock):
    """Reads the real-time clock, tagged UTC."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)
