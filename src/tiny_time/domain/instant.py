from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator

from tiny_time.domain.calendar import SECONDS_PER_DAY, civil_from_days, format_year
from tiny_time.domain.decoders import DEFAULT_DECODER, TextDecoder
from tiny_time.ports.clock import Clock

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def _as_utc(moment: datetime) -> datetime:
    if moment.tzinfo is None or moment.utcoffset() is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)


class Instant(BaseModel):
    """A single point on the timeline, always UTC, with microsecond precision.

    Stored as whole seconds since the Unix epoch plus a non-negative
    microsecond component, so pre-epoch fractional instants floor their
    seconds. Build one with :meth:`now`, :meth:`from_string`,
    :meth:`from_unix_seconds`, or ``Instant(at=<datetime>)``.
    """

    model_config = ConfigDict(frozen=True)

    seconds: int
    microseconds: int = Field(default=0, ge=0, le=999_999)

    @model_validator(mode="before")
    @classmethod
    def _from_moment(cls, data: Any) -> Any:
        if isinstance(data, dict) and "at" in data:
            moment = data["at"]
            if not isinstance(moment, datetime):
                raise ValueError(f"at must be a datetime, got {type(moment).__name__}")
            delta = _as_utc(moment) - EPOCH
            return {
                "seconds": delta.days * SECONDS_PER_DAY + delta.seconds,
                "microseconds": delta.microseconds,
            }
        return data

    @classmethod
    def now(cls, clock: Optional[Clock] = None) -> "Instant":
        moment = clock.now() if clock else datetime.now(timezone.utc)
        return cls(at=moment)

    @classmethod
    def from_string(cls, value: str, decoder: Optional[TextDecoder] = None) -> "Instant":
        """Decode a date-time string.

        Accepted shapes are ``2026-02-17T10:30:00+05:30`` and
        ``2026-02-17 10:30:00[.123456]`` (the latter taken as UTC).

        Raises:
            InvalidInstant: when no supported shape matches ``value``.
        """
        return cls(at=(decoder or DEFAULT_DECODER).decode(value))

    @classmethod
    def from_unix_seconds(cls, seconds: int) -> "Instant":
        return cls(seconds=seconds)

    @classmethod
    def from_datetime(cls, moment: datetime) -> "Instant":
        """Naive datetimes are taken as UTC wall clock."""
        return cls(at=moment)

    def to_iso8601(self) -> str:
        """Render as ``YYYY-MM-DDTHH:MM:SS+00:00``.

        The microsecond component is dropped, never rounded, so this is a lossy
        projection. Use :meth:`to_datetime` when sub-second precision matters.
        """
        days, second_of_day = divmod(self.seconds, SECONDS_PER_DAY)
        year, month, day = civil_from_days(days)
        hour, remainder = divmod(second_of_day, 3600)
        minute, second = divmod(remainder, 60)
        return f"{format_year(year)}-{month:02d}-{day:02d}T{hour:02d}:{minute:02d}:{second:02d}+00:00"

    def to_unix_seconds(self) -> int:
        return self.seconds

    def to_datetime(self) -> datetime:
        """The full UTC value including microseconds.

        Raises:
            OverflowError: when the instant falls outside years 1..9999.
        """
        return EPOCH + timedelta(seconds=self.seconds, microseconds=self.microseconds)

    def _key(self) -> Tuple[int, int]:
        return self.seconds, self.microseconds

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._key() >= other._key()

    def __str__(self) -> str:
        return self.to_iso8601()
