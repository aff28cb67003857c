from __future__ import annotations

import logging
import re
from datetime import datetime, timezone
from typing import Optional, Protocol, Sequence

from tiny_time.domain.errors import InvalidInstant

logger = logging.getLogger(__name__)


class Decoder(Protocol):
    """A single accepted text shape."""

    def decode(self, value: str) -> Optional[datetime]:
        """Return the UTC datetime for ``value``, or ``None`` when the shape does not match."""
        ...


class OffsetDateTimeDecoder(Decoder):
    """Accepts ``YYYY-MM-DDTHH:MM:SS±HH:MM`` and shifts it to UTC."""

    FORMAT = "%Y-%m-%dT%H:%M:%S%z"
    PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}[+-]\d{2}:\d{2}", re.ASCII)

    def decode(self, value: str) -> Optional[datetime]:
        if not self.PATTERN.fullmatch(value):
            return None
        try:
            parsed = datetime.strptime(value, self.FORMAT)
            return parsed.astimezone(timezone.utc)
        except (ValueError, OverflowError) as exc:
            logger.debug("Offset decoder rejected %r: %s", value, exc)
            return None


class DatabaseDateTimeDecoder(Decoder):
    """Accepts ``YYYY-MM-DD HH:MM:SS[.ffffff]`` as UTC wall clock."""

    FORMAT = "%Y-%m-%d %H:%M:%S"
    FORMAT_MICRO = "%Y-%m-%d %H:%M:%S.%f"
    PATTERN = re.compile(r"\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}(\.\d+)?", re.ASCII)

    def decode(self, value: str) -> Optional[datetime]:
        if not self.PATTERN.fullmatch(value):
            return None
        has_microseconds = "." in value
        try:
            parsed = datetime.strptime(value, self.FORMAT_MICRO if has_microseconds else self.FORMAT)
        except ValueError as exc:
            logger.debug("Database decoder rejected %r: %s", value, exc)
            return None
        return parsed.replace(tzinfo=timezone.utc)


class TextDecoder:
    """Runs decoders in priority order; the first match wins."""

    def __init__(self, decoders: Sequence[Decoder]) -> None:
        self.decoders = tuple(decoders)

    @classmethod
    def create(cls) -> "TextDecoder":
        return cls([OffsetDateTimeDecoder(), DatabaseDateTimeDecoder()])

    def decode(self, value: str) -> datetime:
        for decoder in self.decoders:
            result = decoder.decode(value)
            if result is not None:
                return result
        logger.debug("No decoder accepted %r", value)
        raise InvalidInstant(value)


DEFAULT_DECODER = TextDecoder.create()
