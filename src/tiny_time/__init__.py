from .domain.errors import InvalidInstant, InvalidTimezone, TimeError
from .domain.identifiers import TimezoneIdentifiers
from .domain.instant import Instant
from .domain.timezone import Timezone, Timezones
from .infrastructure.clock.fixed import FixedClock
from .infrastructure.clock.system import SystemClock
from .infrastructure.identifiers.iana import TzdataIdentifierSource, build_default_identifiers
from .infrastructure.identifiers.in_memory import InMemoryIdentifierSource

TimezoneIdentifiers.configure_default(build_default_identifiers)

__all__ = [
    "Instant",
    "Timezone",
    "Timezones",
    "TimezoneIdentifiers",
    "TimeError",
    "InvalidInstant",
    "InvalidTimezone",
    "SystemClock",
    "FixedClock",
    "TzdataIdentifierSource",
    "InMemoryIdentifierSource",
]
