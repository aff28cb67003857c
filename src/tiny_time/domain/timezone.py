from __future__ import annotations

from typing import Iterator, List, Optional, Tuple
from zoneinfo import ZoneInfo

from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator

from tiny_time.domain.errors import InvalidTimezone
from tiny_time.domain.identifiers import TimezoneIdentifiers

UTC_IDENTIFIER = "UTC"


def _registry(info: Optional[ValidationInfo]) -> TimezoneIdentifiers:
    context = info.context if info is not None else None
    if context and context.get("registry") is not None:
        return context["registry"]
    return TimezoneIdentifiers.default()


def _is_valid(identifier: str, registry: TimezoneIdentifiers) -> bool:
    return identifier == UTC_IDENTIFIER or registry.contains(identifier)


class Timezone(BaseModel):
    """A single IANA timezone identifier (e.g. ``America/Sao_Paulo``)."""

    model_config = ConfigDict(frozen=True)

    value: str

    @field_validator("value")
    @classmethod
    def _validate_identifier(cls, value: str, info: ValidationInfo) -> str:
        if not _is_valid(value, _registry(info)):
            raise InvalidTimezone(value)
        return value

    @classmethod
    def utc(cls) -> "Timezone":
        return cls.model_construct(value=UTC_IDENTIFIER)

    @classmethod
    def from_identifier(
        cls, identifier: str, registry: Optional[TimezoneIdentifiers] = None
    ) -> "Timezone":
        """Create a Timezone from an IANA identifier.

        Raises:
            InvalidTimezone: when ``identifier`` is empty or not a known IANA identifier.
        """
        if registry is None:
            registry = TimezoneIdentifiers.default()
        if not _is_valid(identifier, registry):
            raise InvalidTimezone(identifier)
        return cls.model_construct(value=identifier)

    def to_string(self) -> str:
        return self.value

    def to_zoneinfo(self) -> ZoneInfo:
        return ZoneInfo(self.value)

    def __str__(self) -> str:
        return self.value


class Timezones(BaseModel):
    """Immutable, ordered collection of Timezone values. Duplicates are kept."""

    model_config = ConfigDict(frozen=True)

    items: Tuple[Timezone, ...] = ()

    @classmethod
    def from_timezones(cls, *timezones: Timezone) -> "Timezones":
        return cls(items=timezones)

    @classmethod
    def from_strings(
        cls, *identifiers: str, registry: Optional[TimezoneIdentifiers] = None
    ) -> "Timezones":
        """Validate every identifier in order.

        Raises:
            InvalidTimezone: for the first invalid identifier; no collection is built.
        """
        items = [Timezone.from_identifier(identifier, registry) for identifier in identifiers]
        return cls(items=tuple(items))

    def all(self) -> List[Timezone]:
        return list(self.items)

    def count(self) -> int:
        return len(self.items)

    def contains(self, identifier: str) -> bool:
        return self.find_by_identifier(identifier) is not None

    def find_by_identifier(self, identifier: str) -> Optional[Timezone]:
        for timezone in self.items:
            if timezone.value == identifier:
                return timezone
        return None

    def to_strings(self) -> List[str]:
        return [timezone.to_string() for timezone in self.items]

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Timezone]:  # type: ignore[override]
        return iter(self.items)
