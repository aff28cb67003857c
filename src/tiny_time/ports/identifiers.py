from __future__ import annotations

from typing import Iterable, Protocol


class TimezoneIdentifierSource(Protocol):
    """Enumerates the IANA timezone identifiers accepted as valid."""

    def list_identifiers(self) -> Iterable[str]:
        ...
