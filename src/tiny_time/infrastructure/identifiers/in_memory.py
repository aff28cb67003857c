from __future__ import annotations

from typing import FrozenSet, Iterable

from tiny_time.ports.identifiers import TimezoneIdentifierSource


class InMemoryIdentifierSource(TimezoneIdentifierSource):
    def __init__(self, identifiers: Iterable[str]) -> None:
        self._identifiers: FrozenSet[str] = frozenset(identifiers)
        self.calls = 0

    def list_identifiers(self) -> FrozenSet[str]:
        self.calls += 1
        return self._identifiers
