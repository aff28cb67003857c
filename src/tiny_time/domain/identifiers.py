from __future__ import annotations

import logging
import threading
from typing import Callable, FrozenSet, Optional

from tiny_time.ports.identifiers import TimezoneIdentifierSource

logger = logging.getLogger(__name__)


class TimezoneIdentifiers:
    """Set of valid IANA identifiers, enumerated once and then shared read-only.

    The source is consulted on the first query only. Initialization is guarded
    by a lock; once the frozen set is published, reads go straight to it.
    """

    _default: Optional["TimezoneIdentifiers"] = None
    _default_factory: Optional[Callable[[], "TimezoneIdentifiers"]] = None
    _default_lock = threading.Lock()

    def __init__(self, source: TimezoneIdentifierSource) -> None:
        self._source = source
        self._identifiers: Optional[FrozenSet[str]] = None
        self._lock = threading.Lock()

    @classmethod
    def configure_default(cls, factory: Callable[[], "TimezoneIdentifiers"]) -> None:
        """Set how the process-wide registry is built; it is rebuilt on next use."""
        with cls._default_lock:
            cls._default_factory = factory
            cls._default = None

    @classmethod
    def default(cls) -> "TimezoneIdentifiers":
        """Process-wide registry, built once from the configured factory."""
        registry = cls._default
        if registry is None:
            with cls._default_lock:
                if cls._default is None:
                    if cls._default_factory is None:
                        raise RuntimeError("No default timezone identifier source is configured")
                    cls._default = cls._default_factory()
                registry = cls._default
        return registry

    def all(self) -> FrozenSet[str]:
        identifiers = self._identifiers
        if identifiers is None:
            with self._lock:
                if self._identifiers is None:
                    self._identifiers = frozenset(self._source.list_identifiers())
                    logger.info("Loaded %d timezone identifiers", len(self._identifiers))
                identifiers = self._identifiers
        return identifiers

    def contains(self, identifier: str) -> bool:
        if not identifier:
            return False
        return identifier in self.all()

    def __contains__(self, identifier: object) -> bool:
        return isinstance(identifier, str) and self.contains(identifier)

    def __len__(self) -> int:
        return len(self.all())
