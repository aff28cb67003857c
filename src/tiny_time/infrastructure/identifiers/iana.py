from __future__ import annotations

import logging
from importlib import resources
from typing import Iterable, List, Optional, Sequence

from tiny_time.config import Settings
from tiny_time.domain.identifiers import TimezoneIdentifiers
from tiny_time.ports.identifiers import TimezoneIdentifierSource

logger = logging.getLogger(__name__)

UTC_IDENTIFIER = "UTC"
ZONE_TABLE = "zone.tab"


def parse_zone_table(text: str) -> List[str]:
    """Return the TZ column of an IANA ``zone.tab`` document."""
    identifiers: List[str] = []
    for line in text.splitlines():
        if not line.strip() or line.startswith("#"):
            continue
        columns = line.split("\t")
        if len(columns) >= 3:
            identifiers.append(columns[2].strip())
    return identifiers


class TzdataIdentifierSource(TimezoneIdentifierSource):
    """Canonical identifiers listed in the IANA ``zone.tab`` shipped by ``tzdata``.

    Only identifiers under one of the configured regions, plus ``UTC``, are
    listed. Backward-compatible links (``Asia/Calcutta``, ``US/Eastern``,
    ``EST``) never appear in ``zone.tab`` and are therefore not members.
    """

    def __init__(self, regions: Sequence[str]) -> None:
        self.regions = frozenset(regions)

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "TzdataIdentifierSource":
        settings = settings or Settings.from_env()
        return cls(regions=settings.timezone_regions)

    def read_zone_table(self) -> str:
        return resources.files("tzdata.zoneinfo").joinpath(ZONE_TABLE).read_text(encoding="utf-8")

    def list_identifiers(self) -> Iterable[str]:
        identifiers: List[str] = [UTC_IDENTIFIER]
        for key in parse_zone_table(self.read_zone_table()):
            region, separator, _ = key.partition("/")
            if separator and region in self.regions:
                identifiers.append(key)
        logger.debug("Enumerated %d identifiers across regions %s", len(identifiers), sorted(self.regions))
        return identifiers


def build_default_identifiers() -> TimezoneIdentifiers:
    """Process-wide registry backed by the ``tzdata`` zone table."""
    return TimezoneIdentifiers(TzdataIdentifierSource.from_settings())
