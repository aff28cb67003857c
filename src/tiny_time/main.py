from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from pydantic import ValidationError

from tiny_time.config import Settings
from tiny_time.domain.errors import TimeError
from tiny_time.domain.instant import Instant
from tiny_time.domain.timezone import Timezones

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="tiny-time", description="Normalize instants and validate IANA timezones.")
    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("now", help="print the current instant in UTC")

    parse = commands.add_parser("parse", help="decode a date-time string")
    parse.add_argument("value")

    epoch = commands.add_parser("epoch", help="render Unix seconds as ISO 8601")
    epoch.add_argument("seconds", type=int)

    zones = commands.add_parser("zones", help="validate IANA timezone identifiers")
    zones.add_argument("identifiers", nargs="+")
    return parser


def run(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    try:
        if args.command == "now":
            print(Instant.now().to_iso8601())
        elif args.command == "parse":
            instant = Instant.from_string(args.value)
            print(f"{instant.to_iso8601()} {instant.to_unix_seconds()}")
        elif args.command == "epoch":
            print(Instant.from_unix_seconds(args.seconds).to_iso8601())
        elif args.command == "zones":
            for identifier in Timezones.from_strings(*args.identifiers).to_strings():
                print(identifier)
    except TimeError as exc:
        logger.info("Rejected %s input: %s", args.command, exc)
        print(exc, file=sys.stderr)
        return 1
    return 0


def main() -> None:
    """
    Command line entry point.

    Optional environment variables:
    - TINY_TIME_LOG_LEVEL         (default: WARNING)
    - TINY_TIME_TIMEZONE_REGIONS  (default: the IANA continent/ocean regions)
    """
    try:
        settings = Settings.from_env()
    except ValidationError as exc:
        raise SystemExit(f"Invalid environment configuration: {exc}") from exc
    logging.basicConfig(level=settings.log_level, format="%(asctime)s %(levelname)s %(name)s %(message)s")
    sys.exit(run())


if __name__ == "__main__":
    main()
