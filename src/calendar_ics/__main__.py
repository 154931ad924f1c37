"""CLI entry point for Calendar ICS application."""

import argparse
import sys
from pathlib import Path
from typing import Optional

from .config import DocumentConfig, config
from .encoding.document import encode, write_calendar
from .encoding.profiles import PROFILES, get_profile
from .utils.exceptions import CalendarICSError
from .utils.logging import setup_logging
from .writers.stream import StreamSink


def main(argv: Optional[list[str]] = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Calendar ICS - Encode a YAML calendar document as iCalendar"
    )
    parser.add_argument(
        "document",
        nargs="?",
        type=Path,
        help="YAML calendar document",
    )
    parser.add_argument(
        "--output",
        "-o",
        type=Path,
        default=None,
        help="Output .ics file (default: stdout)",
    )
    parser.add_argument(
        "--profile",
        type=str,
        default=None,
        help="Encoding profile (overrides document and ICAL_PROFILE)",
    )
    parser.add_argument(
        "--list-profiles",
        action="store_true",
        help="List available encoding profiles",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Verbose output",
    )

    args = parser.parse_args(argv)

    # Setup logging
    log_level = "DEBUG" if args.verbose else config.log_level
    logger = setup_logging(level=log_level, log_file=config.log_file)

    if args.list_profiles:
        for name, profile in PROFILES.items():
            properties = ", ".join(spec.name for spec in profile.calendar_properties)
            tag = "VALUE tags" if profile.value_type_tag else "no VALUE tags"
            print(f"{name}: {properties} ({tag})")
        return 0

    if args.document is None:
        parser.print_help()
        return 0

    try:
        document = DocumentConfig(args.document)
        profile = get_profile(args.profile or document.profile or config.profile)
        calendar = document.build_calendar()
        logger.info(
            f"Encoding {len(calendar.components)} event(s) from {args.document} "
            f"with profile '{profile.name}'"
        )

        if args.output:
            write_calendar(calendar, args.output, profile, buffer_size=config.buffer_size)
        else:
            encode(calendar, StreamSink(sys.stdout.buffer, buffer_size=config.buffer_size), profile)
        return 0

    except CalendarICSError as e:
        logger.error(f"Calendar encoding error: {e}")
        return 1
    except Exception as e:
        logger.exception(f"Unexpected error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
