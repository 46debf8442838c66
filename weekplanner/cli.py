# File: weekplanner/cli.py
"""
Weekly planner layout entry point.

Usage:
    weekplanner-layout --events events.json --week 2025-07-07
    weekplanner-layout --events events.json --start 2025-07-07 --end 2025-07-09 --output layout.json
"""

import argparse
import sys
import time
from datetime import date, datetime
from pathlib import Path
from typing import List, Optional

import pytz

from weekplanner.core.config_manager import Config
from weekplanner.layout import LayoutEngine
from weekplanner.models import DateRange, InvalidRangeError, LayoutOptions
from weekplanner.processors.layout_exporter import LayoutExporter
from weekplanner.services.event_source import EventFileSource
from weekplanner.utils.logger import setup_logger

logger = setup_logger(__name__)


def _parse_date(value: str) -> date:
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected YYYY-MM-DD, got {value!r}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="weekplanner-layout",
        description="Lay out planner events on the 06:00-24:00 half-hour grid.",
    )
    parser.add_argument("--events", type=Path, required=True, help="JSON file with events")
    parser.add_argument("--start", type=_parse_date, help="First day (YYYY-MM-DD)")
    parser.add_argument("--end", type=_parse_date, help="Last day, inclusive (YYYY-MM-DD); needs --start")
    parser.add_argument("--week", type=_parse_date, help="Any day of the Monday-Sunday week to lay out")
    parser.add_argument("--output", type=Path, help="Write the layout as JSON to this file")
    parser.add_argument("--timezone", default=None, help=f"Planner timezone (default: {Config.TARGET_TIMEZONE})")
    parser.add_argument("--span-all-day", action="store_true",
                        help="Repeat all-day banners on every day they cover")
    parser.add_argument("--quiet", action="store_true", help="Do not print the layout summary")
    return parser


def resolve_range(args: argparse.Namespace) -> DateRange:
    """Date range from --week, or --start/--end (a lone --start is a single day)."""
    if args.week:
        return DateRange.week_of(args.week)
    if args.start:
        return DateRange(args.start, args.end or args.start)
    return DateRange.week_of(date.today())


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main execution function.

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.end and not args.start:
        parser.error("--end requires --start")
    start_time = time.time()

    for problem in Config.validate():
        logger.warning(f"Configuration: {problem}")

    try:
        date_range = resolve_range(args)

        source = EventFileSource(args.timezone)
        events, load_diagnostics = source.load(args.events)

        engine = LayoutEngine(
            timezone=args.timezone,
            options=LayoutOptions(span_all_day_events=args.span_all_day),
        )
        result = engine.layout(events, date_range)
        result.diagnostics[:0] = load_diagnostics

        exporter = LayoutExporter()
        if not args.quiet:
            exporter.pretty_print(result)
        if args.output and not exporter.save(result, args.output):
            return 1

        return 0

    except InvalidRangeError as e:
        logger.error(f"Invalid date range: {e}")
        return 1

    except pytz.UnknownTimeZoneError as e:
        logger.error(f"Unknown timezone: {e}")
        return 1

    except FileNotFoundError as e:
        logger.error(f"Could not find: {e.filename}")
        return 1

    except ValueError as e:
        logger.error(f"Could not read events: {e}")
        return 1

    finally:
        elapsed = time.time() - start_time
        logger.info(f"Total execution time: {elapsed:.2f} seconds")


if __name__ == "__main__":
    sys.exit(main())
