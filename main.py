"""
Main entry point for the railway conflict resolver.

This module sets up logging, loads the configuration, reads a bookings file,
runs the selected resolution policy and prints the report.

Usage:
    python main.py bookings.json [--policy priority|detection] [--config PATH]
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from railway_conflicts.core.exceptions import RailwayError
from railway_conflicts.core.interfaces.i_conflict_resolver import ResolutionPolicy
from railway_conflicts.core.services.json_booking_repository import JsonBookingRepository
from railway_conflicts.managers.config_manager import ConfigManager
from railway_conflicts.managers.schedule_manager import ScheduleManager
from railway_conflicts.reporting.booking_formatter import BookingFormatter
from version import get_version_string

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_log_directory() -> Path:
    """Get the per-user log directory."""
    if sys.platform == "darwin":  # macOS
        return Path.home() / "Library" / "Logs" / "RailwayConflicts"
    elif sys.platform == "win32":
        import os
        return Path(os.environ.get("APPDATA", Path.home())) / "RailwayConflicts" / "logs"
    return Path.home() / ".local" / "share" / "railway_conflicts" / "logs"


def setup_logging(level: str = "WARNING", log_to_file: bool = False):
    """Setup application logging with console and optional file output."""
    handlers: List[logging.Handler] = [logging.StreamHandler()]

    if log_to_file:
        log_dir = get_log_directory()
        log_dir.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(str(log_dir / "railway_conflicts.log")))

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format=LOG_FORMAT,
        handlers=handlers,
        force=True,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Resolve platform conflicts between train bookings"
    )
    parser.add_argument(
        'bookings',
        type=str,
        help='Path to a bookings JSON file'
    )
    parser.add_argument(
        '--policy', '-p',
        choices=[p.value for p in ResolutionPolicy],
        default=None,
        help='Resolution policy (defaults to the configured policy)'
    )
    parser.add_argument(
        '--config', '-c',
        type=str,
        default=None,
        help='Path to the configuration file'
    )
    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Enable debug logging'
    )
    parser.add_argument(
        '--version',
        action='version',
        version=get_version_string()
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the resolver from the command line.

    Returns:
        int: Process exit status, 0 on success and 1 on any railway error
    """
    args = build_parser().parse_args(argv)

    # Logging must work before the configuration is known
    setup_logging("DEBUG" if args.verbose else "WARNING")
    logger = logging.getLogger(__name__)

    try:
        config = ConfigManager(args.config).load_config()
        if not args.verbose:
            setup_logging(config.logging.level, config.logging.log_to_file)

        records = JsonBookingRepository(args.bookings).load_records()
        manager = ScheduleManager(config)
        policy = ResolutionPolicy(args.policy) if args.policy else None
        result = manager.run(records, policy)

    except RailwayError as e:
        logger.error(f"{type(e).__name__}: {e}")
        print(f"Railway Error: {e}", file=sys.stderr)
        return 1

    formatter = BookingFormatter(
        show_canceled_only=config.display.show_canceled_only,
        show_notes=config.display.show_notes,
    )
    print(formatter.format_result(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
