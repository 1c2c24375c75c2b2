"""Command-line entrypoint: validate reservation details and submit them to SpotHopper."""

import argparse
import json
import logging
import sys
from datetime import date
from typing import List, Optional

from core.logging import setup_logging
from core.settings import Settings, settings as default_settings
from core.utils_datetime import resolve_today
from core.venue_config import apply_settings_overrides, get_venue_config
from domain.errors import ReservationInputError, ReservationSubmissionError
from domain.models import RawReservationInput
from services.request_builder import create_body
from services.spothopper_client import SpotHopperClient


logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Successfully made reservation!"


def non_negative_int(value: str) -> int:
    """argparse type for unsigned counts."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid count: '{value}'") from None
    if number < 0:
        raise argparse.ArgumentTypeError(f"count must not be negative: {value}")
    return number


def build_parser(app_settings: Optional[Settings] = None) -> argparse.ArgumentParser:
    """Build the argument parser."""
    app_settings = app_settings or default_settings
    parser = argparse.ArgumentParser(
        prog="reserve",
        description="Request a table through SpotHopper",
    )
    parser.add_argument("-n", "--name", required=True, help="Full name for the reservation")
    parser.add_argument("-g", "--guests", type=non_negative_int, default=2, help="Number of guests (1-10)")
    parser.add_argument("-e", "--email", required=True, help="Contact email")
    parser.add_argument("-p", "--phone", required=True, help="10-digit US phone number")
    parser.add_argument("-d", "--day", default="Friday", help="Weekday, e.g. Friday or fri")
    parser.add_argument("-t", "--time", default="7:00 PM", help="12-hour time, e.g. 7:30pm")
    parser.add_argument("-i", "--instructions", help="Special instructions")
    parser.add_argument("--venue", default=app_settings.reservation_venue, help="Venue key")
    parser.add_argument("--dry-run", action="store_true", help="Print the request body instead of sending it")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Override the configured log level",
    )
    return parser


def main(
    argv: Optional[List[str]] = None,
    client: Optional[SpotHopperClient] = None,
    today: Optional[date] = None,
    app_settings: Optional[Settings] = None,
) -> int:
    """
    Run the CLI.

    Args:
        argv: Arguments (sys.argv[1:] if omitted)
        client: Client used for submission (built from settings if omitted)
        today: Reference date (today in the configured timezone if omitted)
        app_settings: Settings (module settings if omitted)

    Returns:
        Process exit code
    """
    app_settings = app_settings or default_settings
    args = build_parser(app_settings).parse_args(argv)
    setup_logging(app_settings, level=args.log_level)

    raw = RawReservationInput(
        name=args.name,
        email=args.email,
        phone=args.phone,
        day=args.day,
        time=args.time,
        guests=args.guests,
        instructions=args.instructions,
    )

    try:
        venue = apply_settings_overrides(get_venue_config(args.venue), app_settings)
        today = resolve_today(today, app_settings.restaurant_timezone)
        payload = create_body(raw, venue=venue, today=today, app_settings=app_settings)
    except ReservationInputError as e:
        logger.warning("Rejected reservation input (%s): %r", e.code, e.value)
        print(e.message, file=sys.stderr)
        return 1

    if args.dry_run:
        print(json.dumps(payload.to_document(), indent=2))
        return 0

    client = client or SpotHopperClient(
        base_url=app_settings.spothopper_base_url,
        timeout=app_settings.request_timeout_seconds,
    )
    try:
        client.submit(payload, venue)
    except ReservationSubmissionError as e:
        print(e.message, file=sys.stderr)
        return 1

    print(SUCCESS_MESSAGE)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
