"""
DateTime utilities for resolving reservation days and times.
Finds the next occurrence of a weekday/time and exposes the local clock.
"""
from datetime import datetime, timedelta, date, time
from time import strptime
from typing import Optional
import logging
import re
import pytz

from domain.errors import InvalidDayError, InvalidTimeError


logger = logging.getLogger(__name__)

DEFAULT_TIMEZONE = "America/New_York"

# 12-hour clock, e.g. "07:30 PM"
TIME_FORMAT_12H = "%I:%M %p"

# Whitespace around a trailing AM/PM marker
MERIDIEM_SPACING = re.compile(r'\s*([AaPp][Mm])\s*$')

# Full names first, then three-letter abbreviations
WEEKDAY_FORMATS = ("%A", "%a")


def get_current_datetime(tz_name: str = DEFAULT_TIMEZONE) -> datetime:
    """Get current datetime in the given timezone."""
    return datetime.now(pytz.timezone(tz_name))


def get_today(tz_name: str = DEFAULT_TIMEZONE) -> date:
    """Get today's date in the given timezone."""
    return get_current_datetime(tz_name).date()


def parse_weekday(day_str: str) -> int:
    """
    Parse an English weekday name into its number (Monday == 0).

    Accepts full names and three-letter abbreviations in any case.

    Raises:
        InvalidDayError: If the name is not a weekday
    """
    for fmt in WEEKDAY_FORMATS:
        try:
            return strptime(day_str.strip(), fmt).tm_wday
        except (ValueError, AttributeError):
            continue
    raise InvalidDayError(f"Invalid day: {day_str}", value=day_str)


def parse_time_12h(time_str: str) -> time:
    """
    Parse a 12-hour clock time with an AM/PM marker.

    Spacing before the marker and case are flexible: "7:30pm", "4:20 AM"
    and "12:00am" all parse. Spaces inside the digits are rejected.

    Raises:
        InvalidTimeError: If the string is not a 12-hour clock time
    """
    try:
        compact = MERIDIEM_SPACING.sub(r'\1', time_str.strip())
        return datetime.strptime(compact, "%I:%M%p").time()
    except (ValueError, AttributeError):
        raise InvalidTimeError(f"Invalid time: {time_str}", value=time_str) from None


def get_next_occurrence(today: date, day_str: str, time_str: str) -> datetime:
    """
    Find the next date on or after today falling on the requested weekday.

    Today itself qualifies, so asking for the current weekday returns today.

    Args:
        today: Reference date
        day_str: Weekday name, e.g. "wednesday" or "Sat"
        time_str: 12-hour clock time, e.g. "7:30pm"

    Returns:
        Naive datetime combining the resolved date and the parsed time

    Raises:
        InvalidDayError: If the weekday cannot be parsed
        InvalidTimeError: If the time cannot be parsed
    """
    weekday = parse_weekday(day_str)
    parsed_time = parse_time_12h(time_str)

    next_occurrence = datetime.combine(today, parsed_time)
    while next_occurrence.weekday() != weekday:
        next_occurrence += timedelta(days=1)

    logger.debug("Resolved %s %s from %s to %s", day_str, time_str, today, next_occurrence)
    return next_occurrence


def is_tomorrow(today: date, dt: datetime) -> bool:
    """Check whether dt falls exactly one calendar day after today."""
    return dt.date() == today + timedelta(days=1)


def format_time_12h(dt: datetime) -> str:
    """Format the time of dt as "hh:mm AM|PM"."""
    return dt.strftime(TIME_FORMAT_12H)


def resolve_today(today: Optional[date] = None, tz_name: str = DEFAULT_TIMEZONE) -> date:
    """Return the injected date, or today's date in tz_name."""
    return today if today is not None else get_today(tz_name)
