"""Builds the SpotHopper reservation form from raw command-line input."""

import logging
from datetime import date
from typing import Optional

from core.settings import Settings, settings as default_settings
from core.utils_datetime import (
    format_time_12h,
    get_next_occurrence,
    is_tomorrow,
    resolve_today,
)
from core.venue_config import VenueConfig, get_default_venue_config
from domain.enums import FormCategory
from domain.models import (
    FormFields,
    NormalizedContact,
    RawReservationInput,
    ReservationPayload,
    ResolvedOccurrence,
    TimeField,
)
from services.reservation_validation import (
    split_name,
    standardize_phone,
    validate_email,
    validate_guests,
)


logger = logging.getLogger(__name__)


def resolve_occurrence(today: date, day_str: str, time_str: str) -> ResolvedOccurrence:
    """Resolve the requested weekday/time relative to today."""
    when = get_next_occurrence(today, day_str, time_str)
    return ResolvedOccurrence(when=when, next_day=is_tomorrow(today, when))


def create_body(
    raw: RawReservationInput,
    venue: Optional[VenueConfig] = None,
    today: Optional[date] = None,
    tz_name: Optional[str] = None,
    app_settings: Optional[Settings] = None,
) -> ReservationPayload:
    """
    Validate raw input and assemble the reservation payload.

    Checks run in a fixed order and the first failure is raised: name,
    email, day and time, guest count, phone.

    Args:
        raw: Input as captured from the command line
        venue: Venue supplying space and texting defaults (configured venue if omitted)
        today: Reference date (today in tz_name if omitted)
        tz_name: Timezone used when today is not supplied (configured timezone if omitted)
        app_settings: Settings for the venue and timezone defaults (module settings if omitted)

    Returns:
        ReservationPayload ready for submission

    Raises:
        ReservationInputError: The first validation failure
    """
    app_settings = app_settings or default_settings
    venue = venue or get_default_venue_config(app_settings)
    tz_name = tz_name or app_settings.restaurant_timezone

    first, last = split_name(raw.name)
    email = validate_email(raw.email)

    today = resolve_today(today, tz_name)
    occurrence = resolve_occurrence(today, raw.day, raw.time)

    guests = validate_guests(raw.guests)
    contact = NormalizedContact(
        first_name=first,
        last_name=last,
        email=email,
        phone=standardize_phone(raw.phone),
    )

    when = occurrence.when
    payload = ReservationPayload(
        form_category=FormCategory.RESERVATION,
        form_fields=FormFields(
            number_of_guests=guests,
            first_name=contact.first_name,
            last_name=contact.last_name,
            email=contact.email,
            phone=contact.phone,
            year=when.year,
            month=when.month,
            date=when.day,
            time=TimeField(time=format_time_12h(when), next_day=occurrence.next_day),
            space=venue.space,
            instructions=raw.instructions,
            texting_permission=venue.texting_permission,
        ),
    )

    logger.info(
        "Built reservation for %d guests at %s on %s",
        guests, venue.name, when.isoformat(timespec="minutes")
    )
    return payload
