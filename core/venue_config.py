"""
Venue configuration for SpotHopper reservations.
Maps venue names to SpotHopper spot ids and per-venue form defaults.
"""

from dataclasses import dataclass, replace
from typing import Dict, Optional

from core.settings import Settings, settings as default_settings
from domain.enums import SeatingSpace
from domain.errors import UnknownVenueError


DEFAULT_BASE_URL = "https://www.spothopperapp.com/api"
RESERVATION_REQUEST_PATH = "/spots/{spot_id}/reservation_requests/add_from_tmt"


@dataclass(frozen=True)
class VenueConfig:
    """A venue that accepts reservation requests through SpotHopper."""
    key: str
    name: str
    spot_id: int
    space: str = SeatingSpace.INDOORS.value
    texting_permission: bool = False


# Venue table, keyed by lower-case venue key
VENUES: Dict[str, VenueConfig] = {
    "slainte": VenueConfig(key="slainte", name="Sláinte", spot_id=0xBAE),
}


def get_venue_config(
    name: str,
    venues: Optional[Dict[str, VenueConfig]] = None
) -> VenueConfig:
    """
    Look up a venue by key, ignoring case and surrounding whitespace.

    Raises:
        UnknownVenueError: If the venue is not in the table
    """
    table = VENUES if venues is None else venues
    key = (name or "").strip().lower()
    try:
        return table[key]
    except KeyError:
        known = ", ".join(sorted(table))
        raise UnknownVenueError(f"Unknown venue: '{name}' (known: {known})", value=name) from None


def apply_settings_overrides(
    venue: VenueConfig,
    app_settings: Optional[Settings] = None
) -> VenueConfig:
    """Apply space and texting-permission overrides from settings."""
    app_settings = app_settings or default_settings
    overrides = {}
    if app_settings.reservation_space:
        overrides["space"] = app_settings.reservation_space
    if app_settings.texting_permission is not None:
        overrides["texting_permission"] = app_settings.texting_permission
    return replace(venue, **overrides) if overrides else venue


def build_request_url(venue: VenueConfig, base_url: str = DEFAULT_BASE_URL) -> str:
    """Build the reservation request URL for a venue."""
    return base_url.rstrip("/") + RESERVATION_REQUEST_PATH.format(spot_id=venue.spot_id)


def get_default_venue_config(app_settings: Optional[Settings] = None) -> VenueConfig:
    """Get the configured venue with settings overrides applied."""
    app_settings = app_settings or default_settings
    venue = get_venue_config(app_settings.reservation_venue)
    return apply_settings_overrides(venue, app_settings)
