"""Domain enums for the SpotHopper reservation CLI."""

from enum import Enum


class FormCategory(str, Enum):
    """SpotHopper form categories."""

    RESERVATION = "Reservation"


class SeatingSpace(str, Enum):
    """Seating areas a venue can offer."""

    INDOORS = "Indoors"
