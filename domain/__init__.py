"""Domain layer for the SpotHopper reservation CLI."""

from .enums import (
    FormCategory,
    SeatingSpace,
)
from .errors import (
    ReservationInputError,
    InvalidNameError,
    EmailRequiredError,
    EmailMissingAtError,
    DomainMissingDotError,
    InvalidDomainError,
    InvalidPhoneLengthError,
    GuestsRequiredError,
    TooManyGuestsError,
    InvalidDayError,
    InvalidTimeError,
    UnknownVenueError,
    ReservationSubmissionError,
)
from .models import (
    RawReservationInput,
    NormalizedContact,
    ResolvedOccurrence,
    TimeField,
    FormFields,
    ReservationPayload,
)

__all__ = [
    # Enums
    "FormCategory",
    "SeatingSpace",
    # Errors
    "ReservationInputError",
    "InvalidNameError",
    "EmailRequiredError",
    "EmailMissingAtError",
    "DomainMissingDotError",
    "InvalidDomainError",
    "InvalidPhoneLengthError",
    "GuestsRequiredError",
    "TooManyGuestsError",
    "InvalidDayError",
    "InvalidTimeError",
    "UnknownVenueError",
    "ReservationSubmissionError",
    # Models
    "RawReservationInput",
    "NormalizedContact",
    "ResolvedOccurrence",
    "TimeField",
    "FormFields",
    "ReservationPayload",
]
