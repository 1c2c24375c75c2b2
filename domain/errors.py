"""Exceptions raised while validating and submitting reservations."""

from typing import Any, Optional


class ReservationInputError(ValueError):
    """Base class for rejected reservation input. Carries the offending value."""

    code = "INVALID_INPUT"

    def __init__(self, message: str, value: Any = None):
        super().__init__(message)
        self.message = message
        self.value = value


class InvalidNameError(ReservationInputError):
    """Raised when a name has no usable first token."""
    code = "INVALID_NAME"


class EmailRequiredError(ReservationInputError):
    """Raised when the email is empty."""
    code = "EMAIL_REQUIRED"


class EmailMissingAtError(ReservationInputError):
    """Raised when the email has no '@'."""
    code = "EMAIL_MISSING_AT"


class DomainMissingDotError(ReservationInputError):
    """Raised when the email domain has no '.'."""
    code = "DOMAIN_MISSING_DOT"


class InvalidDomainError(ReservationInputError):
    """Raised when a label of the email domain is empty."""
    code = "INVALID_DOMAIN"


class InvalidPhoneLengthError(ReservationInputError):
    """Raised when a phone number does not have exactly ten digits."""
    code = "INVALID_PHONE_LENGTH"


class GuestsRequiredError(ReservationInputError):
    """Raised when the guest count is zero."""
    code = "GUESTS_REQUIRED"


class TooManyGuestsError(ReservationInputError):
    """Raised when the guest count exceeds the online booking limit."""
    code = "TOO_MANY_GUESTS"


class InvalidDayError(ReservationInputError):
    """Raised when a weekday name cannot be parsed."""
    code = "INVALID_DAY"


class InvalidTimeError(ReservationInputError):
    """Raised when a 12-hour clock time cannot be parsed."""
    code = "INVALID_TIME"


class UnknownVenueError(ReservationInputError):
    """Raised when a venue is missing from the venue table."""
    code = "UNKNOWN_VENUE"


class ReservationSubmissionError(Exception):
    """Raised when the reservation endpoint rejects or never receives the request."""

    def __init__(self, message: str, status_code: Optional[int] = None, body: str = ""):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.body = body
