"""
Reservation input validation and normalization.
Splits names, checks email structure, formats phone numbers and bounds guest counts.
"""

import re
import logging
from typing import Tuple

from domain.errors import (
    InvalidNameError,
    EmailRequiredError,
    EmailMissingAtError,
    DomainMissingDotError,
    InvalidDomainError,
    InvalidPhoneLengthError,
    GuestsRequiredError,
    TooManyGuestsError,
)


logger = logging.getLogger(__name__)


# ============================================================================
# Name Splitting
# ============================================================================

FIRST_WHITESPACE_RUN = re.compile(r'\s+')


def split_name(name: str) -> Tuple[str, str]:
    """
    Split a full name into (first, last) on the first whitespace run.

    A single token yields an empty last name.

    Raises:
        InvalidNameError: If there is no first token
    """
    parts = FIRST_WHITESPACE_RUN.split(name.strip(), maxsplit=1)
    first = parts[0]
    if not first:
        raise InvalidNameError(f"Invalid name: '{name}'", value=name)
    last = parts[1] if len(parts) > 1 else ""
    return first, last


# ============================================================================
# Email Validation
# ============================================================================

def validate_email(email: str) -> str:
    """
    Check the structure of an email address.

    Only the shape is checked: one local part, an '@', and a domain with
    two non-empty labels around its first '.'.

    Returns:
        The email, unchanged

    Raises:
        EmailRequiredError, EmailMissingAtError, DomainMissingDotError,
        InvalidDomainError
    """
    if not email:
        raise EmailRequiredError("Email is required", value=email)
    if '@' not in email:
        raise EmailMissingAtError("Email must contain an @", value=email)

    _, domain = email.split('@', 1)
    if '.' not in domain:
        raise DomainMissingDotError("Email domain must contain a .", value=email)

    first_label, rest = domain.split('.', 1)
    if not first_label or not rest:
        raise InvalidDomainError(f"Invalid domain: '{domain}'", value=email)

    return email


# ============================================================================
# Phone Normalization
# ============================================================================

PHONE_DIGITS = 10
NON_DIGITS = re.compile(r'[^0-9]')


def standardize_phone(phone: str) -> str:
    """
    Normalize a US phone number to "(AAA) BBB-CCCC".

    Any punctuation or spacing is accepted as long as exactly ten digits remain.

    Raises:
        InvalidPhoneLengthError: If the input does not contain exactly ten digits
    """
    digits = NON_DIGITS.sub('', phone)
    if len(digits) != PHONE_DIGITS:
        raise InvalidPhoneLengthError(f"Invalid phone number: '{phone}'", value=phone)
    return f"({digits[:3]}) {digits[3:6]}-{digits[6:]}"


# ============================================================================
# Guest Count Validation
# ============================================================================

# Larger parties have to call the venue.
MAX_GUESTS = 10


def validate_guests(guests: int) -> int:
    """
    Bound the guest count to 1..MAX_GUESTS.

    Raises:
        GuestsRequiredError: If guests is zero or negative
        TooManyGuestsError: If guests exceeds MAX_GUESTS
    """
    if guests <= 0:
        raise GuestsRequiredError("Guests must be greater than 0", value=guests)
    if guests > MAX_GUESTS:
        raise TooManyGuestsError(
            f"Ambitious, are we? Try doing this manually for more than {MAX_GUESTS} guests.",
            value=guests
        )
    logger.debug("Guest count %d accepted", guests)
    return guests
