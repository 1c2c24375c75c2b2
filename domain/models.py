"""Domain models using Pydantic v2 for the SpotHopper reservation CLI."""

from datetime import datetime
from typing import Optional, Dict, Any

from pydantic import BaseModel, Field, ConfigDict

from .enums import FormCategory


class RawReservationInput(BaseModel):
    """Reservation details exactly as supplied on the command line."""

    name: str
    email: str
    phone: str
    day: str = "Friday"
    time: str = "7:00 PM"
    guests: int = Field(default=2, ge=0, description="Number of guests")
    instructions: Optional[str] = Field(None, description="Special requests or notes")

    model_config = ConfigDict(frozen=True)


class NormalizedContact(BaseModel):
    """Contact fields after validation."""

    first_name: str = Field(..., min_length=1)
    last_name: str = ""
    email: str
    phone: str = Field(..., pattern=r"^\(\d{3}\) \d{3}-\d{4}$")

    model_config = ConfigDict(frozen=True)


class ResolvedOccurrence(BaseModel):
    """Concrete date and time for the requested weekday."""

    when: datetime
    next_day: bool

    model_config = ConfigDict(frozen=True)


class TimeField(BaseModel):
    """The nested ``time`` object of the reservation form."""

    time: str
    next_day: bool

    model_config = ConfigDict(frozen=True)


class FormFields(BaseModel):
    """Fields of the SpotHopper reservation form."""

    number_of_guests: int = Field(..., ge=1, le=10)
    first_name: str
    last_name: str
    email: str
    phone: str
    year: int
    month: int = Field(..., ge=1, le=12)
    date: int = Field(..., ge=1, le=31)
    time: TimeField
    space: str
    instructions: Optional[str] = None
    texting_permission: bool = False

    model_config = ConfigDict(frozen=True)


class ReservationPayload(BaseModel):
    """Document submitted to the reservation endpoint."""

    form_category: FormCategory = FormCategory.RESERVATION
    form_fields: FormFields

    model_config = ConfigDict(frozen=True)

    def to_document(self) -> Dict[str, Any]:
        """Return the JSON-ready nested dict."""
        return self.model_dump(mode="json")
