"""Tests for assembling the reservation payload."""

import pytest
from dataclasses import replace
from datetime import date

from core import utils_datetime
from core.settings import Settings
from services.request_builder import create_body, resolve_occurrence
from domain.enums import FormCategory
from domain.errors import (
    InvalidNameError,
    EmailMissingAtError,
    InvalidDayError,
    InvalidTimeError,
    GuestsRequiredError,
    TooManyGuestsError,
    InvalidPhoneLengthError,
)
from domain.models import ReservationPayload


class TestCreateBody:
    """Tests for the full payload document."""

    def test_document_shape(self, make_raw_input, venue, today):
        """Test the nested document matches the form layout."""
        payload = create_body(make_raw_input(), venue=venue, today=today)

        assert isinstance(payload, ReservationPayload)
        assert payload.to_document() == {
            "form_category": "Reservation",
            "form_fields": {
                "number_of_guests": 4,
                "first_name": "Jane",
                "last_name": "Smith",
                "email": "janesmith@provider.net",
                "phone": "(800) 867-5309",
                "year": 2021,
                "month": 10,
                "date": 13,
                "time": {"time": "07:30 PM", "next_day": True},
                "space": "Indoors",
                "instructions": "Booth if possible",
                "texting_permission": False,
            },
        }

    def test_field_order(self, make_raw_input, venue, today):
        """Test keys serialize in form order."""
        document = create_body(make_raw_input(), venue=venue, today=today).to_document()
        assert list(document) == ["form_category", "form_fields"]
        assert list(document["form_fields"]) == [
            "number_of_guests", "first_name", "last_name", "email", "phone",
            "year", "month", "date", "time", "space", "instructions",
            "texting_permission",
        ]

    def test_missing_instructions_is_null(self, make_raw_input, venue, today):
        """Test instructions serialize as null when not supplied."""
        payload = create_body(make_raw_input(instructions=None), venue=venue, today=today)
        assert payload.to_document()["form_fields"]["instructions"] is None

    def test_single_name(self, make_raw_input, venue, today):
        """Test a one-word name leaves the last name empty."""
        fields = create_body(make_raw_input(name="Richard"), venue=venue, today=today).form_fields
        assert (fields.first_name, fields.last_name) == ("Richard", "")

    def test_later_in_week_is_not_next_day(self, make_raw_input, venue, today):
        """Test next_day is false for dates beyond tomorrow."""
        payload = create_body(make_raw_input(day="saturday", time="4:20 AM"), venue=venue, today=today)
        fields = payload.form_fields
        assert (fields.year, fields.month, fields.date) == (2021, 10, 16)
        assert fields.time.time == "04:20 AM"
        assert fields.time.next_day is False

    def test_same_day_is_today(self, make_raw_input, venue, today):
        """Test requesting today's weekday books today."""
        fields = create_body(make_raw_input(day="tue"), venue=venue, today=today).form_fields
        assert fields.date == 12
        assert fields.time.next_day is False

    def test_venue_defaults_flow_into_form(self, make_raw_input, venue, today):
        """Test space and texting permission come from the venue."""
        patio = replace(venue, space="Outdoors", texting_permission=True)
        fields = create_body(make_raw_input(), venue=patio, today=today).form_fields
        assert fields.space == "Outdoors"
        assert fields.texting_permission is True

    def test_form_category(self, make_raw_input, venue, today):
        """Test the category is always Reservation."""
        payload = create_body(make_raw_input(), venue=venue, today=today)
        assert payload.form_category == FormCategory.RESERVATION


class TestFailFastOrder:
    """Tests for which error is reported when several inputs are bad."""

    def test_name_first(self, make_raw_input, venue, today):
        """Test the name is checked before everything else."""
        raw = make_raw_input(name="", email="bad", day="x", guests=0, phone="1")
        with pytest.raises(InvalidNameError):
            create_body(raw, venue=venue, today=today)

    def test_email_before_day(self, make_raw_input, venue, today):
        """Test the email is checked before the day."""
        raw = make_raw_input(email="bad", day="x", guests=0, phone="1")
        with pytest.raises(EmailMissingAtError):
            create_body(raw, venue=venue, today=today)

    def test_day_before_guests(self, make_raw_input, venue, today):
        """Test the day is checked before guests and phone."""
        raw = make_raw_input(day="x", guests=0, phone="1")
        with pytest.raises(InvalidDayError):
            create_body(raw, venue=venue, today=today)

    def test_time_before_guests(self, make_raw_input, venue, today):
        """Test the time is checked before guests and phone."""
        raw = make_raw_input(time="dinner", guests=11, phone="1")
        with pytest.raises(InvalidTimeError):
            create_body(raw, venue=venue, today=today)

    def test_guests_before_phone(self, make_raw_input, venue, today):
        """Test the guest count is checked before the phone."""
        raw = make_raw_input(guests=0, phone="1")
        with pytest.raises(GuestsRequiredError):
            create_body(raw, venue=venue, today=today)

    def test_too_many_guests(self, make_raw_input, venue, today):
        """Test the upper guest bound."""
        with pytest.raises(TooManyGuestsError):
            create_body(make_raw_input(guests=11), venue=venue, today=today)

    def test_phone_last(self, make_raw_input, venue, today):
        """Test a bad phone alone is reported."""
        with pytest.raises(InvalidPhoneLengthError):
            create_body(make_raw_input(phone="8008675309 ext 3203"), venue=venue, today=today)


class TestResolveOccurrence:
    """Tests for the occurrence value object."""

    def test_tomorrow_flag(self, today):
        """Test the flag is set for the next day."""
        occurrence = resolve_occurrence(today, "wednesday", "7:30pm")
        assert occurrence.next_day is True
        assert occurrence.when.day == 13

    def test_not_tomorrow(self, today):
        """Test the flag is clear otherwise."""
        assert resolve_occurrence(today, "sunday", "12:00am").next_day is False


class TestClockDefaults:
    """Tests for the date used when no reference date is supplied."""

    def test_uses_configured_timezone(self, make_raw_input, venue, monkeypatch):
        """Test today comes from the configured restaurant timezone."""
        seen = []

        def fake_get_today(tz_name):
            seen.append(tz_name)
            return date(2021, 10, 12)

        monkeypatch.setattr(utils_datetime, "get_today", fake_get_today)
        app_settings = Settings(_env_file=None, restaurant_timezone="America/Los_Angeles")

        payload = create_body(make_raw_input(), venue=venue, app_settings=app_settings)

        assert seen == ["America/Los_Angeles"]
        assert payload.form_fields.date == 13
        assert payload.form_fields.time.next_day is True

    def test_explicit_timezone_wins(self, make_raw_input, venue, test_settings, monkeypatch):
        """Test an explicit tz_name overrides the setting."""
        seen = []
        monkeypatch.setattr(utils_datetime, "get_today", lambda tz_name: seen.append(tz_name) or date(2021, 10, 12))

        create_body(make_raw_input(), venue=venue, tz_name="UTC", app_settings=test_settings)

        assert seen == ["UTC"]
