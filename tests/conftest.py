"""Pytest configuration and fixtures for reservation CLI tests."""
import logging
import pytest
from datetime import date

from core.settings import Settings
from core.venue_config import VenueConfig, get_venue_config
from domain.models import RawReservationInput


@pytest.fixture(scope="function")
def today():
    """Fixed reference date: Tuesday, October 12, 2021."""
    return date(2021, 10, 12)


@pytest.fixture(scope="function")
def venue() -> VenueConfig:
    """The default venue from the venue table."""
    return get_venue_config("slainte")


@pytest.fixture(scope="function")
def test_settings():
    """Settings isolated from the environment and any .env file."""
    return Settings(_env_file=None, app_env="development", log_level="WARNING")


@pytest.fixture(scope="function")
def sample_input_data():
    """Provide sample raw reservation data for testing."""
    return {
        "name": "Jane Smith",
        "email": "janesmith@provider.net",
        "phone": "800-867-5309",
        "day": "wednesday",
        "time": "7:30pm",
        "guests": 4,
        "instructions": "Booth if possible",
    }


@pytest.fixture(scope="function")
def make_raw_input(sample_input_data):
    """Factory fixture building a RawReservationInput with overrides."""
    def _make(**kwargs):
        data = sample_input_data.copy()
        data.update(kwargs)
        return RawReservationInput(**data)
    return _make


@pytest.fixture(autouse=True)
def reset_state():
    """Restore root logger handlers replaced by setup_logging."""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)
