# tests/conftest.py

import datetime

import pytest

from salahtimes import create_app

UTC = datetime.timezone.utc


@pytest.fixture(scope='session')
def app():
    """Session-wide application for testing."""
    app = create_app('testing')
    return app


@pytest.fixture(scope='function')
def test_client(app):
    """A test client for the app."""
    return app.test_client()


@pytest.fixture(autouse=True)
def clear_caches(app):
    """Every test starts with empty response and geocoding caches."""
    app.extensions['response_cache'].clear()
    app.extensions['geocoding_cache'].clear()
    yield


@pytest.fixture
def london_location():
    return {
        "latitude": 51.5074,
        "longitude": -0.1278,
        "city": "London",
        "country": "United Kingdom",
        "state": None,
        "administrative_levels": {"level1long": "England", "level1short": "England", "level2long": "Greater London"},
        "country_code": "GB",
        "formatted_address": "London, UK",
    }


@pytest.fixture
def london_instants():
    """A winter day in London (GMT, so local wall-clock equals UTC)."""
    day = datetime.date(2025, 1, 15)

    def at(hour, minute):
        return datetime.datetime(day.year, day.month, day.day, hour, minute, tzinfo=UTC)

    return {
        "fajr": at(5, 0),
        "sunrise": at(6, 45),
        "dhuhr": at(12, 30),
        "asr": at(16, 0),
        "sunset": at(18, 0),
        "maghrib": at(18, 5),
        "isha": at(20, 0),
    }


@pytest.fixture
def mock_collaborators(mocker, london_location, london_instants):
    """
    Mocks the geocoder, the timezone lookup and the astronomical calculator
    where the prayer time service uses them.
    """
    return {
        "geocode": mocker.patch(
            'salahtimes.services.prayer_time_service.geocode_with_cache',
            return_value=[london_location],
        ),
        "timezones": mocker.patch(
            'salahtimes.services.prayer_time_service.timezone_ids_for',
            return_value=["Europe/London"],
        ),
        "instants": mocker.patch(
            'salahtimes.services.prayer_time_service.compute_prayer_instants',
            return_value=london_instants,
        ),
    }
