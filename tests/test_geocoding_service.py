from unittest.mock import MagicMock

import pytest
import requests

from salahtimes.errors import GeocodingError
from salahtimes.services.geocoding_adapters.google_adapter import GoogleGeocodingAdapter
from salahtimes.services.geocoding_adapters.locationiq_adapter import LocationIQAdapter
from salahtimes.services.geocoding_service import geocode_with_cache, get_geocoding_adapter

GOOGLE_LONDON = {
    "status": "OK",
    "results": [{
        "formatted_address": "London, UK",
        "geometry": {"location": {"lat": 51.5072178, "lng": -0.1275862}},
        "address_components": [
            {"long_name": "London", "short_name": "London", "types": ["locality", "political"]},
            {"long_name": "Greater London", "short_name": "Greater London", "types": ["administrative_area_level_2", "political"]},
            {"long_name": "England", "short_name": "England", "types": ["administrative_area_level_1", "political"]},
            {"long_name": "United Kingdom", "short_name": "GB", "types": ["country", "political"]},
        ],
    }],
}


def _response(payload, status_code=200):
    response = MagicMock()
    response.status_code = status_code
    response.json.return_value = payload
    response.raise_for_status.return_value = None
    return response


def test_google_adapter_normalizes_results(app, mocker):
    mock_get = mocker.patch('requests.get', return_value=_response(GOOGLE_LONDON))
    with app.app_context():
        results = GoogleGeocodingAdapter(api_key='dummy_key').geocode("London")

    assert mock_get.call_args.kwargs["params"] == {"address": "London", "key": "dummy_key"}
    assert len(results) == 1
    london = results[0]
    assert london["latitude"] == 51.5072178
    assert london["longitude"] == -0.1275862
    assert london["city"] == "London"
    assert london["country"] == "United Kingdom"
    assert london["country_code"] == "GB"
    assert london["formatted_address"] == "London, UK"
    assert london["administrative_levels"]["level1short"] == "England"
    assert london["administrative_levels"]["level2long"] == "Greater London"


def test_google_adapter_zero_results(app, mocker):
    mocker.patch('requests.get', return_value=_response({"status": "ZERO_RESULTS", "results": []}))
    with app.app_context():
        assert GoogleGeocodingAdapter(api_key='dummy_key').geocode("Atlantis") == []


def test_google_adapter_raises_on_provider_error(app, mocker):
    mocker.patch('requests.get', return_value=_response({"status": "REQUEST_DENIED", "error_message": "bad key"}))
    with app.app_context(), pytest.raises(GeocodingError):
        GoogleGeocodingAdapter(api_key='dummy_key').geocode("London")


def test_google_adapter_raises_on_network_error(app, mocker):
    mocker.patch('requests.get', side_effect=requests.exceptions.ConnectionError("down"))
    with app.app_context(), pytest.raises(GeocodingError):
        GoogleGeocodingAdapter(api_key='dummy_key').geocode("London")


def test_locationiq_adapter_normalizes_results(app, mocker):
    payload = [{
        "lat": "24.8607", "lon": "67.0011", "display_name": "Karachi, Sindh, Pakistan",
        "address": {"city": "Karachi", "state": "Sindh", "country": "Pakistan", "country_code": "pk"},
    }]
    mocker.patch('requests.get', return_value=_response(payload))
    with app.app_context():
        karachi = LocationIQAdapter(api_key='dummy_key').geocode("Karachi")[0]

    assert karachi["latitude"] == 24.8607
    assert karachi["city"] == "Karachi"
    assert karachi["state"] == "Sindh"
    assert karachi["country_code"] == "PK"


def test_locationiq_adapter_not_found(app, mocker):
    mocker.patch('requests.get', return_value=_response({"error": "Unable to geocode"}, status_code=404))
    with app.app_context():
        assert LocationIQAdapter(api_key='dummy_key').geocode("Atlantis") == []


def test_adapter_factory_uses_configured_provider(app, mocker):
    with app.app_context():
        assert isinstance(get_geocoding_adapter(), GoogleGeocodingAdapter)

        mocker.patch.dict(app.config, {'GEOCODING_PROVIDER': 'locationiq', 'LOCATIONIQ_API_KEY': 'dummy_key'})
        assert isinstance(get_geocoding_adapter(), LocationIQAdapter)


def test_adapter_factory_rejects_unknown_provider(app, mocker):
    mocker.patch.dict(app.config, {'GEOCODING_PROVIDER': 'carrier-pigeon'})
    with app.app_context(), pytest.raises(ValueError):
        get_geocoding_adapter()


def test_adapter_factory_requires_api_key(app, mocker):
    mocker.patch.dict(app.config, {'GEOCODING_PROVIDER': 'locationiq', 'LOCATIONIQ_API_KEY': None})
    with app.app_context(), pytest.raises(ValueError):
        get_geocoding_adapter()


def test_geocode_with_cache_reuses_results(app, mocker):
    mock_get = mocker.patch('requests.get', return_value=_response(GOOGLE_LONDON))
    with app.app_context():
        first = geocode_with_cache("London")
        second = geocode_with_cache("  london ")

    assert first == second
    assert mock_get.call_count == 1


def test_geocode_with_cache_does_not_cache_empty_results(app, mocker):
    mock_get = mocker.patch('requests.get', return_value=_response({"status": "ZERO_RESULTS", "results": []}))
    with app.app_context():
        assert geocode_with_cache("Atlantis") == []
        assert geocode_with_cache("Atlantis") == []

    assert mock_get.call_count == 2
