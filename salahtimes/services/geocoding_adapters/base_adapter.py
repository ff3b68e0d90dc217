from abc import ABC, abstractmethod


class BaseGeocodingAdapter(ABC):
    """
    Abstract base class for a geocoding adapter.
    Defines the common interface for all geocoding services.
    """
    name = "base"

    def __init__(self, api_key, timeout=10):
        self.api_key = api_key
        self.timeout = timeout

    @abstractmethod
    def geocode(self, query):
        """
        Converts a free-text location to a list of candidate records, best match first:
        {latitude, longitude, city, country, state, administrative_levels,
         country_code, formatted_address}.
        Returns an empty list when nothing matches and raises GeocodingError
        when the provider call itself fails.
        """
        pass

    @staticmethod
    def empty_result():
        return {
            "latitude": None,
            "longitude": None,
            "city": None,
            "country": None,
            "state": None,
            "administrative_levels": {},
            "country_code": None,
            "formatted_address": None,
        }
