import requests
from flask import current_app

from ...errors import GeocodingError
from .base_adapter import BaseGeocodingAdapter


class LocationIQAdapter(BaseGeocodingAdapter):
    """
    Geocoding adapter for the LocationIQ API.
    """
    name = "locationiq"
    base_url = "https://us1.locationiq.com/v1"

    def geocode(self, query):
        if not self.api_key:
            current_app.logger.error("Geocoding failed: LocationIQ API key is not configured.")
            raise GeocodingError(f'Geocoding failed for "{query}"')

        endpoint = f"{self.base_url}/search.php"
        params = {
            "key": self.api_key,
            "q": query,
            "format": "json",
            "addressdetails": 1,
            "limit": 5
        }

        try:
            response = requests.get(endpoint, params=params, timeout=self.timeout)
            # LocationIQ answers 404 with {"error": "Unable to geocode"} when nothing matches
            if response.status_code == 404:
                return []
            response.raise_for_status()
            data = response.json()
        except requests.exceptions.RequestException as e:
            current_app.logger.error(f"LocationIQ geocoding request failed: {e}")
            raise GeocodingError(f'Geocoding failed for "{query}"') from e
        except ValueError as e:
            current_app.logger.error(f"Failed to parse LocationIQ geocoding response: {e}")
            raise GeocodingError(f'Geocoding failed for "{query}"') from e

        if not isinstance(data, list):
            return []
        return [self._format_result(item) for item in data]

    def _format_result(self, item):
        record = self.empty_result()
        address = item.get('address', {})

        lat = item.get('lat')
        lon = item.get('lon')
        record["latitude"] = float(lat) if lat else None
        record["longitude"] = float(lon) if lon else None
        record["formatted_address"] = item.get('display_name')
        record["city"] = address.get('city') or address.get('town') or address.get('village')
        record["country"] = address.get('country')
        record["country_code"] = (address.get('country_code') or '').upper() or None
        record["state"] = address.get('state')

        admin_levels = {}
        if address.get('state'):
            admin_levels["level1long"] = address.get('state')
        if address.get('county'):
            admin_levels["level2long"] = address.get('county')
        record["administrative_levels"] = admin_levels
        return record
