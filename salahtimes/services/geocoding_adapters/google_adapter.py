import requests
from flask import current_app

from ...errors import GeocodingError
from .base_adapter import BaseGeocodingAdapter


class GoogleGeocodingAdapter(BaseGeocodingAdapter):
    """
    Geocoding adapter for the Google Maps Geocoding API.
    """
    name = "google"
    base_url = "https://maps.googleapis.com/maps/api/geocode/json"

    def geocode(self, query):
        if not self.api_key:
            current_app.logger.error("Geocoding failed: Google API key is not configured.")
            raise GeocodingError(f'Geocoding failed for "{query}"')

        params = {"address": query, "key": self.api_key}

        try:
            response = requests.get(self.base_url, params=params, timeout=self.timeout)
            response.raise_for_status()
            data = response.json()
        except requests.exceptions.RequestException as e:
            current_app.logger.error(f"Google geocoding request failed for '{query}': {e}")
            raise GeocodingError(f'Geocoding failed for "{query}"') from e
        except ValueError as e:
            current_app.logger.error(f"Failed to parse Google geocoding response for '{query}': {e}")
            raise GeocodingError(f'Geocoding failed for "{query}"') from e

        status = data.get("status")
        if status == "ZERO_RESULTS":
            return []
        if status != "OK":
            current_app.logger.error(
                f"Google geocoding returned status {status} for '{query}': {data.get('error_message')}"
            )
            raise GeocodingError(f'Geocoding failed for "{query}"')

        return [self._format_result(result) for result in data.get("results", [])]

    def _format_result(self, result):
        record = self.empty_result()
        location = result.get("geometry", {}).get("location", {})
        record["latitude"] = location.get("lat")
        record["longitude"] = location.get("lng")
        record["formatted_address"] = result.get("formatted_address")

        admin_levels = {}
        for component in result.get("address_components", []):
            types = component.get("types", [])
            long_name = component.get("long_name")
            short_name = component.get("short_name")

            if "country" in types:
                record["country"] = long_name
                record["country_code"] = short_name
            elif "locality" in types:
                record["city"] = long_name
            elif "postal_town" in types and not record["city"]:
                record["city"] = long_name

            for level in range(1, 6):
                if f"administrative_area_level_{level}" in types:
                    admin_levels[f"level{level}long"] = long_name
                    admin_levels[f"level{level}short"] = short_name

        record["administrative_levels"] = admin_levels
        return record
