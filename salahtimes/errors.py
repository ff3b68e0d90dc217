# salahtimes/errors.py

import datetime

from flask import current_app, jsonify


class GeocodingError(Exception):
    """Raised by a geocoding adapter when the provider call itself fails."""


class PrayerTimesError(Exception):
    """
    A request-level failure with a known HTTP status.
    Rendered as ``{"error": ..., "description": ...}``.
    """
    status_code = 400
    error = "Bad Request"

    def __init__(self, description):
        super().__init__(description)
        self.description = description

    def to_dict(self):
        return {"error": self.error, "description": self.description}


class InputMissing(PrayerTimesError):
    error = "No location provided"

    def __init__(self):
        super().__init__(
            "Please provide a location either as a path parameter (/prayer-times/New York) "
            "or as a query parameter (?q=New York)"
        )


class LocationNotFound(PrayerTimesError):
    error = "Location Not Found"

    def __init__(self, query):
        super().__init__(f'Could not find a location matching "{query}". Try being more specific.')


class CoordinatesUnresolved(PrayerTimesError):
    error = "Coordinates Not Found"

    def __init__(self, query):
        super().__init__(f'Could not resolve coordinates for "{query}". Try being more specific.')


class TimezoneUnresolved(PrayerTimesError):
    error = "Timezone Information Not Found"

    def __init__(self, query):
        super().__init__(
            f'Could not resolve timezone information for "{query}". Try another keyword or location.'
        )


def handle_prayer_times_error(error):
    current_app.logger.info(f"Request rejected ({error.status_code}): {error.error} - {error.description}")
    return jsonify(error.to_dict()), error.status_code


def handle_not_found(error):
    return jsonify({
        "status": "ok",
        "timestamp": datetime.datetime.now(datetime.timezone.utc).isoformat(),
    }), 404


def handle_unexpected_error(error):
    current_app.logger.error(f"Unhandled error while serving request: {error}", exc_info=True)
    return jsonify({"error": "Internal Server Error", "message": str(error) or "Unknown error"}), 500


def register_error_handlers(app):
    app.register_error_handler(PrayerTimesError, handle_prayer_times_error)
    app.register_error_handler(404, handle_not_found)
    app.register_error_handler(Exception, handle_unexpected_error)
