from typing import Any, Dict, Optional
import datetime

from flask import current_app

from ..errors import CoordinatesUnresolved, GeocodingError, InputMissing, LocationNotFound, TimezoneUnresolved
from ..utils.time_utils import to_local_wall_clock
from .geocoding_service import geocode_with_cache
from .timezone_service import timezone_ids_for
from .prayer_time.astronomy import apply_asr_adjustment, compute_prayer_instants, get_calculation_method
from .prayer_time.schedule_resolver import ScheduleResolver
from .prayer_time.status_composer import build_prayer_times_payload


# --- Main Service Function ---

def get_prayer_times_for_location(query: Optional[str], asr_adjustment: bool = False, highlight: bool = False, now: Optional[datetime.datetime] = None) -> Dict[str, Any]:
    """
    Resolves a free-text location to coordinates and an IANA zone, computes
    today's schedule for it and derives the current/next prayer status.

    Each stage checks its own precondition and raises the matching
    PrayerTimesError, which the app renders as a 400.
    """
    if not query:
        raise InputMissing()

    # 1. Geocode
    try:
        results = geocode_with_cache(query)
    except GeocodingError as e:
        current_app.logger.warning(f"Geocoding failed for '{query}': {e}")
        raise LocationNotFound(query) from e

    if not results:
        raise LocationNotFound(query)

    location = results[0]
    latitude = location.get('latitude')
    longitude = location.get('longitude')
    if latitude is None or longitude is None:
        raise CoordinatesUnresolved(query)

    # 2. Time zone
    zone_ids = timezone_ids_for(latitude, longitude)
    if not zone_ids:
        raise TimezoneUnresolved(query)
    zone_id = zone_ids[0]

    # 3. Prayer instants for the location's own calendar date
    if now is None:
        now = datetime.datetime.now(datetime.timezone.utc)
    local_date = to_local_wall_clock(now, zone_id).date()
    method = get_calculation_method(current_app.config.get('PRAYER_CALCULATION_METHOD', 'KARACHI'))
    instants = compute_prayer_instants((latitude, longitude), local_date, method)

    if asr_adjustment:
        instants = apply_asr_adjustment(instants)

    current_app.logger.debug(f"Resolved '{query}' to ({latitude}, {longitude}) in {zone_id} for {local_date}.")

    # 4. Status
    resolver = ScheduleResolver(instants, zone_id, now)
    return build_prayer_times_payload(query, location, zone_id, resolver, instants, highlight=highlight)
