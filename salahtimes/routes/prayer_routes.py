# salahtimes/routes/prayer_routes.py

from typing import Any, Dict, Optional

from flask_smorest import Blueprint

from ..schemas import PrayerTimesArgsSchema, PrayerTimesErrorSchema, PrayerTimesSchema
from ..services.prayer_time.cache_layer import cached
from ..services.prayer_time.key_utils import prayer_times_cache_key
from ..services.prayer_time_service import get_prayer_times_for_location
from ..utils.query_utils import extract_location, is_flag_set

prayer_bp = Blueprint(
    'PrayerTimes',
    __name__,
    description="Daily prayer schedule and current/next prayer status for a location."
)


@prayer_bp.route('/prayer-times')
@prayer_bp.route('/prayer-times/<path:location>')
@cached(duration=45, duration_type="seconds", key_func=prayer_times_cache_key)
@prayer_bp.arguments(PrayerTimesArgsSchema, location='query')
@prayer_bp.response(200, PrayerTimesSchema, description="Prayer schedule and status for the location.")
@prayer_bp.alt_response(400, schema=PrayerTimesErrorSchema, description="Location missing, not found, or without coordinates/timezone.")
@prayer_bp.alt_response(500, schema=PrayerTimesErrorSchema, description="Internal Server Error.")
def get_prayer_times(args: Dict[str, Any], location: Optional[str] = None) -> Dict[str, Any]:
    """
    Get today's prayer times for a location.

    The location may be given as a path segment (/prayer-times/New York)
    or as the 'q' / 'query' parameter (/prayer-times?q=New York).
    """
    query = extract_location(location, args)
    return get_prayer_times_for_location(
        query,
        asr_adjustment=is_flag_set(args.get('asr_adjustment')),
        highlight=is_flag_set(args.get('highlight')),
    )
