import logging
from typing import List

from timezonefinder import TimezoneFinder

logger = logging.getLogger(__name__)

# Lazy load the finder; building its polygon index is slow.
_tf = None


def get_timezone_finder():
    global _tf
    if _tf is None:
        _tf = TimezoneFinder()
        logger.info("TimezoneFinder initialized")
    return _tf


def timezone_ids_for(latitude: float, longitude: float) -> List[str]:
    """IANA zone ids covering the coordinate; empty when none is known (e.g. open sea)."""
    zone_id = get_timezone_finder().timezone_at(lat=latitude, lng=longitude)
    return [zone_id] if zone_id else []
