# salahtimes/services/prayer_time/status_composer.py
from typing import Any, Dict, Mapping, Optional
import datetime

from ...utils.time_utils import to_utc_iso, zone_display_name
from .schedule_resolver import PRAYER_NAMES, ScheduleResolver


def capitalize_label(label: Optional[str], highlight: bool = False) -> str:
    """'dhuhr' -> 'Dhuhr', or '**Dhuhr**' when highlighting for markdown clients."""
    if not label:
        return ""
    capitalized = label[0].upper() + label[1:]
    return f"**{capitalized}**" if highlight else capitalized


def compose_status_string(active: str, upcoming: str, countdown: str, highlight: bool = False) -> str:
    return (
        f"It's currently {capitalize_label(active, highlight)}. "
        f"{capitalize_label(upcoming, highlight)} in {countdown}."
    )


def resolve_region(location: Mapping[str, Any]) -> str:
    """Short admin level 1 name, then state, then long admin level 1 name."""
    admin_levels = location.get('administrative_levels') or {}
    return (
        admin_levels.get('level1short')
        or location.get('state')
        or admin_levels.get('level1long')
        or ""
    )


def build_prayer_times_payload(
    query: str,
    location: Mapping[str, Any],
    zone_id: str,
    resolver: ScheduleResolver,
    instants: Mapping[str, datetime.datetime],
    highlight: bool = False,
) -> Dict[str, Any]:
    """
    Assembles the /prayer-times response body from the resolved location,
    the raw UTC instants and the resolver's zoned view of them.
    """
    current_prayer = resolver.active_prayer()
    upcoming_prayer = resolver.next_prayer()
    countdowns = resolver.countdowns()

    return {
        "status_string": compose_status_string(
            current_prayer, upcoming_prayer, countdowns[upcoming_prayer], highlight
        ),
        "location_string": location.get('formatted_address') or query,
        "country": location.get('country') or "",
        "country_code": location.get('country_code') or "",
        "city": location.get('city') or "",
        "region": resolve_region(location),
        "local_time": resolver.local_time(),
        "local_timezone": zone_display_name(zone_id, resolver.now),
        "local_timezone_id": zone_id,
        "coordinates": {
            "latitude": location.get('latitude'),
            "longitude": location.get('longitude'),
        },
        "times": resolver.display_times(),
        "times_in_utc": {name: to_utc_iso(instants[name]) for name in PRAYER_NAMES},
        "times_left": countdowns,
        "current_prayer": current_prayer,
        "upcoming_prayer": upcoming_prayer,
        "current_prayer_time_elapsed": resolver.elapsed(current_prayer),
        "upcoming_prayer_time_left": countdowns[upcoming_prayer],
    }
