# salahtimes/services/prayer_time/astronomy.py
import datetime
from typing import Dict, Tuple

from adhanpy.PrayerTimes import PrayerTimes
from adhanpy.calculation import CalculationMethod

from .schedule_resolver import midpoint


def get_calculation_method(name: str) -> CalculationMethod:
    """Looks up an adhanpy CalculationMethod by member name, e.g. 'KARACHI'."""
    try:
        return CalculationMethod[name.upper()]
    except KeyError:
        raise ValueError(f"Unsupported prayer calculation method: {name}") from None


def _as_utc(instant: datetime.datetime) -> datetime.datetime:
    if instant.tzinfo is None:
        return instant.replace(tzinfo=datetime.timezone.utc)
    return instant.astimezone(datetime.timezone.utc)


def _rounded_minute(instant: datetime.datetime) -> datetime.datetime:
    # Same nearest-minute rounding adhanpy applies to the published times.
    return (instant + datetime.timedelta(seconds=30)).replace(second=0, microsecond=0)


def compute_prayer_instants(coordinates: Tuple[float, float], local_date: datetime.date, method: CalculationMethod) -> Dict[str, datetime.datetime]:
    """
    Computes the seven prayer instants (aware, UTC) for the location's
    local calendar date.
    """
    prayer_times = PrayerTimes(
        coordinates,
        datetime.datetime(local_date.year, local_date.month, local_date.day),
        method,
    )
    # PrayerTimes only publishes maghrib, which some methods (DUBAI,
    # MOON_SIGHTING_COMMITTEE) shift past sunset; take the solar sunset it computed.
    sunset = _rounded_minute(prayer_times._sunset_components)
    return {
        "fajr": _as_utc(prayer_times.fajr),
        "dhuhr": _as_utc(prayer_times.dhuhr),
        "asr": _as_utc(prayer_times.asr),
        "maghrib": _as_utc(prayer_times.maghrib),
        "isha": _as_utc(prayer_times.isha),
        "sunrise": _as_utc(prayer_times.sunrise),
        "sunset": _as_utc(sunset),
    }


def apply_asr_adjustment(instants: Dict[str, datetime.datetime]) -> Dict[str, datetime.datetime]:
    """Returns a copy with asr recomputed as the midpoint of dhuhr and sunset."""
    adjusted = dict(instants)
    adjusted["asr"] = midpoint(instants["dhuhr"], instants["sunset"])
    return adjusted
