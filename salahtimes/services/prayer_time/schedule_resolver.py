# salahtimes/services/prayer_time/schedule_resolver.py
"""
Zone-correct prayer schedule resolution.

Every instant handed to the resolver (the seven prayer instants and "now")
is converted into the target IANA zone before it takes part in any
comparison or subtraction, so a UTC value is never compared against a
zoned wall-clock value.
"""
import datetime
from typing import Dict, Mapping, Union

from ...utils.time_utils import format_clock, to_epoch_millis, to_local_wall_clock

CANONICAL_PRAYERS = ("fajr", "dhuhr", "asr", "maghrib", "isha")
SCHEDULE_MARKERS = ("sunrise", "sunset")
PRAYER_NAMES = CANONICAL_PRAYERS + SCHEDULE_MARKERS

MS_PER_MINUTE = 60 * 1000
MS_PER_HOUR = 60 * MS_PER_MINUTE
MS_PER_DAY = 24 * MS_PER_HOUR

EPOCH = datetime.datetime(1970, 1, 1, tzinfo=datetime.timezone.utc)


def format_duration(duration_ms: int) -> str:
    """
    Formats a non-negative millisecond duration as '{H}h {M}m'.
    The hour component is dropped when it is zero ('12m', never '0h 12m').
    """
    duration_ms = abs(int(duration_ms))
    hours = duration_ms // MS_PER_HOUR
    minutes = (duration_ms % MS_PER_HOUR) // MS_PER_MINUTE
    if hours == 0:
        return f"{minutes}m"
    return f"{hours}h {minutes}m"


def midpoint(start: datetime.datetime, end: datetime.datetime) -> datetime.datetime:
    """Instant halfway between two instants, exact to the millisecond."""
    start_ms = to_epoch_millis(start)
    end_ms = to_epoch_millis(end)
    middle_ms = (start_ms + end_ms) // 2
    return EPOCH + datetime.timedelta(milliseconds=middle_ms)


class ScheduleResolver:
    """
    Derives display strings, countdowns and the active/next prayer for one
    location at one evaluation instant.
    """

    def __init__(self, instants: Mapping[str, datetime.datetime], zone_id: str, now: datetime.datetime):
        missing = [name for name in PRAYER_NAMES if instants.get(name) is None]
        if missing:
            raise ValueError(f"Prayer instants missing for: {', '.join(missing)}")

        self.zone_id = zone_id
        self.now = to_local_wall_clock(now, zone_id)
        self.instants = {name: to_local_wall_clock(instants[name], zone_id) for name in PRAYER_NAMES}

    def _zoned(self, prayer: Union[str, datetime.datetime]) -> datetime.datetime:
        if isinstance(prayer, str):
            return self.instants[prayer]
        return to_local_wall_clock(prayer, self.zone_id)

    def _diff_ms(self, later: datetime.datetime, earlier: datetime.datetime) -> int:
        return to_epoch_millis(later) - to_epoch_millis(earlier)

    def countdown_ms(self, prayer: Union[str, datetime.datetime]) -> int:
        # An instant that has already passed today counts towards tomorrow's occurrence.
        return self._diff_ms(self._zoned(prayer), self.now) % MS_PER_DAY

    def countdown(self, prayer: Union[str, datetime.datetime]) -> str:
        return format_duration(self.countdown_ms(prayer))

    def elapsed(self, prayer: Union[str, datetime.datetime]) -> str:
        return format_duration(abs(self._diff_ms(self.now, self._zoned(prayer))))

    def active_prayer(self) -> str:
        """
        The canonical prayer whose half-open interval [start, next start)
        contains now. Before fajr and from isha onwards it is isha.
        """
        active = "isha"
        for name in CANONICAL_PRAYERS:
            if self.instants[name] <= self.now:
                active = name
            else:
                break
        return active

    def next_prayer(self) -> str:
        """First canonical prayer strictly after now, wrapping to fajr after isha."""
        for name in CANONICAL_PRAYERS:
            if self.instants[name] > self.now:
                return name
        return "fajr"

    def display_times(self) -> Dict[str, str]:
        return {name: format_clock(self.instants[name]) for name in PRAYER_NAMES}

    def countdowns(self) -> Dict[str, str]:
        return {name: self.countdown(name) for name in PRAYER_NAMES}

    def local_time(self) -> str:
        return format_clock(self.now)
