import datetime
from zoneinfo import ZoneInfo

from babel.dates import get_timezone_name

UNKNOWN_TIMEZONE_NAME = "Unknown Timezone"

_EPOCH = datetime.datetime(1970, 1, 1, tzinfo=datetime.timezone.utc)

# CLDR still files these renamed zones under their old ids.
CLDR_LEGACY_ZONE_IDS = {
    "Asia/Kolkata": "Asia/Calcutta",
    "Asia/Kathmandu": "Asia/Katmandu",
    "Asia/Ho_Chi_Minh": "Asia/Saigon",
    "Asia/Yangon": "Asia/Rangoon",
    "Europe/Kyiv": "Europe/Kiev",
    "America/Nuuk": "America/Godthab",
    "Atlantic/Faroe": "Atlantic/Faeroe",
    "Pacific/Chuuk": "Pacific/Truk",
    "Pacific/Pohnpei": "Pacific/Ponape",
    "Pacific/Kanton": "Pacific/Enderbury",
}


def to_local_wall_clock(instant, zone_id):
    """
    Reinterprets an absolute instant in the wall-clock of an IANA zone.
    Naive datetimes are treated as UTC.
    """
    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=datetime.timezone.utc)
    return instant.astimezone(ZoneInfo(zone_id))


def format_clock(local):
    """Formats a zoned datetime as 'h:mm a', e.g. '5:07 AM'."""
    if not local:
        return "N/A"
    hour = local.hour % 12 or 12
    meridiem = "AM" if local.hour < 12 else "PM"
    return f"{hour}:{local.minute:02d} {meridiem}"


def _babel_zone_name(zone_id, reference_instant):
    local = to_local_wall_clock(reference_instant, zone_id)
    return get_timezone_name(local, width='long', locale='en_US')


def zone_display_name(zone_id, reference_instant):
    """
    Long-form name of the zone at the given instant ('Eastern Standard Time'
    in January, 'Eastern Daylight Time' in July).
    Falls back to 'Unknown Timezone' when the zone cannot be loaded.
    """
    try:
        name = _babel_zone_name(zone_id, reference_instant)
    except (LookupError, ValueError):
        return UNKNOWN_TIMEZONE_NAME

    # Babel answers with a bare 'GMT+05:30' when it has no name under the current id.
    legacy_id = CLDR_LEGACY_ZONE_IDS.get(zone_id)
    if legacy_id and (not name or name.startswith("GMT")):
        try:
            legacy_name = _babel_zone_name(legacy_id, reference_instant)
        except (LookupError, ValueError):
            legacy_name = None
        name = legacy_name or name
    return name or UNKNOWN_TIMEZONE_NAME


def to_utc_iso(instant):
    """Serializes an instant as ISO-8601 UTC with milliseconds, e.g. '2025-01-15T05:00:00.000Z'."""
    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=datetime.timezone.utc)
    utc = instant.astimezone(datetime.timezone.utc)
    return utc.isoformat(timespec='milliseconds').replace('+00:00', 'Z')


def to_epoch_millis(instant):
    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=datetime.timezone.utc)
    return (instant - _EPOCH) // datetime.timedelta(milliseconds=1)
