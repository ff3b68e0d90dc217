# salahtimes/schemas.py

from marshmallow import EXCLUDE, Schema, fields


class MessageSchema(Schema):
    message = fields.Str(required=True)


class PrayerTimesErrorSchema(Schema):
    error = fields.Str(required=True)
    description = fields.Str()
    message = fields.Str()


class PrayerTimesArgsSchema(Schema):
    """Query parameters accepted by /prayer-times."""
    class Meta:
        unknown = EXCLUDE

    q = fields.Str()
    query = fields.Str()
    asr_adjustment = fields.Str(metadata={"description": "'true' recomputes Asr as the midpoint of Dhuhr and sunset."})
    highlight = fields.Str(metadata={"description": "'true' wraps the prayer names in the status string in **bold**."})


class CoordinatesSchema(Schema):
    latitude = fields.Float(required=True)
    longitude = fields.Float(required=True)


class PrayerTimesSchema(Schema):
    status_string = fields.Str(required=True)
    location_string = fields.Str(required=True)
    country = fields.Str(required=True)
    country_code = fields.Str(required=True)
    city = fields.Str(required=True)
    region = fields.Str(required=True)
    local_time = fields.Str(required=True)
    local_timezone = fields.Str(required=True)
    local_timezone_id = fields.Str(required=True)
    coordinates = fields.Nested(CoordinatesSchema, required=True)
    times = fields.Dict(keys=fields.Str(), values=fields.Str(), required=True)
    times_in_utc = fields.Dict(keys=fields.Str(), values=fields.Str(), required=True)
    times_left = fields.Dict(keys=fields.Str(), values=fields.Str(), required=True)
    current_prayer = fields.Str(required=True)
    upcoming_prayer = fields.Str(required=True)
    current_prayer_time_elapsed = fields.Str(required=True)
    upcoming_prayer_time_left = fields.Str(required=True)
