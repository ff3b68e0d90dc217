import re
from urllib.parse import unquote

# Encoded separators that survive one round of decoding when a client
# double-encodes the location (e.g. 'New%2520York').
_ENCODED_SEPARATOR = re.compile(r'%(20|2C|2B)', re.IGNORECASE)


def repair_double_encoding(value):
    if value and _ENCODED_SEPARATOR.search(value):
        return unquote(value)
    return value


def extract_location(path_location, args):
    """
    Picks the location from the path segment, which Flask has already
    decoded, falling back to the 'q' or 'query' query parameters, which are
    repaired for double encoding. Returns None when none is given.
    """
    if path_location and path_location.strip():
        return path_location.strip()
    for name in ('q', 'query'):
        value = args.get(name)
        if value is None:
            continue
        location = repair_double_encoding(value).strip()
        if location:
            return location
    return None


def is_flag_set(value):
    """Query flags are on only for the literal string 'true'."""
    return value == "true"
