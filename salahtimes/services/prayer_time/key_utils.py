# salahtimes/services/prayer_time/key_utils.py

from flask import Request

from ...utils.query_utils import extract_location, is_flag_set


def default_cache_key(request: Request) -> str:
    """'{METHOD}:{path}?{query}' for routes without a custom key."""
    full_path = request.full_path.rstrip('?')
    return f"{request.method}:{full_path}"


def prayer_times_cache_key(request: Request) -> str:
    """
    Normalizes /prayer-times requests onto the decoded location so that
    '/prayer-times/New%20York', '/prayer-times/New York' and
    '/prayer-times?q=New+York' share an entry. The two flags that change
    the body are kept in the key.
    """
    location = extract_location(request.view_args.get('location') if request.view_args else None, request.args)
    if not location:
        return default_cache_key(request)

    key = f"{request.method}:/prayer-times/{location}"
    flags = [name for name in ('asr_adjustment', 'highlight') if is_flag_set(request.args.get(name))]
    if flags:
        key = f"{key}|{','.join(flags)}"
    return key


def geocoding_cache_key(query: str) -> str:
    return query.strip().lower()
