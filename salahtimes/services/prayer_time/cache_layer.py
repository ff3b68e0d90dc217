# This module contains the in-process response cache and the view decorator that serves from it.
import functools
import json
import threading
import time
from collections import OrderedDict
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from flask import Request, Response, current_app, jsonify, make_response, request

from ...metrics import CACHE_HITS, CACHE_MISSES, CACHE_STORE_FAILURES
from .key_utils import default_cache_key

SECONDS_PER_UNIT = {
    "seconds": 1,
    "minutes": 60,
    "hours": 60 * 60,
    "days": 24 * 60 * 60,
}


def to_seconds(duration: float, duration_type: str = "seconds") -> float:
    """Normalizes a route's cache duration to seconds."""
    try:
        return duration * SECONDS_PER_UNIT[duration_type]
    except KeyError:
        raise ValueError(f"Unsupported cache duration type: {duration_type}") from None


@dataclass
class CacheEntry:
    value: Any
    stored_at: float
    ttl: Optional[float]

    def age(self, now: float) -> float:
        return now - self.stored_at

    def is_fresh(self, now: float, ttl: Optional[float] = None) -> bool:
        ttl = self.ttl if ttl is None else ttl
        return ttl is None or self.age(now) < ttl


class MemoryCache:
    """
    Bounded, TTL-aware key/value store living in process memory.
    Once max_entries is reached the oldest entry is evicted to make room.
    Stale entries are dropped on read.
    """

    def __init__(self, max_entries: int = 1000, default_ttl: Optional[float] = None):
        if max_entries < 1:
            raise ValueError("max_entries must be at least 1")
        self.max_entries = max_entries
        self.default_ttl = default_ttl
        self._entries: "OrderedDict[str, CacheEntry]" = OrderedDict()
        self._lock = threading.Lock()

    def get_entry(self, key: str, ttl: Optional[float] = None) -> Optional[CacheEntry]:
        now = time.time()
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            if not entry.is_fresh(now, ttl):
                del self._entries[key]
                return None
            return entry

    def get(self, key: str, ttl: Optional[float] = None) -> Any:
        entry = self.get_entry(key, ttl)
        return entry.value if entry else None

    def set(self, key: str, value: Any, ttl: Optional[float] = None) -> None:
        entry = CacheEntry(value=value, stored_at=time.time(), ttl=self.default_ttl if ttl is None else ttl)
        with self._lock:
            self._entries.pop(key, None)
            while len(self._entries) >= self.max_entries:
                self._entries.popitem(last=False)
            self._entries[key] = entry

    def delete(self, key: str) -> None:
        with self._lock:
            self._entries.pop(key, None)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: str) -> bool:
        return self.get_entry(key) is not None


def get_cached_response(cache: MemoryCache, cache_key: str, ttl: float, cache_type: str = "response") -> Optional[Dict[str, Any]]:
    """Returns the memoized payload annotated with _cached/_cache_age, or None on a miss."""
    entry = cache.get_entry(cache_key, ttl)
    if entry is None:
        CACHE_MISSES.labels(cache_type=cache_type).inc()
        current_app.logger.info(f"Response cache MISS for key '{cache_key}'.")
        return None

    CACHE_HITS.labels(cache_type=cache_type).inc()
    cache_age = int(entry.age(time.time()))
    current_app.logger.info(f"Response cache HIT for key '{cache_key}' (age {cache_age}s).")
    return {**entry.value, "_cached": True, "_cache_age": cache_age}


def store_response(cache: MemoryCache, cache_key: str, response: Response, ttl: float, cache_type: str = "response") -> bool:
    """
    Memoizes the JSON body of a 2xx response. Caching is advisory: any
    failure is logged and reported through the return value only.
    """
    if not 200 <= response.status_code < 300 or response.is_streamed:
        return False

    try:
        payload = json.loads(response.get_data(as_text=True))
    except (ValueError, TypeError) as e:
        CACHE_STORE_FAILURES.labels(cache_type=cache_type).inc()
        current_app.logger.warning(f"Failed to parse response for caching (key '{cache_key}'): {e}")
        return False

    if not isinstance(payload, dict):
        current_app.logger.debug(f"Skipping cache for key '{cache_key}': body is not a JSON object.")
        return False

    cache.set(cache_key, payload, ttl=ttl)
    return True


def cached(
    duration: float,
    duration_type: str = "seconds",
    key_func: Optional[Callable[[Request], str]] = None,
    cache_name: str = "response_cache",
):
    """
    Serves a view from the response cache while the stored payload is younger
    than the route's TTL; otherwise runs the view and memoizes a 2xx result.
    """
    ttl = to_seconds(duration, duration_type)
    key_func = key_func or default_cache_key

    def decorator(view):
        @functools.wraps(view)
        def wrapper(*args, **kwargs):
            cache = current_app.extensions[cache_name]
            cache_key = key_func(request)

            cached_payload = get_cached_response(cache, cache_key, ttl)
            if cached_payload is not None:
                return jsonify(cached_payload)

            response = make_response(view(*args, **kwargs))
            store_response(cache, cache_key, response, ttl)
            return response
        return wrapper
    return decorator
