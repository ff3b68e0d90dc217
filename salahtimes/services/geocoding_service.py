from flask import current_app

from ..metrics import CACHE_HITS, CACHE_MISSES, GEOCODING_REQUESTS_TOTAL
from ..errors import GeocodingError
from .prayer_time.key_utils import geocoding_cache_key

# Import the adapter classes
from .geocoding_adapters.google_adapter import GoogleGeocodingAdapter
from .geocoding_adapters.locationiq_adapter import LocationIQAdapter

ADAPTERS = {
    'google': (GoogleGeocodingAdapter, 'GOOGLE_API_KEY'),
    'locationiq': (LocationIQAdapter, 'LOCATIONIQ_API_KEY'),
}


def get_geocoding_adapter():
    """
    Factory function to get the configured geocoding adapter.
    Reads the provider name and API key from the app config.
    """
    provider = current_app.config.get('GEOCODING_PROVIDER', 'google').lower()
    if provider not in ADAPTERS:
        raise ValueError(f"Unsupported geocoding provider: {provider}")

    adapter_cls, key_name = ADAPTERS[provider]
    api_key = current_app.config.get(key_name)
    if not api_key:
        raise ValueError(f"{key_name} is not configured.")
    return adapter_cls(api_key=api_key, timeout=current_app.config.get('GEOCODING_TIMEOUT_SECONDS', 10))


def geocode_with_cache(query):
    """
    Geocodes a free-text location, using the in-process geocoding cache
    to avoid repeated provider calls. Only non-empty results are cached.
    Raises GeocodingError when the provider call fails.
    """
    cache = current_app.extensions['geocoding_cache']
    cache_key = geocoding_cache_key(query)

    cached_result = cache.get(cache_key)
    if cached_result:
        CACHE_HITS.labels(cache_type='geocoding').inc()
        current_app.logger.info(f"Geocoding cache HIT for query: {cache_key}")
        return cached_result

    CACHE_MISSES.labels(cache_type='geocoding').inc()
    current_app.logger.info(f"Geocoding cache MISS for query: {cache_key}. Calling API.")

    adapter = get_geocoding_adapter()
    try:
        results = adapter.geocode(query)
    except GeocodingError:
        GEOCODING_REQUESTS_TOTAL.labels(provider=adapter.name, status='error').inc()
        raise

    GEOCODING_REQUESTS_TOTAL.labels(provider=adapter.name, status='ok' if results else 'empty').inc()
    if results:
        cache.set(cache_key, results)
    return results
