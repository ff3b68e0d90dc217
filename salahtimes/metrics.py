# salahtimes/metrics.py

from prometheus_client import Counter

# Cache Metrics
CACHE_HITS = Counter('salahtimes_cache_hits_total', 'Total cache hits', ['cache_type'])
CACHE_MISSES = Counter('salahtimes_cache_misses_total', 'Total cache misses', ['cache_type'])
CACHE_STORE_FAILURES = Counter('salahtimes_cache_store_failures_total', 'Responses that could not be cached', ['cache_type'])

# Geocoding Metrics
GEOCODING_REQUESTS_TOTAL = Counter('salahtimes_geocoding_requests_total', 'Total geocoding provider calls', ['provider', 'status'])
