# salahtimes/extensions.py

from flask_cors import CORS
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address

from .services.prayer_time.cache_layer import MemoryCache

cors = CORS()
# Default limits come from RATELIMIT_DEFAULT
limiter = Limiter(key_func=get_remote_address)


def init_caches(app):
    """
    Builds the process-local caches for this app instance and exposes them
    through app.extensions so the services can reach them.
    """
    app.extensions['response_cache'] = MemoryCache(
        max_entries=app.config['RESPONSE_CACHE_MAX_ENTRIES'],
    )
    app.extensions['geocoding_cache'] = MemoryCache(
        max_entries=app.config['GEOCODING_CACHE_MAX_ENTRIES'],
        default_ttl=app.config['GEOCODING_CACHE_TTL_SECONDS'],
    )
