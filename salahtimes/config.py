import os
from dotenv import load_dotenv

# Load .env file
dotenv_path = os.path.join(os.path.dirname(os.path.dirname(__file__)), '.env')
if os.path.exists(dotenv_path):
    load_dotenv(dotenv_path)


class Config:
    """Base configuration."""
    LOG_LEVEL = "INFO"

    # Sentry Configuration
    SENTRY_DSN = os.environ.get('SENTRY_DSN')

    # Flask-Smorest API documentation
    API_TITLE = "SalahTimes API"
    API_VERSION = "v1"
    OPENAPI_VERSION = "3.0.2"
    OPENAPI_URL_PREFIX = "/api/docs"
    OPENAPI_SWAGGER_UI_PATH = "/swagger-ui"
    OPENAPI_SWAGGER_UI_URL = "https://cdn.jsdelivr.net/npm/swagger-ui-dist/"

    # Geocoding API Configuration
    GEOCODING_PROVIDER = os.environ.get('GEOCODING_PROVIDER', 'google')  # Can be 'google' or 'locationiq'
    GOOGLE_API_KEY = os.environ.get('GOOGLE_API_KEY')
    LOCATIONIQ_API_KEY = os.environ.get('LOCATIONIQ_API_KEY')
    GEOCODING_TIMEOUT_SECONDS = int(os.environ.get('GEOCODING_TIMEOUT_SECONDS', 10))

    # In-process caches. Both are bounded; the oldest entry is evicted first.
    GEOCODING_CACHE_TTL_SECONDS = int(os.environ.get('GEOCODING_CACHE_TTL_SECONDS', 24 * 60 * 60))
    GEOCODING_CACHE_MAX_ENTRIES = int(os.environ.get('GEOCODING_CACHE_MAX_ENTRIES', 1000))
    RESPONSE_CACHE_MAX_ENTRIES = int(os.environ.get('RESPONSE_CACHE_MAX_ENTRIES', 5000))

    # Prayer time calculation (name of an adhanpy CalculationMethod member)
    PRAYER_CALCULATION_METHOD = os.environ.get('PRAYER_CALCULATION_METHOD', "KARACHI")

    # Rate limiting
    RATELIMIT_ENABLED = True
    RATELIMIT_DEFAULT = os.environ.get('RATELIMIT_DEFAULT', "120 per minute")
    RATELIMIT_STORAGE_URI = "memory://"


class DevelopmentConfig(Config):
    FLASK_ENV = 'development'
    DEBUG = True
    LOG_LEVEL = "DEBUG"


class ProductionConfig(Config):
    FLASK_ENV = 'production'
    DEBUG = False


class TestingConfig(Config):
    TESTING = True
    RATELIMIT_ENABLED = False  # Disable rate limiting for tests
    SENTRY_DSN = None
    GEOCODING_PROVIDER = 'google'
    GOOGLE_API_KEY = 'dummy_key'
    LOCATIONIQ_API_KEY = 'dummy_key'


config_by_name = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
