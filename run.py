import os
import sys

from salahtimes import create_app
from salahtimes.config import config_by_name
from salahtimes.services.geocoding_service import ADAPTERS

# Step 1: Determine the config name
config_name = os.environ.get('FLASK_CONFIG') or 'default'
if config_name not in config_by_name:
    print(f"Warning: Config name '{config_name}' not found. Using 'default' config.")
    config_name = 'default'

# Step 2: Create the app
app = create_app(config_name)

# Step 3: Check the geocoding provider's API key
provider = app.config.get('GEOCODING_PROVIDER', 'google').lower()
if provider not in ADAPTERS:
    app.logger.critical(f"Unsupported geocoding provider: {provider}")
    sys.exit(1)
key_name = ADAPTERS[provider][1]
if not app.config.get(key_name):
    app.logger.critical(f"Missing environment variables ({key_name})")
    sys.exit(1)
app.logger.info(f"Environment variables loaded ({key_name} found)")


# Step 4: Run the app
if __name__ == '__main__':
    port = int(os.environ.get('PORT', 8080))
    app.logger.info(f"Starting application with '{config_name}' configuration...")
    app.logger.info(f"Debug mode is: {'ON' if app.config.get('DEBUG') else 'OFF'}")
    app.logger.info(f"Application will run on host 0.0.0.0 and port {port}")
    app.run(host='0.0.0.0', port=port)
