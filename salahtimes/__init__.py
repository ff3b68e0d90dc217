import logging

import sentry_sdk
from flask import Flask
from flask_smorest import Api
from sentry_sdk.integrations.flask import FlaskIntegration

from .extensions import cors, init_caches, limiter
from .errors import register_error_handlers


def _blueprints():
    # Explicit registration table: (blueprint, url_prefix)
    from .routes.main_routes import main_bp
    from .routes.prayer_routes import prayer_bp

    return [
        (main_bp, None),
        (prayer_bp, None),
    ]


def create_app(config_name):
    """
    Flask Application Factory function.
    """
    app = Flask(__name__, instance_relative_config=False)

    # 1. Load Config
    from .config import config_by_name
    config_obj = config_by_name.get(config_name, config_by_name['default'])
    app.config.from_object(config_obj)

    # 2. Set up Logging
    log_level_str = app.config.get('LOG_LEVEL', 'INFO').upper()
    log_level = getattr(logging, log_level_str, logging.INFO)
    app.logger.setLevel(log_level)
    app.logger.info(f"App configured with: {config_obj.__name__}")

    # 3. Sentry SDK initialization - for error and performance tracking
    if app.config.get('SENTRY_DSN'):
        sentry_sdk.init(
            dsn=app.config['SENTRY_DSN'],
            integrations=[FlaskIntegration()],
            traces_sample_rate=1.0
        )
        app.logger.info("Sentry initialized for error tracking.")

    # 4. Initialize Extensions
    cors.init_app(app, resources={r"/*": {"origins": "*"}})
    limiter.init_app(app)
    api = Api(app)  # Flask-Smorest API, one per app instance
    init_caches(app)

    # 5. Register Blueprints
    with app.app_context():
        blueprints = _blueprints()
        for blueprint, url_prefix in blueprints:
            if url_prefix:
                api.register_blueprint(blueprint, url_prefix=url_prefix)
            else:
                api.register_blueprint(blueprint)
        app.logger.info(f"{len(blueprints)} blueprints registered: {', '.join(bp.name for bp, _ in blueprints)}")

    # 6. Error handlers
    register_error_handlers(app)

    app.logger.info(f"Application initialized with environment: {app.config.get('FLASK_ENV')}, Debug: {app.config.get('DEBUG')}")

    # 7. Finally, return the app
    return app
