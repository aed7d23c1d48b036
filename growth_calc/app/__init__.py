"""Application factory and app-wide configuration."""

from __future__ import annotations

import logging
from typing import Optional

from flask import Flask
from flask_cors import CORS

from growth_calc.app.api.routes import api_bp
from growth_calc.config import EXTENSION_KEY, Settings, configure_logging
from growth_calc.core.presentation import Presentation

LOGGER = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> Flask:
    """Build the Flask app instance."""
    settings = settings or Settings.from_env()
    configure_logging(settings.log_level)

    app = Flask(__name__)
    app.config["GROWTH_CALC_SETTINGS"] = settings
    app.extensions[EXTENSION_KEY] = Presentation.from_settings(settings)

    CORS(
        app,
        resources={r"/api/*": {"origins": list(settings.cors_origins)}},
        supports_credentials=True,
    )

    app.register_blueprint(api_bp, url_prefix="/api")
    LOGGER.info("growth_calc app created (currency=%s)", settings.currency)
    return app
