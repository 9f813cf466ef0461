"""Application factory and app-wide configuration."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from flask import Flask
from flask_cors import CORS

from retireplan.app.api.routes import api_bp

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = {
    "CORS_ORIGINS": [
        "http://localhost:3000",
        "http://localhost:5173",
        "http://127.0.0.1:3000",
        "http://127.0.0.1:5173",
    ],
    "LOG_LEVEL": "INFO",
}


def create_app(config: Optional[Mapping[str, Any]] = None) -> Flask:
    """Build the Flask app instance.

    Settings come from ``DEFAULT_CONFIG``, then ``RETIREPLAN_*`` environment
    variables, then the ``config`` mapping.
    """
    app = Flask(__name__)
    app.config.from_mapping(DEFAULT_CONFIG)
    app.config.from_prefixed_env("RETIREPLAN")
    if config:
        app.config.from_mapping(config)

    logging.getLogger("retireplan").setLevel(app.config["LOG_LEVEL"])

    CORS(
        app,
        resources={r"/api/*": {"origins": app.config["CORS_ORIGINS"]}},
        supports_credentials=True,
    )

    app.register_blueprint(api_bp, url_prefix="/api")
    logger.info("retireplan API ready; CORS origins %s", app.config["CORS_ORIGINS"])
    return app
