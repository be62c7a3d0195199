"""
Submission proxy application factory.

Usage:
    from department_submissions.proxy import create_app
    app = create_app()                                  # settings from the environment
    app = create_app({"api_base": "http://upstream"})   # explicit overrides
"""

import logging

from flask import Flask

from department_submissions.config import client_config, load_config

from .routes import submissions_bp

logger = logging.getLogger(__name__)


def create_app(config: dict | None = None, transport=None) -> Flask:
    """Build the proxy app.

    Args:
        config: Overrides for ``load_config()`` keys
        transport: Optional httpx transport for upstream calls
    """
    settings = {**load_config(), **(config or {})}

    app = Flask(__name__)
    app.config["UPSTREAM"] = client_config(
        settings["api_base"],
        timeout=settings["timeout"],
        transport=transport,
    )
    app.register_blueprint(submissions_bp)

    logger.info(f"Submission proxy forwarding to {settings['api_base']}")
    return app
