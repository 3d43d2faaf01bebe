"""
Shop Bridge - Flask Application Entry Point.

A stateless HTTP bridge in front of the upstream GraphQL Admin API.
This is a slim app factory that:
1. Loads configuration (.env + environment)
2. Builds the immutable upstream settings
3. Creates the GraphQL client and services
4. Registers route blueprints
5. Sets up JSON error handlers

ARCHITECTURE:
    Request thread
    └── route handler
        └── StockService / OrderService
            └── AdminGraphQLClient.execute() -> upstream (HTTPS POST)

NO SHARED MUTABLE STATE between requests. Settings, client and services
are created once here and only read afterwards.

A missing SHOPIFY_ADMIN_TOKEN does not stop the app from starting; each
upstream call fails with a ConfigurationError instead.
"""

from __future__ import annotations

import logging
import os

from dotenv import load_dotenv
from flask import Flask
from werkzeug.exceptions import HTTPException

from config import config_for_environment
from logging_config import setup_logging, get_logger
from core.graphql_client import AdminGraphQLClient
from core.settings import UpstreamSettings
from services.stock_service import StockService
from services.order_service import OrderService
from routes import register_blueprints


# Module logger (configured after setup_logging)
logger = get_logger(__name__)


def create_app(config_object=None, graphql_client=None) -> Flask:
    """
    Application factory - creates and configures Flask app.

    Args:
        config_object: Config class or import path for ``app.config.from_object``
            (chosen from FLASK_ENV when omitted)
        graphql_client: Optional replacement for the upstream client
            (anything with ``execute(query, variables)``), used by tests

    Returns:
        Configured Flask application
    """
    load_dotenv(override=True)

    if config_object is None:
        config_object = config_for_environment(os.environ.get("FLASK_ENV", "development"))

    app = Flask(__name__)
    app.config.from_object(config_object)

    # Configure logging
    log_level = logging.DEBUG if app.config.get("DEBUG") else logging.INFO
    enable_file_logging = app.config.get("ENVIRONMENT") == "production"

    root_logger = setup_logging(
        log_level=log_level,
        enable_file_logging=enable_file_logging,
        redact=[app.config.get("SHOPIFY_ADMIN_TOKEN")]
    )

    # Set Flask's logger to use our configured logger
    app.logger.handlers = root_logger.handlers
    app.logger.setLevel(log_level)

    logger.info(f"Starting Shop Bridge in {app.config.get('ENVIRONMENT')} mode")

    # =========================================================================
    # UPSTREAM SETTINGS
    # =========================================================================

    settings = UpstreamSettings.from_config(app.config)
    app.config["UPSTREAM_SETTINGS"] = settings

    if settings.has_access_token:
        logger.info(f"Upstream endpoint: {settings.endpoint}")
    else:
        # Not fatal: requests fail individually until a token is configured
        logger.warning("SHOPIFY_ADMIN_TOKEN is not set - upstream calls will fail")

    # =========================================================================
    # SERVICES INITIALIZATION
    # =========================================================================

    client = graphql_client or AdminGraphQLClient(settings, get_logger("core.graphql_client"))
    app.config["GRAPHQL_CLIENT"] = client

    app.config["STOCK_SERVICE"] = StockService(client)
    app.config["ORDER_SERVICE"] = OrderService(client, settings.order_contract)
    logger.info(
        f"Order mutation contract: {settings.order_contract.argument_name}: "
        f"{settings.order_contract.input_type}"
    )

    # =========================================================================
    # REGISTER BLUEPRINTS
    # =========================================================================

    register_blueprints(app)

    # =========================================================================
    # ERROR HANDLERS
    # =========================================================================

    @app.errorhandler(404)
    def handle_not_found(e):
        return {"error": "Not found"}, 404

    @app.errorhandler(405)
    def handle_method_not_allowed(e):
        return {"error": "Method not allowed"}, 405

    @app.errorhandler(Exception)
    def handle_unexpected_error(e):
        if isinstance(e, HTTPException):
            return {"error": e.description}, e.code
        logger.error(f"Unhandled error: {e}", exc_info=True)
        return {"error": "Internal error"}, 500

    logger.info("Application initialized successfully")
    return app


if __name__ == "__main__":
    app = create_app()
    port = app.config.get("PORT", 3000)
    logger.info(f"Shop Bridge running on port {port}")
    debug_mode = app.config.get("DEBUG", False)
    app.run(host="0.0.0.0", port=port, debug=debug_mode)
