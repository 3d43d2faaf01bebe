"""
Configuration for Shop Bridge.

The upstream access token is NOT required at startup. The server starts
and binds its port without it; every upstream call then fails at call time
with a ConfigurationError.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env file early so environment variables are available for Config class
# This must happen before the Config class is defined
load_dotenv(override=True)

# Base directory (where this file lives)
BASE_DIR = Path(__file__).resolve().parent


class Config:
    """Default configuration for the Flask application."""

    # Flask settings
    ENVIRONMENT = os.environ.get("FLASK_ENV", "development")
    DEBUG = os.environ.get("FLASK_DEBUG", "0") == "1"

    # Listening port (Render and similar hosts inject PORT)
    PORT = int(os.environ.get("PORT", "3000"))

    # ==========================================================================
    # Upstream Admin API
    # ==========================================================================
    # SHOPIFY_DOMAIN:      store domain, e.g. edd11f-2.myshopify.com
    # SHOPIFY_ADMIN_TOKEN: Admin API access token (shpat_...), no default
    # SHOPIFY_API_VERSION: pinned Admin API version
    # ==========================================================================
    SHOPIFY_DOMAIN = os.environ.get("SHOPIFY_DOMAIN", "edd11f-2.myshopify.com")
    SHOPIFY_ADMIN_TOKEN = os.environ.get("SHOPIFY_ADMIN_TOKEN")
    SHOPIFY_API_VERSION = os.environ.get("SHOPIFY_API_VERSION", "2024-07")

    # ==========================================================================
    # Order mutation contract
    # ==========================================================================
    # orderCreate's input shape depends on the pinned API version:
    #   2024-07 and later: orderCreate(order: OrderCreateOrderInput!)
    #   older versions:    orderCreate(input: OrderInput!)
    # Keep these in step with SHOPIFY_API_VERSION.
    #
    # ORDER_FINANCIAL_STATUS: orders are marked paid unconditionally, there is
    #   no payment capture behind this bridge.
    # ==========================================================================
    SHOPIFY_ORDER_INPUT_ARGUMENT = os.environ.get("SHOPIFY_ORDER_INPUT_ARGUMENT", "order")
    SHOPIFY_ORDER_INPUT_TYPE = os.environ.get("SHOPIFY_ORDER_INPUT_TYPE", "OrderCreateOrderInput")
    ORDER_TAG = os.environ.get("ORDER_TAG", "WeChat Mini Program")
    ORDER_FINANCIAL_STATUS = os.environ.get("ORDER_FINANCIAL_STATUS", "PAID")


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False
    TESTING = False
    ENVIRONMENT = "production"


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = os.environ.get("FLASK_DEBUG", "1") == "1"
    TESTING = False


class TestingConfig(Config):
    """Testing configuration."""
    DEBUG = False
    TESTING = True
    ENVIRONMENT = "testing"
    SHOPIFY_DOMAIN = "test-shop.myshopify.com"
    SHOPIFY_ADMIN_TOKEN = "shpat_test_token"
    SHOPIFY_API_VERSION = "2024-07"


def config_for_environment(environment: str):
    """Config class for a FLASK_ENV value (development when unknown)."""
    return {
        "production": ProductionConfig,
        "testing": TestingConfig,
    }.get(environment, DevelopmentConfig)
