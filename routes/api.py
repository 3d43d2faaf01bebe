"""
API routes (JSON endpoints).

Handles:
- /api/stock - Product stock lookup
- /api/create-order - Order creation for a product's first variant
- /health - Health check endpoint

Every failure is converted to a JSON response here; nothing propagates
out of a handler.
"""

import html
from dataclasses import replace

import bleach
from flask import (
    Blueprint,
    current_app,
    request,
)

from core.exceptions import BridgeError, UpstreamValidationError
from models.order import OrderRequest
from logging_config import get_logger


# Module logger
logger = get_logger(__name__)

api_bp = Blueprint("api", __name__)

MAX_NOTE_LENGTH = 5000
INTERNAL_ERROR = {"error": "Internal error"}


def _sanitize_text(text, max_length: int = None) -> str:
    """Strip HTML tags and truncate free text, leaving plain characters as typed."""
    # bleach escapes &, < and > in what it keeps
    text = html.unescape(bleach.clean(str(text), tags=[], strip=True)).strip()
    if max_length and len(text) > max_length:
        text = text[:max_length]
    return text


def _error_response(endpoint: str, e: BridgeError):
    """Convert a BridgeError to a (body, status) tuple."""
    if e.status_code >= 500:
        # Upstream detail stays in the log
        logger.error(f"{endpoint} error: {e}")
        return INTERNAL_ERROR, 500

    body = {"error": e.public_message}
    if isinstance(e, UpstreamValidationError):
        body["details"] = e.details
    return body, e.status_code


@api_bp.route("/api/stock", methods=["GET"])
def stock():
    """
    Look up a product's total inventory.

    Query params:
        productId: Upstream product identifier (required)

    Returns:
        {"productId", "quantity", "available"}
    """
    product_id = request.args.get("productId", "")

    try:
        stock_service = current_app.config["STOCK_SERVICE"]
        level = stock_service.get_stock(product_id)
        return level.to_dict()

    except BridgeError as e:
        return _error_response("GET /api/stock", e)

    except Exception as e:
        logger.error(f"GET /api/stock error: {e}", exc_info=True)
        return INTERNAL_ERROR, 500


@api_bp.route("/api/create-order", methods=["POST"])
def create_order():
    """
    Create an order for one product.

    JSON body:
        productId: Upstream product identifier (required)
        quantity: Positive line item count (required)
        email: Customer email (optional)
        note: Order note (optional, HTML stripped)

    Returns:
        {"success": true, "order": {...}}
    """
    payload = request.get_json(silent=True)

    try:
        order_request = OrderRequest.from_payload(payload)

        # Defaults are decided on the raw body; a caller note that strips
        # to nothing is sent empty, not replaced
        if isinstance(payload, dict) and payload.get("note"):
            order_request = replace(
                order_request,
                note=_sanitize_text(payload["note"], MAX_NOTE_LENGTH)
            )

        order_service = current_app.config["ORDER_SERVICE"]
        created = order_service.create_order(order_request)

        return {
            "success": True,
            "order": created.to_dict(),
        }

    except BridgeError as e:
        return _error_response("POST /api/create-order", e)

    except Exception as e:
        logger.error(f"POST /api/create-order error: {e}", exc_info=True)
        return INTERNAL_ERROR, 500


@api_bp.route("/health", methods=["GET"])
def health():
    """Health check endpoint. Makes no upstream call."""
    health_status = {
        "status": "ok",
        "environment": current_app.config.get("ENVIRONMENT", "unknown"),
        "checks": {}
    }

    settings = current_app.config.get("UPSTREAM_SETTINGS")
    if settings and settings.has_access_token:
        health_status["checks"]["upstream_token"] = "configured"
    else:
        health_status["checks"]["upstream_token"] = "missing"
        health_status["status"] = "degraded"

    status_code = 200 if health_status["status"] == "ok" else 503
    return health_status, status_code
