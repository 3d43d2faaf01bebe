"""
Custom exceptions for Shop Bridge.

Exception Hierarchy:
    BridgeError (base)
    ├── ClientInputError         - required field missing or malformed (400)
    ├── NotFoundError            - product or variant missing upstream (404)
    ├── UpstreamValidationError  - upstream userErrors on a mutation (400)
    └── UpstreamTransportError   - network, HTTP or GraphQL failure (500)
        └── ConfigurationError   - access token not configured (500)

Usage:
    Route handlers catch BridgeError and turn it into a JSON response using
    ``status_code`` and ``public_message``. Nothing here is raised at startup:
    a missing token only surfaces when an upstream call is attempted.
"""

from typing import Any, Dict, List, Optional, Union


class BridgeError(Exception):
    """
    Base exception for all Shop Bridge errors.

    Attributes:
        status_code: HTTP status the route handler responds with
        message: Human-readable error message
        details: Optional structured context
    """

    status_code = 500

    def __init__(
        self,
        message: str,
        details: Optional[Union[Dict[str, Any], List[Any]]] = None
    ):
        super().__init__(message)
        self.message = message
        self.details = details

    @property
    def public_message(self) -> str:
        """Message safe to return to the caller."""
        return self.message

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


# =============================================================================
# CLIENT-FACING ERRORS - caller did something the bridge can report back
# =============================================================================

class ClientInputError(BridgeError):
    """Required input missing or malformed. Never contacts upstream."""

    status_code = 400


class NotFoundError(BridgeError):
    """The referenced product (or its first variant) does not exist upstream."""

    status_code = 404


class UpstreamValidationError(BridgeError):
    """
    Upstream accepted the request but rejected it semantically.

    ``details`` is the upstream userErrors list, passed through verbatim.
    """

    status_code = 400

    def __init__(self, message: str, user_errors: List[Dict[str, Any]]):
        super().__init__(message, user_errors)
        self.user_errors = user_errors


# =============================================================================
# UPSTREAM FAILURES - logged in full, reported as a generic 500
# =============================================================================

class UpstreamTransportError(BridgeError):
    """
    Network failure, non-2xx status or top-level GraphQL errors.

    The detail is for the server log only; callers get "Internal error".
    """

    status_code = 500

    @property
    def public_message(self) -> str:
        return "Internal error"


class ConfigurationError(UpstreamTransportError):
    """
    Upstream access token is not configured.

    Raised when a call is attempted, not at startup, so the server can
    still bind its port without a token.
    """

    def __init__(self, setting: str = "SHOPIFY_ADMIN_TOKEN"):
        message = f"Missing {setting} (Admin API token)"
        details = {
            "setting": setting,
            "resolution": f"Set {setting} in the environment or .env"
        }
        super().__init__(message, details)
        self.setting = setting
