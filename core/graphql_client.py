"""
Upstream Admin API GraphQL client.

A thin wrapper over a single ``requests.post`` call. Services only depend on
``execute(query, variables)``, so tests swap in a fake with the same method.

CALL DISCIPLINE:
    - Exactly one HTTP request per execute() call
    - Synchronous, no retries
    - No timeout override (requests' default applies)
    - No session or connection pool of its own

Usage:
    client = AdminGraphQLClient(settings)
    data = client.execute(query, {"id": product_id})
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import requests

from .exceptions import ConfigurationError, UpstreamTransportError
from .settings import UpstreamSettings


ACCESS_TOKEN_HEADER = "X-Shopify-Access-Token"


class AdminGraphQLClient:
    """
    Client for the upstream GraphQL Admin API.

    Holds only immutable settings, so one instance is shared by all request
    threads.
    """

    def __init__(
        self,
        settings: UpstreamSettings,
        logger: Optional[logging.Logger] = None
    ):
        """
        Args:
            settings: Upstream connection settings (token may be None)
            logger: Logger instance (creates default if not provided)
        """
        self._settings = settings
        self._logger = logger or logging.getLogger("shop_bridge.core.graphql_client")

    @property
    def endpoint(self) -> str:
        return self._settings.endpoint

    def execute(self, query: str, variables: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """
        Send one GraphQL document to the upstream endpoint.

        Args:
            query: GraphQL query or mutation document
            variables: GraphQL variables (defaults to an empty object)

        Returns:
            The ``data`` object of the response

        Raises:
            ConfigurationError: If no access token is configured
            UpstreamTransportError: On network failure, non-2xx status,
                unreadable body or a populated top-level ``errors`` list
        """
        if not self._settings.has_access_token:
            raise ConfigurationError()

        headers = {
            "Content-Type": "application/json",
            ACCESS_TOKEN_HEADER: self._settings.access_token,
        }
        body = {"query": query, "variables": variables or {}}

        try:
            response = requests.post(self.endpoint, json=body, headers=headers)
        except requests.RequestException as e:
            self._logger.error(f"Upstream request failed: {e}")
            raise UpstreamTransportError(f"Upstream request failed: {e}") from e

        try:
            payload = response.json()
        except ValueError:
            payload = None

        if not response.ok:
            self._logger.error(
                f"Upstream HTTP error {response.status_code}: "
                f"{payload if payload is not None else response.text}"
            )
            raise UpstreamTransportError(
                f"Upstream HTTP {response.status_code}",
                {"status_code": response.status_code}
            )

        if not isinstance(payload, dict):
            self._logger.error(f"Upstream returned a non-JSON body: {response.text[:200]}")
            raise UpstreamTransportError("Invalid JSON in upstream response")

        errors = payload.get("errors")
        if errors:
            self._logger.error(f"Upstream GraphQL errors: {errors}")
            raise UpstreamTransportError(_first_error_message(errors), {"errors": errors})

        return payload.get("data") or {}


def _first_error_message(errors: Any) -> str:
    """Message of the first GraphQL error, or a generic fallback."""
    if isinstance(errors, list) and errors and isinstance(errors[0], dict):
        message = errors[0].get("message")
        if message:
            return message
    return "Upstream GraphQL error"
