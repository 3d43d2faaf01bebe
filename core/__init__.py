"""
Core module for Shop Bridge.

Contains fundamental infrastructure components:
- exceptions: Custom exception hierarchy
- settings: Immutable upstream settings and order mutation contract
- graphql_client: Upstream Admin API GraphQL client
"""

from .exceptions import (
    BridgeError,
    ClientInputError,
    NotFoundError,
    UpstreamValidationError,
    UpstreamTransportError,
    ConfigurationError,
)
from .settings import UpstreamSettings, OrderMutationContract
from .graphql_client import AdminGraphQLClient

__all__ = [
    "BridgeError",
    "ClientInputError",
    "NotFoundError",
    "UpstreamValidationError",
    "UpstreamTransportError",
    "ConfigurationError",
    "UpstreamSettings",
    "OrderMutationContract",
    "AdminGraphQLClient",
]
