"""
Immutable upstream settings.

Built once in create_app() from the Flask config and handed to the GraphQL
client and the services. Nothing reads the environment after that point.

Usage:
    settings = UpstreamSettings.from_config(app.config)
    client = AdminGraphQLClient(settings)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional


DEFAULT_DOMAIN = "edd11f-2.myshopify.com"
DEFAULT_API_VERSION = "2024-07"


@dataclass(frozen=True)
class OrderMutationContract:
    """
    Versioned shape of the orderCreate mutation.

    The argument name and input type changed between Admin API versions
    (``order: OrderCreateOrderInput!`` vs ``input: OrderInput!``), so both
    live here next to the literals that go into every order.
    """

    argument_name: str = "order"
    """Mutation argument and GraphQL variable name."""

    input_type: str = "OrderCreateOrderInput"
    """GraphQL input object type of the argument."""

    tag: str = "WeChat Mini Program"
    """Tag marking the order's channel origin."""

    financial_status: str = "PAID"
    """Orders are marked paid unconditionally (no payment capture)."""

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> "OrderMutationContract":
        defaults = cls()
        return cls(
            argument_name=config.get("SHOPIFY_ORDER_INPUT_ARGUMENT") or defaults.argument_name,
            input_type=config.get("SHOPIFY_ORDER_INPUT_TYPE") or defaults.input_type,
            tag=config.get("ORDER_TAG") or defaults.tag,
            financial_status=config.get("ORDER_FINANCIAL_STATUS") or defaults.financial_status,
        )


@dataclass(frozen=True)
class UpstreamSettings:
    """Connection settings for the upstream Admin API."""

    domain: str = DEFAULT_DOMAIN
    access_token: Optional[str] = field(default=None, repr=False)
    api_version: str = DEFAULT_API_VERSION
    order_contract: OrderMutationContract = field(default_factory=OrderMutationContract)

    @property
    def endpoint(self) -> str:
        """GraphQL endpoint URL."""
        return f"https://{self.domain}/admin/api/{self.api_version}/graphql.json"

    @property
    def has_access_token(self) -> bool:
        return bool(self.access_token)

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> "UpstreamSettings":
        """
        Create settings from a Flask config (or any mapping).

        A missing token is kept as None; it is checked per call.
        """
        return cls(
            domain=config.get("SHOPIFY_DOMAIN") or DEFAULT_DOMAIN,
            access_token=config.get("SHOPIFY_ADMIN_TOKEN") or None,
            api_version=config.get("SHOPIFY_API_VERSION") or DEFAULT_API_VERSION,
            order_contract=OrderMutationContract.from_config(config),
        )
