"""
Order creation service.

Creating an order is a two-step sequential protocol against upstream:

    1. Resolve the product's first variant (read-only query)
    2. Submit orderCreate with that variant as the single line item

There is no atomicity between the steps and no compensation when step 2
fails after step 1 succeeded. Step 1 writes nothing, so a failed step 2
leaves no partial order behind; the caller simply gets the error.

Orders are created with the contract's financial status (PAID by default).
This bridge does not capture payment.
"""

from __future__ import annotations

from typing import Any, Dict

from core.exceptions import NotFoundError, UpstreamTransportError, UpstreamValidationError
from core.graphql_client import AdminGraphQLClient
from core.settings import OrderMutationContract
from models.order import CreatedOrder, OrderRequest
from logging_config import get_logger


# Module logger
logger = get_logger(__name__)


VARIANT_QUERY = """
query getVariant($id: ID!) {
  product(id: $id) {
    id
    title
    variants(first: 1) {
      edges {
        node {
          id
        }
      }
    }
  }
}
"""

ORDER_MUTATION_TEMPLATE = """
mutation createOrder(${argument}: {input_type}!) {{
  orderCreate({argument}: ${argument}) {{
    order {{
      id
      name
      email
      totalPriceSet {{
        shopMoney {{ amount currencyCode }}
      }}
    }}
    userErrors {{
      field
      message
    }}
  }}
}}
"""


def render_order_mutation(contract: OrderMutationContract) -> str:
    """Render the orderCreate document for the contract's API version."""
    return ORDER_MUTATION_TEMPLATE.format(
        argument=contract.argument_name,
        input_type=contract.input_type,
    )


class OrderService:
    """
    Creates upstream orders for a single product.

    The mutation document is rendered once at construction; the contract
    is immutable.
    """

    def __init__(self, client: AdminGraphQLClient, contract: OrderMutationContract):
        self._client = client
        self._contract = contract
        self._mutation = render_order_mutation(contract)

    @property
    def mutation(self) -> str:
        return self._mutation

    def create_order(self, order_request: OrderRequest) -> CreatedOrder:
        """
        Create an order for the product's first variant.

        Args:
            order_request: Validated request (defaults already substituted)

        Returns:
            CreatedOrder with values verbatim from upstream

        Raises:
            NotFoundError: Product missing or has no variants (no mutation sent)
            UpstreamValidationError: orderCreate returned userErrors
            UpstreamTransportError: On any upstream failure
        """
        variant_id = self.resolve_variant_id(order_request.product_id)

        order_input = order_request.to_order_input(variant_id, self._contract)
        logger.info(
            f"Creating order: product={order_request.product_id} "
            f"variant={variant_id} quantity={order_request.quantity}"
        )

        data = self._client.execute(
            self._mutation,
            {self._contract.argument_name: order_input}
        )
        result = data.get("orderCreate")
        if not result:
            raise UpstreamTransportError("orderCreate returned no payload")

        user_errors = result.get("userErrors") or []
        if user_errors:
            logger.error(f"orderCreate userErrors: {user_errors}")
            raise UpstreamValidationError("Shopify order error", user_errors)

        order = result.get("order")
        if not order:
            raise UpstreamTransportError("orderCreate returned no order")

        created = CreatedOrder.from_api_data(order)
        logger.info(f"Order created: {created.name} ({created.id})")
        return created

    def resolve_variant_id(self, product_id: str) -> str:
        """
        Resolve the first purchasable variant of a product.

        Raises:
            NotFoundError: If the product or its first variant is missing
        """
        data = self._client.execute(VARIANT_QUERY, {"id": product_id})
        product = data.get("product")

        edges = _variant_edges(product) if product else []
        if not edges:
            logger.info(f"Product or variant not found: {product_id}")
            raise NotFoundError("Product or variant not found", {"productId": product_id})

        return edges[0]["node"]["id"]


def _variant_edges(product: Dict[str, Any]) -> list:
    variants = product.get("variants") or {}
    return variants.get("edges") or []
