"""
Stock lookup service.

One read-only GraphQL query per lookup. Nothing is cached: repeating a
lookup against unchanged upstream state gives the same StockLevel.

Usage:
    stock_service = StockService(graphql_client)
    level = stock_service.get_stock("gid://shopify/Product/123")
"""

from __future__ import annotations

from core.exceptions import ClientInputError, NotFoundError
from core.graphql_client import AdminGraphQLClient
from models.stock import StockLevel
from logging_config import get_logger


# Module logger
logger = get_logger(__name__)


STOCK_QUERY = """
query getStock($id: ID!) {
  product(id: $id) {
    id
    totalInventory
  }
}
"""


class StockService:
    """
    Resolves a product's total inventory.

    Attributes:
        client: Anything with ``execute(query, variables) -> dict``
    """

    def __init__(self, client: AdminGraphQLClient):
        self._client = client

    def get_stock(self, product_id: str) -> StockLevel:
        """
        Look up a product's stock.

        Args:
            product_id: Opaque upstream product identifier

        Returns:
            StockLevel with quantity and availability

        Raises:
            ClientInputError: If product_id is empty (no upstream call)
            NotFoundError: If upstream has no such product
            UpstreamTransportError: On any upstream failure
        """
        if not product_id:
            raise ClientInputError("Missing productId")

        logger.debug(f"Fetching stock for {product_id}")
        data = self._client.execute(STOCK_QUERY, {"id": product_id})

        product = data.get("product")
        if not product:
            logger.info(f"Product not found: {product_id}")
            raise NotFoundError("Product not found", {"productId": product_id})

        return StockLevel.from_api_data(product_id, product)
