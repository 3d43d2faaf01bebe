"""
Stock data models.

A StockLevel is built from the upstream product node for a single request
and discarded afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Any


@dataclass(frozen=True)
class StockLevel:
    """Total inventory of one product as reported upstream."""

    product_id: str
    """Product identifier exactly as the caller sent it."""

    quantity: int
    """Total inventory across variants, never negative (0 when upstream reports null)."""

    @property
    def available(self) -> bool:
        """True iff at least one unit is in stock."""
        return self.quantity > 0

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the JSON response body."""
        return {
            "productId": self.product_id,
            "quantity": self.quantity,
            "available": self.available,
        }

    @classmethod
    def from_api_data(cls, product_id: str, product: Dict[str, Any]) -> "StockLevel":
        """
        Create from the upstream ``product`` node.

        Args:
            product_id: Identifier the caller asked for
            product: ``{"id": ..., "totalInventory": ...}``
        """
        quantity = product.get("totalInventory")
        # Oversold products report negative inventory; callers only see >= 0
        return cls(product_id=product_id, quantity=max(quantity or 0, 0))
