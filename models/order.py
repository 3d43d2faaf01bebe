"""
Order data models.

These models represent an order as it flows through the bridge:
request body -> OrderRequest -> orderCreate variables -> CreatedOrder.

OrderRequest is frozen once parsed, so the values sent upstream are exactly
the ones that were validated.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Any, Optional

from core.exceptions import ClientInputError
from core.settings import OrderMutationContract


DEFAULT_EMAIL = "no-email@example.com"
DEFAULT_NOTE = "Order from WeChat Mini Program"


@dataclass(frozen=True)
class OrderRequest:
    """
    A validated create-order request.

    Captured from the POST /api/create-order JSON body.
    """

    product_id: str
    """Upstream product identifier (opaque)."""

    quantity: int
    """Line item count, always > 0."""

    email: str = DEFAULT_EMAIL
    """Customer email, default used when absent."""

    note: str = DEFAULT_NOTE
    """Order note, default used when absent."""

    @classmethod
    def from_payload(cls, payload: Optional[Dict[str, Any]]) -> "OrderRequest":
        """
        Validate and parse a request body.

        Args:
            payload: Decoded JSON body (may be None or not an object)

        Returns:
            OrderRequest with defaults substituted

        Raises:
            ClientInputError: If productId or quantity is missing, or
                quantity is not a positive integer
        """
        if not isinstance(payload, dict):
            payload = {}

        product_id = payload.get("productId")
        quantity = payload.get("quantity")

        if not product_id or not quantity:
            raise ClientInputError("Missing productId or quantity")

        return cls(
            product_id=str(product_id),
            quantity=_parse_quantity(quantity),
            email=payload.get("email") or DEFAULT_EMAIL,
            note=payload.get("note") or DEFAULT_NOTE,
        )

    def to_order_input(self, variant_id: str, contract: OrderMutationContract) -> Dict[str, Any]:
        """
        Build the orderCreate input object.

        Args:
            variant_id: Resolved first variant of the product
            contract: Tag and financial status literals for this API version
        """
        return {
            "email": self.email,
            "lineItems": [
                {
                    "quantity": self.quantity,
                    "variantId": variant_id,
                }
            ],
            "tags": [contract.tag],
            "note": self.note,
            # No payment capture behind this bridge; orders are marked paid
            "financialStatus": contract.financial_status,
        }


@dataclass(frozen=True)
class CreatedOrder:
    """
    An order as reported back by upstream orderCreate.

    Values are copied verbatim: the amount stays the decimal string upstream
    sent, nothing is recomputed or rounded.
    """

    id: str
    name: str
    email: Optional[str]
    amount: Optional[str]
    currency_code: Optional[str]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the ``order`` object of the JSON response."""
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "totalPrice": {
                "amount": self.amount,
                "currencyCode": self.currency_code,
            },
        }

    @classmethod
    def from_api_data(cls, order: Dict[str, Any]) -> "CreatedOrder":
        """Create from the upstream ``order`` node."""
        price_set = order.get("totalPriceSet") or {}
        shop_money = price_set.get("shopMoney") or {}
        return cls(
            id=order.get("id"),
            name=order.get("name"),
            email=order.get("email"),
            amount=shop_money.get("amount"),
            currency_code=shop_money.get("currencyCode"),
        )


def _parse_quantity(value: Any) -> int:
    """
    Coerce a JSON quantity to a positive int.

    Accepts ints, integral floats (``2.0``) and digit strings (``"2"``).
    """
    if isinstance(value, bool):
        raise ClientInputError("Invalid quantity")

    if isinstance(value, int):
        quantity = value
    elif isinstance(value, float) and value.is_integer():
        quantity = int(value)
    elif isinstance(value, str) and value.strip().isdigit():
        quantity = int(value.strip())
    else:
        raise ClientInputError("Invalid quantity")

    if quantity <= 0:
        raise ClientInputError("Invalid quantity")
    return quantity
