"""Unit tests for request parsing and response shaping models."""

import pytest

from core.exceptions import ClientInputError
from models.order import CreatedOrder, OrderRequest
from models.stock import StockLevel


class TestOrderRequest:
    """Test create-order body validation."""

    def test_parses_full_payload(self):
        order_request = OrderRequest.from_payload({
            "productId": "gid://shopify/Product/1",
            "quantity": 2,
            "email": "buyer@example.com",
            "note": "Leave at the door",
        })

        assert order_request == OrderRequest(
            product_id="gid://shopify/Product/1",
            quantity=2,
            email="buyer@example.com",
            note="Leave at the door",
        )

    @pytest.mark.parametrize("payload", [
        None,
        [],
        {},
        {"productId": "gid://1"},
        {"quantity": 1},
        {"productId": "", "quantity": 1},
        {"productId": "gid://1", "quantity": 0},
    ])
    def test_missing_fields(self, payload):
        with pytest.raises(ClientInputError) as exc_info:
            OrderRequest.from_payload(payload)

        assert exc_info.value.message == "Missing productId or quantity"

    @pytest.mark.parametrize("quantity", [-1, 1.5, "two", True, [1]])
    def test_invalid_quantity(self, quantity):
        with pytest.raises(ClientInputError) as exc_info:
            OrderRequest.from_payload({"productId": "gid://1", "quantity": quantity})

        assert exc_info.value.message == "Invalid quantity"

    @pytest.mark.parametrize("quantity,expected", [(3, 3), ("4", 4), (5.0, 5)])
    def test_quantity_coercion(self, quantity, expected):
        order_request = OrderRequest.from_payload({"productId": "gid://1", "quantity": quantity})

        assert order_request.quantity == expected

    def test_blank_optional_fields_get_defaults(self):
        order_request = OrderRequest.from_payload({
            "productId": "gid://1", "quantity": 1, "email": "", "note": None,
        })

        assert order_request.email == "no-email@example.com"
        assert order_request.note == "Order from WeChat Mini Program"


class TestResponseModels:

    def test_stock_level_availability(self):
        assert StockLevel("gid://1", 0).available is False
        assert StockLevel("gid://1", 1).available is True

    def test_created_order_without_price_set(self):
        created = CreatedOrder.from_api_data({"id": "gid://o/1", "name": "#1", "email": None})

        assert created.to_dict()["totalPrice"] == {"amount": None, "currencyCode": None}
