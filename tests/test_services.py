"""
Unit tests for StockService and OrderService.

Services are exercised directly against the recording fake client.
"""

import pytest

from core.exceptions import (
    ClientInputError,
    NotFoundError,
    UpstreamTransportError,
    UpstreamValidationError,
)
from core.settings import OrderMutationContract, UpstreamSettings
from models.order import OrderRequest, DEFAULT_EMAIL, DEFAULT_NOTE
from services.order_service import OrderService, render_order_mutation
from services.stock_service import StockService

from conftest import FakeGraphQLClient


# Tests for StockService

class TestStockService:
    """Test stock lookup mapping."""

    def test_zero_inventory_is_unavailable(self):
        fake = FakeGraphQLClient({"product": {"id": "gid://1", "totalInventory": 0}})

        level = StockService(fake).get_stock("gid://1")

        assert level.quantity == 0
        assert level.available is False

    def test_positive_inventory_is_available(self):
        fake = FakeGraphQLClient({"product": {"id": "gid://1", "totalInventory": 17}})

        level = StockService(fake).get_stock("gid://1")

        assert level.quantity == 17
        assert level.available is True
        assert fake.calls[0]["variables"] == {"id": "gid://1"}
        assert "totalInventory" in fake.calls[0]["query"]

    def test_oversold_inventory_is_clamped_to_zero(self):
        fake = FakeGraphQLClient({"product": {"id": "gid://1", "totalInventory": -4}})

        level = StockService(fake).get_stock("gid://1")

        assert level.to_dict() == {"productId": "gid://1", "quantity": 0, "available": False}

    def test_null_inventory_counts_as_zero(self):
        fake = FakeGraphQLClient({"product": {"id": "gid://1", "totalInventory": None}})

        level = StockService(fake).get_stock("gid://1")

        assert level.to_dict() == {"productId": "gid://1", "quantity": 0, "available": False}

    def test_missing_product_raises_not_found(self):
        fake = FakeGraphQLClient({"product": None})

        with pytest.raises(NotFoundError):
            StockService(fake).get_stock("gid://missing")

    def test_empty_product_id_makes_no_call(self):
        fake = FakeGraphQLClient()

        with pytest.raises(ClientInputError):
            StockService(fake).get_stock("")

        assert fake.call_count == 0

    def test_upstream_failure_propagates(self):
        fake = FakeGraphQLClient(UpstreamTransportError("Upstream HTTP 503"))

        with pytest.raises(UpstreamTransportError):
            StockService(fake).get_stock("gid://1")


# Tests for OrderService

class TestOrderService:
    """Test the two-step variant lookup + orderCreate flow."""

    def test_success_returns_order_verbatim(self, variant_response, order_response):
        fake = FakeGraphQLClient(variant_response, order_response)
        service = OrderService(fake, OrderMutationContract())

        created = service.create_order(OrderRequest(product_id="gid://shopify/Product/1001", quantity=2))

        assert created.to_dict() == {
            "id": "gid://shopify/Order/3003",
            "name": "#1042",
            "email": "buyer@example.com",
            "totalPrice": {"amount": "59.80", "currencyCode": "CNY"},
        }
        assert fake.call_count == 2

    def test_mutation_variables(self, variant_response, order_response):
        fake = FakeGraphQLClient(variant_response, order_response)
        service = OrderService(fake, OrderMutationContract())

        service.create_order(OrderRequest(
            product_id="gid://shopify/Product/1001",
            quantity=3,
            email="buyer@example.com",
            note="Gift wrap please",
        ))

        assert fake.calls[1]["variables"] == {
            "order": {
                "email": "buyer@example.com",
                "lineItems": [
                    {"quantity": 3, "variantId": "gid://shopify/ProductVariant/2002"}
                ],
                "tags": ["WeChat Mini Program"],
                "note": "Gift wrap please",
                "financialStatus": "PAID",
            }
        }

    def test_defaults_are_sent_upstream(self, variant_response, order_response):
        fake = FakeGraphQLClient(variant_response, order_response)
        service = OrderService(fake, OrderMutationContract())

        service.create_order(OrderRequest.from_payload({"productId": "gid://1", "quantity": 1}))

        order_input = fake.calls[1]["variables"]["order"]
        assert order_input["email"] == DEFAULT_EMAIL == "no-email@example.com"
        assert order_input["note"] == DEFAULT_NOTE == "Order from WeChat Mini Program"

    def test_product_without_variants_skips_mutation(self):
        fake = FakeGraphQLClient({"product": {"id": "gid://1", "title": "Empty", "variants": {"edges": []}}})
        service = OrderService(fake, OrderMutationContract())

        with pytest.raises(NotFoundError) as exc_info:
            service.create_order(OrderRequest(product_id="gid://1", quantity=1))

        assert exc_info.value.message == "Product or variant not found"
        assert fake.call_count == 1

    def test_missing_product_skips_mutation(self):
        fake = FakeGraphQLClient({"product": None})
        service = OrderService(fake, OrderMutationContract())

        with pytest.raises(NotFoundError):
            service.create_order(OrderRequest(product_id="gid://missing", quantity=1))

        assert fake.call_count == 1

    def test_user_errors_raise_validation_error(self, variant_response):
        user_errors = [{"field": ["order", "lineItems", "0", "quantity"], "message": "Quantity is invalid"}]
        fake = FakeGraphQLClient(
            variant_response,
            {"orderCreate": {"order": None, "userErrors": user_errors}},
        )
        service = OrderService(fake, OrderMutationContract())

        with pytest.raises(UpstreamValidationError) as exc_info:
            service.create_order(OrderRequest(product_id="gid://1", quantity=1))

        assert exc_info.value.user_errors == user_errors
        assert exc_info.value.status_code == 400

    def test_mutation_failure_after_variant_lookup_is_not_compensated(self, variant_response):
        fake = FakeGraphQLClient(variant_response, UpstreamTransportError("Upstream HTTP 500"))
        service = OrderService(fake, OrderMutationContract())

        with pytest.raises(UpstreamTransportError):
            service.create_order(OrderRequest(product_id="gid://1", quantity=1))

        # Variant lookup + failed mutation, nothing else
        assert fake.call_count == 2

    def test_empty_order_create_payload_is_transport_error(self, variant_response):
        fake = FakeGraphQLClient(variant_response, {"orderCreate": None})
        service = OrderService(fake, OrderMutationContract())

        with pytest.raises(UpstreamTransportError):
            service.create_order(OrderRequest(product_id="gid://1", quantity=1))


# Tests for the versioned mutation contract

class TestOrderMutationContract:
    """Test that the mutation follows the configured API contract."""

    def test_default_contract_uses_order_argument(self):
        mutation = render_order_mutation(OrderMutationContract())

        assert "mutation createOrder($order: OrderCreateOrderInput!)" in mutation
        assert "orderCreate(order: $order)" in mutation
        assert "userErrors" in mutation

    def test_legacy_contract_uses_input_argument(self, variant_response, order_response):
        contract = OrderMutationContract(
            argument_name="input",
            input_type="OrderInput",
            tag="wechat mini program",
            financial_status="paid",
        )
        fake = FakeGraphQLClient(variant_response, order_response)
        service = OrderService(fake, contract)

        service.create_order(OrderRequest(product_id="gid://1", quantity=1))

        assert "mutation createOrder($input: OrderInput!)" in service.mutation
        assert "orderCreate(input: $input)" in service.mutation
        order_input = fake.calls[1]["variables"]["input"]
        assert order_input["tags"] == ["wechat mini program"]
        assert order_input["financialStatus"] == "paid"

    def test_contract_from_config(self):
        settings = UpstreamSettings.from_config({
            "SHOPIFY_DOMAIN": "shop.example.com",
            "SHOPIFY_ADMIN_TOKEN": "",
            "SHOPIFY_ORDER_INPUT_ARGUMENT": "input",
            "SHOPIFY_ORDER_INPUT_TYPE": "OrderInput",
        })

        assert settings.access_token is None
        assert settings.has_access_token is False
        assert settings.api_version == "2024-07"
        assert settings.endpoint == "https://shop.example.com/admin/api/2024-07/graphql.json"
        assert settings.order_contract.argument_name == "input"
        assert settings.order_contract.input_type == "OrderInput"
        assert settings.order_contract.tag == "WeChat Mini Program"
        assert settings.order_contract.financial_status == "PAID"

    def test_settings_repr_hides_token(self):
        settings = UpstreamSettings(access_token="shpat_secret")

        assert "shpat_secret" not in repr(settings)
