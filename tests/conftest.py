"""
Shared fixtures for Shop Bridge tests.

FakeGraphQLClient stands in for AdminGraphQLClient. It records every
execute() call and answers from a queue of canned responses, so tests can
assert both on the HTTP response and on what would have gone upstream.
"""

import pytest

from app import create_app
from config import TestingConfig


class FakeGraphQLClient:
    """Recording test double with the same execute() signature as the real client."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls = []

    def queue(self, response):
        self.responses.append(response)

    @property
    def call_count(self) -> int:
        return len(self.calls)

    def execute(self, query, variables=None):
        self.calls.append({"query": query, "variables": variables or {}})
        if not self.responses:
            raise AssertionError("Unexpected upstream call")
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


# Fixtures

@pytest.fixture
def fake_client():
    """Create an empty recording GraphQL client."""
    return FakeGraphQLClient()


@pytest.fixture
def app(fake_client):
    """Create a Flask app wired to the fake client."""
    return create_app(TestingConfig, graphql_client=fake_client)


@pytest.fixture
def client(app):
    """Create a Flask test client."""
    return app.test_client()


@pytest.fixture
def variant_response():
    """Upstream answer to the variant lookup for a product with one variant."""
    return {
        "product": {
            "id": "gid://shopify/Product/1001",
            "title": "Jasmine Tea",
            "variants": {
                "edges": [
                    {"node": {"id": "gid://shopify/ProductVariant/2002"}}
                ]
            }
        }
    }


@pytest.fixture
def order_response():
    """Upstream answer to a successful orderCreate."""
    return {
        "orderCreate": {
            "order": {
                "id": "gid://shopify/Order/3003",
                "name": "#1042",
                "email": "buyer@example.com",
                "totalPriceSet": {
                    "shopMoney": {"amount": "59.80", "currencyCode": "CNY"}
                }
            },
            "userErrors": []
        }
    }
