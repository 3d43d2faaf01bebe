"""
Services layer for Shop Bridge.

This module contains the request/response mapping between the bridge's
endpoints and the upstream GraphQL schema:
- StockService: Product inventory lookup
- OrderService: Variant resolution and order creation

Both are created once in create_app() and share one GraphQL client.
Neither holds per-request state.
"""

from .stock_service import StockService
from .order_service import OrderService, render_order_mutation

__all__ = [
    "StockService",
    "OrderService",
    "render_order_mutation",
]
