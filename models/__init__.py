"""
Data models for Shop Bridge.

This module contains immutable dataclasses for:
- StockLevel: Inventory of one product
- OrderRequest: Validated create-order request
- CreatedOrder: Order reported back by upstream

All of them live for a single request only; the upstream platform is the
system of record.
"""

from .stock import StockLevel
from .order import OrderRequest, CreatedOrder, DEFAULT_EMAIL, DEFAULT_NOTE

__all__ = [
    # Stock models
    "StockLevel",
    # Order models
    "OrderRequest",
    "CreatedOrder",
    "DEFAULT_EMAIL",
    "DEFAULT_NOTE",
]
