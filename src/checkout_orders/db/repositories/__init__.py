"""
checkout_orders.db.repositories

Repository package.

Responsibilities:
- Group data-access repositories and their error types.
"""

from checkout_orders.db.repositories.errors import (
    CreationFailed,
    ListFailed,
    LookupFailed,
    NotFound,
    OrderRepositoryError,
    UpdateFailed,
)
from checkout_orders.db.repositories.orders import OrderRepository

__all__ = [
    "CreationFailed",
    "ListFailed",
    "LookupFailed",
    "NotFound",
    "OrderRepository",
    "OrderRepositoryError",
    "UpdateFailed",
]
