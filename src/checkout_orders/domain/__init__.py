"""
checkout_orders.domain

Checkout domain model consumed by the persistence layer.

Responsibilities:
- Define the Order aggregate and its OrderItem entities.
- Define the repository port implemented by `checkout_orders.db`.
"""

from checkout_orders.domain.order import Order, OrderItem
from checkout_orders.domain.repository import (
    OrderItemView,
    OrderRepositoryInterface,
    OrderView,
)

__all__ = ["Order", "OrderItem", "OrderItemView", "OrderRepositoryInterface", "OrderView"]
