"""
checkout_orders.db.repositories.errors

Errors raised by the Order repository.

Responsibilities:
- Separate "order does not exist" (`NotFound`) from storage faults.
- Keep driver exceptions out of the public contract (they are only chained
  as `__cause__`).
"""

from __future__ import annotations


class OrderRepositoryError(Exception):
    """
    Base class for every error the Order repository raises.
    """

    default_message = "order repository error"

    def __init__(self, order_id: str | None = None, message: str | None = None) -> None:
        self.order_id = order_id
        self.message = message or self.default_message
        super().__init__(self.message if order_id is None else f"{self.message}: {order_id}")


class CreationFailed(OrderRepositoryError):
    default_message = "error while creating order"


class UpdateFailed(OrderRepositoryError):
    default_message = "error while updating order"


class LookupFailed(OrderRepositoryError):
    default_message = "error while loading order"


class ListFailed(OrderRepositoryError):
    default_message = "error while listing orders"


class NotFound(OrderRepositoryError, LookupError):
    default_message = "order not found"


# --- Module Notes -----------------------------------------------------------
# Only NotFound is a LookupError; storage faults are not, so `except LookupError`
# never hides a broken database.
