"""
checkout_orders.domain.repository

Repository port for the Order aggregate.

Responsibilities:
- Define the read shape (`OrderView`) returned to callers.
- Define the async operations any Order store must provide.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import TypedDict

from checkout_orders.domain.order import Order


class OrderItemView(TypedDict):
    id: str
    name: str
    price: Decimal
    quantity: int
    order_id: str
    product_id: str


class OrderView(TypedDict):
    id: str
    customer_id: str
    total: Decimal
    items: list[OrderItemView]


class OrderRepositoryInterface(ABC):
    @abstractmethod
    async def create(self, order: Order) -> None: ...

    @abstractmethod
    async def update(self, order: Order) -> None: ...

    @abstractmethod
    async def find(self, order_id: str) -> OrderView: ...

    @abstractmethod
    async def find_all(self) -> list[OrderView]: ...


# --- Module Notes -----------------------------------------------------------
# Views carry the persisted snapshots as stored; `total` is the stored column,
# callers that need a trusted figure recompute it from `items`.
