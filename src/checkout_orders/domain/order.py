"""
checkout_orders.domain.order

Order aggregate.

Responsibilities:
- Hold an order header and its ordered line items as one consistency unit.
- Derive the order total from item snapshots (price x quantity).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal

CENT = Decimal("0.01")


@dataclass(frozen=True, slots=True)
class OrderItem:
    """
    Line item owned by an Order. `name` and `price` are snapshots of the
    product at the time the order was placed.
    """

    id: str
    name: str
    price: Decimal
    product_id: str
    quantity: int

    def __post_init__(self) -> None:
        # Accept ints/strings for convenience; money is always held as Decimal.
        if not isinstance(self.price, Decimal):
            object.__setattr__(self, "price", Decimal(str(self.price)))
        if not self.id:
            raise ValueError("item id is required")
        if not self.product_id:
            raise ValueError("product id is required")
        if not self.price.is_finite() or self.price < 0:
            raise ValueError("price must be a non-negative amount")
        if self.price != self.price.quantize(CENT):
            # Stored as NUMERIC(12, 2); finer amounts would not read back unchanged.
            raise ValueError("price must not have more than two decimal places")
        if isinstance(self.quantity, bool) or not isinstance(self.quantity, int):
            raise ValueError("quantity must be an integer")
        if self.quantity <= 0:
            raise ValueError("quantity must be greater than zero")

    def total(self) -> Decimal:
        return self.price * self.quantity


@dataclass(slots=True)
class Order:
    id: str
    customer_id: str
    items: list[OrderItem] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("order id is required")
        if not self.customer_id:
            raise ValueError("customer id is required")
        self.items = list(self.items)
        if len({item.id for item in self.items}) != len(self.items):
            raise ValueError(f"order {self.id!r} has duplicate item ids")

    def add_item(self, item: OrderItem) -> None:
        if any(existing.id == item.id for existing in self.items):
            raise ValueError(f"item {item.id!r} already belongs to order {self.id!r}")
        self.items.append(item)

    def total(self) -> Decimal:
        return sum((item.total() for item in self.items), Decimal("0"))


# --- Module Notes -----------------------------------------------------------
# An order without items is valid here (total 0); rejecting it is a checkout
# policy decision, not a persistence concern.
