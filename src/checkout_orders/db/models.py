"""
checkout_orders.db.models

Relational projection of the Order aggregate.

Responsibilities:
- OrderRecord: one header row per order (`orders`).
- OrderItemRecord: one row per line item (`order_items`), owned by its header.

`seq` and `position` are bookkeeping columns that preserve insertion order;
they never leave the persistence layer.
"""

from __future__ import annotations

from decimal import Decimal

from sqlalchemy import ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from checkout_orders.db.base import Base

# Two decimal places: prices and totals are currency amounts.
Money = Numeric(12, 2, asdecimal=True)


class OrderRecord(Base):
    __tablename__ = "orders"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    customer_id: Mapped[str] = mapped_column(String(64), nullable=False)
    total: Mapped[Decimal] = mapped_column(Money, nullable=False)
    seq: Mapped[int] = mapped_column(Integer, nullable=False, index=True)

    items: Mapped[list[OrderItemRecord]] = relationship(
        back_populates="order",
        cascade="all, delete-orphan",
        order_by="OrderItemRecord.position",
    )


class OrderItemRecord(Base):
    __tablename__ = "order_items"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    name: Mapped[str] = mapped_column(String(256), nullable=False)
    price: Mapped[Decimal] = mapped_column(Money, nullable=False)
    quantity: Mapped[int] = mapped_column(Integer, nullable=False)
    order_id: Mapped[str] = mapped_column(
        String(64), ForeignKey("orders.id", ondelete="CASCADE"), nullable=False, index=True
    )
    product_id: Mapped[str] = mapped_column(String(64), nullable=False)
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    order: Mapped[OrderRecord] = relationship(back_populates="items")


# --- Module Notes -----------------------------------------------------------
# `order_items.id` is globally unique, so an item id cannot be reused across
# orders; the repository surfaces that as a write failure.
