"""
checkout_orders.db.repositories.orders

Repository for the Order aggregate.

Responsibilities:
- Flatten an Order into one header row plus one row per item.
- Rebuild the `OrderView` read shape from header and item rows.
- Translate storage faults into the errors of `db.repositories.errors`.
"""

from __future__ import annotations

from sqlalchemy import ScalarSelect, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.orm import selectinload

from checkout_orders.db.models import OrderItemRecord, OrderRecord
from checkout_orders.db.repositories.errors import (
    CreationFailed,
    ListFailed,
    LookupFailed,
    NotFound,
    UpdateFailed,
)
from checkout_orders.domain.order import Order, OrderItem
from checkout_orders.domain.repository import OrderItemView, OrderRepositoryInterface, OrderView
from checkout_orders.observability.logging import get_logger

log = get_logger(__name__)


class OrderRepository(OrderRepositoryInterface):
    """
    Each call runs in its own session and transaction; the repository keeps
    no state between calls, so one instance can serve concurrent callers.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    async def create(self, order: Order) -> None:
        bound = log.bind(order_id=order.id)
        try:
            async with self._session_factory() as session, session.begin():
                # Header first, then items: both commit together or not at all.
                session.add(
                    OrderRecord(
                        id=order.id,
                        customer_id=order.customer_id,
                        total=order.total(),
                        seq=_next_seq(),
                    )
                )
                await session.flush()
                session.add_all(
                    [
                        _item_record(order.id, position, item)
                        for position, item in enumerate(order.items)
                    ]
                )
        except SQLAlchemyError as exc:
            bound.warning("order_create_failed", exc_info=True)
            raise CreationFailed(order.id) from exc
        bound.info("order_created", items=len(order.items), total=order.total())

    async def update(self, order: Order) -> None:
        bound = log.bind(order_id=order.id)
        try:
            async with self._session_factory() as session, session.begin():
                record = await session.get(
                    OrderRecord, order.id, options=[selectinload(OrderRecord.items)]
                )
                if record is None:
                    bound.warning("order_update_missing")
                    raise UpdateFailed(order.id, "order does not exist")

                record.customer_id = order.customer_id
                record.total = order.total()
                # Upsert by item id. Rows for items no longer in the aggregate are kept.
                rows = {row.id: row for row in record.items}
                for position, item in enumerate(order.items):
                    row = rows.get(item.id)
                    if row is None:
                        record.items.append(_item_record(order.id, position, item))
                        continue
                    row.name = item.name
                    row.price = item.price
                    row.quantity = item.quantity
                    row.product_id = item.product_id
                    row.position = position
        except SQLAlchemyError as exc:
            bound.warning("order_update_failed", exc_info=True)
            raise UpdateFailed(order.id) from exc
        bound.info("order_updated", items=len(order.items), total=order.total())

    async def find(self, order_id: str) -> OrderView:
        try:
            async with self._session_factory() as session:
                record = await session.get(
                    OrderRecord, order_id, options=[selectinload(OrderRecord.items)]
                )
        except SQLAlchemyError as exc:
            log.warning("order_find_failed", order_id=order_id, exc_info=True)
            raise LookupFailed(order_id) from exc
        if record is None:
            raise NotFound(order_id)
        return _to_view(record)

    async def find_all(self) -> list[OrderView]:
        stmt = (
            select(OrderRecord)
            .options(selectinload(OrderRecord.items))
            .order_by(OrderRecord.seq, OrderRecord.id)
        )
        try:
            async with self._session_factory() as session:
                records = (await session.scalars(stmt)).all()
        except SQLAlchemyError as exc:
            log.warning("order_list_failed", exc_info=True)
            raise ListFailed() from exc
        return [_to_view(record) for record in records]


def _next_seq() -> ScalarSelect[int]:
    # Evaluated inside the INSERT, so the read and the write hold the same lock.
    return select(func.coalesce(func.max(OrderRecord.seq), 0) + 1).scalar_subquery()


def _item_record(order_id: str, position: int, item: OrderItem) -> OrderItemRecord:
    return OrderItemRecord(
        id=item.id,
        name=item.name,
        price=item.price,
        quantity=item.quantity,
        order_id=order_id,
        product_id=item.product_id,
        position=position,
    )


def _to_view(record: OrderRecord) -> OrderView:
    # Stale rows can share a position with current ones; id breaks the tie.
    rows = sorted(record.items, key=lambda row: (row.position, row.id))
    items: list[OrderItemView] = [
        {
            "id": row.id,
            "name": row.name,
            "price": row.price,
            "quantity": row.quantity,
            "order_id": row.order_id,
            "product_id": row.product_id,
        }
        for row in rows
    ]
    return {
        "id": record.id,
        "customer_id": record.customer_id,
        "total": record.total,
        "items": items,
    }


# --- Module Notes -----------------------------------------------------------
# SQLite serializes writers, so `seq` is unique there. On backends with
# statement-level snapshots two concurrent creates can still tie; `find_all`
# then falls back to id order for that pair.
