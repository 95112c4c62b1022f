"""
checkout_orders.store

Composition root for the Order persistence layer.

Responsibilities:
- Configure logging and build the shared engine/session factory from settings.
- Bootstrap tables in dev/test.
- Dispose the engine when the caller is done.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from checkout_orders.db.init_db import init_db
from checkout_orders.db.repositories.orders import OrderRepository
from checkout_orders.db.session import create_engine, create_sessionmaker
from checkout_orders.observability.logging import configure_logging, get_logger
from checkout_orders.settings import Settings

log = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class OrderStore:
    engine: AsyncEngine
    sessionmaker: async_sessionmaker[AsyncSession]
    orders: OrderRepository


@asynccontextmanager
async def open_order_store(
    settings: Settings, *, configure_logs: bool = True
) -> AsyncIterator[OrderStore]:
    if configure_logs:
        configure_logging(
            service_name=settings.service_name, level=settings.log_level, json=settings.log_json
        )

    engine = create_engine(settings)
    sessionmaker = create_sessionmaker(engine)
    try:
        if settings.env in ("dev", "test"):
            # Prod schemas come from migrations, never from create_all.
            await init_db(engine)
        log.info("store_opened", env=settings.env)
        yield OrderStore(
            engine=engine, sessionmaker=sessionmaker, orders=OrderRepository(sessionmaker)
        )
    finally:
        await engine.dispose()
        log.info("store_closed")
