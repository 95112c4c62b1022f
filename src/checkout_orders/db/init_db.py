"""
checkout_orders.db.init_db

DB initialization helpers (dev/test convenience).
"""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncEngine

from checkout_orders.db import models  # noqa: F401  # register tables on Base.metadata
from checkout_orders.db.base import Base


async def init_db(engine: AsyncEngine) -> None:
    """
    Create the `orders` and `order_items` tables if they don't exist.
    Deployed schemas are owned by the migration tooling, not by this package.
    """

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def drop_db(engine: AsyncEngine) -> None:
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
