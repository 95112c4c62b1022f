"""
tests.conftest

Shared fixtures: a fresh in-memory database per test.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from checkout_orders.db.init_db import init_db
from checkout_orders.db.repositories.orders import OrderRepository
from checkout_orders.db.session import create_engine, create_sessionmaker
from checkout_orders.settings import Settings


@pytest.fixture
def settings() -> Settings:
    return Settings(env="test", database_url="sqlite+aiosqlite:///:memory:")


@pytest_asyncio.fixture
async def engine(settings: Settings) -> AsyncIterator[AsyncEngine]:
    engine = create_engine(settings)
    await init_db(engine)
    try:
        yield engine
    finally:
        await engine.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return create_sessionmaker(engine)


@pytest.fixture
def repository(session_factory: async_sessionmaker[AsyncSession]) -> OrderRepository:
    return OrderRepository(session_factory)
