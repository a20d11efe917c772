"""Pytest fixtures for unit tests."""
from datetime import date
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from day_planner.models.base import Base
from day_planner.schemas.morning import MorningContext
from day_planner.schemas.task import TaskBase

# One in-memory SQLite database per test
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

# A Wednesday
TODAY = date(2026, 3, 18)


@pytest_asyncio.fixture
async def test_engine():
    engine = create_async_engine(TEST_DATABASE_URL, echo=False, poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def db(test_engine) -> AsyncGenerator[AsyncSession, None]:
    TestSession = async_sessionmaker(
        bind=test_engine, class_=AsyncSession, expire_on_commit=False
    )
    async with TestSession() as session:
        yield session
        await session.rollback()


@pytest.fixture
def today() -> date:
    return TODAY


@pytest.fixture
def morning() -> MorningContext:
    return MorningContext(sleep="ok", hours_available=8, energy=6)


def _build_task(task_id: str = "task", **overrides) -> TaskBase:
    data = {
        "id": task_id,
        "name": task_id.replace("-", " ").title(),
        "energy_required": 5,
        "duration_minutes": 30,
    }
    data.update(overrides)
    return TaskBase(**data)


@pytest.fixture
def make_task():
    """Factory for tasks with neutral defaults; any field can be overridden."""
    return _build_task
