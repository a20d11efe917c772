"""Tests for first-run bootstrap and sample data seeding."""

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from day_planner.crud import crud_reward, crud_task
from day_planner.main import bootstrap, seed_sample_data
from day_planner.schemas.points import RewardCreate
from day_planner.services.sample_data import DEFAULT_REWARDS, SAMPLE_TASKS


@pytest.mark.asyncio
async def test_seed_only_fills_empty_database(db):
    assert await seed_sample_data(db) is True
    assert await seed_sample_data(db) is False

    tasks = await crud_task.get_all(db)
    assert len(tasks) == len(SAMPLE_TASKS)
    assert len(await crud_reward.get_all(db)) == len(DEFAULT_REWARDS)


@pytest.mark.asyncio
async def test_seed_keeps_existing_backlog_but_fills_reward_shop(db, make_task):
    await crud_task.upsert_many(db, [make_task("mine")])
    assert await seed_sample_data(db) is True
    assert [t.id for t in await crud_task.get_all(db)] == ["mine"]
    assert len(await crud_reward.get_all(db)) == len(DEFAULT_REWARDS)


@pytest.mark.asyncio
async def test_seed_keeps_existing_rewards(db):
    await crud_reward.create(db, obj_in=RewardCreate(name="Coffee out", cost=80))
    assert await seed_sample_data(db) is True
    assert [r.name for r in await crud_reward.get_all(db)] == ["Coffee out"]
    assert len(await crud_task.get_all(db)) == len(SAMPLE_TASKS)


@pytest.mark.asyncio
async def test_bootstrap_creates_schema_and_seeds(test_engine):
    await bootstrap(test_engine)

    session_factory = async_sessionmaker(bind=test_engine, class_=AsyncSession, expire_on_commit=False)
    async with session_factory() as db:
        ids = {t.id for t in await crud_task.get_all(db)}
    assert {t.id for t in SAMPLE_TASKS} == ids


def test_sample_tasks_have_unique_ids():
    ids = [t.id for t in SAMPLE_TASKS]
    assert len(ids) == len(set(ids))


@pytest.mark.asyncio
async def test_get_db_commits_on_success(test_engine, monkeypatch):
    from day_planner import database

    session_factory = async_sessionmaker(bind=test_engine, class_=AsyncSession, expire_on_commit=False)
    monkeypatch.setattr(database, "AsyncSessionLocal", session_factory)

    gen = database.get_db()
    db = await gen.__anext__()
    await crud_reward.create(db, obj_in=RewardCreate(name="Coffee out", cost=80))
    with pytest.raises(StopAsyncIteration):
        await gen.__anext__()

    async with session_factory() as other:
        assert [r.name for r in await crud_reward.get_all(other)] == ["Coffee out"]


@pytest.mark.asyncio
async def test_get_db_rolls_back_on_error(test_engine, monkeypatch):
    from day_planner import database

    session_factory = async_sessionmaker(bind=test_engine, class_=AsyncSession, expire_on_commit=False)
    monkeypatch.setattr(database, "AsyncSessionLocal", session_factory)

    gen = database.get_db()
    db = await gen.__anext__()
    await crud_reward.create(db, obj_in=RewardCreate(name="Coffee out", cost=80))
    with pytest.raises(RuntimeError):
        await gen.athrow(RuntimeError("boom"))

    async with session_factory() as other:
        assert await crud_reward.get_all(other) == []
