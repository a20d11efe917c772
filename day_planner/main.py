"""Application bootstrap: logging, schema creation and first-run seeding."""

import logging
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from day_planner.config import get_settings
from day_planner.crud import crud_reward, crud_task
from day_planner.database import AsyncSessionLocal, init_db
from day_planner.database import engine as default_engine
from day_planner.services.sample_data import DEFAULT_REWARDS, SAMPLE_TASKS

logger = logging.getLogger(__name__)
settings = get_settings()


def configure_logging() -> None:
    logging.basicConfig(
        level=logging.DEBUG if settings.APP_DEBUG else logging.INFO,
        format="%(asctime)s %(levelname)-8s %(name)s  %(message)s",
    )


async def seed_sample_data(db: AsyncSession) -> bool:
    """Load sample tasks into an empty backlog and rewards into an empty shop.

    Each table is checked on its own; returns True when anything was added.
    """
    seeded = False
    if not await crud_task.get_multi(db, limit=1):
        await crud_task.upsert_many(db, SAMPLE_TASKS)
        logger.info("Seeded %d sample tasks", len(SAMPLE_TASKS))
        seeded = True
    if not await crud_reward.get_multi(db, limit=1):
        for reward in DEFAULT_REWARDS:
            await crud_reward.create(db, obj_in=reward)
        logger.info("Seeded %d rewards", len(DEFAULT_REWARDS))
        seeded = True
    return seeded


async def bootstrap(engine: Optional[AsyncEngine] = None) -> None:
    engine = engine or default_engine
    logger.info("Starting Day Planner...")
    await init_db(engine)
    logger.info("Database ready")

    if not settings.SEED_SAMPLE_DATA:
        return
    if engine is default_engine:
        session_factory = AsyncSessionLocal
    else:
        session_factory = async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)
    async with session_factory() as db:
        await seed_sample_data(db)
        await db.commit()
