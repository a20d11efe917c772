from typing import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from day_planner.crud.base import CRUDBase
from day_planner.models.reward import Reward
from day_planner.schemas.points import RewardCreate, RewardUpdate


class CRUDReward(CRUDBase[Reward, RewardCreate, RewardUpdate]):
    async def get_all(self, db: AsyncSession) -> Sequence[Reward]:
        result = await db.execute(select(Reward).order_by(Reward.cost, Reward.id))
        return result.scalars().all()


crud_reward = CRUDReward(Reward)
