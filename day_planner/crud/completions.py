from datetime import date
from typing import Optional, Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from day_planner.crud.base import CRUDBase
from day_planner.models.task_completion import TaskCompletion
from day_planner.schemas.completion import TaskCompletionCreate


class CRUDTaskCompletion(CRUDBase[TaskCompletion, TaskCompletionCreate, TaskCompletionCreate]):
    async def get_by_task_and_day(
        self, db: AsyncSession, task_id: str, day: date
    ) -> Optional[TaskCompletion]:
        result = await db.execute(
            select(TaskCompletion).where(TaskCompletion.task_id == task_id, TaskCompletion.day == day)
        )
        return result.scalar_one_or_none()

    async def get_for_day(self, db: AsyncSession, day: date) -> Sequence[TaskCompletion]:
        result = await db.execute(
            select(TaskCompletion).where(TaskCompletion.day == day).order_by(TaskCompletion.id)
        )
        return result.scalars().all()


crud_completion = CRUDTaskCompletion(TaskCompletion)
