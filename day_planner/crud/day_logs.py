from datetime import date
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from day_planner.crud.base import CRUDBase
from day_planner.models.day_log import DayLog
from day_planner.schemas.morning import MorningContext


class CRUDDayLog(CRUDBase[DayLog, MorningContext, MorningContext]):
    async def get_by_day(self, db: AsyncSession, day: date) -> Optional[DayLog]:
        result = await db.execute(select(DayLog).where(DayLog.day == day))
        return result.scalar_one_or_none()

    async def record_check_in(
        self,
        db: AsyncSession,
        *,
        day: date,
        morning: MorningContext,
        planned_task_ids: list[str],
    ) -> DayLog:
        """Store the morning answers and plan for `day`, replacing an earlier run."""
        log = await self.get_by_day(db, day)
        if log is None:
            log = DayLog(day=day)
            db.add(log)
        log.sleep = morning.sleep
        log.energy = morning.energy
        log.hours_available = morning.hours_available
        log.planned_task_ids = list(planned_task_ids)
        await db.flush()
        return log


crud_day_log = CRUDDayLog(DayLog)
