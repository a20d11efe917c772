from datetime import date
from typing import Mapping

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from day_planner.crud.base import CRUDBase
from day_planner.models.learned_record import LearnedRecord
from day_planner.schemas.learned import LearnedRecordBase


class CRUDLearnedRecord(CRUDBase[LearnedRecord, LearnedRecordBase, LearnedRecordBase]):
    async def get_history(self, db: AsyncSession) -> dict[str, LearnedRecordBase]:
        """The whole learned-history store keyed by task id."""
        result = await db.execute(select(LearnedRecord))
        return {
            row.task_id: LearnedRecordBase.model_validate(row) for row in result.scalars().all()
        }

    async def save_record(
        self, db: AsyncSession, task_id: str, record: LearnedRecordBase
    ) -> LearnedRecord:
        row = await db.get(LearnedRecord, task_id)
        if row is None:
            row = LearnedRecord(task_id=task_id)
            db.add(row)
        for field, value in record.model_dump().items():
            setattr(row, field, value)
        await db.flush()
        return row

    async def save_history(
        self, db: AsyncSession, history: Mapping[str, LearnedRecordBase]
    ) -> None:
        for task_id, record in history.items():
            await self.save_record(db, task_id, record)

    async def reset_completed_flags(self, db: AsyncSession, before: date) -> int:
        """Clear completed_today on records last done before `before`."""
        result = await db.execute(
            update(LearnedRecord)
            .where(
                LearnedRecord.completed_today == True,  # noqa: E712
                (LearnedRecord.last_done_date == None)  # noqa: E711
                | (LearnedRecord.last_done_date < before),
            )
            .values(completed_today=False)
            .execution_options(synchronize_session="fetch")
        )
        return result.rowcount or 0


crud_learned = CRUDLearnedRecord(LearnedRecord)
