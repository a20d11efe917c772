from typing import Any, Iterable, Optional, Sequence, Union

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from day_planner.crud.base import CRUDBase
from day_planner.models.task import Task
from day_planner.schemas.task import TaskBase, TaskCreate, TaskUpdate


def _row_data(data: dict[str, Any]) -> dict[str, Any]:
    """Make JSON columns hold plain strings and dicts."""
    if data.get("days_available") is not None:
        data["days_available"] = [str(getattr(d, "value", d)) for d in data["days_available"]]
    if data.get("variants") is not None:
        data["variants"] = [
            v.model_dump() if hasattr(v, "model_dump") else dict(v) for v in data["variants"]
        ]
    return data


class CRUDTask(CRUDBase[Task, TaskCreate, TaskUpdate]):
    async def get_all(self, db: AsyncSession) -> Sequence[Task]:
        result = await db.execute(select(Task).order_by(Task.created_at, Task.id))
        return result.scalars().all()

    async def get_many(self, db: AsyncSession, task_ids: Iterable[str]) -> Sequence[Task]:
        ids = list(task_ids)
        if not ids:
            return []
        result = await db.execute(select(Task).where(Task.id.in_(ids)))
        return result.scalars().all()

    async def create(self, db: AsyncSession, *, obj_in: TaskCreate) -> Task:
        db_obj = Task(**_row_data(obj_in.model_dump()))
        db.add(db_obj)
        await db.flush()
        await db.refresh(db_obj)
        return db_obj

    async def update(
        self,
        db: AsyncSession,
        *,
        db_obj: Task,
        obj_in: Union[TaskUpdate, dict[str, Any]],
    ) -> Task:
        if not isinstance(obj_in, dict):
            obj_in = obj_in.model_dump(exclude_unset=True)
        return await super().update(db, db_obj=db_obj, obj_in=_row_data(dict(obj_in)))

    async def upsert_many(self, db: AsyncSession, tasks: Iterable[TaskBase]) -> list[Task]:
        """Insert new tasks and replace existing ones with the same id."""
        saved: list[Task] = []
        for task in tasks:
            data = _row_data(task.model_dump())
            existing: Optional[Task] = await db.get(Task, task.id)
            if existing is None:
                existing = Task(**data)
                db.add(existing)
            else:
                for field, value in data.items():
                    setattr(existing, field, value)
            saved.append(existing)
        await db.flush()
        return saved

    async def get_all_as_schema(self, db: AsyncSession) -> list[TaskBase]:
        return [self.to_schema(row) for row in await self.get_all(db)]

    @staticmethod
    def to_schema(row: Task) -> TaskBase:
        return TaskBase.model_validate(row)


crud_task = CRUDTask(Task)
