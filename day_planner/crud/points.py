from datetime import date
from typing import Optional, Sequence

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from day_planner.crud.base import CRUDBase
from day_planner.models.points_transaction import PointsKind, PointsTransaction
from day_planner.schemas.points import PointsTransactionCreate


class CRUDPoints(CRUDBase[PointsTransaction, PointsTransactionCreate, PointsTransactionCreate]):
    async def append(
        self,
        db: AsyncSession,
        *,
        points: int,
        reason: str,
        kind: PointsKind,
        day: date,
        task_id: Optional[str] = None,
    ) -> PointsTransaction:
        return await self.create(
            db,
            obj_in=PointsTransactionCreate(
                points=points, reason=reason, kind=kind, day=day, task_id=task_id
            ),
        )

    async def get_balance(self, db: AsyncSession) -> int:
        result = await db.execute(select(func.coalesce(func.sum(PointsTransaction.points), 0)))
        return int(result.scalar_one())

    async def get_recent(self, db: AsyncSession, limit: int = 200) -> Sequence[PointsTransaction]:
        result = await db.execute(
            select(PointsTransaction).order_by(PointsTransaction.id.desc()).limit(limit)
        )
        return result.scalars().all()

    async def get_for_day(self, db: AsyncSession, day: date) -> Sequence[PointsTransaction]:
        result = await db.execute(
            select(PointsTransaction)
            .where(PointsTransaction.day == day)
            .order_by(PointsTransaction.id)
        )
        return result.scalars().all()

    async def earned_on(self, db: AsyncSession, day: date) -> int:
        """Points earned on `day`; redemptions are not subtracted."""
        result = await db.execute(
            select(func.coalesce(func.sum(PointsTransaction.points), 0)).where(
                PointsTransaction.day == day,
                PointsTransaction.kind != PointsKind.redemption,
            )
        )
        return int(result.scalar_one())

    async def has_perfect_day(self, db: AsyncSession, day: date) -> bool:
        result = await db.execute(
            select(func.count(PointsTransaction.id)).where(
                PointsTransaction.day == day,
                PointsTransaction.kind == PointsKind.perfect_day,
            )
        )
        return result.scalar_one() > 0


crud_points = CRUDPoints(PointsTransaction)
