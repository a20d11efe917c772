from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from day_planner.models.base import Base, TimestampMixin


class Reward(Base, TimestampMixin):
    __tablename__ = "rewards"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    cost: Mapped[int] = mapped_column(Integer, nullable=False)
    emoji: Mapped[str] = mapped_column(String(10), nullable=False, default="🎁")
    category: Mapped[str] = mapped_column(String(30), nullable=False, default="leisure")
