"""Decoration ORM: tank decorations that boost XP while active."""

from sqlalchemy import Boolean, Float, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from aqua_stark.db.base import Base, TimestampMixin


class Decoration(TimestampMixin, Base):
    __tablename__ = "decorations"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    owner: Mapped[str] = mapped_column(
        String(66), ForeignKey("players.address"), nullable=False, index=True,
    )
    kind: Mapped[str] = mapped_column(String(20), nullable=False)
    xp_multiplier: Mapped[float] = mapped_column(Float, nullable=False, default=1.0)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
