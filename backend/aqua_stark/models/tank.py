"""Tank ORM: a player's aquarium.

Invariants:
    - owner references players.address
    - fish_count and capacity_usage are never stored (computed by TankService)
"""

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from aqua_stark.db.base import Base, TimestampMixin


class Tank(TimestampMixin, Base):
    __tablename__ = "tanks"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    owner: Mapped[str] = mapped_column(
        String(66), ForeignKey("players.address"), nullable=False, index=True,
    )
    name: Mapped[str | None] = mapped_column(String(100), nullable=True)
    capacity: Mapped[int] = mapped_column(Integer, nullable=False)
