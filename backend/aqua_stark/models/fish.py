"""Fish ORM: off-chain summary of a fish NFT.

Invariants:
    - owner references players.address
    - tank_id is optional; a fish outside any tank still belongs to its owner
    - generation 0 = minted, offspring = max(parent generations) + 1
    - hunger in 0..100, 100 = just fed
"""

from datetime import datetime

from sqlalchemy import Boolean, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from aqua_stark.db.base import Base, TimestampMixin


class Fish(TimestampMixin, Base):
    __tablename__ = "fish"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    owner: Mapped[str] = mapped_column(
        String(66), ForeignKey("players.address"), nullable=False, index=True,
    )
    tank_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("tanks.id"), nullable=True, index=True,
    )
    species: Mapped[str] = mapped_column(String(50), nullable=False)
    generation: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    xp: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    hunger: Mapped[int] = mapped_column(Integer, nullable=False, default=100)
    is_ready_to_breed: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
    parent1_id: Mapped[int | None] = mapped_column(Integer, nullable=True)
    parent2_id: Mapped[int | None] = mapped_column(Integer, nullable=True)
    last_fed_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )
