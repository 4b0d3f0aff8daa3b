"""Player ORM: off-chain profile of a registered on-chain player.

Invariants:
    - address is the primary key and already validated before insert
    - Counters are nullable in storage (rows may predate the column defaults);
      services read NULL as 0

Design Decisions:
    - Read-only from the API's perspective except for registration and the
      counters maintained by fish minting and breeding
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from aqua_stark.db.base import Base, TimestampMixin


class Player(TimestampMixin, Base):
    __tablename__ = "players"

    address: Mapped[str] = mapped_column(String(66), primary_key=True)
    total_xp: Mapped[int | None] = mapped_column(Integer, nullable=True, default=0)
    fish_count: Mapped[int | None] = mapped_column(Integer, nullable=True, default=0)
    tournaments_won: Mapped[int | None] = mapped_column(
        Integer, nullable=True, default=0,
    )
    reputation: Mapped[int | None] = mapped_column(Integer, nullable=True, default=0)
    offspring_created: Mapped[int | None] = mapped_column(
        Integer, nullable=True, default=0,
    )
    avatar_url: Mapped[str | None] = mapped_column(String(500), nullable=True)
