"""Sync Queue ORM: bridge record between an on-chain tx and its off-chain confirmation.

Invariants:
    - tx_hash is unique (one row per transaction)
    - status in pending | confirmed | failed; confirmed is terminal
    - retry_count increments each time the item is marked failed

Design Decisions:
    - entity_id is a string: players are keyed by address, everything else by int id,
      and batch transactions store the comma-joined ids
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from aqua_stark.db.base import Base, TimestampMixin


class SyncQueue(TimestampMixin, Base):
    __tablename__ = "sync_queue"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    tx_hash: Mapped[str] = mapped_column(String(66), nullable=False, unique=True)
    entity_type: Mapped[str] = mapped_column(String(20), nullable=False)
    entity_id: Mapped[str] = mapped_column(String(500), nullable=False)
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default="pending", index=True,
    )
    retry_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
