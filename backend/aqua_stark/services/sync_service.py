"""Sync Queue Service: tracks on-chain transactions until their off-chain confirmation.

Invariants:
    - New items start pending with retry_count 0
    - confirmed is terminal: no further status change is accepted
    - Every transition to failed increments retry_count
    - add_to_queue flushes but never commits (callers own the transaction);
      update_status commits

Design Decisions:
    - Reconciliation (polling the chain and advancing statuses) is not run in-process;
      this service only exposes the transitions it would use
"""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from aqua_stark.core.domain_types import EntityType, SyncStatus
from aqua_stark.core.errors import NotFoundError, ValidationError
from aqua_stark.core.validation import require_tx_hash
from aqua_stark.models.sync_queue import SyncQueue
from aqua_stark.schemas.sync import SyncQueueItem
from aqua_stark.services.store import store_errors

logger = logging.getLogger(__name__)


def to_sync_item(row: SyncQueue) -> SyncQueueItem:
    return SyncQueueItem(
        id=row.id,
        tx_hash=row.tx_hash,
        entity_type=EntityType(row.entity_type),
        entity_id=row.entity_id,
        status=SyncStatus(row.status),
        retry_count=row.retry_count or 0,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def _parse_enum(enum_cls, value, label: str):
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(m.value for m in enum_cls)
        raise ValidationError(f"Invalid {label}: expected one of {allowed}")


class SyncService:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def _find(self, tx_hash: str) -> SyncQueue | None:
        with store_errors():
            result = await self.db.execute(
                select(SyncQueue).where(SyncQueue.tx_hash == tx_hash),
            )
            return result.scalar_one_or_none()

    async def add_to_queue(
        self, tx_hash: str, entity_type: EntityType | str, entity_id: str,
    ) -> SyncQueueItem:
        tx_hash = require_tx_hash(tx_hash)
        entity_type = _parse_enum(EntityType, entity_type, "entity type")
        if not entity_id or not str(entity_id).strip():
            raise ValidationError("Entity ID is required")
        if await self._find(tx_hash) is not None:
            raise ValidationError(f"Transaction {tx_hash} is already queued")

        with store_errors():
            row = SyncQueue(
                tx_hash=tx_hash,
                entity_type=entity_type.value,
                entity_id=str(entity_id).strip(),
                status=SyncStatus.PENDING.value,
                retry_count=0,
            )
            self.db.add(row)
            await self.db.flush()
        logger.info(
            f"Queued {entity_type.value} transaction for sync",
            extra={
                "tx_hash": tx_hash, "entity_type": entity_type.value,
                "entity_id": row.entity_id,
            },
        )
        return to_sync_item(row)

    async def update_status(
        self, tx_hash: str, status: SyncStatus | str,
    ) -> SyncQueueItem:
        tx_hash = require_tx_hash(tx_hash)
        status = _parse_enum(SyncStatus, status, "sync status")
        row = await self._find(tx_hash)
        if row is None:
            raise NotFoundError(f"Sync queue item for transaction {tx_hash} not found")
        if row.status == SyncStatus.CONFIRMED.value:
            raise ValidationError(
                f"Transaction {tx_hash} is already confirmed",
            )

        with store_errors():
            row.status = status.value
            if status is SyncStatus.FAILED:
                row.retry_count = (row.retry_count or 0) + 1
            await self.db.commit()
            await self.db.refresh(row)
        logger.info(
            f"Sync status -> {status.value} (retries: {row.retry_count})",
            extra={"tx_hash": tx_hash, "entity_type": row.entity_type},
        )
        return to_sync_item(row)

    async def get_pending(self, limit: int = 100) -> list[SyncQueueItem]:
        """Pending items, oldest first."""
        if limit < 1:
            raise ValidationError("limit must be positive")
        with store_errors():
            result = await self.db.execute(
                select(SyncQueue)
                .where(SyncQueue.status == SyncStatus.PENDING.value)
                .order_by(SyncQueue.created_at, SyncQueue.id)
                .limit(limit),
            )
            rows = result.scalars().all()
        return [to_sync_item(r) for r in rows]

    async def get_by_tx_hash(self, tx_hash: str) -> SyncQueueItem:
        tx_hash = require_tx_hash(tx_hash)
        row = await self._find(tx_hash)
        if row is None:
            raise NotFoundError(f"Sync queue item for transaction {tx_hash} not found")
        return to_sync_item(row)
