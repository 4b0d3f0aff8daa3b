"""Sync Queue Schemas."""

from datetime import datetime

from pydantic import BaseModel

from aqua_stark.core.domain_types import EntityType, SyncStatus


class SyncQueueItem(BaseModel):
    id: int
    tx_hash: str
    entity_type: EntityType
    entity_id: str
    status: SyncStatus
    retry_count: int
    created_at: datetime
    updated_at: datetime
