"""Sync Queue Routes: read-only view of on-chain transactions awaiting confirmation."""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from aqua_stark.api.envelope import respond
from aqua_stark.core.responses import build_error, build_success
from aqua_stark.infrastructure.database import get_db
from aqua_stark.services.sync_service import SyncService

router = APIRouter(prefix="/api/sync", tags=["sync"])


@router.get("/pending")
async def get_pending(
    limit: int = Query(100), db: AsyncSession = Depends(get_db),
):
    try:
        items = await SyncService(db).get_pending(limit)
        return respond(build_success(items, "Pending transactions retrieved"))
    except Exception as e:
        return respond(build_error(e))


@router.get("/{tx_hash}")
async def get_by_tx_hash(tx_hash: str, db: AsyncSession = Depends(get_db)):
    try:
        item = await SyncService(db).get_by_tx_hash(tx_hash)
        return respond(build_success(item, "Sync queue item retrieved successfully"))
    except Exception as e:
        return respond(build_error(e))
