"""Decoration Service: lookup, minting and activation toggling.

Invariants:
    - kind is one of DecorationKind
    - Activating an active decoration (or deactivating an inactive one) is rejected
      before the chain is called
"""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from aqua_stark.config import XP_MULTIPLIER
from aqua_stark.core.domain_types import DecorationKind, EntityType
from aqua_stark.core.errors import NotFoundError, ValidationError
from aqua_stark.core.validation import require_address, require_positive_id
from aqua_stark.infrastructure.dojo_client import DojoClient
from aqua_stark.models.decoration import Decoration as DecorationModel
from aqua_stark.schemas.decoration import Decoration, DecorationTransaction
from aqua_stark.services.player_service import require_player
from aqua_stark.services.store import store_errors
from aqua_stark.services.sync_service import SyncService

logger = logging.getLogger(__name__)


def to_decoration(row: DecorationModel) -> Decoration:
    return Decoration(
        id=row.id,
        owner=row.owner,
        kind=row.kind,
        xp_multiplier=row.xp_multiplier if row.xp_multiplier is not None else XP_MULTIPLIER,
        is_active=bool(row.is_active),
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def parse_kind(kind: str | None) -> DecorationKind:
    try:
        return DecorationKind((kind or "").strip().lower())
    except ValueError:
        raise ValidationError("Invalid decoration kind")


class DecorationService:
    def __init__(self, db: AsyncSession, dojo: DojoClient | None = None):
        self.db = db
        self.dojo = dojo

    async def _require_decoration(self, decoration_id: int) -> DecorationModel:
        decoration_id = require_positive_id(decoration_id, "decoration")
        with store_errors():
            result = await self.db.execute(
                select(DecorationModel).where(DecorationModel.id == decoration_id),
            )
            row = result.scalar_one_or_none()
        if row is None:
            raise NotFoundError(f"Decoration with ID {decoration_id} not found")
        return row

    async def get_decoration_by_id(self, decoration_id: int) -> Decoration:
        return to_decoration(await self._require_decoration(decoration_id))

    async def get_decorations_by_owner(self, address: str) -> list[Decoration]:
        owner = require_address(address)
        with store_errors():
            result = await self.db.execute(
                select(DecorationModel)
                .where(DecorationModel.owner == owner)
                .order_by(DecorationModel.id),
            )
            rows = result.scalars().all()
        return [to_decoration(r) for r in rows]

    async def mint_decoration(self, owner: str, kind: str) -> DecorationTransaction:
        decoration_kind = parse_kind(kind)
        player = await require_player(self.db, owner)

        tx_hash = await self.dojo.mint_decoration(player.address, decoration_kind)
        with store_errors():
            row = DecorationModel(
                owner=player.address, kind=decoration_kind.value,
                xp_multiplier=XP_MULTIPLIER, is_active=False,
            )
            self.db.add(row)
            await self.db.flush()
            await SyncService(self.db).add_to_queue(
                tx_hash, EntityType.DECORATION, str(row.id),
            )
            await self.db.commit()
            await self.db.refresh(row)
        return DecorationTransaction(decoration=to_decoration(row), tx_hash=tx_hash)

    async def activate_decoration(self, decoration_id: int) -> DecorationTransaction:
        return await self._set_active(decoration_id, True)

    async def deactivate_decoration(self, decoration_id: int) -> DecorationTransaction:
        return await self._set_active(decoration_id, False)

    async def _set_active(
        self, decoration_id: int, active: bool,
    ) -> DecorationTransaction:
        row = await self._require_decoration(decoration_id)
        if bool(row.is_active) == active:
            state = "active" if active else "inactive"
            raise ValidationError(f"Decoration {row.id} is already {state}")

        if active:
            tx_hash = await self.dojo.activate_decoration(row.id)
        else:
            tx_hash = await self.dojo.deactivate_decoration(row.id)
        with store_errors():
            row.is_active = active
            await SyncService(self.db).add_to_queue(
                tx_hash, EntityType.DECORATION, str(row.id),
            )
            await self.db.commit()
            await self.db.refresh(row)
        return DecorationTransaction(decoration=to_decoration(row), tx_hash=tx_hash)
