"""Player Service: player lookup, listing and registration.

Invariants:
    - Address format is checked before any store access
    - NULL counters map to 0 and NULL avatar_url to None
    - register_player never inserts a row without a transaction hash and a sync item

Design Decisions:
    - require_player exported for fish/tank/decoration services that need an existing owner
"""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from aqua_stark.core.domain_types import EntityType
from aqua_stark.core.errors import NotFoundError, ValidationError
from aqua_stark.core.validation import require_address
from aqua_stark.infrastructure.dojo_client import DojoClient
from aqua_stark.models.player import Player as PlayerModel
from aqua_stark.schemas.player import Player, PlayerRegistration
from aqua_stark.services.store import store_errors
from aqua_stark.services.sync_service import SyncService

logger = logging.getLogger(__name__)

MAX_PAGE_SIZE = 100


def to_player(row: PlayerModel) -> Player:
    return Player(
        address=row.address,
        total_xp=row.total_xp or 0,
        fish_count=row.fish_count or 0,
        tournaments_won=row.tournaments_won or 0,
        reputation=row.reputation or 0,
        offspring_created=row.offspring_created or 0,
        avatar_url=row.avatar_url or None,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


async def find_player(db: AsyncSession, address: str) -> PlayerModel | None:
    with store_errors():
        result = await db.execute(
            select(PlayerModel).where(PlayerModel.address == address),
        )
        return result.scalar_one_or_none()


async def require_player(db: AsyncSession, address: str) -> PlayerModel:
    """Validated, existing player row or a taxonomy error."""
    trimmed = require_address(address)
    row = await find_player(db, trimmed)
    if row is None:
        raise NotFoundError(f"Player with address {address} not found")
    return row


class PlayerService:
    def __init__(self, db: AsyncSession, dojo: DojoClient | None = None):
        self.db = db
        self.dojo = dojo

    async def get_player_by_address(self, address: str) -> Player:
        """Retrieve a player by Starknet address.

        Raises:
            ValidationError: address empty or not 0x + 63-64 hex chars
            NotFoundError: no player with that address
            InternalError: store failure
        """
        return to_player(await require_player(self.db, address))

    async def list_players(self, limit: int = 20, offset: int = 0) -> list[Player]:
        if limit < 1 or limit > MAX_PAGE_SIZE:
            raise ValidationError(f"limit must be between 1 and {MAX_PAGE_SIZE}")
        if offset < 0:
            raise ValidationError("offset must be non-negative")
        with store_errors():
            result = await self.db.execute(
                select(PlayerModel)
                .order_by(PlayerModel.created_at.desc(), PlayerModel.address)
                .limit(limit)
                .offset(offset),
            )
            rows = result.scalars().all()
        return [to_player(r) for r in rows]

    async def register_player(
        self, address: str, avatar_url: str | None = None,
    ) -> PlayerRegistration:
        trimmed = require_address(address)
        if await find_player(self.db, trimmed) is not None:
            raise ValidationError("Player already registered")

        tx_hash = await self.dojo.register_player(trimmed)
        with store_errors():
            row = PlayerModel(
                address=trimmed, avatar_url=avatar_url or None,
                total_xp=0, fish_count=0, tournaments_won=0,
                reputation=0, offspring_created=0,
            )
            self.db.add(row)
            await SyncService(self.db).add_to_queue(
                tx_hash, EntityType.PLAYER, trimmed,
            )
            await self.db.commit()
            await self.db.refresh(row)
        logger.info(f"Player registered: {trimmed}", extra={"tx_hash": tx_hash})
        return PlayerRegistration(player=to_player(row), tx_hash=tx_hash)
