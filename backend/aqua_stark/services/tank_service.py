"""Tank Service: tank lookup with derived occupancy, minting and XP multiplier.

Invariants:
    - fish_count and capacity_usage are computed from the fish table on every read
    - capacity_usage = fish_count / capacity * 100, rounded to 2 decimals (0 if capacity 0)
    - get_tank_by_id always returns a fish list, possibly empty
    - Minted capacity is within 1..MAX_TANK_CAPACITY
"""

import logging

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from aqua_stark.config import MAX_TANK_CAPACITY
from aqua_stark.core.domain_types import EntityType
from aqua_stark.core.errors import NotFoundError, ValidationError
from aqua_stark.core.validation import require_address, require_positive_id
from aqua_stark.infrastructure.dojo_client import DojoClient
from aqua_stark.models.fish import Fish as FishModel
from aqua_stark.models.tank import Tank as TankModel
from aqua_stark.schemas.tank import Tank, TankMinted, TankWithFish, XpMultiplier
from aqua_stark.services.fish_service import to_fish_summary
from aqua_stark.services.player_service import require_player
from aqua_stark.services.store import store_errors
from aqua_stark.services.sync_service import SyncService

logger = logging.getLogger(__name__)

MAX_TANK_NAME_LENGTH = 100


def capacity_usage(fish_count: int, capacity: int) -> float:
    if capacity <= 0:
        return 0.0
    return round(fish_count / capacity * 100, 2)


def to_tank(row: TankModel, fish_count: int) -> Tank:
    return Tank(
        id=row.id,
        owner=row.owner,
        name=row.name,
        capacity=row.capacity,
        fish_count=fish_count,
        capacity_usage=capacity_usage(fish_count, row.capacity),
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


class TankService:
    def __init__(self, db: AsyncSession, dojo: DojoClient | None = None):
        self.db = db
        self.dojo = dojo

    async def _require_tank(self, tank_id: int) -> TankModel:
        tank_id = require_positive_id(tank_id, "tank")
        with store_errors():
            result = await self.db.execute(
                select(TankModel).where(TankModel.id == tank_id),
            )
            row = result.scalar_one_or_none()
        if row is None:
            raise NotFoundError(f"Tank with ID {tank_id} not found")
        return row

    async def get_tank_by_id(self, tank_id: int) -> TankWithFish:
        """Tank detail with the off-chain summary of every fish placed in it."""
        row = await self._require_tank(tank_id)
        with store_errors():
            result = await self.db.execute(
                select(FishModel)
                .where(FishModel.tank_id == row.id)
                .order_by(FishModel.id),
            )
            fish_rows = result.scalars().all()
        tank = to_tank(row, len(fish_rows))
        return TankWithFish(
            **tank.model_dump(), fish=[to_fish_summary(f) for f in fish_rows],
        )

    async def get_tanks_by_owner(self, address: str) -> list[Tank]:
        owner = require_address(address)
        fish_counts = (
            select(FishModel.tank_id, func.count(FishModel.id).label("fish_count"))
            .group_by(FishModel.tank_id)
            .subquery()
        )
        with store_errors():
            result = await self.db.execute(
                select(TankModel, func.coalesce(fish_counts.c.fish_count, 0))
                .outerjoin(fish_counts, fish_counts.c.tank_id == TankModel.id)
                .where(TankModel.owner == owner)
                .order_by(TankModel.id),
            )
            rows = result.all()
        return [to_tank(tank, count) for tank, count in rows]

    async def mint_tank(
        self, owner: str, name: str | None = None, capacity: int | None = None,
    ) -> TankMinted:
        if capacity is None:
            capacity = MAX_TANK_CAPACITY
        if capacity < 1 or capacity > MAX_TANK_CAPACITY:
            raise ValidationError(
                f"Capacity must be between 1 and {MAX_TANK_CAPACITY}",
            )
        name = name.strip() if name else None
        if name and len(name) > MAX_TANK_NAME_LENGTH:
            raise ValidationError(
                f"Tank name must be at most {MAX_TANK_NAME_LENGTH} characters",
            )
        player = await require_player(self.db, owner)

        tx_hash = await self.dojo.mint_tank(player.address)
        with store_errors():
            row = TankModel(owner=player.address, name=name, capacity=capacity)
            self.db.add(row)
            await self.db.flush()
            await SyncService(self.db).add_to_queue(
                tx_hash, EntityType.TANK, str(row.id),
            )
            await self.db.commit()
            await self.db.refresh(row)
        return TankMinted(tank=to_tank(row, 0), tx_hash=tx_hash)

    async def get_xp_multiplier(self, tank_id: int) -> XpMultiplier:
        row = await self._require_tank(tank_id)
        multiplier = await self.dojo.get_xp_multiplier(row.id)
        return XpMultiplier(tank_id=row.id, multiplier=multiplier)
