"""Fish Service: fish lookup, minting, feeding, breeding and ancestry.

Invariants:
    - Owners must be registered players
    - A fish is only placed in a tank its owner owns and that has free capacity
    - feed_fish_batch is all-or-nothing: any missing id fails the whole batch
      before the chain is called
    - Breeding requires two distinct, breed-ready fish of the same owner;
      offspring generation = max(parent generations) + 1

Design Decisions:
    - Offspring inherit parent 1's species and start outside any tank
    - One sync item per feed transaction, entity_id = comma-joined fish ids
"""

import logging

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from aqua_stark.core.domain_types import EntityType
from aqua_stark.core.errors import NotFoundError, ValidationError
from aqua_stark.core.validation import require_address, require_positive_id
from aqua_stark.db.base import utcnow
from aqua_stark.infrastructure.dojo_client import DojoClient
from aqua_stark.models.fish import Fish as FishModel
from aqua_stark.models.tank import Tank as TankModel
from aqua_stark.schemas.fish import (
    Fish, FishFamilyTree, FishMinted, FishSummary, TransactionResult,
)
from aqua_stark.services.player_service import require_player
from aqua_stark.services.store import store_errors
from aqua_stark.services.sync_service import SyncService

logger = logging.getLogger(__name__)

FULL_HUNGER = 100
MAX_SPECIES_LENGTH = 50


def to_fish(row: FishModel) -> Fish:
    return Fish(
        id=row.id,
        owner=row.owner,
        tank_id=row.tank_id,
        species=row.species,
        generation=row.generation or 0,
        xp=row.xp or 0,
        hunger=row.hunger if row.hunger is not None else FULL_HUNGER,
        is_ready_to_breed=bool(row.is_ready_to_breed),
        parent1_id=row.parent1_id,
        parent2_id=row.parent2_id,
        last_fed_at=row.last_fed_at,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def to_fish_summary(row: FishModel) -> FishSummary:
    return FishSummary(
        id=row.id,
        species=row.species,
        generation=row.generation or 0,
        xp=row.xp or 0,
        hunger=row.hunger if row.hunger is not None else FULL_HUNGER,
    )


async def count_fish_in_tank(db: AsyncSession, tank_id: int) -> int:
    with store_errors():
        result = await db.execute(
            select(func.count(FishModel.id)).where(FishModel.tank_id == tank_id),
        )
        return result.scalar_one()


class FishService:
    def __init__(self, db: AsyncSession, dojo: DojoClient | None = None):
        self.db = db
        self.dojo = dojo

    async def _require_fish(self, fish_id: int) -> FishModel:
        fish_id = require_positive_id(fish_id, "fish")
        with store_errors():
            result = await self.db.execute(
                select(FishModel).where(FishModel.id == fish_id),
            )
            row = result.scalar_one_or_none()
        if row is None:
            raise NotFoundError(f"Fish with ID {fish_id} not found")
        return row

    async def get_fish_by_id(self, fish_id: int) -> Fish:
        return to_fish(await self._require_fish(fish_id))

    async def get_fish_by_owner(self, address: str) -> list[Fish]:
        owner = require_address(address)
        with store_errors():
            result = await self.db.execute(
                select(FishModel)
                .where(FishModel.owner == owner)
                .order_by(FishModel.id),
            )
            rows = result.scalars().all()
        return [to_fish(r) for r in rows]

    async def _require_tank_with_room(self, tank_id: int, owner: str) -> TankModel:
        tank_id = require_positive_id(tank_id, "tank")
        with store_errors():
            result = await self.db.execute(
                select(TankModel).where(TankModel.id == tank_id),
            )
            tank = result.scalar_one_or_none()
        if tank is None:
            raise NotFoundError(f"Tank with ID {tank_id} not found")
        if tank.owner != owner:
            raise ValidationError("Tank does not belong to this player")
        if await count_fish_in_tank(self.db, tank_id) >= tank.capacity:
            raise ValidationError("Tank is full")
        return tank

    async def mint_fish(
        self, owner: str, species: str, tank_id: int | None = None,
    ) -> FishMinted:
        if not species or not species.strip():
            raise ValidationError("Species is required")
        species = species.strip()
        if len(species) > MAX_SPECIES_LENGTH:
            raise ValidationError(
                f"Species must be at most {MAX_SPECIES_LENGTH} characters",
            )
        player = await require_player(self.db, owner)
        if tank_id is not None:
            await self._require_tank_with_room(tank_id, player.address)

        tx_hash = await self.dojo.mint_fish(player.address)
        with store_errors():
            row = FishModel(
                owner=player.address, tank_id=tank_id, species=species,
                generation=0, xp=0, hunger=FULL_HUNGER, is_ready_to_breed=False,
            )
            self.db.add(row)
            player.fish_count = (player.fish_count or 0) + 1
            await self.db.flush()
            await SyncService(self.db).add_to_queue(
                tx_hash, EntityType.FISH, str(row.id),
            )
            await self.db.commit()
            await self.db.refresh(row)
        return FishMinted(fish=to_fish(row), tx_hash=tx_hash)

    async def feed_fish_batch(self, fish_ids: list[int]) -> TransactionResult:
        if not fish_ids:
            raise ValidationError("At least one fish ID is required")
        ids = [require_positive_id(i, "fish") for i in fish_ids]
        if len(set(ids)) != len(ids):
            raise ValidationError("Duplicate fish IDs in batch")

        with store_errors():
            result = await self.db.execute(
                select(FishModel).where(FishModel.id.in_(ids)),
            )
            rows = result.scalars().all()
        found = {r.id for r in rows}
        missing = [i for i in ids if i not in found]
        if missing:
            raise NotFoundError(
                f"Fish not found: {', '.join(str(i) for i in missing)}",
            )

        tx_hash = await self.dojo.feed_fish_batch(ids)
        fed_at = utcnow()
        with store_errors():
            for row in rows:
                row.hunger = FULL_HUNGER
                row.last_fed_at = fed_at
            await SyncService(self.db).add_to_queue(
                tx_hash, EntityType.FISH, ",".join(str(i) for i in ids),
            )
            await self.db.commit()
        return TransactionResult(tx_hash=tx_hash)

    async def breed_fish(self, fish1_id: int, fish2_id: int) -> FishMinted:
        fish1_id = require_positive_id(fish1_id, "fish")
        fish2_id = require_positive_id(fish2_id, "fish")
        if fish1_id == fish2_id:
            raise ValidationError("A fish cannot breed with itself")
        parent1 = await self._require_fish(fish1_id)
        parent2 = await self._require_fish(fish2_id)
        if parent1.owner != parent2.owner:
            raise ValidationError("Both fish must belong to the same owner")
        not_ready = [f.id for f in (parent1, parent2) if not f.is_ready_to_breed]
        if not_ready:
            raise ValidationError(
                f"Fish not ready to breed: {', '.join(str(i) for i in not_ready)}",
            )
        player = await require_player(self.db, parent1.owner)

        tx_hash = await self.dojo.breed_fish(fish1_id, fish2_id)
        with store_errors():
            offspring = FishModel(
                owner=player.address,
                tank_id=None,
                species=parent1.species,
                generation=max(parent1.generation or 0, parent2.generation or 0) + 1,
                xp=0,
                hunger=FULL_HUNGER,
                is_ready_to_breed=False,
                parent1_id=fish1_id,
                parent2_id=fish2_id,
            )
            self.db.add(offspring)
            player.fish_count = (player.fish_count or 0) + 1
            player.offspring_created = (player.offspring_created or 0) + 1
            await self.db.flush()
            await SyncService(self.db).add_to_queue(
                tx_hash, EntityType.FISH, str(offspring.id),
            )
            await self.db.commit()
            await self.db.refresh(offspring)
        logger.info(
            f"Fish {offspring.id} bred from {fish1_id} and {fish2_id}",
            extra={"tx_hash": tx_hash},
        )
        return FishMinted(fish=to_fish(offspring), tx_hash=tx_hash)

    async def get_family_tree(self, fish_id: int) -> FishFamilyTree:
        row = await self._require_fish(fish_id)
        return await self.dojo.get_fish_family_tree(row.id)
