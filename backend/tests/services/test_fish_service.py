"""Fish Service: minting into tanks, batch feeding, breeding and ancestry.

Invariants:
    - Fish only enter a tank owned by the same player and with free room
    - Feeding is all-or-nothing: unknown ids fail before the chain is called
    - Breeding needs two distinct breed-ready fish of one owner
"""

from unittest.mock import AsyncMock

import pytest
from sqlalchemy import select

from aqua_stark.core.errors import NotFoundError, ValidationError
from aqua_stark.models.sync_queue import SyncQueue
from aqua_stark.services.fish_service import FULL_HUNGER, FishService

from tests.services.sample_data import ADDRESS, OTHER_ADDRESS


async def test_get_fish_by_id(test_db, seed_player, seed_fish):
    await seed_player()
    fish = await seed_fish(species="Angelfish", xp=40, generation=2)

    result = await FishService(test_db).get_fish_by_id(fish.id)

    assert result.species == "Angelfish"
    assert result.xp == 40
    assert result.generation == 2
    assert result.owner == ADDRESS


async def test_get_missing_fish_is_not_found(test_db):
    with pytest.raises(NotFoundError, match="Fish with ID 42 not found"):
        await FishService(test_db).get_fish_by_id(42)


async def test_get_fish_by_owner(test_db, seed_player, seed_fish):
    await seed_player()
    await seed_player(OTHER_ADDRESS)
    await seed_fish(species="A")
    await seed_fish(species="B")
    await seed_fish(owner=OTHER_ADDRESS, species="C")

    fish = await FishService(test_db).get_fish_by_owner(ADDRESS)

    assert [f.species for f in fish] == ["A", "B"]


async def test_mint_fish_into_tank(test_db, dojo, seed_player, seed_tank):
    player = await seed_player(fish_count=0)
    tank = await seed_tank(capacity=2)

    minted = await FishService(test_db, dojo).mint_fish(ADDRESS, " Guppy ", tank.id)

    assert minted.fish.species == "Guppy"
    assert minted.fish.tank_id == tank.id
    assert minted.fish.generation == 0
    assert minted.fish.hunger == FULL_HUNGER
    assert minted.fish.is_ready_to_breed is False
    assert player.fish_count == 1
    queued = (await test_db.execute(select(SyncQueue))).scalar_one()
    assert queued.entity_type == "fish"
    assert queued.entity_id == str(minted.fish.id)


async def test_mint_fish_without_tank(test_db, dojo, seed_player):
    await seed_player()
    minted = await FishService(test_db, dojo).mint_fish(ADDRESS, "Betta")
    assert minted.fish.tank_id is None


async def test_mint_fish_into_full_tank(test_db, dojo, seed_player, seed_tank, seed_fish):
    await seed_player()
    tank = await seed_tank(capacity=1)
    await seed_fish(tank_id=tank.id)
    dojo.mint_fish = AsyncMock()

    with pytest.raises(ValidationError, match="Tank is full"):
        await FishService(test_db, dojo).mint_fish(ADDRESS, "Guppy", tank.id)

    dojo.mint_fish.assert_not_awaited()


async def test_mint_fish_into_someone_elses_tank(test_db, dojo, seed_player, seed_tank):
    await seed_player()
    await seed_player(OTHER_ADDRESS)
    tank = await seed_tank(owner=OTHER_ADDRESS)

    with pytest.raises(ValidationError, match="does not belong"):
        await FishService(test_db, dojo).mint_fish(ADDRESS, "Guppy", tank.id)


async def test_mint_fish_into_missing_tank(test_db, dojo, seed_player):
    await seed_player()
    with pytest.raises(NotFoundError, match="Tank with ID 5 not found"):
        await FishService(test_db, dojo).mint_fish(ADDRESS, "Guppy", 5)


@pytest.mark.parametrize("species", ["", "   ", "x" * 51])
async def test_mint_fish_rejects_species(test_db, dojo, species):
    with pytest.raises(ValidationError):
        await FishService(test_db, dojo).mint_fish(ADDRESS, species)


async def test_feed_fish_batch(test_db, dojo, seed_player, seed_fish):
    await seed_player()
    a = await seed_fish(hunger=10)
    b = await seed_fish(hunger=55)

    result = await FishService(test_db, dojo).feed_fish_batch([a.id, b.id])

    assert result.success is True
    assert a.hunger == FULL_HUNGER and b.hunger == FULL_HUNGER
    assert a.last_fed_at is not None
    queued = (await test_db.execute(select(SyncQueue))).scalar_one()
    assert queued.tx_hash == result.tx_hash
    assert queued.entity_id == f"{a.id},{b.id}"


async def test_feed_fish_batch_is_all_or_nothing(test_db, dojo, seed_player, seed_fish):
    await seed_player()
    a = await seed_fish(hunger=10)
    dojo.feed_fish_batch = AsyncMock()

    with pytest.raises(NotFoundError, match="Fish not found: 999"):
        await FishService(test_db, dojo).feed_fish_batch([a.id, 999])

    dojo.feed_fish_batch.assert_not_awaited()
    assert a.hunger == 10


@pytest.mark.parametrize("fish_ids, message", [
    ([], "At least one fish ID is required"),
    ([1, 1], "Duplicate fish IDs"),
    ([0], "Invalid fish ID"),
])
async def test_feed_fish_batch_validation(test_db, dojo, fish_ids, message):
    with pytest.raises(ValidationError, match=message):
        await FishService(test_db, dojo).feed_fish_batch(fish_ids)


async def test_breed_fish(test_db, dojo, seed_player, seed_fish):
    player = await seed_player(fish_count=2, offspring_created=None)
    mom = await seed_fish(species="Koi", generation=1, is_ready_to_breed=True)
    dad = await seed_fish(species="Goldfish", generation=3, is_ready_to_breed=True)

    result = await FishService(test_db, dojo).breed_fish(mom.id, dad.id)

    child = result.fish
    assert child.generation == 4
    assert child.species == "Koi"
    assert child.parent1_id == mom.id
    assert child.parent2_id == dad.id
    assert child.tank_id is None
    assert player.fish_count == 3
    assert player.offspring_created == 1


async def test_breed_with_itself_rejected(test_db, dojo):
    with pytest.raises(ValidationError, match="cannot breed with itself"):
        await FishService(test_db, dojo).breed_fish(3, 3)


async def test_breed_not_ready_rejected(test_db, dojo, seed_player, seed_fish):
    await seed_player()
    ready = await seed_fish(is_ready_to_breed=True)
    lazy = await seed_fish(is_ready_to_breed=False)

    with pytest.raises(ValidationError, match=f"not ready to breed: {lazy.id}"):
        await FishService(test_db, dojo).breed_fish(ready.id, lazy.id)


async def test_breed_across_owners_rejected(test_db, dojo, seed_player, seed_fish):
    await seed_player()
    await seed_player(OTHER_ADDRESS)
    mine = await seed_fish(is_ready_to_breed=True)
    theirs = await seed_fish(owner=OTHER_ADDRESS, is_ready_to_breed=True)

    with pytest.raises(ValidationError, match="same owner"):
        await FishService(test_db, dojo).breed_fish(mine.id, theirs.id)


async def test_get_family_tree(test_db, dojo, seed_player, seed_fish):
    await seed_player()
    fish = await seed_fish()

    tree = await FishService(test_db, dojo).get_family_tree(fish.id)

    assert tree.fish_id == fish.id
    assert tree.generation_count == 2
    assert tree.ancestors[0].id == fish.id


async def test_get_family_tree_missing_fish(test_db, dojo):
    with pytest.raises(NotFoundError):
        await FishService(test_db, dojo).get_family_tree(77)
