"""Fish Routes.

Invariants:
    - /fish/feed and /fish/breed are declared before /fish/{fish_id} paths
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from aqua_stark.api.dependencies import get_dojo_client
from aqua_stark.api.envelope import respond
from aqua_stark.core.responses import build_error, build_success
from aqua_stark.core.validation import parse_id
from aqua_stark.infrastructure.database import get_db
from aqua_stark.infrastructure.dojo_client import DojoClient
from aqua_stark.schemas.fish import FishBreed, FishFeed, FishMint
from aqua_stark.services.fish_service import FishService

router = APIRouter(prefix="/api", tags=["fish"])


@router.post("/fish")
async def mint_fish(
    body: FishMint,
    db: AsyncSession = Depends(get_db),
    dojo: DojoClient = Depends(get_dojo_client),
):
    try:
        minted = await FishService(db, dojo).mint_fish(
            body.owner, body.species, body.tank_id,
        )
        return respond(
            build_success(minted, "Fish minted successfully"),
            status.HTTP_201_CREATED,
        )
    except Exception as e:
        return respond(build_error(e))


@router.post("/fish/feed")
async def feed_fish(
    body: FishFeed,
    db: AsyncSession = Depends(get_db),
    dojo: DojoClient = Depends(get_dojo_client),
):
    try:
        result = await FishService(db, dojo).feed_fish_batch(body.fish_ids)
        return respond(build_success(result, "Fish fed successfully"))
    except Exception as e:
        return respond(build_error(e))


@router.post("/fish/breed")
async def breed_fish(
    body: FishBreed,
    db: AsyncSession = Depends(get_db),
    dojo: DojoClient = Depends(get_dojo_client),
):
    try:
        offspring = await FishService(db, dojo).breed_fish(
            body.fish1_id, body.fish2_id,
        )
        return respond(
            build_success(offspring, "Fish bred successfully"),
            status.HTTP_201_CREATED,
        )
    except Exception as e:
        return respond(build_error(e))


@router.get("/fish/{fish_id}")
async def get_fish_by_id(fish_id: str, db: AsyncSession = Depends(get_db)):
    try:
        parsed_id = parse_id(fish_id, "fish")
        fish = await FishService(db).get_fish_by_id(parsed_id)
        return respond(build_success(fish, "Fish retrieved successfully"))
    except Exception as e:
        return respond(build_error(e))


@router.get("/fish/{fish_id}/family")
async def get_family_tree(
    fish_id: str,
    db: AsyncSession = Depends(get_db),
    dojo: DojoClient = Depends(get_dojo_client),
):
    try:
        parsed_id = parse_id(fish_id, "fish")
        tree = await FishService(db, dojo).get_family_tree(parsed_id)
        return respond(build_success(tree, "Family tree retrieved successfully"))
    except Exception as e:
        return respond(build_error(e))
