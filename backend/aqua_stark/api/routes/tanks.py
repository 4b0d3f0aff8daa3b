"""Tank Routes."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from aqua_stark.api.dependencies import get_dojo_client
from aqua_stark.api.envelope import respond
from aqua_stark.core.responses import build_error, build_success
from aqua_stark.core.validation import parse_id
from aqua_stark.infrastructure.database import get_db
from aqua_stark.infrastructure.dojo_client import DojoClient
from aqua_stark.schemas.tank import TankMint
from aqua_stark.services.tank_service import TankService

router = APIRouter(prefix="/api", tags=["tanks"])


@router.get("/tank/{tank_id}")
async def get_tank_by_id(tank_id: str, db: AsyncSession = Depends(get_db)):
    """Tank detail with the off-chain summary of its fish.

    For full fish data use GET /api/fish/{id}.
    """
    try:
        parsed_id = parse_id(tank_id, "tank")
        tank = await TankService(db).get_tank_by_id(parsed_id)
        return respond(build_success(tank, "Tank retrieved successfully"))
    except Exception as e:
        return respond(build_error(e))


@router.get("/tank/{tank_id}/multiplier")
async def get_xp_multiplier(
    tank_id: str,
    db: AsyncSession = Depends(get_db),
    dojo: DojoClient = Depends(get_dojo_client),
):
    try:
        parsed_id = parse_id(tank_id, "tank")
        multiplier = await TankService(db, dojo).get_xp_multiplier(parsed_id)
        return respond(
            build_success(multiplier, "XP multiplier retrieved successfully"),
        )
    except Exception as e:
        return respond(build_error(e))


@router.post("/tanks")
async def mint_tank(
    body: TankMint,
    db: AsyncSession = Depends(get_db),
    dojo: DojoClient = Depends(get_dojo_client),
):
    try:
        minted = await TankService(db, dojo).mint_tank(
            body.owner, body.name, body.capacity,
        )
        return respond(
            build_success(minted, "Tank minted successfully"),
            status.HTTP_201_CREATED,
        )
    except Exception as e:
        return respond(build_error(e))
