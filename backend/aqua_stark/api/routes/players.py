"""Player Routes: profile lookup, listing, registration and per-player collections.

Invariants:
    - Address validation belongs to the services; controllers pass the raw path value
"""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from aqua_stark.api.dependencies import get_dojo_client
from aqua_stark.api.envelope import respond
from aqua_stark.core.responses import build_error, build_success
from aqua_stark.infrastructure.database import get_db
from aqua_stark.infrastructure.dojo_client import DojoClient
from aqua_stark.schemas.player import PlayerRegister
from aqua_stark.services.decoration_service import DecorationService
from aqua_stark.services.fish_service import FishService
from aqua_stark.services.player_service import PlayerService
from aqua_stark.services.tank_service import TankService

router = APIRouter(prefix="/api", tags=["players"])


@router.get("/players")
async def list_players(
    limit: int = Query(20),
    offset: int = Query(0),
    db: AsyncSession = Depends(get_db),
):
    try:
        players = await PlayerService(db).list_players(limit=limit, offset=offset)
        return respond(build_success(players, "Players retrieved successfully"))
    except Exception as e:
        return respond(build_error(e))


@router.post("/players")
async def register_player(
    body: PlayerRegister,
    db: AsyncSession = Depends(get_db),
    dojo: DojoClient = Depends(get_dojo_client),
):
    """Register on-chain, then store the off-chain profile."""
    try:
        registration = await PlayerService(db, dojo).register_player(
            body.address, body.avatar_url,
        )
        return respond(
            build_success(registration, "Player registered successfully"),
            status.HTTP_201_CREATED,
        )
    except Exception as e:
        return respond(build_error(e))


@router.get("/players/{address}")
async def get_player(address: str, db: AsyncSession = Depends(get_db)):
    try:
        player = await PlayerService(db).get_player_by_address(address)
        return respond(build_success(player, "Player retrieved successfully"))
    except Exception as e:
        return respond(build_error(e))


@router.get("/player/{address}/tanks")
async def get_tanks_by_owner(address: str, db: AsyncSession = Depends(get_db)):
    """Every tank of the player, with fish count and capacity usage."""
    try:
        tanks = await TankService(db).get_tanks_by_owner(address)
        return respond(build_success(tanks, "Tanks retrieved successfully"))
    except Exception as e:
        return respond(build_error(e))


@router.get("/player/{address}/fish")
async def get_fish_by_owner(address: str, db: AsyncSession = Depends(get_db)):
    try:
        fish = await FishService(db).get_fish_by_owner(address)
        return respond(build_success(fish, "Fish retrieved successfully"))
    except Exception as e:
        return respond(build_error(e))


@router.get("/player/{address}/decorations")
async def get_decorations_by_owner(address: str, db: AsyncSession = Depends(get_db)):
    try:
        decorations = await DecorationService(db).get_decorations_by_owner(address)
        return respond(
            build_success(decorations, "Decorations retrieved successfully"),
        )
    except Exception as e:
        return respond(build_error(e))
