"""Decoration Routes."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from aqua_stark.api.dependencies import get_dojo_client
from aqua_stark.api.envelope import respond
from aqua_stark.core.responses import build_error, build_success
from aqua_stark.core.validation import parse_id
from aqua_stark.infrastructure.database import get_db
from aqua_stark.infrastructure.dojo_client import DojoClient
from aqua_stark.schemas.decoration import DecorationMint
from aqua_stark.services.decoration_service import DecorationService

router = APIRouter(prefix="/api", tags=["decorations"])


@router.post("/decorations")
async def mint_decoration(
    body: DecorationMint,
    db: AsyncSession = Depends(get_db),
    dojo: DojoClient = Depends(get_dojo_client),
):
    try:
        minted = await DecorationService(db, dojo).mint_decoration(
            body.owner, body.kind,
        )
        return respond(
            build_success(minted, "Decoration minted successfully"),
            status.HTTP_201_CREATED,
        )
    except Exception as e:
        return respond(build_error(e))


@router.get("/decoration/{decoration_id}")
async def get_decoration_by_id(
    decoration_id: str, db: AsyncSession = Depends(get_db),
):
    try:
        parsed_id = parse_id(decoration_id, "decoration")
        decoration = await DecorationService(db).get_decoration_by_id(parsed_id)
        return respond(build_success(decoration, "Decoration retrieved successfully"))
    except Exception as e:
        return respond(build_error(e))


@router.post("/decoration/{decoration_id}/activate")
async def activate_decoration(
    decoration_id: str,
    db: AsyncSession = Depends(get_db),
    dojo: DojoClient = Depends(get_dojo_client),
):
    try:
        parsed_id = parse_id(decoration_id, "decoration")
        result = await DecorationService(db, dojo).activate_decoration(parsed_id)
        return respond(build_success(result, "Decoration activated successfully"))
    except Exception as e:
        return respond(build_error(e))


@router.post("/decoration/{decoration_id}/deactivate")
async def deactivate_decoration(
    decoration_id: str,
    db: AsyncSession = Depends(get_db),
    dojo: DojoClient = Depends(get_dojo_client),
):
    try:
        parsed_id = parse_id(decoration_id, "decoration")
        result = await DecorationService(db, dojo).deactivate_decoration(parsed_id)
        return respond(build_success(result, "Decoration deactivated successfully"))
    except Exception as e:
        return respond(build_error(e))
