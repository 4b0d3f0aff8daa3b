"""Tank Schemas: tank data with derived occupancy fields."""

from datetime import datetime

from pydantic import BaseModel, StrictInt

from aqua_stark.schemas.fish import FishSummary


class Tank(BaseModel):
    id: int
    owner: str
    name: str | None = None
    capacity: int
    fish_count: int
    capacity_usage: float
    created_at: datetime
    updated_at: datetime


class TankWithFish(Tank):
    """Tank detail: always carries a fish list, possibly empty.

    Only fish placed in this tank are listed; fish the owner holds outside any tank
    are left out (see GET /api/player/{address}/fish).
    """
    fish: list[FishSummary]


class TankMint(BaseModel):
    owner: str
    name: str | None = None
    capacity: StrictInt | None = None


class TankMinted(BaseModel):
    tank: Tank
    tx_hash: str


class XpMultiplier(BaseModel):
    tank_id: int
    multiplier: float
