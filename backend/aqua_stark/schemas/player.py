"""Player Schemas: public player profile and registration payloads."""

from datetime import datetime

from pydantic import BaseModel


class Player(BaseModel):
    """Player profile with NULL counters already normalized to 0."""
    address: str
    total_xp: int = 0
    fish_count: int = 0
    tournaments_won: int = 0
    reputation: int = 0
    offspring_created: int = 0
    avatar_url: str | None = None
    created_at: datetime
    updated_at: datetime


class PlayerRegister(BaseModel):
    address: str
    avatar_url: str | None = None


class PlayerRegistration(BaseModel):
    player: Player
    tx_hash: str
