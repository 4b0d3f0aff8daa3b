"""Decoration Schemas."""

from datetime import datetime

from pydantic import BaseModel


class Decoration(BaseModel):
    id: int
    owner: str
    kind: str
    xp_multiplier: float
    is_active: bool
    created_at: datetime
    updated_at: datetime


class DecorationMint(BaseModel):
    owner: str
    kind: str


class DecorationTransaction(BaseModel):
    """Result of a mint, activate or deactivate call."""
    decoration: Decoration
    tx_hash: str
