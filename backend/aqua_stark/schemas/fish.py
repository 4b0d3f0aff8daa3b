"""Fish Schemas: fish data, summaries, on-chain results and family trees.

Design Decisions:
    - FishSummary is the off-chain subset embedded in tank responses
    - FishFamilyMember parents are None for the oldest generation returned
    - Id fields in request bodies are StrictInt: JSON true/false or "3" never become ids
"""

from datetime import datetime

from pydantic import BaseModel, StrictInt


class FishSummary(BaseModel):
    id: int
    species: str
    generation: int
    xp: int
    hunger: int


class Fish(BaseModel):
    id: int
    owner: str
    tank_id: int | None = None
    species: str
    generation: int
    xp: int
    hunger: int
    is_ready_to_breed: bool
    parent1_id: int | None = None
    parent2_id: int | None = None
    last_fed_at: datetime | None = None
    created_at: datetime
    updated_at: datetime


class FishMint(BaseModel):
    owner: str
    species: str
    tank_id: StrictInt | None = None


class FishFeed(BaseModel):
    fish_ids: list[StrictInt]


class FishBreed(BaseModel):
    fish1_id: StrictInt
    fish2_id: StrictInt


class FishMinted(BaseModel):
    fish: Fish
    tx_hash: str


class FishFamilyMember(BaseModel):
    id: int
    parent1_id: int | None
    parent2_id: int | None
    generation: int


class FishFamilyTree(BaseModel):
    fish_id: int
    ancestors: list[FishFamilyMember]
    generation_count: int


class TransactionResult(BaseModel):
    tx_hash: str
    success: bool = True
