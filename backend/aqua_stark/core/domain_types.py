"""Domain Types: rich types that replace bare primitives across the codebase.

Invariants:
    - All valid states encoded as Enums, no raw string matching
    - Enum values are exactly what the database and the wire carry

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

Address = NewType("Address", str)     # 0x + 63-64 hex chars
TxHash = NewType("TxHash", str)       # 0x + 64 hex chars
TankId = NewType("TankId", int)
FishId = NewType("FishId", int)
DecorationId = NewType("DecorationId", int)


# ─── Enums ───────────────────────────────────────────────────────

class EntityType(str, Enum):
    """Entities an on-chain transaction can touch."""
    PLAYER = "player"
    FISH = "fish"
    TANK = "tank"
    DECORATION = "decoration"


class SyncStatus(str, Enum):
    """Sync queue lifecycle. CONFIRMED is terminal."""
    PENDING = "pending"
    CONFIRMED = "confirmed"
    FAILED = "failed"


class DecorationKind(str, Enum):
    PLANT = "plant"
    STATUE = "statue"
    BACKGROUND = "background"
    ORNAMENT = "ornament"
