"""ORM Models: SQLAlchemy declarative models for all game entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Player is keyed by chain address; every other entity is owned by a player address

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete before create_all / autogenerate
"""

from aqua_stark.models.player import Player  # noqa: F401
from aqua_stark.models.tank import Tank  # noqa: F401
from aqua_stark.models.fish import Fish  # noqa: F401
from aqua_stark.models.decoration import Decoration  # noqa: F401
from aqua_stark.models.sync_queue import SyncQueue  # noqa: F401
