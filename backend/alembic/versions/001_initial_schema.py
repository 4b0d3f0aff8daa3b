"""Initial schema: players, tanks, fish, decorations, sync_queue.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-18

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    ]


def upgrade() -> None:
    op.create_table(
        "players",
        sa.Column("address", sa.String(66), primary_key=True),
        sa.Column("total_xp", sa.Integer, nullable=True, server_default="0"),
        sa.Column("fish_count", sa.Integer, nullable=True, server_default="0"),
        sa.Column("tournaments_won", sa.Integer, nullable=True, server_default="0"),
        sa.Column("reputation", sa.Integer, nullable=True, server_default="0"),
        sa.Column("offspring_created", sa.Integer, nullable=True, server_default="0"),
        sa.Column("avatar_url", sa.String(500), nullable=True),
        *_timestamps(),
    )

    op.create_table(
        "tanks",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("owner", sa.String(66), sa.ForeignKey("players.address"), nullable=False),
        sa.Column("name", sa.String(100), nullable=True),
        sa.Column("capacity", sa.Integer, nullable=False),
        *_timestamps(),
    )
    op.create_index("ix_tanks_owner", "tanks", ["owner"])

    op.create_table(
        "fish",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("owner", sa.String(66), sa.ForeignKey("players.address"), nullable=False),
        sa.Column("tank_id", sa.Integer, sa.ForeignKey("tanks.id"), nullable=True),
        sa.Column("species", sa.String(50), nullable=False),
        sa.Column("generation", sa.Integer, nullable=False, server_default="0"),
        sa.Column("xp", sa.Integer, nullable=False, server_default="0"),
        sa.Column("hunger", sa.Integer, nullable=False, server_default="100"),
        sa.Column("is_ready_to_breed", sa.Boolean, nullable=False, server_default="false"),
        sa.Column("parent1_id", sa.Integer, nullable=True),
        sa.Column("parent2_id", sa.Integer, nullable=True),
        sa.Column("last_fed_at", sa.DateTime(timezone=True), nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_fish_owner", "fish", ["owner"])
    op.create_index("ix_fish_tank_id", "fish", ["tank_id"])

    op.create_table(
        "decorations",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("owner", sa.String(66), sa.ForeignKey("players.address"), nullable=False),
        sa.Column("kind", sa.String(20), nullable=False),
        sa.Column("xp_multiplier", sa.Float, nullable=False, server_default="1.0"),
        sa.Column("is_active", sa.Boolean, nullable=False, server_default="false"),
        *_timestamps(),
    )
    op.create_index("ix_decorations_owner", "decorations", ["owner"])

    op.create_table(
        "sync_queue",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("tx_hash", sa.String(66), nullable=False, unique=True),
        sa.Column("entity_type", sa.String(20), nullable=False),
        sa.Column("entity_id", sa.String(500), nullable=False),
        sa.Column("status", sa.String(20), nullable=False, server_default="pending"),
        sa.Column("retry_count", sa.Integer, nullable=False, server_default="0"),
        *_timestamps(),
    )
    op.create_index("ix_sync_queue_status", "sync_queue", ["status"])


def downgrade() -> None:
    op.drop_table("sync_queue")
    op.drop_table("decorations")
    op.drop_table("fish")
    op.drop_table("tanks")
    op.drop_table("players")
