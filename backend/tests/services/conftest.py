"""Service test fixtures: async DB, chain client and seeded entities.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - Seed helpers insert rows directly, bypassing services and the chain stub

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for service tests
"""

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)

from aqua_stark.config import get_settings
from aqua_stark.db.base import Base
from aqua_stark.infrastructure.database import get_db, DatabaseSessionManager
import aqua_stark.infrastructure.database as db_module
from aqua_stark.infrastructure.dojo_client import DojoClient
from aqua_stark.main import app
import aqua_stark.models  # noqa: F401
from aqua_stark.models.decoration import Decoration
from aqua_stark.models.fish import Fish
from aqua_stark.models.player import Player
from aqua_stark.models.tank import Tank

from tests.services.sample_data import ADDRESS


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def dojo():
    client = DojoClient(get_settings())
    client.initialize()
    return client


@pytest.fixture
def seed_player(test_db):
    """Factory: insert a player row (counters may be None to simulate legacy rows)."""

    async def _seed(address: str = ADDRESS, **fields) -> Player:
        player = Player(address=address, **fields)
        test_db.add(player)
        await test_db.commit()
        await test_db.refresh(player)
        return player

    return _seed


@pytest.fixture
def seed_tank(test_db):
    async def _seed(owner: str = ADDRESS, capacity: int = 10, **fields) -> Tank:
        tank = Tank(owner=owner, capacity=capacity, **fields)
        test_db.add(tank)
        await test_db.commit()
        await test_db.refresh(tank)
        return tank

    return _seed


@pytest.fixture
def seed_fish(test_db):
    async def _seed(owner: str = ADDRESS, species: str = "Clownfish", **fields) -> Fish:
        fish = Fish(owner=owner, species=species, **fields)
        test_db.add(fish)
        await test_db.commit()
        await test_db.refresh(fish)
        return fish

    return _seed


@pytest.fixture
def seed_decoration(test_db):
    async def _seed(owner: str = ADDRESS, kind: str = "plant", **fields) -> Decoration:
        decoration = Decoration(owner=owner, kind=kind, **fields)
        test_db.add(decoration)
        await test_db.commit()
        await test_db.refresh(decoration)
        return decoration

    return _seed


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    # Readiness probe reads db_manager directly
    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager
