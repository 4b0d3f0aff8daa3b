"""Dojo Client stubs: transaction hash shape, mock queries and readiness."""

import re

import pytest

from aqua_stark.config import get_settings
from aqua_stark.core.domain_types import DecorationKind
from aqua_stark.infrastructure.dojo_client import (
    MOCK_XP_MULTIPLIER, DojoClient, generate_mock_tx_hash,
)

TX_HASH = re.compile(r"^0x[0-9a-f]{64}$")
ADDRESS = "0x" + "a" * 64


@pytest.fixture
def client():
    return DojoClient(get_settings())


def test_mock_tx_hash_shape():
    hashes = {generate_mock_tx_hash() for _ in range(20)}
    assert all(TX_HASH.match(h) for h in hashes)
    assert len(hashes) == 20


def test_initialize_is_idempotent(client):
    assert client.is_ready() is False
    assert client.initialize() is True
    assert client.initialize() is True
    assert client.is_ready() is True


def test_stub_mode_without_credentials(client):
    client.account_address = None
    assert client.is_stub_mode is True
    client.account_address = "0x1"
    client.private_key = "0x2"
    assert client.is_stub_mode is False


async def test_mutating_calls_return_tx_hashes(client):
    results = [
        await client.register_player(ADDRESS),
        await client.gain_player_xp(ADDRESS, 10),
        await client.mint_fish(ADDRESS),
        await client.feed_fish_batch([1, 2, 3]),
        await client.gain_fish_xp(1, 5),
        await client.breed_fish(1, 2),
        await client.mint_tank(ADDRESS),
        await client.mint_decoration(ADDRESS, DecorationKind.STATUE),
        await client.activate_decoration(4),
        await client.deactivate_decoration(4),
    ]
    assert all(TX_HASH.match(tx) for tx in results)


async def test_xp_multiplier_is_mock_value(client):
    assert await client.get_xp_multiplier(3) == MOCK_XP_MULTIPLIER


async def test_family_tree_has_two_generations(client):
    tree = await client.get_fish_family_tree(7)

    assert tree.fish_id == 7
    assert tree.generation_count == 2
    root, *parents = tree.ancestors
    assert (root.parent1_id, root.parent2_id) == (107, 108)
    assert [p.id for p in parents] == [107, 108]
    assert all(p.parent1_id is None and p.generation == 1 for p in parents)
