"""Fish & Decoration Routes: minting, feeding, breeding and toggling over HTTP."""

from tests.services.sample_data import ADDRESS


async def test_mint_feed_and_fetch_fish(client, seed_player, seed_tank):
    await seed_player()
    tank = await seed_tank(capacity=3)

    res = await client.post(
        "/api/fish", json={"owner": ADDRESS, "species": "Guppy", "tank_id": tank.id},
    )
    assert res.status_code == 201
    fish_id = res.json()["data"]["fish"]["id"]

    res = await client.post("/api/fish/feed", json={"fish_ids": [fish_id]})
    assert res.status_code == 200
    assert res.json()["data"]["success"] is True

    res = await client.get(f"/api/fish/{fish_id}")
    assert res.status_code == 200
    assert res.json()["data"]["hunger"] == 100
    assert res.json()["data"]["last_fed_at"] is not None

    tank_res = await client.get(f"/api/tank/{tank.id}")
    assert [f["id"] for f in tank_res.json()["data"]["fish"]] == [fish_id]


async def test_feed_unknown_fish_is_404(client):
    res = await client.post("/api/fish/feed", json={"fish_ids": [12345]})
    assert res.status_code == 404
    assert res.json()["error"]["type"] == "NotFoundError"


async def test_breed_ready_fish(client, seed_player, seed_fish):
    await seed_player()
    a = await seed_fish(is_ready_to_breed=True, generation=0)
    b = await seed_fish(is_ready_to_breed=True, generation=2)

    res = await client.post("/api/fish/breed", json={"fish1_id": a.id, "fish2_id": b.id})

    assert res.status_code == 201
    assert res.json()["data"]["fish"]["generation"] == 3


async def test_family_tree(client, seed_player, seed_fish):
    await seed_player()
    fish = await seed_fish()
    res = await client.get(f"/api/fish/{fish.id}/family")
    assert res.status_code == 200
    assert res.json()["data"]["generation_count"] == 2


async def test_non_numeric_fish_id_is_400(client):
    res = await client.get("/api/fish/nemo")
    assert res.status_code == 400
    assert res.json()["error"]["message"] == "Invalid fish ID format"


async def test_mint_and_toggle_decoration(client, seed_player):
    await seed_player()

    res = await client.post("/api/decorations", json={"owner": ADDRESS, "kind": "plant"})
    assert res.status_code == 201
    decoration_id = res.json()["data"]["decoration"]["id"]

    res = await client.post(f"/api/decoration/{decoration_id}/activate")
    assert res.status_code == 200
    assert res.json()["data"]["decoration"]["is_active"] is True

    res = await client.post(f"/api/decoration/{decoration_id}/activate")
    assert res.status_code == 400

    res = await client.post(f"/api/decoration/{decoration_id}/deactivate")
    assert res.json()["data"]["decoration"]["is_active"] is False


async def test_sync_queue_tracks_minted_fish(client, seed_player):
    await seed_player()
    res = await client.post("/api/fish", json={"owner": ADDRESS, "species": "Tetra"})
    tx_hash = res.json()["data"]["tx_hash"]

    res = await client.get(f"/api/sync/{tx_hash}")
    assert res.status_code == 200
    assert res.json()["data"]["status"] == "pending"
    assert res.json()["data"]["entity_type"] == "fish"

    pending = (await client.get("/api/sync/pending")).json()["data"]
    assert tx_hash in [p["tx_hash"] for p in pending]


async def test_boolean_fish_id_is_not_coerced(client, seed_player, seed_fish):
    await seed_player()
    fish = await seed_fish(hunger=5)
    assert fish.id == 1

    res = await client.post("/api/fish/feed", json={"fish_ids": [True]})

    assert res.status_code == 400
    assert res.json()["error"]["message"].startswith("Invalid request data: body.fish_ids")
    assert (await client.get("/api/fish/1")).json()["data"]["hunger"] == 5


async def test_string_breed_ids_are_rejected(client):
    res = await client.post("/api/fish/breed", json={"fish1_id": "1", "fish2_id": 2})
    assert res.status_code == 400
    assert res.json()["error"]["type"] == "ValidationError"


async def test_fish_id_beyond_integer_range_is_400(client):
    res = await client.get(f"/api/fish/{2**31}")
    assert res.status_code == 400
    assert res.json()["error"]["message"] == "Invalid fish ID"
