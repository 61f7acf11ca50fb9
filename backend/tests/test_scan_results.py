import pytest


@pytest.mark.asyncio
async def test_create_scan_result_returns_persisted_record(client):
    payload = {"name": "Alice", "verdict": "NICE", "message": "Always helps others", "score": 80, "country": "de"}
    r = await client.post("/api/scan-results", json=payload)
    assert r.status_code == 201
    body = r.json()
    assert body["name"] == "Alice"
    assert body["verdict"] == "NICE"
    assert body["score"] == 80
    assert body["country"] == "DE"
    assert body["id"] and body["timestamp"]


@pytest.mark.asyncio
async def test_country_is_optional(client):
    r = await client.post("/api/scan-results", json={"name": "Bob", "verdict": "NAUGHTY", "score": 12})
    assert r.status_code == 201
    assert r.json()["country"] is None
    assert r.json()["message"] == ""


@pytest.mark.asyncio
@pytest.mark.parametrize("bad", [
    {"name": "Eve", "verdict": "NICE", "score": 101},
    {"name": "Eve", "verdict": "NICE", "score": -1},
    {"name": "Eve", "verdict": "MAYBE", "score": 50},
    {"name": "   ", "verdict": "NICE", "score": 50},
    {"name": "Eve", "verdict": "NICE", "score": 50, "country": "DEU"},
    {"verdict": "NICE", "score": 50},
])
async def test_invalid_scan_results_rejected(client, fake_store, bad):
    r = await client.post("/api/scan-results", json=bad)
    assert r.status_code == 422
    assert fake_store.deletes == []


@pytest.mark.asyncio
async def test_submission_invalidates_leaderboard_key(client, fake_store, leaderboard_cache):
    await client.get("/api/leaderboard")
    assert leaderboard_cache.key in fake_store.data

    r = await client.post("/api/scan-results", json={"name": "Carol", "verdict": "NICE", "score": 70})
    assert r.status_code == 201
    assert fake_store.deletes == [leaderboard_cache.key]
    assert leaderboard_cache.key not in fake_store.data


@pytest.mark.asyncio
async def test_submission_succeeds_when_cache_is_down(client, fake_store):
    fake_store.fail = True
    r = await client.post("/api/scan-results", json={"name": "Dan", "verdict": "NAUGHTY", "score": 5})
    assert r.status_code == 201
