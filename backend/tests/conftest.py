from __future__ import annotations
import json
import os
import tempfile

# Settings are read at import time, so point them at a throwaway SQLite file first
_DB_DIR = tempfile.mkdtemp(prefix="santa-scanner-tests-")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_DB_DIR}/test.db"
os.environ["REDIS_URL"] = ""

import httpx
import pytest
import pytest_asyncio
from httpx import AsyncClient

from santa_scanner.config import settings
from santa_scanner.db import Base, SessionLocal, engine
from santa_scanner.main import app
from santa_scanner.services.cache_store import CacheError
from santa_scanner.services.leaderboard import LeaderboardCache
import santa_scanner.models.scan_result  # noqa: F401


class FakeCacheStore:
    """In-memory CacheStore; values go through JSON like they would in Redis."""

    def __init__(self):
        self.data: dict[str, str] = {}
        self.available = True
        self.fail = False
        self.sets: list[tuple[str, int]] = []
        self.deletes: list[str] = []

    def is_available(self) -> bool:
        return self.available

    async def get(self, key):
        if self.fail:
            raise CacheError("connection refused")
        raw = self.data.get(key)
        return json.loads(raw) if raw is not None else None

    async def set(self, key, value, ex):
        if self.fail:
            raise CacheError("connection refused")
        self.sets.append((key, ex))
        self.data[key] = json.dumps(value, default=str)

    async def delete(self, key):
        if self.fail:
            raise CacheError("connection refused")
        self.deletes.append(key)
        self.data.pop(key, None)

    async def ping(self):
        return self.available and not self.fail

    async def close(self):
        return None


@pytest_asyncio.fixture
async def db():
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)
    yield SessionLocal
    # pooled aiosqlite connections must not outlive this test's event loop
    await engine.dispose()


@pytest.fixture
def fake_store():
    return FakeCacheStore()


@pytest_asyncio.fixture
async def leaderboard_cache(db, fake_store):
    cache = LeaderboardCache(
        fake_store,
        db,
        limit=settings.leaderboard_limit,
        ttl_seconds=settings.leaderboard_cache_seconds,
        version=settings.leaderboard_cache_version,
    )
    yield cache
    await cache.drain()


@pytest_asyncio.fixture
async def client(leaderboard_cache):
    previous = app.state.leaderboard_cache
    app.state.leaderboard_cache = leaderboard_cache
    try:
        async with AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://test") as ac:
            yield ac
    finally:
        app.state.leaderboard_cache = previous
