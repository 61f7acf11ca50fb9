from __future__ import annotations
import asyncio
import time
from dataclasses import dataclass
from datetime import datetime, timezone as dt_tz
from typing import Any
import structlog
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from santa_scanner.models.scan_result import ScanResult
from santa_scanner.schemas.scan_result import LeaderboardMetadata, LeaderboardPayload, ScanResultPublic
from santa_scanner.services.cache_store import CacheError, CacheHealth, CacheStore

log = structlog.get_logger(__name__)


async def top_scan_results(session: AsyncSession, limit: int) -> list[ScanResult]:
    q = (
        select(ScanResult)
        .order_by(ScanResult.score.desc(), ScanResult.timestamp.asc(), ScanResult.id.asc())
        .limit(limit)
    )
    return list((await session.execute(q)).scalars().all())


async def build_leaderboard(session: AsyncSession, limit: int) -> dict[str, Any]:
    rows = await top_scan_results(session, limit)
    payload = LeaderboardPayload(
        data=[ScanResultPublic.model_validate(r) for r in rows],
        metadata=LeaderboardMetadata(
            total=len(rows),
            timestamp=datetime.now(dt_tz.utc),
            source="database",
        ),
    )
    return payload.model_dump(mode="json")


@dataclass
class LeaderboardRead:
    payload: dict[str, Any]
    hit: bool
    store_ms: float | None = None  # only set when the store was queried


def _looks_like_payload(value: Any) -> bool:
    return isinstance(value, dict) and isinstance(value.get("data"), list) and isinstance(value.get("metadata"), dict)


class LeaderboardCache:
    """
    Read-through cache for the global leaderboard with stale-while-revalidate.

    A hit returns the cached snapshot at once and schedules one detached
    refresh; a miss (or an unavailable cache) answers from the database and
    tries to repopulate. Concurrent hits each schedule their own refresh.
    """

    def __init__(
        self,
        store: CacheStore,
        session_factory: async_sessionmaker[AsyncSession],
        *,
        limit: int = 100,
        ttl_seconds: int = 30,
        version: int = 1,
        health: CacheHealth | None = None,
    ):
        self.store = store
        self.health = health if health is not None else store
        self.session_factory = session_factory
        self.limit = limit
        self.ttl_seconds = ttl_seconds
        self.key = f"leaderboard:v{version}"
        self._refreshes: set[asyncio.Task] = set()

    async def read(self, session: AsyncSession | None = None) -> LeaderboardRead:
        if self.health.is_available():
            try:
                cached = await self.store.get(self.key)
            except CacheError as e:
                log.warning("cache_read_failed", key=self.key, error=str(e))
                cached = None
            if _looks_like_payload(cached):
                self._spawn_refresh()
                served = dict(cached)
                served["metadata"] = {**cached["metadata"], "source": "cache"}
                return LeaderboardRead(payload=served, hit=True)
            # a failed get may have just marked the store unhealthy
            return await self._read_through(session, populate=self.health.is_available())
        return await self._read_through(session, populate=False)

    async def _read_through(self, session: AsyncSession | None, populate: bool) -> LeaderboardRead:
        started = time.perf_counter()
        if session is None:
            async with self.session_factory() as own:
                payload = await build_leaderboard(own, self.limit)
        else:
            payload = await build_leaderboard(session, self.limit)
        store_ms = (time.perf_counter() - started) * 1000.0

        if populate:
            try:
                await self.store.set(self.key, payload, ex=self.ttl_seconds)
            except CacheError as e:
                log.warning("cache_write_failed", key=self.key, error=str(e))
        return LeaderboardRead(payload=payload, hit=False, store_ms=store_ms)

    async def refresh(self) -> None:
        async with self.session_factory() as session:
            payload = await build_leaderboard(session, self.limit)
        await self.store.set(self.key, payload, ex=self.ttl_seconds)

    def _spawn_refresh(self):
        task = asyncio.create_task(self._refresh_in_background())
        self._refreshes.add(task)
        task.add_done_callback(self._refreshes.discard)

    async def _refresh_in_background(self):
        try:
            await self.refresh()
        except Exception:
            # Never reaches a caller; the next reader gets the older snapshot
            log.exception("leaderboard_refresh_failed", key=self.key)

    async def invalidate(self) -> None:
        try:
            await self.store.delete(self.key)
        except CacheError as e:
            log.warning("cache_invalidate_failed", key=self.key, error=str(e))

    @property
    def pending_refreshes(self) -> int:
        return len(self._refreshes)

    async def drain(self) -> None:
        while self._refreshes:
            pending = list(self._refreshes)
            await asyncio.gather(*pending, return_exceptions=True)
            self._refreshes.difference_update(pending)
