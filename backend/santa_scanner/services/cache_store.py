from __future__ import annotations
import json
import time
from typing import Any, Callable, Protocol
import structlog
from redis import asyncio as aioredis
from redis.exceptions import RedisError
from santa_scanner.config import Settings

log = structlog.get_logger(__name__)


class CacheError(Exception):
    """Cache store unreachable, timed out, or returned something unreadable."""


class CacheHealth(Protocol):
    def is_available(self) -> bool: ...


class CacheStore(CacheHealth, Protocol):
    async def get(self, key: str) -> dict[str, Any] | None: ...
    async def set(self, key: str, value: dict[str, Any], ex: int) -> None: ...
    async def delete(self, key: str) -> None: ...
    async def ping(self) -> bool: ...
    async def close(self) -> None: ...


class RedisCacheStore:
    """
    JSON values in Redis. Any Redis failure is re-raised as CacheError and
    marks this instance unhealthy; is_available() stays False for
    retry_seconds, then lets one trial call through.
    """

    def __init__(self, client: aioredis.Redis, retry_seconds: float = 5.0, clock: Callable[[], float] = time.monotonic):
        self._client = client
        self._clock = clock
        self._retry_seconds = retry_seconds
        self._healthy = True
        self._failed_at = 0.0

    @classmethod
    def from_url(cls, url: str, *, socket_timeout: float, retry_seconds: float) -> "RedisCacheStore":
        client = aioredis.Redis.from_url(
            url,
            socket_timeout=socket_timeout,
            socket_connect_timeout=socket_timeout,
            decode_responses=True,
        )
        return cls(client, retry_seconds=retry_seconds)

    def is_available(self) -> bool:
        if self._healthy:
            return True
        return self._clock() - self._failed_at >= self._retry_seconds

    def _mark_ok(self):
        if not self._healthy:
            log.info("cache_recovered")
        self._healthy = True

    def _mark_failed(self, exc: Exception):
        if self._healthy:
            log.warning("cache_unavailable", error=str(exc))
        self._healthy = False
        self._failed_at = self._clock()

    async def get(self, key: str) -> dict[str, Any] | None:
        try:
            raw = await self._client.get(key)
        except RedisError as e:
            self._mark_failed(e)
            raise CacheError(str(e)) from e
        except UnicodeDecodeError as e:
            raise CacheError(f"undecodable cache entry at {key}") from e
        self._mark_ok()
        if raw is None:
            return None
        try:
            return json.loads(raw)
        except ValueError as e:
            raise CacheError(f"undecodable cache entry at {key}") from e

    async def set(self, key: str, value: dict[str, Any], ex: int) -> None:
        body = json.dumps(value, default=str)
        try:
            await self._client.set(key, body, ex=ex)
        except RedisError as e:
            self._mark_failed(e)
            raise CacheError(str(e)) from e
        self._mark_ok()

    async def delete(self, key: str) -> None:
        try:
            await self._client.delete(key)
        except RedisError as e:
            self._mark_failed(e)
            raise CacheError(str(e)) from e
        self._mark_ok()

    async def ping(self) -> bool:
        try:
            await self._client.ping()
        except RedisError as e:
            self._mark_failed(e)
            return False
        self._mark_ok()
        return True

    async def close(self) -> None:
        await self._client.aclose()


class DisabledCacheStore:
    """Stand-in when no REDIS_URL is configured: never available."""

    def is_available(self) -> bool:
        return False

    async def get(self, key: str) -> dict[str, Any] | None:
        raise CacheError("cache disabled")

    async def set(self, key: str, value: dict[str, Any], ex: int) -> None:
        raise CacheError("cache disabled")

    async def delete(self, key: str) -> None:
        return None

    async def ping(self) -> bool:
        return False

    async def close(self) -> None:
        return None


def build_cache_store(settings: Settings) -> CacheStore:
    if not settings.redis_url:
        return DisabledCacheStore()
    return RedisCacheStore.from_url(
        settings.redis_url,
        socket_timeout=settings.cache_socket_timeout,
        retry_seconds=settings.cache_retry_seconds,
    )
