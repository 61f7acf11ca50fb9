from __future__ import annotations
from fastapi import APIRouter, Depends, Request
from datetime import datetime, timezone
from santa_scanner.config import settings
from santa_scanner.cache_deps import get_leaderboard_cache
from santa_scanner.db import database_reachable
from santa_scanner.services.cache_store import DisabledCacheStore
from santa_scanner.services.leaderboard import LeaderboardCache

router = APIRouter()

@router.get("/health")
async def health(request: Request, cache: LeaderboardCache = Depends(get_leaderboard_cache)):
    db_ok = await database_reachable()
    if isinstance(cache.store, DisabledCacheStore):
        cache_state = "disabled"
    else:
        cache_state = "connected" if await cache.store.ping() else "disconnected"
    # Losing the cache only slows reads down; losing the database is degraded
    return {
        "status": "healthy" if db_ok else "degraded",
        "env": settings.environment,
        "time": datetime.now(timezone.utc).isoformat(),
        "request_id": request.headers.get("x-request-id") or request.state.request_id,
        "services": {
            "database": "connected" if db_ok else "disconnected",
            "cache": cache_state,
        },
    }

@router.get("/version")
async def version():
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "git_sha": settings.git_sha,
        "build": "docker",
    }
