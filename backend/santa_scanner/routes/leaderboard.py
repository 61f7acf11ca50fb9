from __future__ import annotations
from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import SQLAlchemyError
import structlog

from santa_scanner.db import get_session
from santa_scanner.cache_deps import get_leaderboard_cache
from santa_scanner.config import settings
from santa_scanner.schemas.scan_result import LeaderboardPayload
from santa_scanner.services.leaderboard import LeaderboardCache

router = APIRouter(prefix="/api", tags=["leaderboard"])
log = structlog.get_logger(__name__)

def cache_control_header() -> str:
    return (
        f"public, max-age={settings.leaderboard_cache_seconds}, "
        f"stale-while-revalidate={settings.leaderboard_stale_seconds}"
    )

@router.get("/leaderboard", response_model=LeaderboardPayload)
async def leaderboard(
    session: AsyncSession = Depends(get_session),
    cache: LeaderboardCache = Depends(get_leaderboard_cache),
):
    try:
        result = await cache.read(session)
    except SQLAlchemyError:
        log.exception("leaderboard_query_failed")
        raise HTTPException(status_code=500, detail="Failed to retrieve leaderboard")

    headers = {
        "X-Cache": "HIT" if result.hit else "MISS",
        "Cache-Control": cache_control_header(),
    }
    if result.store_ms is not None:
        headers["X-Store-Time"] = str(int(round(result.store_ms)))
    return JSONResponse(content=result.payload, headers=headers)
