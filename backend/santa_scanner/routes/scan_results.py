from __future__ import annotations
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import SQLAlchemyError
import structlog

from santa_scanner.db import get_session
from santa_scanner.cache_deps import get_leaderboard_cache
from santa_scanner.models.scan_result import ScanResult
from santa_scanner.schemas.scan_result import ScanResultCreate, ScanResultPublic
from santa_scanner.services.leaderboard import LeaderboardCache

router = APIRouter(prefix="/api", tags=["scan-results"])
log = structlog.get_logger(__name__)

@router.post("/scan-results", response_model=ScanResultPublic, status_code=status.HTTP_201_CREATED)
async def create_scan_result(
    payload: ScanResultCreate,
    session: AsyncSession = Depends(get_session),
    cache: LeaderboardCache = Depends(get_leaderboard_cache),
):
    row = ScanResult(**payload.model_dump())
    try:
        session.add(row)
        await session.commit()
        await session.refresh(row)
    except SQLAlchemyError:
        await session.rollback()
        log.exception("scan_result_save_failed", name=payload.name)
        raise HTTPException(status_code=500, detail="Failed to save scan result")

    log.info("scan_result_saved", id=str(row.id), score=row.score, verdict=row.verdict)
    # Next leaderboard read misses and sees this row
    await cache.invalidate()
    return ScanResultPublic.model_validate(row)
