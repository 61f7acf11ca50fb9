from __future__ import annotations
import os
import uuid
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException
from santa_scanner.config import settings
from santa_scanner.db import SessionLocal, engine
from santa_scanner.logging_setup import configure_logging
from santa_scanner.routes.system import router as system_router
from santa_scanner.routes.questions import router as questions_router
from santa_scanner.routes.scan_results import router as scan_results_router
from santa_scanner.routes.leaderboard import router as leaderboard_router
from santa_scanner.services.cache_store import build_cache_store
from santa_scanner.services.leaderboard import LeaderboardCache
import structlog

configure_logging()
log = structlog.get_logger()


class SPAStaticFiles(StaticFiles):
    """Unknown paths fall back to index.html so client-side routing works."""

    async def get_response(self, path: str, scope):
        try:
            return await super().get_response(path, scope)
        except StarletteHTTPException as e:
            if e.status_code != 404:
                raise
            return await super().get_response("index.html", scope)


def build_leaderboard_cache() -> LeaderboardCache:
    return LeaderboardCache(
        build_cache_store(settings),
        SessionLocal,
        limit=settings.leaderboard_limit,
        ttl_seconds=settings.leaderboard_cache_seconds,
        version=settings.leaderboard_cache_version,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    cache: LeaderboardCache = app.state.leaderboard_cache
    cache_ok = await cache.store.ping()
    log.info("startup", env=settings.environment, version=settings.app_version, git_sha=settings.git_sha, cache=cache_ok)
    yield
    # Shutdown
    await cache.drain()
    await cache.store.close()
    await engine.dispose()
    log.info("shutdown")

app = FastAPI(
    title=f"{settings.app_display_name} API",
    version=settings.app_version,
    lifespan=lifespan,
    description=f"{settings.app_display_name} API for the naughty-or-nice quiz and leaderboard"
)
app.state.leaderboard_cache = build_leaderboard_cache()

app.add_middleware(GZipMiddleware, minimum_size=1000)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"] if settings.environment == "dev" else settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(system_router)
app.include_router(questions_router)
app.include_router(scan_results_router)
app.include_router(leaderboard_router)

if settings.static_dir and os.path.isdir(settings.static_dir):
    app.mount("/", SPAStaticFiles(directory=settings.static_dir, html=True), name="frontend")

@app.middleware("http")
async def add_request_id(request: Request, call_next):
    rid = request.headers.get("x-request-id") or str(uuid.uuid4())
    request.state.request_id = rid
    structlog.contextvars.bind_contextvars(request_id=rid)
    response: Response = await call_next(request)
    response.headers["X-Request-ID"] = rid
    structlog.contextvars.clear_contextvars()
    return response

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("santa_scanner.main:app", host=settings.api_host, port=settings.api_port)
