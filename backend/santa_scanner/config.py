from __future__ import annotations
import os
from pydantic import BaseModel

class Settings(BaseModel):
    environment: str = os.getenv("ENVIRONMENT", "dev")
    app_name: str = os.getenv("APP_NAME", "santa-scanner-api")
    app_display_name: str = os.getenv("APP_DISPLAY_NAME", "Santa Scanner")
    app_version: str = os.getenv("APP_VERSION", "0.1.0")
    git_sha: str = os.getenv("GIT_SHA", "dev")
    api_host: str = os.getenv("API_HOST", "0.0.0.0")
    api_port: int = int(os.getenv("API_PORT", "8000"))
    cors_origins: list[str] = os.getenv("CORS_ORIGINS", "*").split(",")
    database_url: str = os.getenv("DATABASE_URL", "postgresql+asyncpg://postgres:postgres@db:5432/santa_scanner")
    # Empty REDIS_URL runs without a leaderboard cache
    redis_url: str = os.getenv("REDIS_URL", "redis://redis:6379/0")

    # Leaderboard caching
    leaderboard_limit: int = int(os.getenv("LEADERBOARD_LIMIT", "100"))
    leaderboard_cache_seconds: int = int(os.getenv("LEADERBOARD_CACHE_SECONDS", "30"))
    leaderboard_stale_seconds: int = int(os.getenv("LEADERBOARD_STALE_SECONDS", "60"))  # advertised only, never enforced
    leaderboard_cache_version: int = int(os.getenv("LEADERBOARD_CACHE_VERSION", "1"))
    cache_retry_seconds: float = float(os.getenv("CACHE_RETRY_SECONDS", "5"))
    cache_socket_timeout: float = float(os.getenv("CACHE_SOCKET_TIMEOUT", "0.5"))

    # Built frontend (served from / when set)
    static_dir: str = os.getenv("STATIC_DIR", "")

settings = Settings()
