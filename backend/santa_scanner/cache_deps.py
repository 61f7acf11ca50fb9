from __future__ import annotations
from fastapi import Request
from santa_scanner.services.leaderboard import LeaderboardCache

def get_leaderboard_cache(request: Request) -> LeaderboardCache:
    return request.app.state.leaderboard_cache
