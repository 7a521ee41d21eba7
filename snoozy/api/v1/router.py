"""
API v1 router.

Aggregates all v1 endpoints.
"""

from fastapi import APIRouter

from snoozy.api.v1.endpoints import backup, profile, sleep, statistics

api_router = APIRouter()

# Include endpoint routers
api_router.include_router(
    sleep.router, prefix="/sleep", tags=["Sleep intervals"]
)
api_router.include_router(
    statistics.router, prefix="/statistics", tags=["Statistics"]
)
api_router.include_router(
    backup.router, prefix="/backup", tags=["Backup"]
)
api_router.include_router(
    profile.router, prefix="/profile", tags=["Profile and settings"]
)
