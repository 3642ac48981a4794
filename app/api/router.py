"""
Main API router
"""
from fastapi import APIRouter

from app.api.v1 import (
    health,
    version,
    agenda_settings,
    custom_holidays,
    bridges,
    blocks,
    unblocks,
    calendar,
)

api_router = APIRouter()

api_router.include_router(health.router, tags=["health"])
api_router.include_router(version.router, tags=["version"])
api_router.include_router(agenda_settings.router, prefix="/agenda-settings", tags=["agenda-settings"])
api_router.include_router(custom_holidays.router, prefix="/custom-holidays", tags=["custom-holidays"])
api_router.include_router(bridges.router, prefix="/bridges", tags=["bridges"])
api_router.include_router(blocks.router, prefix="/blocks", tags=["blocks"])
api_router.include_router(unblocks.router, prefix="/unblocks", tags=["unblocks"])
api_router.include_router(calendar.router, prefix="/calendar", tags=["calendar"])
