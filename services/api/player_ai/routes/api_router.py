"""Central API router composition.

This module is responsible for mounting individual route modules on the main app
router and providing a single import point for `FastAPI.include_router(...)`.

The prefix is applied per child router because the players router declares
collection routes with an empty path. The jobs router is mounted first:
`/model` must be matched before the players router's `/{record_id}`.
"""

from fastapi import APIRouter

from .jobs import router as jobs_router
from .players import router as players_router

API_PREFIX = "/api/performance"

router = APIRouter()

router.include_router(jobs_router, prefix=API_PREFIX, tags=["performance"])
router.include_router(players_router, prefix=API_PREFIX, tags=["performance"])
