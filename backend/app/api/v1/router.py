"""API v1 router aggregating all sub-routers."""

from fastapi import APIRouter

from app.api.v1.ships import router as ships_router
from app.core.config import settings
from app.db.init_db import check_db_connection

api_v1_router = APIRouter()


@api_v1_router.get("/health")
async def health_check() -> dict[str, str]:
    """Report liveness and, for the database store, connectivity."""
    if settings.uses_database and not await check_db_connection():
        return {"status": "degraded", "store": settings.SHIP_STORE}
    return {"status": "ok", "store": settings.SHIP_STORE}


api_v1_router.include_router(ships_router)
