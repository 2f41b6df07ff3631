"""FastAPI application entry point."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.deps import get_ship_repository
from app.api.v1.router import api_v1_router
from app.core.config import settings
from app.core.database import close_db
from app.core.errors import register_exception_handlers
from app.db.init_db import init_db
from app.db.seed import seed_if_empty

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Manage application startup and shutdown lifecycle."""
    logger.info("Starting %s with the %s ship store ...", settings.PROJECT_NAME, settings.SHIP_STORE)

    # Startup
    if settings.uses_database:
        await init_db()
        logger.info("Database initialized")

    if settings.SEED_DEMO_DATA:
        async with asynccontextmanager(get_ship_repository)() as repository:
            if await seed_if_empty(repository) is None:
                logger.info("Ship store already has data, skipping seed")

    yield

    # Shutdown
    if settings.uses_database:
        await close_db()
        logger.info("Database disconnected")


app = FastAPI(
    title=settings.PROJECT_NAME,
    version="0.1.0",
    lifespan=lifespan,
    docs_url="/docs" if settings.DEBUG else None,
    redoc_url="/redoc" if settings.DEBUG else None,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS.split(","),
    allow_credentials=True,
    allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Accept"],
)

register_exception_handlers(app)

app.include_router(api_v1_router, prefix=settings.API_PREFIX)
