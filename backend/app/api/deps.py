"""Shared FastAPI dependencies for the ship endpoints."""

from collections.abc import AsyncIterator

from fastapi import Depends, Request

from app.core.config import settings
from app.core.database import session_scope
from app.repositories.ship_repository import (
    InMemoryShipRepository,
    ShipRepository,
    SqlShipRepository,
)
from app.services.ship_service import ShipService

# Shared by every request when SHIP_STORE=memory
memory_store = InMemoryShipRepository()


async def get_ship_repository() -> AsyncIterator[ShipRepository]:
    """Yield the configured ship store, one database session per request."""
    if settings.uses_database:
        async with session_scope() as session:
            yield SqlShipRepository(session)
    else:
        yield memory_store


def get_ship_service(
    repository: ShipRepository = Depends(get_ship_repository),
) -> ShipService:
    return ShipService(repository)


def get_query_params(request: Request) -> dict[str, str]:
    """Raw query parameters; the ship query pipeline interprets them.

    A repeated key keeps its first value.
    """
    params: dict[str, str] = {}
    for key, value in request.query_params.multi_items():
        params.setdefault(key, value)
    return params
