"""Pytest configuration with fixtures for async testing."""

from datetime import datetime
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_ship_repository
from app.core.config import settings
from app.core.epoch import UTC, to_epoch_millis
from app.main import app
from app.models.ship import Ship, ShipType
from app.repositories.ship_repository import InMemoryShipRepository
from app.schemas.ship import ShipPayload
from app.services.ship_service import ShipService


def millis(year: int, month: int = 1, day: int = 1) -> int:
    """Epoch milliseconds of a UTC calendar date."""
    return to_epoch_millis(datetime(year, month, day, tzinfo=UTC))


# ---------------------------------------------------------------------------
# Test Data Factories
# ---------------------------------------------------------------------------


class ShipFactory:
    """Factory for creating transient Ship instances for testing."""

    _counter = 0

    @classmethod
    def create(cls, **overrides: Any) -> Ship:
        cls._counter += 1
        defaults = {
            "id": cls._counter,
            "name": f"Ship {cls._counter}",
            "planet": "Mars",
            "ship_type": ShipType.TRANSPORT,
            "prod_date": datetime(3000, 1, 1, tzinfo=UTC),
            "used": False,
            "speed": 0.5,
            "crew_size": 100,
            "rating": 2.0,
        }
        return Ship(**{**defaults, **overrides})


def eagle_body(**overrides: Any) -> dict[str, Any]:
    """Wire body of a valid, unused military ship built in 3000."""
    body = {
        "name": "Eagle",
        "planet": "Mars",
        "shipType": "MILITARY",
        "prodDate": millis(3000),
        "speed": 0.5,
        "crewSize": 100,
    }
    body.update(overrides)
    return body


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def ship_factory():
    """Provide ShipFactory for tests."""
    ShipFactory._counter = 0
    return ShipFactory


@pytest.fixture
def eagle_payload() -> ShipPayload:
    return ShipPayload.model_validate(eagle_body())


@pytest.fixture
def mock_db():
    """Provide a mock AsyncSession for unit tests."""
    session = AsyncMock(spec=AsyncSession)
    session.add = MagicMock()
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.refresh = AsyncMock()
    session.delete = AsyncMock()
    return session


@pytest.fixture
def memory_repository() -> InMemoryShipRepository:
    return InMemoryShipRepository()


@pytest.fixture
def ship_service(memory_repository) -> ShipService:
    return ShipService(memory_repository)


@pytest.fixture
def client(monkeypatch, memory_repository):
    """HTTP client wired to a fresh in-memory ship store."""
    monkeypatch.setattr(settings, "SHIP_STORE", "memory")
    app.dependency_overrides[get_ship_repository] = lambda: memory_repository
    yield TestClient(app)
    app.dependency_overrides.clear()
