"""Demo fleet for development stores.

Ships go through ShipService so their bodies are validated and their
ratings derived exactly as for client requests.
"""

import logging
from datetime import datetime

from app.core.epoch import UTC, to_epoch_millis
from app.repositories.ship_repository import ShipRepository
from app.schemas.ship import ShipPayload
from app.services.ship_service import ShipService

logger = logging.getLogger(__name__)


def _millis(year: int, month: int = 1, day: int = 1) -> int:
    return to_epoch_millis(datetime(year, month, day, tzinfo=UTC))


DEMO_FLEET: list[dict] = [
    {"name": "Orion III", "planet": "Mars", "shipType": "MERCHANT",
     "prodDate": _millis(2995, 4, 12), "used": True, "speed": 0.82, "crewSize": 617},
    {"name": "Daedalus", "planet": "Jupiter", "shipType": "TRANSPORT",
     "prodDate": _millis(3001, 9, 3), "used": False, "speed": 0.94, "crewSize": 1045},
    {"name": "Eagle Transporter", "planet": "Earth", "shipType": "TRANSPORT",
     "prodDate": _millis(2989, 1, 30), "used": True, "speed": 0.79, "crewSize": 4527},
    {"name": "Nostromo", "planet": "Saturn", "shipType": "MERCHANT",
     "prodDate": _millis(3016, 6, 21), "used": True, "speed": 0.22, "crewSize": 15},
    {"name": "Battlecruiser Hyperion", "planet": "Sirius", "shipType": "MILITARY",
     "prodDate": _millis(3011, 11, 8), "used": False, "speed": 0.67, "crewSize": 3210},
    {"name": "Executor", "planet": "Coruscant", "shipType": "MILITARY",
     "prodDate": _millis(2980, 2, 14), "used": False, "speed": 0.46, "crewSize": 9901},
    {"name": "Serenity", "planet": "Persephone", "shipType": "TRANSPORT",
     "prodDate": _millis(3018, 7, 1), "used": True, "speed": 0.51, "crewSize": 9},
    {"name": "Pillar of Autumn", "planet": "Reach", "shipType": "MILITARY",
     "prodDate": _millis(2913, 3, 25), "used": False, "speed": 0.35, "crewSize": 1250},
]


async def seed_demo_data(repository: ShipRepository) -> int:
    """Insert the demo fleet. Returns the number of ships created."""
    service = ShipService(repository)
    for body in DEMO_FLEET:
        await service.create_ship(ShipPayload.model_validate(body))
    return len(DEMO_FLEET)


async def seed_if_empty(repository: ShipRepository) -> int | None:
    """Seed demo ships only if the store is empty.

    Returns:
        Number of ships seeded, None if the store already had ships.
    """
    if await repository.find_all():
        return None
    count = await seed_demo_data(repository)
    logger.info("Seeded %d demo ships", count)
    return count
