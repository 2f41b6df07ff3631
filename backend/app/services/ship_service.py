"""Ship registry operations on top of a ship store.

The service validates bodies, keeps ``rating`` in step with the rated
fields and runs the listing pipeline. It raises ValidationError and
NotFoundError; turning those into HTTP responses is left to the API layer.
"""

import logging
import re
from collections.abc import Mapping

from app.core.epoch import from_epoch_millis
from app.core.errors import NotFoundError, ValidationError
from app.models.ship import Ship
from app.repositories.ship_repository import ShipRepository
from app.schemas.ship import ShipPayload
from app.services.rating import calculate_rating
from app.services.ship_query import ShipQuery, filter_ships, run_query
from app.services.ship_validation import validate_for_create, validate_for_update

logger = logging.getLogger(__name__)

# Decimal digits, not all zeros
_SHIP_ID = re.compile(r"(?!0+$)[0-9]+")
_MAX_SHIP_ID = 2**63 - 1


def parse_ship_id(raw: str) -> int:
    """Parse a ship id path segment, rejecting zero, signs and non-digits."""
    if not _SHIP_ID.fullmatch(raw):
        raise ValidationError(f"Invalid ship id {raw!r}")
    ship_id = int(raw)
    if ship_id > _MAX_SHIP_ID:
        raise ValidationError(f"Invalid ship id {raw!r}")
    return ship_id


def _apply_payload(ship: Ship, payload: ShipPayload) -> None:
    """Copy the supplied fields onto ``ship`` and re-derive its rating."""
    for field, value in payload.supplied().items():
        if field == "prod_date":
            value = from_epoch_millis(value)
        setattr(ship, field, value)
    ship.rating = calculate_rating(ship.speed, ship.used, ship.prod_date)


class ShipService:
    """Create, read, update, delete and list ships."""

    def __init__(self, repository: ShipRepository) -> None:
        self.repository = repository

    async def list_ships(self, params: Mapping[str, str]) -> list[Ship]:
        query = ShipQuery.from_params(params)
        return run_query(await self.repository.find_all(), query)

    async def count_ships(self, params: Mapping[str, str]) -> int:
        query = ShipQuery.from_params(params, paged=False)
        return len(filter_ships(await self.repository.find_all(), query))

    async def create_ship(self, payload: ShipPayload) -> Ship:
        if not validate_for_create(payload):
            raise ValidationError("Ship is missing required fields or has out-of-range values")

        ship = Ship(used=False)
        _apply_payload(ship, payload)
        ship = await self.repository.save(ship)
        logger.info("Created ship %s (%s) with rating %.2f", ship.id, ship.name, ship.rating)
        return ship

    async def get_ship(self, ship_id: str) -> Ship:
        return await self._find_existing(parse_ship_id(ship_id))

    async def update_ship(self, ship_id: str, payload: ShipPayload) -> Ship:
        ship = await self._find_existing(parse_ship_id(ship_id))
        if not validate_for_update(payload):
            raise ValidationError("Ship update has out-of-range values")

        _apply_payload(ship, payload)
        ship = await self.repository.save(ship)
        logger.info("Updated ship %s, rating now %.2f", ship.id, ship.rating)
        return ship

    async def delete_ship(self, ship_id: str) -> None:
        ship = await self._find_existing(parse_ship_id(ship_id))
        await self.repository.delete_by_id(ship.id)
        logger.info("Deleted ship %s", ship.id)

    async def _find_existing(self, ship_id: int) -> Ship:
        ship = await self.repository.find_by_id(ship_id)
        if ship is None:
            raise NotFoundError(f"Ship {ship_id} not found")
        return ship
