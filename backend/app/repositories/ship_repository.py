"""Ship stores: the capability the service relies on and its implementations."""

from typing import Protocol

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.ship import Ship


class ShipRepository(Protocol):
    """Everything the ship service needs from a store."""

    async def find_all(self) -> list[Ship]: ...

    async def find_by_id(self, ship_id: int) -> Ship | None: ...

    async def save(self, ship: Ship) -> Ship: ...

    async def delete_by_id(self, ship_id: int) -> None: ...


class SqlShipRepository:
    """Ship store backed by an async SQLAlchemy session."""

    def __init__(self, db: AsyncSession) -> None:
        self._db = db

    async def find_all(self) -> list[Ship]:
        result = await self._db.execute(select(Ship).order_by(Ship.id))
        return list(result.scalars().all())

    async def find_by_id(self, ship_id: int) -> Ship | None:
        result = await self._db.execute(select(Ship).where(Ship.id == ship_id))
        return result.scalar_one_or_none()

    async def save(self, ship: Ship) -> Ship:
        self._db.add(ship)
        await self._db.flush()
        await self._db.refresh(ship)
        return ship

    async def delete_by_id(self, ship_id: int) -> None:
        ship = await self.find_by_id(ship_id)
        if ship is not None:
            await self._db.delete(ship)
            await self._db.flush()


class InMemoryShipRepository:
    """Process-local ship store; iteration follows insertion order."""

    def __init__(self) -> None:
        self._ships: dict[int, Ship] = {}
        self._next_id = 1

    async def find_all(self) -> list[Ship]:
        return list(self._ships.values())

    async def find_by_id(self, ship_id: int) -> Ship | None:
        return self._ships.get(ship_id)

    async def save(self, ship: Ship) -> Ship:
        if ship.id is None:
            ship.id = self._next_id
            self._next_id += 1
        self._ships[ship.id] = ship
        return ship

    async def delete_by_id(self, ship_id: int) -> None:
        self._ships.pop(ship_id, None)

    def clear(self) -> None:
        self._ships.clear()
        self._next_id = 1
