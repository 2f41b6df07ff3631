"""SQLAlchemy ORM models."""

from app.models.ship import Ship, ShipOrder, ShipType

__all__ = [
    "Ship",
    "ShipOrder",
    "ShipType",
]
