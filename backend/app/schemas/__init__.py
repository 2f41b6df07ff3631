"""Pydantic v2 schemas for request/response validation."""

from app.schemas.ship import ShipPayload, ShipResponse

__all__ = [
    "ShipPayload",
    "ShipResponse",
]
