"""Ship Pydantic schemas.

Ships travel over the wire in camelCase with ``prodDate`` as epoch
milliseconds.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_serializer

from app.core.epoch import to_epoch_millis
from app.models.ship import ShipType


class ShipPayload(BaseModel):
    """Body of a create or partial update request.

    Every field is optional here; the validator decides which are required.
    ``id`` and ``rating`` sent by a client are ignored.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: str | None = None
    planet: str | None = None
    ship_type: ShipType | None = Field(None, alias="shipType")
    prod_date: int | None = Field(None, alias="prodDate", description="Epoch milliseconds")
    used: bool | None = None
    speed: float | None = Field(None, allow_inf_nan=False)
    crew_size: int | None = Field(None, alias="crewSize")

    def supplied(self) -> dict[str, Any]:
        """Fields the client actually sent with a non-null value."""
        return {
            name: getattr(self, name)
            for name in self.model_fields_set
            if getattr(self, name) is not None
        }


class ShipResponse(BaseModel):
    """Schema for ship responses."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int
    name: str
    planet: str
    ship_type: ShipType = Field(serialization_alias="shipType")
    prod_date: datetime = Field(serialization_alias="prodDate")
    used: bool
    speed: float
    crew_size: int = Field(serialization_alias="crewSize")
    rating: float

    @field_serializer("prod_date")
    def _prod_date_millis(self, value: datetime) -> int:
        return to_epoch_millis(value)
