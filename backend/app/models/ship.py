"""Ship SQLAlchemy model and its enumerations."""

import enum
from datetime import datetime

from sqlalchemy import Boolean, DateTime, Enum, Float, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from app.core.database import Base


class ShipType(str, enum.Enum):
    """Kinds of ship, matched by exact name."""

    TRANSPORT = "TRANSPORT"
    MILITARY = "MILITARY"
    MERCHANT = "MERCHANT"


class ShipOrder(str, enum.Enum):
    """Fields a ship listing can be sorted by."""

    ID = "ID"
    SPEED = "SPEED"
    DATE = "DATE"
    RATING = "RATING"


class Ship(Base):
    """A registered space ship."""

    __tablename__ = "ships"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(50), nullable=False)
    planet: Mapped[str] = mapped_column(String(50), nullable=False)
    ship_type: Mapped[ShipType] = mapped_column(
        Enum(ShipType, name="ship_type", native_enum=False, length=20), nullable=False
    )
    prod_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, comment="Production date, only the UTC year is rated"
    )
    used: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    speed: Mapped[float] = mapped_column(Float, nullable=False)
    crew_size: Mapped[int] = mapped_column(Integer, nullable=False)
    rating: Mapped[float] = mapped_column(
        Float, nullable=False, comment="Derived from speed, used and prod_date"
    )

    def __repr__(self) -> str:
        return f"Ship(id={self.id!r}, name={self.name!r}, planet={self.planet!r})"
