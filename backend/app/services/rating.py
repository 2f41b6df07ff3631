"""Ship rating derivation."""

from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal

from app.core.epoch import utc_year

CURRENT_YEAR = 3019
USED_FACTOR = 0.5
NEW_FACTOR = 1.0

_TWO_PLACES = Decimal("0.01")


def round2(value: float) -> float:
    """Round half-up to two decimals on the shortest decimal form of ``value``.

    ``repr`` gives that shortest form, so 1.005 rounds to 1.01 even though
    the stored binary value sits slightly below it.
    """
    return float(Decimal(repr(value)).quantize(_TWO_PLACES, rounding=ROUND_HALF_UP))


def calculate_rating(speed: float, used: bool, prod_date: datetime) -> float:
    """Rating of a ship from its speed, usage and production year.

    ``80 * speed * k / (CURRENT_YEAR - prod_year + 1)`` where ``k`` halves
    the score of used ships.
    """
    k = USED_FACTOR if used else NEW_FACTOR
    prod_year = utc_year(prod_date)
    return round2((80 * speed * k) / (CURRENT_YEAR - prod_year + 1))
