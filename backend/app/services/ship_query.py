"""Filter, sort and paginate ships from raw listing query parameters.

The pipeline always runs over the full ship set fetched from the store:

1. every recognised filter parameter narrows the set (all must match)
2. an ``order`` parameter sorts the survivors ascending, stably
3. ``pageNumber`` / ``pageSize`` cut out one page

Unknown parameters are ignored.
"""

import re
from collections.abc import Callable, Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from app.core.epoch import to_epoch_millis
from app.core.errors import ValidationError
from app.models.ship import Ship, ShipOrder

DEFAULT_PAGE_NUMBER = 0
DEFAULT_PAGE_SIZE = 3

_INTEGER = re.compile(r"[+-]?[0-9]+")

ShipPredicate = Callable[[Ship], bool]


def _parse_int(key: str, raw: str) -> int:
    if not _INTEGER.fullmatch(raw):
        raise ValidationError(f"Query parameter {key!r} must be an integer, got {raw!r}")
    return int(raw)


def _parse_float(key: str, raw: str) -> float:
    # float() also reads digit separators such as "1_0"
    if "_" in raw:
        raise ValidationError(f"Query parameter {key!r} must be a number, got {raw!r}")
    try:
        return float(raw)
    except ValueError:
        raise ValidationError(f"Query parameter {key!r} must be a number, got {raw!r}") from None


def _parse_bool(raw: str) -> bool:
    # Anything but a case-insensitive "true" reads as false.
    return raw.lower() == "true"


def _prod_millis(ship: Ship) -> int:
    return to_epoch_millis(ship.prod_date)


def _build_predicate(key: str, raw: str) -> ShipPredicate | None:
    if key == "name":
        return lambda ship: raw in ship.name
    if key == "planet":
        return lambda ship: raw in ship.planet
    if key == "shipType":
        return lambda ship: ship.ship_type.value == raw
    if key == "after":
        after = _parse_int(key, raw)
        return lambda ship: _prod_millis(ship) > after
    if key == "before":
        before = _parse_int(key, raw)
        return lambda ship: _prod_millis(ship) < before
    if key == "isUsed":
        is_used = _parse_bool(raw)
        return lambda ship: ship.used == is_used
    if key == "minSpeed":
        min_speed = _parse_float(key, raw)
        return lambda ship: ship.speed > min_speed
    if key == "maxSpeed":
        max_speed = _parse_float(key, raw)
        return lambda ship: ship.speed < max_speed
    if key == "minCrewSize":
        min_crew = _parse_int(key, raw)
        return lambda ship: ship.crew_size > min_crew
    if key == "maxCrewSize":
        max_crew = _parse_int(key, raw)
        return lambda ship: ship.crew_size < max_crew
    if key == "minRating":
        min_rating = _parse_float(key, raw)
        return lambda ship: ship.rating > min_rating
    if key == "maxRating":
        max_rating = _parse_float(key, raw)
        return lambda ship: ship.rating < max_rating
    return None


def parse_order(raw: str) -> ShipOrder:
    """Exact, case-sensitive lookup of a sort order by name."""
    try:
        return ShipOrder[raw]
    except KeyError:
        raise ValidationError(f"Unknown order {raw!r}") from None


_SORT_KEYS: dict[ShipOrder, Callable[[Ship], Any]] = {
    ShipOrder.ID: lambda ship: ship.id,
    ShipOrder.SPEED: lambda ship: ship.speed,
    ShipOrder.DATE: _prod_millis,
    ShipOrder.RATING: lambda ship: ship.rating,
}


@dataclass
class ShipQuery:
    """Parsed listing parameters."""

    predicates: list[ShipPredicate] = field(default_factory=list)
    order: ShipOrder | None = None
    page_number: int = DEFAULT_PAGE_NUMBER
    page_size: int = DEFAULT_PAGE_SIZE

    @classmethod
    def from_params(cls, params: Mapping[str, str], paged: bool = True) -> "ShipQuery":
        """Parse raw query parameters, raising ValidationError on bad values.

        With ``paged`` false only the filters are read, as for a count.
        """
        query = cls()
        for key, raw in params.items():
            predicate = _build_predicate(key, raw)
            if predicate is not None:
                query.predicates.append(predicate)
        if not paged:
            return query

        if "order" in params:
            query.order = parse_order(params["order"])
        if "pageNumber" in params:
            query.page_number = _parse_page_value("pageNumber", params["pageNumber"])
        if "pageSize" in params:
            query.page_size = _parse_page_value("pageSize", params["pageSize"])
        return query

    def matches(self, ship: Ship) -> bool:
        return all(predicate(ship) for predicate in self.predicates)


def _parse_page_value(key: str, raw: str) -> int:
    value = _parse_int(key, raw)
    if value < 0:
        raise ValidationError(f"Query parameter {key!r} must not be negative")
    return value


def filter_ships(ships: Iterable[Ship], query: ShipQuery) -> list[Ship]:
    """Ships satisfying every predicate of ``query``, in their original order."""
    return [ship for ship in ships if query.matches(ship)]


def sort_ships(ships: list[Ship], order: ShipOrder) -> list[Ship]:
    """Stable ascending sort on the field named by ``order``."""
    return sorted(ships, key=_SORT_KEYS[order])


def paginate(ships: Sequence[Ship], page_number: int, page_size: int) -> list[Ship]:
    """Half-open page ``[n*size, n*size + size)``, empty once past the end."""
    start = page_number * page_size
    return list(ships[start : start + page_size])


def run_query(ships: Iterable[Ship], query: ShipQuery) -> list[Ship]:
    """Filter, optionally sort, then paginate."""
    result = filter_ships(ships, query)
    if query.order is not None:
        result = sort_ships(result, query.order)
    return paginate(result, query.page_number, query.page_size)
