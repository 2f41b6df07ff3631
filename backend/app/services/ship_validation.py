"""Field checks applied to ship bodies on create and partial update.

Each ``*_invalid`` helper returns True when the value is out of range; the
bounds themselves are accepted.
"""

from app.core.epoch import from_epoch_millis
from app.schemas.ship import ShipPayload

MAX_TEXT_LENGTH = 50
MIN_SPEED = 0.01
MAX_SPEED = 0.99
MIN_CREW_SIZE = 1
MAX_CREW_SIZE = 9999
MIN_PROD_YEAR = 2800
MAX_PROD_YEAR = 3019

REQUIRED_ON_CREATE = ("name", "planet", "ship_type", "prod_date", "speed", "crew_size")


def utf16_length(value: str) -> int:
    """Length in UTF-16 code units; characters outside the BMP count twice."""
    return len(value.encode("utf-16-le", "surrogatepass")) // 2


def text_invalid(value: str) -> bool:
    return value == "" or utf16_length(value) > MAX_TEXT_LENGTH


def speed_invalid(value: float) -> bool:
    # NaN is never inside the range
    return not MIN_SPEED <= value <= MAX_SPEED


def crew_size_invalid(value: int) -> bool:
    return value < MIN_CREW_SIZE or value > MAX_CREW_SIZE


def prod_date_invalid(millis: int) -> bool:
    """Reject instants before the epoch or outside the allowed production years."""
    if millis < 0:
        return True
    try:
        year = from_epoch_millis(millis).year
    except OverflowError:
        return True
    return year < MIN_PROD_YEAR or year > MAX_PROD_YEAR


_FIELD_CHECKS = {
    "name": text_invalid,
    "planet": text_invalid,
    "prod_date": prod_date_invalid,
    "speed": speed_invalid,
    "crew_size": crew_size_invalid,
}


def validate_for_update(payload: ShipPayload) -> bool:
    """Check only the fields present in a partial update.

    ``ship_type`` and ``used`` are typed by the schema and need no range check.
    """
    supplied = payload.supplied()
    return not any(
        check(supplied[field]) for field, check in _FIELD_CHECKS.items() if field in supplied
    )


def validate_for_create(payload: ShipPayload) -> bool:
    """All required fields must be present and each must pass its check."""
    supplied = payload.supplied()
    if any(field not in supplied for field in REQUIRED_ON_CREATE):
        return False
    return validate_for_update(payload)
