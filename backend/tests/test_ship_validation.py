"""Tests for ship body validation on create and partial update."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from app.schemas.ship import ShipPayload
from app.services.ship_validation import (
    prod_date_invalid,
    speed_invalid,
    text_invalid,
    utf16_length,
    validate_for_create,
    validate_for_update,
)
from conftest import eagle_body, millis


def _payload(**body) -> ShipPayload:
    return ShipPayload.model_validate(body)


class TestValidateForCreate:
    def test_valid_body_passes(self, eagle_payload):
        assert validate_for_create(eagle_payload) is True

    def test_used_is_optional(self):
        body = eagle_body()
        assert "used" not in body
        assert validate_for_create(_payload(**body)) is True

    @pytest.mark.parametrize("missing", ["name", "planet", "shipType", "prodDate", "speed", "crewSize"])
    def test_missing_required_field_fails(self, missing):
        body = eagle_body()
        del body[missing]
        assert validate_for_create(_payload(**body)) is False

    def test_explicit_null_counts_as_missing(self):
        assert validate_for_create(_payload(**eagle_body(name=None))) is False

    @pytest.mark.parametrize(
        "override",
        [
            {"name": ""},
            {"name": "x" * 51},
            {"planet": ""},
            {"planet": "p" * 51},
            {"speed": 0.0099},
            {"speed": 1.0},
            {"crewSize": 0},
            {"crewSize": 10000},
            {"prodDate": -1},
            {"prodDate": millis(2800) - 1},
            {"prodDate": millis(3020)},
        ],
    )
    def test_out_of_range_field_fails(self, override):
        assert validate_for_create(_payload(**eagle_body(**override))) is False

    @pytest.mark.parametrize(
        "override",
        [
            {"name": "x" * 50},
            {"planet": "p"},
            {"speed": 0.01},
            {"speed": 0.99},
            {"crewSize": 1},
            {"crewSize": 9999},
            {"prodDate": millis(2800)},
            {"prodDate": millis(3019, 12, 31)},
        ],
    )
    def test_boundary_values_pass(self, override):
        assert validate_for_create(_payload(**eagle_body(**override))) is True


class TestValidateForUpdate:
    def test_empty_update_passes(self):
        assert validate_for_update(ShipPayload()) is True

    def test_single_valid_field_passes(self):
        assert validate_for_update(_payload(speed=0.2)) is True

    @pytest.mark.parametrize(
        "body",
        [{"name": ""}, {"planet": "p" * 51}, {"speed": 1.0}, {"crewSize": 0}, {"prodDate": millis(2700)}],
    )
    def test_invalid_supplied_field_fails(self, body):
        assert validate_for_update(_payload(**body)) is False

    def test_type_and_used_are_not_range_checked(self):
        assert validate_for_update(_payload(shipType="MERCHANT", used=True)) is True

    def test_null_fields_are_skipped(self):
        payload = _payload(name=None, speed=None)
        assert payload.supplied() == {}
        assert validate_for_update(payload) is True


class TestProdDateCheck:
    def test_negative_timestamp_invalid(self):
        assert prod_date_invalid(-1) is True

    def test_unrepresentable_timestamp_invalid(self):
        assert prod_date_invalid(10**20) is True

    def test_year_uses_utc(self):
        # 2799-12-31T23:00Z is still 2799 in UTC
        assert prod_date_invalid(millis(2800) - 3_600_000) is True


class TestNonFiniteSpeed:
    def test_speed_check_rejects_nan_and_infinity(self):
        assert speed_invalid(float("nan")) is True
        assert speed_invalid(float("inf")) is True

    def test_create_with_nan_speed_fails(self, eagle_payload):
        payload = eagle_payload.model_copy(update={"speed": float("nan")})
        assert validate_for_create(payload) is False

    def test_update_with_nan_speed_fails(self):
        assert validate_for_update(ShipPayload.model_construct(speed=float("nan"))) is False

    @pytest.mark.parametrize("speed", [float("nan"), float("inf"), float("-inf")])
    def test_schema_refuses_non_finite_speed(self, speed):
        with pytest.raises(PydanticValidationError):
            ShipPayload.model_validate({"speed": speed})


class TestTextLength:
    def test_length_counts_utf16_units(self):
        assert utf16_length("Eagle") == 5
        assert utf16_length("\U0001F680") == 2

    def test_astral_characters_count_twice(self):
        assert text_invalid("\U0001F680" * 25) is False
        assert text_invalid("\U0001F680" * 26) is True
