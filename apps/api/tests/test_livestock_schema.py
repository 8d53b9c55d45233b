import pytest

from fructosahel.models import LivestockType
from fructosahel.schemas import LivestockCreateRequest, LivestockUpdateRequest, ValidationReport, livestock_schema

FARM_ID = "0b6c53f4-8a59-4d1c-bd7e-3b1f4c2f7a21"


def _payload(**overrides: object) -> dict:
    payload = {"farmId": FARM_ID, "livestockType": "chickens", "quantity": 10}
    payload.update(overrides)
    return payload


@pytest.mark.parametrize("livestock_type", [member.value for member in LivestockType])
def test_livestock_accepts_every_listed_type(livestock_type: str) -> None:
    result = livestock_schema.validate_create(_payload(livestockType=livestock_type))
    assert isinstance(result, LivestockCreateRequest)
    assert result.livestock_type == livestock_type


def test_livestock_rejects_unknown_type_naming_the_value() -> None:
    result = livestock_schema.validate_create(_payload(livestockType="cows"))
    assert isinstance(result, ValidationReport)
    assert result.paths == ["livestockType"]
    assert result.issues[0].code == "enum"
    assert "'cows'" in result.issues[0].message


def test_livestock_quantity_must_be_positive_integer() -> None:
    fractional = livestock_schema.validate_create(_payload(quantity=3.5))
    zero = livestock_schema.validate_create(_payload(quantity=0))
    accepted = livestock_schema.validate_create(_payload(quantity=10))
    coerced = livestock_schema.validate_create(_payload(quantity="12"))

    assert isinstance(fractional, ValidationReport)
    assert fractional.issues[0].code == "int_from_float"
    assert isinstance(zero, ValidationReport)
    assert zero.issues[0].code == "greater_than"
    assert isinstance(accepted, LivestockCreateRequest)
    assert accepted.quantity == 10
    assert isinstance(coerced, LivestockCreateRequest)
    assert coerced.quantity == 12


def test_livestock_breed_is_bounded() -> None:
    result = livestock_schema.validate_create(_payload(breed="b" * 101))
    assert isinstance(result, ValidationReport)
    assert [(issue.path, issue.code) for issue in result.issues] == [("breed", "string_too_long")]


def test_livestock_update_contract() -> None:
    assert "farm_id" not in LivestockUpdateRequest.model_fields

    result = livestock_schema.validate_update({"livestockType": "ducks", "quantity": "4"})
    assert isinstance(result, LivestockUpdateRequest)
    assert result.payload() == {"livestockType": "ducks", "quantity": 4}

    rejected = livestock_schema.validate_update({"farmId": FARM_ID, "livestockType": "goats"})
    assert isinstance(rejected, ValidationReport)
    assert [(issue.path, issue.code) for issue in rejected.issues] == [
        ("farmId", "immutable"),
        ("livestockType", "enum"),
    ]
