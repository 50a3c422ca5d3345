# tests/test_validator.py
import pytest

from app.core import parse_menu_item, validate_menu_item
from app.errors import MenuValidationError
from app.models import MenuItemPatch

PRICE_ERROR = [{"field": "price", "message": "Price must be a number greater than 0"}]


def _fields(errors):
    return [e["field"] for e in errors]


def test_valid_payload_has_no_errors(veggie_wrap):
    assert validate_menu_item(veggie_wrap) == []


def test_available_is_optional_but_must_be_boolean(veggie_wrap):
    assert validate_menu_item({**veggie_wrap, "available": False}) == []
    errors = validate_menu_item({**veggie_wrap, "available": "yes"})
    assert errors == [{"field": "available", "message": "Available must be a boolean"}]


def test_all_violations_are_collected():
    errors = validate_menu_item({
        "name": "ab",
        "description": "short",
        "price": 0,
        "category": "snack",
        "ingredients": [],
        "available": 1,
    })
    assert _fields(errors) == ["name", "description", "price", "category", "ingredients", "available"]


def test_empty_payload_reports_every_failing_rule():
    errors = validate_menu_item({})
    assert errors[:4] == [
        {"field": "name", "message": "Name must be a string"},
        {"field": "name", "message": "Name must be at least 3 characters"},
        {"field": "description", "message": "Description must be a string"},
        {"field": "description", "message": "Description must be at least 10 characters"},
    ]
    assert _fields(errors[4:]) == ["price", "category", "ingredients"]


def test_non_string_name_only_fails_type_rule(veggie_wrap):
    errors = validate_menu_item({**veggie_wrap, "name": 12345})
    assert errors == [{"field": "name", "message": "Name must be a string"}]


@pytest.mark.parametrize(
    "price",
    [-5, 0, "8.99", True, None, float("inf"), float("-inf"), float("nan"), 10 ** 400],
)
def test_bad_prices_are_rejected(veggie_wrap, price):
    assert validate_menu_item({**veggie_wrap, "price": price}) == PRICE_ERROR


def test_integer_price_is_accepted(veggie_wrap):
    assert validate_menu_item({**veggie_wrap, "price": 7}) == []


def test_name_length_message(veggie_wrap):
    errors = validate_menu_item({**veggie_wrap, "name": "Ab"})
    assert errors == [{"field": "name", "message": "Name must be at least 3 characters"}]


def test_ingredients_must_be_strings(veggie_wrap):
    errors = validate_menu_item({**veggie_wrap, "ingredients": ["tortilla", 3, 4]})
    assert errors == [{"field": "ingredients", "message": "Ingredients must contain only strings"}]


def test_non_object_body_is_rejected():
    assert _fields(validate_menu_item(["name"])) == ["body"]
    assert _fields(validate_menu_item(None)) == ["body"]


def test_partial_only_checks_present_fields():
    assert validate_menu_item({"price": 13.99}, partial=True) == []
    assert validate_menu_item({"price": 13.99, "name": None}, partial=True) == []
    errors = validate_menu_item({"name": "x", "category": "dessert"}, partial=True)
    assert _fields(errors) == ["name"]
    assert validate_menu_item({"price": float("inf")}, partial=True) == PRICE_ERROR


def test_parse_builds_models_and_drops_unknown_keys(veggie_wrap):
    item = parse_menu_item({**veggie_wrap, "id": 99, "spicy": True})
    assert item.available is True
    assert not hasattr(item, "spicy")
    patch = parse_menu_item({"price": 13.99, "name": None}, partial=True)
    assert isinstance(patch, MenuItemPatch)
    assert patch.model_dump(exclude_none=True) == {"price": 13.99}


def test_parse_raises_with_every_error():
    with pytest.raises(MenuValidationError) as info:
        parse_menu_item({"price": -5})
    assert "price" in _fields(info.value.errors)
    assert "name" in _fields(info.value.errors)
