# app/core.py
from typing import Any, Dict, List, Type, Union

from pydantic import BaseModel, ValidationError

from .errors import MenuValidationError
from .models import MenuItemIn, MenuItemPatch

BODY_MESSAGE = "Request body must be a JSON object"

MESSAGES = {
    "name": ["Name must be a string", "Name must be at least 3 characters"],
    "description": ["Description must be a string", "Description must be at least 10 characters"],
    "price": ["Price must be a number greater than 0"],
    "category": ["Category must be appetizer, entree, dessert, or beverage"],
    "ingredients": ["Ingredients must be an array with at least 1 item", "Ingredients must contain only strings"],
    "available": ["Available must be a boolean"],
}

FIELD_ORDER = list(MESSAGES)


def _messages_for(error: Dict[str, Any]) -> List[str]:
    """Translate one pydantic error into the messages the API reports for that field."""
    field = error["loc"][0]
    messages = MESSAGES[field]
    if field in ("name", "description"):
        if error["type"] == "string_too_short":
            return [messages[1]]
        # an absent value fails the length rule as well as the type rule
        if error["type"] == "missing" or error.get("input") is None:
            return messages
        return [messages[0]]
    if field == "ingredients":
        return [messages[1]] if len(error["loc"]) > 1 else [messages[0]]
    return messages


def _to_field_errors(exc: ValidationError) -> List[Dict[str, str]]:
    found: Dict[str, List[str]] = {}
    for error in exc.errors():
        if not error["loc"] or error["loc"][0] not in MESSAGES:
            return [{"field": "body", "message": BODY_MESSAGE}]
        field = error["loc"][0]
        for message in _messages_for(error):
            if message not in found.setdefault(field, []):
                found[field].append(message)
    return [
        {"field": field, "message": message}
        for field in FIELD_ORDER
        for message in found.get(field, [])
    ]


def parse_menu_item(payload: Any, partial: bool = False) -> Union[MenuItemIn, MenuItemPatch]:
    """
    Build the model for a create (or, with partial=True, an update) payload.

    Raises MenuValidationError carrying every violation when the payload is
    rejected. Unknown keys are dropped; in partial mode absent or null keys
    are left out of the patch.
    """
    model: Type[BaseModel] = MenuItemPatch if partial else MenuItemIn
    if not isinstance(payload, dict):
        raise MenuValidationError([{"field": "body", "message": BODY_MESSAGE}])
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        raise MenuValidationError(_to_field_errors(exc)) from exc


def validate_menu_item(payload: Any, partial: bool = False) -> List[Dict[str, str]]:
    try:
        parse_menu_item(payload, partial=partial)
    except MenuValidationError as exc:
        return exc.errors
    return []
