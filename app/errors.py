# app/errors.py
from typing import Dict, List


class MenuItemNotFound(LookupError):
    def __init__(self, item_id) -> None:
        super().__init__(f"Menu item {item_id} not found")
        self.item_id = item_id


class MenuValidationError(ValueError):
    def __init__(self, errors: List[Dict[str, str]]) -> None:
        super().__init__("; ".join(e["message"] for e in errors))
        self.errors = errors
