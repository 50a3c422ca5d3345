from typing import Any, Dict, List, Optional

from .core import parse_menu_item
from .database import MenuStore
from .errors import MenuItemNotFound

# This file contains the core logic for all API endpoints.
# Every function takes the store it works on; the routes pass in the one
# owned by the running app.

def _parse_id(raw: Any) -> Optional[int]:
    # plain decimal digits only, so "1_0" and " 3" are not ids
    if not isinstance(raw, str) or not raw.isdecimal():
        return None
    try:
        return int(raw)
    except (TypeError, ValueError):
        return None

def _dump(item) -> Dict[str, Any]:
    return item.model_dump(mode="json")

def _require_item_id(raw: Any) -> int:
    item_id = _parse_id(raw)
    if item_id is None:
        raise MenuItemNotFound(raw)
    return item_id

# Menu endpoints
def list_menu_logic(store: MenuStore) -> List[Dict[str, Any]]:
    return [_dump(item) for item in store.list_all()]

def get_menu_item_logic(store: MenuStore, raw_id: Any) -> Dict[str, Any]:
    item_id = _require_item_id(raw_id)
    item = store.get_by_id(item_id)
    if item is None:
        raise MenuItemNotFound(item_id)
    return _dump(item)

def create_menu_item_logic(store: MenuStore, payload: Any) -> Dict[str, Any]:
    candidate = parse_menu_item(payload)
    return _dump(store.insert(candidate))

def update_menu_item_logic(store: MenuStore, raw_id: Any, payload: Any) -> Dict[str, Any]:
    patch = parse_menu_item(payload, partial=True)
    item_id = _require_item_id(raw_id)
    item = store.update_by_id(item_id, patch.model_dump(exclude_none=True))
    if item is None:
        raise MenuItemNotFound(item_id)
    return _dump(item)

def delete_menu_item_logic(store: MenuStore, raw_id: Any) -> Dict[str, Any]:
    item_id = _require_item_id(raw_id)
    item = store.remove_by_id(item_id)
    if item is None:
        raise MenuItemNotFound(item_id)
    return {"message": "Item deleted", "item": _dump(item)}

# Utility: reset (for tests/demo)
def reset_all_logic(store: MenuStore) -> Dict[str, str]:
    store.reset()
    return {"status": "reset"}
