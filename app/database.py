# app/database.py
import copy
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

import structlog

from .models import MenuItem, MenuItemIn

logger = structlog.get_logger(__name__)

# This file holds the menu store interface and its in-memory implementation.

SEED_MENU: List[Dict[str, Any]] = [
    {
        "id": 1,
        "name": "Classic Burger",
        "description": "Beef patty with lettuce, tomato, and cheese on a sesame seed bun",
        "price": 12.99,
        "category": "entree",
        "ingredients": ["beef", "lettuce", "tomato", "cheese", "bun"],
        "available": True,
    },
    {
        "id": 2,
        "name": "Chicken Caesar Salad",
        "description": "Grilled chicken breast over romaine lettuce with parmesan and croutons",
        "price": 11.50,
        "category": "entree",
        "ingredients": ["chicken", "romaine lettuce", "parmesan cheese", "croutons", "caesar dressing"],
        "available": True,
    },
    {
        "id": 3,
        "name": "Mozzarella Sticks",
        "description": "Crispy breaded mozzarella served with marinara sauce",
        "price": 8.99,
        "category": "appetizer",
        "ingredients": ["mozzarella cheese", "breadcrumbs", "marinara sauce"],
        "available": True,
    },
    {
        "id": 4,
        "name": "Chocolate Lava Cake",
        "description": "Warm chocolate cake with molten center, served with vanilla ice cream",
        "price": 7.99,
        "category": "dessert",
        "ingredients": ["chocolate", "flour", "eggs", "butter", "vanilla ice cream"],
        "available": True,
    },
    {
        "id": 5,
        "name": "Fresh Lemonade",
        "description": "House-made lemonade with fresh lemons and mint",
        "price": 3.99,
        "category": "beverage",
        "ingredients": ["lemons", "sugar", "water", "mint"],
        "available": True,
    },
    {
        "id": 6,
        "name": "Fish and Chips",
        "description": "Beer-battered cod with seasoned fries and coleslaw",
        "price": 14.99,
        "category": "entree",
        "ingredients": ["cod", "beer batter", "potatoes", "coleslaw", "tartar sauce"],
        "available": False,
    },
]


class MenuStore(ABC):
    @abstractmethod
    def list_all(self) -> List[MenuItem]:
        raise NotImplementedError

    @abstractmethod
    def get_by_id(self, item_id: int) -> Optional[MenuItem]:
        raise NotImplementedError

    @abstractmethod
    def insert(self, candidate: MenuItemIn) -> MenuItem:
        raise NotImplementedError

    @abstractmethod
    def update_by_id(self, item_id: int, patch: Dict[str, Any]) -> Optional[MenuItem]:
        raise NotImplementedError

    @abstractmethod
    def remove_by_id(self, item_id: int) -> Optional[MenuItem]:
        raise NotImplementedError

    @abstractmethod
    def reset(self) -> None:
        raise NotImplementedError

    def close(self) -> None:
        pass


class InMemoryMenuStore(MenuStore):
    """
    Menu items kept in a list, in insertion order, for the life of the process.

    id_strategy "counter" hands out ids from a counter that only moves forward,
    so an id is never reused after a delete. "length" reproduces the legacy
    len(items) + 1 scheme, which can collide with a surviving id once an item
    has been removed.
    """

    def __init__(self, seed: Optional[List[Dict[str, Any]]] = None, id_strategy: str = "counter") -> None:
        if id_strategy not in ("counter", "length"):
            raise ValueError(f"unknown id strategy: {id_strategy}")
        self.id_strategy = id_strategy
        self._seed = copy.deepcopy(seed or [])
        self._items: List[MenuItem] = []
        self._last_id = 0
        self.reset()

    def _next_id(self) -> int:
        if self.id_strategy == "length":
            return len(self._items) + 1
        self._last_id += 1
        return self._last_id

    def _index_of(self, item_id: int) -> int:
        for i, item in enumerate(self._items):
            if item.id == item_id:
                return i
        return -1

    def list_all(self) -> List[MenuItem]:
        return list(self._items)

    def get_by_id(self, item_id: int) -> Optional[MenuItem]:
        idx = self._index_of(item_id)
        return self._items[idx] if idx != -1 else None

    def insert(self, candidate: MenuItemIn) -> MenuItem:
        item = MenuItem(id=self._next_id(), **candidate.model_dump())
        self._items.append(item)
        logger.info("menu_item_inserted", item_id=item.id, name=item.name)
        return item

    def update_by_id(self, item_id: int, patch: Dict[str, Any]) -> Optional[MenuItem]:
        idx = self._index_of(item_id)
        if idx == -1:
            return None
        current = self._items[idx].model_dump()
        for key, value in patch.items():
            if value is not None and key != "id" and key in current:
                current[key] = value
        updated = MenuItem.model_validate(current)
        self._items[idx] = updated
        logger.info("menu_item_updated", item_id=item_id, fields=sorted(patch))
        return updated

    def remove_by_id(self, item_id: int) -> Optional[MenuItem]:
        idx = self._index_of(item_id)
        if idx == -1:
            return None
        removed = self._items.pop(idx)
        logger.info("menu_item_removed", item_id=item_id)
        return removed

    def reset(self) -> None:
        self._items = [MenuItem.model_validate(item) for item in copy.deepcopy(self._seed)]
        self._last_id = max((item.id for item in self._items), default=0)

    def close(self) -> None:
        self._items = []
        self._last_id = 0
