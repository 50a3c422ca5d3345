import pytest
from fastapi.testclient import TestClient

from app.database import SEED_MENU, InMemoryMenuStore
from app.main import create_app


@pytest.fixture()
def store() -> InMemoryMenuStore:
    return InMemoryMenuStore(seed=SEED_MENU)


@pytest.fixture()
def client(store: InMemoryMenuStore):
    with TestClient(create_app(store=store)) as c:
        yield c


@pytest.fixture()
def veggie_wrap() -> dict:
    return {
        "name": "Veggie Wrap",
        "description": "Fresh vegetables in a tortilla wrap",
        "price": 6.50,
        "category": "entree",
        "ingredients": ["tortilla", "lettuce"],
    }
