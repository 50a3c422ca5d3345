# tests/test_menu_client.py
from unittest.mock import MagicMock

import pytest
import requests

from sdk.menu_client import MenuClient, validation_errors


def _response(status_code: int, payload=None, text: str = ""):
    resp = MagicMock()
    resp.status_code = status_code
    resp.json.return_value = payload
    resp.text = text
    if status_code >= 400:
        resp.raise_for_status.side_effect = requests.HTTPError(response=resp)
    return resp


def _client(resp):
    session = MagicMock()
    for verb in ("get", "post", "put", "delete"):
        getattr(session, verb).return_value = resp
    return MenuClient(base_url="http://menu.test/", session=session), session


def test_get_item_returns_none_on_404():
    c, session = _client(_response(404, {"message": "Menu item not found"}))
    assert c.get_item(99) is None
    session.get.assert_called_once_with("http://menu.test/api/menu/99", timeout=10)


def test_create_item_sends_payload_without_unset_available():
    c, session = _client(_response(201, {"id": 7}))
    assert c.create_item("Veggie Wrap", "Fresh vegetables in a tortilla wrap", 6.5, "entree", ["tortilla"]) == {"id": 7}
    sent = session.post.call_args.kwargs["json"]
    assert "available" not in sent
    assert sent["price"] == 6.5


def test_update_item_sends_only_given_fields():
    c, session = _client(_response(200, {"id": 1, "price": 13.99}))
    c.update_item(1, price=13.99)
    session.put.assert_called_once_with("http://menu.test/api/menu/1", json={"price": 13.99}, timeout=10)


def test_validation_errors_are_exposed():
    errors = [{"field": "price", "message": "Price must be a number greater than 0"}]
    c, _ = _client(_response(400, {"errors": errors}))
    with pytest.raises(requests.HTTPError) as info:
        c.create_item("Bad Soup", "Soup with a negative price", -5, "appetizer", ["water"])
    assert validation_errors(info.value) == errors


def test_delete_item_missing_and_server_error():
    c, _ = _client(_response(404, {"message": "Menu item not found"}))
    assert c.delete_item(99) is None
    c, _ = _client(_response(500, {"message": "Internal Server Error"}))
    with pytest.raises(requests.HTTPError) as info:
        c.delete_item(1)
    assert validation_errors(info.value) == []
