# tests/test_request_logging.py
import json
import logging

import pytest


@pytest.fixture()
def request_logs(caplog):
    caplog.set_level(logging.INFO)

    def _events():
        out = []
        for record in caplog.records:
            try:
                entry = json.loads(record.getMessage())
            except ValueError:
                continue
            if entry.get("message") == "incoming_request":
                out.append(entry)
        return out

    return _events


def test_get_is_logged_without_body(client, request_logs):
    client.get("/api/menu/3?verbose=1")
    (entry,) = request_logs()
    assert entry["method"] == "GET"
    assert entry["path"] == "/api/menu/3?verbose=1"
    assert "T" in entry["timestamp"]
    assert "body" not in entry


def test_post_and_put_bodies_are_logged(client, request_logs, veggie_wrap):
    client.post("/api/menu", json=veggie_wrap)
    client.put("/api/menu/1", json={"price": 13.99})
    post, put = request_logs()
    assert post["method"] == "POST"
    assert post["body"] == veggie_wrap
    assert put["body"] == {"price": 13.99}


def test_invalid_body_is_logged_raw(client, request_logs):
    r = client.post("/api/menu", content=b"{oops", headers={"content-type": "application/json"})
    assert r.status_code == 400
    (entry,) = request_logs()
    assert entry["body"] == "{oops"


def test_request_id_is_echoed_and_logged(client, request_logs):
    r = client.get("/", headers={"x-request-id": "req-123"})
    assert r.headers["x-request-id"] == "req-123"
    (entry,) = request_logs()
    assert entry["request_id"] == "req-123"
