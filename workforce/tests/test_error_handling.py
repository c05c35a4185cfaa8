import logging

import pytest
from fastapi.testclient import TestClient

from workforce.main import app

client = TestClient(app, raise_server_exceptions=False)

BROKEN_PATH = "/tests/broken"


@pytest.fixture
def broken_route():
    def _explode():
        raise RuntimeError("database went away")

    app.add_api_route(BROKEN_PATH, _explode, methods=["GET"])
    route = app.router.routes[-1]
    yield
    app.router.routes.remove(route)


def test_unhandled_exception_returns_flat_500(broken_route):
    r = client.get(BROKEN_PATH)
    assert r.status_code == 500
    assert r.json() == {"message": "Internal server error"}
    assert "database went away" not in r.text


def test_unhandled_exception_is_logged_with_status(broken_route, caplog):
    caplog.set_level(logging.INFO, logger="workforce.main")

    client.get(BROKEN_PATH)

    failures = [rec for rec in caplog.records if rec.getMessage() == "Unhandled exception"]
    assert len(failures) == 1
    assert failures[0].exc_info is not None

    access = [rec for rec in caplog.records if rec.getMessage() == f"GET {BROKEN_PATH}"]
    assert len(access) == 1
    assert access[0].status_code == 500
    assert access[0].duration_ms >= 0


def test_unknown_route_uses_message_body():
    r = client.get("/api/does-not-exist")
    assert r.status_code == 404
    assert r.json() == {"message": "Not Found"}
