# File: tests/test_app.py

"""
Smoke tests for the non-CRUD routes and application startup.
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

import userposts.main as main_module
from userposts.db.init_db import check_connection, init_db
from userposts.main import app


def test_root_greeting(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert "message" in resp.json()


def test_greet_by_name(client):
    resp = client.get("/greet/Harshit")
    assert resp.status_code == 200
    assert resp.json() == {"message": "Hello, Harshit!"}


def test_greet_rejects_short_name(client):
    resp = client.get("/greet/Jo")
    assert resp.status_code == 400
    assert resp.json()["detail"] == ["name must be at least 4 characters"]


def test_health_endpoint(client):
    resp = client.get("/healthz")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


def test_check_connection_against_live_engine(engine):
    check_connection(engine)


def test_startup_creates_tables(engine, monkeypatch):
    monkeypatch.setattr(main_module, "check_connection", lambda: check_connection(engine))
    monkeypatch.setattr(main_module, "init_db", lambda: init_db(engine))

    with TestClient(app) as client:
        assert client.get("/healthz").status_code == 200


def test_startup_fails_when_database_is_unreachable(monkeypatch):
    def unreachable():
        raise OperationalError("SELECT 1", {}, Exception("connection refused"))

    monkeypatch.setattr(main_module, "check_connection", unreachable)

    with pytest.raises(OperationalError):
        with TestClient(app):
            pass
