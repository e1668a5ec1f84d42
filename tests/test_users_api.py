# File: tests/test_users_api.py

"""
HTTP-level tests for /users, run against an in-memory database.
"""

from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session


def create_user(client, **overrides):
    payload = {"name": "John Doe", "email": "john@example.com"}
    payload.update(overrides)
    resp = client.post("/users", json=payload)
    assert resp.status_code == 201, resp.text
    return resp.json()


def test_create_user_returns_201_with_generated_id(client):
    resp = client.post("/users", json={"name": "John Doe", "email": "john@example.com"})

    assert resp.status_code == 201
    data = resp.json()
    assert data["id"] == 1
    assert data["name"] == "John Doe"
    assert data["email"] == "john@example.com"
    assert data["address"] is None
    assert "createdAt" in data


def test_create_user_invalid_returns_400_with_all_messages(client):
    resp = client.post("/users", json={"name": "Jo"})

    assert resp.status_code == 400
    body = resp.json()
    assert body["detail"] == ["name must be at least 4 characters", "email is required"]
    assert body["violations"][1] == {"field": "email", "message": "email is required"}


def test_create_user_with_malformed_json_returns_400(client):
    resp = client.post(
        "/users",
        content=b'{"name": "John Doe",',
        headers={"Content-Type": "application/json"},
    )

    assert resp.status_code == 400
    assert resp.json()["detail"] == ["request body is not valid JSON"]


def test_create_user_with_array_body_returns_400(client):
    resp = client.post("/users", json=[{"name": "John Doe"}])

    assert resp.status_code == 400
    assert resp.json()["detail"] == ["request body must be a JSON object"]


def test_duplicate_email_returns_400(client):
    create_user(client)

    resp = client.post("/users", json={"name": "Other John", "email": "john@example.com"})

    assert resp.status_code == 400
    assert resp.json()["detail"] == ["email is already registered"]


def test_list_and_get_users(client):
    alice = create_user(client, name="Alice A", email="alice@example.com")
    create_user(client, name="Bobby B", email="bob@example.com")

    resp = client.get("/users")
    assert resp.status_code == 200
    assert [u["email"] for u in resp.json()] == ["alice@example.com", "bob@example.com"]

    resp = client.get(f"/users/{alice['id']}")
    assert resp.status_code == 200
    assert resp.json() == alice


def test_get_unknown_user_returns_404(client):
    resp = client.get("/users/999")

    assert resp.status_code == 404
    assert resp.json()["detail"] == "User 999 not found"


def test_non_integer_id_returns_400(client):
    resp = client.get("/users/abc")

    assert resp.status_code == 400
    assert resp.json()["detail"] == ["user_id must be an integer"]


def test_update_user_partially(client):
    user = create_user(client, address="1 Main St")

    resp = client.put(f"/users/{user['id']}", json={"name": "John Smith"})

    assert resp.status_code == 200
    data = resp.json()
    assert data["name"] == "John Smith"
    assert data["email"] == user["email"]
    assert data["address"] == "1 Main St"


def test_update_with_empty_body_changes_nothing(client):
    user = create_user(client)

    resp = client.put(f"/users/{user['id']}", json={})

    assert resp.status_code == 200
    assert resp.json() == user


def test_update_invalid_returns_400(client):
    user = create_user(client)

    resp = client.put(f"/users/{user['id']}", json={"email": "nope", "name": None})

    assert resp.status_code == 400
    assert resp.json()["detail"] == ["name must not be null", "email must be a valid email address"]


def test_update_unknown_user_returns_404(client):
    resp = client.put("/users/5", json={"name": "Nobody Here"})

    assert resp.status_code == 404


def test_delete_user_returns_204_then_404(client):
    user = create_user(client)

    resp = client.delete(f"/users/{user['id']}")
    assert resp.status_code == 204
    assert resp.content == b""

    assert client.get(f"/users/{user['id']}").status_code == 404
    assert client.delete(f"/users/{user['id']}").status_code == 404


def test_store_failure_returns_generic_500(client, monkeypatch):
    def broken_scalars(self, *args, **kwargs):
        raise OperationalError("SELECT", {}, Exception("password authentication failed"))

    monkeypatch.setattr(Session, "scalars", broken_scalars)

    resp = client.get("/users")

    assert resp.status_code == 500
    assert resp.json() == {"detail": "Internal server error"}
    assert "password" not in resp.text


def test_huge_user_id_returns_404(client):
    huge = 2**70

    assert client.get(f"/users/{huge}").status_code == 404
    assert client.put(f"/users/{huge}", json={"name": "John Smith"}).status_code == 404
    assert client.delete(f"/users/{huge}").status_code == 404
