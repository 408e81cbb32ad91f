# File: tests/test_users_api.py

"""
End-to-end tests for /api/v1/users.

These use FastAPI's TestClient against an in-memory SQLite database
(see the `client` fixture in conftest.py). To run:
    pytest -q
"""

from app.services.email_service import GOODBYE, WELCOME

BASE = "/api/v1/users"


def _create(client, email="alice@example.com", name="Alice", active=True):
    resp = client.post(f"{BASE}/", json={"email": email, "name": name, "active": active})
    assert resp.status_code == 201, resp.text
    return resp.json()


def test_health_endpoint(client):
    resp = client.get("/healthz")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


def test_create_user(client, outbox):
    data = _create(client)

    assert data["id"] >= 1
    assert data["email"] == "alice@example.com"
    assert data["name"] == "Alice"
    assert data["active"] is True
    assert list(outbox.sent) == [(WELCOME, "alice@example.com")]


def test_create_user_duplicate_email(client, outbox):
    _create(client)

    resp = client.post(f"{BASE}/", json={"email": "alice@example.com", "name": "Other"})

    assert resp.status_code == 409
    assert "alice@example.com" in resp.json()["detail"]
    assert list(outbox.sent) == [(WELCOME, "alice@example.com")]


def test_create_user_invalid_payload(client, outbox):
    resp = client.post(f"{BASE}/", json={"email": "not-an-email", "name": "Alice"})

    assert resp.status_code == 422
    assert list(outbox.sent) == []


def test_create_user_rejected_by_validator(client, outbox):
    resp = client.post(f"{BASE}/", json={"email": "long@example.com", "name": "x" * 300})

    assert resp.status_code == 422
    detail = resp.json()["detail"]
    assert detail[0]["loc"] == ["name"]
    assert client.get(f"{BASE}/count").json() == {"total": 0}
    assert list(outbox.sent) == []


def test_list_active_users(client):
    alice = _create(client)
    _create(client, email="bob@example.com", name="Bob", active=False)
    carol = _create(client, email="carol@example.com", name="Carol")

    resp = client.get(f"{BASE}/")

    assert resp.status_code == 200
    assert [u["id"] for u in resp.json()] == [alice["id"], carol["id"]]


def test_list_active_users_empty(client):
    resp = client.get(f"{BASE}/")
    assert resp.status_code == 200
    assert resp.json() == []


def test_count_users(client):
    assert client.get(f"{BASE}/count").json() == {"total": 0}

    _create(client)
    _create(client, email="bob@example.com", name="Bob", active=False)

    assert client.get(f"{BASE}/count").json() == {"total": 2}


def test_get_user(client):
    created = _create(client)

    resp = client.get(f"{BASE}/{created['id']}")

    assert resp.status_code == 200
    assert resp.json() == created


def test_get_user_not_found(client):
    resp = client.get(f"{BASE}/999")
    assert resp.status_code == 404
    assert "999" in resp.json()["detail"]


def test_find_by_email(client):
    created = _create(client)

    resp = client.get(f"{BASE}/by-email", params={"email": "alice@example.com"})

    assert resp.status_code == 200
    assert resp.json() == created


def test_find_by_email_missing_or_blank(client):
    _create(client)

    assert client.get(f"{BASE}/by-email", params={"email": "nobody@example.com"}).status_code == 404
    assert client.get(f"{BASE}/by-email", params={"email": "   "}).status_code == 404
    assert client.get(f"{BASE}/by-email").status_code == 404


def test_update_user(client):
    created = _create(client)

    resp = client.put(
        f"{BASE}/{created['id']}",
        json={"email": "alice.new@example.com", "name": "Alice Updated"},
    )

    assert resp.status_code == 200
    data = resp.json()
    assert data["id"] == created["id"]
    assert data["email"] == "alice.new@example.com"
    assert data["name"] == "Alice Updated"
    assert data["active"] is True


def test_update_user_not_found(client):
    resp = client.put(f"{BASE}/999", json={"email": "x@example.com", "name": "X"})
    assert resp.status_code == 404


def test_delete_user(client, outbox):
    created = _create(client)

    resp = client.delete(f"{BASE}/{created['id']}")

    assert resp.status_code == 204
    assert client.get(f"{BASE}/{created['id']}").status_code == 404
    assert outbox.sent[-1] == (GOODBYE, "alice@example.com")


def test_delete_user_not_found(client, outbox):
    resp = client.delete(f"{BASE}/999")

    assert resp.status_code == 404
    assert list(outbox.sent) == []
