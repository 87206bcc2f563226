"""Tests for login and caller resolution."""

from utils.entities import USER


def test_super_admin_login(client):
    resp = client.post("/api/auth/login", json={"username": "MLS", "password": "2008"})

    assert resp.status_code == 200
    body = resp.json()
    assert body["success"] is True
    assert body["data"]["id"] == "user-001"
    assert body["data"]["role"] == "Level 3"
    assert "password" not in body["data"]


def test_wrong_password_and_unknown_user_fail_alike(client):
    wrong_password = client.post("/api/auth/login", json={"username": "MLS", "password": "nope"})
    unknown_user = client.post("/api/auth/login", json={"username": "ghost", "password": "2008"})

    assert wrong_password.status_code == unknown_user.status_code == 401
    assert wrong_password.json() == unknown_user.json() == {
        "success": False,
        "error": "Invalid credentials.",
    }


def test_login_requires_both_fields(client):
    resp = client.post("/api/auth/login", json={"username": "MLS"})

    assert resp.status_code == 400
    assert resp.json()["success"] is False
    assert "password" in resp.json()["error"]


def test_login_rejects_malformed_json(client):
    resp = client.post(
        "/api/auth/login",
        content="{not json",
        headers={"Content-Type": "application/json"},
    )

    assert resp.status_code == 400
    assert resp.json() == {"success": False, "error": "Malformed JSON body"}


def test_login_as_created_user(client, users):
    resp = client.post(
        "/api/auth/login", json={"username": "normal_user", "password": "password123"}
    )

    assert resp.status_code == 200
    assert resp.json()["data"]["id"] == users["normal"]["id"]


def test_me_returns_caller_profile(client, super_headers):
    resp = client.get("/api/auth/me", headers=super_headers)

    assert resp.status_code == 200
    assert resp.json()["data"]["username"] == "MLS"
    assert "password" not in resp.json()["data"]


def test_me_without_header_is_unauthorized(client):
    resp = client.get("/api/auth/me")

    assert resp.status_code == 401
    assert resp.json()["success"] is False


def test_me_with_unknown_user_is_unauthorized(client, headers_for):
    resp = client.get("/api/auth/me", headers=headers_for("user-999"))

    assert resp.status_code == 401


def test_super_admin_is_recreated_when_missing(client, store):
    store.delete(USER, "user-001")

    resp = client.post("/api/auth/login", json={"username": "MLS", "password": "2008"})

    assert resp.status_code == 200
    assert store.exists(USER, "user-001")


def test_caller_header_works_on_routes_with_user_id_path(client, users, super_headers):
    assert client.get("/api/users/user-003", headers=super_headers).status_code == 200
    assert client.put(
        "/api/users/user-003", json={"password": "pw2"}, headers=super_headers
    ).status_code == 200
    assert client.delete("/api/users/user-003", headers=super_headers).status_code == 200
    # The caller is resolved from the header, never from the path
    assert client.get("/api/users/user-001").status_code == 401
