"""Tests for user management routes and role rules."""

import pytest


def _ids(resp):
    return {user["id"] for user in resp.json()["data"]}


class TestVisibility:
    def test_level3_sees_everyone(self, client, users, super_headers):
        resp = client.get("/api/users", headers=super_headers)

        assert resp.status_code == 200
        assert _ids(resp) == {"user-001", "user-002", "user-003", "user-004", "user-005", "user-007"}

    def test_level2_sees_self_and_level1(self, client, users, admin_headers):
        resp = client.get("/api/users", headers=admin_headers)

        assert _ids(resp) == {"user-002", "user-003", "user-005"}

    def test_level1_sees_only_self(self, client, users, normal_headers):
        resp = client.get("/api/users", headers=normal_headers)

        assert _ids(resp) == {"user-003"}

    def test_list_never_returns_passwords(self, client, users, super_headers):
        resp = client.get("/api/users", headers=super_headers)

        assert all("password" not in user for user in resp.json()["data"])

    def test_list_requires_caller(self, client):
        assert client.get("/api/users").status_code == 401

    def test_get_hidden_user_is_not_found(self, client, users, normal_headers):
        resp = client.get("/api/users/user-002", headers=normal_headers)

        assert resp.status_code == 404

    def test_get_visible_user(self, client, users, admin_headers):
        resp = client.get("/api/users/user-005", headers=admin_headers)

        assert resp.status_code == 200
        assert resp.json()["data"]["username"] == "john.smith"
        assert "password" not in resp.json()["data"]


class TestCreate:
    def test_level3_creates_any_role(self, client, super_headers):
        resp = client.post(
            "/api/users",
            json={"username": "  new.admin ", "password": "pw", "role": "Level 2"},
            headers=super_headers,
        )

        assert resp.status_code == 200
        data = resp.json()["data"]
        assert data["username"] == "new.admin"
        assert data["role"] == "Level 2"
        assert data["id"]
        assert data["createdAt"]
        assert "password" not in data

        login = client.post("/api/auth/login", json={"username": "new.admin", "password": "pw"})
        assert login.status_code == 200

    def test_level2_creates_level1_only(self, client, users, admin_headers):
        ok = client.post(
            "/api/users",
            json={"username": "intern", "password": "pw", "role": "Level 1"},
            headers=admin_headers,
        )
        denied = client.post(
            "/api/users",
            json={"username": "boss", "password": "pw", "role": "Level 3"},
            headers=admin_headers,
        )

        assert ok.status_code == 200
        assert denied.status_code == 403

    def test_level1_cannot_create(self, client, users, normal_headers):
        resp = client.post(
            "/api/users",
            json={"username": "x", "password": "pw", "role": "Level 1"},
            headers=normal_headers,
        )

        assert resp.status_code == 403

    def test_duplicate_username_conflicts(self, client, super_headers):
        resp = client.post(
            "/api/users",
            json={"username": "MLS", "password": "pw", "role": "Level 1"},
            headers=super_headers,
        )

        assert resp.status_code == 409

    @pytest.mark.parametrize(
        "body",
        [
            {"password": "pw", "role": "Level 1"},
            {"username": "x", "role": "Level 1"},
            {"username": "", "password": "pw", "role": "Level 1"},
            {"username": "x", "password": "pw", "role": "Level 9"},
            {"username": "   ", "password": "pw", "role": "Level 1"},
        ],
    )
    def test_invalid_body_is_bad_request(self, client, super_headers, body):
        resp = client.post("/api/users", json=body, headers=super_headers)

        assert resp.status_code == 400
        assert resp.json()["success"] is False


class TestUpdate:
    def test_user_edits_own_password(self, client, users, normal_headers):
        resp = client.put(
            "/api/users/user-003", json={"password": "new-secret"}, headers=normal_headers
        )

        assert resp.status_code == 200
        login = client.post(
            "/api/auth/login", json={"username": "normal_user", "password": "new-secret"}
        )
        assert login.status_code == 200

    def test_empty_password_leaves_password_unchanged(self, client, users, normal_headers):
        client.put("/api/users/user-003", json={"password": ""}, headers=normal_headers)

        login = client.post(
            "/api/auth/login", json={"username": "normal_user", "password": "password123"}
        )
        assert login.status_code == 200

    def test_level1_cannot_rename_self(self, client, users, normal_headers):
        resp = client.put(
            "/api/users/user-003", json={"username": "renamed"}, headers=normal_headers
        )

        assert resp.status_code == 403

    def test_resending_same_values_is_allowed(self, client, users, normal_headers):
        resp = client.put(
            "/api/users/user-003",
            json={"username": "normal_user", "role": "Level 1"},
            headers=normal_headers,
        )

        assert resp.status_code == 200

    def test_level1_cannot_edit_others(self, client, users, normal_headers):
        resp = client.put(
            "/api/users/user-005", json={"password": "x"}, headers=normal_headers
        )

        assert resp.status_code == 403

    def test_level2_renames_level1(self, client, users, admin_headers):
        resp = client.put(
            "/api/users/user-003", json={"username": "renamed"}, headers=admin_headers
        )

        assert resp.status_code == 200
        assert resp.json()["data"]["username"] == "renamed"
        assert resp.json()["data"]["role"] == "Level 1"

    def test_level2_cannot_change_role(self, client, users, admin_headers):
        resp = client.put(
            "/api/users/user-003", json={"role": "Level 2"}, headers=admin_headers
        )

        assert resp.status_code == 403

    def test_level2_cannot_edit_other_level2(self, client, users, admin_headers):
        resp = client.put(
            "/api/users/user-004", json={"password": "x"}, headers=admin_headers
        )

        assert resp.status_code == 403

    def test_level3_changes_role(self, client, users, super_headers):
        resp = client.put(
            "/api/users/user-003", json={"role": "Level 2"}, headers=super_headers
        )

        assert resp.status_code == 200
        assert resp.json()["data"]["role"] == "Level 2"
        assert resp.json()["data"]["username"] == "normal_user"

    def test_rename_to_taken_username_conflicts(self, client, users, super_headers):
        resp = client.put(
            "/api/users/user-003", json={"username": "jane.doe"}, headers=super_headers
        )

        assert resp.status_code == 409

    def test_blank_username_on_rename_is_bad_request(self, client, users, admin_headers):
        resp = client.put(
            "/api/users/user-003", json={"username": "   "}, headers=admin_headers
        )

        assert resp.status_code == 400
        assert client.get("/api/users/user-003", headers=admin_headers).json()["data"]["username"] == "normal_user"

    @pytest.mark.parametrize(
        "body",
        [
            {"role": "Level 1"},
            {"username": "not.mls"},
            {"role": "Level 2", "username": "x"},
            {"password": "taken-over"},
        ],
    )
    def test_others_cannot_rename_demote_or_repassword_super_admin(self, client, users, headers_for, body):
        resp = client.put("/api/users/user-001", json=body, headers=headers_for("user-007"))

        assert resp.status_code == 400
        login = client.post("/api/auth/login", json={"username": "MLS", "password": "2008"})
        assert login.status_code == 200
        assert login.json()["data"]["role"] == "Level 3"

    def test_super_admin_may_change_own_password(self, client, super_headers):
        resp = client.put("/api/users/user-001", json={"password": "new-pw"}, headers=super_headers)

        assert resp.status_code == 200
        assert client.post(
            "/api/auth/login", json={"username": "MLS", "password": "new-pw"}
        ).status_code == 200

    def test_update_missing_user_is_not_found(self, client, super_headers):
        resp = client.put("/api/users/user-404", json={"password": "x"}, headers=super_headers)

        assert resp.status_code == 404


class TestDelete:
    @pytest.mark.parametrize("caller", ["user-001", "user-007", "user-002", "user-003"])
    def test_super_admin_can_never_be_deleted(self, client, users, headers_for, caller):
        resp = client.delete("/api/users/user-001", headers=headers_for(caller))

        assert resp.status_code == 400
        assert resp.json() == {"success": False, "error": "Super Admin cannot be deleted."}
        assert client.get("/api/users/user-001", headers=headers_for("user-001")).status_code == 200

    def test_level3_deletes_user(self, client, users, super_headers):
        resp = client.delete("/api/users/user-004", headers=super_headers)

        assert resp.status_code == 200
        assert resp.json()["data"] == {"id": "user-004", "deleted": True}
        assert client.get("/api/users/user-004", headers=super_headers).status_code == 404

    def test_level2_deletes_level1_but_not_level2(self, client, users, admin_headers):
        assert client.delete("/api/users/user-005", headers=admin_headers).status_code == 200
        assert client.delete("/api/users/user-004", headers=admin_headers).status_code == 403

    def test_level1_cannot_delete(self, client, users, normal_headers):
        resp = client.delete("/api/users/user-005", headers=normal_headers)

        assert resp.status_code == 403

    def test_delete_missing_user_is_not_found(self, client, super_headers):
        resp = client.delete("/api/users/user-404", headers=super_headers)

        assert resp.status_code == 404
        assert resp.json()["success"] is False
