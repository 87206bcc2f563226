"""Tests for the generated reference data CRUD routes."""

import pytest

DEFINITIONS = [
    (
        "/api/sponsors",
        {"name": "Acme Trials", "contactPerson": "Dr. Who", "email": "who@acme.org", "status": "Active"},
        {"email": "new@acme.org"},
        4,
    ),
    (
        "/api/centers",
        {"name": "North Clinic", "location": "Boston, MA", "primaryContact": "Dr. Kim", "status": "Active"},
        {"status": "Inactive"},
        3,
    ),
    (
        "/api/researchers",
        {"name": "Dr. Rivera", "specialty": "Hematology", "centerId": "ctr-001", "email": "r@drc.org"},
        {"specialty": "Oncology"},
        4,
    ),
    (
        "/api/project-codes",
        {"code": "HEM-2025-01", "description": "Hematology pilot", "sponsorId": "sp-001", "status": "Ongoing"},
        {"status": "Completed"},
        4,
    ),
    (
        "/api/work-performed",
        {"name": "Site Visit", "description": "Monitoring visit", "status": "In Progress"},
        {"description": "Close-out visit"},
        4,
    ),
]

PATHS = [path for path, _, _, _ in DEFINITIONS]


@pytest.mark.parametrize("path,body,patch,seed_count", DEFINITIONS)
def test_list_returns_seed_data(client, path, body, patch, seed_count):
    resp = client.get(path)

    assert resp.status_code == 200
    assert resp.json()["success"] is True
    assert len(resp.json()["data"]) == seed_count


@pytest.mark.parametrize("path,body,patch,seed_count", DEFINITIONS)
def test_create_then_get(client, admin_headers, path, body, patch, seed_count):
    created = client.post(path, json=body, headers=admin_headers)

    assert created.status_code == 200
    record = created.json()["data"]
    assert record["id"]
    assert record == {**body, "id": record["id"]}

    fetched = client.get(f"{path}/{record['id']}")
    assert fetched.status_code == 200
    assert fetched.json()["data"] == record
    assert len(client.get(path).json()["data"]) == seed_count + 1


@pytest.mark.parametrize("path,body,patch,seed_count", DEFINITIONS)
def test_patch_changes_only_supplied_fields(client, admin_headers, path, body, patch, seed_count):
    record = client.post(path, json=body, headers=admin_headers).json()["data"]

    resp = client.put(f"{path}/{record['id']}", json=patch, headers=admin_headers)

    assert resp.status_code == 200
    assert resp.json()["data"] == {**record, **patch}


@pytest.mark.parametrize("path,body,patch,seed_count", DEFINITIONS)
def test_delete_then_get_is_not_found(client, admin_headers, path, body, patch, seed_count):
    record = client.post(path, json=body, headers=admin_headers).json()["data"]

    resp = client.delete(f"{path}/{record['id']}", headers=admin_headers)

    assert resp.status_code == 200
    assert resp.json()["data"] == {"id": record["id"], "deleted": True}
    assert client.get(f"{path}/{record['id']}").status_code == 404


@pytest.mark.parametrize("path", PATHS)
def test_missing_ids_are_not_found(client, admin_headers, path):
    assert client.get(f"{path}/missing").status_code == 404
    assert client.put(f"{path}/missing", json={}, headers=admin_headers).status_code == 404

    resp = client.delete(f"{path}/missing", headers=admin_headers)
    assert resp.status_code == 404
    assert resp.json()["success"] is False


@pytest.mark.parametrize("path,body,patch,seed_count", DEFINITIONS)
def test_level1_cannot_modify(client, normal_headers, path, body, patch, seed_count):
    existing = client.get(path).json()["data"][0]["id"]

    assert client.post(path, json=body, headers=normal_headers).status_code == 403
    assert client.put(f"{path}/{existing}", json=patch, headers=normal_headers).status_code == 403
    assert client.delete(f"{path}/{existing}", headers=normal_headers).status_code == 403


@pytest.mark.parametrize("path,body,patch,seed_count", DEFINITIONS)
def test_writes_require_caller(client, path, body, patch, seed_count):
    assert client.post(path, json=body).status_code == 401


def test_create_fills_defaults(client, admin_headers):
    resp = client.post("/api/sponsors", json={"name": "Minimal"}, headers=admin_headers)

    data = resp.json()["data"]
    assert data["status"] == "Inactive"
    assert data["contactPerson"] == ""


def test_create_without_required_field_is_bad_request(client, admin_headers):
    resp = client.post("/api/project-codes", json={"description": "no code"}, headers=admin_headers)

    assert resp.status_code == 400
    assert resp.json()["error"] == "code: Field required"


@pytest.mark.parametrize(
    "path,body",
    [
        ("/api/sponsors", {"name": "X", "status": "Paused"}),
        ("/api/project-codes", {"code": "X", "status": "Ongoing-ish"}),
        ("/api/work-performed", {"name": "X", "status": "Done"}),
    ],
)
def test_invalid_status_is_bad_request(client, admin_headers, path, body):
    resp = client.post(path, json=body, headers=admin_headers)

    assert resp.status_code == 400
    assert resp.json()["success"] is False


def test_patch_cannot_change_id(client, admin_headers):
    resp = client.put("/api/sponsors/sp-001", json={"id": "sp-999", "name": "Renamed"}, headers=admin_headers)

    assert resp.json()["data"]["id"] == "sp-001"
    assert client.get("/api/sponsors/sp-999").status_code == 404
