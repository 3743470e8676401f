"""Tests API / API tests."""

import io
import json

import pytest
from openpyxl import load_workbook

from conftest import auth
from spolky.models.user import Role

CLUB_BODY = {
    "name": "Chrt Club",
    "registration_number": "11223344",
    "address": "Ostrava",
    "email": "chrt@example.com",
    "phone": "777 888 999",
    "guidelines": "Run fast",
}


@pytest.mark.asyncio
async def test_root(client):
    resp = await client.get("/")
    assert resp.status_code == 200
    assert resp.json()["status"] == "running"


@pytest.mark.asyncio
async def test_api_health(client):
    resp = await client.get("/api/")
    assert resp.status_code == 200
    data = resp.json()
    assert data["status"] == "running"
    assert "version" in data


@pytest.mark.asyncio
async def test_request_id_and_security_headers(client):
    resp = await client.get("/", headers={"X-Request-ID": "abc-123"})
    assert resp.headers["X-Request-ID"] == "abc-123"
    assert resp.headers["X-Content-Type-Options"] == "nosniff"


# --- Role gates ---

@pytest.mark.asyncio
async def test_clubs_require_token(client):
    resp = await client.get("/api/clubs/")
    assert resp.status_code == 401


@pytest.mark.asyncio
async def test_invalid_token_rejected(client):
    resp = await client.get("/api/clubs/", headers={"Authorization": "Bearer nonsense"})
    assert resp.status_code == 401


@pytest.mark.asyncio
@pytest.mark.parametrize("role", [Role.PUBLIC, Role.READ_ONLY])
async def test_create_club_forbidden(client, users, role):
    resp = await client.post("/api/clubs/", json=CLUB_BODY, headers=auth(users[role]))
    assert resp.status_code == 403


@pytest.mark.asyncio
async def test_public_cannot_read_statutes_audit(client, users, club):
    resp = await client.get(f"/api/audit/statutes?clubId={club.id}", headers=auth(users[Role.PUBLIC]))
    assert resp.status_code == 403


@pytest.mark.asyncio
async def test_admin_audit_listing_is_admin_only(client, users):
    resp = await client.get("/api/audit/", headers=auth(users[Role.CHAIRMAN]))
    assert resp.status_code == 403


# --- Spolky / Clubs ---

@pytest.mark.asyncio
@pytest.mark.parametrize("role", [Role.ADMIN, Role.CHAIRMAN, Role.READ_ONLY, Role.PUBLIC])
async def test_list_clubs_any_role(client, users, club, role):
    resp = await client.get("/api/clubs/", headers=auth(users[role]))
    assert resp.status_code == 200
    names = [c["name"] for c in resp.json()]
    assert names == ["Rex Club"]


@pytest.mark.asyncio
async def test_get_club(client, users, club):
    resp = await client.get(f"/api/clubs/{club.id}", headers=auth(users[Role.PUBLIC]))
    assert resp.status_code == 200
    data = resp.json()
    assert data["name"] == "Rex Club"
    assert data["chairman_username"] == "chair"


@pytest.mark.asyncio
async def test_get_club_not_found(client, users):
    resp = await client.get("/api/clubs/999", headers=auth(users[Role.ADMIN]))
    assert resp.status_code == 404
    assert resp.json() == {"detail": "Club not found"}


@pytest.mark.asyncio
async def test_create_club(client, users):
    resp = await client.post("/api/clubs/", json=CLUB_BODY, headers=auth(users[Role.CHAIRMAN]))
    assert resp.status_code == 201
    data = resp.json()
    assert data["name"] == "Chrt Club"
    assert data["guidelines"] == "Run fast"
    assert data["chairman_username"] == "chair"
    assert data["created_at"] is not None
    assert resp.headers["Location"] == f"/api/clubs/{data['id']}"


@pytest.mark.asyncio
async def test_create_club_duplicate(client, users, club):
    resp = await client.post("/api/clubs/", json={"name": "Rex Club"}, headers=auth(users[Role.ADMIN]))
    assert resp.status_code == 400
    assert resp.json()["detail"] == "Club with this name already exists."


@pytest.mark.asyncio
async def test_create_club_without_name(client, users):
    resp = await client.post("/api/clubs/", json={"address": "Brno"}, headers=auth(users[Role.ADMIN]))
    assert resp.status_code == 400


@pytest.mark.asyncio
async def test_create_club_bad_email(client, users):
    body = {**CLUB_BODY, "email": "not-an-email"}
    resp = await client.post("/api/clubs/", json=body, headers=auth(users[Role.ADMIN]))
    assert resp.status_code == 422


@pytest.mark.asyncio
async def test_update_club_writes_audit(client, users, club):
    body = {**CLUB_BODY, "name": "Rex Club Brno", "chairman_username": "admin"}
    resp = await client.put(f"/api/clubs/{club.id}", json=body, headers=auth(users[Role.CHAIRMAN]))
    assert resp.status_code == 200

    club_resp = await client.get(f"/api/clubs/{club.id}", headers=auth(users[Role.ADMIN]))
    assert club_resp.json()["name"] == "Rex Club Brno"
    assert club_resp.json()["chairman_username"] == "admin"

    audit = await client.get(
        f"/api/audit/?club_id={club.id}&action=ClubUpdated", headers=auth(users[Role.ADMIN])
    )
    assert audit.status_code == 200
    page = audit.json()
    assert page["total"] == 1
    assert json.loads(page["items"][0]["original_data"])["name"] == "Rex Club"
    assert json.loads(page["items"][0]["new_data"])["name"] == "Rex Club Brno"


@pytest.mark.asyncio
async def test_update_club_unknown_chairman(client, users, club):
    body = {**CLUB_BODY, "chairman_username": "ghost"}
    resp = await client.put(f"/api/clubs/{club.id}", json=body, headers=auth(users[Role.ADMIN]))
    assert resp.status_code == 400
    assert resp.json() == {"detail": "Chairman not found"}

    audit = await client.get("/api/audit/", headers=auth(users[Role.ADMIN]))
    assert audit.json()["total"] == 0


@pytest.mark.asyncio
async def test_update_missing_club(client, users):
    resp = await client.put("/api/clubs/999", json=CLUB_BODY, headers=auth(users[Role.ADMIN]))
    assert resp.status_code == 404

    audit = await client.get("/api/audit/", headers=auth(users[Role.ADMIN]))
    assert audit.json() == {"total": 0, "items": []}


@pytest.mark.asyncio
async def test_change_request(client, users, club):
    before = (await client.get(f"/api/clubs/{club.id}", headers=auth(users[Role.ADMIN]))).json()

    body = {**CLUB_BODY, "name": "Proposed Name"}
    resp = await client.post(
        f"/api/clubs/{club.id}/change-request", json=body, headers=auth(users[Role.CHAIRMAN])
    )
    assert resp.status_code == 201
    data = resp.json()
    assert data["action"] == "ClubChangeRequest"
    assert data["club_id"] == club.id
    assert json.loads(data["new_data"])["name"] == "Proposed Name"
    assert resp.headers["Location"] == f"/api/audit/statutes?clubId={club.id}"

    after = (await client.get(f"/api/clubs/{club.id}", headers=auth(users[Role.ADMIN]))).json()
    assert after == before


@pytest.mark.asyncio
async def test_change_request_missing_club(client, users):
    resp = await client.post("/api/clubs/999/change-request", json=CLUB_BODY, headers=auth(users[Role.ADMIN]))
    assert resp.status_code == 404


@pytest.mark.asyncio
async def test_statutes_upload_and_read(client, users, club):
    resp = await client.post(
        f"/api/clubs/{club.id}/statutes", json={"guidelines": "No biting"}, headers=auth(users[Role.CHAIRMAN])
    )
    assert resp.status_code == 204

    statutes = await client.get(f"/api/clubs/{club.id}/statutes", headers=auth(users[Role.PUBLIC]))
    assert statutes.status_code == 200
    data = statutes.json()
    assert data["name"] == "Rex Club"
    assert data["guidelines"] == "No biting"
    assert data["guidelines_updated_at"] is not None

    audit = await client.get(f"/api/audit/statutes?clubId={club.id}", headers=auth(users[Role.READ_ONLY]))
    assert audit.status_code == 200
    entries = audit.json()
    assert len(entries) == 1
    assert entries[0]["action"] == "StatutesUpdated"
    assert json.loads(entries[0]["original_data"])["guidelines"] is None


@pytest.mark.asyncio
async def test_statutes_explicit_date(client, users, club):
    body = {"guidelines": "v2", "updated_at": "2024-03-01T10:00:00+01:00"}
    resp = await client.post(f"/api/clubs/{club.id}/statutes", json=body, headers=auth(users[Role.ADMIN]))
    assert resp.status_code == 204

    data = (await client.get(f"/api/clubs/{club.id}/statutes", headers=auth(users[Role.ADMIN]))).json()
    assert data["guidelines_updated_at"].startswith("2024-03-01T09:00:00")


@pytest.mark.asyncio
async def test_statutes_missing_club(client, users):
    resp = await client.post("/api/clubs/999/statutes", json={"guidelines": "x"}, headers=auth(users[Role.ADMIN]))
    assert resp.status_code == 404
    resp = await client.get("/api/clubs/999/statutes", headers=auth(users[Role.ADMIN]))
    assert resp.status_code == 404


@pytest.mark.asyncio
async def test_statutes_audit_newest_first(client, users, club):
    headers = auth(users[Role.ADMIN])
    await client.post(f"/api/clubs/{club.id}/statutes", json={"guidelines": "v1"}, headers=headers)
    await client.post(f"/api/clubs/{club.id}/change-request", json=CLUB_BODY, headers=headers)
    await client.post(f"/api/clubs/{club.id}/statutes", json={"guidelines": "v3"}, headers=headers)

    entries = (await client.get("/api/audit/statutes", headers=headers)).json()
    assert [e["action"] for e in entries] == ["StatutesUpdated", "ClubChangeRequest", "StatutesUpdated"]
    assert json.loads(entries[0]["new_data"])["guidelines"] == "v3"


# --- Export ---

@pytest.mark.asyncio
async def test_export_json(client, users, club):
    resp = await client.get(f"/api/clubs/{club.id}/export?format=json", headers=auth(users[Role.READ_ONLY]))
    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("application/json")
    assert f'club_{club.id}.json' in resp.headers["content-disposition"]
    data = resp.json()
    assert data["name"] == "Rex Club"
    assert data["chairman_username"] == "chair"


@pytest.mark.asyncio
async def test_export_csv(client, users, club):
    resp = await client.get(f"/api/clubs/{club.id}/export?format=csv", headers=auth(users[Role.CHAIRMAN]))
    assert resp.status_code == 200
    assert resp.content.startswith(b"\xef\xbb\xbf")
    lines = resp.content.decode("utf-8-sig").splitlines()
    assert lines[0].split(";")[:2] == ["id", "name"]
    assert "Rex Club" in lines[1]


@pytest.mark.asyncio
async def test_export_xlsx(client, users, club):
    resp = await client.get(f"/api/clubs/{club.id}/export?format=xlsx", headers=auth(users[Role.ADMIN]))
    assert resp.status_code == 200
    wb = load_workbook(io.BytesIO(resp.content))
    ws = wb.active
    assert ws.cell(row=1, column=2).value == "name"
    assert ws.cell(row=2, column=2).value == "Rex Club"


@pytest.mark.asyncio
async def test_export_bad_format(client, users, club):
    resp = await client.get(f"/api/clubs/{club.id}/export?format=pdf", headers=auth(users[Role.ADMIN]))
    assert resp.status_code == 422


@pytest.mark.asyncio
async def test_export_forbidden_for_public(client, users, club):
    resp = await client.get(f"/api/clubs/{club.id}/export", headers=auth(users[Role.PUBLIC]))
    assert resp.status_code == 403


@pytest.mark.asyncio
async def test_export_missing_club(client, users):
    resp = await client.get("/api/clubs/999/export", headers=auth(users[Role.ADMIN]))
    assert resp.status_code == 404


@pytest.mark.asyncio
async def test_update_missing_club_without_body_is_not_found(client, users):
    resp = await client.put("/api/clubs/999", json={}, headers=auth(users[Role.ADMIN]))
    assert resp.status_code == 404
    assert resp.json() == {"detail": "Club not found"}
