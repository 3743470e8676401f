"""Tests autentizace / Authentication tests."""

import pytest

from conftest import auth
from spolky.models.user import Role
from spolky.utils.auth import create_access_token, decode_token, hash_password, verify_password
from spolky.utils.seed import seed_admin

REGISTER_BODY = {
    "username": "petr",
    "email": "petr@example.com",
    "password": "tajne-heslo",
    "name": "Petr",
    "surname": "Svoboda",
}


def test_password_hashing():
    hashed = hash_password("tajne-heslo")
    assert hashed != "tajne-heslo"
    assert verify_password("tajne-heslo", hashed)
    assert not verify_password("spatne", hashed)


def test_access_token_round_trip():
    payload = decode_token(create_access_token("user-1"))
    assert payload["sub"] == "user-1"
    assert payload["type"] == "access"


def test_decode_garbage_token():
    assert decode_token("not.a.jwt") is None


@pytest.mark.asyncio
async def test_register_defaults_to_public(client):
    resp = await client.post("/api/auth/register", json=REGISTER_BODY)
    assert resp.status_code == 201
    data = resp.json()
    assert data["username"] == "petr"
    assert data["role"] == "Public"
    assert "hashed_password" not in data


@pytest.mark.asyncio
async def test_register_duplicate(client):
    await client.post("/api/auth/register", json=REGISTER_BODY)
    resp = await client.post("/api/auth/register", json={**REGISTER_BODY, "email": "other@example.com"})
    assert resp.status_code == 400


@pytest.mark.asyncio
async def test_register_short_password(client):
    resp = await client.post("/api/auth/register", json={**REGISTER_BODY, "password": "abc"})
    assert resp.status_code == 422


@pytest.mark.asyncio
async def test_login_me_refresh_logout(client):
    await client.post("/api/auth/register", json={**REGISTER_BODY, "role": "Chairman"})

    resp = await client.post("/api/auth/login", json={"username": "petr", "password": "tajne-heslo"})
    assert resp.status_code == 200
    tokens = resp.json()
    headers = {"Authorization": f"Bearer {tokens['access_token']}"}

    me = await client.get("/api/auth/me", headers=headers)
    assert me.status_code == 200
    assert me.json()["role"] == "Chairman"

    refreshed = await client.post("/api/auth/refresh", json={"refresh_token": tokens["refresh_token"]})
    assert refreshed.status_code == 200
    assert refreshed.json()["access_token"]

    logout = await client.post("/api/auth/logout", headers=headers)
    assert logout.status_code == 204


@pytest.mark.asyncio
async def test_login_bad_password(client):
    await client.post("/api/auth/register", json=REGISTER_BODY)
    resp = await client.post("/api/auth/login", json={"username": "petr", "password": "spatne"})
    assert resp.status_code == 401


@pytest.mark.asyncio
async def test_refresh_rejects_access_token(client, users):
    token = create_access_token(users[Role.ADMIN].id)
    resp = await client.post("/api/auth/refresh", json={"refresh_token": token})
    assert resp.status_code == 401


@pytest.mark.asyncio
async def test_me_with_seeded_user(client, users):
    resp = await client.get("/api/auth/me", headers=auth(users[Role.READ_ONLY]))
    assert resp.status_code == 200
    assert resp.json()["username"] == "reader"


@pytest.mark.asyncio
async def test_seed_admin_once(session):
    admin = await seed_admin(session)
    assert admin is not None
    assert admin.role == Role.ADMIN
    assert verify_password("admin", admin.hashed_password)
    assert await seed_admin(session) is None
