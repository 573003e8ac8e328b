"""Integration tests for registration, login and the bearer guard."""

from __future__ import annotations

import pytest
from jose import jwt


async def _register(client, **overrides):
    body = {"email": "new@test.com", "password": "password123", "name": "New User"}
    body.update(overrides)
    return await client.post("/auth/register", json=body)


@pytest.mark.asyncio
async def test_health(client):
    resp = await client.get("/")
    assert resp.status_code == 200
    assert resp.json() == {"message": "LiftCare API is running"}


@pytest.mark.asyncio
async def test_register_returns_user_and_token(client):
    resp = await _register(client)
    assert resp.status_code == 201
    data = resp.json()
    assert data["user"]["email"] == "new@test.com"
    assert data["user"]["role"] == "customer"

    claims = jwt.get_unverified_claims(data["token"])
    assert claims["id"] == data["user"]["id"]
    assert claims["exp"] - claims["iat"] == 8 * 3600


@pytest.mark.asyncio
async def test_register_cannot_self_promote(client):
    resp = await _register(client, role="admin")
    assert resp.status_code == 201
    assert resp.json()["user"]["role"] == "customer"


@pytest.mark.asyncio
async def test_register_technician_drops_customer_link(client, admin_headers):
    customer = await client.post(
        "/api/customers", json={"name": "ABC Co", "business_type": "Commercial"}, headers=admin_headers,
    )
    resp = await _register(client, role="technician", customerId=customer.json()["id"])
    assert resp.status_code == 201
    assert resp.json()["user"]["role"] == "technician"
    assert resp.json()["user"]["customer_id"] is None


@pytest.mark.asyncio
async def test_register_rejects_unknown_customer(client):
    resp = await _register(client, customerId="does-not-exist")
    assert resp.status_code == 400


@pytest.mark.asyncio
async def test_register_duplicate_email_conflicts(client):
    assert (await _register(client)).status_code == 201
    resp = await _register(client, name="Someone Else")
    assert resp.status_code == 409
    assert resp.json()["error"] == "DuplicateEmail"

    # the first identity still logs in with its own password
    login = await client.post("/auth/login", json={"email": "new@test.com", "password": "password123"})
    assert login.status_code == 200
    assert login.json()["user"]["name"] == "New User"


@pytest.mark.asyncio
async def test_register_missing_fields(client):
    resp = await client.post("/auth/register", json={"email": "x@test.com"})
    assert resp.status_code == 400
    assert resp.json()["error"] == "ValidationError"


@pytest.mark.asyncio
async def test_login_wrong_password(client):
    await _register(client)
    resp = await client.post("/auth/login", json={"email": "new@test.com", "password": "wrong-password"})
    assert resp.status_code == 401
    assert "token" not in resp.json()


@pytest.mark.asyncio
async def test_login_links_customer_by_contact_email(client, admin_headers):
    customer = await client.post(
        "/api/customers",
        json={"name": "ABC Co", "business_type": "Commercial", "contact_email": "owner@abc.com"},
        headers=admin_headers,
    )
    await _register(client, email="owner@abc.com")

    resp = await client.post("/auth/login", json={"email": "owner@abc.com", "password": "password123"})
    assert resp.status_code == 200
    assert resp.json()["user"]["customer_id"] == customer.json()["id"]


@pytest.mark.asyncio
async def test_me_echoes_claims(client):
    token = (await _register(client)).json()["token"]
    resp = await client.get("/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert resp.status_code == 200
    assert resp.json()["user"]["email"] == "new@test.com"


@pytest.mark.asyncio
async def test_missing_token(client):
    resp = await client.get("/api/buildings")
    assert resp.status_code == 401
    assert resp.json() == {"message": "Missing token", "error": "MissingToken"}


@pytest.mark.asyncio
async def test_non_bearer_header_is_missing_token(client):
    resp = await client.get("/api/buildings", headers={"Authorization": "Basic abc"})
    assert resp.status_code == 401
    assert resp.json()["error"] == "MissingToken"


@pytest.mark.asyncio
async def test_garbage_token(client):
    resp = await client.get("/api/buildings", headers={"Authorization": "Bearer not.a.token"})
    assert resp.status_code == 401
    assert resp.json()["error"] == "InvalidOrExpiredToken"


@pytest.mark.asyncio
async def test_wrong_role_forbidden(client, make_headers):
    headers = await make_headers("customer")
    resp = await client.get("/api/customers", headers=headers)
    assert resp.status_code == 403
    assert resp.json()["error"] == "Forbidden"


@pytest.mark.asyncio
async def test_change_password(client):
    token = (await _register(client)).json()["token"]
    headers = {"Authorization": f"Bearer {token}"}

    short = await client.post(
        "/auth/change-password", json={"currentPassword": "password123", "newPassword": "short"},
        headers=headers,
    )
    assert short.status_code == 400

    wrong = await client.post(
        "/auth/change-password", json={"currentPassword": "nope-nope", "newPassword": "brandnew123"},
        headers=headers,
    )
    assert wrong.status_code == 401

    ok = await client.post(
        "/auth/change-password", json={"currentPassword": "password123", "newPassword": "brandnew123"},
        headers=headers,
    )
    assert ok.status_code == 200

    login = await client.post("/auth/login", json={"email": "new@test.com", "password": "brandnew123"})
    assert login.status_code == 200


@pytest.mark.asyncio
async def test_register_overlong_password_rejected(client):
    resp = await _register(client, password="x" * 80)
    assert resp.status_code == 400
    assert resp.json()["error"] == "ValidationError"


@pytest.mark.asyncio
async def test_login_overlong_wrong_password(client):
    await _register(client)
    resp = await client.post("/auth/login", json={"email": "new@test.com", "password": "y" * 80})
    assert resp.status_code == 401
    assert "token" not in resp.json()


@pytest.mark.asyncio
async def test_change_password_overlong_rejected(client):
    token = (await _register(client)).json()["token"]
    resp = await client.post(
        "/auth/change-password",
        json={"currentPassword": "password123", "newPassword": "z" * 80},
        headers={"Authorization": f"Bearer {token}"},
    )
    assert resp.status_code == 400


@pytest.mark.asyncio
async def test_password_whitespace_is_kept(client):
    assert (await _register(client, password="  secret99  ")).status_code == 201

    stripped = await client.post("/auth/login", json={"email": "new@test.com", "password": "secret99"})
    assert stripped.status_code == 401

    exact = await client.post("/auth/login", json={"email": "new@test.com", "password": "  secret99  "})
    assert exact.status_code == 200
