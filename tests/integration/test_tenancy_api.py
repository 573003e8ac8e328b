"""Integration tests for row-level tenant isolation over HTTP."""

from __future__ import annotations

import pytest


async def _seed_tenant(client, admin_headers, name: str, elevator_id: str) -> dict:
    """Customer -> building -> elevator -> contract for one tenant."""
    customer = await client.post(
        "/api/customers", json={"name": name, "business_type": "Commercial"}, headers=admin_headers,
    )
    assert customer.status_code == 201
    customer_id = customer.json()["id"]

    building = await client.post(
        "/api/buildings",
        json={"customer_id": customer_id, "name": f"{name} Tower", "address": "1 Main St"},
        headers=admin_headers,
    )
    assert building.status_code == 201

    elevator = await client.post(
        "/api/elevators",
        json={"id": elevator_id, "name": f"{name} Lift", "building_id": building.json()["id"]},
        headers=admin_headers,
    )
    assert elevator.status_code == 201

    contract = await client.post(
        "/api/contracts",
        json={
            "customer_id": customer_id,
            "contract_code": f"C-{elevator_id}",
            "contract_type": "full",
            "start_date": "2026-01-01",
            "end_date": "2026-12-31",
        },
        headers=admin_headers,
    )
    assert contract.status_code == 201

    return {
        "customer_id": customer_id,
        "building_id": building.json()["id"],
        "elevator_id": elevator_id,
        "contract_id": contract.json()["id"],
    }


@pytest.mark.asyncio
async def test_customer_sees_nothing_of_another_tenant(client, admin_headers, make_headers):
    await _seed_tenant(client, admin_headers, "ABC Co", "ABC-1")
    xyz = await _seed_tenant(client, admin_headers, "XYZ Ltd", "XYZ-1")
    headers = await make_headers("customer", customer_id=xyz["customer_id"])

    buildings = await client.get("/api/buildings", headers=headers)
    assert buildings.status_code == 200
    assert [b["id"] for b in buildings.json()] == [xyz["building_id"]]

    elevators = await client.get("/api/elevators", headers=headers)
    assert [e["id"] for e in elevators.json()] == ["XYZ-1"]

    contracts = await client.get("/api/contracts", headers=headers)
    assert [c["id"] for c in contracts.json()] == [xyz["contract_id"]]


@pytest.mark.asyncio
async def test_customer_without_buildings_lists_empty(client, admin_headers, make_headers):
    await _seed_tenant(client, admin_headers, "ABC Co", "ABC-1")
    empty = await client.post(
        "/api/customers", json={"name": "New Co", "business_type": "Retail"}, headers=admin_headers,
    )
    headers = await make_headers("customer", customer_id=empty.json()["id"])

    resp = await client.get("/api/buildings", headers=headers)
    assert resp.status_code == 200
    assert resp.json() == []


@pytest.mark.asyncio
async def test_unlinked_customer_sees_empty_lists(client, admin_headers, make_headers):
    await _seed_tenant(client, admin_headers, "ABC Co", "ABC-1")
    headers = await make_headers("customer")

    for path in ("/api/buildings", "/api/elevators", "/api/contracts", "/api/tickets", "/api/alerts"):
        resp = await client.get(path, headers=headers)
        assert resp.status_code == 200, path
        assert resp.json() == [], path


@pytest.mark.asyncio
async def test_cross_tenant_get_is_not_found(client, admin_headers, make_headers):
    abc = await _seed_tenant(client, admin_headers, "ABC Co", "ABC-1")
    xyz = await _seed_tenant(client, admin_headers, "XYZ Ltd", "XYZ-1")
    headers = await make_headers("customer", customer_id=xyz["customer_id"])

    assert (await client.get(f"/api/buildings/{abc['building_id']}", headers=headers)).status_code == 404
    assert (await client.get("/api/elevators/ABC-1", headers=headers)).status_code == 404
    assert (await client.get(f"/api/contracts/{abc['contract_id']}", headers=headers)).status_code == 404
    assert (await client.get("/api/elevators/XYZ-1", headers=headers)).status_code == 200


@pytest.mark.asyncio
async def test_customer_ticket_on_foreign_elevator(client, admin_headers, make_headers):
    await _seed_tenant(client, admin_headers, "ABC Co", "ABC-1")
    xyz = await _seed_tenant(client, admin_headers, "XYZ Ltd", "XYZ-1")
    headers = await make_headers("customer", customer_id=xyz["customer_id"])

    resp = await client.post(
        "/api/tickets", json={"elevatorId": "ABC-1", "description": "Door stuck"}, headers=headers,
    )
    assert resp.status_code == 404

    admin_tickets = await client.get("/api/tickets", headers=admin_headers)
    assert admin_tickets.json() == []


@pytest.mark.asyncio
async def test_customer_ticket_on_own_elevator(client, admin_headers, make_headers):
    abc = await _seed_tenant(client, admin_headers, "ABC Co", "ABC-1")
    xyz = await _seed_tenant(client, admin_headers, "XYZ Ltd", "XYZ-1")
    abc_headers = await make_headers("customer", customer_id=abc["customer_id"])
    xyz_headers = await make_headers("customer", customer_id=xyz["customer_id"])

    resp = await client.post(
        "/api/tickets",
        json={"elevatorId": "ABC-1", "description": "Door stuck", "priority": "high"},
        headers=abc_headers,
    )
    assert resp.status_code == 201
    body = resp.json()
    assert body["message"] == "Ticket created"
    assert body["ticket"]["customer_id"] == abc["customer_id"]
    assert body["ticket"]["status"] == "pending"

    assert len((await client.get("/api/tickets", headers=abc_headers)).json()) == 1
    assert (await client.get("/api/tickets", headers=xyz_headers)).json() == []


@pytest.mark.asyncio
async def test_customer_cannot_write_admin_resources(client, admin_headers, make_headers):
    abc = await _seed_tenant(client, admin_headers, "ABC Co", "ABC-1")
    headers = await make_headers("customer", customer_id=abc["customer_id"])

    resp = await client.post(
        "/api/buildings", json={"customer_id": abc["customer_id"], "name": "Annex"}, headers=headers,
    )
    assert resp.status_code == 403

    resp = await client.delete(f"/api/contracts/{abc['contract_id']}", headers=headers)
    assert resp.status_code == 403

    resp = await client.get("/api/pricing-settings", headers=headers)
    assert resp.status_code == 403


@pytest.mark.asyncio
async def test_customer_me(client, admin_headers, make_headers):
    abc = await _seed_tenant(client, admin_headers, "ABC Co", "ABC-1")
    headers = await make_headers("customer", customer_id=abc["customer_id"])

    resp = await client.get("/api/customers/me", headers=headers)
    assert resp.status_code == 200
    assert resp.json()["name"] == "ABC Co"

    unlinked = await make_headers("customer")
    assert (await client.get("/api/customers/me", headers=unlinked)).status_code == 403


@pytest.mark.asyncio
async def test_building_requires_existing_customer(client, admin_headers):
    resp = await client.post(
        "/api/buildings", json={"customer_id": "missing", "name": "Ghost"}, headers=admin_headers,
    )
    assert resp.status_code == 400


@pytest.mark.asyncio
async def test_duplicate_elevator_id(client, admin_headers):
    abc = await _seed_tenant(client, admin_headers, "ABC Co", "ABC-1")
    resp = await client.post(
        "/api/elevators",
        json={"id": "ABC-1", "name": "Again", "building_id": abc["building_id"]},
        headers=admin_headers,
    )
    assert resp.status_code == 409


@pytest.mark.asyncio
async def test_billing_documents_require_existing_customer(client, admin_headers):
    abc = await _seed_tenant(client, admin_headers, "ABC Co", "ABC-1")

    contract = await client.post(
        "/api/contracts",
        json={
            "customer_id": "missing",
            "contract_code": "C-X",
            "contract_type": "full",
            "start_date": "2026-01-01",
            "end_date": "2026-12-31",
        },
        headers=admin_headers,
    )
    assert contract.status_code == 400

    quotation = await client.post("/api/quotations", json={"customer_id": "missing"}, headers=admin_headers)
    assert quotation.status_code == 400

    invoice = await client.post("/api/invoices", json={"customer_id": "missing"}, headers=admin_headers)
    assert invoice.status_code == 400

    moved = await client.put(
        f"/api/contracts/{abc['contract_id']}",
        json={
            "customer_id": "missing",
            "contract_code": "C-ABC-1",
            "contract_type": "full",
            "start_date": "2026-01-01",
            "end_date": "2026-12-31",
        },
        headers=admin_headers,
    )
    assert moved.status_code == 400

    assert (await client.get("/api/quotations", headers=admin_headers)).json() == []
    assert (await client.get("/api/invoices", headers=admin_headers)).json() == []


@pytest.mark.asyncio
async def test_deleting_customer_in_use_conflicts(client, admin_headers):
    abc = await _seed_tenant(client, admin_headers, "ABC Co", "ABC-1")

    resp = await client.delete(f"/api/customers/{abc['customer_id']}", headers=admin_headers)
    assert resp.status_code == 409
    assert resp.json()["error"] == "ConflictError"

    building = await client.get(f"/api/buildings/{abc['building_id']}", headers=admin_headers)
    assert building.status_code == 200
