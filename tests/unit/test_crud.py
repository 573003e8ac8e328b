from datetime import date

import pytest
import pytest_asyncio
from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError

from liftcare.db import crud
from liftcare.db.engine import Database
from liftcare.errors import ConflictError, DuplicatePendingRequest
from liftcare.models import Notification, Technician, TechnicianRequest
from liftcare.services.auth import AuthContext, create_user


@pytest_asyncio.fixture
async def db():
    database = Database("sqlite+aiosqlite:///:memory:")
    await database.create_all()
    async with database.session_factory() as session:
        yield session
    await database.dispose()


async def _admin(db, email="admin@test.com") -> AuthContext:
    user = await create_user(db, email, "adminpass123", "Admin", "admin")
    return AuthContext.from_user(user)


async def _tenant(db, auth, name):
    customer = await crud.create_customer(db, name=name, business_type="Commercial")
    building = await crud.create_building(db, auth, customer_id=customer.id, name=f"{name} Tower")
    return customer, building


def _application(**overrides):
    fields = {
        "phone": "0812345678",
        "specialty": "Traction lifts",
        "address": "1 Main Rd",
        "date_of_birth": date(1990, 1, 1),
        "age": 35,
        "experience": "8 years",
        "education": "Vocational certificate",
        "notes": None,
    }
    fields.update(overrides)
    return fields


async def _count(db, stmt) -> int:
    return (await db.execute(stmt)).scalar_one()


# ── Scoping ──────────────────────────────────────────────

async def test_customer_sees_only_own_buildings_and_elevators(db):
    admin = await _admin(db)
    abc, abc_building = await _tenant(db, admin, "ABC Co")
    xyz, xyz_building = await _tenant(db, admin, "XYZ Ltd")
    await crud.create_elevator(db, admin, id="EL-ABC", name="ABC Lift", building_id=abc_building.id)
    await crud.create_elevator(db, admin, id="EL-XYZ", name="XYZ Lift", building_id=xyz_building.id)

    caller = AuthContext(user_id="u-abc", role="customer", email="c@abc.com", name="C", customer_id=abc.id)

    buildings = await crud.list_buildings(db, caller)
    assert [b.id for b in buildings] == [abc_building.id]
    elevators = await crud.list_elevators(db, caller)
    assert [e.id for e in elevators] == ["EL-ABC"]
    assert elevators[0].customer_name == "ABC Co"

    # get goes through the same filter
    assert await crud.get_elevator(db, caller, "EL-XYZ") is None
    assert await crud.get_building(db, caller, xyz_building.id) is None


async def test_customer_without_link_sees_nothing(db):
    admin = await _admin(db)
    _, building = await _tenant(db, admin, "ABC Co")
    await crud.create_elevator(db, admin, id="EL-1", name="Lift", building_id=building.id)

    unlinked = AuthContext(user_id="u-1", role="customer", email="c@x.com", name="C")
    assert await crud.list_buildings(db, unlinked) == []
    assert await crud.list_elevators(db, unlinked) == []
    assert await crud.list_tickets(db, unlinked) == []
    assert await crud.list_contracts(db, unlinked) == []
    assert await crud.dashboard_summary(db, unlinked) == {"elevators": 0, "tickets_open": 0, "alerts_open": 0}


async def test_unknown_role_sees_nothing(db):
    admin = await _admin(db)
    await _tenant(db, admin, "ABC Co")
    stranger = AuthContext(user_id="u-2", role="auditor", email="a@x.com", name="A", customer_id="anything")
    assert await crud.list_buildings(db, stranger) == []


async def test_technician_sees_only_own_jobs(db):
    admin = await _admin(db)
    _, building = await _tenant(db, admin, "ABC Co")
    await crud.create_elevator(db, admin, id="EL-1", name="Lift", building_id=building.id)

    alice = await create_user(db, "alice@test.com", "password123", "Alice", "technician")
    bob = await create_user(db, "bob@test.com", "password123", "Bob", "technician")
    alice_tech = await crud.create_technician(db, alice.id)
    bob_tech = await crud.create_technician(db, bob.id)

    mine = await crud.create_job(db, admin, elevator_id="EL-1", job_type="planned", technician_id=alice_tech.id)
    await crud.create_job(db, admin, elevator_id="EL-1", job_type="emergency", technician_id=bob_tech.id)

    jobs = await crud.list_jobs(db, AuthContext.from_user(alice))
    assert [j.id for j in jobs] == [mine.id]
    assert jobs[0].technician_name == "Alice"


async def test_job_total_cost_defaults_to_labor_plus_parts(db):
    admin = await _admin(db)
    _, building = await _tenant(db, admin, "ABC Co")
    await crud.create_elevator(db, admin, id="EL-1", name="Lift", building_id=building.id)

    job = await crud.create_job(
        db, admin, elevator_id="EL-1", job_type="planned", labor_cost=1500, parts_cost=250, total_cost=None,
    )
    assert job.total_cost == 1750
    assert job.building_name == "ABC Co Tower"


# ── Technician requests ──────────────────────────────────

async def test_second_pending_request_is_rejected(db):
    user = await create_user(db, "tech@test.com", "password123", "Tech", "technician")
    await crud.create_technician_request(db, user.id, **_application())

    with pytest.raises(DuplicatePendingRequest):
        await crud.create_technician_request(db, user.id, **_application(phone="0899999999"))

    count = await _count(db, select(func.count(TechnicianRequest.id)).where(TechnicianRequest.user_id == user.id))
    assert count == 1


async def test_pending_index_blocks_direct_duplicate(db):
    user = await create_user(db, "tech@test.com", "password123", "Tech", "technician")
    await crud.create_technician_request(db, user.id, **_application())

    db.add(TechnicianRequest(user_id=user.id, status="pending", **_application()))
    with pytest.raises(IntegrityError):
        await db.commit()
    await db.rollback()


async def test_approval_creates_technician(db):
    user = await create_user(db, "tech@test.com", "password123", "Tech", "technician")
    request = await crud.create_technician_request(db, user.id, **_application())

    decided = await crud.decide_technician_request(db, request, "approved")
    assert decided.status == "approved"

    technician = await crud.get_technician_by_user(db, user.id)
    assert technician is not None
    assert technician.phone == "0812345678"

    listed = await crud.list_technicians(db)
    assert listed[0]["address"] == "1 Main Rd"
    assert listed[0]["education"] == "Vocational certificate"


async def test_approval_with_existing_technician_does_not_duplicate(db):
    user = await create_user(db, "tech@test.com", "password123", "Tech", "technician")
    await crud.create_technician(db, user.id, phone="000")
    request = await crud.create_technician_request(db, user.id, **_application())

    decided = await crud.decide_technician_request(db, request, "approved")
    assert decided.status == "approved"

    count = await _count(db, select(func.count(Technician.id)).where(Technician.user_id == user.id))
    assert count == 1


async def test_rejection_creates_no_technician(db):
    user = await create_user(db, "tech@test.com", "password123", "Tech", "technician")
    request = await crud.create_technician_request(db, user.id, **_application())

    decided = await crud.decide_technician_request(db, request, "rejected")
    assert decided.status == "rejected"
    assert await crud.get_technician_by_user(db, user.id) is None


async def test_deciding_twice_conflicts(db):
    user = await create_user(db, "tech@test.com", "password123", "Tech", "technician")
    request = await crud.create_technician_request(db, user.id, **_application())
    await crud.decide_technician_request(db, request, "rejected")

    with pytest.raises(ConflictError):
        await crud.decide_technician_request(db, request, "approved")
    assert await crud.get_technician_by_user(db, user.id) is None
    # the conflict leaves the session and loaded objects usable
    assert user.email == "tech@test.com"
    assert request.user_id == user.id
    again = await crud.create_technician_request(db, user.id, **_application())
    assert again.status == "pending"


async def test_duplicate_technician_conflicts(db):
    user = await create_user(db, "tech@test.com", "password123", "Tech", "technician")
    await crud.create_technician(db, user.id, phone="000")

    with pytest.raises(ConflictError):
        await crud.create_technician(db, user.id, phone="111")
    assert user.name == "Tech"
    count = await _count(db, select(func.count(Technician.id)).where(Technician.user_id == user.id))
    assert count == 1


async def test_new_request_allowed_after_decision(db):
    user = await create_user(db, "tech@test.com", "password123", "Tech", "technician")
    first = await crud.create_technician_request(db, user.id, **_application())
    await crud.decide_technician_request(db, first, "rejected")

    second = await crud.create_technician_request(db, user.id, **_application())
    assert second.status == "pending"


# ── Elevator notifications ───────────────────────────────

async def _elevator_notifications(db, user_id):
    return [n for n in await crud.list_notifications(db, user_id) if n.tag == "elevator:EL-1"]


async def test_fault_transition_replaces_notification(db):
    admin = await _admin(db)
    _, building = await _tenant(db, admin, "ABC Co")
    elevator = await crud.create_elevator(db, admin, id="EL-1", name="Lift", building_id=building.id)

    elevator = await crud.update_elevator(db, admin, elevator, state="fault")
    first = await _elevator_notifications(db, admin.user_id)
    assert len(first) == 1
    assert first[0].title == "Elevator EL-1 changed to fault"
    assert first[0].type == "elevator_state"

    # fault -> fault is silent and keeps the existing one
    elevator = await crud.update_elevator(db, admin, elevator, state="fault", current_floor=5)
    again = await _elevator_notifications(db, admin.user_id)
    assert [n.id for n in again] == [first[0].id]

    await crud.update_elevator(db, admin, elevator, state="normal")
    last = await _elevator_notifications(db, admin.user_id)
    assert len(last) == 1
    assert last[0].id != first[0].id
    assert last[0].title == "Elevator EL-1 returned to normal"


async def test_other_transitions_do_not_notify(db):
    admin = await _admin(db)
    _, building = await _tenant(db, admin, "ABC Co")
    elevator = await crud.create_elevator(db, admin, id="EL-1", name="Lift", building_id=building.id)

    await crud.update_elevator(db, admin, elevator, state="in_maintenance")
    assert await _elevator_notifications(db, admin.user_id) == []


async def test_notification_swap_only_touches_actor(db):
    admin = await _admin(db)
    other = await _admin(db, email="other@test.com")
    _, building = await _tenant(db, admin, "ABC Co")
    elevator = await crud.create_elevator(db, admin, id="EL-1", name="Lift", building_id=building.id)

    elevator = await crud.update_elevator(db, other, elevator, state="fault")
    elevator = await crud.update_elevator(db, admin, elevator, state="normal")
    await crud.update_elevator(db, admin, elevator, state="fault")

    assert len(await _elevator_notifications(db, other.user_id)) == 1
    assert len(await _elevator_notifications(db, admin.user_id)) == 1
    total = await _count(db, select(func.count(Notification.id)))
    assert total == 2


# ── Parts ────────────────────────────────────────────────

async def test_stock_is_sum_of_movements(db):
    part = await crud.create_part(db, part_code="P-100", name="Door roller")
    assert part.unit == "pcs"

    await crud.adjust_stock(db, part, 10, "initial count")
    await crud.adjust_stock(db, part, -3)

    stocks = await crud.list_stocks(db)
    assert stocks == [{"part_id": part.id, "part_code": "P-100", "part_name": "Door roller", "quantity": 7}]

    movements = await crud.list_movements(db)
    assert len(movements) == 2
    assert {m.ref_type for m in movements} == {"stock_adjust"}


# ── Pricing ──────────────────────────────────────────────

async def test_pricing_insert_then_update(db):
    assert await crud.get_latest_pricing(db) is None

    saved = await crud.save_pricing(db, None, call_fee=500, labor_rate_per_hour=800,
                                    parts_markup_percent=15, currency=None)
    assert saved.currency == "THB"

    updated = await crud.save_pricing(db, saved.id, call_fee=600, labor_rate_per_hour=800,
                                      parts_markup_percent=15, currency="THB")
    assert updated.id == saved.id
    assert updated.call_fee == 600

    assert await crud.save_pricing(db, "missing", call_fee=1) is None


# ── Referential integrity ────────────────────────────────

async def test_deleting_referenced_customer_is_refused(db):
    admin = await _admin(db)
    customer, building = await _tenant(db, admin, "ABC Co")
    building_id = building.id

    with pytest.raises(IntegrityError):
        await crud.delete_customer(db, customer)
    await db.rollback()

    assert await crud.get_building(db, admin, building_id) is not None


async def test_deleting_unreferenced_customer(db):
    customer = await crud.create_customer(db, name="Empty Co", business_type="Retail")
    customer_id = customer.id

    await crud.delete_customer(db, customer)
    assert await crud.customer_exists(db, customer_id) is False
