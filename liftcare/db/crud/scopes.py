"""Scoped base statements, one per tenant resource.

Every list/get/update/delete helper in this package starts from the statement
defined here, so a verb cannot bypass the row filter for its resource.
"""

from __future__ import annotations

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql.elements import ColumnElement

from liftcare.access.scoping import scope_clause
from liftcare.models import (
    Alert, Building, Contract, Elevator, Invoice, MaintenanceJob, MaintenancePlan,
    Quotation, Technician, Ticket,
)
from liftcare.services.auth import AuthContext


def customer_building_ids(customer_id: str) -> Select:
    return select(Building.id).where(Building.customer_id == customer_id)


def customer_elevator_ids(customer_id: str) -> Select:
    return select(Elevator.id).where(Elevator.building_id.in_(customer_building_ids(customer_id)))


def user_technician_ids(user_id: str) -> Select:
    return select(Technician.id).where(Technician.user_id == user_id)


# ── Row predicates ───────────────────────────────────────

def building_scope(auth: AuthContext) -> ColumnElement[bool]:
    return scope_clause(auth, "buildings", by_customer=lambda cid: Building.customer_id == cid)


def elevator_scope(auth: AuthContext) -> ColumnElement[bool]:
    return scope_clause(
        auth, "elevators",
        by_customer=lambda cid: Elevator.building_id.in_(customer_building_ids(cid)),
    )


def alert_scope(auth: AuthContext) -> ColumnElement[bool]:
    return scope_clause(
        auth, "alerts",
        by_customer=lambda cid: Alert.elevator_id.in_(customer_elevator_ids(cid)),
    )


def contract_scope(auth: AuthContext) -> ColumnElement[bool]:
    return scope_clause(auth, "contracts", by_customer=lambda cid: Contract.customer_id == cid)


def quotation_scope(auth: AuthContext) -> ColumnElement[bool]:
    return scope_clause(auth, "quotations", by_customer=lambda cid: Quotation.customer_id == cid)


def invoice_scope(auth: AuthContext) -> ColumnElement[bool]:
    return scope_clause(auth, "invoices", by_customer=lambda cid: Invoice.customer_id == cid)


def ticket_scope(auth: AuthContext) -> ColumnElement[bool]:
    return scope_clause(auth, "tickets", by_customer=lambda cid: Ticket.customer_id == cid)


def plan_scope(auth: AuthContext) -> ColumnElement[bool]:
    return scope_clause(
        auth, "maintenance_plans",
        by_customer=lambda cid: MaintenancePlan.elevator_id.in_(customer_elevator_ids(cid)),
    )


def job_scope(auth: AuthContext) -> ColumnElement[bool]:
    return scope_clause(
        auth, "maintenance_jobs",
        by_customer=lambda cid: MaintenanceJob.elevator_id.in_(customer_elevator_ids(cid)),
        by_technician_user=lambda uid: MaintenanceJob.technician_id.in_(user_technician_ids(uid)),
    )


# ── Base statements ──────────────────────────────────────

def buildings_query(auth: AuthContext) -> Select:
    return select(Building).where(building_scope(auth))


def elevators_query(auth: AuthContext) -> Select:
    return select(Elevator).where(elevator_scope(auth))


def alerts_query(auth: AuthContext) -> Select:
    return select(Alert).where(alert_scope(auth))


def contracts_query(auth: AuthContext) -> Select:
    return select(Contract).where(contract_scope(auth))


def quotations_query(auth: AuthContext) -> Select:
    return select(Quotation).where(quotation_scope(auth))


def invoices_query(auth: AuthContext) -> Select:
    return select(Invoice).where(invoice_scope(auth))


def tickets_query(auth: AuthContext) -> Select:
    return select(Ticket).where(ticket_scope(auth))


def plans_query(auth: AuthContext) -> Select:
    return select(MaintenancePlan).where(plan_scope(auth))


def jobs_query(auth: AuthContext) -> Select:
    return select(MaintenanceJob).where(job_scope(auth))


# ── Execution helpers ────────────────────────────────────

async def fetch_all(db: AsyncSession, stmt: Select) -> list:
    result = await db.execute(stmt)
    return list(result.scalars().all())


async def fetch_one(db: AsyncSession, stmt: Select):
    # populate_existing so rows written earlier in the session come back with fresh relationships
    result = await db.execute(stmt.execution_options(populate_existing=True))
    return result.scalars().first()


def apply_fields(obj, fields: dict) -> None:
    """Full replacement: every declared field is written, None included."""
    for key, value in fields.items():
        setattr(obj, key, value)
