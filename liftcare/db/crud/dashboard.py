"""Scoped counts for the dashboard summary."""

from __future__ import annotations

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from liftcare.db.crud.scopes import alert_scope, elevator_scope, ticket_scope
from liftcare.models import Alert, Elevator, Ticket
from liftcare.models.ticket import OPEN_TICKET_STATUSES
from liftcare.services.auth import AuthContext


async def _count(db: AsyncSession, stmt) -> int:
    result = await db.execute(stmt)
    return int(result.scalar_one())


async def dashboard_summary(db: AsyncSession, auth: AuthContext) -> dict:
    elevators = await _count(
        db, select(func.count(Elevator.id)).where(elevator_scope(auth)),
    )
    tickets_open = await _count(
        db,
        select(func.count(Ticket.id)).where(
            ticket_scope(auth), Ticket.status.in_(OPEN_TICKET_STATUSES),
        ),
    )
    alerts_open = await _count(
        db,
        select(func.count(Alert.id)).where(alert_scope(auth), Alert.resolved_at.is_(None)),
    )
    return {"elevators": elevators, "tickets_open": tickets_open, "alerts_open": alerts_open}
