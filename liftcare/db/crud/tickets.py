"""Support tickets."""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from liftcare.db.crud.scopes import fetch_all, fetch_one, tickets_query
from liftcare.models import Elevator, Ticket
from liftcare.services.auth import AuthContext

TICKET_LIST_LIMIT = 100


async def list_tickets(db: AsyncSession, auth: AuthContext) -> list[Ticket]:
    stmt = tickets_query(auth).order_by(Ticket.created_at.desc()).limit(TICKET_LIST_LIMIT)
    return await fetch_all(db, stmt)


async def get_ticket(db: AsyncSession, auth: AuthContext, ticket_id: str) -> Ticket | None:
    return await fetch_one(db, tickets_query(auth).where(Ticket.id == ticket_id))


async def create_ticket(
    db: AsyncSession, auth: AuthContext, elevator: Elevator,
    description: str, title: str | None = None, priority: str = "medium",
) -> Ticket:
    """Open a ticket against an elevator the caller can see.

    The ticket's customer is taken from the elevator's building, not from the
    caller, so staff-reported tickets still land in the owner's tenant.
    """
    ticket = Ticket(
        elevator_id=elevator.id,
        reporter_id=auth.user_id,
        customer_id=elevator.building.customer_id if elevator.building else auth.customer_id,
        title=title,
        description=description,
        priority=priority,
        source="internal",
    )
    db.add(ticket)
    await db.commit()
    return await get_ticket(db, auth, ticket.id)
