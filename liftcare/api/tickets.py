from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from liftcare.db import crud
from liftcare.db.engine import get_db
from liftcare.dependencies import guard
from liftcare.errors import NotFoundError
from liftcare.schemas import TicketCreate, TicketCreated, TicketRead
from liftcare.services.auth import AuthContext

router = APIRouter(prefix="/api/tickets", tags=["tickets"])


@router.get("", response_model=list[TicketRead])
async def list_tickets(
    auth: AuthContext = Depends(guard("tickets", "list")),
    db: AsyncSession = Depends(get_db),
):
    return await crud.list_tickets(db, auth)


@router.get("/{ticket_id}", response_model=TicketRead)
async def get_ticket(
    ticket_id: str,
    auth: AuthContext = Depends(guard("tickets", "read")),
    db: AsyncSession = Depends(get_db),
):
    ticket = await crud.get_ticket(db, auth, ticket_id)
    if not ticket:
        raise NotFoundError("Ticket not found")
    return ticket


@router.post("", response_model=TicketCreated, status_code=201)
async def create_ticket(
    body: TicketCreate,
    auth: AuthContext = Depends(guard("tickets", "create")),
    db: AsyncSession = Depends(get_db),
):
    # Customers can only report against elevators in their own tenant
    elevator = await crud.get_elevator(db, auth, body.elevator_id)
    if not elevator:
        raise NotFoundError("Elevator not found")
    ticket = await crud.create_ticket(
        db, auth, elevator, body.description, title=body.title, priority=body.priority,
    )
    return {"message": "Ticket created", "ticket": ticket}
