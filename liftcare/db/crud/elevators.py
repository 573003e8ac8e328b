"""Elevators, their state-change notifications, and open alerts."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from liftcare.db.crud.scopes import alerts_query, apply_fields, elevators_query, fetch_all, fetch_one
from liftcare.models import Alert, Building, Elevator
from liftcare.services.auth import AuthContext
from liftcare.services.notifications import notify_elevator_state


async def list_elevators(db: AsyncSession, auth: AuthContext) -> list[Elevator]:
    return await fetch_all(db, elevators_query(auth).order_by(Elevator.id))


async def get_elevator(db: AsyncSession, auth: AuthContext, elevator_id: str) -> Elevator | None:
    return await fetch_one(db, elevators_query(auth).where(Elevator.id == elevator_id))


async def elevator_id_taken(db: AsyncSession, elevator_id: str) -> bool:
    result = await db.execute(select(Elevator.id).where(Elevator.id == elevator_id))
    return result.scalar_one_or_none() is not None


async def building_exists(db: AsyncSession, building_id: str) -> bool:
    result = await db.execute(select(Building.id).where(Building.id == building_id))
    return result.scalar_one_or_none() is not None


async def create_elevator(db: AsyncSession, auth: AuthContext, **fields) -> Elevator:
    elevator = Elevator(**fields)
    db.add(elevator)
    await db.commit()
    return await get_elevator(db, auth, elevator.id)


async def update_elevator(db: AsyncSession, auth: AuthContext, elevator: Elevator, **fields) -> Elevator:
    """Write the new field values; a fault/normal transition notifies the acting user.

    The notification swap and the row update commit together.
    """
    old_state = elevator.state
    apply_fields(elevator, fields)
    await notify_elevator_state(db, auth.user_id, elevator, old_state, elevator.state)
    await db.commit()
    return await get_elevator(db, auth, elevator.id)


async def delete_elevator(db: AsyncSession, elevator: Elevator) -> None:
    await db.delete(elevator)
    await db.commit()


# ── Alert ────────────────────────────────────────────────

async def list_open_alerts(db: AsyncSession, auth: AuthContext) -> list[Alert]:
    stmt = alerts_query(auth).where(Alert.resolved_at.is_(None)).order_by(Alert.created_at.desc())
    return await fetch_all(db, stmt)
