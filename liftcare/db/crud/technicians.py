"""Technician records and the application workflow that creates them.

Approval is race-safe: the status flip is a conditional UPDATE on
``status = 'pending'`` and ``technicians.user_id`` is unique, so two admins
deciding the same request concurrently cannot produce two Technician rows.
"""

from __future__ import annotations

import logging

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from liftcare.access.roles import TECHNICIAN
from liftcare.db.crud.scopes import apply_fields, fetch_all, fetch_one
from liftcare.errors import ConflictError, DuplicatePendingRequest
from liftcare.models import Technician, TechnicianRequest, User
from liftcare.models.base import utcnow

logger = logging.getLogger(__name__)

APPLICATION_FIELDS = ("address", "date_of_birth", "age", "experience", "education")


# ── Technician users ─────────────────────────────────────

async def list_technician_users(db: AsyncSession) -> list[User]:
    return await fetch_all(db, select(User).where(User.role == TECHNICIAN).order_by(User.name))


async def user_exists(db: AsyncSession, user_id: str) -> bool:
    result = await db.execute(select(User.id).where(User.id == user_id))
    return result.scalar_one_or_none() is not None


# ── Technician ───────────────────────────────────────────

def technician_row(technician: Technician, application: TechnicianRequest | None = None) -> dict:
    """Technician joined with identity name/email and its approved application."""
    row = {
        "id": technician.id,
        "user_id": technician.user_id,
        "name": technician.name,
        "email": technician.email,
        "phone": technician.phone,
        "specialty": technician.specialty,
        "notes": technician.notes,
        "created_at": technician.created_at,
        "updated_at": technician.updated_at,
    }
    for field in APPLICATION_FIELDS:
        row[field] = getattr(application, field) if application else None
    return row


async def list_technicians(db: AsyncSession) -> list[dict]:
    technicians = await fetch_all(db, select(Technician).order_by(Technician.created_at.desc()))
    approved = await fetch_all(
        db,
        select(TechnicianRequest)
        .where(TechnicianRequest.status == "approved")
        .order_by(TechnicianRequest.created_at),
    )
    # Latest approved application wins
    by_user = {req.user_id: req for req in approved}
    return [technician_row(t, by_user.get(t.user_id)) for t in technicians]


async def get_technician(db: AsyncSession, technician_id: str) -> Technician | None:
    return await fetch_one(db, select(Technician).where(Technician.id == technician_id))


async def get_technician_by_user(db: AsyncSession, user_id: str) -> Technician | None:
    return await fetch_one(db, select(Technician).where(Technician.user_id == user_id))


async def create_technician(db: AsyncSession, user_id: str, **fields) -> Technician:
    if await get_technician_by_user(db, user_id) is not None:
        raise ConflictError("Technician already exists for this user")
    technician = Technician(user_id=user_id, **fields)
    try:
        async with db.begin_nested():
            db.add(technician)
    except IntegrityError:
        raise ConflictError("Technician already exists for this user")
    await db.commit()
    return await get_technician(db, technician.id)


async def update_technician(db: AsyncSession, technician: Technician, **fields) -> Technician:
    apply_fields(technician, fields)
    await db.commit()
    return await get_technician(db, technician.id)


async def delete_technician(db: AsyncSession, technician: Technician) -> None:
    await db.delete(technician)
    await db.commit()


# ── TechnicianRequest ────────────────────────────────────

async def list_technician_requests(db: AsyncSession) -> list[TechnicianRequest]:
    return await fetch_all(
        db, select(TechnicianRequest).order_by(TechnicianRequest.created_at.desc()),
    )


async def get_technician_request(db: AsyncSession, request_id: str) -> TechnicianRequest | None:
    return await fetch_one(db, select(TechnicianRequest).where(TechnicianRequest.id == request_id))


async def has_pending_request(db: AsyncSession, user_id: str) -> bool:
    result = await db.execute(
        select(TechnicianRequest.id).where(
            TechnicianRequest.user_id == user_id,
            TechnicianRequest.status == "pending",
        )
    )
    return result.first() is not None


async def create_technician_request(db: AsyncSession, user_id: str, **fields) -> TechnicianRequest:
    """Submit an application. At most one may be pending per identity."""
    if await has_pending_request(db, user_id):
        raise DuplicatePendingRequest()

    request = TechnicianRequest(user_id=user_id, status="pending", **fields)
    try:
        async with db.begin_nested():
            db.add(request)
    except IntegrityError:
        # Lost a race against a concurrent submission; the partial unique index caught it
        raise DuplicatePendingRequest()
    await db.commit()
    return await get_technician_request(db, request.id)


async def ensure_technician(db: AsyncSession, request: TechnicianRequest) -> Technician | None:
    """Create the Technician for an approved request unless one already exists.

    Returns the new record, or None when the identity already had one.
    """
    if await get_technician_by_user(db, request.user_id) is not None:
        return None

    technician = Technician(
        user_id=request.user_id,
        phone=request.phone,
        specialty=request.specialty,
        notes=request.notes,
    )
    try:
        async with db.begin_nested():
            db.add(technician)
    except IntegrityError:
        logger.info("Technician for user %s created concurrently, keeping existing", request.user_id)
        return None
    return technician


async def decide_technician_request(
    db: AsyncSession, request: TechnicianRequest, status: str,
) -> TechnicianRequest:
    """Move a pending request to approved or rejected.

    Raises ConflictError if the request was already decided, including by a
    concurrent call that won the conditional update.
    """
    result = await db.execute(
        update(TechnicianRequest)
        .where(TechnicianRequest.id == request.id, TechnicianRequest.status == "pending")
        .values(status=status, updated_at=utcnow())
        .execution_options(synchronize_session=False)
    )
    if result.rowcount == 0:
        raise ConflictError("Request has already been decided")

    if status == "approved":
        created = await ensure_technician(db, request)
        if created is not None:
            logger.info("Approved request %s, created technician for user %s", request.id, request.user_id)

    await db.commit()
    return await get_technician_request(db, request.id)
