"""Technician applications: submitted by technician identities, decided by admins."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from liftcare.db import crud
from liftcare.db.engine import get_db
from liftcare.dependencies import guard
from liftcare.errors import NotFoundError
from liftcare.schemas import (
    TechnicianRequestCreate, TechnicianRequestDecision, TechnicianRequestRead,
)
from liftcare.services.auth import AuthContext

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/technician-requests", tags=["technician-requests"])


@router.get("", response_model=list[TechnicianRequestRead])
async def list_requests(
    auth: AuthContext = Depends(guard("technician_requests", "list")),
    db: AsyncSession = Depends(get_db),
):
    return await crud.list_technician_requests(db)


@router.post("", response_model=TechnicianRequestRead, status_code=201)
async def submit_request(
    body: TechnicianRequestCreate,
    auth: AuthContext = Depends(guard("technician_requests", "create")),
    db: AsyncSession = Depends(get_db),
):
    return await crud.create_technician_request(db, auth.user_id, **body.model_dump())


@router.put("/{request_id}", response_model=TechnicianRequestRead)
async def decide_request(
    request_id: str,
    body: TechnicianRequestDecision,
    auth: AuthContext = Depends(guard("technician_requests", "decide")),
    db: AsyncSession = Depends(get_db),
):
    request = await crud.get_technician_request(db, request_id)
    if not request:
        raise NotFoundError("Request not found")
    decided = await crud.decide_technician_request(db, request, body.status)
    logger.info("Technician request %s %s by %s", request_id, body.status, auth.user_id)
    return decided
