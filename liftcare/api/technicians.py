from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from liftcare.db import crud
from liftcare.db.engine import get_db
from liftcare.dependencies import guard
from liftcare.errors import NotFoundError, ValidationError
from liftcare.schemas import (
    MessageResponse, TechnicianCreate, TechnicianRead, TechnicianUpdate, TechnicianUserRead,
)
from liftcare.services.auth import AuthContext

router = APIRouter(prefix="/api", tags=["technicians"])


@router.get("/technician-users", response_model=list[TechnicianUserRead])
async def list_technician_users(
    auth: AuthContext = Depends(guard("technician_users", "list")),
    db: AsyncSession = Depends(get_db),
):
    """Identities with the technician role, for assigning Technician records."""
    return await crud.list_technician_users(db)


@router.get("/technicians", response_model=list[TechnicianRead])
async def list_technicians(
    auth: AuthContext = Depends(guard("technicians", "list")),
    db: AsyncSession = Depends(get_db),
):
    return await crud.list_technicians(db)


@router.post("/technicians", response_model=TechnicianRead, status_code=201)
async def create_technician(
    body: TechnicianCreate,
    auth: AuthContext = Depends(guard("technicians", "create")),
    db: AsyncSession = Depends(get_db),
):
    if not await crud.user_exists(db, body.user_id):
        raise ValidationError("user_id does not reference an existing user")
    fields = body.model_dump(exclude={"user_id"})
    technician = await crud.create_technician(db, body.user_id, **fields)
    return crud.technician_row(technician)


@router.put("/technicians/{technician_id}", response_model=TechnicianRead)
async def update_technician(
    technician_id: str,
    body: TechnicianUpdate,
    auth: AuthContext = Depends(guard("technicians", "update")),
    db: AsyncSession = Depends(get_db),
):
    technician = await crud.get_technician(db, technician_id)
    if not technician:
        raise NotFoundError("Technician not found")
    technician = await crud.update_technician(db, technician, **body.model_dump())
    return crud.technician_row(technician)


@router.delete("/technicians/{technician_id}", response_model=MessageResponse)
async def delete_technician(
    technician_id: str,
    auth: AuthContext = Depends(guard("technicians", "delete")),
    db: AsyncSession = Depends(get_db),
):
    technician = await crud.get_technician(db, technician_id)
    if not technician:
        raise NotFoundError("Technician not found")
    await crud.delete_technician(db, technician)
    return MessageResponse(message="Technician deleted")
