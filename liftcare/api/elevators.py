from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from liftcare.db import crud
from liftcare.db.engine import get_db
from liftcare.dependencies import guard
from liftcare.errors import ConflictError, NotFoundError, ValidationError
from liftcare.schemas import ElevatorCreate, ElevatorRead, ElevatorUpdate, MessageResponse
from liftcare.services.auth import AuthContext

router = APIRouter(prefix="/api/elevators", tags=["elevators"])


async def _check_building(db: AsyncSession, building_id: str) -> None:
    if not await crud.building_exists(db, building_id):
        raise ValidationError("building_id does not reference an existing building")


def _elevator_fields(body: ElevatorUpdate) -> dict:
    fields = body.model_dump()
    if fields["current_floor"] is None:
        fields["current_floor"] = 1
    return fields


@router.get("", response_model=list[ElevatorRead])
async def list_elevators(
    auth: AuthContext = Depends(guard("elevators", "list")),
    db: AsyncSession = Depends(get_db),
):
    return await crud.list_elevators(db, auth)


@router.get("/{elevator_id}", response_model=ElevatorRead)
async def get_elevator(
    elevator_id: str,
    auth: AuthContext = Depends(guard("elevators", "read")),
    db: AsyncSession = Depends(get_db),
):
    elevator = await crud.get_elevator(db, auth, elevator_id)
    if not elevator:
        raise NotFoundError("Elevator not found")
    return elevator


@router.post("", response_model=ElevatorRead, status_code=201)
async def create_elevator(
    body: ElevatorCreate,
    auth: AuthContext = Depends(guard("elevators", "create")),
    db: AsyncSession = Depends(get_db),
):
    if await crud.elevator_id_taken(db, body.id):
        raise ConflictError(f"Elevator {body.id} already exists")
    await _check_building(db, body.building_id)
    return await crud.create_elevator(db, auth, **_elevator_fields(body))


@router.put("/{elevator_id}", response_model=ElevatorRead)
async def update_elevator(
    elevator_id: str,
    body: ElevatorUpdate,
    auth: AuthContext = Depends(guard("elevators", "update")),
    db: AsyncSession = Depends(get_db),
):
    elevator = await crud.get_elevator(db, auth, elevator_id)
    if not elevator:
        raise NotFoundError("Elevator not found")
    await _check_building(db, body.building_id)
    return await crud.update_elevator(db, auth, elevator, **_elevator_fields(body))


@router.delete("/{elevator_id}", response_model=MessageResponse)
async def delete_elevator(
    elevator_id: str,
    auth: AuthContext = Depends(guard("elevators", "delete")),
    db: AsyncSession = Depends(get_db),
):
    elevator = await crud.get_elevator(db, auth, elevator_id)
    if not elevator:
        raise NotFoundError("Elevator not found")
    await crud.delete_elevator(db, elevator)
    return MessageResponse(message="Elevator deleted")
