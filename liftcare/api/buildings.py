from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from liftcare.db import crud
from liftcare.db.engine import get_db
from liftcare.dependencies import guard
from liftcare.errors import NotFoundError, ValidationError
from liftcare.schemas import BuildingCreate, BuildingRead, MessageResponse
from liftcare.services.auth import AuthContext

router = APIRouter(prefix="/api/buildings", tags=["buildings"])


async def _check_customer(db: AsyncSession, customer_id: str) -> None:
    if not await crud.customer_exists(db, customer_id):
        raise ValidationError("customer_id does not reference an existing customer")


@router.get("", response_model=list[BuildingRead])
async def list_buildings(
    auth: AuthContext = Depends(guard("buildings", "list")),
    db: AsyncSession = Depends(get_db),
):
    return await crud.list_buildings(db, auth)


@router.get("/{building_id}", response_model=BuildingRead)
async def get_building(
    building_id: str,
    auth: AuthContext = Depends(guard("buildings", "read")),
    db: AsyncSession = Depends(get_db),
):
    building = await crud.get_building(db, auth, building_id)
    if not building:
        raise NotFoundError("Building not found")
    return building


@router.post("", response_model=BuildingRead, status_code=201)
async def create_building(
    body: BuildingCreate,
    auth: AuthContext = Depends(guard("buildings", "create")),
    db: AsyncSession = Depends(get_db),
):
    await _check_customer(db, body.customer_id)
    return await crud.create_building(db, auth, **body.model_dump())


@router.put("/{building_id}", response_model=BuildingRead)
async def update_building(
    building_id: str,
    body: BuildingCreate,
    auth: AuthContext = Depends(guard("buildings", "update")),
    db: AsyncSession = Depends(get_db),
):
    building = await crud.get_building(db, auth, building_id)
    if not building:
        raise NotFoundError("Building not found")
    await _check_customer(db, body.customer_id)
    return await crud.update_building(db, auth, building, **body.model_dump())


@router.delete("/{building_id}", response_model=MessageResponse)
async def delete_building(
    building_id: str,
    auth: AuthContext = Depends(guard("buildings", "delete")),
    db: AsyncSession = Depends(get_db),
):
    building = await crud.get_building(db, auth, building_id)
    if not building:
        raise NotFoundError("Building not found")
    await crud.delete_building(db, building)
    return MessageResponse(message="Building deleted")
