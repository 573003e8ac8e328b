from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from liftcare.db import crud
from liftcare.db.engine import get_db
from liftcare.dependencies import guard
from liftcare.errors import NotFoundError
from liftcare.schemas import (
    MessageResponse, PartCreate, PartMovementRead, PartRead, PartStockRead, StockAdjustRequest,
)
from liftcare.services.auth import AuthContext

router = APIRouter(prefix="/api/parts", tags=["parts"])


@router.get("", response_model=list[PartRead])
async def list_parts(
    auth: AuthContext = Depends(guard("parts", "list")),
    db: AsyncSession = Depends(get_db),
):
    return await crud.list_parts(db)


@router.get("/stocks", response_model=list[PartStockRead])
async def list_stocks(
    auth: AuthContext = Depends(guard("part_stocks", "list")),
    db: AsyncSession = Depends(get_db),
):
    return await crud.list_stocks(db)


@router.post("/stocks/adjust", response_model=MessageResponse, status_code=201)
async def adjust_stock(
    body: StockAdjustRequest,
    auth: AuthContext = Depends(guard("part_stocks", "adjust")),
    db: AsyncSession = Depends(get_db),
):
    part = await crud.get_part(db, body.part_id)
    if not part:
        raise NotFoundError("Part not found")
    await crud.adjust_stock(db, part, body.change_qty, body.note)
    return MessageResponse(message="Stock adjusted")


@router.get("/movements", response_model=list[PartMovementRead])
async def list_movements(
    auth: AuthContext = Depends(guard("part_movements", "list")),
    db: AsyncSession = Depends(get_db),
):
    return await crud.list_movements(db)


@router.post("", response_model=PartRead, status_code=201)
async def create_part(
    body: PartCreate,
    auth: AuthContext = Depends(guard("parts", "create")),
    db: AsyncSession = Depends(get_db),
):
    return await crud.create_part(db, **body.model_dump())


@router.put("/{part_id}", response_model=PartRead)
async def update_part(
    part_id: str,
    body: PartCreate,
    auth: AuthContext = Depends(guard("parts", "update")),
    db: AsyncSession = Depends(get_db),
):
    part = await crud.get_part(db, part_id)
    if not part:
        raise NotFoundError("Part not found")
    return await crud.update_part(db, part, **body.model_dump())


@router.delete("/{part_id}", response_model=MessageResponse)
async def delete_part(
    part_id: str,
    auth: AuthContext = Depends(guard("parts", "delete")),
    db: AsyncSession = Depends(get_db),
):
    part = await crud.get_part(db, part_id)
    if not part:
        raise NotFoundError("Part not found")
    await crud.delete_part(db, part)
    return MessageResponse(message="Part deleted")
