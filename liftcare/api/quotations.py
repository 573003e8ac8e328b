from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from liftcare.db import crud
from liftcare.db.engine import get_db
from liftcare.dependencies import guard
from liftcare.errors import NotFoundError, ValidationError
from liftcare.schemas import MessageResponse, QuotationCreate, QuotationRead, QuotationUpdate
from liftcare.services.auth import AuthContext

router = APIRouter(prefix="/api/quotations", tags=["quotations"])


async def _check_customer(db: AsyncSession, customer_id: str) -> None:
    if not await crud.customer_exists(db, customer_id):
        raise ValidationError("customer_id does not reference an existing customer")


@router.get("", response_model=list[QuotationRead])
async def list_quotations(
    auth: AuthContext = Depends(guard("quotations", "list")),
    db: AsyncSession = Depends(get_db),
):
    return await crud.list_quotations(db, auth)


@router.get("/{quotation_id}", response_model=QuotationRead)
async def get_quotation(
    quotation_id: str,
    auth: AuthContext = Depends(guard("quotations", "read")),
    db: AsyncSession = Depends(get_db),
):
    quotation = await crud.get_quotation(db, auth, quotation_id)
    if not quotation:
        raise NotFoundError("Quotation not found")
    return quotation


@router.post("", response_model=QuotationRead, status_code=201)
async def create_quotation(
    body: QuotationCreate,
    auth: AuthContext = Depends(guard("quotations", "create")),
    db: AsyncSession = Depends(get_db),
):
    await _check_customer(db, body.customer_id)
    return await crud.create_quotation(db, auth, **body.model_dump())


@router.put("/{quotation_id}", response_model=QuotationRead)
async def update_quotation(
    quotation_id: str,
    body: QuotationUpdate,
    auth: AuthContext = Depends(guard("quotations", "update")),
    db: AsyncSession = Depends(get_db),
):
    quotation = await crud.get_quotation(db, auth, quotation_id)
    if not quotation:
        raise NotFoundError("Quotation not found")
    await _check_customer(db, body.customer_id)
    return await crud.update_quotation(db, auth, quotation, **body.model_dump())


@router.delete("/{quotation_id}", response_model=MessageResponse)
async def delete_quotation(
    quotation_id: str,
    auth: AuthContext = Depends(guard("quotations", "delete")),
    db: AsyncSession = Depends(get_db),
):
    quotation = await crud.get_quotation(db, auth, quotation_id)
    if not quotation:
        raise NotFoundError("Quotation not found")
    await crud.delete_quotation(db, quotation)
    return MessageResponse(message="Deleted")
