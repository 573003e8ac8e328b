from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from liftcare.db import crud
from liftcare.db.engine import get_db
from liftcare.dependencies import guard
from liftcare.errors import NotFoundError, ValidationError
from liftcare.schemas import InvoiceCreate, InvoiceRead, InvoiceUpdate, MessageResponse
from liftcare.services.auth import AuthContext

router = APIRouter(prefix="/api/invoices", tags=["invoices"])


async def _check_customer(db: AsyncSession, customer_id: str) -> None:
    if not await crud.customer_exists(db, customer_id):
        raise ValidationError("customer_id does not reference an existing customer")


@router.get("", response_model=list[InvoiceRead])
async def list_invoices(
    auth: AuthContext = Depends(guard("invoices", "list")),
    db: AsyncSession = Depends(get_db),
):
    return await crud.list_invoices(db, auth)


@router.get("/{invoice_id}", response_model=InvoiceRead)
async def get_invoice(
    invoice_id: str,
    auth: AuthContext = Depends(guard("invoices", "read")),
    db: AsyncSession = Depends(get_db),
):
    invoice = await crud.get_invoice(db, auth, invoice_id)
    if not invoice:
        raise NotFoundError("Invoice not found")
    return invoice


@router.post("", response_model=InvoiceRead, status_code=201)
async def create_invoice(
    body: InvoiceCreate,
    auth: AuthContext = Depends(guard("invoices", "create")),
    db: AsyncSession = Depends(get_db),
):
    await _check_customer(db, body.customer_id)
    return await crud.create_invoice(db, auth, **body.model_dump())


@router.put("/{invoice_id}", response_model=InvoiceRead)
async def update_invoice(
    invoice_id: str,
    body: InvoiceUpdate,
    auth: AuthContext = Depends(guard("invoices", "update")),
    db: AsyncSession = Depends(get_db),
):
    invoice = await crud.get_invoice(db, auth, invoice_id)
    if not invoice:
        raise NotFoundError("Invoice not found")
    await _check_customer(db, body.customer_id)
    return await crud.update_invoice(db, auth, invoice, **body.model_dump())


@router.delete("/{invoice_id}", response_model=MessageResponse)
async def delete_invoice(
    invoice_id: str,
    auth: AuthContext = Depends(guard("invoices", "delete")),
    db: AsyncSession = Depends(get_db),
):
    invoice = await crud.get_invoice(db, auth, invoice_id)
    if not invoice:
        raise NotFoundError("Invoice not found")
    await crud.delete_invoice(db, invoice)
    return MessageResponse(message="Deleted")
