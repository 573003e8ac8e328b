from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from liftcare.db import crud
from liftcare.db.engine import get_db
from liftcare.dependencies import guard
from liftcare.errors import Forbidden, NotFoundError
from liftcare.schemas import CustomerCreate, CustomerRead, MessageResponse
from liftcare.services.auth import AuthContext

router = APIRouter(prefix="/api/customers", tags=["customers"])


@router.get("", response_model=list[CustomerRead])
async def list_customers(
    auth: AuthContext = Depends(guard("customers", "list")),
    db: AsyncSession = Depends(get_db),
):
    return await crud.list_customers(db)


@router.get("/me", response_model=CustomerRead)
async def get_own_customer(
    auth: AuthContext = Depends(guard("customers", "me")),
    db: AsyncSession = Depends(get_db),
):
    """The caller's own customer record."""
    if not auth.customer_id:
        raise Forbidden("Forbidden")
    customer = await crud.get_customer(db, auth.customer_id)
    if not customer:
        raise NotFoundError("Customer not found")
    return customer


@router.get("/{customer_id}", response_model=CustomerRead)
async def get_customer(
    customer_id: str,
    auth: AuthContext = Depends(guard("customers", "read")),
    db: AsyncSession = Depends(get_db),
):
    customer = await crud.get_customer(db, customer_id)
    if not customer:
        raise NotFoundError("Customer not found")
    return customer


@router.post("", response_model=CustomerRead, status_code=201)
async def create_customer(
    body: CustomerCreate,
    auth: AuthContext = Depends(guard("customers", "create")),
    db: AsyncSession = Depends(get_db),
):
    return await crud.create_customer(db, **body.model_dump())


@router.put("/{customer_id}", response_model=CustomerRead)
async def update_customer(
    customer_id: str,
    body: CustomerCreate,
    auth: AuthContext = Depends(guard("customers", "update")),
    db: AsyncSession = Depends(get_db),
):
    customer = await crud.get_customer(db, customer_id)
    if not customer:
        raise NotFoundError("Customer not found")
    return await crud.update_customer(db, customer, **body.model_dump())


@router.delete("/{customer_id}", response_model=MessageResponse)
async def delete_customer(
    customer_id: str,
    auth: AuthContext = Depends(guard("customers", "delete")),
    db: AsyncSession = Depends(get_db),
):
    customer = await crud.get_customer(db, customer_id)
    if not customer:
        raise NotFoundError("Customer not found")
    await crud.delete_customer(db, customer)
    return MessageResponse(message="Customer deleted")
