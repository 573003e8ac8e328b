from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from liftcare.db import crud
from liftcare.db.engine import get_db
from liftcare.dependencies import guard
from liftcare.errors import NotFoundError, ValidationError
from liftcare.schemas import ContractCreate, ContractRead, MessageResponse
from liftcare.services.auth import AuthContext

router = APIRouter(prefix="/api/contracts", tags=["contracts"])


async def _check_customer(db: AsyncSession, customer_id: str) -> None:
    if not await crud.customer_exists(db, customer_id):
        raise ValidationError("customer_id does not reference an existing customer")


@router.get("", response_model=list[ContractRead])
async def list_contracts(
    auth: AuthContext = Depends(guard("contracts", "list")),
    db: AsyncSession = Depends(get_db),
):
    return await crud.list_contracts(db, auth)


@router.get("/{contract_id}", response_model=ContractRead)
async def get_contract(
    contract_id: str,
    auth: AuthContext = Depends(guard("contracts", "read")),
    db: AsyncSession = Depends(get_db),
):
    contract = await crud.get_contract(db, auth, contract_id)
    if not contract:
        raise NotFoundError("Contract not found")
    return contract


@router.post("", response_model=ContractRead, status_code=201)
async def create_contract(
    body: ContractCreate,
    auth: AuthContext = Depends(guard("contracts", "create")),
    db: AsyncSession = Depends(get_db),
):
    await _check_customer(db, body.customer_id)
    return await crud.create_contract(db, **body.model_dump())


@router.put("/{contract_id}", response_model=ContractRead)
async def update_contract(
    contract_id: str,
    body: ContractCreate,
    auth: AuthContext = Depends(guard("contracts", "update")),
    db: AsyncSession = Depends(get_db),
):
    contract = await crud.get_contract(db, auth, contract_id)
    if not contract:
        raise NotFoundError("Contract not found")
    await _check_customer(db, body.customer_id)
    return await crud.update_contract(db, contract, **body.model_dump())


@router.delete("/{contract_id}", response_model=MessageResponse)
async def delete_contract(
    contract_id: str,
    auth: AuthContext = Depends(guard("contracts", "delete")),
    db: AsyncSession = Depends(get_db),
):
    contract = await crud.get_contract(db, auth, contract_id)
    if not contract:
        raise NotFoundError("Contract not found")
    await crud.delete_contract(db, contract)
    return MessageResponse(message="Contract deleted")
