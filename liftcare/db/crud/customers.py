"""Customers (tenants) and the buildings they own."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from liftcare.db.crud.scopes import apply_fields, buildings_query, fetch_all, fetch_one
from liftcare.models import Building, Customer
from liftcare.services.auth import AuthContext


# ── Customer ─────────────────────────────────────────────

async def list_customers(db: AsyncSession) -> list[Customer]:
    return await fetch_all(db, select(Customer).order_by(Customer.created_at.desc()))


async def get_customer(db: AsyncSession, customer_id: str) -> Customer | None:
    return await db.get(Customer, customer_id)


async def customer_exists(db: AsyncSession, customer_id: str) -> bool:
    result = await db.execute(select(Customer.id).where(Customer.id == customer_id))
    return result.scalar_one_or_none() is not None


async def create_customer(db: AsyncSession, **fields) -> Customer:
    customer = Customer(**fields)
    db.add(customer)
    await db.commit()
    await db.refresh(customer)
    return customer


async def update_customer(db: AsyncSession, customer: Customer, **fields) -> Customer:
    apply_fields(customer, fields)
    await db.commit()
    await db.refresh(customer)
    return customer


async def delete_customer(db: AsyncSession, customer: Customer) -> None:
    await db.delete(customer)
    await db.commit()


# ── Building ─────────────────────────────────────────────

async def list_buildings(db: AsyncSession, auth: AuthContext) -> list[Building]:
    return await fetch_all(db, buildings_query(auth).order_by(Building.created_at.desc()))


async def get_building(db: AsyncSession, auth: AuthContext, building_id: str) -> Building | None:
    return await fetch_one(db, buildings_query(auth).where(Building.id == building_id))


async def create_building(db: AsyncSession, auth: AuthContext, **fields) -> Building:
    building = Building(**fields)
    db.add(building)
    await db.commit()
    return await get_building(db, auth, building.id)


async def update_building(db: AsyncSession, auth: AuthContext, building: Building, **fields) -> Building:
    apply_fields(building, fields)
    await db.commit()
    return await get_building(db, auth, building.id)


async def delete_building(db: AsyncSession, building: Building) -> None:
    await db.delete(building)
    await db.commit()
