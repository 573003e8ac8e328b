"""Contracts, quotations, invoices and pricing settings."""

from __future__ import annotations

import time

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from liftcare.db.crud.scopes import (
    apply_fields, contracts_query, fetch_all, fetch_one, invoices_query, quotations_query,
)
from liftcare.models import Contract, Invoice, PricingSettings, Quotation
from liftcare.services.auth import AuthContext

PRICING_DEFAULTS = {
    "id": None,
    "call_fee": 0,
    "labor_rate_per_hour": 0,
    "parts_markup_percent": 0,
    "currency": "THB",
}


def generated_code(prefix: str) -> str:
    return f"{prefix}-{int(time.time() * 1000)}"


# ── Contract ─────────────────────────────────────────────

async def list_contracts(db: AsyncSession, auth: AuthContext) -> list[Contract]:
    return await fetch_all(db, contracts_query(auth).order_by(Contract.created_at.desc()))


async def get_contract(db: AsyncSession, auth: AuthContext, contract_id: str) -> Contract | None:
    return await fetch_one(db, contracts_query(auth).where(Contract.id == contract_id))


async def create_contract(db: AsyncSession, **fields) -> Contract:
    contract = Contract(**fields)
    db.add(contract)
    await db.commit()
    await db.refresh(contract)
    return contract


async def update_contract(db: AsyncSession, contract: Contract, **fields) -> Contract:
    apply_fields(contract, fields)
    await db.commit()
    await db.refresh(contract)
    return contract


async def delete_contract(db: AsyncSession, contract: Contract) -> None:
    await db.delete(contract)
    await db.commit()


# ── Quotation ────────────────────────────────────────────

async def list_quotations(db: AsyncSession, auth: AuthContext) -> list[Quotation]:
    return await fetch_all(db, quotations_query(auth).order_by(Quotation.created_at.desc()))


async def get_quotation(db: AsyncSession, auth: AuthContext, quotation_id: str) -> Quotation | None:
    return await fetch_one(db, quotations_query(auth).where(Quotation.id == quotation_id))


async def create_quotation(db: AsyncSession, auth: AuthContext, **fields) -> Quotation:
    fields["quotation_code"] = fields.get("quotation_code") or generated_code("Q")
    fields["status"] = fields.get("status") or "draft"
    quotation = Quotation(**fields)
    db.add(quotation)
    await db.commit()
    return await get_quotation(db, auth, quotation.id)


async def update_quotation(db: AsyncSession, auth: AuthContext, quotation: Quotation, **fields) -> Quotation:
    fields["status"] = fields.get("status") or "draft"
    apply_fields(quotation, fields)
    await db.commit()
    return await get_quotation(db, auth, quotation.id)


async def delete_quotation(db: AsyncSession, quotation: Quotation) -> None:
    await db.delete(quotation)
    await db.commit()


# ── Invoice ──────────────────────────────────────────────

async def list_invoices(db: AsyncSession, auth: AuthContext) -> list[Invoice]:
    return await fetch_all(db, invoices_query(auth).order_by(Invoice.created_at.desc()))


async def get_invoice(db: AsyncSession, auth: AuthContext, invoice_id: str) -> Invoice | None:
    return await fetch_one(db, invoices_query(auth).where(Invoice.id == invoice_id))


async def create_invoice(db: AsyncSession, auth: AuthContext, **fields) -> Invoice:
    fields["invoice_code"] = fields.get("invoice_code") or generated_code("I")
    fields["status"] = fields.get("status") or "unpaid"
    invoice = Invoice(**fields)
    db.add(invoice)
    await db.commit()
    return await get_invoice(db, auth, invoice.id)


async def update_invoice(db: AsyncSession, auth: AuthContext, invoice: Invoice, **fields) -> Invoice:
    fields["status"] = fields.get("status") or "unpaid"
    apply_fields(invoice, fields)
    await db.commit()
    return await get_invoice(db, auth, invoice.id)


async def delete_invoice(db: AsyncSession, invoice: Invoice) -> None:
    await db.delete(invoice)
    await db.commit()


# ── PricingSettings ──────────────────────────────────────

async def get_latest_pricing(db: AsyncSession) -> PricingSettings | None:
    """The most recently created row is the effective configuration."""
    return await fetch_one(
        db,
        select(PricingSettings)
        .order_by(PricingSettings.created_at.desc(), PricingSettings.id.desc())
        .limit(1),
    )


async def save_pricing(db: AsyncSession, pricing_id: str | None, **fields) -> PricingSettings | None:
    """Update the row named by ``pricing_id``, or insert a new one when it is None.

    Returns None if ``pricing_id`` names no row.
    """
    fields["currency"] = fields.get("currency") or "THB"
    if pricing_id:
        pricing = await db.get(PricingSettings, pricing_id)
        if pricing is None:
            return None
        apply_fields(pricing, fields)
    else:
        db.add(PricingSettings(**fields))
    await db.commit()
    return await get_latest_pricing(db)
