"""Parts catalogue and the stock movement ledger."""

from __future__ import annotations

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from liftcare.db.crud.scopes import apply_fields, fetch_all
from liftcare.models import Part, PartMovement

ADJUST = "adjust"
STOCK_ADJUST_REF = "stock_adjust"


async def list_parts(db: AsyncSession) -> list[Part]:
    return await fetch_all(db, select(Part).order_by(Part.created_at.desc()))


async def get_part(db: AsyncSession, part_id: str) -> Part | None:
    return await db.get(Part, part_id)


async def create_part(db: AsyncSession, **fields) -> Part:
    fields["unit"] = fields.get("unit") or "pcs"
    part = Part(**fields)
    db.add(part)
    await db.commit()
    await db.refresh(part)
    return part


async def update_part(db: AsyncSession, part: Part, **fields) -> Part:
    fields["unit"] = fields.get("unit") or "pcs"
    apply_fields(part, fields)
    await db.commit()
    await db.refresh(part)
    return part


async def delete_part(db: AsyncSession, part: Part) -> None:
    await db.delete(part)
    await db.commit()


async def list_stocks(db: AsyncSession) -> list[dict]:
    """On-hand quantity per part that has at least one movement."""
    stmt = (
        select(
            PartMovement.part_id,
            Part.part_code,
            Part.name.label("part_name"),
            func.coalesce(func.sum(PartMovement.qty), 0).label("quantity"),
        )
        .join(Part, PartMovement.part_id == Part.id)
        .group_by(PartMovement.part_id, Part.part_code, Part.name)
        .order_by(Part.part_code)
    )
    result = await db.execute(stmt)
    return [dict(row._mapping) for row in result]


async def adjust_stock(db: AsyncSession, part: Part, change_qty: float, note: str | None = None) -> PartMovement:
    movement = PartMovement(
        part_id=part.id,
        movement_type=ADJUST,
        qty=change_qty,
        ref_type=STOCK_ADJUST_REF,
        ref_id=note,
    )
    db.add(movement)
    await db.commit()
    return movement


async def list_movements(db: AsyncSession) -> list[PartMovement]:
    return await fetch_all(
        db, select(PartMovement).order_by(PartMovement.created_at.desc(), PartMovement.id.desc()),
    )
