from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from liftcare.db import crud
from liftcare.db.engine import get_db
from liftcare.dependencies import guard
from liftcare.errors import NotFoundError
from liftcare.schemas import PricingSettingsRead, PricingSettingsUpdate
from liftcare.services.auth import AuthContext

router = APIRouter(prefix="/api/pricing-settings", tags=["pricing"])


@router.get("", response_model=PricingSettingsRead)
async def get_pricing_settings(
    auth: AuthContext = Depends(guard("pricing_settings", "read")),
    db: AsyncSession = Depends(get_db),
):
    """Latest pricing row, or the defaults when none has been saved yet."""
    pricing = await crud.get_latest_pricing(db)
    return pricing if pricing is not None else crud.PRICING_DEFAULTS


@router.put("", response_model=PricingSettingsRead)
async def save_pricing_settings(
    body: PricingSettingsUpdate,
    auth: AuthContext = Depends(guard("pricing_settings", "update")),
    db: AsyncSession = Depends(get_db),
):
    pricing = await crud.save_pricing(db, body.id, **body.model_dump(exclude={"id"}))
    if pricing is None:
        raise NotFoundError("Pricing settings not found")
    return pricing
