from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from liftcare.db import crud
from liftcare.db.engine import get_db
from liftcare.dependencies import guard
from liftcare.schemas import AlertRead, DashboardSummary
from liftcare.services.auth import AuthContext

router = APIRouter(prefix="/api", tags=["dashboard"])


@router.get("/alerts", response_model=list[AlertRead])
async def list_alerts(
    auth: AuthContext = Depends(guard("alerts", "list")),
    db: AsyncSession = Depends(get_db),
):
    """Unresolved alerts on elevators the caller can see."""
    return await crud.list_open_alerts(db, auth)


@router.get("/dashboard/summary", response_model=DashboardSummary)
async def dashboard_summary(
    auth: AuthContext = Depends(guard("dashboard", "summary")),
    db: AsyncSession = Depends(get_db),
):
    return await crud.dashboard_summary(db, auth)
