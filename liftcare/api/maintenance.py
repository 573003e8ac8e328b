"""Maintenance API: checklist templates, recurring plans and jobs."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from liftcare.access.roles import TECHNICIAN
from liftcare.db import crud
from liftcare.db.engine import get_db
from liftcare.dependencies import guard
from liftcare.errors import Forbidden, NotFoundError
from liftcare.schemas import (
    MaintenanceJobCreate, MaintenanceJobRead, MaintenanceJobUpdate,
    MaintenancePlanCreate, MaintenancePlanRead,
    MaintenanceTemplateCreate, MaintenanceTemplateRead, MessageResponse,
)
from liftcare.services.auth import AuthContext

router = APIRouter(prefix="/api/maintenance", tags=["maintenance"])


async def _check_elevator(db: AsyncSession, auth: AuthContext, elevator_id: str) -> None:
    if await crud.get_elevator(db, auth, elevator_id) is None:
        raise NotFoundError("Elevator not found")


async def _pin_technician(db: AsyncSession, auth: AuthContext, fields: dict) -> dict:
    """Technicians can only create or edit jobs assigned to themselves."""
    if auth.role == TECHNICIAN:
        technician = await crud.get_technician_by_user(db, auth.user_id)
        if technician is None:
            raise Forbidden("No technician profile for this account")
        fields["technician_id"] = technician.id
    return fields


# ── Templates ─────────────────────────────────────────────

@router.get("/templates", response_model=list[MaintenanceTemplateRead])
async def list_templates(
    auth: AuthContext = Depends(guard("maintenance_templates", "list")),
    db: AsyncSession = Depends(get_db),
):
    return await crud.list_templates(db)


@router.post("/templates", response_model=MaintenanceTemplateRead, status_code=201)
async def create_template(
    body: MaintenanceTemplateCreate,
    auth: AuthContext = Depends(guard("maintenance_templates", "create")),
    db: AsyncSession = Depends(get_db),
):
    return await crud.create_template(db, **body.model_dump())


@router.put("/templates/{template_id}", response_model=MaintenanceTemplateRead)
async def update_template(
    template_id: str,
    body: MaintenanceTemplateCreate,
    auth: AuthContext = Depends(guard("maintenance_templates", "update")),
    db: AsyncSession = Depends(get_db),
):
    template = await crud.get_template(db, template_id)
    if not template:
        raise NotFoundError("Template not found")
    return await crud.update_template(db, template, **body.model_dump())


@router.delete("/templates/{template_id}", response_model=MessageResponse)
async def delete_template(
    template_id: str,
    auth: AuthContext = Depends(guard("maintenance_templates", "delete")),
    db: AsyncSession = Depends(get_db),
):
    template = await crud.get_template(db, template_id)
    if not template:
        raise NotFoundError("Template not found")
    await crud.delete_template(db, template)
    return MessageResponse(message="Deleted")


# ── Plans ─────────────────────────────────────────────────

@router.get("/plans", response_model=list[MaintenancePlanRead])
async def list_plans(
    auth: AuthContext = Depends(guard("maintenance_plans", "list")),
    db: AsyncSession = Depends(get_db),
):
    return await crud.list_plans(db, auth)


@router.post("/plans", response_model=MaintenancePlanRead, status_code=201)
async def create_plan(
    body: MaintenancePlanCreate,
    auth: AuthContext = Depends(guard("maintenance_plans", "create")),
    db: AsyncSession = Depends(get_db),
):
    await _check_elevator(db, auth, body.elevator_id)
    return await crud.create_plan(db, auth, **body.model_dump())


@router.put("/plans/{plan_id}", response_model=MaintenancePlanRead)
async def update_plan(
    plan_id: str,
    body: MaintenancePlanCreate,
    auth: AuthContext = Depends(guard("maintenance_plans", "update")),
    db: AsyncSession = Depends(get_db),
):
    plan = await crud.get_plan(db, auth, plan_id)
    if not plan:
        raise NotFoundError("Plan not found")
    await _check_elevator(db, auth, body.elevator_id)
    return await crud.update_plan(db, auth, plan, **body.model_dump())


@router.delete("/plans/{plan_id}", response_model=MessageResponse)
async def delete_plan(
    plan_id: str,
    auth: AuthContext = Depends(guard("maintenance_plans", "delete")),
    db: AsyncSession = Depends(get_db),
):
    plan = await crud.get_plan(db, auth, plan_id)
    if not plan:
        raise NotFoundError("Plan not found")
    await crud.delete_plan(db, plan)
    return MessageResponse(message="Deleted")


# ── Jobs ──────────────────────────────────────────────────

@router.get("/jobs", response_model=list[MaintenanceJobRead])
async def list_jobs(
    auth: AuthContext = Depends(guard("maintenance_jobs", "list")),
    db: AsyncSession = Depends(get_db),
):
    return await crud.list_jobs(db, auth)


@router.get("/jobs/{job_id}", response_model=MaintenanceJobRead)
async def get_job(
    job_id: str,
    auth: AuthContext = Depends(guard("maintenance_jobs", "read")),
    db: AsyncSession = Depends(get_db),
):
    job = await crud.get_job(db, auth, job_id)
    if not job:
        raise NotFoundError("Job not found")
    return job


@router.post("/jobs", response_model=MaintenanceJobRead, status_code=201)
async def create_job(
    body: MaintenanceJobCreate,
    auth: AuthContext = Depends(guard("maintenance_jobs", "create")),
    db: AsyncSession = Depends(get_db),
):
    fields = await _pin_technician(db, auth, body.model_dump())
    await _check_elevator(db, auth, body.elevator_id)
    return await crud.create_job(db, auth, **fields)


@router.put("/jobs/{job_id}", response_model=MaintenanceJobRead)
async def update_job(
    job_id: str,
    body: MaintenanceJobUpdate,
    auth: AuthContext = Depends(guard("maintenance_jobs", "update")),
    db: AsyncSession = Depends(get_db),
):
    # Scoped lookup: a technician gets 404 for someone else's job
    job = await crud.get_job(db, auth, job_id)
    if not job:
        raise NotFoundError("Job not found")
    fields = await _pin_technician(db, auth, body.model_dump())
    await _check_elevator(db, auth, body.elevator_id)
    return await crud.update_job(db, auth, job, **fields)


@router.delete("/jobs/{job_id}", response_model=MessageResponse)
async def delete_job(
    job_id: str,
    auth: AuthContext = Depends(guard("maintenance_jobs", "delete")),
    db: AsyncSession = Depends(get_db),
):
    job = await crud.get_job(db, auth, job_id)
    if not job:
        raise NotFoundError("Job not found")
    await crud.delete_job(db, job)
    return MessageResponse(message="Deleted")
