"""Maintenance templates, recurring plans and jobs."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from liftcare.db.crud.scopes import apply_fields, fetch_all, fetch_one, jobs_query, plans_query
from liftcare.models import MaintenanceJob, MaintenancePlan, MaintenanceTemplate
from liftcare.services.auth import AuthContext


def job_costs(fields: dict) -> dict:
    """Fill total_cost from labor and parts when the caller left it out."""
    if fields.get("total_cost") is None:
        fields["total_cost"] = (fields.get("labor_cost") or 0) + (fields.get("parts_cost") or 0)
    return fields


# ── MaintenanceTemplate ──────────────────────────────────

async def list_templates(db: AsyncSession) -> list[MaintenanceTemplate]:
    return await fetch_all(db, select(MaintenanceTemplate).order_by(MaintenanceTemplate.created_at.desc()))


async def get_template(db: AsyncSession, template_id: str) -> MaintenanceTemplate | None:
    return await db.get(MaintenanceTemplate, template_id)


async def create_template(db: AsyncSession, **fields) -> MaintenanceTemplate:
    template = MaintenanceTemplate(**fields)
    db.add(template)
    await db.commit()
    await db.refresh(template)
    return template


async def update_template(db: AsyncSession, template: MaintenanceTemplate, **fields) -> MaintenanceTemplate:
    apply_fields(template, fields)
    await db.commit()
    await db.refresh(template)
    return template


async def delete_template(db: AsyncSession, template: MaintenanceTemplate) -> None:
    await db.delete(template)
    await db.commit()


# ── MaintenancePlan ──────────────────────────────────────

async def list_plans(db: AsyncSession, auth: AuthContext) -> list[MaintenancePlan]:
    return await fetch_all(db, plans_query(auth).order_by(MaintenancePlan.created_at.desc()))


async def get_plan(db: AsyncSession, auth: AuthContext, plan_id: str) -> MaintenancePlan | None:
    return await fetch_one(db, plans_query(auth).where(MaintenancePlan.id == plan_id))


async def create_plan(db: AsyncSession, auth: AuthContext, **fields) -> MaintenancePlan:
    if fields.get("is_active") is None:
        fields["is_active"] = True
    plan = MaintenancePlan(**fields)
    db.add(plan)
    await db.commit()
    return await get_plan(db, auth, plan.id)


async def update_plan(db: AsyncSession, auth: AuthContext, plan: MaintenancePlan, **fields) -> MaintenancePlan:
    if fields.get("is_active") is None:
        fields["is_active"] = True
    apply_fields(plan, fields)
    await db.commit()
    return await get_plan(db, auth, plan.id)


async def delete_plan(db: AsyncSession, plan: MaintenancePlan) -> None:
    await db.delete(plan)
    await db.commit()


# ── MaintenanceJob ───────────────────────────────────────

async def list_jobs(db: AsyncSession, auth: AuthContext) -> list[MaintenanceJob]:
    return await fetch_all(db, jobs_query(auth).order_by(MaintenanceJob.created_at.desc()))


async def get_job(db: AsyncSession, auth: AuthContext, job_id: str) -> MaintenanceJob | None:
    return await fetch_one(db, jobs_query(auth).where(MaintenanceJob.id == job_id))


async def create_job(db: AsyncSession, auth: AuthContext, **fields) -> MaintenanceJob:
    job = MaintenanceJob(**job_costs(fields))
    db.add(job)
    await db.commit()
    return await get_job(db, auth, job.id)


async def update_job(db: AsyncSession, auth: AuthContext, job: MaintenanceJob, **fields) -> MaintenanceJob:
    apply_fields(job, job_costs(fields))
    await db.commit()
    return await get_job(db, auth, job.id)


async def delete_job(db: AsyncSession, job: MaintenanceJob) -> None:
    await db.delete(job)
    await db.commit()
