from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel

from liftcare.schemas.common import Amount, OptionalStr, RequiredStr


class MaintenanceTemplateCreate(BaseModel):
    name: RequiredStr
    description: OptionalStr = None


class MaintenanceTemplateRead(BaseModel):
    id: str
    name: str
    description: str | None = None
    created_at: datetime

    model_config = {"from_attributes": True}


class MaintenancePlanCreate(BaseModel):
    elevator_id: RequiredStr
    template_id: RequiredStr
    frequency_per_year: int
    contract_id: OptionalStr = None
    next_run_at: datetime | None = None
    is_active: bool | None = None


class MaintenancePlanRead(BaseModel):
    id: str
    elevator_id: str
    elevator_name: str | None = None
    contract_id: str | None = None
    contract_code: str | None = None
    template_id: str
    frequency_per_year: int
    next_run_at: datetime | None = None
    last_run_at: datetime | None = None
    is_active: bool
    created_at: datetime

    model_config = {"from_attributes": True}


class MaintenanceJobCreate(BaseModel):
    elevator_id: RequiredStr
    job_type: Literal["planned", "emergency"]
    technician_id: OptionalStr = None
    contract_id: OptionalStr = None
    ticket_id: OptionalStr = None
    remarks: OptionalStr = None
    total_labor_hours: Amount = 0
    labor_cost: Amount = 0
    parts_cost: Amount = 0
    # labor_cost + parts_cost when omitted
    total_cost: float | None = None


class MaintenanceJobUpdate(MaintenanceJobCreate):
    started_at: datetime | None = None
    finished_at: datetime | None = None


class MaintenanceJobRead(BaseModel):
    id: str
    elevator_id: str
    elevator_name: str | None = None
    building_name: str | None = None
    plan_id: str | None = None
    template_id: str | None = None
    contract_id: str | None = None
    contract_code: str | None = None
    ticket_id: str | None = None
    technician_id: str | None = None
    technician_name: str | None = None
    job_type: str
    started_at: datetime | None = None
    finished_at: datetime | None = None
    remarks: str | None = None
    total_labor_hours: float
    labor_cost: float
    parts_cost: float
    total_cost: float
    created_at: datetime
    updated_at: datetime | None = None

    model_config = {"from_attributes": True}
