from __future__ import annotations

from datetime import date, datetime
from typing import Literal

from pydantic import BaseModel

from liftcare.schemas.common import OptionalStr, RequiredStr


class TechnicianUserRead(BaseModel):
    id: str
    name: str
    email: str

    model_config = {"from_attributes": True}


class TechnicianCreate(BaseModel):
    user_id: RequiredStr
    phone: OptionalStr = None
    specialty: OptionalStr = None
    notes: OptionalStr = None


class TechnicianUpdate(BaseModel):
    phone: OptionalStr = None
    specialty: OptionalStr = None
    notes: OptionalStr = None


class TechnicianRead(BaseModel):
    id: str
    user_id: str
    name: str | None = None
    email: str | None = None
    phone: str | None = None
    specialty: str | None = None
    notes: str | None = None
    # Filled from the identity's approved application, when there is one
    address: str | None = None
    date_of_birth: date | None = None
    age: int | None = None
    experience: str | None = None
    education: str | None = None
    created_at: datetime
    updated_at: datetime | None = None

    model_config = {"from_attributes": True}


class TechnicianRequestCreate(BaseModel):
    phone: RequiredStr
    specialty: RequiredStr
    address: RequiredStr
    date_of_birth: date
    age: int | None = None
    experience: RequiredStr
    education: RequiredStr
    notes: OptionalStr = None


class TechnicianRequestDecision(BaseModel):
    status: Literal["approved", "rejected"]


class TechnicianRequestRead(BaseModel):
    id: str
    user_id: str
    name: str | None = None
    email: str | None = None
    phone: str
    specialty: str
    address: str
    date_of_birth: date
    age: int | None = None
    experience: str
    education: str
    notes: str | None = None
    status: str
    created_at: datetime
    updated_at: datetime | None = None

    model_config = {"from_attributes": True}
