from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel

from liftcare.schemas.common import OptionalStr, RequiredStr


class CustomerCreate(BaseModel):
    name: RequiredStr
    business_type: RequiredStr
    address: OptionalStr = None
    contact_name: OptionalStr = None
    contact_phone: OptionalStr = None
    contact_email: OptionalStr = None


class CustomerRead(BaseModel):
    id: str
    name: str
    business_type: str
    address: str | None = None
    contact_name: str | None = None
    contact_phone: str | None = None
    contact_email: str | None = None
    created_at: datetime
    updated_at: datetime | None = None

    model_config = {"from_attributes": True}


class BuildingCreate(BaseModel):
    customer_id: RequiredStr
    name: RequiredStr
    address: OptionalStr = None
    building_type: OptionalStr = None


class BuildingRead(BaseModel):
    id: str
    customer_id: str
    customer_name: str | None = None
    name: str
    address: str | None = None
    building_type: str | None = None
    created_at: datetime

    model_config = {"from_attributes": True}
