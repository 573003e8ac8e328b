from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from liftcare.schemas.common import OptionalStr, RequiredStr


class TicketCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    elevator_id: RequiredStr = Field(alias="elevatorId")
    description: RequiredStr
    title: OptionalStr = None
    priority: Literal["low", "medium", "high", "critical"] = "medium"


class TicketRead(BaseModel):
    id: str
    elevator_id: str
    elevator_name: str | None = None
    reporter_id: str
    customer_id: str | None = None
    title: str | None = None
    description: str
    priority: str
    status: str
    source: str
    created_at: datetime
    updated_at: datetime | None = None

    model_config = {"from_attributes": True}


class TicketCreated(BaseModel):
    message: str = "Ticket created"
    ticket: TicketRead
