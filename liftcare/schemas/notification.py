from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel


class NotificationRead(BaseModel):
    id: str
    type: str
    channel: str
    tag: str | None = None
    title: str
    body: str
    is_read: bool
    sent_at: datetime
    read_at: datetime | None = None

    model_config = {"from_attributes": True}


class DashboardSummary(BaseModel):
    elevators: int
    tickets_open: int
    alerts_open: int


class MessageResponse(BaseModel):
    message: str
