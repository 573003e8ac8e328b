from __future__ import annotations

from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, BeforeValidator

from liftcare.models.elevator import ELEVATOR_STATES
from liftcare.schemas.common import Amount, OptionalStr, RequiredStr


def _coerce_state(value):
    # Unknown or missing states fall back to normal rather than failing the write
    return value if value in ELEVATOR_STATES else "normal"


ElevatorState = Annotated[str, BeforeValidator(_coerce_state)]


class ElevatorUpdate(BaseModel):
    name: RequiredStr
    building_id: RequiredStr
    brand: OptionalStr = None
    model: OptionalStr = None
    install_year: int | None = None
    install_location: OptionalStr = None
    capacity: int | None = None
    state: ElevatorState = "normal"
    current_floor: int | None = None
    current_load: Amount = 0
    last_maintenance_at: datetime | None = None
    next_maintenance_at: datetime | None = None

    model_config = {"protected_namespaces": ()}


class ElevatorCreate(ElevatorUpdate):
    id: RequiredStr


class ElevatorRead(BaseModel):
    id: str
    name: str
    building_id: str
    building_name: str | None = None
    customer_name: str | None = None
    brand: str | None = None
    model: str | None = None
    install_year: int | None = None
    install_location: str | None = None
    capacity: int | None = None
    state: str
    current_floor: int
    current_load: float
    last_maintenance_at: datetime | None = None
    next_maintenance_at: datetime | None = None
    created_at: datetime

    model_config = {"from_attributes": True, "protected_namespaces": ()}


class AlertRead(BaseModel):
    id: str
    elevator_id: str
    elevator_name: str | None = None
    alert_type: str
    severity: str
    message: str
    created_at: datetime
    resolved_at: datetime | None = None

    model_config = {"from_attributes": True}
