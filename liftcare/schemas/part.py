from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from liftcare.schemas.common import Amount, Count, OptionalStr, RequiredStr


class PartCreate(BaseModel):
    part_code: RequiredStr
    name: RequiredStr
    brand: OptionalStr = None
    model: OptionalStr = None
    unit: OptionalStr = None
    cost_price: Amount = 0
    sell_price: Amount = 0
    min_stock: Count = 0

    model_config = {"protected_namespaces": ()}


class PartRead(BaseModel):
    id: str
    part_code: str
    name: str
    brand: str | None = None
    model: str | None = None
    unit: str
    cost_price: float
    sell_price: float
    min_stock: int
    created_at: datetime
    updated_at: datetime | None = None

    model_config = {"from_attributes": True, "protected_namespaces": ()}


class PartStockRead(BaseModel):
    part_id: str
    part_code: str
    part_name: str
    quantity: float


class StockAdjustRequest(BaseModel):
    part_id: RequiredStr
    change_qty: float
    note: OptionalStr = None

    @field_validator("change_qty")
    @classmethod
    def _non_zero(cls, value: float) -> float:
        if value == 0:
            raise ValueError("change_qty must be non-zero")
        return value


class PartMovementRead(BaseModel):
    id: str
    part_id: str
    part_code: str | None = None
    part_name: str | None = None
    change_qty: float = Field(validation_alias="qty")
    movement_type: str
    ref_type: str | None = None
    note: str | None = Field(default=None, validation_alias="ref_id")
    created_at: datetime

    model_config = {"from_attributes": True}
