from __future__ import annotations

from datetime import date, datetime

from pydantic import BaseModel

from liftcare.schemas.common import Amount, Count, OptionalStr, RequiredStr


class ContractCreate(BaseModel):
    customer_id: RequiredStr
    contract_code: RequiredStr
    contract_type: RequiredStr
    start_date: date
    end_date: date
    maintenance_times_per_year: Count = 0
    included_items: OptionalStr = None
    excluded_items: OptionalStr = None
    notify_before_days: Count = 30


class ContractRead(BaseModel):
    id: str
    customer_id: str
    contract_code: str
    contract_type: str
    start_date: date
    end_date: date
    maintenance_times_per_year: int
    included_items: str | None = None
    excluded_items: str | None = None
    notify_before_days: int
    created_at: datetime
    updated_at: datetime | None = None

    model_config = {"from_attributes": True}


class QuotationCreate(BaseModel):
    # Generated as Q-<epoch ms> when omitted
    quotation_code: OptionalStr = None
    customer_id: RequiredStr
    ticket_id: OptionalStr = None
    contract_id: OptionalStr = None
    status: OptionalStr = None
    total_amount: Amount = 0


class QuotationUpdate(QuotationCreate):
    quotation_code: RequiredStr


class QuotationRead(BaseModel):
    id: str
    quotation_code: str
    customer_id: str
    customer_name: str | None = None
    ticket_id: str | None = None
    contract_id: str | None = None
    status: str
    total_amount: float
    created_at: datetime
    updated_at: datetime | None = None

    model_config = {"from_attributes": True}


class InvoiceCreate(BaseModel):
    # Generated as I-<epoch ms> when omitted
    invoice_code: OptionalStr = None
    customer_id: RequiredStr
    quotation_id: OptionalStr = None
    total_amount: Amount = 0
    paid_amount: Amount = 0
    status: OptionalStr = None
    due_date: date | None = None


class InvoiceUpdate(InvoiceCreate):
    invoice_code: RequiredStr


class InvoiceRead(BaseModel):
    id: str
    invoice_code: str
    customer_id: str
    customer_name: str | None = None
    quotation_id: str | None = None
    total_amount: float
    paid_amount: float
    status: str
    due_date: date | None = None
    created_at: datetime
    updated_at: datetime | None = None

    model_config = {"from_attributes": True}


class PricingSettingsUpdate(BaseModel):
    id: OptionalStr = None
    call_fee: Amount = 0
    labor_rate_per_hour: Amount = 0
    parts_markup_percent: Amount = 0
    currency: OptionalStr = None


class PricingSettingsRead(BaseModel):
    id: str | None = None
    call_fee: float = 0
    labor_rate_per_hour: float = 0
    parts_markup_percent: float = 0
    currency: str = "THB"
    created_at: datetime | None = None
    updated_at: datetime | None = None

    model_config = {"from_attributes": True}
