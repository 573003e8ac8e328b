"""Commercial models: contracts, quotations, invoices and pricing settings."""

from __future__ import annotations

from datetime import date

from sqlalchemy import String, Integer, Float, Text, Date, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from liftcare.models.base import Base, ULIDMixin, UpdatedAtMixin


class Contract(Base, ULIDMixin, UpdatedAtMixin):
    __tablename__ = "contracts"

    customer_id: Mapped[str] = mapped_column(String(26), ForeignKey("customers.id"), index=True)
    contract_code: Mapped[str] = mapped_column(String(50))
    contract_type: Mapped[str] = mapped_column(String(50))
    start_date: Mapped[date] = mapped_column(Date)
    end_date: Mapped[date] = mapped_column(Date)
    maintenance_times_per_year: Mapped[int] = mapped_column(Integer, default=0)
    included_items: Mapped[str | None] = mapped_column(Text, nullable=True)
    excluded_items: Mapped[str | None] = mapped_column(Text, nullable=True)
    notify_before_days: Mapped[int] = mapped_column(Integer, default=30)


class Quotation(Base, ULIDMixin, UpdatedAtMixin):
    __tablename__ = "quotations"

    quotation_code: Mapped[str] = mapped_column(String(50))
    customer_id: Mapped[str] = mapped_column(String(26), ForeignKey("customers.id"), index=True)
    ticket_id: Mapped[str | None] = mapped_column(String(26), ForeignKey("tickets.id"), nullable=True)
    contract_id: Mapped[str | None] = mapped_column(String(26), ForeignKey("contracts.id"), nullable=True)
    status: Mapped[str] = mapped_column(String(20), default="draft")
    total_amount: Mapped[float] = mapped_column(Float, default=0)

    customer = relationship("Customer", lazy="joined")

    @property
    def customer_name(self) -> str | None:
        return self.customer.name if self.customer else None


class Invoice(Base, ULIDMixin, UpdatedAtMixin):
    __tablename__ = "invoices"

    invoice_code: Mapped[str] = mapped_column(String(50))
    customer_id: Mapped[str] = mapped_column(String(26), ForeignKey("customers.id"), index=True)
    quotation_id: Mapped[str | None] = mapped_column(String(26), ForeignKey("quotations.id"), nullable=True)
    total_amount: Mapped[float] = mapped_column(Float, default=0)
    paid_amount: Mapped[float] = mapped_column(Float, default=0)
    status: Mapped[str] = mapped_column(String(20), default="unpaid")
    due_date: Mapped[date | None] = mapped_column(Date, nullable=True)

    customer = relationship("Customer", lazy="joined")

    @property
    def customer_name(self) -> str | None:
        return self.customer.name if self.customer else None


class PricingSettings(Base, ULIDMixin, UpdatedAtMixin):
    __tablename__ = "pricing_settings"

    call_fee: Mapped[float] = mapped_column(Float, default=0)
    labor_rate_per_hour: Mapped[float] = mapped_column(Float, default=0)
    parts_markup_percent: Mapped[float] = mapped_column(Float, default=0)
    currency: Mapped[str] = mapped_column(String(10), default="THB")
