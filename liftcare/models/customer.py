"""Tenant models: Customer and the Buildings it owns."""

from __future__ import annotations

from sqlalchemy import String, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from liftcare.models.base import Base, ULIDMixin, UpdatedAtMixin


class Customer(Base, ULIDMixin, UpdatedAtMixin):
    __tablename__ = "customers"

    name: Mapped[str] = mapped_column(String(255))
    business_type: Mapped[str] = mapped_column(String(100))
    address: Mapped[str | None] = mapped_column(String(500), nullable=True)
    contact_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    contact_phone: Mapped[str | None] = mapped_column(String(50), nullable=True)
    contact_email: Mapped[str | None] = mapped_column(String(255), nullable=True, index=True)


class Building(Base, ULIDMixin):
    __tablename__ = "buildings"

    customer_id: Mapped[str] = mapped_column(String(26), ForeignKey("customers.id"), index=True)
    name: Mapped[str] = mapped_column(String(255))
    address: Mapped[str | None] = mapped_column(String(500), nullable=True)
    building_type: Mapped[str | None] = mapped_column(String(100), nullable=True)

    customer = relationship("Customer", lazy="joined")

    @property
    def customer_name(self) -> str | None:
        return self.customer.name if self.customer else None
