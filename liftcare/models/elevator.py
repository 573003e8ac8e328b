"""Elevator and Alert models."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import String, Integer, Float, ForeignKey, DateTime
from sqlalchemy.orm import Mapped, mapped_column, relationship

from liftcare.models.base import Base, ULIDMixin, utcnow

ELEVATOR_STATES = (
    "normal",
    "fault",
    "in_maintenance",
    "waiting_maintenance",
    "waiting_quotation",
)


class Elevator(Base):
    __tablename__ = "elevators"

    # Elevator ids are asset codes chosen by the operator (e.g. "EL-001")
    id: Mapped[str] = mapped_column(String(50), primary_key=True)
    name: Mapped[str] = mapped_column(String(255))
    building_id: Mapped[str] = mapped_column(String(26), ForeignKey("buildings.id"), index=True)
    brand: Mapped[str | None] = mapped_column(String(100), nullable=True)
    model: Mapped[str | None] = mapped_column(String(100), nullable=True)
    install_year: Mapped[int | None] = mapped_column(Integer, nullable=True)
    install_location: Mapped[str | None] = mapped_column(String(255), nullable=True)
    capacity: Mapped[int | None] = mapped_column(Integer, nullable=True)
    state: Mapped[str] = mapped_column(String(30), default="normal")
    current_floor: Mapped[int] = mapped_column(Integer, default=1)
    current_load: Mapped[float] = mapped_column(Float, default=0)
    last_maintenance_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    next_maintenance_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)

    building = relationship("Building", lazy="joined")

    @property
    def building_name(self) -> str | None:
        return self.building.name if self.building else None

    @property
    def customer_name(self) -> str | None:
        return self.building.customer_name if self.building else None


class Alert(Base, ULIDMixin):
    __tablename__ = "alerts"

    elevator_id: Mapped[str] = mapped_column(String(50), ForeignKey("elevators.id"), index=True)
    alert_type: Mapped[str] = mapped_column(String(50), default="fault")
    severity: Mapped[str] = mapped_column(String(20), default="medium")
    message: Mapped[str] = mapped_column(String(1000), default="")
    resolved_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True, default=None)

    elevator = relationship("Elevator", lazy="joined")

    @property
    def elevator_name(self) -> str | None:
        return self.elevator.name if self.elevator else None
