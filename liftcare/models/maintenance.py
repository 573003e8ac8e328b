"""Maintenance models: checklist templates, recurring plans and jobs."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import String, Integer, Float, Boolean, Text, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from liftcare.models.base import Base, ULIDMixin, UpdatedAtMixin


class MaintenanceTemplate(Base, ULIDMixin):
    __tablename__ = "maintenance_templates"

    name: Mapped[str] = mapped_column(String(255))
    description: Mapped[str | None] = mapped_column(Text, nullable=True)


class MaintenancePlan(Base, ULIDMixin):
    __tablename__ = "maintenance_plans"

    elevator_id: Mapped[str] = mapped_column(String(50), ForeignKey("elevators.id"), index=True)
    contract_id: Mapped[str | None] = mapped_column(String(26), ForeignKey("contracts.id"), nullable=True)
    template_id: Mapped[str] = mapped_column(String(26), ForeignKey("maintenance_templates.id"))
    frequency_per_year: Mapped[int] = mapped_column(Integer)
    next_run_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    last_run_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)

    elevator = relationship("Elevator", lazy="joined")
    contract = relationship("Contract", lazy="joined")

    @property
    def elevator_name(self) -> str | None:
        return self.elevator.name if self.elevator else None

    @property
    def contract_code(self) -> str | None:
        return self.contract.contract_code if self.contract else None


class MaintenanceJob(Base, ULIDMixin, UpdatedAtMixin):
    __tablename__ = "maintenance_jobs"

    elevator_id: Mapped[str] = mapped_column(String(50), ForeignKey("elevators.id"), index=True)
    plan_id: Mapped[str | None] = mapped_column(String(26), ForeignKey("maintenance_plans.id"), nullable=True)
    template_id: Mapped[str | None] = mapped_column(String(26), ForeignKey("maintenance_templates.id"), nullable=True)
    contract_id: Mapped[str | None] = mapped_column(String(26), ForeignKey("contracts.id"), nullable=True)
    ticket_id: Mapped[str | None] = mapped_column(String(26), ForeignKey("tickets.id"), nullable=True)
    technician_id: Mapped[str | None] = mapped_column(String(26), ForeignKey("technicians.id"), nullable=True, index=True)
    job_type: Mapped[str] = mapped_column(String(20))  # planned | emergency
    started_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    finished_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    remarks: Mapped[str | None] = mapped_column(Text, nullable=True)
    total_labor_hours: Mapped[float] = mapped_column(Float, default=0)
    labor_cost: Mapped[float] = mapped_column(Float, default=0)
    parts_cost: Mapped[float] = mapped_column(Float, default=0)
    total_cost: Mapped[float] = mapped_column(Float, default=0)

    elevator = relationship("Elevator", lazy="joined")
    technician = relationship("Technician", lazy="joined")
    contract = relationship("Contract", lazy="joined")

    @property
    def elevator_name(self) -> str | None:
        return self.elevator.name if self.elevator else None

    @property
    def building_name(self) -> str | None:
        return self.elevator.building_name if self.elevator else None

    @property
    def technician_name(self) -> str | None:
        return self.technician.name if self.technician else None

    @property
    def contract_code(self) -> str | None:
        return self.contract.contract_code if self.contract else None
