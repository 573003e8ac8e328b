"""Support ticket raised against an elevator."""

from __future__ import annotations

from sqlalchemy import String, Text, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from liftcare.models.base import Base, ULIDMixin, UpdatedAtMixin

TICKET_PRIORITIES = ("low", "medium", "high", "critical")
OPEN_TICKET_STATUSES = ("pending", "in_progress")


class Ticket(Base, ULIDMixin, UpdatedAtMixin):
    __tablename__ = "tickets"

    elevator_id: Mapped[str] = mapped_column(String(50), ForeignKey("elevators.id"), index=True)
    reporter_id: Mapped[str] = mapped_column(String(26), ForeignKey("users.id"))
    # Denormalized owner, resolved from the elevator's building at creation
    customer_id: Mapped[str | None] = mapped_column(
        String(26), ForeignKey("customers.id"), nullable=True, index=True,
    )
    title: Mapped[str | None] = mapped_column(String(255), nullable=True)
    description: Mapped[str] = mapped_column(Text)
    priority: Mapped[str] = mapped_column(String(20), default="medium")
    status: Mapped[str] = mapped_column(String(20), default="pending")
    source: Mapped[str] = mapped_column(String(20), default="internal")

    elevator = relationship("Elevator", lazy="joined")

    @property
    def elevator_name(self) -> str | None:
        return self.elevator.name if self.elevator else None
