"""Technician model and the applications that lead to one."""

from __future__ import annotations

from datetime import date

from sqlalchemy import String, Integer, Text, Date, ForeignKey, Index, text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from liftcare.models.base import Base, ULIDMixin, UpdatedAtMixin

REQUEST_STATUSES = ("pending", "approved", "rejected")


class Technician(Base, ULIDMixin, UpdatedAtMixin):
    __tablename__ = "technicians"

    # unique: one Technician per identity, also guards concurrent approvals
    user_id: Mapped[str] = mapped_column(String(26), ForeignKey("users.id"), unique=True)
    phone: Mapped[str | None] = mapped_column(String(50), nullable=True)
    specialty: Mapped[str | None] = mapped_column(String(255), nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    user = relationship("User", lazy="joined")

    @property
    def name(self) -> str | None:
        return self.user.name if self.user else None

    @property
    def email(self) -> str | None:
        return self.user.email if self.user else None


class TechnicianRequest(Base, ULIDMixin, UpdatedAtMixin):
    __tablename__ = "technician_requests"
    __table_args__ = (
        Index(
            "uq_technician_requests_pending_user",
            "user_id",
            unique=True,
            sqlite_where=text("status = 'pending'"),
            postgresql_where=text("status = 'pending'"),
        ),
    )

    user_id: Mapped[str] = mapped_column(String(26), ForeignKey("users.id"), index=True)
    phone: Mapped[str] = mapped_column(String(50))
    specialty: Mapped[str] = mapped_column(String(255))
    address: Mapped[str] = mapped_column(String(500))
    date_of_birth: Mapped[date] = mapped_column(Date)
    age: Mapped[int | None] = mapped_column(Integer, nullable=True)
    experience: Mapped[str] = mapped_column(Text)
    education: Mapped[str] = mapped_column(Text)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    status: Mapped[str] = mapped_column(String(20), default="pending")

    user = relationship("User", lazy="joined")

    @property
    def name(self) -> str | None:
        return self.user.name if self.user else None

    @property
    def email(self) -> str | None:
        return self.user.email if self.user else None
