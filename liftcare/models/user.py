"""Identity model: login credentials, role and optional customer link."""

from __future__ import annotations

from sqlalchemy import String, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from liftcare.models.base import Base, ULIDMixin


class User(Base, ULIDMixin):
    __tablename__ = "users"

    email: Mapped[str] = mapped_column(String(255), unique=True, index=True)
    password_hash: Mapped[str] = mapped_column(String(255))
    name: Mapped[str] = mapped_column(String(255))
    role: Mapped[str] = mapped_column(String(20), default="customer")  # admin | technician | customer | manager
    customer_id: Mapped[str | None] = mapped_column(
        String(26), ForeignKey("customers.id"), nullable=True, default=None,
    )
