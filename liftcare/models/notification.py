"""In-app notification addressed to a single user."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import String, Text, Boolean, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from liftcare.models.base import Base, ULIDMixin, utcnow


class Notification(Base, ULIDMixin):
    __tablename__ = "notifications"

    user_id: Mapped[str] = mapped_column(String(26), ForeignKey("users.id"), index=True)
    type: Mapped[str] = mapped_column(String(50))
    channel: Mapped[str] = mapped_column(String(20), default="in_app")
    # Subject of the notification (e.g. "elevator:EL-001"); newer ones supersede older
    tag: Mapped[str | None] = mapped_column(String(100), nullable=True, index=True)
    title: Mapped[str] = mapped_column(String(255))
    body: Mapped[str] = mapped_column(Text, default="")
    is_read: Mapped[bool] = mapped_column(Boolean, default=False)
    sent_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)
    read_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True, default=None)
