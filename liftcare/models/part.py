"""Parts catalogue and the stock ledger."""

from __future__ import annotations

from sqlalchemy import String, Integer, Float, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from liftcare.models.base import Base, ULIDMixin, UpdatedAtMixin


class Part(Base, ULIDMixin, UpdatedAtMixin):
    __tablename__ = "parts"

    part_code: Mapped[str] = mapped_column(String(50), index=True)
    name: Mapped[str] = mapped_column(String(255))
    brand: Mapped[str | None] = mapped_column(String(100), nullable=True)
    model: Mapped[str | None] = mapped_column(String(100), nullable=True)
    unit: Mapped[str] = mapped_column(String(20), default="pcs")
    cost_price: Mapped[float] = mapped_column(Float, default=0)
    sell_price: Mapped[float] = mapped_column(Float, default=0)
    min_stock: Mapped[int] = mapped_column(Integer, default=0)


class PartMovement(Base, ULIDMixin):
    """Signed stock change; on-hand quantity is the sum of qty per part."""

    __tablename__ = "part_movements"

    part_id: Mapped[str] = mapped_column(String(26), ForeignKey("parts.id"), index=True)
    movement_type: Mapped[str] = mapped_column(String(20))  # in | out | adjust
    qty: Mapped[float] = mapped_column(Float)
    ref_type: Mapped[str | None] = mapped_column(String(30), nullable=True)
    # Free-text note for manual adjustments
    ref_id: Mapped[str | None] = mapped_column(String(255), nullable=True)

    part = relationship("Part", lazy="joined")

    @property
    def part_code(self) -> str | None:
        return self.part.part_code if self.part else None

    @property
    def part_name(self) -> str | None:
        return self.part.name if self.part else None
