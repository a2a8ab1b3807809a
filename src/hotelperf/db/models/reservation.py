import uuid
from datetime import date
from decimal import Decimal
from typing import Optional

from sqlalchemy import ForeignKey, Index, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from hotelperf.db.session import Base, TimestampMixin, UUIDPrimaryKey
from hotelperf.domain.enums import PaymentStatus, ReservationStatus


class ReservationRecord(UUIDPrimaryKey, TimestampMixin, Base):
    """A guest stay over [check_in_date, check_out_date)."""

    __tablename__ = "reservations"
    __table_args__ = (
        Index("ix_reservations_business_check_in", "business_id", "check_in_date"),
    )

    business_id: Mapped[uuid.UUID] = mapped_column(ForeignKey("businesses.id"))
    room_id: Mapped[Optional[uuid.UUID]] = mapped_column(ForeignKey("rooms.id"), default=None)
    check_in_date: Mapped[date]
    check_out_date: Mapped[date]
    total_amount: Mapped[Decimal] = mapped_column(Numeric(14, 2), default=Decimal(0))
    status: Mapped[str] = mapped_column(String(20), default=ReservationStatus.PENDING.value)
    payment_status: Mapped[str] = mapped_column(String(20), default=PaymentStatus.PENDING.value)
    source: Mapped[Optional[str]] = mapped_column(String(50), default=None)
    guest_count: Mapped[int] = mapped_column(Integer, default=1)
