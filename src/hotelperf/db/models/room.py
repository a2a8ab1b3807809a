import uuid
from decimal import Decimal

from sqlalchemy import ForeignKey, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from hotelperf.db.session import Base, TimestampMixin, UUIDPrimaryKey
from hotelperf.domain.enums import RoomStatus


class RoomRecord(UUIDPrimaryKey, TimestampMixin, Base):
    __tablename__ = "rooms"

    business_id: Mapped[uuid.UUID] = mapped_column(ForeignKey("businesses.id"), index=True)
    room_number: Mapped[str] = mapped_column(String(20))
    room_type: Mapped[str] = mapped_column(String(50))
    price_per_night: Mapped[Decimal] = mapped_column(Numeric(14, 2), default=Decimal(0))
    status: Mapped[str] = mapped_column(String(20), default=RoomStatus.AVAILABLE.value)
