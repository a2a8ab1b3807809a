from datetime import datetime
from typing import Optional

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from hotelperf.db.session import Base, TimestampMixin, UUIDPrimaryKey


class Business(UUIDPrimaryKey, TimestampMixin, Base):
    """A hotel business that owns rooms and receives reservations."""

    __tablename__ = "businesses"

    name: Mapped[str] = mapped_column(String(255))
    business_type: Mapped[str] = mapped_column(String(50), default="hotel")
    deleted_at: Mapped[Optional[datetime]] = mapped_column(default=None)
