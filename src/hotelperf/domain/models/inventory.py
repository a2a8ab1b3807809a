"""Input records for the analytics engine: rooms, reservations and report periods."""

import uuid
from datetime import date, datetime, timedelta
from decimal import Decimal

from pydantic import BaseModel, model_validator

from hotelperf.domain.enums import PaymentStatus, ReservationStatus, RoomStatus

DEFAULT_SOURCE = "direct"


class Room(BaseModel):
    """A sellable room of the business; fixed for the duration of a report run."""

    model_config = {"frozen": True}

    id: uuid.UUID
    room_type: str
    price_per_night: Decimal = Decimal(0)
    status: RoomStatus = RoomStatus.AVAILABLE


class Reservation(BaseModel):
    """A stay over [check_in_date, check_out_date). Night ordering is checked by the calculators."""

    model_config = {"frozen": True}

    id: uuid.UUID
    room_id: uuid.UUID | None = None
    check_in_date: date
    check_out_date: date  # Exclusive: the guest leaves that morning
    total_amount: Decimal = Decimal(0)
    status: ReservationStatus
    payment_status: PaymentStatus = PaymentStatus.PENDING
    source: str | None = None
    guest_count: int = 1
    created_at: datetime | None = None

    @property
    def channel(self) -> str:
        """Booking origin, with missing/blank sources folded into 'direct'."""
        if self.source is None or not self.source.strip():
            return DEFAULT_SOURCE
        return self.source.strip()


class ReportPeriod(BaseModel):
    """Reporting window.

    Check-in filtering treats both ends as inclusive; night counting uses
    the exclusive-end day count (``days``).
    """

    model_config = {"frozen": True}

    start: date
    end: date

    @model_validator(mode="after")
    def _check_order(self) -> "ReportPeriod":
        if self.start > self.end:
            raise ValueError("start must be on or before end")
        return self

    @property
    def days(self) -> int:
        return (self.end - self.start).days

    def contains(self, day: date) -> bool:
        return self.start <= day <= self.end

    def dates(self) -> list[date]:
        """Every calendar day in [start, end]."""
        return [self.start + timedelta(days=i) for i in range(self.days + 1)]

    def previous(self) -> "ReportPeriod":
        """The immediately preceding period of identical length."""
        prev_end = self.start - timedelta(days=1)
        return ReportPeriod(start=prev_end - timedelta(days=self.days), end=prev_end)
