from hotelperf.domain.enums.report import Confidence, Direction, Granularity
from hotelperf.domain.enums.reservation import (
    ELIGIBLE_STATUSES,
    PaymentStatus,
    ReservationStatus,
    RoomStatus,
)

__all__ = [
    "Confidence",
    "Direction",
    "ELIGIBLE_STATUSES",
    "Granularity",
    "PaymentStatus",
    "ReservationStatus",
    "RoomStatus",
]
