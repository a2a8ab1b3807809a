from hotelperf.db.models.business import Business
from hotelperf.db.models.reservation import ReservationRecord
from hotelperf.db.models.room import RoomRecord

__all__ = ["Business", "ReservationRecord", "RoomRecord"]
