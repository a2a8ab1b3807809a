from hotelperf.db.repos.reservation_repo import ReservationRepo

__all__ = ["ReservationRepo"]
