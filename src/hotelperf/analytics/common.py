"""Filters and safe arithmetic shared by every calculator."""

from decimal import Decimal
from typing import Iterable

from hotelperf.domain.enums import ELIGIBLE_STATUSES, PaymentStatus, ReservationStatus
from hotelperf.domain.errors import DataIntegrityError
from hotelperf.domain.models.inventory import ReportPeriod, Reservation

ZERO = Decimal(0)
HUNDRED = Decimal(100)


def safe_div(numerator: Decimal | int, denominator: Decimal | int) -> Decimal:
    """Divide, resolving a zero denominator to 0 instead of raising."""
    if not denominator:
        return ZERO
    return Decimal(numerator) / Decimal(denominator)


def pct(numerator: Decimal | int, denominator: Decimal | int) -> Decimal:
    return safe_div(HUNDRED * Decimal(numerator), denominator)


def nights(reservation: Reservation) -> int:
    """Whole nights of a stay. Raises DataIntegrityError for empty or inverted stays."""
    count = (reservation.check_out_date - reservation.check_in_date).days
    if count <= 0:
        raise DataIntegrityError(
            f"Reservation {reservation.id} checks out on {reservation.check_out_date} "
            f"but checks in on {reservation.check_in_date}",
            reservation_id=reservation.id,
        )
    return count


def is_eligible(reservation: Reservation) -> bool:
    return reservation.status in ELIGIBLE_STATUSES


def is_paid(reservation: Reservation) -> bool:
    """Eligible and fully paid: the only reservations that count as revenue."""
    return is_eligible(reservation) and reservation.payment_status == PaymentStatus.PAID


def is_cancelled(reservation: Reservation) -> bool:
    return reservation.status == ReservationStatus.CANCELLED


def checked_in_during(reservations: Iterable[Reservation], period: ReportPeriod) -> list[Reservation]:
    """Reservations whose check-in date falls in [start, end]."""
    return [r for r in reservations if period.contains(r.check_in_date)]


def sum_amounts(reservations: Iterable[Reservation]) -> Decimal:
    return sum((r.total_amount for r in reservations), ZERO)
