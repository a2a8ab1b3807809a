"""KPI snapshot for a period — pure functions, no DB dependency."""

from typing import Sequence

from hotelperf.analytics.common import (
    checked_in_during,
    is_cancelled,
    is_eligible,
    is_paid,
    nights,
    pct,
    safe_div,
    sum_amounts,
)
from hotelperf.domain.models.inventory import ReportPeriod, Reservation, Room
from hotelperf.domain.models.kpi import KpiSnapshot


def compute_kpis(
    reservations: Sequence[Reservation],
    rooms: Sequence[Room],
    period: ReportPeriod,
) -> KpiSnapshot:
    """Compute occupancy, ADR, RevPAR and booking KPIs for a period.

    Args:
        reservations: Any reservation set; only check-ins inside the period are used.
        rooms: Full room inventory of the business.
        period: Check-in window. Available room-nights use ``period.days``.

    Every rate resolves to 0 when its denominator is 0. Occupancy is not
    clamped: values above 100 mean overlapping or overbooked stays upstream.
    """
    in_period = checked_in_during(reservations, period)
    eligible = [r for r in in_period if is_eligible(r)]
    paid = [r for r in eligible if is_paid(r)]
    cancelled = sum(1 for r in in_period if is_cancelled(r))

    total_revenue = sum_amounts(paid)
    total_bookings = len(eligible)
    total_room_nights = sum(nights(r) for r in eligible)
    available_room_nights = len(rooms) * period.days
    total_guests = sum(r.guest_count or 1 for r in eligible)

    return KpiSnapshot(
        occupancy_rate=pct(total_room_nights, available_room_nights),
        adr=safe_div(total_revenue, total_room_nights),
        revpar=safe_div(total_revenue, available_room_nights),
        total_revenue=total_revenue,
        total_bookings=total_bookings,
        avg_length_of_stay=safe_div(total_room_nights, total_bookings),
        cancellation_rate=pct(cancelled, total_bookings + cancelled),
        total_room_nights=total_room_nights,
        available_room_nights=available_room_nights,
        cancelled_bookings=cancelled,
        average_guests=safe_div(total_guests, total_bookings),
        revenue_per_guest=safe_div(total_revenue, total_guests),
    )
