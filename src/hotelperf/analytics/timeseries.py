"""Revenue series bucketed by check-in day, ISO week or calendar month."""

from collections import defaultdict
from datetime import date, timedelta
from decimal import Decimal
from typing import Sequence

from hotelperf.analytics.common import ZERO, checked_in_during, is_paid, nights, pct, safe_div
from hotelperf.domain.enums import Granularity
from hotelperf.domain.models.inventory import ReportPeriod, Reservation
from hotelperf.domain.models.kpi import TimeSeriesPoint


def bucket_start(day: date, granularity: Granularity) -> date:
    """First day of the bucket holding ``day`` (weeks start on ISO Monday)."""
    if granularity == Granularity.WEEK:
        return day - timedelta(days=day.weekday())
    if granularity == Granularity.MONTH:
        return day.replace(day=1)
    return day


def next_bucket(start: date, granularity: Granularity) -> date:
    if granularity == Granularity.WEEK:
        return start + timedelta(days=7)
    if granularity == Granularity.MONTH:
        if start.month == 12:
            return date(start.year + 1, 1, 1)
        return date(start.year, start.month + 1, 1)
    return start + timedelta(days=1)


def aggregate(
    reservations: Sequence[Reservation],
    period: ReportPeriod,
    granularity: Granularity,
    room_count: int,
) -> list[TimeSeriesPoint]:
    """Bucket paid reservations by check-in date, zero-filling empty buckets.

    Args:
        reservations: Any reservation set; only paid, eligible check-ins in the period count.
        period: Reporting window; every bucket that overlaps it is emitted.
        granularity: Bucket size.
        room_count: Rooms in the inventory, used for per-bucket RevPAR and occupancy.

    A bucket's ``days`` is the number of period days it covers, so partial
    first/last weeks and months are normalised on their real length.
    """
    revenue: dict[date, Decimal] = defaultdict(lambda: ZERO)
    bookings: dict[date, int] = defaultdict(int)
    room_nights: dict[date, int] = defaultdict(int)

    for r in checked_in_during(reservations, period):
        if not is_paid(r):
            continue
        key = bucket_start(r.check_in_date, granularity)
        revenue[key] += r.total_amount
        bookings[key] += 1
        room_nights[key] += nights(r)

    window_end = period.end + timedelta(days=1)
    points: list[TimeSeriesPoint] = []
    current = bucket_start(period.start, granularity)
    while current <= period.end:
        following = next_bucket(current, granularity)
        span = (min(following, window_end) - max(current, period.start)).days
        available = room_count * span
        points.append(TimeSeriesPoint(
            date=current,
            revenue=revenue[current],
            bookings=bookings[current],
            room_nights=room_nights[current],
            days=span,
            adr=safe_div(revenue[current], room_nights[current]),
            revpar=safe_div(revenue[current], available),
            occupancy_rate=pct(room_nights[current], available),
        ))
        current = following
    return points
