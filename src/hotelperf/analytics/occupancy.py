"""Per-day occupied-room counts from stay intervals."""

from datetime import timedelta
from typing import Sequence

from hotelperf.analytics.common import is_eligible, nights, pct
from hotelperf.domain.models.inventory import ReportPeriod, Reservation, Room
from hotelperf.domain.models.kpi import DailyOccupancy


def project_daily(
    reservations: Sequence[Reservation],
    rooms: Sequence[Room],
    period: ReportPeriod,
) -> list[DailyOccupancy]:
    """Occupied rooms for every calendar day in [period.start, period.end].

    A stay occupies [check_in_date, check_out_date): the checkout day itself
    is free. Stays that start before or end after the period only count on
    the overlapping days. Uses a difference array, so the cost is linear in
    reservations plus period length rather than in total nights.
    """
    day_count = period.days + 1
    window_end = period.end + timedelta(days=1)
    diff = [0] * (day_count + 1)

    for r in reservations:
        if not is_eligible(r):
            continue
        nights(r)  # reject inverted stays before clipping hides them
        first = max(r.check_in_date, period.start)
        stop = min(r.check_out_date, window_end)
        if first >= stop:
            continue
        diff[(first - period.start).days] += 1
        diff[(stop - period.start).days] -= 1

    total_rooms = len(rooms)
    daily: list[DailyOccupancy] = []
    occupied = 0
    for offset, day in enumerate(period.dates()):
        occupied += diff[offset]
        daily.append(DailyOccupancy(
            date=day,
            occupied_rooms=occupied,
            total_rooms=total_rooms,
            occupancy_rate=pct(occupied, total_rooms),
        ))
    return daily


def total_occupied_nights(daily: Sequence[DailyOccupancy]) -> int:
    return sum(d.occupied_rooms for d in daily)
