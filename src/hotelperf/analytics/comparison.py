"""Period-over-period KPI comparison."""

from decimal import Decimal
from typing import Sequence

from hotelperf.analytics.common import HUNDRED, ZERO
from hotelperf.analytics.kpi import compute_kpis
from hotelperf.domain.enums import Direction
from hotelperf.domain.models.inventory import ReportPeriod, Reservation, Room
from hotelperf.domain.models.kpi import KpiSnapshot, PeriodComparison

COMPARED_METRICS = tuple(KpiSnapshot.model_fields)


def change_pct(current: Decimal | int, previous: Decimal | int) -> Decimal:
    """Percentage change; 0 when there is no previous value to compare against."""
    if previous == 0:
        return ZERO
    return HUNDRED * (Decimal(current) - Decimal(previous)) / Decimal(previous)


def direction(current: Decimal | int, previous: Decimal | int) -> Direction:
    """Sign of the raw difference, so 0 -> 500 is UP even though change_pct is 0."""
    if current > previous:
        return Direction.UP
    if current < previous:
        return Direction.DOWN
    return Direction.FLAT


def compare_to_previous(
    reservations_current: Sequence[Reservation],
    reservations_previous: Sequence[Reservation],
    rooms: Sequence[Room],
    period: ReportPeriod,
) -> PeriodComparison:
    """KPIs for ``period`` against the preceding period of the same length."""
    previous_period = period.previous()
    current = compute_kpis(reservations_current, rooms, period)
    previous = compute_kpis(reservations_previous, rooms, previous_period)

    delta_pct: dict[str, Decimal] = {}
    directions: dict[str, Direction] = {}
    for metric in COMPARED_METRICS:
        cur = getattr(current, metric)
        prev = getattr(previous, metric)
        delta_pct[metric] = change_pct(cur, prev)
        directions[metric] = direction(cur, prev)

    return PeriodComparison(
        current=current,
        previous=previous,
        previous_period=previous_period,
        delta_pct=delta_pct,
        direction=directions,
    )
