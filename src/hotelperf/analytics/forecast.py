"""Short-horizon occupancy and revenue forecast — pure functions, no DB dependency.

Reference model: for each daily series over the trailing history window,
take the day-of-week mean and add a least-squares linear trend measured
from the middle of the window. The historical procedure the product
originally described ("trends of the last 90 days") is not available, so
this is a contract-compatible substitute; any model producing the same
ForecastPoint list can replace it.
"""

from dataclasses import dataclass
from datetime import date, timedelta
from decimal import Decimal
from typing import Sequence

from hotelperf.analytics.common import HUNDRED, ZERO, is_paid, nights, safe_div
from hotelperf.analytics.occupancy import project_daily
from hotelperf.domain.enums import Confidence
from hotelperf.domain.models.inventory import ReportPeriod, Reservation, Room
from hotelperf.domain.models.kpi import ForecastPoint

DEFAULT_HISTORY_DAYS = 90
DEFAULT_HORIZON_DAYS = 30
HIGH_CONFIDENCE_DAYS = 7
MEDIUM_CONFIDENCE_DAYS = 14
CENTS = Decimal("0.01")


def confidence_for(days_out: int) -> Confidence:
    if days_out <= HIGH_CONFIDENCE_DAYS:
        return Confidence.HIGH
    if days_out <= MEDIUM_CONFIDENCE_DAYS:
        return Confidence.MEDIUM
    return Confidence.LOW


def nightly_revenue(reservations: Sequence[Reservation], period: ReportPeriod) -> list[Decimal]:
    """Revenue earned per calendar day, spreading each paid stay evenly over its nights."""
    totals = [ZERO] * (period.days + 1)
    for r in reservations:
        if not is_paid(r):
            continue
        per_night = r.total_amount / nights(r)
        day = max(r.check_in_date, period.start)
        while day < r.check_out_date and day <= period.end:
            totals[(day - period.start).days] += per_night
            day += timedelta(days=1)
    return totals


@dataclass
class SeasonalTrend:
    """Day-of-week means plus a linear trend centred on the history midpoint."""

    weekday_means: dict[int, Decimal]
    slope: Decimal
    midpoint: Decimal

    @classmethod
    def fit(cls, values: Sequence[Decimal], weekdays: Sequence[int]) -> "SeasonalTrend":
        n = len(values)
        overall = safe_div(sum(values, ZERO), n)

        buckets: dict[int, list[Decimal]] = {wd: [] for wd in range(7)}
        for value, wd in zip(values, weekdays):
            buckets[wd].append(value)
        weekday_means = {
            wd: safe_div(sum(vals, ZERO), len(vals)) if vals else overall
            for wd, vals in buckets.items()
        }

        midpoint = Decimal(n - 1) / 2 if n else ZERO
        numerator = sum(((Decimal(i) - midpoint) * (v - overall) for i, v in enumerate(values)), ZERO)
        denominator = sum(((Decimal(i) - midpoint) ** 2 for i in range(n)), ZERO)
        return cls(weekday_means=weekday_means, slope=safe_div(numerator, denominator), midpoint=midpoint)

    def project(self, index: int, weekday: int) -> Decimal:
        return self.weekday_means[weekday] + self.slope * (Decimal(index) - self.midpoint)


def forecast(
    historical_reservations: Sequence[Reservation],
    rooms: Sequence[Room],
    as_of: date,
    horizon_days: int = DEFAULT_HORIZON_DAYS,
    history_days: int = DEFAULT_HISTORY_DAYS,
) -> list[ForecastPoint]:
    """Project occupancy and revenue for the ``horizon_days`` days after ``as_of``.

    Args:
        historical_reservations: Stays overlapping the history window.
        rooms: Room inventory; occupancy is 0 throughout when empty.
        as_of: Forecast date ("today"); history ends the day before.
        horizon_days: Number of future days to project, starting tomorrow.
        history_days: Length of the trailing history window.

    Occupancy is clamped to [0, 100] and revenue floored at 0.
    """
    if horizon_days < 0:
        raise ValueError("horizon_days must not be negative")
    if history_days < 1:
        raise ValueError("history_days must be at least 1")

    history = ReportPeriod(start=as_of - timedelta(days=history_days), end=as_of - timedelta(days=1))
    weekdays = [d.weekday() for d in history.dates()]

    occupancy = [d.occupancy_rate for d in project_daily(historical_reservations, rooms, history)]
    revenue = nightly_revenue(historical_reservations, history)
    occupancy_model = SeasonalTrend.fit(occupancy, weekdays)
    revenue_model = SeasonalTrend.fit(revenue, weekdays)

    points: list[ForecastPoint] = []
    for days_out in range(1, horizon_days + 1):
        day = as_of + timedelta(days=days_out)
        index = (day - history.start).days
        projected_occupancy = occupancy_model.project(index, day.weekday())
        projected_revenue = revenue_model.project(index, day.weekday())
        points.append(ForecastPoint(
            date=day,
            days_out=days_out,
            projected_occupancy_rate=min(max(projected_occupancy, ZERO), HUNDRED).quantize(CENTS),
            projected_revenue=max(projected_revenue, ZERO).quantize(CENTS),
            confidence=confidence_for(days_out),
        ))
    return points
