"""AnalyticsReportService — orchestrates repository fetch → calculators."""

import logging
import uuid
from datetime import date, timedelta
from decimal import Decimal

from pydantic import BaseModel

from hotelperf.analytics import breakdown, forecast as forecasting, occupancy, timeseries
from hotelperf.analytics.comparison import compare_to_previous
from hotelperf.analytics.kpi import compute_kpis
from hotelperf.config import settings
from hotelperf.db.repos.reservation_repo import ReservationRepo
from hotelperf.domain.enums import Granularity
from hotelperf.domain.models.inventory import ReportPeriod, Reservation, Room
from hotelperf.domain.models.kpi import (
    BreakdownRow,
    DailyOccupancy,
    ForecastPoint,
    KpiSnapshot,
    PeriodComparison,
    TimeSeriesPoint,
)

logger = logging.getLogger(__name__)


class OverviewReport(BaseModel):
    """Every report for one period, computed from a single fetch."""

    model_config = {"frozen": True}

    period: ReportPeriod
    kpis: KpiSnapshot
    occupancy: list[DailyOccupancy]
    revenue: list[TimeSeriesPoint]
    room_types: list[BreakdownRow]
    channels: list[BreakdownRow]


class AnalyticsReportService:
    """Loads inputs once per call and runs the pure calculators on them.

    Nothing is cached between calls; every report is recomputed from the
    repository.
    """

    def __init__(self, repo: ReservationRepo) -> None:
        self._repo = repo

    async def _load(self, business_id: uuid.UUID, start: date, end: date) -> tuple[list[Room], list[Reservation]]:
        rooms = await self._repo.list_rooms(business_id)
        reservations = await self._repo.list_for_period(business_id, start, end)
        logger.debug(
            "Loaded %d rooms, %d reservations for %s (%s..%s)",
            len(rooms), len(reservations), business_id, start, end,
        )
        return rooms, reservations

    def _flag_overbooking(self, business_id: uuid.UUID, label: str, rate: Decimal) -> None:
        """Occupancy is never clamped; values above the threshold are reported instead."""
        if rate > settings.occupancy_alert_threshold:
            logger.warning(
                "Occupancy %s%% above %s%% for business %s (%s): overlapping or overbooked reservations",
                rate, settings.occupancy_alert_threshold, business_id, label,
            )

    async def kpis(self, business_id: uuid.UUID, period: ReportPeriod) -> KpiSnapshot:
        rooms, reservations = await self._load(business_id, period.start, period.end)
        snapshot = compute_kpis(reservations, rooms, period)
        self._flag_overbooking(business_id, "period", snapshot.occupancy_rate)
        return snapshot

    async def revenue_series(
        self,
        business_id: uuid.UUID,
        period: ReportPeriod,
        granularity: Granularity = Granularity.DAY,
    ) -> list[TimeSeriesPoint]:
        rooms, reservations = await self._load(business_id, period.start, period.end)
        return timeseries.aggregate(reservations, period, granularity, len(rooms))

    async def occupancy(self, business_id: uuid.UUID, period: ReportPeriod) -> list[DailyOccupancy]:
        rooms, reservations = await self._load(business_id, period.start, period.end)
        daily = occupancy.project_daily(reservations, rooms, period)
        for day in daily:
            self._flag_overbooking(business_id, day.date.isoformat(), day.occupancy_rate)
        return daily

    async def by_room_type(self, business_id: uuid.UUID, period: ReportPeriod) -> list[BreakdownRow]:
        rooms, reservations = await self._load(business_id, period.start, period.end)
        rows = breakdown.by_room_type(reservations, rooms, period, include_empty=True)
        for row in rows:
            self._flag_overbooking(business_id, f"room type {row.key}", row.occupancy_rate)
        return rows

    async def by_channel(self, business_id: uuid.UUID, period: ReportPeriod) -> list[BreakdownRow]:
        rooms, reservations = await self._load(business_id, period.start, period.end)
        return breakdown.by_channel(reservations, period, room_count=len(rooms))

    async def comparison(self, business_id: uuid.UUID, period: ReportPeriod) -> PeriodComparison:
        previous = period.previous()
        rooms, reservations = await self._load(business_id, previous.start, period.end)
        # Both periods come from one fetch; the calculators filter by check-in date.
        return compare_to_previous(reservations, reservations, rooms, period)

    async def forecast(
        self,
        business_id: uuid.UUID,
        as_of: date,
        horizon_days: int | None = None,
    ) -> list[ForecastPoint]:
        history_days = settings.forecast_history_days
        horizon = horizon_days if horizon_days is not None else settings.forecast_horizon_days
        rooms, reservations = await self._load(
            business_id, as_of - timedelta(days=history_days), as_of - timedelta(days=1)
        )
        return forecasting.forecast(reservations, rooms, as_of, horizon_days=horizon, history_days=history_days)

    async def overview(
        self,
        business_id: uuid.UUID,
        period: ReportPeriod,
        granularity: Granularity = Granularity.DAY,
    ) -> OverviewReport:
        rooms, reservations = await self._load(business_id, period.start, period.end)
        report = OverviewReport(
            period=period,
            kpis=compute_kpis(reservations, rooms, period),
            occupancy=occupancy.project_daily(reservations, rooms, period),
            revenue=timeseries.aggregate(reservations, period, granularity, len(rooms)),
            room_types=breakdown.by_room_type(reservations, rooms, period, include_empty=True),
            channels=breakdown.by_channel(reservations, period, room_count=len(rooms)),
        )
        self._flag_overbooking(business_id, "period", report.kpis.occupancy_rate)
        for day in report.occupancy:
            self._flag_overbooking(business_id, day.date.isoformat(), day.occupancy_rate)
        for row in report.room_types:
            self._flag_overbooking(business_id, f"room type {row.key}", row.occupancy_rate)
        logger.info("Overview computed for business %s (%s..%s)", business_id, period.start, period.end)
        return report
