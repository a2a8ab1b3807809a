"""Reports API — KPI, occupancy, breakdown, comparison and forecast reports."""

from datetime import date, timedelta
from typing import Annotated, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from hotelperf.api.deps import get_report_service, resolve_business
from hotelperf.api.schemas.reports import (
    BreakdownReportResponse,
    ComparisonReportResponse,
    ForecastReportResponse,
    KpiReportResponse,
    OccupancyReportResponse,
    OverviewReportResponse,
    PeriodInfo,
    RevenueReportResponse,
)
from hotelperf.config import settings
from hotelperf.db.models.business import Business
from hotelperf.domain.enums import Granularity
from hotelperf.domain.models.inventory import ReportPeriod
from hotelperf.report.exporter import comparison_records, to_record, to_records
from hotelperf.report.service import AnalyticsReportService

router = APIRouter(prefix="/api/reports/{business_id}", tags=["reports"])

ServiceDep = Annotated[AnalyticsReportService, Depends(get_report_service)]
BusinessDep = Annotated[Business, Depends(resolve_business)]


def resolve_period(
    start_date: Optional[date] = Query(None, description="First check-in day (default: end_date minus default period)"),
    end_date: Optional[date] = Query(None, description="Last check-in day (default: today)"),
) -> ReportPeriod:
    end = end_date or date.today()
    start = start_date or end - timedelta(days=settings.default_period_days)
    if start > end:
        raise HTTPException(status_code=400, detail="start_date must be on or before end_date")
    return ReportPeriod(start=start, end=end)


PeriodDep = Annotated[ReportPeriod, Depends(resolve_period)]


def _period_info(period: ReportPeriod) -> PeriodInfo:
    return PeriodInfo(start=period.start, end=period.end)


@router.get("/kpis", response_model=KpiReportResponse)
async def get_kpis(business: BusinessDep, period: PeriodDep, service: ServiceDep) -> KpiReportResponse:
    snapshot = await service.kpis(business.id, period)
    return KpiReportResponse(period=_period_info(period), kpis=to_record(snapshot))


@router.get("/revenue", response_model=RevenueReportResponse)
async def get_revenue(
    business: BusinessDep,
    period: PeriodDep,
    service: ServiceDep,
    granularity: Granularity = Query(Granularity.DAY),
) -> RevenueReportResponse:
    """Paid revenue bucketed by check-in day, ISO week or month."""
    points = await service.revenue_series(business.id, period, granularity)
    return RevenueReportResponse(
        period=_period_info(period),
        granularity=granularity.value,
        revenue=to_records(points),
    )


@router.get("/occupancy", response_model=OccupancyReportResponse)
async def get_occupancy(business: BusinessDep, period: PeriodDep, service: ServiceDep) -> OccupancyReportResponse:
    daily = await service.occupancy(business.id, period)
    return OccupancyReportResponse(period=_period_info(period), occupancy=to_records(daily))


@router.get("/channels", response_model=BreakdownReportResponse)
async def get_channels(business: BusinessDep, period: PeriodDep, service: ServiceDep) -> BreakdownReportResponse:
    rows = await service.by_channel(business.id, period)
    return BreakdownReportResponse(period=_period_info(period), rows=to_records(rows))


@router.get("/room-types", response_model=BreakdownReportResponse)
async def get_room_types(business: BusinessDep, period: PeriodDep, service: ServiceDep) -> BreakdownReportResponse:
    rows = await service.by_room_type(business.id, period)
    return BreakdownReportResponse(period=_period_info(period), rows=to_records(rows))


@router.get("/comparison", response_model=ComparisonReportResponse)
async def get_comparison(business: BusinessDep, period: PeriodDep, service: ServiceDep) -> ComparisonReportResponse:
    """KPIs against the immediately preceding period of the same length."""
    comparison = await service.comparison(business.id, period)
    return ComparisonReportResponse(
        period=_period_info(period),
        previous_period=_period_info(comparison.previous_period),
        metrics=comparison_records(comparison),
    )


@router.get("/forecast", response_model=ForecastReportResponse)
async def get_forecast(
    business: BusinessDep,
    service: ServiceDep,
    as_of: Optional[date] = Query(None, description="Forecast from the day after this date (default: today)"),
    horizon_days: int = Query(settings.forecast_horizon_days, ge=1, le=365),
) -> ForecastReportResponse:
    as_of = as_of or date.today()
    points = await service.forecast(business.id, as_of, horizon_days)
    return ForecastReportResponse(as_of=as_of, horizon_days=horizon_days, forecast=to_records(points))


@router.get("/overview", response_model=OverviewReportResponse)
async def get_overview(business: BusinessDep, period: PeriodDep, service: ServiceDep) -> OverviewReportResponse:
    report = await service.overview(business.id, period)
    return OverviewReportResponse(
        period=_period_info(period),
        kpis=to_record(report.kpis),
        occupancy=to_records(report.occupancy),
        revenue=to_records(report.revenue),
        room_types=to_records(report.room_types),
        channels=to_records(report.channels),
    )
