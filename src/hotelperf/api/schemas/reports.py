"""Pydantic response models for report endpoints."""

from datetime import date

from pydantic import BaseModel


class PeriodInfo(BaseModel):
    start: date
    end: date


class KpiResponse(BaseModel):
    occupancy_rate: float
    adr: float
    revpar: float
    total_revenue: float
    total_bookings: int
    avg_length_of_stay: float
    cancellation_rate: float
    total_room_nights: int
    available_room_nights: int
    cancelled_bookings: int = 0
    average_guests: float = 0.0
    revenue_per_guest: float = 0.0


class DailyOccupancyResponse(BaseModel):
    date: date
    occupied_rooms: int
    total_rooms: int
    occupancy_rate: float


class TimeSeriesPointResponse(BaseModel):
    date: date
    revenue: float
    bookings: int
    room_nights: int
    days: int
    adr: float
    revpar: float
    occupancy_rate: float


class BreakdownRowResponse(BaseModel):
    key: str
    bookings: int
    revenue: float
    room_nights: int
    average_rate: float
    adr: float
    occupancy_rate: float
    revenue_share: float


class ComparisonRowResponse(BaseModel):
    metric: str
    current: float
    previous: float
    change_pct: float
    direction: str


class ForecastPointResponse(BaseModel):
    date: date
    days_out: int
    projected_occupancy_rate: float
    projected_revenue: float
    confidence: str


class KpiReportResponse(BaseModel):
    period: PeriodInfo
    kpis: KpiResponse


class RevenueReportResponse(BaseModel):
    period: PeriodInfo
    granularity: str
    revenue: list[TimeSeriesPointResponse]


class OccupancyReportResponse(BaseModel):
    period: PeriodInfo
    occupancy: list[DailyOccupancyResponse]


class BreakdownReportResponse(BaseModel):
    period: PeriodInfo
    rows: list[BreakdownRowResponse]


class ComparisonReportResponse(BaseModel):
    period: PeriodInfo
    previous_period: PeriodInfo
    metrics: list[ComparisonRowResponse]


class ForecastReportResponse(BaseModel):
    as_of: date
    horizon_days: int
    forecast: list[ForecastPointResponse]


class OverviewReportResponse(BaseModel):
    period: PeriodInfo
    kpis: KpiResponse
    occupancy: list[DailyOccupancyResponse]
    revenue: list[TimeSeriesPointResponse]
    room_types: list[BreakdownRowResponse]
    channels: list[BreakdownRowResponse]
