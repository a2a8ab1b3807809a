"""Derived, request-scoped results of the analytics engine."""

from datetime import date
from decimal import Decimal

from pydantic import BaseModel

from hotelperf.domain.enums import Confidence, Direction
from hotelperf.domain.models.inventory import ReportPeriod


class KpiSnapshot(BaseModel):
    """Hospitality KPIs for one period. Occupancy is not bounded above by 100."""

    model_config = {"frozen": True}

    occupancy_rate: Decimal = Decimal(0)
    adr: Decimal = Decimal(0)
    revpar: Decimal = Decimal(0)
    total_revenue: Decimal = Decimal(0)
    total_bookings: int = 0
    avg_length_of_stay: Decimal = Decimal(0)
    cancellation_rate: Decimal = Decimal(0)
    total_room_nights: int = 0
    available_room_nights: int = 0
    cancelled_bookings: int = 0
    average_guests: Decimal = Decimal(0)
    revenue_per_guest: Decimal = Decimal(0)


class DailyOccupancy(BaseModel):
    """Rooms occupied on one calendar day; the checkout day is not counted."""

    model_config = {"frozen": True}

    date: date
    occupied_rooms: int
    total_rooms: int
    occupancy_rate: Decimal


class TimeSeriesPoint(BaseModel):
    """One bucket of a revenue series; ``date`` is the bucket start."""

    model_config = {"frozen": True}

    date: date
    revenue: Decimal = Decimal(0)
    bookings: int = 0
    room_nights: int = 0
    days: int = 0  # Period days covered by this bucket
    adr: Decimal = Decimal(0)
    revpar: Decimal = Decimal(0)
    occupancy_rate: Decimal = Decimal(0)


class BreakdownRow(BaseModel):
    """Per room type or per channel figures."""

    model_config = {"frozen": True}

    key: str
    bookings: int = 0
    revenue: Decimal = Decimal(0)
    room_nights: int = 0
    average_rate: Decimal = Decimal(0)  # revenue / bookings
    adr: Decimal = Decimal(0)  # revenue / room_nights
    occupancy_rate: Decimal = Decimal(0)
    revenue_share: Decimal = Decimal(0)


class PeriodComparison(BaseModel):
    """KPIs of a period next to the preceding period of equal length, keyed by metric."""

    model_config = {"frozen": True}

    current: KpiSnapshot
    previous: KpiSnapshot
    previous_period: ReportPeriod
    delta_pct: dict[str, Decimal]
    direction: dict[str, Direction]


class ForecastPoint(BaseModel):
    """Projected figures for one future day, ``days_out`` days after the as-of date."""

    model_config = {"frozen": True}

    date: date
    days_out: int
    projected_occupancy_rate: Decimal
    projected_revenue: Decimal
    confidence: Confidence
