"""ReportExporter — flattens analytics results into JSON-serializable records.

Records map 1:1 to downstream CSV columns; string formatting of the
export itself happens outside this package.
"""

from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Any, Iterable

from pydantic import BaseModel

from hotelperf.domain.models.kpi import KpiSnapshot, PeriodComparison

# (field, metric label, unit, description) in export order
KPI_METRICS: list[tuple[str, str, str, str]] = [
    ("adr", "ADR (Average Daily Rate)", "currency", "Revenue per occupied room-night"),
    ("revpar", "RevPAR (Revenue Per Available Room)", "currency", "Revenue per available room-night"),
    ("occupancy_rate", "Occupancy Rate", "%", "Occupied share of available room-nights"),
    ("total_revenue", "Total Revenue", "currency", "Paid revenue for the period"),
    ("total_bookings", "Total Bookings", "bookings", "Confirmed and checked-in reservations"),
    ("cancellation_rate", "Cancellation Rate", "%", "Cancelled share of all bookings"),
    ("avg_length_of_stay", "Average Length of Stay", "nights", "Room-nights per booking"),
    ("average_guests", "Average Guests", "guests", "Guests per booking"),
    ("revenue_per_guest", "Revenue per Guest", "currency", "Paid revenue per guest"),
    ("total_room_nights", "Room-Nights Sold", "room-nights", "Nights booked across all rooms"),
    ("available_room_nights", "Available Room-Nights", "room-nights", "Rooms times nights in the period"),
]


def _to_plain(value: Any) -> Any:
    if isinstance(value, dict):
        return {key: _to_plain(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_to_plain(item) for item in value]
    if isinstance(value, Decimal):
        return float(value)
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, date):
        return value.isoformat()
    return value


def to_record(item: BaseModel) -> dict[str, Any]:
    """One dict per model; nested models and collections are converted recursively."""
    return _to_plain(item.model_dump())


def to_records(items: Iterable[BaseModel]) -> list[dict[str, Any]]:
    return [to_record(item) for item in items]


def kpi_records(snapshot: KpiSnapshot) -> list[dict[str, Any]]:
    return [
        {
            "metric": label,
            "value": _to_plain(getattr(snapshot, field)),
            "unit": unit,
            "description": description,
        }
        for field, label, unit, description in KPI_METRICS
    ]


def comparison_records(comparison: PeriodComparison) -> list[dict[str, Any]]:
    """Current vs previous period, one row per KPI."""
    return [
        {
            "metric": label,
            "current": _to_plain(getattr(comparison.current, field)),
            "previous": _to_plain(getattr(comparison.previous, field)),
            "change_pct": _to_plain(comparison.delta_pct[field]),
            "direction": comparison.direction[field].value,
        }
        for field, label, _unit, _description in KPI_METRICS
    ]
