"""Tests for domain input models."""

import uuid
from datetime import date
from decimal import Decimal

import pytest
from pydantic import ValidationError

from hotelperf.domain.enums import PaymentStatus, ReservationStatus
from hotelperf.domain.models.inventory import ReportPeriod, Reservation, Room
from hotelperf.domain.models.kpi import (
    BreakdownRow,
    DailyOccupancy,
    ForecastPoint,
    KpiSnapshot,
    PeriodComparison,
    TimeSeriesPoint,
)


def _reservation(source: str | None = None) -> Reservation:
    return Reservation(
        id=uuid.uuid4(),
        check_in_date=date(2024, 1, 1),
        check_out_date=date(2024, 1, 3),
        total_amount=Decimal("200"),
        status=ReservationStatus.CONFIRMED,
        payment_status=PaymentStatus.PAID,
        source=source,
    )


class TestReportPeriod:
    def test_days_is_exclusive_end(self):
        period = ReportPeriod(start=date(2024, 1, 1), end=date(2024, 1, 3))
        assert period.days == 2

    def test_dates_is_inclusive(self):
        period = ReportPeriod(start=date(2024, 1, 1), end=date(2024, 1, 3))
        assert period.dates() == [date(2024, 1, 1), date(2024, 1, 2), date(2024, 1, 3)]

    def test_single_day_period(self):
        period = ReportPeriod(start=date(2024, 1, 1), end=date(2024, 1, 1))
        assert period.days == 0
        assert period.dates() == [date(2024, 1, 1)]

    def test_contains_both_ends(self):
        period = ReportPeriod(start=date(2024, 1, 1), end=date(2024, 1, 3))
        assert period.contains(date(2024, 1, 1))
        assert period.contains(date(2024, 1, 3))
        assert not period.contains(date(2024, 1, 4))
        assert not period.contains(date(2023, 12, 31))

    def test_rejects_inverted_period(self):
        with pytest.raises(ValidationError):
            ReportPeriod(start=date(2024, 1, 5), end=date(2024, 1, 1))

    def test_previous_is_adjacent_and_same_length(self):
        period = ReportPeriod(start=date(2024, 1, 8), end=date(2024, 1, 14))
        previous = period.previous()
        assert previous.end == date(2024, 1, 7)
        assert previous.start == date(2024, 1, 1)
        assert previous.days == period.days

    def test_previous_across_month_boundary(self):
        period = ReportPeriod(start=date(2024, 3, 1), end=date(2024, 3, 31))
        previous = period.previous()
        assert previous.end == date(2024, 2, 29)
        assert previous.start == date(2024, 1, 30)


class TestReservation:
    def test_missing_source_is_direct(self):
        assert _reservation(None).channel == "direct"

    def test_blank_source_is_direct(self):
        assert _reservation("   ").channel == "direct"

    def test_source_kept(self):
        assert _reservation("booking.com").channel == "booking.com"

    def test_status_parsed_from_string(self):
        r = Reservation(
            id=uuid.uuid4(),
            check_in_date=date(2024, 1, 1),
            check_out_date=date(2024, 1, 2),
            status="checked_in",
            payment_status="paid",
        )
        assert r.status is ReservationStatus.CHECKED_IN
        assert r.payment_status is PaymentStatus.PAID

    def test_inverted_stay_is_constructible(self):
        """Ordering is enforced by the calculators, not by the model."""
        r = Reservation(
            id=uuid.uuid4(),
            check_in_date=date(2024, 1, 3),
            check_out_date=date(2024, 1, 1),
            status=ReservationStatus.CONFIRMED,
        )
        assert r.check_out_date < r.check_in_date

    def test_frozen(self):
        r = _reservation()
        with pytest.raises(ValidationError):
            r.total_amount = Decimal("1")


class TestRoom:
    def test_defaults(self):
        room = Room(id=uuid.uuid4(), room_type="deluxe")
        assert room.price_per_night == Decimal(0)
        assert room.status == "available"


class TestResultModels:
    @pytest.mark.parametrize(
        "model",
        [KpiSnapshot, DailyOccupancy, TimeSeriesPoint, BreakdownRow, PeriodComparison, ForecastPoint],
    )
    def test_documented_and_frozen(self, model):
        assert model.__doc__ and model.__doc__.strip()
        assert model.model_config.get("frozen") is True
