"""Integration tests for Reports API endpoints."""

import uuid
from datetime import date
from decimal import Decimal

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from hotelperf.api.main import app
from hotelperf.db.models import Business, ReservationRecord, RoomRecord
from hotelperf.db.repos import ReservationRepo
from hotelperf.domain.enums import PaymentStatus, ReservationStatus
from hotelperf.domain.errors import DataUnavailableError


async def _setup_report_data(session: AsyncSession):
    """Two rooms, three stays in the first week of 2024, one in the week before."""
    business = Business(name="test_report")
    session.add(business)
    await session.flush()

    standard = RoomRecord(business_id=business.id, room_number="101", room_type="standard")
    suite = RoomRecord(business_id=business.id, room_number="201", room_type="suite")
    session.add_all([standard, suite])
    await session.flush()

    def stay(room, check_in, check_out, amount, **kwargs):
        values = dict(
            business_id=business.id,
            room_id=room.id,
            check_in_date=check_in,
            check_out_date=check_out,
            total_amount=Decimal(amount),
            status=ReservationStatus.CONFIRMED.value,
            payment_status=PaymentStatus.PAID.value,
        )
        values.update(kwargs)
        return ReservationRecord(**values)

    session.add_all([
        stay(standard, date(2024, 1, 8), date(2024, 1, 10), "200", source="booking.com"),
        stay(suite, date(2024, 1, 9), date(2024, 1, 12), "600"),
        stay(standard, date(2024, 1, 11), date(2024, 1, 12), "100", status=ReservationStatus.CANCELLED.value),
        stay(standard, date(2024, 1, 2), date(2024, 1, 4), "400"),
    ])
    await session.commit()
    return business


@pytest.fixture()
async def report_client(session):
    """Create test client with reservation data."""
    business = await _setup_report_data(session)

    from hotelperf.api.deps import get_db
    app.dependency_overrides[get_db] = lambda: session
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client, business, session
    app.dependency_overrides.clear()


WEEK = {"start_date": "2024-01-08", "end_date": "2024-01-14"}


class TestReportsAPI:
    async def test_health(self, report_client):
        client, _, _ = report_client
        resp = await client.get("/api/health")
        assert resp.status_code == 200
        assert resp.json()["status"] == "ok"

    async def test_unknown_business_404(self, report_client):
        client, _, _ = report_client
        resp = await client.get(f"/api/reports/{uuid.uuid4()}/kpis", params=WEEK)
        assert resp.status_code == 404

    async def test_inverted_period_400(self, report_client):
        client, business, _ = report_client
        resp = await client.get(
            f"/api/reports/{business.id}/kpis",
            params={"start_date": "2024-01-14", "end_date": "2024-01-08"},
        )
        assert resp.status_code == 400

    async def test_kpis(self, report_client):
        client, business, _ = report_client
        resp = await client.get(f"/api/reports/{business.id}/kpis", params=WEEK)
        assert resp.status_code == 200

        data = resp.json()
        assert data["period"] == {"start": "2024-01-08", "end": "2024-01-14"}
        kpis = data["kpis"]
        assert kpis["total_revenue"] == 800.0
        assert kpis["total_bookings"] == 2
        assert kpis["total_room_nights"] == 5
        assert kpis["available_room_nights"] == 12
        assert kpis["adr"] == 160.0
        assert kpis["cancelled_bookings"] == 1

    async def test_occupancy_covers_every_day(self, report_client):
        client, business, _ = report_client
        resp = await client.get(f"/api/reports/{business.id}/occupancy", params=WEEK)
        assert resp.status_code == 200

        days = resp.json()["occupancy"]
        assert len(days) == 7
        assert days[0]["date"] == "2024-01-08"
        assert [d["occupied_rooms"] for d in days[:4]] == [1, 2, 1, 1]
        assert days[1]["occupancy_rate"] == 100.0

    async def test_revenue_weekly(self, report_client):
        client, business, _ = report_client
        resp = await client.get(
            f"/api/reports/{business.id}/revenue", params={**WEEK, "granularity": "week"}
        )
        assert resp.status_code == 200
        data = resp.json()
        assert data["granularity"] == "week"
        assert len(data["revenue"]) == 1
        assert data["revenue"][0]["revenue"] == 800.0

    async def test_bad_granularity_422(self, report_client):
        client, business, _ = report_client
        resp = await client.get(
            f"/api/reports/{business.id}/revenue", params={**WEEK, "granularity": "hour"}
        )
        assert resp.status_code == 422

    async def test_breakdowns(self, report_client):
        client, business, _ = report_client

        channels = (await client.get(f"/api/reports/{business.id}/channels", params=WEEK)).json()["rows"]
        assert [row["key"] for row in channels] == ["booking.com", "direct"]
        assert channels[1]["revenue_share"] == 75.0

        room_types = (await client.get(f"/api/reports/{business.id}/room-types", params=WEEK)).json()["rows"]
        assert [row["key"] for row in room_types] == ["standard", "suite"]
        assert room_types[1]["adr"] == 200.0

    async def test_comparison(self, report_client):
        client, business, _ = report_client
        resp = await client.get(f"/api/reports/{business.id}/comparison", params=WEEK)
        assert resp.status_code == 200

        data = resp.json()
        assert data["previous_period"] == {"start": "2024-01-01", "end": "2024-01-07"}
        metrics = {row["metric"]: row for row in data["metrics"]}
        revenue = metrics["Total Revenue"]
        assert revenue["previous"] == 400.0
        assert revenue["current"] == 800.0
        assert revenue["change_pct"] == 100.0
        assert revenue["direction"] == "up"

    async def test_forecast(self, report_client):
        client, business, _ = report_client
        resp = await client.get(
            f"/api/reports/{business.id}/forecast", params={"as_of": "2024-01-15", "horizon_days": 14}
        )
        assert resp.status_code == 200

        data = resp.json()
        assert data["horizon_days"] == 14
        points = data["forecast"]
        assert len(points) == 14
        assert points[0]["date"] == "2024-01-16"
        assert points[0]["confidence"] == "high"
        assert points[-1]["confidence"] == "medium"
        assert all(0 <= p["projected_occupancy_rate"] <= 100 for p in points)

    async def test_overview(self, report_client):
        client, business, _ = report_client
        resp = await client.get(f"/api/reports/{business.id}/overview", params=WEEK)
        assert resp.status_code == 200

        data = resp.json()
        assert data["kpis"]["total_revenue"] == sum(p["revenue"] for p in data["revenue"])
        assert len(data["occupancy"]) == 7

    async def test_inverted_stay_422(self, report_client):
        client, business, session = report_client
        bad = ReservationRecord(
            business_id=business.id,
            check_in_date=date(2024, 1, 13),
            check_out_date=date(2024, 1, 12),
            status=ReservationStatus.CONFIRMED.value,
        )
        session.add(bad)
        await session.commit()

        resp = await client.get(f"/api/reports/{business.id}/kpis", params=WEEK)
        assert resp.status_code == 422
        assert resp.json()["reservation_id"] == str(bad.id)

    async def test_storage_failure_503(self, report_client, monkeypatch):
        client, business, _ = report_client

        async def fail(self, business_id, start, end):
            raise DataUnavailableError("reservations table unreachable")

        monkeypatch.setattr(ReservationRepo, "list_for_period", fail)

        resp = await client.get(f"/api/reports/{business.id}/kpis", params=WEEK)
        assert resp.status_code == 503
        assert resp.json()["detail"] == "reservations table unreachable"
