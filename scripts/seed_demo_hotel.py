"""Seed a demo hotel with rooms and ~90 days of reservations, then print its overview.

Usage:
    PYTHONPATH=src python scripts/seed_demo_hotel.py

Idempotent: the demo business is reused if it already exists; reservations
are only generated the first time.
"""

import asyncio
import logging
import random
import sys
from datetime import date, timedelta
from decimal import Decimal

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)-5s %(name)s - %(message)s")
logger = logging.getLogger("seed_demo_hotel")
logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)

DEMO_BUSINESS_NAME = "Demo Hotel"

ROOM_TYPES = [
    # (room_type, count, price_per_night)
    ("standard", 6, Decimal("45000")),
    ("deluxe", 3, Decimal("70000")),
    ("suite", 1, Decimal("120000")),
]

SOURCES = [None, "direct", "booking.com", "expedia", "walk_in"]
HISTORY_DAYS = 90


def separator(title: str) -> None:
    print(f"\n{'=' * 60}")
    print(f"  {title}")
    print(f"{'=' * 60}\n")


async def main() -> None:
    from hotelperf.config import settings
    from hotelperf.db.session import build_engine, build_session_factory

    separator("Seed: Demo Hotel")
    print(f"Database: {settings.db_host}:{settings.db_port}/{settings.db_name}\n")

    engine = build_engine(settings.database_url, echo=False)
    session_factory = build_session_factory(engine)

    async with session_factory() as session:
        try:
            business_id = await seed(session)
            await session.commit()
            await show_overview(session, business_id)
        except Exception:
            await session.rollback()
            logger.exception("Seeding failed")
            sys.exit(1)

    await engine.dispose()
    separator("Seeding Complete")


async def seed(session):
    from sqlalchemy import select

    from hotelperf.db.models import Business, ReservationRecord, RoomRecord
    from hotelperf.domain.enums import PaymentStatus, ReservationStatus

    result = await session.execute(select(Business).where(Business.name == DEMO_BUSINESS_NAME))
    business = result.scalar_one_or_none()
    if business is not None:
        logger.info("Business %s already exists (%s)", DEMO_BUSINESS_NAME, business.id)
        return business.id

    business = Business(name=DEMO_BUSINESS_NAME)
    session.add(business)
    await session.flush()

    rooms = []
    number = 100
    for room_type, count, price in ROOM_TYPES:
        for _ in range(count):
            number += 1
            rooms.append(RoomRecord(
                business_id=business.id, room_number=str(number), room_type=room_type, price_per_night=price,
            ))
    session.add_all(rooms)
    await session.flush()

    rng = random.Random(42)
    today = date.today()
    created = 0
    for room in rooms:
        day = today - timedelta(days=HISTORY_DAYS)
        while day < today + timedelta(days=14):
            day += timedelta(days=rng.randint(0, 3))
            stay = rng.randint(1, 5)
            status = rng.choices(
                [ReservationStatus.CONFIRMED, ReservationStatus.CHECKED_IN, ReservationStatus.CANCELLED],
                weights=[70, 20, 10],
            )[0]
            session.add(ReservationRecord(
                business_id=business.id,
                room_id=room.id,
                check_in_date=day,
                check_out_date=day + timedelta(days=stay),
                total_amount=room.price_per_night * stay,
                status=status.value,
                payment_status=(PaymentStatus.PAID if rng.random() < 0.85 else PaymentStatus.PENDING).value,
                source=rng.choice(SOURCES),
                guest_count=rng.randint(1, 4),
            ))
            created += 1
            day += timedelta(days=stay)

    await session.flush()
    logger.info("Created business %s: %d rooms, %d reservations", business.id, len(rooms), created)
    return business.id


async def show_overview(session, business_id) -> None:
    from hotelperf.db.repos import ReservationRepo
    from hotelperf.domain.models.inventory import ReportPeriod
    from hotelperf.report.exporter import kpi_records
    from hotelperf.report.service import AnalyticsReportService

    service = AnalyticsReportService(ReservationRepo(session))
    today = date.today()
    period = ReportPeriod(start=today - timedelta(days=30), end=today)
    snapshot = await service.kpis(business_id, period)

    separator(f"KPIs {period.start} .. {period.end}")
    for row in kpi_records(snapshot):
        print(f"  {row['metric']:<40} {row['value']:>14,.2f} {row['unit']}")


if __name__ == "__main__":
    asyncio.run(main())
