"""ReservationRepo — loads rooms and reservations of a business as domain models."""

import logging
import uuid
from datetime import date
from typing import Optional

from pydantic import ValidationError
from sqlalchemy import or_, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from hotelperf.db.models.business import Business
from hotelperf.db.models.reservation import ReservationRecord
from hotelperf.db.models.room import RoomRecord
from hotelperf.domain.errors import DataIntegrityError, DataUnavailableError
from hotelperf.domain.models.inventory import Reservation, Room

logger = logging.getLogger(__name__)


def _to_room(row: RoomRecord) -> Room:
    return Room(
        id=row.id,
        room_type=row.room_type,
        price_per_night=row.price_per_night,
        status=row.status,
    )


def _to_reservation(row: ReservationRecord) -> Reservation:
    try:
        return Reservation(
            id=row.id,
            room_id=row.room_id,
            check_in_date=row.check_in_date,
            check_out_date=row.check_out_date,
            total_amount=row.total_amount if row.total_amount is not None else 0,
            status=row.status,
            payment_status=row.payment_status,
            source=row.source,
            guest_count=row.guest_count or 1,
            created_at=row.created_at,
        )
    except ValidationError as exc:
        raise DataIntegrityError(f"Reservation {row.id} is malformed: {exc}", reservation_id=row.id) from exc


class ReservationRepo:
    """Read-only source of report inputs. Storage failures surface as DataUnavailableError."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_business(self, business_id: uuid.UUID) -> Optional[Business]:
        try:
            result = await self._session.execute(
                select(Business).where(Business.id == business_id, Business.deleted_at.is_(None))
            )
        except SQLAlchemyError as exc:
            logger.error("Business lookup failed for %s: %s", business_id, exc)
            raise DataUnavailableError(f"Could not load business {business_id}") from exc
        return result.scalar_one_or_none()

    async def list_rooms(self, business_id: uuid.UUID) -> list[Room]:
        stmt = select(RoomRecord).where(RoomRecord.business_id == business_id).order_by(RoomRecord.room_number)
        rows = await self._fetch(stmt, "rooms", business_id)
        return [_to_room(row) for row in rows]

    async def list_for_period(self, business_id: uuid.UUID, start: date, end: date) -> list[Reservation]:
        """Reservations checked in during [start, end] or occupying a night in it.

        Inverted stays checked in during the window are kept so the
        calculators reject them instead of the query hiding them.
        """
        stmt = (
            select(ReservationRecord)
            .where(
                ReservationRecord.business_id == business_id,
                ReservationRecord.check_in_date <= end,
                or_(
                    ReservationRecord.check_out_date > start,
                    ReservationRecord.check_in_date >= start,
                ),
            )
            .order_by(ReservationRecord.check_in_date.asc())
        )
        rows = await self._fetch(stmt, "reservations", business_id)
        return [_to_reservation(row) for row in rows]

    async def _fetch(self, stmt, what: str, business_id: uuid.UUID) -> list:
        try:
            result = await self._session.execute(stmt)
        except SQLAlchemyError as exc:
            logger.error("Loading %s failed for business %s: %s", what, business_id, exc)
            raise DataUnavailableError(f"Could not load {what} for business {business_id}") from exc
        return list(result.scalars().all())
