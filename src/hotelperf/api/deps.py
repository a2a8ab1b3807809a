import uuid
from typing import AsyncGenerator

from dependency_injector.wiring import Provide, inject
from fastapi import Depends, HTTPException, Path
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from hotelperf.container import Container
from hotelperf.db.models.business import Business
from hotelperf.db.repos.reservation_repo import ReservationRepo
from hotelperf.report.service import AnalyticsReportService


@inject
async def get_db(
    session_factory: async_sessionmaker[AsyncSession] = Depends(Provide[Container.session_factory]),
) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session


def get_repo(db: AsyncSession = Depends(get_db)) -> ReservationRepo:
    return ReservationRepo(db)


async def resolve_business(
    business_id: uuid.UUID = Path(..., description="Business whose reservations are reported"),
    repo: ReservationRepo = Depends(get_repo),
) -> Business:
    business = await repo.get_business(business_id)
    if business is None:
        raise HTTPException(status_code=404, detail="Business not found")
    return business


def get_report_service(repo: ReservationRepo = Depends(get_repo)) -> AnalyticsReportService:
    return AnalyticsReportService(repo)
