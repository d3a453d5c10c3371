"""
Booking Repository Implementation
"""
from typing import Optional, List
from uuid import UUID

from sqlalchemy import select, update, and_, func
from sqlalchemy.ext.asyncio import AsyncSession
from loguru import logger

from domain.entities import Booking
from domain.enums import BookingStatus
from application.repositories.interfaces import IBookingRepository
from infrastructure.persistence.models.booking import BookingModel
from core.exceptions import RepositoryException


def build_worker_lock_statement(labor_id: str):
    """Transaction-scoped advisory lock keyed on the worker id"""
    return select(func.pg_advisory_xact_lock(func.hashtext(labor_id)))


class SQLAlchemyBookingRepository(IBookingRepository):
    """SQLAlchemy implementation of booking repository"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def lock_worker(self, labor_id: str) -> None:
        try:
            await self.session.execute(build_worker_lock_statement(labor_id))

        except Exception as e:
            logger.error(f"Failed to lock bookings for worker {labor_id}: {str(e)}")
            raise RepositoryException(f"Failed to lock worker bookings: {str(e)}")

    async def create(self, booking: Booking) -> Booking:
        try:
            model = self._to_model(booking)
            self.session.add(model)
            await self.session.flush()
            await self.session.refresh(model)

            logger.info(f"Booked {model.labor_id} on job {model.job_id} for {model.job_date}")
            return self._to_entity(model)

        except Exception as e:
            logger.error(f"Failed to create booking {booking.id}: {str(e)}")
            raise RepositoryException(f"Failed to create booking: {str(e)}")

    async def get_by_id(self, booking_id: UUID) -> Optional[Booking]:
        try:
            result = await self.session.execute(
                select(BookingModel)
                .where(BookingModel.id == booking_id)
                .execution_options(populate_existing=True)
            )
            model = result.scalar_one_or_none()
            return self._to_entity(model) if model else None

        except Exception as e:
            logger.error(f"Failed to get booking {booking_id}: {str(e)}")
            raise RepositoryException(f"Failed to get booking: {str(e)}")

    async def list_bookings(
        self,
        labor_id: Optional[str] = None,
        supervisor_id: Optional[str] = None,
        status: Optional[BookingStatus] = None,
    ) -> List[Booking]:
        try:
            conditions = []
            if labor_id is not None:
                conditions.append(BookingModel.labor_id == labor_id)
            if supervisor_id is not None:
                conditions.append(BookingModel.supervisor_id == supervisor_id)
            if status is not None:
                conditions.append(BookingModel.status == status.value)

            query = select(BookingModel)
            if conditions:
                query = query.where(and_(*conditions))

            result = await self.session.execute(query.execution_options(populate_existing=True))
            return [self._to_entity(m) for m in result.scalars().all()]

        except Exception as e:
            logger.error(f"Failed to list bookings: {str(e)}")
            raise RepositoryException(f"Failed to list bookings: {str(e)}")

    async def set_status(self, booking_id: UUID, status: BookingStatus) -> bool:
        try:
            result = await self.session.execute(
                update(BookingModel)
                .where(BookingModel.id == booking_id)
                .values(status=status.value)
                .execution_options(synchronize_session=False)
            )
            await self.session.flush()
            return result.rowcount > 0

        except Exception as e:
            logger.error(f"Failed to update booking {booking_id}: {str(e)}")
            raise RepositoryException(f"Failed to update booking: {str(e)}")

    def _to_entity(self, model: BookingModel) -> Booking:
        return Booking(
            id=model.id,
            job_id=model.job_id,
            labor_id=model.labor_id,
            supervisor_id=model.supervisor_id,
            job_title=model.job_title,
            location_name=model.location_name,
            job_date=model.job_date,
            duration_hours=model.duration_hours,
            wage_amount=model.wage_amount,
            status=BookingStatus(model.status),
            created_at=model.created_at,
        )

    def _to_model(self, entity: Booking) -> BookingModel:
        model = BookingModel(
            id=entity.id,
            job_id=entity.job_id,
            labor_id=entity.labor_id,
            supervisor_id=entity.supervisor_id,
            job_title=entity.job_title,
            location_name=entity.location_name,
            job_date=entity.job_date,
            duration_hours=entity.duration_hours,
            wage_amount=entity.wage_amount,
            status=entity.status.value,
        )
        if entity.created_at is not None:
            model.created_at = entity.created_at
        return model
