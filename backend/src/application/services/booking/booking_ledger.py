"""
Booking Ledger
Append-only record of confirmed work assignments, read per worker or supervisor
"""
from dataclasses import dataclass, replace
from datetime import date, datetime, timezone
from typing import List, Optional
from uuid import UUID

from application.repositories.interfaces import IBookingRepository, IJobApplicationRepository
from core.config import settings
from core.exceptions import AuthorizationException, InvalidTransitionError, ResourceNotFoundException
from core.logging_config import logger
from domain.entities import Booking, JobApplication
from domain.enums import BookingStatus
from domain.timeutils import as_utc
from domain.value_objects import WeekWindow


@dataclass(frozen=True)
class WeeklyHoursSummary:
    """Confirmed hours for one worker across one Monday-Sunday week"""

    week_start: date
    week_end: date
    hours_by_day: List[int]  # Monday first
    total_hours: int
    remaining_hours: int
    near_limit: bool


class BookingLedger:
    """Booking history and weekly hour totals"""

    def __init__(
        self,
        booking_repo: IBookingRepository,
        application_repo: IJobApplicationRepository,
    ):
        self.booking_repo = booking_repo
        self.application_repo = application_repo

    async def record(self, booking: Booking) -> Booking:
        """Append a confirmed booking"""
        created = await self.booking_repo.create(booking)
        logger.info(f"Booking {created.id} recorded for worker {created.labor_id} on job {created.job_id}")
        return created

    async def lock_worker(self, labor_id: str) -> None:
        """Hold the worker's booking lock until the transaction ends"""
        await self.booking_repo.lock_worker(labor_id)

    async def for_worker(self, labor_id: str) -> List[Booking]:
        """Confirmed bookings for a worker, latest job date first"""
        bookings = await self.booking_repo.list_bookings(
            labor_id=labor_id, status=BookingStatus.CONFIRMED
        )
        return sorted(bookings, key=lambda b: b.job_date, reverse=True)

    async def for_supervisor(self, supervisor_id: str) -> List[Booking]:
        """Confirmed bookings on a supervisor's jobs, most recently booked first"""
        bookings = await self.booking_repo.list_bookings(
            supervisor_id=supervisor_id, status=BookingStatus.CONFIRMED
        )
        return sorted(bookings, key=_booked_sort_key, reverse=True)

    async def weekly_hours(self, labor_id: str, on_date: date) -> int:
        """Sum of confirmed hours in the week containing ``on_date``"""
        window = WeekWindow.containing(on_date)
        bookings = await self.booking_repo.list_bookings(
            labor_id=labor_id, status=BookingStatus.CONFIRMED
        )
        return sum(b.duration_hours for b in bookings if window.contains(b.job_date))

    async def weekly_summary(self, labor_id: str, on_date: date) -> WeeklyHoursSummary:
        """Per-day breakdown used by the worker dashboard"""
        window = WeekWindow.containing(on_date)
        bookings = await self.booking_repo.list_bookings(
            labor_id=labor_id, status=BookingStatus.CONFIRMED
        )

        hours_by_day = [0] * 7
        for booking in bookings:
            if window.contains(booking.job_date):
                hours_by_day[booking.job_date.weekday()] += booking.duration_hours

        total = sum(hours_by_day)
        return WeeklyHoursSummary(
            week_start=window.start,
            week_end=window.end,
            hours_by_day=hours_by_day,
            total_hours=total,
            remaining_hours=max(settings.WEEKLY_HOUR_LIMIT - total, 0),
            near_limit=total >= settings.WEEKLY_HOUR_SOFT_LIMIT,
        )

    async def applications_for_worker(self, labor_id: str) -> List[JobApplication]:
        return await self.application_repo.list_for_labor(labor_id)

    async def cancel(self, booking_id: UUID, actor_id: str) -> Booking:
        """
        Cancel a confirmed booking.

        Either the booked worker or the job's supervisor may cancel. The hours
        stop counting toward the worker's weekly total; the posting's slot
        count is left as is.
        """
        booking = await self.booking_repo.get_by_id(booking_id)
        if not booking:
            raise ResourceNotFoundException("Booking", str(booking_id))

        if actor_id not in (booking.labor_id, booking.supervisor_id):
            raise AuthorizationException("Only the booked worker or the supervisor can cancel this booking")

        if not booking.is_confirmed():
            raise InvalidTransitionError(booking.status.value, BookingStatus.CANCELLED.value)

        await self.booking_repo.set_status(booking_id, BookingStatus.CANCELLED)
        logger.info(f"Booking {booking_id} cancelled by {actor_id}")
        return replace(booking, status=BookingStatus.CANCELLED)


def _booked_sort_key(booking: Booking) -> datetime:
    if booking.created_at is None:
        return datetime.min.replace(tzinfo=timezone.utc)
    return as_utc(booking.created_at)
