"""
Eligibility Engine
Decides whether a worker may take a slot on a job and, if so, books it
"""
from dataclasses import dataclass, replace
from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from application.repositories.interfaces import (
    IJobApplicationRepository,
    IJobPostingRepository,
)
from core.config import settings
from core.exceptions import (
    AlreadyAppliedError,
    BookingSystemError,
    DuplicateResourceException,
    JobFullError,
    JobUnavailableError,
    RepositoryException,
    ResourceNotFoundException,
    WeeklyLimitExceededError,
)
from core.logging_config import logger
from domain.entities import Booking, JobApplication, JobPosting
from domain.enums import ApplicationStatus, JobStatus
from domain.timeutils import utcnow

from .booking_ledger import BookingLedger


@dataclass(frozen=True)
class BookingConfirmation:
    """Successful application outcome"""

    application: JobApplication
    booking: Booking
    job: JobPosting  # posting after the slot was taken
    weekly_hours: int  # worker's confirmed hours for that week, this booking included
    near_weekly_limit: bool  # advisory only
    message: str = "Job booked successfully! You're all set."

    @property
    def job_filled(self) -> bool:
        return self.job.status == JobStatus.FILLED


class EligibilityEngine:
    """
    Worker-to-job matching.

    Checks run in order and stop at the first failure:

    1. duplicate application for the (job, worker) pair
    2. weekly hour ceiling for the week containing the job date
    3. free capacity on the posting

    On success the application (auto-confirmed), the slot increment and the
    booking snapshot are written through the same session. Every failure is
    raised, so the caller's transaction rolls back and none of the three writes
    is committed on its own.
    """

    def __init__(
        self,
        job_repo: IJobPostingRepository,
        application_repo: IJobApplicationRepository,
        ledger: BookingLedger,
        weekly_limit: Optional[int] = None,
        soft_limit: Optional[int] = None,
    ):
        self.job_repo = job_repo
        self.application_repo = application_repo
        self.ledger = ledger
        self.weekly_limit = weekly_limit or settings.WEEKLY_HOUR_LIMIT
        self.soft_limit = soft_limit or settings.WEEKLY_HOUR_SOFT_LIMIT

    async def try_apply(
        self,
        job_id: UUID,
        labor_id: str,
        now: Optional[datetime] = None,
    ) -> BookingConfirmation:
        """
        Apply a worker to a job.

        Args:
            job_id: Posting to apply to
            labor_id: Pre-authenticated worker identifier
            now: Application time (defaults to current UTC time)

        Returns:
            BookingConfirmation

        Raises:
            ResourceNotFoundException: no such posting
            AlreadyAppliedError: worker already applied to this posting
            WeeklyLimitExceededError: projected weekly hours over the ceiling
            JobUnavailableError: posting is expired or delisted
            JobFullError: no slot left (checked again atomically at write time)
            BookingSystemError: storage failed during the write path
        """
        now = now or utcnow()

        job = await self.job_repo.get_by_id(job_id)
        if not job:
            raise ResourceNotFoundException("JobPosting", str(job_id))

        if await self.application_repo.find(job.id, labor_id):
            logger.info(f"Worker {labor_id} already applied to job {job.id}")
            raise AlreadyAppliedError(job.id, labor_id)

        # Per-worker lock, released at commit or rollback
        await self.ledger.lock_worker(labor_id)
        current_hours = await self.ledger.weekly_hours(labor_id, job.required_date)
        projected_hours = current_hours + job.duration_hours
        if projected_hours > self.weekly_limit:
            logger.info(
                f"Worker {labor_id} blocked from job {job.id}: "
                f"{projected_hours}h projected, limit {self.weekly_limit}h"
            )
            raise WeeklyLimitExceededError(projected_hours, self.weekly_limit)

        self._check_capacity(job, now)

        try:
            return await self._book(job, labor_id, projected_hours, now)
        except RepositoryException as e:
            logger.error(f"Booking write failed for worker {labor_id} on job {job.id}: {e}")
            raise BookingSystemError(str(e)) from e

    def _check_capacity(self, job: JobPosting, now: datetime) -> None:
        if job.status == JobStatus.FILLED or job.is_full():
            raise JobFullError(job.id)

        if job.status != JobStatus.OPEN or job.is_expired(now):
            raise JobUnavailableError(job.id)

    async def _book(
        self,
        job: JobPosting,
        labor_id: str,
        projected_hours: int,
        now: datetime,
    ) -> BookingConfirmation:
        # Write order: application, slot, booking. A partial write can only
        # strand an application, never over-book the posting.
        try:
            application = await self.application_repo.create(
                JobApplication(
                    id=uuid4(),
                    job_id=job.id,
                    labor_id=labor_id,
                    supervisor_id=job.supervisor_id,
                    status=ApplicationStatus.CONFIRMED,
                    applied_at=now,
                )
            )
        except DuplicateResourceException:
            raise AlreadyAppliedError(job.id, labor_id)

        updated_job = await self.job_repo.increment_applicant_count(job.id)
        if updated_job is None:
            logger.info(f"Job {job.id} filled up before worker {labor_id} could take a slot")
            raise JobFullError(job.id)

        booking = await self.ledger.record(
            replace(Booking.from_application(uuid4(), job, application), created_at=now)
        )

        if updated_job.status == JobStatus.FILLED:
            logger.info(f"Job {job.id} is now filled ({updated_job.laborers_applied}/{updated_job.laborers_required})")

        logger.info(
            f"Worker {labor_id} booked on job {job.id} "
            f"({projected_hours}h this week)"
        )
        return BookingConfirmation(
            application=application,
            booking=booking,
            job=updated_job,
            weekly_hours=projected_hours,
            near_weekly_limit=projected_hours >= self.soft_limit,
        )
