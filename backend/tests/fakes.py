"""
In-memory repository fakes for service and API tests
"""
import asyncio
from dataclasses import replace
from datetime import date, datetime, timedelta, timezone
from decimal import Decimal
from typing import Dict, List, Optional, Tuple
from uuid import UUID, uuid4

from application.repositories.interfaces import (
    IBookingRepository,
    IJobApplicationRepository,
    IJobPostingRepository,
    IRatePolicyRepository,
)
from core.exceptions import DuplicateResourceException
from domain.entities import Booking, JobApplication, JobPosting, RatePolicy
from domain.enums import BookingStatus, JobStatus, WageType
from domain.timeutils import as_utc


# Monday
WEEK_START = date(2026, 10, 19)
NOW = datetime(2026, 10, 19, 8, 0, tzinfo=timezone.utc)


def make_job(**overrides) -> JobPosting:
    fields = dict(
        id=uuid4(),
        supervisor_id="supervisor-1",
        title="Brick loading",
        location_name="Sector 62",
        description="Load bricks",
        wage_type=WageType.DAILY,
        wage_amount=Decimal("600"),
        required_date=WEEK_START + timedelta(days=2),
        duration_hours=8,
        laborers_required=3,
        laborers_applied=0,
        status=JobStatus.OPEN,
        is_listed=True,
        expires_at=NOW + timedelta(days=7),
        created_at=NOW,
    )
    fields.update(overrides)
    return JobPosting(**fields)


def make_booking(labor_id: str, job_date: date, duration_hours: int, **overrides) -> Booking:
    fields = dict(
        id=uuid4(),
        job_id=uuid4(),
        labor_id=labor_id,
        supervisor_id="supervisor-1",
        job_title="Earlier job",
        location_name="Sector 18",
        job_date=job_date,
        duration_hours=duration_hours,
        wage_amount=Decimal("500"),
        status=BookingStatus.CONFIRMED,
        created_at=NOW,
    )
    fields.update(overrides)
    return Booking(**fields)


class InMemoryJobPostingRepository(IJobPostingRepository):
    def __init__(self):
        self.jobs: Dict[UUID, JobPosting] = {}

    def add(self, job: JobPosting) -> JobPosting:
        self.jobs[job.id] = job
        return job

    async def get_by_id(self, job_id: UUID) -> Optional[JobPosting]:
        # Yield so concurrent callers interleave between read and write
        await asyncio.sleep(0)
        return self.jobs.get(job_id)

    async def create(self, job: JobPosting) -> JobPosting:
        if job.created_at is None:
            job = replace(job, created_at=datetime.now(timezone.utc))
        self.jobs[job.id] = job
        return job

    async def list_jobs(
        self,
        status: Optional[JobStatus] = None,
        is_listed: Optional[bool] = None,
        supervisor_id: Optional[str] = None,
    ) -> List[JobPosting]:
        jobs = list(self.jobs.values())
        if status is not None:
            jobs = [j for j in jobs if j.status == status]
        if is_listed is not None:
            jobs = [j for j in jobs if j.is_listed == is_listed]
        if supervisor_id is not None:
            jobs = [j for j in jobs if j.supervisor_id == supervisor_id]
        return jobs

    async def increment_applicant_count(self, job_id: UUID) -> Optional[JobPosting]:
        # No await between check and write: atomic on the event loop
        job = self.jobs.get(job_id)
        if job is None or job.status != JobStatus.OPEN or job.is_full():
            return None

        applied = job.laborers_applied + 1
        if applied >= job.laborers_required:
            job = replace(job, laborers_applied=applied, status=JobStatus.FILLED, is_listed=False)
        else:
            job = replace(job, laborers_applied=applied)
        self.jobs[job_id] = job
        return job

    async def set_status(self, job_id: UUID, status: JobStatus, is_listed: bool) -> bool:
        job = self.jobs.get(job_id)
        if job is None:
            return False
        self.jobs[job_id] = replace(job, status=status, is_listed=is_listed)
        return True

    async def set_listed(self, job_id: UUID, is_listed: bool) -> bool:
        job = self.jobs.get(job_id)
        if job is None:
            return False
        self.jobs[job_id] = replace(job, is_listed=is_listed)
        return True

    async def expire_stale(self, now: datetime) -> int:
        count = 0
        for job_id, job in list(self.jobs.items()):
            if job.status == JobStatus.OPEN and job.expires_at and as_utc(job.expires_at) <= as_utc(now):
                self.jobs[job_id] = replace(job, status=JobStatus.EXPIRED)
                count += 1
        return count


class InMemoryJobApplicationRepository(IJobApplicationRepository):
    def __init__(self):
        self.applications: Dict[Tuple[UUID, str], JobApplication] = {}

    async def find(self, job_id: UUID, labor_id: str) -> Optional[JobApplication]:
        await asyncio.sleep(0)
        return self.applications.get((job_id, labor_id))

    async def create(self, application: JobApplication) -> JobApplication:
        key = (application.job_id, application.labor_id)
        if key in self.applications:
            raise DuplicateResourceException("JobApplication", "job_id,labor_id", str(key))
        self.applications[key] = application
        return application

    async def list_for_job(self, job_id: UUID) -> List[JobApplication]:
        found = [a for a in self.applications.values() if a.job_id == job_id]
        return sorted(found, key=lambda a: a.applied_at, reverse=True)

    async def list_for_labor(self, labor_id: str) -> List[JobApplication]:
        found = [a for a in self.applications.values() if a.labor_id == labor_id]
        return sorted(found, key=lambda a: a.applied_at, reverse=True)


class InMemoryBookingRepository(IBookingRepository):
    def __init__(self):
        self.bookings: Dict[UUID, Booking] = {}
        self.locked_workers: List[str] = []

    def add(self, booking: Booking) -> Booking:
        self.bookings[booking.id] = booking
        return booking

    async def lock_worker(self, labor_id: str) -> None:
        self.locked_workers.append(labor_id)

    async def create(self, booking: Booking) -> Booking:
        self.bookings[booking.id] = booking
        return booking

    async def get_by_id(self, booking_id: UUID) -> Optional[Booking]:
        return self.bookings.get(booking_id)

    async def list_bookings(
        self,
        labor_id: Optional[str] = None,
        supervisor_id: Optional[str] = None,
        status: Optional[BookingStatus] = None,
    ) -> List[Booking]:
        found = list(self.bookings.values())
        if labor_id is not None:
            found = [b for b in found if b.labor_id == labor_id]
        if supervisor_id is not None:
            found = [b for b in found if b.supervisor_id == supervisor_id]
        if status is not None:
            found = [b for b in found if b.status == status]
        return found

    async def set_status(self, booking_id: UUID, status: BookingStatus) -> bool:
        booking = self.bookings.get(booking_id)
        if booking is None:
            return False
        self.bookings[booking_id] = replace(booking, status=status)
        return True


class InMemoryRatePolicyRepository(IRatePolicyRepository):
    def __init__(self, policy: Optional[RatePolicy] = None):
        self.policy = policy

    async def get(self) -> Optional[RatePolicy]:
        return self.policy

    async def upsert(self, policy: RatePolicy) -> RatePolicy:
        self.policy = policy
        return policy
