"""
Job Posting Lifecycle Manager
Owns posting creation, listing visibility and status transitions
"""
from dataclasses import dataclass, replace
from datetime import date, datetime, timedelta, timezone
from decimal import Decimal
from typing import List, Optional
from uuid import UUID, uuid4

from application.repositories.interfaces import (
    IJobApplicationRepository,
    IJobPostingRepository,
)
from core.config import settings
from core.exceptions import (
    AuthorizationException,
    InvalidTransitionError,
    ResourceNotFoundException,
    ValidationException,
)
from core.logging_config import logger
from domain.entities import JobApplication, JobPosting
from domain.enums import JobStatus, WageType, can_transition
from domain.timeutils import as_utc, utcnow

from .rate_policy_provider import RatePolicyProvider
from .wage_compliance import check_wage


@dataclass(frozen=True)
class JobPostingDraft:
    """Supervisor input for a new posting"""

    title: str
    location_name: str
    description: str
    wage_type: WageType
    wage_amount: Decimal
    required_date: date
    duration_hours: int
    laborers_required: int
    company: Optional[str] = None
    expires_at: Optional[datetime] = None


class JobPostingLifecycleManager:
    """
    Job posting lifecycle.

    States: open -> filled (capacity reached, done by the eligibility engine),
    open -> expired (lazily, whenever the feed is read), open|filled -> delisted
    (supervisor soft delete). ``is_listed`` is an independent visibility flag.
    """

    def __init__(
        self,
        job_repo: IJobPostingRepository,
        application_repo: IJobApplicationRepository,
        rate_provider: RatePolicyProvider,
    ):
        self.job_repo = job_repo
        self.application_repo = application_repo
        self.rate_provider = rate_provider

    async def create(
        self,
        supervisor_id: str,
        draft: JobPostingDraft,
        now: Optional[datetime] = None,
    ) -> JobPosting:
        """
        Validate and publish a new posting.

        Args:
            supervisor_id: Pre-authenticated creator identifier
            draft: Posting details
            now: Creation time (defaults to current UTC time)

        Returns:
            Persisted JobPosting (open, listed, no applicants)

        Raises:
            ValidationException: malformed schedule, capacity or expiry
            WageBelowMinimumError: offer is under the current minimum wage
        """
        now = now or utcnow()
        self._validate_draft(draft, now)

        min_wage = await self.rate_provider.get_min_wage_per_hour()
        check_wage(draft.wage_type, draft.wage_amount, draft.duration_hours, min_wage)

        job = JobPosting(
            id=uuid4(),
            supervisor_id=supervisor_id,
            title=draft.title.strip(),
            company=draft.company,
            location_name=draft.location_name,
            description=draft.description,
            wage_type=WageType(draft.wage_type),
            wage_amount=Decimal(draft.wage_amount),
            required_date=draft.required_date,
            duration_hours=draft.duration_hours,
            laborers_required=draft.laborers_required,
            laborers_applied=0,
            status=JobStatus.OPEN,
            is_listed=True,
            expires_at=draft.expires_at or now + timedelta(days=settings.DEFAULT_JOB_EXPIRY_DAYS),
            created_at=now,
        )

        created = await self.job_repo.create(job)
        logger.info(
            f"Job {created.id} posted by supervisor {supervisor_id}: "
            f"{created.title} on {created.required_date} ({created.laborers_required} slots)"
        )
        return created

    async def list_open_jobs(self, now: Optional[datetime] = None) -> List[JobPosting]:
        """
        Public job feed.

        Expires stale open postings first, then returns open, listed,
        unexpired postings newest first.
        """
        now = now or utcnow()

        expired_count = await self.job_repo.expire_stale(now)
        if expired_count:
            logger.info(f"Expired {expired_count} stale job postings")

        jobs = await self.job_repo.list_jobs(status=JobStatus.OPEN, is_listed=True)
        visible = [job for job in jobs if job.is_visible(now)]
        visible.sort(key=_created_sort_key, reverse=True)
        return visible

    async def get_job(self, job_id: UUID) -> JobPosting:
        job = await self.job_repo.get_by_id(job_id)
        if not job:
            raise ResourceNotFoundException("JobPosting", str(job_id))
        return job

    async def list_supervisor_jobs(self, supervisor_id: str) -> List[JobPosting]:
        """Every posting a supervisor created, newest first"""
        jobs = await self.job_repo.list_jobs(supervisor_id=supervisor_id)
        return sorted(jobs, key=_created_sort_key, reverse=True)

    async def list_job_applications(self, job_id: UUID, supervisor_id: str) -> List[JobApplication]:
        await self._get_owned_job(job_id, supervisor_id)
        return await self.application_repo.list_for_job(job_id)

    async def toggle_listing(self, job_id: UUID, supervisor_id: str, listed: bool) -> JobPosting:
        """
        Show or hide a posting in the public feed.

        Only the visibility flag changes; status and booked workers are untouched.
        A filled posting stays unlisted.
        """
        job = await self._get_owned_job(job_id, supervisor_id)
        if job.status == JobStatus.DELISTED:
            raise ValidationException("is_listed", "a deleted job cannot be relisted")
        if listed and (job.status == JobStatus.FILLED or job.is_full()):
            raise ValidationException("is_listed", "a filled job cannot be relisted")

        await self.job_repo.set_listed(job_id, listed)
        logger.info(f"Job {job_id} listing set to {listed} by {supervisor_id}")
        return replace(job, is_listed=listed)

    async def delete(self, job_id: UUID, supervisor_id: str) -> JobPosting:
        """
        Soft delete: the posting becomes delisted but stays on record so its
        applications and bookings remain resolvable.
        """
        job = await self._get_owned_job(job_id, supervisor_id)
        if not can_transition(job.status, JobStatus.DELISTED):
            raise InvalidTransitionError(job.status.value, JobStatus.DELISTED.value)

        await self.job_repo.set_status(job_id, JobStatus.DELISTED, is_listed=False)
        logger.info(f"Job {job_id} delisted by {supervisor_id}")
        return replace(job, status=JobStatus.DELISTED, is_listed=False)

    async def _get_owned_job(self, job_id: UUID, supervisor_id: str) -> JobPosting:
        job = await self.get_job(job_id)
        if job.supervisor_id != supervisor_id:
            logger.warning(f"Supervisor {supervisor_id} tried to modify job {job_id} they do not own")
            raise AuthorizationException("Only the supervisor who posted this job can change it")
        return job

    def _validate_draft(self, draft: JobPostingDraft, now: datetime) -> None:
        if not draft.title or not draft.title.strip():
            raise ValidationException("title", "cannot be empty")

        if not (1 <= draft.duration_hours <= settings.MAX_SHIFT_HOURS):
            raise ValidationException(
                "duration_hours",
                f"must be between 1 and {settings.MAX_SHIFT_HOURS} hours for worker safety",
            )

        if draft.laborers_required < 1:
            raise ValidationException("laborers_required", "must be at least 1")

        if Decimal(draft.wage_amount) <= 0:
            raise ValidationException("wage_amount", "must be positive")

        if draft.expires_at is not None and as_utc(draft.expires_at) <= as_utc(now):
            raise ValidationException("expires_at", "must be in the future")


def _created_sort_key(job: JobPosting) -> datetime:
    if job.created_at is None:
        return datetime.min.replace(tzinfo=timezone.utc)
    return as_utc(job.created_at)
