"""
Job Posting Repository Implementation
SQLAlchemy-based job posting repository
"""
from datetime import datetime
from typing import Optional, List
from uuid import UUID

from sqlalchemy import select, update, and_, case
from sqlalchemy.ext.asyncio import AsyncSession
from loguru import logger

from domain.entities import JobPosting
from domain.enums import JobStatus, WageType
from application.repositories.interfaces import IJobPostingRepository
from infrastructure.persistence.models.job_posting import JobPostingModel
from core.exceptions import RepositoryException


def build_increment_statement(job_id: UUID):
    """
    Conditional slot claim.

    The WHERE clause is the capacity guard, so two concurrent callers can
    never both take the last slot. The fill transition is applied in the
    same statement. SET expressions read the pre-update row.
    """
    will_fill = JobPostingModel.laborers_applied + 1 >= JobPostingModel.laborers_required
    return (
        update(JobPostingModel)
        .where(
            and_(
                JobPostingModel.id == job_id,
                JobPostingModel.status == JobStatus.OPEN.value,
                JobPostingModel.laborers_applied < JobPostingModel.laborers_required,
            )
        )
        .values(
            laborers_applied=JobPostingModel.laborers_applied + 1,
            status=case((will_fill, JobStatus.FILLED.value), else_=JobPostingModel.status),
            is_listed=case((will_fill, False), else_=JobPostingModel.is_listed),
        )
        .returning(JobPostingModel)
        .execution_options(synchronize_session=False, populate_existing=True)
    )


def build_expire_statement(now: datetime):
    """Lazy expiry of open postings past their deadline"""
    return (
        update(JobPostingModel)
        .where(
            and_(
                JobPostingModel.status == JobStatus.OPEN.value,
                JobPostingModel.expires_at <= now,
            )
        )
        .values(status=JobStatus.EXPIRED.value)
        .execution_options(synchronize_session=False)
    )


class SQLAlchemyJobPostingRepository(IJobPostingRepository):
    """SQLAlchemy implementation of job posting repository"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, job_id: UUID) -> Optional[JobPosting]:
        """Get job posting by ID"""
        try:
            result = await self.session.execute(
                select(JobPostingModel)
                .where(JobPostingModel.id == job_id)
                .execution_options(populate_existing=True)
            )
            model = result.scalar_one_or_none()

            if model:
                return self._to_entity(model)
            return None

        except Exception as e:
            logger.error(f"Failed to get job posting by ID {job_id}: {str(e)}")
            raise RepositoryException(f"Failed to get job posting: {str(e)}")

    async def create(self, job: JobPosting) -> JobPosting:
        """Create new job posting"""
        try:
            model = self._to_model(job)
            self.session.add(model)
            await self.session.flush()
            await self.session.refresh(model)

            logger.info(f"Created job posting {model.id} for supervisor {model.supervisor_id}")
            return self._to_entity(model)

        except Exception as e:
            logger.error(f"Failed to create job posting '{job.title}': {str(e)}")
            raise RepositoryException(f"Failed to create job posting: {str(e)}")

    async def list_jobs(
        self,
        status: Optional[JobStatus] = None,
        is_listed: Optional[bool] = None,
        supervisor_id: Optional[str] = None,
    ) -> List[JobPosting]:
        """List job postings matching the filters, newest first"""
        try:
            query = select(JobPostingModel)

            conditions = []
            if status is not None:
                conditions.append(JobPostingModel.status == status.value)
            if is_listed is not None:
                conditions.append(JobPostingModel.is_listed == is_listed)
            if supervisor_id is not None:
                conditions.append(JobPostingModel.supervisor_id == supervisor_id)

            if conditions:
                query = query.where(and_(*conditions))

            query = query.order_by(JobPostingModel.created_at.desc())

            result = await self.session.execute(query.execution_options(populate_existing=True))
            models = result.scalars().all()

            return [self._to_entity(m) for m in models]

        except Exception as e:
            logger.error(f"Failed to list job postings: {str(e)}")
            raise RepositoryException(f"Failed to list job postings: {str(e)}")

    async def increment_applicant_count(self, job_id: UUID) -> Optional[JobPosting]:
        """Take one slot; None when the posting is full or not open"""
        try:
            result = await self.session.execute(build_increment_statement(job_id))
            model = result.scalars().first()

            if model is None:
                logger.info(f"No slot available on job posting {job_id}")
                return None

            if model.status == JobStatus.FILLED.value:
                logger.info(f"Job posting {job_id} filled ({model.laborers_applied}/{model.laborers_required})")
            return self._to_entity(model)

        except Exception as e:
            logger.error(f"Failed to increment applicants for job posting {job_id}: {str(e)}")
            raise RepositoryException(f"Failed to update applicant count: {str(e)}")

    async def set_status(self, job_id: UUID, status: JobStatus, is_listed: bool) -> bool:
        """Set lifecycle status and listing flag together"""
        try:
            result = await self.session.execute(
                update(JobPostingModel)
                .where(JobPostingModel.id == job_id)
                .values(status=status.value, is_listed=is_listed)
                .execution_options(synchronize_session=False)
            )
            await self.session.flush()
            return result.rowcount > 0

        except Exception as e:
            logger.error(f"Failed to set status of job posting {job_id}: {str(e)}")
            raise RepositoryException(f"Failed to update job posting: {str(e)}")

    async def set_listed(self, job_id: UUID, is_listed: bool) -> bool:
        """Flip the listing flag only"""
        try:
            result = await self.session.execute(
                update(JobPostingModel)
                .where(JobPostingModel.id == job_id)
                .values(is_listed=is_listed)
                .execution_options(synchronize_session=False)
            )
            await self.session.flush()
            return result.rowcount > 0

        except Exception as e:
            logger.error(f"Failed to set listing of job posting {job_id}: {str(e)}")
            raise RepositoryException(f"Failed to update job posting: {str(e)}")

    async def expire_stale(self, now: datetime) -> int:
        """Move open postings past expiry to expired"""
        try:
            result = await self.session.execute(build_expire_statement(now))
            count = result.rowcount or 0
            if count:
                logger.info(f"Expired {count} stale job postings")
            return count

        except Exception as e:
            logger.error(f"Failed to expire stale job postings: {str(e)}")
            raise RepositoryException(f"Failed to expire job postings: {str(e)}")

    def _to_entity(self, model: JobPostingModel) -> JobPosting:
        """Convert ORM model to domain entity"""
        return JobPosting(
            id=model.id,
            supervisor_id=model.supervisor_id,
            title=model.title,
            company=model.company,
            location_name=model.location_name,
            description=model.description or "",
            wage_type=WageType(model.wage_type),
            wage_amount=model.wage_amount,
            required_date=model.required_date,
            duration_hours=model.duration_hours,
            laborers_required=model.laborers_required,
            laborers_applied=model.laborers_applied,
            status=JobStatus(model.status),
            is_listed=model.is_listed,
            expires_at=model.expires_at,
            created_at=model.created_at,
        )

    def _to_model(self, entity: JobPosting) -> JobPostingModel:
        """Convert domain entity to ORM model"""
        model = JobPostingModel(
            id=entity.id,
            supervisor_id=entity.supervisor_id,
            title=entity.title,
            company=entity.company,
            location_name=entity.location_name,
            description=entity.description,
            wage_type=entity.wage_type.value,
            wage_amount=entity.wage_amount,
            required_date=entity.required_date,
            duration_hours=entity.duration_hours,
            laborers_required=entity.laborers_required,
            laborers_applied=entity.laborers_applied,
            status=entity.status.value,
            is_listed=entity.is_listed,
            expires_at=entity.expires_at,
        )
        if entity.created_at is not None:
            model.created_at = entity.created_at
        return model
