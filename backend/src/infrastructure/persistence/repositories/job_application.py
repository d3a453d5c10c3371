"""
Job Application Repository Implementation
"""
from typing import Optional, List
from uuid import UUID

from sqlalchemy import select, and_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from loguru import logger

from domain.entities import JobApplication
from domain.enums import ApplicationStatus
from application.repositories.interfaces import IJobApplicationRepository
from infrastructure.persistence.models.job_application import JobApplicationModel
from core.exceptions import DuplicateResourceException, RepositoryException


class SQLAlchemyJobApplicationRepository(IJobApplicationRepository):
    def __init__(self, session: AsyncSession):
        self.session = session

    async def find(self, job_id: UUID, labor_id: str) -> Optional[JobApplication]:
        try:
            result = await self.session.execute(
                select(JobApplicationModel).where(
                    and_(
                        JobApplicationModel.job_id == job_id,
                        JobApplicationModel.labor_id == labor_id,
                    )
                )
            )
            model = result.scalars().first()
            return self._to_entity(model) if model else None

        except Exception as e:
            logger.error(f"Failed to find application job={job_id} labor={labor_id}: {str(e)}")
            raise RepositoryException(f"Failed to find application: {str(e)}")

    async def create(self, application: JobApplication) -> JobApplication:
        """Insert; the (job_id, labor_id) unique constraint rejects a second row"""
        model = self._to_model(application)
        try:
            # Savepoint so a duplicate does not poison the outer transaction
            async with self.session.begin_nested():
                self.session.add(model)
                await self.session.flush()
            await self.session.refresh(model)
            return self._to_entity(model)

        except IntegrityError:
            logger.info(f"Duplicate application job={application.job_id} labor={application.labor_id}")
            raise DuplicateResourceException(
                "JobApplication", "job_id,labor_id", f"{application.job_id},{application.labor_id}"
            )
        except Exception as e:
            logger.error(f"Failed to create application {application.id}: {str(e)}")
            raise RepositoryException(f"Failed to create application: {str(e)}")

    async def list_for_job(self, job_id: UUID) -> List[JobApplication]:
        try:
            result = await self.session.execute(
                select(JobApplicationModel)
                .where(JobApplicationModel.job_id == job_id)
                .order_by(JobApplicationModel.applied_at.desc())
            )
            return [self._to_entity(m) for m in result.scalars().all()]

        except Exception as e:
            logger.error(f"Failed to list applications for job {job_id}: {str(e)}")
            raise RepositoryException(f"Failed to list applications: {str(e)}")

    async def list_for_labor(self, labor_id: str) -> List[JobApplication]:
        try:
            result = await self.session.execute(
                select(JobApplicationModel)
                .where(JobApplicationModel.labor_id == labor_id)
                .order_by(JobApplicationModel.applied_at.desc())
            )
            return [self._to_entity(m) for m in result.scalars().all()]

        except Exception as e:
            logger.error(f"Failed to list applications for labor {labor_id}: {str(e)}")
            raise RepositoryException(f"Failed to list applications: {str(e)}")

    def _to_entity(self, model: JobApplicationModel) -> JobApplication:
        return JobApplication(
            id=model.id,
            job_id=model.job_id,
            labor_id=model.labor_id,
            supervisor_id=model.supervisor_id,
            status=ApplicationStatus(model.status),
            applied_at=model.applied_at,
        )

    def _to_model(self, entity: JobApplication) -> JobApplicationModel:
        model = JobApplicationModel(
            id=entity.id,
            job_id=entity.job_id,
            labor_id=entity.labor_id,
            supervisor_id=entity.supervisor_id,
            status=entity.status.value,
        )
        if entity.applied_at is not None:
            model.applied_at = entity.applied_at
        return model
