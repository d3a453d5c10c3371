"""
Dependency Injection Container
Manages service and repository instances
"""
from sqlalchemy.ext.asyncio import AsyncSession
from fastapi import Depends

from core.database import get_db
from application.repositories.interfaces import (
    IBookingRepository,
    IJobApplicationRepository,
    IJobPostingRepository,
    IRatePolicyRepository,
)
from application.services.auth.interfaces import IJwtService
from application.services.booking import (
    BookingLedger,
    EligibilityEngine,
    JobPostingLifecycleManager,
    RatePolicyProvider,
)
from infrastructure.persistence.repositories.booking import SQLAlchemyBookingRepository
from infrastructure.persistence.repositories.job_application import SQLAlchemyJobApplicationRepository
from infrastructure.persistence.repositories.job_posting import SQLAlchemyJobPostingRepository
from infrastructure.persistence.repositories.rate_policy import SQLAlchemyRatePolicyRepository
from infrastructure.security.jwt_service import JwtService


# Singleton instances
_jwt_service: IJwtService | None = None


def get_jwt_service() -> IJwtService:
    """Get JWT service instance (singleton)"""
    global _jwt_service
    if _jwt_service is None:
        _jwt_service = JwtService()
    return _jwt_service


def get_job_posting_repository(
    session: AsyncSession = Depends(get_db)
) -> IJobPostingRepository:
    """Get job posting repository instance (per-request)"""
    return SQLAlchemyJobPostingRepository(session)


def get_job_application_repository(
    session: AsyncSession = Depends(get_db)
) -> IJobApplicationRepository:
    """Get job application repository instance (per-request)"""
    return SQLAlchemyJobApplicationRepository(session)


def get_booking_repository(
    session: AsyncSession = Depends(get_db)
) -> IBookingRepository:
    """Get booking repository instance (per-request)"""
    return SQLAlchemyBookingRepository(session)


def get_rate_policy_repository(
    session: AsyncSession = Depends(get_db)
) -> IRatePolicyRepository:
    """Get rate policy repository instance (per-request)"""
    return SQLAlchemyRatePolicyRepository(session)


def get_rate_policy_provider(
    rate_repo: IRatePolicyRepository = Depends(get_rate_policy_repository)
) -> RatePolicyProvider:
    return RatePolicyProvider(rate_repo)


def get_booking_ledger(
    booking_repo: IBookingRepository = Depends(get_booking_repository),
    application_repo: IJobApplicationRepository = Depends(get_job_application_repository),
) -> BookingLedger:
    return BookingLedger(booking_repo, application_repo)


def get_lifecycle_manager(
    job_repo: IJobPostingRepository = Depends(get_job_posting_repository),
    application_repo: IJobApplicationRepository = Depends(get_job_application_repository),
    rate_provider: RatePolicyProvider = Depends(get_rate_policy_provider),
) -> JobPostingLifecycleManager:
    """Get job posting lifecycle manager (per-request)"""
    return JobPostingLifecycleManager(job_repo, application_repo, rate_provider)


def get_eligibility_engine(
    job_repo: IJobPostingRepository = Depends(get_job_posting_repository),
    application_repo: IJobApplicationRepository = Depends(get_job_application_repository),
    ledger: BookingLedger = Depends(get_booking_ledger),
) -> EligibilityEngine:
    """Get eligibility engine (per-request, shares the request session)"""
    return EligibilityEngine(job_repo, application_repo, ledger)
