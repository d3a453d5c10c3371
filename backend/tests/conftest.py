"""
Shared fixtures
"""
import os

# Must be set before core.config is imported
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest  # noqa: E402

from application.services.booking import (  # noqa: E402
    BookingLedger,
    EligibilityEngine,
    JobPostingLifecycleManager,
    RatePolicyProvider,
)
from fakes import (  # noqa: E402
    InMemoryBookingRepository,
    InMemoryJobApplicationRepository,
    InMemoryJobPostingRepository,
    InMemoryRatePolicyRepository,
)


@pytest.fixture
def job_repo():
    return InMemoryJobPostingRepository()


@pytest.fixture
def application_repo():
    return InMemoryJobApplicationRepository()


@pytest.fixture
def booking_repo():
    return InMemoryBookingRepository()


@pytest.fixture
def rate_repo():
    return InMemoryRatePolicyRepository()


@pytest.fixture
def rate_provider(rate_repo):
    return RatePolicyProvider(rate_repo)


@pytest.fixture
def ledger(booking_repo, application_repo):
    return BookingLedger(booking_repo, application_repo)


@pytest.fixture
def lifecycle(job_repo, application_repo, rate_provider):
    return JobPostingLifecycleManager(job_repo, application_repo, rate_provider)


@pytest.fixture
def engine(job_repo, application_repo, ledger):
    return EligibilityEngine(job_repo, application_repo, ledger, weekly_limit=50, soft_limit=45)
