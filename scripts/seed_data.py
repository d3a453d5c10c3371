"""
Seed Data Script
Populates database with a rate policy and sample postings for local development

Usage (from the repository root):
    python scripts/seed_data.py
"""
import asyncio
import sys
from datetime import timedelta
from decimal import Decimal
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "backend" / "src"))

from loguru import logger  # noqa: E402

from core.database import get_db_session, init_db, close_db  # noqa: E402
from application.services.booking import (  # noqa: E402
    JobPostingDraft,
    JobPostingLifecycleManager,
    RatePolicyProvider,
)
from domain.enums import UserRole, WageType  # noqa: E402
from domain.timeutils import utcnow  # noqa: E402
from infrastructure.persistence.repositories.job_application import SQLAlchemyJobApplicationRepository  # noqa: E402
from infrastructure.persistence.repositories.job_posting import SQLAlchemyJobPostingRepository  # noqa: E402
from infrastructure.persistence.repositories.rate_policy import SQLAlchemyRatePolicyRepository  # noqa: E402
from infrastructure.security.jwt_service import JwtService  # noqa: E402


SUPERVISOR_ID = "seed-supervisor-1"
LABOR_ID = "seed-labor-1"


def sample_drafts():
    today = utcnow().date()
    return [
        JobPostingDraft(
            title="Brick loading",
            company="Sharma Constructions",
            location_name="Sector 62, Noida",
            description="Load and stack bricks at the site entrance.",
            wage_type=WageType.DAILY,
            wage_amount=Decimal("600"),
            required_date=today + timedelta(days=2),
            duration_hours=8,
            laborers_required=5,
        ),
        JobPostingDraft(
            title="Warehouse unloading",
            location_name="Okhla Phase 2",
            description="Unload two trucks of cartons.",
            wage_type=WageType.HOURLY,
            wage_amount=Decimal("75"),
            required_date=today + timedelta(days=3),
            duration_hours=6,
            laborers_required=3,
        ),
        JobPostingDraft(
            title="Event setup",
            location_name="Pragati Maidan",
            description="Tent and chair setup, single helper.",
            wage_type=WageType.DAILY,
            wage_amount=Decimal("480"),
            required_date=today + timedelta(days=1),
            duration_hours=8,
            laborers_required=1,
        ),
    ]


async def seed_database():
    """Seed database with test data"""
    await init_db()

    async with get_db_session() as session:
        rate_provider = RatePolicyProvider(SQLAlchemyRatePolicyRepository(session))
        await rate_provider.set_min_wage_per_hour(Decimal("60"))

        lifecycle = JobPostingLifecycleManager(
            SQLAlchemyJobPostingRepository(session),
            SQLAlchemyJobApplicationRepository(session),
            rate_provider,
        )
        for draft in sample_drafts():
            job = await lifecycle.create(SUPERVISOR_ID, draft)
            logger.info(f"Seeded job {job.id}: {job.title}")

    jwt_service = JwtService()
    logger.info(f"Supervisor token: {jwt_service.create_access_token(SUPERVISOR_ID, UserRole.SUPERVISOR)}")
    logger.info(f"Labor token: {jwt_service.create_access_token(LABOR_ID, UserRole.LABOR)}")

    await close_db()
    logger.info("✅ Database seeded")


if __name__ == "__main__":
    asyncio.run(seed_database())
