"""
Tests for the SQLAlchemy repositories (statement shape and error mapping)
"""
from datetime import date, datetime, timezone
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest
from sqlalchemy.dialects import postgresql
from sqlalchemy.exc import IntegrityError

from core.exceptions import DuplicateResourceException, RepositoryException
from domain.entities import JobApplication
from domain.enums import JobStatus, WageType
from infrastructure.persistence.models import JobPostingModel
from infrastructure.persistence.repositories.booking import (
    SQLAlchemyBookingRepository,
    build_worker_lock_statement,
)
from infrastructure.persistence.repositories.job_application import SQLAlchemyJobApplicationRepository
from infrastructure.persistence.repositories.job_posting import (
    SQLAlchemyJobPostingRepository,
    build_expire_statement,
    build_increment_statement,
)


def compile_sql(statement) -> str:
    return str(statement.compile(dialect=postgresql.dialect()))


class TestIncrementStatement:
    """The capacity guard lives in a single UPDATE"""

    def test_guarded_by_capacity_and_status(self):
        sql = compile_sql(build_increment_statement(uuid4()))

        assert sql.startswith("UPDATE job_postings SET")
        assert "job_postings.laborers_applied < job_postings.laborers_required" in sql
        assert "job_postings.status = " in sql
        assert "RETURNING" in sql

    def test_fill_transition_in_same_statement(self):
        sql = compile_sql(build_increment_statement(uuid4()))

        assert "laborers_applied=(job_postings.laborers_applied + " in sql
        assert sql.count("CASE WHEN") == 2
        assert "is_listed=CASE WHEN" in sql

    def test_expire_statement_only_touches_open_postings(self):
        sql = compile_sql(build_expire_statement(datetime(2026, 10, 19, tzinfo=timezone.utc)))

        assert sql.startswith("UPDATE job_postings SET status=")
        assert "job_postings.expires_at <= " in sql
        assert "is_listed" not in sql


class TestTableConstraints:

    def test_shift_length_upper_bound_is_not_hardcoded(self):
        constraint = next(
            c for c in JobPostingModel.__table__.constraints if c.name == "ck_job_postings_duration"
        )

        assert str(constraint.sqltext) == "duration_hours >= 1"


class TestWorkerLock:

    def test_lock_is_transaction_scoped_advisory_lock(self):
        sql = compile_sql(build_worker_lock_statement("labor-1"))

        assert sql.startswith("SELECT pg_advisory_xact_lock(hashtext(")

    @pytest.mark.asyncio
    async def test_lock_failure_is_wrapped(self):
        session = AsyncMock()
        session.execute.side_effect = Exception("lock timeout")

        with pytest.raises(RepositoryException):
            await SQLAlchemyBookingRepository(session).lock_worker("labor-1")


class TestJobPostingRepository:

    @pytest.mark.asyncio
    async def test_increment_returns_none_when_no_row_matched(self):
        session = AsyncMock()
        result = MagicMock()
        result.scalars.return_value.first.return_value = None
        session.execute.return_value = result

        repo = SQLAlchemyJobPostingRepository(session)

        assert await repo.increment_applicant_count(uuid4()) is None

    @pytest.mark.asyncio
    async def test_increment_maps_returned_row(self):
        job_id = uuid4()
        model = JobPostingModel(
            id=job_id,
            supervisor_id="supervisor-1",
            title="Brick loading",
            company=None,
            location_name="Sector 62",
            description="",
            wage_type=WageType.DAILY.value,
            wage_amount=Decimal("600"),
            required_date=date(2026, 10, 21),
            duration_hours=8,
            laborers_required=1,
            laborers_applied=1,
            status=JobStatus.FILLED.value,
            is_listed=False,
            expires_at=datetime(2026, 10, 26, tzinfo=timezone.utc),
            created_at=datetime(2026, 10, 19, tzinfo=timezone.utc),
        )
        session = AsyncMock()
        result = MagicMock()
        result.scalars.return_value.first.return_value = model
        session.execute.return_value = result

        job = await SQLAlchemyJobPostingRepository(session).increment_applicant_count(job_id)

        assert job.id == job_id
        assert job.status == JobStatus.FILLED
        assert job.is_listed is False
        assert job.is_full()

    @pytest.mark.asyncio
    async def test_database_errors_are_wrapped(self):
        session = AsyncMock()
        session.execute.side_effect = Exception("connection lost")

        repo = SQLAlchemyJobPostingRepository(session)

        with pytest.raises(RepositoryException):
            await repo.increment_applicant_count(uuid4())
        with pytest.raises(RepositoryException):
            await repo.list_jobs(status=JobStatus.OPEN, is_listed=True)


class TestJobApplicationRepository:

    @pytest.mark.asyncio
    async def test_unique_violation_becomes_duplicate(self):
        nested = MagicMock()
        nested.__aenter__ = AsyncMock(return_value=None)
        nested.__aexit__ = AsyncMock(return_value=False)

        session = MagicMock()
        session.begin_nested.return_value = nested
        session.flush = AsyncMock(side_effect=IntegrityError("INSERT", {}, Exception("duplicate key")))
        session.refresh = AsyncMock()

        repo = SQLAlchemyJobApplicationRepository(session)
        application = JobApplication(id=uuid4(), job_id=uuid4(), labor_id="labor-1", supervisor_id="supervisor-1")

        with pytest.raises(DuplicateResourceException):
            await repo.create(application)

        session.refresh.assert_not_awaited()
