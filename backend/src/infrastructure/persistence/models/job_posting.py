"""
JobPosting Model (Persistence)
Supervisor job postings with slot counter and lifecycle status
"""
import uuid
from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    Date,
    DateTime,
    Index,
    Integer,
    Numeric,
    String,
    Text,
)
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.sql import func

from core.database import Base
from domain.enums import JobStatus


class JobPostingModel(Base):
    __tablename__ = "job_postings"

    # Primary Key
    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4, index=True)

    # Owner (identity provider uid)
    supervisor_id = Column(String(128), nullable=False, index=True)

    # Job Details
    title = Column(String(255), nullable=False)
    company = Column(String(255), nullable=True)
    location_name = Column(String(255), nullable=False)
    description = Column(Text, nullable=False, default="")

    # Wage
    wage_type = Column(String(20), nullable=False)  # "hourly" or "daily"
    wage_amount = Column(Numeric(12, 2), nullable=False)

    # Schedule
    required_date = Column(Date, nullable=False, index=True)
    duration_hours = Column(Integer, nullable=False)

    # Capacity
    laborers_required = Column(Integer, nullable=False)
    laborers_applied = Column(Integer, nullable=False, default=0)

    # Lifecycle
    status = Column(String(20), nullable=False, default=JobStatus.OPEN.value)
    is_listed = Column(Boolean, nullable=False, default=True)
    expires_at = Column(DateTime(timezone=True), nullable=False)

    # Timestamps
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    # Constraints
    __table_args__ = (
        CheckConstraint("laborers_required >= 1", name="ck_job_postings_required_positive"),
        CheckConstraint(
            "laborers_applied >= 0 AND laborers_applied <= laborers_required",
            name="ck_job_postings_applied_within_capacity",
        ),
        CheckConstraint("duration_hours >= 1", name="ck_job_postings_duration"),
        CheckConstraint("wage_amount > 0", name="ck_job_postings_wage_positive"),
        Index("ix_job_postings_feed", "status", "is_listed"),
    )

    def __repr__(self):
        return f"<JobPostingModel {self.title} ({self.laborers_applied}/{self.laborers_required})>"
