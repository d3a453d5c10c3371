"""
JobApplication ORM Model
SQLAlchemy model for worker applications
"""
import uuid
from sqlalchemy import Column, String, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.sql import func

from core.database import Base
from domain.enums import ApplicationStatus


class JobApplicationModel(Base):
    """Job application table ORM model"""

    __tablename__ = "job_applications"

    # Primary Key
    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4, index=True)

    # References
    job_id = Column(UUID(as_uuid=True), ForeignKey("job_postings.id"), nullable=False, index=True)
    labor_id = Column(String(128), nullable=False, index=True)
    supervisor_id = Column(String(128), nullable=False, index=True)

    # Application Details
    status = Column(String(20), nullable=False, default=ApplicationStatus.CONFIRMED.value)
    applied_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    # One application per worker per job
    __table_args__ = (
        UniqueConstraint("job_id", "labor_id", name="uq_job_application_job_labor"),
    )

    def __repr__(self):
        return f"<JobApplicationModel {self.id} - {self.status}>"
