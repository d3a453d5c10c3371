"""
Booking ORM Model
Denormalized booking snapshot; job_id is kept for reference only, not joined
"""
import uuid
from sqlalchemy import Column, Date, DateTime, Integer, Numeric, String
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.sql import func

from core.database import Base
from domain.enums import BookingStatus


class BookingModel(Base):
    """Booking table ORM model"""

    __tablename__ = "bookings"

    # Primary Key
    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4, index=True)

    job_id = Column(UUID(as_uuid=True), nullable=False, index=True)
    labor_id = Column(String(128), nullable=False, index=True)
    supervisor_id = Column(String(128), nullable=False, index=True)

    # Snapshot of the posting at confirmation time
    job_title = Column(String(255), nullable=False)
    location_name = Column(String(255), nullable=False)
    job_date = Column(Date, nullable=False, index=True)
    duration_hours = Column(Integer, nullable=False)
    wage_amount = Column(Numeric(12, 2), nullable=False)

    status = Column(String(20), nullable=False, default=BookingStatus.CONFIRMED.value, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    def __repr__(self):
        return f"<BookingModel {self.job_title} on {self.job_date} - {self.status}>"
