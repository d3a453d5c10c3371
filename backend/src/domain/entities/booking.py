"""
Booking Domain Entity
Denormalized snapshot of a confirmed work assignment.

Copied from the posting at confirmation time so booking history stays
readable after the posting is delisted or edited.
"""
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID

from ..enums import BookingStatus
from .job_application import JobApplication
from .job_posting import JobPosting


@dataclass(frozen=True)
class Booking:
    """Booking domain entity - immutable"""

    id: UUID
    job_id: UUID
    labor_id: str
    supervisor_id: str

    # Snapshot of the posting
    job_title: str
    location_name: str
    job_date: date
    duration_hours: int
    wage_amount: Decimal

    status: BookingStatus = BookingStatus.CONFIRMED
    created_at: Optional[datetime] = None

    @classmethod
    def from_application(
        cls,
        booking_id: UUID,
        job: JobPosting,
        application: JobApplication,
    ) -> "Booking":
        """Snapshot a posting for a confirmed application"""
        return cls(
            id=booking_id,
            job_id=job.id,
            labor_id=application.labor_id,
            supervisor_id=job.supervisor_id,
            job_title=job.title,
            location_name=job.location_name,
            job_date=job.required_date,
            duration_hours=job.duration_hours,
            wage_amount=job.wage_amount,
            status=BookingStatus.CONFIRMED,
        )

    def is_confirmed(self) -> bool:
        return self.status == BookingStatus.CONFIRMED

    def __str__(self) -> str:
        return f"Booking({self.job_title} on {self.job_date}, {self.duration_hours}h)"
