"""
Job Posting Domain Entity
Immutable supervisor job posting business object
"""
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID

from ..enums import JobStatus, WageType
from ..timeutils import as_utc, utcnow


@dataclass(frozen=True)
class JobPosting:
    """Job posting domain entity - immutable"""

    id: UUID
    supervisor_id: str
    title: str
    location_name: str
    description: str

    # Wage terms
    wage_type: WageType
    wage_amount: Decimal

    # Schedule
    required_date: date
    duration_hours: int

    # Capacity
    laborers_required: int
    laborers_applied: int = 0

    # Lifecycle
    status: JobStatus = JobStatus.OPEN
    is_listed: bool = True
    expires_at: Optional[datetime] = None

    company: Optional[str] = None
    created_at: Optional[datetime] = None

    def __post_init__(self):
        """Validate job posting data"""
        if not self.title or len(self.title.strip()) == 0:
            raise ValueError("Job title cannot be empty")

        if self.laborers_required < 1:
            raise ValueError("At least one laborer must be required")

        if not (0 <= self.laborers_applied <= self.laborers_required):
            raise ValueError("Applied count must be between 0 and laborers required")

    @property
    def slots_remaining(self) -> int:
        return self.laborers_required - self.laborers_applied

    def is_full(self) -> bool:
        """Check if every slot is taken"""
        return self.laborers_applied >= self.laborers_required

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        """Check if the posting is past its expiry time"""
        if self.expires_at is None:
            return False
        return as_utc(self.expires_at) <= as_utc(now or utcnow())

    def is_visible(self, now: Optional[datetime] = None) -> bool:
        """Check if the posting belongs in the public feed"""
        return (
            self.status == JobStatus.OPEN
            and self.is_listed
            and not self.is_expired(now)
        )

    def __str__(self) -> str:
        return f"JobPosting({self.title} on {self.required_date}, {self.laborers_applied}/{self.laborers_required})"
