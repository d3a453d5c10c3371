"""
Repository Interfaces (Abstract Base Classes)
Define contracts for data access without implementation details
"""
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional, List
from uuid import UUID

from domain.entities import JobPosting, JobApplication, Booking, RatePolicy
from domain.enums import JobStatus, BookingStatus


class IJobPostingRepository(ABC):
    """Job posting repository interface"""

    @abstractmethod
    async def get_by_id(self, job_id: UUID) -> Optional[JobPosting]:
        """Get job posting by ID"""
        pass

    @abstractmethod
    async def create(self, job: JobPosting) -> JobPosting:
        """Persist a new job posting"""
        pass

    @abstractmethod
    async def list_jobs(
        self,
        status: Optional[JobStatus] = None,
        is_listed: Optional[bool] = None,
        supervisor_id: Optional[str] = None,
    ) -> List[JobPosting]:
        """List job postings matching the filters, newest first"""
        pass

    @abstractmethod
    async def increment_applicant_count(self, job_id: UUID) -> Optional[JobPosting]:
        """
        Take one slot on an open posting.

        Must be atomic with respect to concurrent callers: the increment only
        happens while ``laborers_applied < laborers_required`` and the posting
        is open, and the fill transition (status=filled, is_listed=False) is
        applied in the same statement when the last slot is taken.

        Returns:
            The updated posting, or None when no slot was available
        """
        pass

    @abstractmethod
    async def set_status(self, job_id: UUID, status: JobStatus, is_listed: bool) -> bool:
        """Set lifecycle status and listing flag together"""
        pass

    @abstractmethod
    async def set_listed(self, job_id: UUID, is_listed: bool) -> bool:
        """Flip the listing flag only"""
        pass

    @abstractmethod
    async def expire_stale(self, now: datetime) -> int:
        """Move open postings whose expiry has passed to expired; returns the count"""
        pass


class IJobApplicationRepository(ABC):
    """Job application repository interface"""

    @abstractmethod
    async def find(self, job_id: UUID, labor_id: str) -> Optional[JobApplication]:
        """Find the application for a (job, worker) pair"""
        pass

    @abstractmethod
    async def create(self, application: JobApplication) -> JobApplication:
        """
        Persist a new application.

        Raises:
            DuplicateResourceException: an application for the pair already exists
        """
        pass

    @abstractmethod
    async def list_for_job(self, job_id: UUID) -> List[JobApplication]:
        """All applications for a posting, newest first"""
        pass

    @abstractmethod
    async def list_for_labor(self, labor_id: str) -> List[JobApplication]:
        """All applications by a worker, newest first"""
        pass


class IBookingRepository(ABC):
    """Booking repository interface"""

    @abstractmethod
    async def lock_worker(self, labor_id: str) -> None:
        """Serialize a worker's bookings until the current transaction ends"""
        pass

    @abstractmethod
    async def create(self, booking: Booking) -> Booking:
        """Persist a new booking"""
        pass

    @abstractmethod
    async def get_by_id(self, booking_id: UUID) -> Optional[Booking]:
        """Get booking by ID"""
        pass

    @abstractmethod
    async def list_bookings(
        self,
        labor_id: Optional[str] = None,
        supervisor_id: Optional[str] = None,
        status: Optional[BookingStatus] = None,
    ) -> List[Booking]:
        """List bookings for a worker or a supervisor (unordered)"""
        pass

    @abstractmethod
    async def set_status(self, booking_id: UUID, status: BookingStatus) -> bool:
        """Update booking status"""
        pass


class IRatePolicyRepository(ABC):
    """Rate policy repository interface"""

    @abstractmethod
    async def get(self) -> Optional[RatePolicy]:
        """Get the current rate policy record, if one exists"""
        pass

    @abstractmethod
    async def upsert(self, policy: RatePolicy) -> RatePolicy:
        """Create or replace the rate policy record"""
        pass
