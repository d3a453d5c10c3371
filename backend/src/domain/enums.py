"""
Domain Enums
Business enumerations for the marketplace
"""
from enum import Enum
from typing import Dict, FrozenSet


class UserRole(str, Enum):
    """Who is acting on the marketplace"""
    LABOR = "labor"
    SUPERVISOR = "supervisor"


class WageType(str, Enum):
    """How the offered wage is quoted"""
    HOURLY = "hourly"
    DAILY = "daily"


class JobStatus(str, Enum):
    """Job posting lifecycle status"""
    OPEN = "open"
    FILLED = "filled"
    EXPIRED = "expired"
    DELISTED = "delisted"


class ApplicationStatus(str, Enum):
    """Status of a worker's application"""
    PENDING = "pending"
    CONFIRMED = "confirmed"
    REJECTED = "rejected"


class BookingStatus(str, Enum):
    """Status of a confirmed work assignment"""
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"


# Allowed job status transitions. Expiry is time-based, fill is capacity-based,
# delisting is an explicit supervisor soft delete.
VALID_JOB_TRANSITIONS: Dict[JobStatus, FrozenSet[JobStatus]] = {
    JobStatus.OPEN: frozenset({JobStatus.FILLED, JobStatus.EXPIRED, JobStatus.DELISTED}),
    JobStatus.FILLED: frozenset({JobStatus.DELISTED}),
    JobStatus.EXPIRED: frozenset(),
    JobStatus.DELISTED: frozenset(),
}


def can_transition(current: JobStatus, target: JobStatus) -> bool:
    """Check whether a job may move from one status to another"""
    return target in VALID_JOB_TRANSITIONS.get(current, frozenset())
