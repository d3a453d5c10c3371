"""
Job Application Domain Entity
Immutable worker application business object
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from uuid import UUID

from ..enums import ApplicationStatus


@dataclass(frozen=True)
class JobApplication:
    """Job application domain entity - immutable"""

    id: UUID
    job_id: UUID
    labor_id: str
    supervisor_id: str

    status: ApplicationStatus = ApplicationStatus.CONFIRMED
    applied_at: Optional[datetime] = None

    def __str__(self) -> str:
        return f"JobApplication({self.id}, status={self.status.value})"
