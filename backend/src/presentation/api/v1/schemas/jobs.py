"""
Job Posting Schemas
Request/response models for posting, listing and applying
"""
from datetime import date, datetime
from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from application.services.booking import (
    BookingConfirmation,
    JobPostingDraft,
    WageAssessment,
)
from domain.entities import JobApplication, JobPosting
from domain.enums import WageType

from .bookings import BookingResponse


class JobCreateRequest(BaseModel):
    """Create a job posting (supervisor)"""

    title: str = Field(..., min_length=1, max_length=255, examples=["Brick loading"])
    company: Optional[str] = Field(None, max_length=255)
    location_name: str = Field(..., min_length=1, max_length=255, examples=["Sector 62, Noida"])
    description: str = Field("", description="Free text shown to workers")

    wage_type: WageType = Field(..., description="hourly or daily")
    wage_amount: Decimal = Field(..., gt=0, examples=[480])

    required_date: date
    duration_hours: int = Field(..., ge=1, description="Shift length in hours")
    laborers_required: int = Field(..., ge=1)

    expires_at: Optional[datetime] = Field(None, description="Defaults to 7 days after posting")

    @field_validator('title', 'location_name')
    @classmethod
    def strip_text(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError('cannot be blank')
        return v

    def to_draft(self) -> JobPostingDraft:
        return JobPostingDraft(
            title=self.title,
            company=self.company,
            location_name=self.location_name,
            description=self.description,
            wage_type=self.wage_type,
            wage_amount=self.wage_amount,
            required_date=self.required_date,
            duration_hours=self.duration_hours,
            laborers_required=self.laborers_required,
            expires_at=self.expires_at,
        )


class ListingToggleRequest(BaseModel):
    """Show or hide a posting in the public feed"""
    is_listed: bool


class JobResponse(BaseModel):
    """Single job posting"""
    id: UUID
    supervisor_id: str
    title: str
    company: Optional[str] = None
    location_name: str
    description: str
    wage_type: WageType
    wage_amount: Decimal
    required_date: date
    duration_hours: int
    laborers_required: int
    laborers_applied: int
    slots_remaining: int
    status: str
    is_listed: bool
    expires_at: Optional[datetime] = None
    created_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, job: JobPosting) -> "JobResponse":
        return cls(
            id=job.id,
            supervisor_id=job.supervisor_id,
            title=job.title,
            company=job.company,
            location_name=job.location_name,
            description=job.description,
            wage_type=job.wage_type,
            wage_amount=job.wage_amount,
            required_date=job.required_date,
            duration_hours=job.duration_hours,
            laborers_required=job.laborers_required,
            laborers_applied=job.laborers_applied,
            slots_remaining=job.slots_remaining,
            status=job.status.value,
            is_listed=job.is_listed,
            expires_at=job.expires_at,
            created_at=job.created_at,
        )


class WageAssessmentResponse(BaseModel):
    """How an offer compares with the minimum wage"""
    effective_hourly_rate: Decimal
    min_wage_per_hour: Decimal
    is_above_minimum: bool
    difference: Decimal

    @classmethod
    def from_assessment(cls, assessment: WageAssessment) -> "WageAssessmentResponse":
        return cls(
            effective_hourly_rate=assessment.effective_hourly_rate,
            min_wage_per_hour=assessment.min_wage_per_hour,
            is_above_minimum=assessment.is_above_minimum,
            difference=assessment.difference,
        )


class JobFeedItem(JobResponse):
    """Public feed entry with wage fairness"""
    wage_assessment: WageAssessmentResponse


class JobFeedResponse(BaseModel):
    count: int
    jobs: List[JobFeedItem]


class ApplicationResponse(BaseModel):
    """Worker application"""
    id: UUID
    job_id: UUID
    labor_id: str
    supervisor_id: str
    status: str
    applied_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, application: JobApplication) -> "ApplicationResponse":
        return cls(
            id=application.id,
            job_id=application.job_id,
            labor_id=application.labor_id,
            supervisor_id=application.supervisor_id,
            status=application.status.value,
            applied_at=application.applied_at,
        )


class ApplyResponse(BaseModel):
    """Result of a successful application"""
    application: ApplicationResponse
    booking: BookingResponse
    laborers_applied: int
    laborers_required: int
    job_filled: bool
    weekly_hours: int
    near_weekly_limit: bool
    message: str

    @classmethod
    def from_confirmation(cls, confirmation: BookingConfirmation) -> "ApplyResponse":
        return cls(
            application=ApplicationResponse.from_entity(confirmation.application),
            booking=BookingResponse.from_entity(confirmation.booking),
            laborers_applied=confirmation.job.laborers_applied,
            laborers_required=confirmation.job.laborers_required,
            job_filled=confirmation.job_filled,
            weekly_hours=confirmation.weekly_hours,
            near_weekly_limit=confirmation.near_weekly_limit,
            message=confirmation.message,
        )
