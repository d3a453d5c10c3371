"""
Booking Schemas
"""
from datetime import date, datetime
from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel

from application.services.booking import WeeklyHoursSummary
from domain.entities import Booking, RatePolicy


class BookingResponse(BaseModel):
    """Confirmed work assignment"""
    id: UUID
    job_id: UUID
    labor_id: str
    supervisor_id: str
    job_title: str
    location_name: str
    job_date: date
    duration_hours: int
    wage_amount: Decimal
    status: str
    created_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, booking: Booking) -> "BookingResponse":
        return cls(
            id=booking.id,
            job_id=booking.job_id,
            labor_id=booking.labor_id,
            supervisor_id=booking.supervisor_id,
            job_title=booking.job_title,
            location_name=booking.location_name,
            job_date=booking.job_date,
            duration_hours=booking.duration_hours,
            wage_amount=booking.wage_amount,
            status=booking.status.value,
            created_at=booking.created_at,
        )


class BookingListResponse(BaseModel):
    count: int
    bookings: List[BookingResponse]


class WeeklySummaryResponse(BaseModel):
    """Worker's confirmed hours for one Monday-Sunday week"""
    week_start: date
    week_end: date
    hours_by_day: List[int]
    total_hours: int
    weekly_limit: int
    remaining_hours: int
    near_limit: bool

    @classmethod
    def from_summary(cls, summary: WeeklyHoursSummary, weekly_limit: int) -> "WeeklySummaryResponse":
        return cls(
            week_start=summary.week_start,
            week_end=summary.week_end,
            hours_by_day=summary.hours_by_day,
            total_hours=summary.total_hours,
            weekly_limit=weekly_limit,
            remaining_hours=summary.remaining_hours,
            near_limit=summary.near_limit,
        )


class RatePolicyResponse(BaseModel):
    min_wage_per_hour: Decimal
    last_updated: Optional[datetime] = None

    @classmethod
    def from_entity(cls, policy: RatePolicy) -> "RatePolicyResponse":
        return cls(min_wage_per_hour=policy.min_wage_per_hour, last_updated=policy.last_updated)


class ErrorResponse(BaseModel):
    """Domain error body"""
    code: str
    message: str
