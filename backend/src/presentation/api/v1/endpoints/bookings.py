"""
Booking Endpoints
Worker and supervisor booking history, weekly hours, cancellation
"""
from datetime import date
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query

from application.services.auth.interfaces import Identity
from application.services.booking import BookingLedger
from core.config import settings
from domain.timeutils import utcnow
from presentation.api.v1.container import get_booking_ledger
from presentation.api.v1.dependencies import (
    get_current_identity,
    require_labor,
    require_supervisor,
)
from presentation.api.v1.schemas.bookings import (
    BookingListResponse,
    BookingResponse,
    WeeklySummaryResponse,
)
from presentation.api.v1.schemas.jobs import ApplicationResponse


router = APIRouter()


@router.get("/bookings/me", response_model=BookingListResponse)
async def my_bookings(
    identity: Identity = Depends(require_labor),
    ledger: BookingLedger = Depends(get_booking_ledger),
):
    """Worker's confirmed bookings, latest job date first"""
    bookings = await ledger.for_worker(identity.user_id)
    return BookingListResponse(
        count=len(bookings),
        bookings=[BookingResponse.from_entity(b) for b in bookings],
    )


@router.get("/bookings/me/week", response_model=WeeklySummaryResponse)
async def my_week(
    on_date: Optional[date] = Query(None, alias="date", description="Any day in the week; defaults to today"),
    identity: Identity = Depends(require_labor),
    ledger: BookingLedger = Depends(get_booking_ledger),
):
    summary = await ledger.weekly_summary(identity.user_id, on_date or utcnow().date())
    return WeeklySummaryResponse.from_summary(summary, settings.WEEKLY_HOUR_LIMIT)


@router.get("/bookings/supervisor", response_model=BookingListResponse)
async def supervisor_bookings(
    identity: Identity = Depends(require_supervisor),
    ledger: BookingLedger = Depends(get_booking_ledger),
):
    """Workers booked on the supervisor's jobs, most recent first"""
    bookings = await ledger.for_supervisor(identity.user_id)
    return BookingListResponse(
        count=len(bookings),
        bookings=[BookingResponse.from_entity(b) for b in bookings],
    )


@router.post("/bookings/{booking_id}/cancel", response_model=BookingResponse)
async def cancel_booking(
    booking_id: UUID,
    identity: Identity = Depends(get_current_identity),
    ledger: BookingLedger = Depends(get_booking_ledger),
):
    booking = await ledger.cancel(booking_id, identity.user_id)
    return BookingResponse.from_entity(booking)


@router.get("/applications/me", response_model=List[ApplicationResponse])
async def my_applications(
    identity: Identity = Depends(require_labor),
    ledger: BookingLedger = Depends(get_booking_ledger),
):
    applications = await ledger.applications_for_worker(identity.user_id)
    return [ApplicationResponse.from_entity(a) for a in applications]
