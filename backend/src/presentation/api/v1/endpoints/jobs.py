"""
Job Posting Endpoints
Posting, feed, listing control and applying
"""
from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, status
from loguru import logger

from application.services.auth.interfaces import Identity
from application.services.booking import (
    EligibilityEngine,
    JobPostingLifecycleManager,
    RatePolicyProvider,
    assess_fairness,
)
from presentation.api.v1.container import (
    get_eligibility_engine,
    get_lifecycle_manager,
    get_rate_policy_provider,
)
from presentation.api.v1.dependencies import (
    get_current_identity,
    require_labor,
    require_supervisor,
)
from presentation.api.v1.schemas.bookings import ErrorResponse
from presentation.api.v1.schemas.jobs import (
    ApplicationResponse,
    ApplyResponse,
    JobCreateRequest,
    JobFeedItem,
    JobFeedResponse,
    JobResponse,
    ListingToggleRequest,
    WageAssessmentResponse,
)


router = APIRouter()


@router.post(
    "/jobs",
    response_model=JobResponse,
    status_code=status.HTTP_201_CREATED,
    responses={422: {"model": ErrorResponse}},
)
async def create_job(
    request: JobCreateRequest,
    identity: Identity = Depends(require_supervisor),
    lifecycle: JobPostingLifecycleManager = Depends(get_lifecycle_manager),
):
    """
    Publish a job posting.

    The offered wage is checked against the current minimum wage; an offer
    below it is rejected with the required minimum and the shortfall.
    """
    job = await lifecycle.create(identity.user_id, request.to_draft())
    return JobResponse.from_entity(job)


@router.get("/jobs", response_model=JobFeedResponse)
async def list_open_jobs(
    identity: Identity = Depends(get_current_identity),
    lifecycle: JobPostingLifecycleManager = Depends(get_lifecycle_manager),
    rate_provider: RatePolicyProvider = Depends(get_rate_policy_provider),
):
    """Public feed: open, listed, unexpired postings, newest first"""
    jobs = await lifecycle.list_open_jobs()
    min_wage = await rate_provider.get_min_wage_per_hour()

    items = []
    for job in jobs:
        assessment = assess_fairness(job.wage_type, job.wage_amount, job.duration_hours, min_wage)
        items.append(
            JobFeedItem(
                **JobResponse.from_entity(job).model_dump(),
                wage_assessment=WageAssessmentResponse.from_assessment(assessment),
            )
        )

    logger.debug(f"Feed for {identity.user_id}: {len(items)} open jobs")
    return JobFeedResponse(count=len(items), jobs=items)


@router.get("/jobs/mine", response_model=List[JobResponse])
async def list_my_jobs(
    identity: Identity = Depends(require_supervisor),
    lifecycle: JobPostingLifecycleManager = Depends(get_lifecycle_manager),
):
    """Every posting created by the calling supervisor"""
    jobs = await lifecycle.list_supervisor_jobs(identity.user_id)
    return [JobResponse.from_entity(job) for job in jobs]


@router.patch("/jobs/{job_id}/listing", response_model=JobResponse)
async def toggle_listing(
    job_id: UUID,
    request: ListingToggleRequest,
    identity: Identity = Depends(require_supervisor),
    lifecycle: JobPostingLifecycleManager = Depends(get_lifecycle_manager),
):
    job = await lifecycle.toggle_listing(job_id, identity.user_id, request.is_listed)
    return JobResponse.from_entity(job)


@router.delete("/jobs/{job_id}", response_model=JobResponse)
async def delete_job(
    job_id: UUID,
    identity: Identity = Depends(require_supervisor),
    lifecycle: JobPostingLifecycleManager = Depends(get_lifecycle_manager),
):
    """Soft delete; bookings already made stay on record"""
    job = await lifecycle.delete(job_id, identity.user_id)
    return JobResponse.from_entity(job)


@router.get("/jobs/{job_id}/applications", response_model=List[ApplicationResponse])
async def list_job_applications(
    job_id: UUID,
    identity: Identity = Depends(require_supervisor),
    lifecycle: JobPostingLifecycleManager = Depends(get_lifecycle_manager),
):
    applications = await lifecycle.list_job_applications(job_id, identity.user_id)
    return [ApplicationResponse.from_entity(a) for a in applications]


@router.post(
    "/jobs/{job_id}/apply",
    response_model=ApplyResponse,
    status_code=status.HTTP_201_CREATED,
    responses={409: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def apply_to_job(
    job_id: UUID,
    identity: Identity = Depends(require_labor),
    engine: EligibilityEngine = Depends(get_eligibility_engine),
):
    """
    Apply the calling worker to a job.

    Applications are confirmed immediately. Eligibility failures return 409
    with an error code and a message meant to be shown to the worker as is.
    """
    confirmation = await engine.try_apply(job_id, identity.user_id)
    return ApplyResponse.from_confirmation(confirmation)
