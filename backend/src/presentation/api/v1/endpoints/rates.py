"""
Rate Policy Endpoints
"""
from fastapi import APIRouter, Depends

from application.services.booking import RatePolicyProvider
from presentation.api.v1.container import get_rate_policy_provider
from presentation.api.v1.schemas.bookings import RatePolicyResponse


router = APIRouter()


@router.get("/rates", response_model=RatePolicyResponse)
async def current_rates(
    rate_provider: RatePolicyProvider = Depends(get_rate_policy_provider),
):
    """Current minimum wage per hour"""
    policy = await rate_provider.get_policy()
    return RatePolicyResponse.from_entity(policy)
