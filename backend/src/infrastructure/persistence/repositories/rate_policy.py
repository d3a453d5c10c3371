"""
Rate Policy Repository Implementation
Single-row storage for the marketplace minimum wage
"""
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from loguru import logger

from domain.entities import RatePolicy
from domain.timeutils import utcnow
from application.repositories.interfaces import IRatePolicyRepository
from infrastructure.persistence.models.rate_policy import RatePolicyModel, RATE_POLICY_ROW_ID
from core.exceptions import RepositoryException


class SQLAlchemyRatePolicyRepository(IRatePolicyRepository):
    def __init__(self, session: AsyncSession):
        self.session = session

    async def get(self) -> Optional[RatePolicy]:
        try:
            result = await self.session.execute(
                select(RatePolicyModel).where(RatePolicyModel.id == RATE_POLICY_ROW_ID)
            )
            model = result.scalar_one_or_none()
            if model is None:
                return None
            return RatePolicy(min_wage_per_hour=model.min_wage_per_hour, last_updated=model.last_updated)

        except Exception as e:
            logger.error(f"Failed to load rate policy: {str(e)}")
            raise RepositoryException(f"Failed to load rate policy: {str(e)}")

    async def upsert(self, policy: RatePolicy) -> RatePolicy:
        try:
            model = await self.session.get(RatePolicyModel, RATE_POLICY_ROW_ID)
            updated_at = policy.last_updated or utcnow()

            if model is None:
                model = RatePolicyModel(id=RATE_POLICY_ROW_ID)
                self.session.add(model)

            model.min_wage_per_hour = policy.min_wage_per_hour
            model.last_updated = updated_at

            await self.session.flush()
            logger.info(f"Rate policy set to {policy.min_wage_per_hour}/hour")
            return RatePolicy(min_wage_per_hour=model.min_wage_per_hour, last_updated=model.last_updated)

        except Exception as e:
            logger.error(f"Failed to save rate policy: {str(e)}")
            raise RepositoryException(f"Failed to save rate policy: {str(e)}")
