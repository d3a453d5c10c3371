"""
Rate Policy Provider
Read access to the marketplace minimum wage, with a configured fallback
"""
from datetime import datetime, timezone
from decimal import Decimal
from typing import Optional

from application.repositories.interfaces import IRatePolicyRepository
from core.config import settings
from core.exceptions import ValidationException
from core.logging_config import logger
from domain.entities import RatePolicy


class RatePolicyProvider:
    """Supplies the current minimum wage per hour"""

    def __init__(
        self,
        rate_repo: IRatePolicyRepository,
        default_min_wage: Optional[Decimal] = None,
    ):
        self.rate_repo = rate_repo
        self.default_min_wage = Decimal(default_min_wage or settings.DEFAULT_MIN_WAGE_PER_HOUR)

    async def get_policy(self) -> RatePolicy:
        """Current policy, or the fallback when none has been stored yet"""
        policy = await self.rate_repo.get()
        if policy is None:
            logger.warning(
                f"No rate policy stored, falling back to {self.default_min_wage}/hour"
            )
            return RatePolicy(
                min_wage_per_hour=self.default_min_wage,
                last_updated=datetime.now(timezone.utc),
            )
        return policy

    async def get_min_wage_per_hour(self) -> Decimal:
        policy = await self.get_policy()
        return policy.min_wage_per_hour

    async def set_min_wage_per_hour(self, value: Decimal) -> RatePolicy:
        """
        Replace the stored minimum wage.

        Postings created earlier keep the wage they were validated against.
        """
        value = Decimal(value)
        if value <= 0:
            raise ValidationException("min_wage_per_hour", "must be positive")

        policy = await self.rate_repo.upsert(
            RatePolicy(min_wage_per_hour=value, last_updated=datetime.now(timezone.utc))
        )
        logger.info(f"Minimum wage set to {policy.min_wage_per_hour}/hour")
        return policy
