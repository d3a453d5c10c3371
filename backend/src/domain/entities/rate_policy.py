"""
Rate Policy Domain Entity
"""
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class RatePolicy:
    """Minimum wage policy - a single record for the whole marketplace"""

    min_wage_per_hour: Decimal
    last_updated: Optional[datetime] = None

    def __post_init__(self):
        if self.min_wage_per_hour <= 0:
            raise ValueError("Minimum wage must be positive")
