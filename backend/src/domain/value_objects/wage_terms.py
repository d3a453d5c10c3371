"""
Wage Terms Value Object
Offered wage with its quoting basis and shift length
"""
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP

from ..enums import WageType


@dataclass(frozen=True)
class WageTerms:
    """Wage offer value object - immutable"""

    wage_type: WageType
    amount: Decimal
    duration_hours: int

    def __post_init__(self):
        """Validate wage terms"""
        if self.amount <= 0:
            raise ValueError("Wage amount must be positive")

        if self.duration_hours <= 0:
            raise ValueError("Duration must be at least one hour")

    def hourly_rate(self) -> Decimal:
        """Exact amount per hour worked"""
        if self.wage_type == WageType.HOURLY:
            return Decimal(self.amount)
        return Decimal(self.amount) / self.duration_hours

    def effective_hourly_rate(self) -> Decimal:
        """Amount per hour worked, rounded to two places for display"""
        return self.hourly_rate().quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)

    def __str__(self) -> str:
        unit = "hour" if self.wage_type == WageType.HOURLY else "day"
        return f"{self.amount}/{unit} ({self.duration_hours}h)"
