"""
Wage Compliance Checker
Validates offered wages against the minimum wage floor at posting time
"""
from dataclasses import dataclass
from decimal import Decimal, ROUND_FLOOR

from core.exceptions import WageBelowMinimumError
from domain.enums import WageType
from domain.value_objects import WageTerms


@dataclass(frozen=True)
class WageAssessment:
    """Worker-facing view of how an offer compares with the floor"""

    effective_hourly_rate: Decimal
    min_wage_per_hour: Decimal
    is_above_minimum: bool
    difference: Decimal  # effective rate minus floor, negative when below


def required_minimum(
    wage_type: WageType,
    duration_hours: int,
    min_wage_per_hour: Decimal,
) -> Decimal:
    """
    Lowest wage amount a posting with these terms may offer.

    An hourly offer must match the hourly floor; a daily offer must cover
    the hourly floor across every hour of the shift.
    """
    if WageType(wage_type) == WageType.HOURLY:
        return Decimal(min_wage_per_hour)
    return Decimal(min_wage_per_hour) * duration_hours


def is_compliant(
    wage_type: WageType,
    wage_amount: Decimal,
    duration_hours: int,
    min_wage_per_hour: Decimal,
) -> bool:
    """Check an offer against the floor; meeting the floor exactly is compliant"""
    return Decimal(wage_amount) >= required_minimum(wage_type, duration_hours, min_wage_per_hour)


def check_wage(
    wage_type: WageType,
    wage_amount: Decimal,
    duration_hours: int,
    min_wage_per_hour: Decimal,
) -> None:
    """
    Reject a non-compliant offer.

    Raises:
        WageBelowMinimumError: carries the required minimum and the shortfall
    """
    minimum = required_minimum(wage_type, duration_hours, min_wage_per_hour)
    if Decimal(wage_amount) < minimum:
        raise WageBelowMinimumError(Decimal(wage_amount), minimum)


def effective_hourly_rate(
    wage_type: WageType,
    wage_amount: Decimal,
    duration_hours: int,
) -> Decimal:
    return WageTerms(WageType(wage_type), Decimal(wage_amount), duration_hours).effective_hourly_rate()


def assess_fairness(
    wage_type: WageType,
    wage_amount: Decimal,
    duration_hours: int,
    min_wage_per_hour: Decimal,
) -> WageAssessment:
    """
    Compare an offer's hourly equivalent against the current floor.

    The verdict uses the exact rate; only the reported figures are rounded.
    The difference rounds down so any shortfall stays negative.
    """
    terms = WageTerms(WageType(wage_type), Decimal(wage_amount), duration_hours)
    floor = Decimal(min_wage_per_hour)
    return WageAssessment(
        effective_hourly_rate=terms.effective_hourly_rate(),
        min_wage_per_hour=floor,
        is_above_minimum=is_compliant(wage_type, wage_amount, duration_hours, floor),
        difference=(terms.hourly_rate() - floor).quantize(Decimal("0.01"), rounding=ROUND_FLOOR),
    )
