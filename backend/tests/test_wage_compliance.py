"""
Tests for minimum wage checks and fairness assessment
"""
from decimal import Decimal

import pytest

from application.services.booking import (
    assess_fairness,
    check_wage,
    effective_hourly_rate,
    is_compliant,
    required_minimum,
)
from core.exceptions import WageBelowMinimumError
from domain.enums import WageType
from domain.value_objects import WageTerms


MIN_WAGE = Decimal("60")


class TestRequiredMinimum:

    def test_daily_wage_scales_with_duration(self):
        assert required_minimum(WageType.DAILY, 8, MIN_WAGE) == Decimal("480")

    def test_hourly_wage_ignores_duration(self):
        assert required_minimum(WageType.HOURLY, 8, MIN_WAGE) == Decimal("60")


class TestCheckWage:

    def test_daily_400_for_8_hours_is_short_by_80(self):
        with pytest.raises(WageBelowMinimumError) as exc_info:
            check_wage(WageType.DAILY, Decimal("400"), 8, MIN_WAGE)

        error = exc_info.value
        assert error.required_minimum == Decimal("480")
        assert error.shortfall == Decimal("80")
        assert error.message == "Wage is too low! Minimum for this duration is 480, offer is short by 80."

    def test_hourly_at_exact_minimum_passes(self):
        check_wage(WageType.HOURLY, Decimal("60"), 8, MIN_WAGE)
        assert is_compliant(WageType.HOURLY, Decimal("60"), 8, MIN_WAGE)

    def test_hourly_below_minimum(self):
        assert not is_compliant(WageType.HOURLY, Decimal("59.99"), 4, MIN_WAGE)

    def test_daily_at_exact_minimum_passes(self):
        check_wage(WageType.DAILY, Decimal("480"), 8, MIN_WAGE)


class TestFairness:

    def test_effective_rate_for_daily_wage(self):
        assert effective_hourly_rate(WageType.DAILY, Decimal("600"), 8) == Decimal("75.00")

    def test_effective_rate_rounds_to_cents(self):
        assert effective_hourly_rate(WageType.DAILY, Decimal("500"), 7) == Decimal("71.43")

    def test_assessment_above_minimum(self):
        assessment = assess_fairness(WageType.DAILY, Decimal("600"), 8, MIN_WAGE)

        assert assessment.is_above_minimum
        assert assessment.difference == Decimal("15.00")

    def test_assessment_below_minimum_reports_negative_difference(self):
        # Minimum raised after the job was posted
        assessment = assess_fairness(WageType.HOURLY, Decimal("60"), 8, Decimal("70"))

        assert not assessment.is_above_minimum
        assert assessment.difference == Decimal("-10.00")

    def test_fractional_shortfall_is_not_rounded_away(self):
        # 479.99 over 8h is 59.99875/h
        assessment = assess_fairness(WageType.DAILY, Decimal("479.99"), 8, MIN_WAGE)

        assert assessment.effective_hourly_rate == Decimal("60.00")
        assert not assessment.is_above_minimum
        assert assessment.difference == Decimal("-0.01")

    def test_assessment_agrees_with_posting_check(self):
        for amount in (Decimal("479.99"), Decimal("480"), Decimal("480.01")):
            assessment = assess_fairness(WageType.DAILY, amount, 8, MIN_WAGE)
            assert assessment.is_above_minimum == is_compliant(WageType.DAILY, amount, 8, MIN_WAGE)


class TestWageTerms:

    def test_rejects_non_positive_amount(self):
        with pytest.raises(ValueError):
            WageTerms(WageType.DAILY, Decimal("0"), 8)

    def test_rejects_zero_duration(self):
        with pytest.raises(ValueError):
            WageTerms(WageType.HOURLY, Decimal("60"), 0)

    def test_str(self):
        assert str(WageTerms(WageType.DAILY, Decimal("480"), 8)) == "480/day (8h)"
