"""
Booking Service Package
Posting lifecycle, wage compliance, eligibility and the booking ledger
"""
from .booking_ledger import BookingLedger, WeeklyHoursSummary
from .eligibility_engine import BookingConfirmation, EligibilityEngine
from .job_lifecycle import JobPostingDraft, JobPostingLifecycleManager
from .rate_policy_provider import RatePolicyProvider
from .wage_compliance import (
    WageAssessment,
    assess_fairness,
    check_wage,
    effective_hourly_rate,
    is_compliant,
    required_minimum,
)

__all__ = [
    "BookingLedger",
    "WeeklyHoursSummary",
    "BookingConfirmation",
    "EligibilityEngine",
    "JobPostingDraft",
    "JobPostingLifecycleManager",
    "RatePolicyProvider",
    "WageAssessment",
    "assess_fairness",
    "check_wage",
    "effective_hourly_rate",
    "is_compliant",
    "required_minimum",
]
