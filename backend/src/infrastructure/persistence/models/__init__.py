"""ORM Models Package"""

from .booking import BookingModel
from .job_application import JobApplicationModel
from .job_posting import JobPostingModel
from .rate_policy import RatePolicyModel, RATE_POLICY_ROW_ID

__all__ = [
    "BookingModel",
    "JobApplicationModel",
    "JobPostingModel",
    "RatePolicyModel",
    "RATE_POLICY_ROW_ID",
]
