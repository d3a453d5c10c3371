"""Domain Entities - Core business objects"""

from .job_posting import JobPosting
from .job_application import JobApplication
from .booking import Booking
from .rate_policy import RatePolicy

__all__ = ["JobPosting", "JobApplication", "Booking", "RatePolicy"]
