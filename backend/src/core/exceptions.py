"""
Custom Exception Hierarchy
Domain and application-level exceptions
"""
from decimal import Decimal


class DomainException(Exception):
    """Base exception for all domain errors"""

    code = "domain_error"

    def __init__(self, message: str = ""):
        self.message = message or self.__class__.__doc__ or ""
        super().__init__(self.message)


class AuthenticationException(DomainException):
    """Authentication failed"""
    code = "authentication_failed"


class AuthorizationException(DomainException):
    """User not authorized for this operation"""
    code = "not_authorized"


class ValidationException(DomainException):
    """Data validation failed"""

    code = "validation_failed"

    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(f"{field}: {message}")


class RepositoryException(DomainException):
    """Database operation failed"""
    code = "repository_error"


class ResourceNotFoundException(DomainException):
    """Requested resource not found"""

    code = "not_found"

    def __init__(self, resource_type: str, identifier: str):
        self.resource_type = resource_type
        self.identifier = identifier
        super().__init__(f"{resource_type} not found: {identifier}")


class DuplicateResourceException(DomainException):
    """Resource already exists"""

    code = "duplicate"

    def __init__(self, resource_type: str, field: str, value: str):
        self.resource_type = resource_type
        self.field = field
        self.value = value
        super().__init__(f"{resource_type} with {field}='{value}' already exists")


class InvalidTransitionError(DomainException):
    """Job posting status change not allowed"""

    code = "invalid_transition"

    def __init__(self, from_status: str, to_status: str):
        self.from_status = from_status
        self.to_status = to_status
        super().__init__(f"Cannot move job from '{from_status}' to '{to_status}'")


class WageBelowMinimumError(DomainException):
    """Offered wage is below the minimum wage floor"""

    code = "wage_below_minimum"

    def __init__(self, wage_amount: Decimal, required_minimum: Decimal):
        self.wage_amount = wage_amount
        self.required_minimum = required_minimum
        self.shortfall = required_minimum - wage_amount
        super().__init__(
            f"Wage is too low! Minimum for this duration is {required_minimum}, "
            f"offer is short by {self.shortfall}."
        )


# =============================================================================
# Eligibility errors (raised by the booking path)
# =============================================================================

class EligibilityError(DomainException):
    """Worker cannot be matched to this job"""
    code = "not_eligible"


class AlreadyAppliedError(EligibilityError):
    """Worker already holds an application for this job"""

    code = "already_applied"

    def __init__(self, job_id, labor_id):
        self.job_id = job_id
        self.labor_id = labor_id
        super().__init__("You have already applied for this job!")


class WeeklyLimitExceededError(EligibilityError):
    """Booking would push the worker past the weekly hour ceiling"""

    code = "weekly_limit_exceeded"

    def __init__(self, projected_hours: int, limit: int):
        self.projected_hours = projected_hours
        self.limit = limit
        super().__init__(
            f"Health Safety Warning: This job would put you at {projected_hours} hours "
            f"this week. The limit is {limit} hours."
        )


class JobFullError(EligibilityError):
    """Job has no free slots left"""

    code = "job_full"

    def __init__(self, job_id):
        self.job_id = job_id
        super().__init__("Sorry, this job has reached its maximum number of applicants.")


class JobUnavailableError(EligibilityError):
    """Job is no longer accepting applications"""

    code = "job_unavailable"

    def __init__(self, job_id):
        self.job_id = job_id
        super().__init__("This job is no longer accepting applications.")


class BookingSystemError(DomainException):
    """Storage failure while committing a booking"""

    code = "system_error"

    def __init__(self, detail: str = ""):
        self.detail = detail
        super().__init__("System error. Please try again.")
