"""
API V1 Endpoints Package
Exports routers used by main app
"""
from .bookings import router as bookings_router
from .jobs import router as jobs_router
from .rates import router as rates_router

__all__ = [
    "bookings_router",
    "jobs_router",
    "rates_router",
]
