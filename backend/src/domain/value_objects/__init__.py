"""Value Objects - Immutable objects defined by their attributes"""

from .wage_terms import WageTerms
from .week_window import WeekWindow

__all__ = [
    "WageTerms",
    "WeekWindow",
]
