"""
Week Window Value Object
Monday-to-Sunday calendar week used for the weekly hour cap
"""
from dataclasses import dataclass
from datetime import date, datetime, timedelta


@dataclass(frozen=True)
class WeekWindow:
    """Calendar week value object (Monday 00:00 through Sunday 23:59:59.999999)"""

    start: date

    def __post_init__(self):
        if self.start.weekday() != 0:
            raise ValueError("Week window must start on a Monday")

    @classmethod
    def containing(cls, day: date) -> "WeekWindow":
        """Build the window for the ISO week that contains ``day``"""
        if isinstance(day, datetime):
            day = day.date()
        return cls(start=day - timedelta(days=day.weekday()))

    @property
    def end(self) -> date:
        """Sunday of this week"""
        return self.start + timedelta(days=6)

    def contains(self, day: date) -> bool:
        """Check whether a job date falls within the week"""
        if isinstance(day, datetime):
            day = day.date()
        return self.start <= day <= self.end

    def __str__(self) -> str:
        return f"{self.start.isoformat()}..{self.end.isoformat()}"
