# File: weekplanner/models/dates.py

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Iterator


class InvalidRangeError(ValueError):
    """Raised when a date range ends before it starts."""


@dataclass(frozen=True)
class DateRange:
    """Closed [start, end] range of calendar days."""
    start: date
    end: date

    def __post_init__(self):
        if self.end < self.start:
            raise InvalidRangeError(
                f"Date range end {self.end.isoformat()} precedes start {self.start.isoformat()}"
            )

    def days(self) -> Iterator[date]:
        """Iterate every day in the range, in order."""
        current = self.start
        while current <= self.end:
            yield current
            current += timedelta(days=1)

    def __len__(self) -> int:
        return (self.end - self.start).days + 1

    def __contains__(self, day: date) -> bool:
        return self.start <= day <= self.end

    @classmethod
    def week_of(cls, day: date) -> 'DateRange':
        """Monday-Sunday week containing day."""
        monday = day - timedelta(days=day.weekday())
        return cls(monday, monday + timedelta(days=6))
