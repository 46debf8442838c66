# File: weekplanner/models/slots.py

from dataclasses import dataclass


@dataclass(frozen=True)
class TimeSlot:
    """One fixed 30-minute cell of the 06:00-24:00 grid."""
    index: int
    hour: int
    minute: int

    @property
    def is_hour_boundary(self) -> bool:
        return self.minute == 0

    @property
    def label(self) -> str:
        """24h "HH:MM" label as printed in the time column."""
        return f"{self.hour:02d}:{self.minute:02d}"
