# File: weekplanner/layout/time_slots.py
"""
The fixed half-hour grid shared by every renderer.

Slot 0 starts at 06:00, slot 35 covers 23:30-24:00. Slot boundaries run from
0 (06:00) to 36 (midnight).
"""

import math
from datetime import date, datetime, time, timedelta
from functools import lru_cache
from typing import Tuple, Union

from weekplanner.models import TimeSlot

GRID_START_HOUR = 6
GRID_END_HOUR = 24
SLOT_MINUTES = 30
SLOT_COUNT = (GRID_END_HOUR - GRID_START_HOUR) * 60 // SLOT_MINUTES  # 36


class TimeSlotIndex:
    """Conversions between wall-clock time and slot index."""

    SLOT_COUNT = SLOT_COUNT
    SLOT_MINUTES = SLOT_MINUTES

    @staticmethod
    @lru_cache(maxsize=1)
    def slots() -> Tuple[TimeSlot, ...]:
        """The 36 grid slots in ascending order, built once per process."""
        return tuple(
            TimeSlot(index=i,
                     hour=GRID_START_HOUR + (i * SLOT_MINUTES) // 60,
                     minute=(i * SLOT_MINUTES) % 60)
            for i in range(SLOT_COUNT)
        )

    @staticmethod
    def slot_index_of(value: Union[time, datetime]) -> int:
        """Raw slot index of a wall-clock time.

        Not clamped: times before 06:00 give negative indices. Use clamp() or
        in_grid() to handle the edges.
        """
        return (value.hour - GRID_START_HOUR) * 2 + (1 if value.minute >= 30 else 0)

    @staticmethod
    def in_grid(index: int) -> bool:
        return 0 <= index < SLOT_COUNT

    @staticmethod
    def clamp(boundary: int) -> int:
        """Clamp a slot boundary into [0, 36]."""
        return max(0, min(SLOT_COUNT, boundary))

    @staticmethod
    def time_of_slot(index: int, reference_date: date) -> datetime:
        """Wall-clock start of a slot on the given day."""
        if not 0 <= index < SLOT_COUNT:
            raise ValueError(f"Slot index out of range: {index}")
        slot = TimeSlotIndex.slots()[index]
        return datetime.combine(reference_date, time(slot.hour, slot.minute))

    @staticmethod
    def minutes_from_grid_start(value: datetime, day: date) -> float:
        """Minutes between 06:00 on day and a naive local datetime (may be negative)."""
        grid_start = datetime.combine(day, time(GRID_START_HOUR))
        return (value - grid_start) / timedelta(minutes=1)

    @classmethod
    def boundaries_for(cls, start: datetime, end: datetime, day: date) -> Tuple[int, int]:
        """Unclamped (start_slot, end_slot_exclusive) of an interval on day.

        The start floors to its slot, the end rounds up to the next boundary.
        """
        start_slot = math.floor(cls.minutes_from_grid_start(start, day) / SLOT_MINUTES)
        end_slot = math.ceil(cls.minutes_from_grid_start(end, day) / SLOT_MINUTES)
        return start_slot, end_slot

    @staticmethod
    def duration_in_slots(start: datetime, end: datetime) -> int:
        """Number of slots a duration occupies, rounded up."""
        return math.ceil((end - start) / timedelta(minutes=SLOT_MINUTES))
