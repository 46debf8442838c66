# File: weekplanner/layout/all_day.py
"""
Separates all-day banners from events that belong on the timed grid.
"""

from datetime import time, timedelta
from typing import List, NamedTuple

from weekplanner.models import Event
from weekplanner.layout.local_time import resolve_timezone, to_local

ONE_DAY = timedelta(days=1)
# Providers encode some all-day events as long, unaligned blocks
ALL_DAY_MIN_DURATION = timedelta(hours=20)


class Partition(NamedTuple):
    all_day: List[Event]
    timed: List[Event]


class AllDayExtractor:
    """Decides which events render as all-day banners."""

    def __init__(self, timezone=None):
        self.timezone = resolve_timezone(timezone)

    def is_all_day(self, event: Event) -> bool:
        """
        True when the event is flagged all-day, covers whole days from midnight,
        or lasts at least 20 hours.
        """
        if event.explicit_all_day is True:
            return True
        if not event.is_well_formed():
            return False

        duration = event.end_time - event.start_time
        starts_at_midnight = to_local(event.start_time, self.timezone).time() == time(0, 0)
        if starts_at_midnight and duration > timedelta(0) and duration % ONE_DAY == timedelta(0):
            return True

        return duration >= ALL_DAY_MIN_DURATION

    def partition(self, events: List[Event]) -> Partition:
        """Split events into (all_day, timed), keeping relative order in each."""
        all_day: List[Event] = []
        timed: List[Event] = []
        for event in events:
            (all_day if self.is_all_day(event) else timed).append(event)
        return Partition(all_day, timed)
