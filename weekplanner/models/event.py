# File: weekplanner/models/event.py

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from .common import parse_iso_datetime, parse_bool


@dataclass(frozen=True)
class Event:
    """A time-stamped calendar event as supplied by the event store.

    The layout engine only reads events. Times may be missing or inverted
    when the upstream record is broken; see validation_error().
    """
    id: str
    title: str
    start_time: Optional[datetime]
    end_time: Optional[datetime]
    source_tag: str = "manual"
    calendar_id: Optional[str] = None
    description: Optional[str] = None
    notes: Optional[str] = None
    action_items: Optional[str] = None
    explicit_all_day: Optional[bool] = None

    def validation_error(self) -> Optional[str]:
        """Describe why this event cannot be laid out, or None if it can."""
        if not isinstance(self.start_time, datetime):
            return "missing or unparseable start time"
        if not isinstance(self.end_time, datetime):
            return "missing or unparseable end time"
        try:
            if self.end_time <= self.start_time:
                return "end time must be after start time"
        except TypeError:
            # naive vs aware comparison
            return "start and end times mix naive and timezone-aware values"
        return None

    def is_well_formed(self) -> bool:
        return self.validation_error() is None

    def duration_minutes(self) -> float:
        """Calculate event duration in minutes."""
        return (self.end_time - self.start_time).total_seconds() / 60

    def overlaps_with(self, other: 'Event') -> bool:
        """Check if this event overlaps with another."""
        return self.start_time < other.end_time and self.end_time > other.start_time


def event_from_dict(data: dict) -> Event:
    """Create Event from an app-shaped record.

    Accepts both camelCase (startTime, sourceTag, isAllDay) and snake_case keys.
    Unparseable times are kept as None so the engine can report them.
    """
    def pick(*keys, default=None):
        for key in keys:
            if data.get(key) is not None:
                return data[key]
        return default

    return Event(
        id=str(pick('id', 'event_id', default='')),
        title=str(pick('title', 'summary', default='Untitled Event')),
        start_time=parse_iso_datetime(pick('startTime', 'start_time', 'start')),
        end_time=parse_iso_datetime(pick('endTime', 'end_time', 'end')),
        source_tag=str(pick('sourceTag', 'source_tag', 'source', default='manual')),
        calendar_id=pick('calendarId', 'calendar_id'),
        description=pick('description'),
        notes=pick('notes'),
        action_items=pick('actionItems', 'action_items'),
        explicit_all_day=parse_bool(pick('explicitAllDay', 'explicit_all_day', 'isAllDay', 'all_day')),
    )
