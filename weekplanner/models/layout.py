# File: weekplanner/models/layout.py
"""
Data models for layout output consumed by the screen and export renderers.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional, Tuple

from .diagnostics import Diagnostic
from .enums import Variant
from .event import Event


@dataclass(frozen=True)
class LayoutOptions:
    """Knobs for a layout pass."""
    span_all_day_events: bool = False  # repeat all-day banners on every covered day


@dataclass(frozen=True)
class Assignment:
    """Vertical span and horizontal column for one timed event on one day."""
    event: Event
    start_slot: int
    end_slot_exclusive: int
    column: int = 0
    column_count: int = 1

    @property
    def span(self) -> int:
        return self.end_slot_exclusive - self.start_slot

    def overlaps(self, other: 'Assignment') -> bool:
        return self.start_slot < other.end_slot_exclusive and other.start_slot < self.end_slot_exclusive


@dataclass(frozen=True)
class NormalizedRect:
    """Geometry as fractions (0-1) of one day-column's box."""
    top: float
    height: float
    left: float
    width: float

    def scaled(self, box_width: float, box_height: float,
               x: float = 0.0, y: float = 0.0) -> Tuple[float, float, float, float]:
        """Absolute (x, y, w, h) for a renderer's own pixel or point scale."""
        return (
            x + self.left * box_width,
            y + self.top * box_height,
            self.width * box_width,
            self.height * box_height,
        )

    def to_dict(self) -> dict:
        return {'top': self.top, 'height': self.height, 'left': self.left, 'width': self.width}


@dataclass(frozen=True)
class PositionedEvent:
    """An event placed on one day, either as an all-day banner or on the grid."""
    event: Event
    variant: Variant
    is_all_day: bool
    date: date
    display_title: str
    source_label: str
    time_range: str = "All day"  # 24h "HH:MM-HH:MM" in local time for timed events
    start_slot: Optional[int] = None
    end_slot_exclusive: Optional[int] = None
    column: Optional[int] = None
    column_count: Optional[int] = None
    rect: Optional[NormalizedRect] = None

    @property
    def top(self) -> Optional[float]:
        return self.rect.top if self.rect else None

    @property
    def height(self) -> Optional[float]:
        return self.rect.height if self.rect else None

    @property
    def left(self) -> Optional[float]:
        return self.rect.left if self.rect else None

    @property
    def width(self) -> Optional[float]:
        return self.rect.width if self.rect else None

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        data = {
            'id': self.event.id,
            'title': self.display_title,
            'variant': self.variant.value,
            'source': self.source_label,
            'is_all_day': self.is_all_day,
            'date': self.date.isoformat(),
            'time_range': self.time_range,
        }
        if not self.is_all_day:
            data.update({
                'start_slot': self.start_slot,
                'end_slot_exclusive': self.end_slot_exclusive,
                'column': self.column,
                'column_count': self.column_count,
                'rect': self.rect.to_dict(),
            })
        return data


@dataclass
class DayLayout:
    """All placements for one calendar day."""
    date: date
    all_day: List[PositionedEvent] = field(default_factory=list)
    timed: List[PositionedEvent] = field(default_factory=list)

    @property
    def event_count(self) -> int:
        return len(self.all_day) + len(self.timed)

    def max_columns(self) -> int:
        """Widest overlap cluster of the day (0 for an empty grid)."""
        return max((p.column_count for p in self.timed), default=0)

    def to_dict(self) -> dict:
        return {
            'date': self.date.isoformat(),
            'all_day': [p.to_dict() for p in self.all_day],
            'timed': [p.to_dict() for p in self.timed],
        }


@dataclass
class LayoutResult:
    """Day layouts in range order plus the diagnostics collected on the way."""
    days: List[DayLayout] = field(default_factory=list)
    diagnostics: List[Diagnostic] = field(default_factory=list)

    def day(self, day: date) -> Optional[DayLayout]:
        for layout in self.days:
            if layout.date == day:
                return layout
        return None

    def has_warnings(self) -> bool:
        return bool(self.diagnostics)

    def to_dict(self) -> dict:
        return {
            'days': [d.to_dict() for d in self.days],
            'diagnostics': [d.to_dict() for d in self.diagnostics],
        }
