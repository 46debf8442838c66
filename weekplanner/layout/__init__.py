from .time_slots import TimeSlotIndex, SLOT_COUNT, SLOT_MINUTES, GRID_START_HOUR
from .classifier import EventClassifier, source_label, SOURCE_LABELS
from .all_day import AllDayExtractor
from .overlap import OverlapResolver
from .geometry import GeometryMapper
from .engine import LayoutEngine
from .text import clean_event_title, display_title

__all__ = [
    "TimeSlotIndex",
    "SLOT_COUNT",
    "SLOT_MINUTES",
    "GRID_START_HOUR",
    "EventClassifier",
    "source_label",
    "SOURCE_LABELS",
    "AllDayExtractor",
    "OverlapResolver",
    "GeometryMapper",
    "LayoutEngine",
    "clean_event_title",
    "display_title",
]
