from .enums import Variant, DiagnosticCode
from .common import parse_iso_datetime, parse_bool
from .event import Event, event_from_dict
from .slots import TimeSlot
from .config import ClassifierRules
from .diagnostics import Diagnostic
from .dates import DateRange, InvalidRangeError
from .layout import (
    LayoutOptions,
    Assignment,
    NormalizedRect,
    PositionedEvent,
    DayLayout,
    LayoutResult,
)

__all__ = [
    "Variant",
    "DiagnosticCode",
    "parse_iso_datetime",
    "parse_bool",
    "Event",
    "event_from_dict",
    "TimeSlot",
    "ClassifierRules",
    "Diagnostic",
    "DateRange",
    "InvalidRangeError",
    "LayoutOptions",
    "Assignment",
    "NormalizedRect",
    "PositionedEvent",
    "DayLayout",
    "LayoutResult",
]
