# File: weekplanner/models/enums.py

from enum import Enum


class Variant(Enum):
    """Presentation category of a rendered event."""
    PRACTICE_APPOINTMENT = "practice-appointment"
    EXTERNAL_CALENDAR = "external-calendar"
    PERSONAL = "personal"
    HOLIDAY = "holiday"


class DiagnosticCode(Enum):
    """Per-event problems collected during a layout pass."""
    MALFORMED_EVENT = "malformed-event"          # missing/unparseable times or end <= start
    OUT_OF_GRID = "out-of-grid"                  # no overlap with 06:00-24:00, dropped
    CLIPPED = "clipped"                          # partially outside the grid, clipped
    DEGENERATE_DURATION = "degenerate-duration"  # floored to one slot
