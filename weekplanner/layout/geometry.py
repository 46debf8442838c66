# File: weekplanner/layout/geometry.py

from weekplanner.layout.time_slots import SLOT_COUNT
from weekplanner.models import Assignment, NormalizedRect


class GeometryMapper:
    """Turns slot/column assignments into fractions of a day-column's box."""

    @staticmethod
    def to_rect(assignment: Assignment) -> NormalizedRect:
        """
        Normalized rectangle for an assignment.

        Height never drops below one slot, so zero-length or inverted spans
        stay visible.
        """
        span = max(1, assignment.end_slot_exclusive - assignment.start_slot)
        column_count = max(1, assignment.column_count)
        return NormalizedRect(
            top=assignment.start_slot / SLOT_COUNT,
            height=span / SLOT_COUNT,
            left=assignment.column / column_count,
            width=1 / column_count,
        )
