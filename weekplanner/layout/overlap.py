# File: weekplanner/layout/overlap.py
"""
Assigns timed events a vertical slot span and a horizontal column.

Events are coloured greedily in (start slot, end slot, id) order: each event
takes the lowest column not held by an event that is still running. Every
event in a chain of overlapping events (a cluster) shares the same column
count, which equals the peak number of simultaneous events in the cluster.
"""

from dataclasses import replace
from datetime import date
from typing import List, Tuple

from weekplanner.layout.local_time import resolve_timezone, to_local
from weekplanner.layout.time_slots import SLOT_COUNT, TimeSlotIndex
from weekplanner.models import Assignment, Diagnostic, DiagnosticCode, Event
from weekplanner.utils.logger import LoggerMixin


class OverlapResolver(LoggerMixin):
    """Resolves slot spans and columns for one day's timed events."""

    def __init__(self, timezone=None):
        self.timezone = resolve_timezone(timezone)

    def resolve(self, events: List[Event], day: date) -> Tuple[List[Assignment], List[Diagnostic]]:
        """
        Place one day's timed events on the grid.

        Args:
            events: Timed (non all-day) events whose start falls on day
            day: The calendar day the grid belongs to

        Returns:
            Tuple of (assignments in placement order, diagnostics)
        """
        spans, diagnostics = self._compute_spans(events, day)
        spans.sort(key=lambda a: (a.start_slot, a.end_slot_exclusive, a.event.id))
        return self._assign_columns(spans), diagnostics

    def _compute_spans(self, events: List[Event], day: date) -> Tuple[List[Assignment], List[Diagnostic]]:
        spans: List[Assignment] = []
        diagnostics: List[Diagnostic] = []

        for event in events:
            error = event.validation_error()
            if error is not None:
                diagnostics.append(Diagnostic(DiagnosticCode.MALFORMED_EVENT, error, event.id, day))
                continue

            start = to_local(event.start_time, self.timezone)
            end = to_local(event.end_time, self.timezone)
            start_slot, end_slot = TimeSlotIndex.boundaries_for(start, end, day)

            if end_slot <= 0 or start_slot >= SLOT_COUNT:
                diagnostics.append(Diagnostic(
                    DiagnosticCode.OUT_OF_GRID,
                    f"{start:%H:%M}-{end:%H:%M} lies outside the 06:00-24:00 grid",
                    event.id, day
                ))
                continue

            if start_slot < 0 or end_slot > SLOT_COUNT:
                diagnostics.append(Diagnostic(
                    DiagnosticCode.CLIPPED,
                    f"{start:%H:%M}-{end:%H:%M} clipped to the grid edge",
                    event.id, day
                ))
                start_slot = TimeSlotIndex.clamp(start_slot)
                end_slot = TimeSlotIndex.clamp(end_slot)

            # visible spans are at least one slot tall
            if end_slot <= start_slot:
                start_slot = min(start_slot, SLOT_COUNT - 1)
                end_slot = start_slot + 1
                diagnostics.append(Diagnostic(
                    DiagnosticCode.DEGENERATE_DURATION,
                    f"{start:%H:%M}-{end:%H:%M} has no visible duration, shown as one slot",
                    event.id, day
                ))

            spans.append(Assignment(event, start_slot, end_slot))

        return spans, diagnostics

    def _assign_columns(self, spans: List[Assignment]) -> List[Assignment]:
        columns: List[int] = []
        clusters: List[List[int]] = []  # indices into spans
        active: List[Tuple[int, int]] = []  # (end_slot_exclusive, column)

        for i, span in enumerate(spans):
            active = [(end, col) for end, col in active if end > span.start_slot]
            if not active:
                clusters.append([])

            taken = {col for _, col in active}
            column = 0
            while column in taken:
                column += 1

            active.append((span.end_slot_exclusive, column))
            columns.append(column)
            clusters[-1].append(i)

        assigned = list(spans)
        for cluster in clusters:
            column_count = max(columns[i] for i in cluster) + 1
            for i in cluster:
                assigned[i] = replace(spans[i], column=columns[i], column_count=column_count)

        self.logger.debug(f"Placed {len(assigned)} events in {len(clusters)} clusters")
        return assigned
