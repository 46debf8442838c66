# File: weekplanner/layout/engine.py
"""
Main layout engine for the weekly planner.
Coordinates classification, all-day extraction, overlap resolution and
geometry into one DayLayout per day.

Every call recomputes from scratch; nothing is cached between calls, so the
screen view and the export pass can run it independently.
"""

from collections import defaultdict
from datetime import date, datetime, time, timedelta
from typing import Dict, Iterable, List, Tuple, Union

from weekplanner.layout.all_day import AllDayExtractor
from weekplanner.layout.classifier import EventClassifier, source_label
from weekplanner.layout.geometry import GeometryMapper
from weekplanner.layout.local_time import resolve_timezone, to_local
from weekplanner.layout.overlap import OverlapResolver
from weekplanner.layout.text import display_title
from weekplanner.models import (
    DateRange, DayLayout, Diagnostic, DiagnosticCode, Event,
    LayoutOptions, LayoutResult, PositionedEvent,
)
from weekplanner.utils.logger import LoggerMixin


class LayoutEngine(LoggerMixin):
    """
    Turns a set of events and a date range into per-day layouts.

    Pipeline:
        1. Drop malformed events (reported as diagnostics)
        2. Split all-day banners from timed events
        3. Bucket events by local start day
        4. Classify, resolve overlaps and map geometry per day
    """

    def __init__(self,
                 classifier: EventClassifier = None,
                 timezone=None,
                 options: LayoutOptions = None):
        """
        Initialize the engine.

        Args:
            classifier: Event classifier (default: rules from Config)
            timezone: Planner timezone name or pytz tz (default: Config.TARGET_TIMEZONE)
            options: Layout options (default: LayoutOptions())
        """
        self.timezone = resolve_timezone(timezone)
        self.classifier = classifier or EventClassifier()
        self.extractor = AllDayExtractor(self.timezone)
        self.resolver = OverlapResolver(self.timezone)
        self.options = options or LayoutOptions()

    def layout(self,
               events: Iterable[Event],
               date_range: Union[DateRange, Tuple[date, date]]) -> LayoutResult:
        """
        Lay out events over an inclusive date range.

        Args:
            events: Events from the event store (never mutated)
            date_range: DateRange or (start, end) tuple

        Returns:
            LayoutResult with one DayLayout per day, in date order

        Raises:
            InvalidRangeError: If the range ends before it starts
        """
        if not isinstance(date_range, DateRange):
            date_range = DateRange(*date_range)

        events = list(events)
        self.logger.info(
            f"Laying out {len(events)} events for "
            f"{date_range.start.isoformat()} to {date_range.end.isoformat()}"
        )

        diagnostics: List[Diagnostic] = []
        valid = self._drop_malformed(events, diagnostics)
        partition = self.extractor.partition(valid)

        all_day_by_day = self._bucket_all_day(partition.all_day)
        timed_by_day = self._bucket_by_start(partition.timed)

        result = LayoutResult(diagnostics=diagnostics)
        for day in date_range.days():
            day_layout, day_diagnostics = self._layout_day(
                day, all_day_by_day.get(day, []), timed_by_day.get(day, [])
            )
            result.days.append(day_layout)
            diagnostics.extend(day_diagnostics)

        for diagnostic in diagnostics:
            self.logger.warning(str(diagnostic))

        self.logger.info(
            f"Layout complete: {sum(d.event_count for d in result.days)} placements "
            f"({len(diagnostics)} diagnostics)"
        )
        return result

    def layout_week(self, events: Iterable[Event], day: date) -> LayoutResult:
        """Lay out the Monday-Sunday week containing day."""
        return self.layout(events, DateRange.week_of(day))

    def _drop_malformed(self, events: List[Event], diagnostics: List[Diagnostic]) -> List[Event]:
        valid = []
        for event in events:
            error = event.validation_error()
            if error is None:
                valid.append(event)
                continue
            start_day = (
                to_local(event.start_time, self.timezone).date()
                if isinstance(event.start_time, datetime) else None
            )
            diagnostics.append(Diagnostic(DiagnosticCode.MALFORMED_EVENT, error, event.id, start_day))
        return valid

    def _local_start_day(self, event: Event) -> date:
        return to_local(event.start_time, self.timezone).date()

    def _time_range(self, event: Event) -> str:
        start = to_local(event.start_time, self.timezone)
        end = to_local(event.end_time, self.timezone)
        return f"{start.strftime('%H:%M')}-{end.strftime('%H:%M')}"

    def _bucket_by_start(self, events: List[Event]) -> Dict[date, List[Event]]:
        buckets: Dict[date, List[Event]] = defaultdict(list)
        for event in events:
            buckets[self._local_start_day(event)].append(event)
        return buckets

    def _bucket_all_day(self, events: List[Event]) -> Dict[date, List[Event]]:
        if not self.options.span_all_day_events:
            return self._bucket_by_start(events)

        buckets: Dict[date, List[Event]] = defaultdict(list)
        for event in events:
            first = self._local_start_day(event)
            end = to_local(event.end_time, self.timezone)
            # an end at midnight belongs to the previous day
            last = end.date() - timedelta(days=1) if end.time() == time(0, 0) else end.date()
            day = first
            while day <= max(first, last):
                buckets[day].append(event)
                day += timedelta(days=1)
        return buckets

    def _layout_day(self,
                    day: date,
                    all_day: List[Event],
                    timed: List[Event]) -> Tuple[DayLayout, List[Diagnostic]]:
        day_layout = DayLayout(date=day)

        for event in all_day:
            variant = self.classifier.classify(event)
            day_layout.all_day.append(PositionedEvent(
                event=event,
                variant=variant,
                is_all_day=True,
                date=day,
                display_title=display_title(event, variant),
                source_label=source_label(variant),
            ))

        assignments, diagnostics = self.resolver.resolve(timed, day)
        for assignment in assignments:
            variant = self.classifier.classify(assignment.event)
            day_layout.timed.append(PositionedEvent(
                event=assignment.event,
                variant=variant,
                is_all_day=False,
                date=day,
                display_title=display_title(assignment.event, variant),
                source_label=source_label(variant),
                time_range=self._time_range(assignment.event),
                start_slot=assignment.start_slot,
                end_slot_exclusive=assignment.end_slot_exclusive,
                column=assignment.column,
                column_count=assignment.column_count,
                rect=GeometryMapper.to_rect(assignment),
            ))

        self.logger.debug(
            f"{day.isoformat()}: {len(day_layout.all_day)} all-day, "
            f"{len(day_layout.timed)} timed, {day_layout.max_columns()} columns"
        )
        return day_layout, diagnostics
