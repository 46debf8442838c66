# File: weekplanner/services/event_source.py
"""
Input boundary: loads Event records from JSON exports.

Two record shapes are understood:
  * app records: {"id", "title", "startTime", "endTime", "source", ...}
  * Google Calendar API events.list items: {"id", "summary", "start": {...}, ...}
"""

import datetime
import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from weekplanner.layout.local_time import resolve_timezone
from weekplanner.models import Diagnostic, DiagnosticCode, Event, event_from_dict
from weekplanner.utils.logger import setup_logger

logger = setup_logger(__name__)

GOOGLE_SOURCE_TAG = "google"


class EventFileSource:
    """Reads events from a JSON file on disk."""

    def __init__(self, timezone=None):
        """
        Initialize the event source.

        Args:
            timezone: Timezone used for Google all-day dates (default: Config.TARGET_TIMEZONE)
        """
        self.timezone = resolve_timezone(timezone)

    def load(self, path: Path) -> Tuple[List[Event], List[Diagnostic]]:
        """
        Load events from a JSON file.

        Args:
            path: File holding a list of records, or an object with an
                "events" or "items" list

        Returns:
            Tuple of (events in file order, diagnostics for skipped records)

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If the file is not valid JSON or has no record list
        """
        path = Path(path)
        logger.info(f"Loading events from {path}")

        with open(path, 'r', encoding='utf-8') as f:
            try:
                payload = json.load(f)
            except json.JSONDecodeError as e:
                raise ValueError(f"{path} is not valid JSON: {e}") from e

        events, diagnostics = self.parse(payload)
        logger.info(f"Loaded {len(events)} events ({len(diagnostics)} skipped)")
        return events, diagnostics

    def parse(self, payload: Any) -> Tuple[List[Event], List[Diagnostic]]:
        """Convert an already-decoded JSON payload into events."""
        calendar_id = None
        if isinstance(payload, dict):
            calendar_id = payload.get('calendarId')
            records = payload.get('events', payload.get('items'))
        else:
            records = payload

        if not isinstance(records, list):
            raise ValueError("Expected a list of events or an object with 'events' or 'items'")

        events: List[Event] = []
        diagnostics: List[Diagnostic] = []

        for index, record in enumerate(records):
            try:
                if isinstance(record.get('start'), dict):
                    events.append(self._from_google_item(record, calendar_id))
                else:
                    events.append(event_from_dict(record))
            except (AttributeError, KeyError, TypeError, ValueError) as e:
                record_id = record.get('id') if isinstance(record, dict) else None
                logger.warning(f"Could not parse event record {index}: {e}")
                diagnostics.append(Diagnostic(
                    DiagnosticCode.MALFORMED_EVENT,
                    f"record {index} could not be parsed: {e}",
                    str(record_id) if record_id is not None else None,
                ))

        return events, diagnostics

    def _from_google_item(self, item: Dict[str, Any], calendar_id: Optional[str]) -> Event:
        """Convert one Google Calendar API event resource."""
        start_raw = item['start']
        end_raw = item.get('end', {})
        is_all_day = 'date' in start_raw and 'dateTime' not in start_raw

        private_props = item.get('extendedProperties', {}).get('private', {})
        organizer = item.get('organizer', {}).get('email')

        return Event(
            id=str(item.get('id', '')),
            title=item.get('summary', 'No Title'),
            start_time=self._parse_gc_time(start_raw.get('dateTime', start_raw.get('date'))),
            end_time=self._parse_gc_time(end_raw.get('dateTime', end_raw.get('date'))),
            source_tag=private_props.get('source', GOOGLE_SOURCE_TAG),
            calendar_id=calendar_id or organizer,
            description=item.get('description'),
            notes=private_props.get('notes'),
            action_items=private_props.get('actionItems'),
            explicit_all_day=True if is_all_day else None,
        )

    def _parse_gc_time(self, time_str: Optional[str]) -> Optional[datetime.datetime]:
        """Helper to safely parse Google Calendar date/dateTime strings."""
        if not time_str:
            return None
        try:
            if 'T' not in time_str:
                # Date-only format (all-day events) is local midnight
                date_obj = datetime.datetime.strptime(time_str, "%Y-%m-%d").date()
                return self.timezone.localize(datetime.datetime.combine(date_obj, datetime.time.min))
            # Full ISO format with time and timezone
            return datetime.datetime.fromisoformat(time_str.replace('Z', '+00:00'))
        except ValueError:
            return None
