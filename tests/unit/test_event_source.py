# File: tests/unit/test_event_source.py
"""
Unit tests for loading events from JSON exports.
"""

import json
import pytest
from datetime import datetime

from weekplanner.models import DiagnosticCode
from weekplanner.services.event_source import EventFileSource


@pytest.fixture
def source():
    return EventFileSource("America/New_York")


def _write(tmp_path, payload, name="events.json"):
    path = tmp_path / name
    path.write_text(json.dumps(payload), encoding='utf-8')
    return path


class TestAppRecords:
    """Tests for app-shaped records."""

    def test_load_list(self, source, tmp_path):
        path = _write(tmp_path, [
            {'id': '1', 'title': 'Jane Doe Appointment', 'startTime': '2025-07-07T09:00:00',
             'endTime': '2025-07-07T10:00:00', 'source': 'simplepractice'},
            {'id': '2', 'title': 'Gym', 'startTime': '2025-07-07T18:00:00',
             'endTime': '2025-07-07T19:00:00'},
        ])

        events, diagnostics = source.load(path)

        assert [e.id for e in events] == ['1', '2']
        assert events[0].source_tag == 'simplepractice'
        assert diagnostics == []

    def test_events_key(self, source, tmp_path):
        path = _write(tmp_path, {'events': [
            {'id': '1', 'title': 'Gym', 'startTime': '2025-07-07T18:00:00', 'endTime': '2025-07-07T19:00:00'},
        ]})

        events, _ = source.load(path)

        assert len(events) == 1

    def test_unparseable_record_skipped(self, source, tmp_path):
        path = _write(tmp_path, [
            "not a record",
            {'id': '2', 'title': 'Gym', 'startTime': '2025-07-07T18:00:00', 'endTime': '2025-07-07T19:00:00'},
        ])

        events, diagnostics = source.load(path)

        assert [e.id for e in events] == ['2']
        assert diagnostics[0].code is DiagnosticCode.MALFORMED_EVENT
        assert "record 0" in diagnostics[0].message


class TestGoogleItems:
    """Tests for Google Calendar API events.list items."""

    def test_timed_item(self, source, tmp_path):
        path = _write(tmp_path, {'items': [{
            'id': 'g1',
            'summary': 'Dan re: Supervision',
            'start': {'dateTime': '2025-07-07T14:00:00-04:00'},
            'end': {'dateTime': '2025-07-07T15:00:00-04:00'},
            'organizer': {'email': 'dan@example.com'},
        }]})

        events, _ = source.load(path)

        event = events[0]
        assert event.title == 'Dan re: Supervision'
        assert event.source_tag == 'google'
        assert event.calendar_id == 'dan@example.com'
        assert event.start_time.utcoffset().total_seconds() == -4 * 3600
        assert event.explicit_all_day is None

    def test_all_day_item(self, source, tmp_path):
        path = _write(tmp_path, {
            'calendarId': 'en.usa#holiday@group.v.calendar.google.com',
            'items': [{
                'id': 'h1',
                'summary': 'Independence Day',
                'start': {'date': '2025-07-04'},
                'end': {'date': '2025-07-05'},
            }],
        })

        events, _ = source.load(path)

        event = events[0]
        assert event.explicit_all_day is True
        assert event.calendar_id == 'en.usa#holiday@group.v.calendar.google.com'
        assert event.start_time.replace(tzinfo=None) == datetime(2025, 7, 4)
        assert event.start_time.tzinfo is not None

    def test_private_source_override(self, source):
        events, _ = source.parse([{
            'id': 'g2',
            'summary': 'Session',
            'start': {'dateTime': '2025-07-07T09:00:00Z'},
            'end': {'dateTime': '2025-07-07T10:00:00Z'},
            'extendedProperties': {'private': {'source': 'simplepractice', 'notes': 'Bring forms'}},
        }])

        assert events[0].source_tag == 'simplepractice'
        assert events[0].notes == 'Bring forms'


class TestFileErrors:

    def test_missing_file(self, source, tmp_path):
        with pytest.raises(FileNotFoundError):
            source.load(tmp_path / "missing.json")

    def test_invalid_json(self, source, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding='utf-8')

        with pytest.raises(ValueError, match="not valid JSON"):
            source.load(path)

    def test_no_record_list(self, source):
        with pytest.raises(ValueError, match="Expected a list"):
            source.parse({'kind': 'calendar#events'})
