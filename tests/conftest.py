# File: tests/conftest.py
"""
Pytest configuration and shared fixtures.
Provides reusable events and engine components for all tests.
"""

import pytest
from datetime import date, datetime, timedelta
from pathlib import Path
import sys

# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from weekplanner.models import ClassifierRules, Event
from weekplanner.layout import EventClassifier, LayoutEngine, OverlapResolver, AllDayExtractor

TIMEZONE = "America/New_York"


# ==================== Date Fixtures ====================

@pytest.fixture
def monday():
    """A fixed Monday so tests never depend on today's date."""
    return date(2025, 7, 7)


# ==================== Event Fixtures ====================

@pytest.fixture
def make_event(monday):
    """Factory for naive local events on the fixed Monday (HH:MM strings)."""
    def _make(event_id, start, end, title=None, day=None, **kwargs):
        day = day or monday

        def at(value):
            if value is None or isinstance(value, datetime):
                return value
            hour, minute = (int(part) for part in value.split(':'))
            return datetime(day.year, day.month, day.day, hour, minute)

        return Event(
            id=event_id,
            title=title or f"Event {event_id}",
            start_time=at(start),
            end_time=at(end),
            **kwargs
        )
    return _make


@pytest.fixture
def all_day_event(monday):
    """Create a midnight-to-midnight holiday."""
    midnight = datetime(monday.year, monday.month, monday.day)
    return Event(
        id="holiday_1",
        title="Independence Day Observed Holiday",
        start_time=midnight,
        end_time=midnight + timedelta(days=1),
        calendar_id="en.usa#holiday@group.v.calendar.google.com",
    )


# ==================== Component Fixtures ====================

@pytest.fixture
def classifier_rules():
    """Classifier rules independent of the environment."""
    return ClassifierRules(
        practice_provider_tag="simplepractice",
        practice_brand_phrase="SimplePractice",
        external_calendar_tags=["google"],
        holiday_calendar_ids=["en.usa#holiday@group.v.calendar.google.com"],
        practice_calendar_ids=["practice-calendar"],
    )


@pytest.fixture
def classifier(classifier_rules):
    return EventClassifier(classifier_rules)


@pytest.fixture
def resolver():
    return OverlapResolver(TIMEZONE)


@pytest.fixture
def extractor():
    return AllDayExtractor(TIMEZONE)


@pytest.fixture
def engine(classifier):
    """Layout engine pinned to a known timezone and rule set."""
    return LayoutEngine(classifier=classifier, timezone=TIMEZONE)
