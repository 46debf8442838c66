# File: weekplanner/layout/classifier.py
"""
Assigns every event exactly one presentation variant.

Rules are evaluated in order and the first match wins, so an event titled
"Holiday Appointment" from the practice provider is still a holiday.
"""

import re
from typing import Callable, List, Optional, Tuple

from weekplanner.core.config_manager import Config
from weekplanner.models import ClassifierRules, Event, Variant

# The practice provider renames synced events to "<Name> Appointment"
APPOINTMENT_SUFFIX = re.compile(r'\bappointment\s*$', re.IGNORECASE)

SOURCE_LABELS = {
    Variant.PRACTICE_APPOINTMENT: "SimplePractice",
    Variant.EXTERNAL_CALENDAR: "Google Calendar",
    Variant.PERSONAL: "Personal",
    Variant.HOLIDAY: "Holidays in United States",
}


def source_label(variant: Variant) -> str:
    """Legend caption shown by both renderers for a variant."""
    return SOURCE_LABELS[variant]


def _contains(text: Optional[str], needle: str) -> bool:
    return bool(text) and bool(needle) and needle.lower() in text.lower()


class EventClassifier:
    """Ordered rule set mapping events to variants."""

    def __init__(self, rules: ClassifierRules = None):
        """
        Initialize the classifier.

        Args:
            rules: Provider tags and calendar ids (default: loaded from Config)
        """
        self.rules = rules or Config.load_classifier_rules()
        self._ordered_rules: List[Tuple[Variant, Callable[[Event], bool]]] = [
            (Variant.HOLIDAY, self._is_holiday),
            (Variant.PRACTICE_APPOINTMENT, self._is_practice_appointment),
            (Variant.EXTERNAL_CALENDAR, self._is_external_calendar),
        ]

    def classify(self, event: Event) -> Variant:
        """Return the first matching variant, personal when nothing matches."""
        for variant, matches in self._ordered_rules:
            if matches(event):
                return variant
        return Variant.PERSONAL

    def _is_holiday(self, event: Event) -> bool:
        return (
            _contains(event.title, "holiday")
            or (event.calendar_id is not None and event.calendar_id in self.rules.holiday_calendar_ids)
        )

    def _is_practice_appointment(self, event: Event) -> bool:
        if (event.source_tag or "").strip().lower() == self.rules.practice_provider_tag:
            return True
        if event.calendar_id is not None and event.calendar_id in self.rules.practice_calendar_ids:
            return True
        brand = self.rules.practice_brand_phrase
        if any(_contains(text, brand) for text in (event.title, event.description, event.notes)):
            return True
        return bool(APPOINTMENT_SUFFIX.search(event.title or ""))

    def _is_external_calendar(self, event: Event) -> bool:
        return (event.source_tag or "").strip().lower() in self.rules.external_calendar_tags
