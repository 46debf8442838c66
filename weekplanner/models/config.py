# File: weekplanner/models/config.py
"""
Data models for event classification settings.
"""

from dataclasses import dataclass, field, asdict
from typing import List


@dataclass
class ClassifierRules:
    """Provider tags and calendar ids the event classifier matches against."""
    practice_provider_tag: str = "simplepractice"
    practice_brand_phrase: str = "SimplePractice"
    external_calendar_tags: List[str] = field(default_factory=lambda: ["google"])
    holiday_calendar_ids: List[str] = field(default_factory=list)
    practice_calendar_ids: List[str] = field(default_factory=list)

    def __post_init__(self):
        """Normalize tags for case-insensitive matching."""
        self.practice_provider_tag = self.practice_provider_tag.strip().lower()
        self.external_calendar_tags = [t.strip().lower() for t in self.external_calendar_tags]

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> 'ClassifierRules':
        """Create ClassifierRules from dictionary (e.g., loaded from JSON)."""
        defaults = cls()
        return cls(
            practice_provider_tag=str(data.get('practice_provider_tag', defaults.practice_provider_tag)),
            practice_brand_phrase=str(data.get('practice_brand_phrase', defaults.practice_brand_phrase)),
            external_calendar_tags=list(data.get('external_calendar_tags', defaults.external_calendar_tags)),
            holiday_calendar_ids=list(data.get('holiday_calendar_ids', defaults.holiday_calendar_ids)),
            practice_calendar_ids=list(data.get('practice_calendar_ids', defaults.practice_calendar_ids)),
        )
