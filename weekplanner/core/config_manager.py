# File: weekplanner/core/config_manager.py
"""
Centralized configuration management for the weekly planner.
Loads settings from environment variables and config files.
"""

import os
import json
from pathlib import Path
from typing import List

import pytz
from dotenv import load_dotenv

from weekplanner.models.config import ClassifierRules

# Load environment variables
load_dotenv()


def _env_list(name: str, default: str) -> List[str]:
    """Read a comma separated environment variable into a list."""
    raw = os.getenv(name, default)
    return [item.strip() for item in raw.split(',') if item.strip()]


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ['1', 'true', 'yes', 'y', 'on']


class Config:
    """Application configuration singleton."""

    # Base directories
    BASE_DIR = Path(__file__).parent.parent.parent  # Go up 3 levels from weekplanner/core/

    # Subdirectories
    CONFIG_DIR = BASE_DIR / "config"
    OUTPUT_DIR = BASE_DIR / "output"
    LOGS_DIR = BASE_DIR / "logs"

    # Files
    CLASSIFIER_FILE = CONFIG_DIR / "classifier.json"
    LAYOUT_OUTPUT_FILE = OUTPUT_DIR / "week_layout.json"

    # Application Settings
    TARGET_TIMEZONE = os.getenv("TIMEZONE", "America/New_York")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_TO_FILE = _env_flag("LOG_TO_FILE")

    # Event classification
    PRACTICE_PROVIDER_TAG = os.getenv("PRACTICE_PROVIDER_TAG", "simplepractice")
    PRACTICE_BRAND_PHRASE = os.getenv("PRACTICE_BRAND_PHRASE", "SimplePractice")
    EXTERNAL_CALENDAR_TAGS: List[str] = _env_list("EXTERNAL_CALENDAR_TAGS", "google")
    HOLIDAY_CALENDAR_IDS: List[str] = _env_list(
        "HOLIDAY_CALENDAR_IDS", "en.usa#holiday@group.v.calendar.google.com"
    )
    PRACTICE_CALENDAR_IDS: List[str] = _env_list(
        "PRACTICE_CALENDAR_IDS", "0np7sib5u30o7oc297j5pb259g"
    )

    @classmethod
    def default_classifier_rules(cls) -> ClassifierRules:
        """Classifier rules built from environment settings only."""
        return ClassifierRules(
            practice_provider_tag=cls.PRACTICE_PROVIDER_TAG,
            practice_brand_phrase=cls.PRACTICE_BRAND_PHRASE,
            external_calendar_tags=list(cls.EXTERNAL_CALENDAR_TAGS),
            holiday_calendar_ids=list(cls.HOLIDAY_CALENDAR_IDS),
            practice_calendar_ids=list(cls.PRACTICE_CALENDAR_IDS),
        )

    @classmethod
    def load_classifier_rules(cls, path: Path = None) -> ClassifierRules:
        """
        Load classifier rules, letting config/classifier.json override env defaults.

        Args:
            path: Optional override for the JSON rules file

        Returns:
            ClassifierRules instance
        """
        path = path or cls.CLASSIFIER_FILE
        defaults = cls.default_classifier_rules()

        if not path.exists():
            return defaults

        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)

        merged = defaults.to_dict()
        merged.update({k: v for k, v in data.items() if k in merged})
        return ClassifierRules.from_dict(merged)

    @classmethod
    def validate(cls) -> List[str]:
        """Return a list of configuration problems (empty when valid)."""
        errors = []

        try:
            pytz.timezone(cls.TARGET_TIMEZONE)
        except pytz.UnknownTimeZoneError:
            errors.append(f"Unknown TIMEZONE: {cls.TARGET_TIMEZONE}")

        if not cls.PRACTICE_PROVIDER_TAG.strip():
            errors.append("PRACTICE_PROVIDER_TAG must not be empty")

        return errors
