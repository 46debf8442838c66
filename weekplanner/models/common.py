# File: weekplanner/models/common.py

from datetime import date, datetime
from typing import Optional, Union


def parse_iso_datetime(value: Union[str, datetime, date, None]) -> Optional[datetime]:
    """Robustly parse ISO date strings with 'Z' or offsets.

    datetime values pass through unchanged, plain dates become local midnight.
    Returns None for anything that cannot be parsed.
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, datetime.min.time())
    if not isinstance(value, str):
        return None
    try:
        # fromisoformat on Python < 3.11 rejects a trailing 'Z'
        return datetime.fromisoformat(value.strip().replace('Z', '+00:00'))
    except ValueError:
        # Fallback for simple date strings without time
        try:
            return datetime.strptime(value.strip(), "%Y-%m-%d")
        except ValueError:
            return None


def parse_bool(value) -> Optional[bool]:
    """Parse loose boolean flags ("Yes", "true", 1). None stays None."""
    if value is None:
        return None
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in ['yes', 'true', '1', 'y', 't']
