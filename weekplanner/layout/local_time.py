# File: weekplanner/layout/local_time.py

from datetime import datetime
from typing import Union

import pytz
from pytz.tzinfo import BaseTzInfo

from weekplanner.core.config_manager import Config


def resolve_timezone(timezone: Union[str, BaseTzInfo, None] = None) -> BaseTzInfo:
    """pytz timezone from a name, an existing tz, or Config.TARGET_TIMEZONE."""
    if timezone is None:
        timezone = Config.TARGET_TIMEZONE
    if isinstance(timezone, str):
        return pytz.timezone(timezone)
    return timezone


def to_local(value: datetime, timezone: BaseTzInfo) -> datetime:
    """Naive local wall-clock time.

    Aware datetimes are converted into the planner timezone; naive ones are
    taken to be local already.
    """
    if value.tzinfo is not None and value.tzinfo.utcoffset(value) is not None:
        return value.astimezone(timezone).replace(tzinfo=None)
    return value
