# File: weekplanner/models/diagnostics.py
"""
Data models for per-event layout problems.
"""

from dataclasses import dataclass
from datetime import date
from typing import Optional

from .enums import DiagnosticCode


@dataclass(frozen=True)
class Diagnostic:
    """A per-event data problem collected instead of raised."""
    code: DiagnosticCode
    message: str
    event_id: Optional[str] = None
    date: Optional[date] = None

    def __str__(self) -> str:
        """String representation of the diagnostic."""
        where = f" on {self.date.isoformat()}" if self.date else ""
        if self.event_id is not None:
            return f"[{self.code.value}] event {self.event_id}{where}: {self.message}"
        return f"[{self.code.value}]{where} {self.message}"

    def to_dict(self) -> dict:
        return {
            'code': self.code.value,
            'message': self.message,
            'event_id': self.event_id,
            'date': self.date.isoformat() if self.date else None,
        }
