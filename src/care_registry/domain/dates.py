"""
Calendar date parsing shared by validation and range filtering.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Optional


def parse_calendar_date(value: Optional[str]) -> Optional[date]:
    """
    Parse an ISO date or datetime string into a calendar date.

    Returns None when the value is absent or cannot be parsed.
    """
    if value is None:
        return None
    text = value.strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        return None
