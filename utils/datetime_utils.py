# -*- coding: utf-8 -*-
"""
DateTime Utilities

Centralized date handling for draft serialization and timeline defaults.
"""

from datetime import datetime, date, timedelta
from typing import Union, Optional


def to_isoformat(value: Union[datetime, date, str, None]) -> Optional[str]:
    """
    Convert a date-like value to an ISO string.

    Used by draft and context serialization so every date leaves the
    wizard in the same format.

    Args:
        value: datetime, date, ISO string, or None

    Returns:
        ISO format string, or None when value is None

    Examples:
        >>> to_isoformat(date(2024, 1, 15))
        '2024-01-15'
        >>> to_isoformat(datetime(2024, 1, 15, 10, 30))
        '2024-01-15T10:30:00'
    """
    if value is None:
        return None

    if isinstance(value, str):
        # Validate it parses before handing it back
        if 'T' in value:
            datetime.fromisoformat(value)
        else:
            date.fromisoformat(value)
        return value

    return value.isoformat()


def parse_date(value: Union[str, datetime, date, None]) -> Optional[date]:
    """
    Convert an ISO string, datetime or date to a date.

    Reverse of to_isoformat() for date-only fields. Raises ValueError
    for strings that are not ISO formatted.

    Examples:
        >>> parse_date('2024-01-15')
        date(2024, 1, 15)
        >>> parse_date('2024-01-15T10:30:00')
        date(2024, 1, 15)
        >>> parse_date(None)
        None
    """
    if value is None:
        return None

    # datetime is a subclass of date, check it first
    if isinstance(value, datetime):
        return value.date()

    if isinstance(value, date):
        return value

    if 'T' in value:
        return datetime.fromisoformat(value).date()
    return date.fromisoformat(value)


def add_days(start: date, days: int) -> date:
    """Return the date `days` after `start`."""
    return start + timedelta(days=days)


def today() -> date:
    """Current local date."""
    return datetime.now().date()
