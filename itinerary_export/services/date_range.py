"""
Date range expansion - One entry per calendar day of a trip.
"""
from datetime import date, datetime, timedelta
from typing import Union

from ..errors import InvalidRangeError


def _as_calendar_date(value: Union[date, datetime]) -> date:
    # datetime is a date subclass; drop the time-of-day
    if isinstance(value, datetime):
        return value.date()
    return value


def expand(start_date: Union[date, datetime], end_date: Union[date, datetime]) -> list[date]:
    """
    Expand an inclusive start/end pair into consecutive calendar days.

    Args:
        start_date: First day of the trip
        end_date: Last day of the trip

    Returns:
        Every day from start_date to end_date, both included

    Raises:
        InvalidRangeError: If end_date is before start_date
    """
    start = _as_calendar_date(start_date)
    end = _as_calendar_date(end_date)
    if end < start:
        raise InvalidRangeError(start, end)

    return [start + timedelta(days=offset) for offset in range((end - start).days + 1)]
