"""
utils/timeutil.py
-----------------
Date helpers shared by the period resolver, analytics and handlers.
"""

from datetime import date, datetime, time, timedelta
from typing import Callable

from errors import ValidationError

Clock = Callable[[], datetime]


def start_of_day(day: date) -> datetime:
    return datetime.combine(day, time.min)


def end_of_day(day: date) -> datetime:
    return datetime.combine(day, time.max)


def week_start(day: date) -> date:
    """Monday of the week containing `day`."""
    return day - timedelta(days=day.weekday())


def parse_date(value) -> date:
    """
    Parse an ISO `YYYY-MM-DD` string (or pass a date through).

    Raises:
        ValidationError: If the value is not a valid calendar date.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value).strip())
    except ValueError:
        raise ValidationError(f"Malformed date {value!r}, expected YYYY-MM-DD") from None
