"""
services/period_service.py
--------------------------
Resolves the weekly budget window and the daily window.

There is exactly one forward-looking weekly window per user. It is never
rolled forward here; setting a new target is what opens a new one.
"""

from datetime import datetime, timedelta
from decimal import Decimal

from config import DEFAULT_WEEKLY_TARGET
from errors import ValidationError
from models.budget import BudgetPeriod
from models.mission import WindowKind
from models.saving import TimeWindow
from utils.money import to_decimal
from utils.timeutil import end_of_day, start_of_day, week_start

WEEK_LENGTH_DAYS = 7


def new_period(target, now: datetime) -> BudgetPeriod:
    """
    Build a fresh period for `target`, covering today and the next six days.

    Raises:
        ValidationError: The target is negative or not a number.
    """
    amount = to_decimal(target, field="target")
    if amount < 0:
        raise ValidationError(f"Budget target must not be negative, got {amount}")
    today = now.date()
    return BudgetPeriod(
        target_amount=amount,
        start_date=today,
        end_date=today + timedelta(days=WEEK_LENGTH_DAYS - 1),
        updated_at=now,
    )


def default_period(now: datetime, target: Decimal = DEFAULT_WEEKLY_TARGET) -> BudgetPeriod:
    """Monday-to-Sunday week of `now`, shown until the user sets a target."""
    monday = week_start(now.date())
    return BudgetPeriod(
        target_amount=target,
        start_date=monday,
        end_date=monday + timedelta(days=WEEK_LENGTH_DAYS - 1),
    )


def weekly_window(period: BudgetPeriod) -> TimeWindow:
    return TimeWindow(
        kind=WindowKind.WEEKLY,
        start=start_of_day(period.start_date),
        end=end_of_day(period.end_date),
    )


def daily_window(as_of: datetime) -> TimeWindow:
    day = as_of.date()
    return TimeWindow(kind=WindowKind.DAILY, start=start_of_day(day), end=end_of_day(day))


def current_window(period: BudgetPeriod, as_of: datetime, kind: WindowKind = WindowKind.WEEKLY) -> TimeWindow:
    """Window of the requested kind; the weekly one ignores `as_of`."""
    if kind is WindowKind.DAILY:
        return daily_window(as_of)
    return weekly_window(period)
