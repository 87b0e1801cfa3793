from datetime import date, datetime, time
from decimal import Decimal

import pytest

from errors import ValidationError
from models.budget import BudgetPeriod
from models.mission import WindowKind
from services import period_service


def test_new_period_is_seven_days_from_today():
    now = datetime(2026, 10, 14, 15, 30)
    period = period_service.new_period("70000", now)

    assert period.target_amount == Decimal("70000.00")
    assert period.start_date == date(2026, 10, 14)
    assert period.end_date == date(2026, 10, 20)
    assert period.days == 7
    assert period.updated_at == now


def test_new_period_rejects_negative_target():
    with pytest.raises(ValidationError):
        period_service.new_period(-1, datetime(2026, 10, 14))


def test_zero_target_is_allowed():
    period = period_service.new_period(0, datetime(2026, 10, 14))
    assert period.target_amount == Decimal("0.00")


def test_budget_period_rejects_inverted_dates():
    with pytest.raises(ValidationError):
        BudgetPeriod(target_amount=Decimal("1"), start_date=date(2026, 10, 20), end_date=date(2026, 10, 14))


def test_default_period_is_monday_to_sunday():
    period = period_service.default_period(datetime(2026, 10, 14, 9), target=Decimal("100000"))
    assert period.start_date == date(2026, 10, 12)
    assert period.end_date == date(2026, 10, 18)


def test_weekly_window_covers_whole_days_and_is_not_rolled_forward():
    period = period_service.new_period(1000, datetime(2026, 10, 1, 12))
    window = period_service.current_window(period, as_of=datetime(2026, 10, 30))

    assert window.kind is WindowKind.WEEKLY
    assert window.start == datetime(2026, 10, 1, 0, 0)
    assert window.end == datetime.combine(date(2026, 10, 7), time.max)
    assert window.contains(datetime(2026, 10, 7, 23, 59, 59))
    assert not window.contains(datetime(2026, 10, 8, 0, 0))


def test_daily_window_is_independent_of_period():
    period = period_service.new_period(1000, datetime(2026, 10, 1, 12))
    window = period_service.current_window(period, as_of=datetime(2026, 10, 30, 18), kind=WindowKind.DAILY)

    assert window.start == datetime(2026, 10, 30)
    assert window.contains(datetime(2026, 10, 30, 23, 59))
    assert window.key == "daily:2026-10-30"


def test_weekly_window_key_changes_with_new_period():
    first = period_service.weekly_window(period_service.new_period(1000, datetime(2026, 10, 14)))
    second = period_service.weekly_window(period_service.new_period(1000, datetime(2026, 10, 15)))
    assert first.key == "weekly:2026-10-14..2026-10-20"
    assert first.key != second.key
