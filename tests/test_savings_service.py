from datetime import datetime
from decimal import Decimal

import pytest

from models.ledger import Ledger
from services import period_service, savings_service

NOW = datetime(2026, 10, 14, 12)


def _window():
    return period_service.weekly_window(period_service.new_period(70000, NOW))


def test_weekly_scenario():
    ledger = Ledger()
    ledger.add("groceries", 20000, "expense", NOW)
    ledger.add("dinner", 15000, "expense", datetime(2026, 10, 16, 19))
    ledger.add("salary", 300000, "income", NOW)

    summary = savings_service.aggregate(ledger, _window(), Decimal("70000"))

    assert summary.target == Decimal("70000")
    assert summary.expenses == Decimal("35000")
    assert summary.saved == Decimal("35000")
    assert summary.goal_met


def test_empty_window_means_zero_expenses():
    ledger = Ledger()
    ledger.add("last month", 5000, "expense", datetime(2026, 9, 1))

    summary = savings_service.aggregate(ledger, _window(), 70000)

    assert summary.expenses == 0
    assert summary.saved == Decimal("70000")


def test_over_budget_gives_negative_saved():
    ledger = Ledger()
    ledger.add("laptop", 90000, "expense", NOW)

    summary = savings_service.aggregate(ledger, _window(), 70000)

    assert summary.saved == Decimal("-20000")
    assert not summary.goal_met


@pytest.mark.parametrize("target", ["0", "0.01", "70000", "123.45"])
def test_saved_is_target_minus_expenses(target):
    ledger = Ledger()
    ledger.add("coffee", "4.10", "expense", NOW)
    ledger.add("bagel", "2.20", "expense", NOW)

    summary = savings_service.aggregate(ledger, _window(), target)

    assert summary.expenses >= 0
    assert summary.expenses == Decimal("6.30")
    assert summary.saved == Decimal(target) - summary.expenses


def test_zero_target_without_spending_meets_goal():
    summary = savings_service.aggregate(Ledger(), _window(), 0)
    assert summary.saved == 0
    assert summary.goal_met


def test_daily_target_is_a_seventh():
    assert savings_service.daily_target(Decimal("70000")) == Decimal("10000.00")
    assert savings_service.daily_target(Decimal("100000")) == Decimal("14285.71")
