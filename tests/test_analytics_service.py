from datetime import date, datetime
from decimal import Decimal

from models.ledger import Ledger
from services import analytics_service

TODAY = date(2026, 10, 14)


def test_weekly_expenses_oldest_first():
    ledger = Ledger()
    ledger.add("rent", 50000, "expense", datetime(2026, 9, 22, 9))
    ledger.add("latte", 5000, "expense", datetime(2026, 10, 12, 8))
    ledger.add("salary", 300000, "income", datetime(2026, 10, 13, 9))

    report = analytics_service.weekly_expenses(ledger, TODAY)

    assert list(report) == ["09/21~09/27", "09/28~10/04", "10/05~10/11", "10/12~10/18"]
    assert report["09/21~09/27"] == Decimal("50000")
    assert report["10/12~10/18"] == Decimal("5000")


def test_category_expenses():
    ledger = Ledger()
    ledger.add("Starbucks latte", 5000, "expense", datetime(2026, 10, 13, 8))
    ledger.add("taxi", 12000, "expense", datetime(2026, 10, 10, 23))
    ledger.add("rent", 500000, "expense", datetime(2026, 10, 1, 9))
    ledger.add("old coffee", 3000, "expense", datetime(2026, 8, 1, 9))

    report = analytics_service.category_expenses(ledger, TODAY)

    assert report["coffee"] == Decimal("5000")
    assert report["transport"] == Decimal("12000")
    assert report["other"] == Decimal("500000")
    assert report["shopping"] == 0


def test_trend_improving_when_recent_weeks_are_cheaper():
    ledger = Ledger()
    ledger.add("shopping", 90000, "expense", datetime(2026, 8, 24, 12))
    ledger.add("shopping", 80000, "expense", datetime(2026, 8, 31, 12))
    ledger.add("lunch", 9000, "expense", datetime(2026, 10, 6, 12))

    trend = analytics_service.saving_trend(ledger, TODAY, Decimal("70000"))

    assert len(trend.weekly_expenses) == 8
    assert list(trend.weekly_expenses)[0] == "08/24"
    assert trend.improving
    assert trend.target == Decimal("70000")


def test_trend_not_improving_without_history():
    trend = analytics_service.saving_trend(Ledger(), TODAY, Decimal("70000"))
    assert not trend.improving
