"""
services/analytics_service.py
-----------------------------
Read-only spending reports: recent weekly totals, category split and
whether weekly spending is trending down.
"""

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from decimal import Decimal
from typing import Iterable

from models.transaction import Transaction
from services.catalog import CATEGORY_KEYWORDS, OTHER_CATEGORY, categorize
from utils.money import add_all
from utils.timeutil import week_start

WEEKLY_REPORT_WEEKS = 4
CATEGORY_REPORT_WEEKS = 4
TREND_WEEKS = 8


@dataclass(frozen=True)
class SavingTrend:
    weekly_expenses: dict
    improving: bool
    target: Decimal


@dataclass(frozen=True)
class SpendingReport:
    weekly_expenses: dict
    category_expenses: dict
    trend: SavingTrend


def _week_total(expenses: list[Transaction], monday: date) -> Decimal:
    sunday = monday + timedelta(days=6)
    return add_all(t.amount for t in expenses if monday <= t.occurred_at.date() <= sunday)


def _week_label(monday: date) -> str:
    return f"{monday:%m/%d}~{monday + timedelta(days=6):%m/%d}"


def weekly_expenses(
    transactions: Iterable[Transaction], today: date, weeks: int = WEEKLY_REPORT_WEEKS
) -> dict[str, Decimal]:
    """
    Expense totals for the last `weeks` Monday-anchored weeks, oldest first.

    Keys look like '10/06~10/12'; the last key is the current week.
    """
    expenses = [t for t in transactions if t.is_expense()]
    current = week_start(today)
    report: dict[str, Decimal] = {}
    for offset in range(weeks - 1, -1, -1):
        monday = current - timedelta(weeks=offset)
        report[_week_label(monday)] = _week_total(expenses, monday)
    return report


def category_expenses(
    transactions: Iterable[Transaction], today: date, weeks: int = CATEGORY_REPORT_WEEKS
) -> dict[str, Decimal]:
    """Expenses since `weeks` weeks ago, bucketed by description keywords."""
    since = today - timedelta(weeks=weeks)
    buckets: dict[str, list[Decimal]] = {name: [] for name in (*CATEGORY_KEYWORDS, OTHER_CATEGORY)}
    for t in transactions:
        if t.is_expense() and since <= t.occurred_at.date() <= today:
            buckets[categorize(t.description)].append(t.amount)
    return {name: add_all(amounts) for name, amounts in buckets.items()}


def saving_trend(
    transactions: Iterable[Transaction], today: date, target: Decimal, weeks: int = TREND_WEEKS
) -> SavingTrend:
    """
    Weekly totals for the last `weeks` weeks plus an `improving` flag:
    true when the average of the two latest weeks is below the two oldest.
    """
    expenses = [t for t in transactions if t.is_expense()]
    current = week_start(today)
    totals: dict[str, Decimal] = {}
    for offset in range(weeks - 1, -1, -1):
        monday = current - timedelta(weeks=offset)
        totals[f"{monday:%m/%d}"] = _week_total(expenses, monday)

    values = list(totals.values())
    improving = False
    if len(values) >= 4:
        improving = add_all(values[-2:]) < add_all(values[:2])
    return SavingTrend(weekly_expenses=totals, improving=improving, target=target)


def build_report(transactions: Iterable[Transaction], now: datetime, target: Decimal) -> SpendingReport:
    snapshot = list(transactions)
    today = now.date()
    return SpendingReport(
        weekly_expenses=weekly_expenses(snapshot, today),
        category_expenses=category_expenses(snapshot, today),
        trend=saving_trend(snapshot, today, target),
    )
