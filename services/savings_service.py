"""
services/savings_service.py
---------------------------
Turns a set of transactions into target / expenses / saved figures.
Pure functions: nothing here touches state.
"""

from decimal import Decimal
from typing import Iterable

from models.saving import SavingSummary, TimeWindow
from models.transaction import Transaction
from utils.money import add_all, divide, subtract, to_decimal

DAYS_PER_WEEK = 7


def expenses_in_window(transactions: Iterable[Transaction], window: TimeWindow) -> Decimal:
    """Sum of expense amounts whose timestamp falls inside the window (0 if none)."""
    return add_all(
        t.amount for t in transactions
        if t.is_expense() and window.contains(t.occurred_at)
    )


def aggregate(transactions: Iterable[Transaction], window: TimeWindow, target) -> SavingSummary:
    """
    Compute the savings summary for one window.

    `saved` is negative when spending went over the target.
    """
    target = to_decimal(target, field="target")
    expenses = expenses_in_window(transactions, window)
    return SavingSummary(target=target, expenses=expenses, saved=subtract(target, expenses))


def daily_target(weekly_target: Decimal) -> Decimal:
    """An even seventh of the weekly target, rounded half-up to cents."""
    return divide(weekly_target, DAYS_PER_WEEK)
