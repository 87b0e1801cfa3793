"""
models/transaction.py
---------------------
Domain model for ledger entries (expenses and income).
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum

from errors import ValidationError


class TransactionKind(str, Enum):
    INCOME = "income"
    EXPENSE = "expense"

    @classmethod
    def parse(cls, value) -> "TransactionKind":
        """Accept an enum member or its (case-insensitive) string value."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValidationError(f"Unknown transaction kind {value!r}, expected 'income' or 'expense'") from None


@dataclass(frozen=True)
class Transaction:
    """
    A single ledger entry. Never edited after creation, only deleted.

    Attributes:
        id: Opaque identifier assigned by the ledger.
        description: Free text; missions match keywords against it.
        amount: Positive amount at cent precision.
        kind: Income or expense.
        occurred_at: When the money moved.
    """
    id: str
    description: str
    amount: Decimal
    kind: TransactionKind
    occurred_at: datetime

    def is_expense(self) -> bool:
        return self.kind is TransactionKind.EXPENSE

    def is_income(self) -> bool:
        return self.kind is TransactionKind.INCOME

    def __str__(self) -> str:
        sign = "-" if self.is_expense() else "+"
        return f"{sign}{self.amount} | {self.description} | {self.occurred_at:%Y-%m-%d %H:%M}"
