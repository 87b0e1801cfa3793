"""
models/budget.py
----------------
Domain model for the weekly spending target.
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from errors import ValidationError


@dataclass(frozen=True)
class BudgetPeriod:
    """
    The single current weekly budget of a user.

    Attributes:
        target_amount: Spending target for the whole window (>= 0).
        start_date: First day of the window (inclusive).
        end_date: Last day of the window (inclusive).
        updated_at: When the target was set.
    """
    target_amount: Decimal
    start_date: date
    end_date: date
    updated_at: Optional[datetime] = field(default=None, compare=False)

    def __post_init__(self):
        if self.target_amount < 0:
            raise ValidationError(f"Budget target must not be negative, got {self.target_amount}")
        if self.start_date > self.end_date:
            raise ValidationError(
                f"Budget period starts after it ends: {self.start_date} > {self.end_date}"
            )

    @property
    def days(self) -> int:
        return (self.end_date - self.start_date).days + 1
