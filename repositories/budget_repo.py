"""
repositories/budget_repo.py
-----------------------------
Data access layer for the weekly budget period.
"""

from typing import Optional

from db.connection import pooled_cursor
from models.budget import BudgetPeriod
from utils.logger import get_logger

logger = get_logger(__name__)


class BudgetRepository:
    """Repository for the budgets table (one row per user)."""

    def save(self, user_id: int, period: BudgetPeriod) -> BudgetPeriod:
        """Replace the user's current period."""
        sql = """
            INSERT INTO budgets (user_id, target_amount, start_date, end_date, updated_at)
            VALUES (%s, %s, %s, %s, %s)
            ON CONFLICT (user_id)
            DO UPDATE SET target_amount = EXCLUDED.target_amount,
                          start_date = EXCLUDED.start_date,
                          end_date = EXCLUDED.end_date,
                          updated_at = EXCLUDED.updated_at;
        """
        with pooled_cursor("set budget") as cur:
            cur.execute(sql, (
                user_id, period.target_amount, period.start_date, period.end_date, period.updated_at,
            ))
        logger.info(f"Budget for user {user_id} set to {period.target_amount} "
                    f"({period.start_date} → {period.end_date})")
        return period

    def get(self, user_id: int) -> Optional[BudgetPeriod]:
        """Get the user's current period, or None if no target was ever set."""
        sql = """
            SELECT target_amount, start_date, end_date, updated_at
            FROM budgets WHERE user_id = %s;
        """
        with pooled_cursor("load budget") as cur:
            cur.execute(sql, (user_id,))
            row = cur.fetchone()
        if row:
            return BudgetPeriod(
                target_amount=row[0], start_date=row[1], end_date=row[2], updated_at=row[3],
            )
        return None
