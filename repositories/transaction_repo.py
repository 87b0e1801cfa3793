"""
repositories/transaction_repo.py
--------------------------------
Data access layer for ledger entries.
All SQL queries related to the `transactions` table live here.
"""

from db.connection import pooled_cursor
from models.transaction import Transaction, TransactionKind
from utils.logger import get_logger

logger = get_logger(__name__)


class TransactionRepository:
    """Repository for the transactions table. Rows are inserted or deleted, never updated."""

    # ── CREATE ────────────────────────────────────────────

    def add(self, user_id: int, tx: Transaction) -> Transaction:
        """Persist a transaction created by the in-memory ledger."""
        sql = """
            INSERT INTO transactions (user_id, id, description, amount, kind, occurred_at)
            VALUES (%s, %s, %s, %s, %s, %s);
        """
        with pooled_cursor(f"add transaction {tx.id}") as cur:
            cur.execute(sql, (
                user_id, tx.id, tx.description, tx.amount, tx.kind.value, tx.occurred_at,
            ))
        logger.info(f"Added {tx.kind.value} #{tx.id} for user {user_id}")
        return tx

    # ── READ ──────────────────────────────────────────────

    def get_all(self, user_id: int) -> list[Transaction]:
        """All transactions of a user, oldest first."""
        sql = """
            SELECT id, description, amount, kind, occurred_at
            FROM transactions
            WHERE user_id = %s
            ORDER BY occurred_at, id;
        """
        with pooled_cursor("load transactions") as cur:
            cur.execute(sql, (user_id,))
            return [self._row_to_transaction(r) for r in cur.fetchall()]

    # ── DELETE ────────────────────────────────────────────

    def delete(self, user_id: int, tx_id: str) -> bool:
        """
        Delete a transaction by ID, scoped to a user.

        Returns:
            True if a row was deleted, False otherwise.
        """
        sql = "DELETE FROM transactions WHERE user_id = %s AND id = %s;"
        with pooled_cursor(f"delete transaction #{tx_id}") as cur:
            cur.execute(sql, (user_id, tx_id))
            deleted = cur.rowcount > 0
        if deleted:
            logger.info(f"Deleted transaction #{tx_id} for user {user_id}")
        return deleted

    # ── HELPERS ───────────────────────────────────────────

    @staticmethod
    def _row_to_transaction(row: tuple) -> Transaction:
        """Convert a database row tuple to a Transaction domain object."""
        return Transaction(
            id=row[0],
            description=row[1],
            amount=row[2],
            kind=TransactionKind(row[3]),
            occurred_at=row[4],
        )
