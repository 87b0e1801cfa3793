"""
repositories/user_repo.py
--------------------------
Data access layer for user records.
"""

from typing import Optional

from db.connection import pooled_cursor


class UserRepository:
    """Repository for the users table."""

    def ensure_user(self, telegram_id: int, first_name: Optional[str] = None) -> None:
        """
        Insert a user if they don't exist.
        Uses PostgreSQL's ON CONFLICT so concurrent first messages are safe;
        an existing name is only overwritten when a new one is given.
        """
        sql = """
            INSERT INTO users (telegram_id, first_name)
            VALUES (%s, %s)
            ON CONFLICT (telegram_id)
            DO UPDATE SET first_name = COALESCE(EXCLUDED.first_name, users.first_name);
        """
        with pooled_cursor(f"ensure user {telegram_id}") as cur:
            cur.execute(sql, (telegram_id, first_name))
