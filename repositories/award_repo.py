"""
repositories/award_repo.py
--------------------------
Data access layer for granted savings awards.
"""

from db.connection import pooled_cursor
from models.award import AwardGuard


class AwardRepository:
    """Repository for the award_grants table."""

    def get(self, user_id: int) -> AwardGuard:
        sql = "SELECT window_key FROM award_grants WHERE user_id = %s;"
        with pooled_cursor("load award grants") as cur:
            cur.execute(sql, (user_id,))
            return AwardGuard(r[0] for r in cur.fetchall())

    @staticmethod
    def write(cur, user_id: int, awards: AwardGuard) -> None:
        """Store exactly the guard's keys on an open cursor; closed windows drop out."""
        cur.execute("DELETE FROM award_grants WHERE user_id = %s;", (user_id,))
        for key in sorted(awards.keys):
            cur.execute(
                "INSERT INTO award_grants (user_id, window_key) VALUES (%s, %s);",
                (user_id, key),
            )
