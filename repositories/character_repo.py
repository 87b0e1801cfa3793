"""
repositories/character_repo.py
------------------------------
Data access layer for the pet character.
"""

from typing import Optional

from db.connection import pooled_cursor
from models.character import Character, Stage
from utils.logger import get_logger

logger = get_logger(__name__)


class CharacterRepository:
    """Repository for the characters table (one pet per user)."""

    def get(self, user_id: int) -> Optional[Character]:
        sql = """
            SELECT name, experience, stage, created_at, last_evolution
            FROM characters WHERE user_id = %s;
        """
        with pooled_cursor("load character") as cur:
            cur.execute(sql, (user_id,))
            row = cur.fetchone()
        if row:
            return Character(
                name=row[0],
                experience=row[1],
                stage=Stage(row[2]),
                created_at=row[3],
                last_evolution=row[4],
            )
        return None

    def save(self, user_id: int, character: Character) -> Character:
        """Insert the pet on first access, update it afterwards."""
        with pooled_cursor("save character") as cur:
            self.write(cur, user_id, character)
        return character

    @staticmethod
    def write(cur, user_id: int, character: Character) -> None:
        sql = """
            INSERT INTO characters (user_id, name, experience, stage, created_at, last_evolution)
            VALUES (%s, %s, %s, %s, %s, %s)
            ON CONFLICT (user_id)
            DO UPDATE SET experience = EXCLUDED.experience,
                          stage = EXCLUDED.stage,
                          last_evolution = EXCLUDED.last_evolution;
        """
        cur.execute(sql, (
            user_id, character.name, character.experience, character.stage.value,
            character.created_at, character.last_evolution,
        ))
