"""
models/character.py
-------------------
The virtual pet whose evolution rewards saving.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional


class Stage(str, Enum):
    """Evolution tiers in ascending order; BILLIONAIRE is terminal."""
    EGG = "EGG"
    BABY = "BABY"
    ADULT = "ADULT"
    RICH = "RICH"
    BILLIONAIRE = "BILLIONAIRE"

    @property
    def rank(self) -> int:
        return _ORDER.index(self)

    @property
    def next(self) -> Optional["Stage"]:
        if self is Stage.BILLIONAIRE:
            return None
        return _ORDER[self.rank + 1]

    @property
    def is_terminal(self) -> bool:
        return self.next is None

    @property
    def label(self) -> str:
        return _LABELS[self]


_ORDER = list(Stage)

_LABELS = {
    Stage.EGG: "🥚 Egg",
    Stage.BABY: "🐣 Baby",
    Stage.ADULT: "🦆 Adult",
    Stage.RICH: "💎 Rich",
    Stage.BILLIONAIRE: "👑 Billionaire",
}


@dataclass
class Character:
    """
    A user's pet. Only the progression service mutates it.

    Attributes:
        name: Display name.
        experience: Accumulated experience, never decreases.
        stage: Current evolution stage, never regresses.
        created_at: When the pet hatched into existence (first access).
        last_evolution: Time of the most recent stage change.
    """
    name: str
    experience: int = 0
    stage: Stage = Stage.EGG
    created_at: Optional[datetime] = None
    last_evolution: Optional[datetime] = field(default=None)

    @property
    def level(self) -> int:
        """Display level: one per stage reached."""
        return self.stage.rank + 1

    def __str__(self) -> str:
        return f"{self.name} {self.stage.label} Lv.{self.level} ({self.experience} XP)"
