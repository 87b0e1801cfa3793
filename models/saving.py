"""
models/saving.py
----------------
Read projections produced by the savings engine.
"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Optional

from models.character import Character
from models.mission import MissionProgress, WindowKind


@dataclass(frozen=True)
class TimeWindow:
    """Closed interval [start, end] used to scope aggregation."""
    kind: WindowKind
    start: datetime
    end: datetime

    def contains(self, moment: datetime) -> bool:
        return self.start <= moment <= self.end

    @property
    def key(self) -> str:
        """Stable name of the window, used by the award guard."""
        if self.kind is WindowKind.DAILY:
            return f"daily:{self.start.date().isoformat()}"
        return f"weekly:{self.start.date().isoformat()}..{self.end.date().isoformat()}"


@dataclass(frozen=True)
class SavingSummary:
    target: Decimal
    expenses: Decimal
    saved: Decimal

    @property
    def goal_met(self) -> bool:
        return self.saved >= 0


@dataclass(frozen=True)
class SavingStatus:
    weekly: SavingSummary
    daily: SavingSummary
    mission: MissionProgress


@dataclass(frozen=True)
class CheckResult:
    """
    Outcome of a weekly or daily savings check.

    `before` and `after` are independent snapshots of the character, so callers
    can animate the delta without fetching the pet again.
    """
    before: Character
    after: Character
    mission_progress: MissionProgress
    summary: Optional[SavingSummary] = None
    window: Optional[TimeWindow] = None
    awarded: int = 0
    already_awarded: bool = field(default=False)

    @property
    def character(self) -> Character:
        return self.after

    @property
    def experience_gained(self) -> int:
        return self.after.experience - self.before.experience

    @property
    def evolved(self) -> bool:
        return self.after.stage != self.before.stage
