"""
models/mission.py
-----------------
Mission configuration and its derived progress.
"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


class WindowKind(str, Enum):
    DAILY = "daily"
    WEEKLY = "weekly"


class MissionMetric(str, Enum):
    SPEND_MATCHING_KEYWORDS = "spend_matching_keywords"
    TOTAL_SPEND = "total_spend"


class MissionDirection(str, Enum):
    AT_MOST = "at_most"    # stay under the target
    AT_LEAST = "at_least"  # reach at least the target

    def is_met(self, current: Decimal, target: Decimal) -> bool:
        if self is MissionDirection.AT_MOST:
            return current <= target
        return current >= target


@dataclass(frozen=True)
class MissionDefinition:
    """
    A static savings sub-goal.

    Attributes:
        code: Short identifier, e.g. 'COFFEE'.
        description: Text shown to the user.
        keywords: Lower-case tokens matched against transaction descriptions.
        target: Amount compared with the measured spend.
        window: Whether the mission is measured over today or the budget week.
        metric: What is summed.
        direction: How `current` is compared with `target`.
    """
    code: str
    description: str
    keywords: frozenset
    target: Decimal
    window: WindowKind = WindowKind.WEEKLY
    metric: MissionMetric = MissionMetric.SPEND_MATCHING_KEYWORDS
    direction: MissionDirection = MissionDirection.AT_MOST

    def matches(self, text: str) -> bool:
        lowered = text.lower()
        return any(keyword.lower() in lowered for keyword in self.keywords)


@dataclass(frozen=True)
class MissionProgress:
    """Recomputed on every query, never stored."""
    description: str
    mission_type: str
    target: Decimal
    current: Decimal
    completed: bool
