"""
services/mission_service.py
---------------------------
Evaluates a single mission against the ledger.

Which mission is "current" is decided by an injected selector; the
default picks the catalogue entry for the pet's stage.
"""

from typing import Callable, Iterable

from models.character import Character
from models.mission import MissionDefinition, MissionMetric, MissionProgress, WindowKind
from models.saving import TimeWindow
from models.transaction import Transaction
from services.catalog import STAGE_MISSIONS
from utils.money import add_all

MissionSelector = Callable[[Character], MissionDefinition]


def select_for_stage(character: Character) -> MissionDefinition:
    return STAGE_MISSIONS[character.stage]


def resolve_window(mission: MissionDefinition, weekly: TimeWindow, daily: TimeWindow) -> TimeWindow:
    return daily if mission.window is WindowKind.DAILY else weekly


def measure(transactions: Iterable[Transaction], window: TimeWindow, mission: MissionDefinition):
    """Amount the mission's metric counts inside the window."""
    expenses = (t for t in transactions if t.is_expense() and window.contains(t.occurred_at))
    if mission.metric is MissionMetric.SPEND_MATCHING_KEYWORDS:
        expenses = (t for t in expenses if mission.matches(t.description))
    return add_all(t.amount for t in expenses)


def evaluate(
    transactions: Iterable[Transaction], window: TimeWindow, mission: MissionDefinition
) -> MissionProgress:
    """
    Measure the mission over `window` and compare it with its target.

    Args:
        transactions: Ledger contents (any order).
        window: Window already resolved for the mission's kind.
        mission: The mission to evaluate.

    Returns:
        A freshly computed MissionProgress.
    """
    current = measure(transactions, window, mission)
    return MissionProgress(
        description=mission.description,
        mission_type=mission.code,
        target=mission.target,
        current=current,
        completed=mission.direction.is_met(current, mission.target),
    )
