"""
services/check_service.py
-------------------------
Weekly and daily savings checks: the only code that awards experience.

A check aggregates the window, decides whether the goal was met, and pays
out at most once per window. Repeating a check inside the same window is a
no-op for the pet, so callers may retry freely.
"""

import copy
from datetime import datetime
from decimal import Decimal
from typing import Optional

from config import DAILY_EXP_CAP, DAILY_EXP_DIVISOR, WEEKLY_EXP_CAP, WEEKLY_EXP_DIVISOR
from models.mission import MissionProgress
from models.saving import CheckResult, SavingSummary, TimeWindow
from models.user_state import UserState
from services import mission_service, period_service, progression_service, savings_service
from services.mission_service import MissionSelector, select_for_stage
from utils.logger import get_logger

logger = get_logger(__name__)


def experience_for(saved: Decimal, divisor: int, cap: int) -> int:
    """One point per `divisor` saved, never less than 1 nor more than `cap`."""
    return min(cap, max(1, int(saved // divisor)))


class SavingsChecker:
    """
    Runs savings checks against a loaded UserState.

    Award policy (divisors and caps) comes from config unless overridden.
    """

    def __init__(
        self,
        select_mission: MissionSelector = select_for_stage,
        weekly_divisor: int = WEEKLY_EXP_DIVISOR,
        weekly_cap: int = WEEKLY_EXP_CAP,
        daily_divisor: int = DAILY_EXP_DIVISOR,
        daily_cap: int = DAILY_EXP_CAP,
    ):
        self.select_mission = select_mission
        self.weekly_divisor = weekly_divisor
        self.weekly_cap = weekly_cap
        self.daily_divisor = daily_divisor
        self.daily_cap = daily_cap

    # ── PUBLIC ────────────────────────────────────────────

    def check_weekly(self, state: UserState, now: datetime) -> CheckResult:
        if state.budget is None:
            return self._unchanged(state, now, reason="no weekly target set")
        window = period_service.weekly_window(state.budget)
        summary = savings_service.aggregate(state.ledger, window, state.budget.target_amount)
        award = experience_for(summary.saved, self.weekly_divisor, self.weekly_cap) if summary.goal_met else 0
        return self._settle(state, now, window, summary, award)

    def check_daily(self, state: UserState, now: datetime) -> CheckResult:
        if state.budget is None:
            return self._unchanged(state, now, reason="no weekly target set")
        window = period_service.daily_window(now)
        target = savings_service.daily_target(state.budget.target_amount)
        summary = savings_service.aggregate(state.ledger, window, target)
        award = experience_for(summary.saved, self.daily_divisor, self.daily_cap) if summary.goal_met else 0
        return self._settle(state, now, window, summary, award)

    def mission_progress(self, state: UserState, now: datetime) -> MissionProgress:
        period = state.budget or period_service.default_period(now)
        mission = self.select_mission(state.character)
        window = mission_service.resolve_window(
            mission,
            weekly=period_service.weekly_window(period),
            daily=period_service.daily_window(now),
        )
        return mission_service.evaluate(state.ledger, window, mission)

    # ── HELPERS ───────────────────────────────────────────

    def _settle(
        self,
        state: UserState,
        now: datetime,
        window: TimeWindow,
        summary: SavingSummary,
        award: int,
    ) -> CheckResult:
        before = copy.copy(state.character)
        already = state.awards.is_granted(window.key)

        if not summary.goal_met:
            logger.info(
                f"User {state.user_id} missed {window.key}: "
                f"spent {summary.expenses} of {summary.target}"
            )
            award = 0
        elif already:
            logger.info(f"User {state.user_id} already rewarded for {window.key}")
            award = 0
        else:
            progression_service.award_experience(state.character, award, now)
            state.awards.grant(window.key)
            logger.info(f"User {state.user_id} saved {summary.saved} in {window.key}: +{award} XP")

        return CheckResult(
            before=before,
            after=copy.copy(state.character),
            mission_progress=self.mission_progress(state, now),
            summary=summary,
            window=window,
            awarded=award,
            already_awarded=already and summary.goal_met,
        )

    def _unchanged(self, state: UserState, now: datetime, reason: str) -> CheckResult:
        logger.info(f"User {state.user_id} check skipped: {reason}")
        snapshot = copy.copy(state.character)
        return CheckResult(
            before=snapshot,
            after=copy.copy(state.character),
            mission_progress=self.mission_progress(state, now),
        )
