"""
services/pet_service.py
-----------------------
The API the bot (or any other front end) talks to.

Every call is scoped by user id and runs under that user's lock: the
state is loaded, passed through the engine, and the changed parts are
written back before the lock is released.
"""

import copy
import threading
from contextlib import contextmanager
from datetime import date, datetime
from typing import Callable, Iterator, Optional

from config import STORAGE_BACKEND
from errors import NotFoundError
from models.award import AwardGuard
from models.budget import BudgetPeriod
from models.character import Character
from models.saving import CheckResult, SavingStatus
from models.transaction import Transaction, TransactionKind
from models.user_state import UserState
from repositories.state_store import InMemoryStateStore, PostgresStateStore, StateStore
from services import analytics_service, period_service, savings_service
from services.analytics_service import SpendingReport
from services.check_service import SavingsChecker
from utils.logger import get_logger
from utils.timeutil import Clock, parse_date

logger = get_logger(__name__)


def build_store(backend: str = STORAGE_BACKEND) -> StateStore:
    if backend == "memory":
        logger.warning("Using in-memory storage: all data is lost on restart.")
        return InMemoryStateStore()
    if backend == "postgres":
        return PostgresStateStore()
    raise ValueError(f"Unknown STORAGE_BACKEND {backend!r}, expected 'postgres' or 'memory'")


class UserLocks:
    """One re-entrant lock per user id, created on demand."""

    def __init__(self):
        self._guard = threading.Lock()
        self._locks: dict[int, threading.RLock] = {}

    @contextmanager
    def hold(self, user_id: int) -> Iterator[None]:
        with self._guard:
            lock = self._locks.setdefault(user_id, threading.RLock())
        with lock:
            yield


class SavePetService:
    """
    Facade over the savings engine.

    Args:
        store: Where user state lives (defaults to the configured backend).
        checker: Award policy and mission selection.
        clock: Source of "now"; tests pass a fixed clock.
    """

    def __init__(
        self,
        store: Optional[StateStore] = None,
        checker: Optional[SavingsChecker] = None,
        clock: Clock = datetime.now,
    ):
        self.store = store or build_store()
        self.checker = checker or SavingsChecker()
        self.clock = clock
        self._locks = UserLocks()

    @contextmanager
    def _session(self, user_id: int) -> Iterator[tuple[UserState, datetime]]:
        with self._locks.hold(user_id):
            now = self.clock()
            yield self.store.load(user_id, now), now

    # ── LEDGER ────────────────────────────────────────────

    def add_transaction(
        self,
        user_id: int,
        description: str,
        amount,
        kind,
        occurred_at: Optional[datetime] = None,
    ) -> Transaction:
        """
        Record an income or expense entry.

        Raises:
            ValidationError: Non-positive amount, empty description or unknown kind.
        """
        with self._session(user_id) as (state, now):
            tx = state.ledger.add(description, amount, kind, occurred_at or now)
            try:
                self.store.add_transaction(user_id, tx)
            except Exception:
                state.ledger.remove(tx.id)
                raise
            return tx

    def delete_transaction(self, user_id: int, tx_id: str) -> None:
        """
        Raises:
            NotFoundError: No such transaction for this user.
        """
        with self._session(user_id) as (state, _):
            if tx_id not in state.ledger:
                raise NotFoundError(f"Transaction {tx_id!r} not found")
            self.store.remove_transaction(user_id, tx_id)
            state.ledger.remove(tx_id)
            logger.info(f"User {user_id} deleted transaction #{tx_id}")

    def list_transactions(
        self,
        user_id: int,
        on_date: Optional[date | str] = None,
        kind=None,
    ) -> list[Transaction]:
        """
        Most recent first, optionally limited to one calendar day and/or kind.

        Raises:
            ValidationError: `on_date` is not a valid date, or `kind` is unknown.
        """
        day = parse_date(on_date) if on_date is not None else None
        wanted = TransactionKind.parse(kind) if kind is not None else None

        def matches(t: Transaction) -> bool:
            if day is not None and t.occurred_at.date() != day:
                return False
            return wanted is None or t.kind is wanted

        with self._session(user_id) as (state, _):
            return list(state.ledger.query(matches, recent=True))

    # ── BUDGET ────────────────────────────────────────────

    def set_budget_target(self, user_id: int, amount) -> BudgetPeriod:
        """
        Replace the current weekly period with a new one starting today.

        Raises:
            ValidationError: The amount is negative or not a number.
        """
        with self._session(user_id) as (state, now):
            period = period_service.new_period(amount, now)
            self.store.save_budget(user_id, period)
            state.budget = period
            logger.info(f"User {user_id} set weekly target {period.target_amount}")
            return period

    def get_budget(self, user_id: int) -> BudgetPeriod:
        """The current period, or the default week if no target was set yet."""
        with self._session(user_id) as (state, now):
            return state.budget or period_service.default_period(now)

    # ── STATUS & CHECKS ───────────────────────────────────

    def get_saving_status(self, user_id: int) -> SavingStatus:
        with self._session(user_id) as (state, now):
            period = state.budget or period_service.default_period(now)
            weekly = savings_service.aggregate(
                state.ledger, period_service.weekly_window(period), period.target_amount
            )
            daily = savings_service.aggregate(
                state.ledger,
                period_service.daily_window(now),
                savings_service.daily_target(period.target_amount),
            )
            return SavingStatus(
                weekly=weekly,
                daily=daily,
                mission=self.checker.mission_progress(state, now),
            )

    def check_weekly_savings(self, user_id: int) -> CheckResult:
        with self._session(user_id) as (state, now):
            return self._run_check(user_id, state, lambda: self.checker.check_weekly(state, now))

    def check_daily_savings(self, user_id: int) -> CheckResult:
        with self._session(user_id) as (state, now):
            return self._run_check(user_id, state, lambda: self.checker.check_daily(state, now))

    def get_character(self, user_id: int) -> Character:
        with self._session(user_id) as (state, _):
            return copy.copy(state.character)

    # ── ANALYTICS ─────────────────────────────────────────

    def get_analytics(self, user_id: int) -> SpendingReport:
        with self._session(user_id) as (state, now):
            period = state.budget or period_service.default_period(now)
            return analytics_service.build_report(state.ledger, now, period.target_amount)

    # ── HELPERS ───────────────────────────────────────────

    def _run_check(self, user_id: int, state: UserState, check: Callable[[], CheckResult]) -> CheckResult:
        """
        Run a check and store any award. If the store write fails, the
        pet and the guard are restored, so a retry can still pay once.
        """
        character, awards = copy.copy(state.character), AwardGuard(state.awards.keys)
        result = check()
        if result.awarded:
            try:
                self.store.save_award(user_id, state.character, state.awards)
            except Exception:
                state.character, state.awards = character, awards
                raise
        return result


_service: Optional[SavePetService] = None


def get_pet_service() -> SavePetService:
    """Process-wide service shared by all handlers and scheduled jobs."""
    global _service
    if _service is None:
        _service = SavePetService()
    return _service
