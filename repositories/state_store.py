"""
repositories/state_store.py
---------------------------
Loads and saves a user's whole engine state (ledger, budget, pet, award grants).

`InMemoryStateStore` keeps live UserState objects in a dict, so its write
methods have nothing left to do. `PostgresStateStore` composes the per-table
repositories.
"""

from abc import ABC, abstractmethod
from datetime import datetime

from config import DEFAULT_PET_NAME
from db.connection import pooled_cursor
from models.award import AwardGuard
from models.budget import BudgetPeriod
from models.character import Character
from models.ledger import Ledger
from models.transaction import Transaction
from models.user_state import UserState
from repositories.award_repo import AwardRepository
from repositories.budget_repo import BudgetRepository
from repositories.character_repo import CharacterRepository
from repositories.transaction_repo import TransactionRepository
from repositories.user_repo import UserRepository
from utils.logger import get_logger

logger = get_logger(__name__)


def new_character(now: datetime, name: str = DEFAULT_PET_NAME) -> Character:
    return Character(name=name, created_at=now)


class StateStore(ABC):
    """Storage contract used by the pet service. Callers hold the user's lock."""

    @abstractmethod
    def load(self, user_id: int, now: datetime) -> UserState:
        """Return the user's state, creating the pet on first access."""

    @abstractmethod
    def add_transaction(self, user_id: int, tx: Transaction) -> None: ...

    @abstractmethod
    def remove_transaction(self, user_id: int, tx_id: str) -> None: ...

    @abstractmethod
    def save_budget(self, user_id: int, period: BudgetPeriod) -> None: ...

    @abstractmethod
    def save_award(self, user_id: int, character: Character, awards: AwardGuard) -> None:
        """Store the awarded pet and the grant keys together, or neither."""


class InMemoryStateStore(StateStore):
    """Process-local store for tests and `STORAGE_BACKEND=memory`."""

    def __init__(self, pet_name: str = DEFAULT_PET_NAME):
        self.pet_name = pet_name
        self._states: dict[int, UserState] = {}

    def load(self, user_id: int, now: datetime) -> UserState:
        state = self._states.get(user_id)
        if state is None:
            state = UserState(user_id=user_id, character=new_character(now, self.pet_name))
            self._states[user_id] = state
            logger.info(f"Created pet for user {user_id}")
        return state

    def add_transaction(self, user_id: int, tx: Transaction) -> None:
        pass

    def remove_transaction(self, user_id: int, tx_id: str) -> None:
        pass

    def save_budget(self, user_id: int, period: BudgetPeriod) -> None:
        pass

    def save_award(self, user_id: int, character: Character, awards: AwardGuard) -> None:
        pass


class PostgresStateStore(StateStore):
    """Reads a fresh UserState from PostgreSQL on every load."""

    def __init__(self, pet_name: str = DEFAULT_PET_NAME):
        self.pet_name = pet_name
        self.user_repo = UserRepository()
        self.transaction_repo = TransactionRepository()
        self.budget_repo = BudgetRepository()
        self.character_repo = CharacterRepository()
        self.award_repo = AwardRepository()

    def load(self, user_id: int, now: datetime) -> UserState:
        character = self.character_repo.get(user_id)
        if character is None:
            self.user_repo.ensure_user(user_id)
            character = self.character_repo.save(user_id, new_character(now, self.pet_name))
            logger.info(f"Created pet for user {user_id}")
        return UserState(
            user_id=user_id,
            character=character,
            ledger=Ledger(self.transaction_repo.get_all(user_id)),
            budget=self.budget_repo.get(user_id),
            awards=self.award_repo.get(user_id),
        )

    def add_transaction(self, user_id: int, tx: Transaction) -> None:
        self.transaction_repo.add(user_id, tx)

    def remove_transaction(self, user_id: int, tx_id: str) -> None:
        self.transaction_repo.delete(user_id, tx_id)

    def save_budget(self, user_id: int, period: BudgetPeriod) -> None:
        self.budget_repo.save(user_id, period)

    def save_award(self, user_id: int, character: Character, awards: AwardGuard) -> None:
        with pooled_cursor("save award") as cur:
            self.character_repo.write(cur, user_id, character)
            self.award_repo.write(cur, user_id, awards)
