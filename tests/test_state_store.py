from contextlib import contextmanager
from datetime import datetime
from unittest.mock import MagicMock

import pytest

from models.award import AwardGuard
from models.character import Character, Stage
from repositories import state_store
from repositories.state_store import InMemoryStateStore, PostgresStateStore

NOW = datetime(2026, 10, 14, 12)


def test_memory_store_creates_pet_once():
    store = InMemoryStateStore(pet_name="Mochi")

    first = store.load(1, NOW)
    first.ledger.add("coffee", 4000, "expense", NOW)
    again = store.load(1, NOW)

    assert again is first
    assert again.character.name == "Mochi"
    assert again.character.stage is Stage.EGG
    assert len(again.ledger) == 1
    assert store.load(2, NOW) is not first


@pytest.fixture
def pg_store(monkeypatch):
    for name in (
        "UserRepository", "TransactionRepository", "BudgetRepository",
        "CharacterRepository", "AwardRepository",
    ):
        monkeypatch.setattr(state_store, name, MagicMock())
    return PostgresStateStore(pet_name="Mochi")


def test_postgres_store_creates_user_and_pet_on_first_load(pg_store):
    pg_store.character_repo.get.return_value = None
    pg_store.character_repo.save.side_effect = lambda user_id, character: character
    pg_store.transaction_repo.get_all.return_value = []
    pg_store.budget_repo.get.return_value = None
    pg_store.award_repo.get.return_value = AwardGuard()

    state = pg_store.load(5, NOW)

    pg_store.user_repo.ensure_user.assert_called_once_with(5)
    assert state.character.name == "Mochi"
    assert state.character.created_at == NOW
    assert state.budget is None
    assert len(state.ledger) == 0


def test_postgres_store_loads_existing_pet(pg_store):
    pet = Character(name="Old", experience=150, stage=Stage.BABY, created_at=NOW)
    pg_store.character_repo.get.return_value = pet
    pg_store.transaction_repo.get_all.return_value = []
    pg_store.award_repo.get.return_value = AwardGuard(["weekly:2026-10-12..2026-10-18"])

    state = pg_store.load(5, NOW)

    pg_store.user_repo.ensure_user.assert_not_called()
    assert state.character is pet
    assert state.awards.is_granted("weekly:2026-10-12..2026-10-18")


def test_postgres_store_writes_through_repositories(pg_store):
    pg_store.remove_transaction(5, "abc12345")
    pg_store.transaction_repo.delete.assert_called_once_with(5, "abc12345")


@pytest.fixture
def cursor_blocks(monkeypatch):
    blocks = []

    @contextmanager
    def fake_pooled_cursor(action="query"):
        cur = MagicMock(name=action)
        blocks.append(cur)
        yield cur

    monkeypatch.setattr(state_store, "pooled_cursor", fake_pooled_cursor)
    return blocks


def test_award_is_saved_in_one_transaction(pg_store, cursor_blocks):
    pet = Character(name="Old", experience=35, created_at=NOW)
    awards = AwardGuard(["weekly:2026-10-14..2026-10-20"])

    pg_store.save_award(5, pet, awards)

    [cur] = cursor_blocks
    pg_store.character_repo.write.assert_called_once_with(cur, 5, pet)
    pg_store.award_repo.write.assert_called_once_with(cur, 5, awards)


def test_failed_grant_write_aborts_the_whole_award(pg_store, cursor_blocks):
    pg_store.award_repo.write.side_effect = RuntimeError("connection lost")

    with pytest.raises(RuntimeError):
        pg_store.save_award(5, Character(name="Old", created_at=NOW), AwardGuard())

    assert len(cursor_blocks) == 1
    pg_store.character_repo.write.assert_called_once()
