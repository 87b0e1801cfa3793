from datetime import datetime
from decimal import Decimal

import pytest

from errors import NotFoundError, ValidationError
from models.ledger import Ledger
from models.transaction import TransactionKind


def test_add_assigns_unique_ids_and_parses_amount():
    ledger = Ledger()
    t1 = ledger.add("coffee", "4000", "expense", datetime(2026, 10, 14, 9))
    t2 = ledger.add("salary", 50000, TransactionKind.INCOME, datetime(2026, 10, 14, 10))

    assert t1.id != t2.id
    assert t1.amount == Decimal("4000.00")
    assert t1.kind is TransactionKind.EXPENSE
    assert t2.is_income()
    assert len(ledger) == 2


@pytest.mark.parametrize("amount", [0, -1, "-0.01", "abc", "1.234", None])
def test_add_rejects_bad_amounts(amount):
    ledger = Ledger()
    with pytest.raises(ValidationError):
        ledger.add("lunch", amount, "expense", datetime(2026, 10, 14))
    assert len(ledger) == 0


def test_add_rejects_unknown_kind_and_empty_description():
    ledger = Ledger()
    with pytest.raises(ValidationError):
        ledger.add("lunch", 100, "refund", datetime(2026, 10, 14))
    with pytest.raises(ValidationError):
        ledger.add("   ", 100, "expense", datetime(2026, 10, 14))


def test_remove_twice_fails():
    ledger = Ledger()
    tx = ledger.add("taxi", 8000, "expense", datetime(2026, 10, 14))

    assert ledger.remove(tx.id) == tx
    with pytest.raises(NotFoundError):
        ledger.remove(tx.id)


def test_remove_unknown_leaves_ledger_unchanged():
    ledger = Ledger()
    ledger.add("taxi", 8000, "expense", datetime(2026, 10, 14))
    with pytest.raises(NotFoundError):
        ledger.remove("nope")
    assert len(ledger) == 1


def test_query_recent_is_newest_first_and_filters():
    ledger = Ledger()
    old = ledger.add("bus", 1500, "expense", datetime(2026, 10, 12, 8))
    new = ledger.add("latte", 5500, "expense", datetime(2026, 10, 14, 8))
    mid = ledger.add("salary", 90000, "income", datetime(2026, 10, 13, 8))

    assert [t.id for t in ledger.query(recent=True)] == [new.id, mid.id, old.id]
    assert [t.id for t in ledger.query()] == [old.id, new.id, mid.id]
    assert [t.id for t in ledger.query(lambda t: t.is_expense(), recent=True)] == [new.id, old.id]


def test_query_is_lazy():
    ledger = Ledger()
    ledger.add("bus", 1500, "expense", datetime(2026, 10, 12, 8))
    result = ledger.query()
    assert iter(result) is result
