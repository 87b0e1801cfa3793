"""
models/ledger.py
----------------
In-memory, add/remove-only collection of one user's transactions.
"""

import uuid
from datetime import datetime
from typing import Callable, Iterable, Iterator, Optional

from errors import NotFoundError, ValidationError
from models.transaction import Transaction, TransactionKind
from utils.money import to_decimal

Predicate = Callable[[Transaction], bool]

_ID_LENGTH = 8


class Ledger:
    """Holds transactions keyed by id, in insertion order."""

    def __init__(self, transactions: Iterable[Transaction] = ()):
        self._entries: dict[str, Transaction] = {}
        for tx in transactions:
            self._entries[tx.id] = tx

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Transaction]:
        return iter(list(self._entries.values()))

    def __contains__(self, tx_id: str) -> bool:
        return tx_id in self._entries

    def add(
        self,
        description: str,
        amount,
        kind,
        occurred_at: datetime,
    ) -> Transaction:
        """
        Validate and append a new transaction.

        Raises:
            ValidationError: Empty description, unknown kind, or amount <= 0.
        """
        description = (description or "").strip()
        if not description:
            raise ValidationError("Description must not be empty")
        kind = TransactionKind.parse(kind)
        value = to_decimal(amount)
        if value <= 0:
            raise ValidationError(f"Amount must be positive, got {value}")

        tx = Transaction(
            id=self._new_id(),
            description=description,
            amount=value,
            kind=kind,
            occurred_at=occurred_at,
        )
        self._entries[tx.id] = tx
        return tx

    def remove(self, tx_id: str) -> Transaction:
        """
        Remove a transaction by id and return it.

        Raises:
            NotFoundError: The id is unknown (including an id removed earlier).
        """
        try:
            return self._entries.pop(tx_id)
        except KeyError:
            raise NotFoundError(f"Transaction {tx_id!r} not found") from None

    def get(self, tx_id: str) -> Optional[Transaction]:
        return self._entries.get(tx_id)

    def query(self, predicate: Optional[Predicate] = None, recent: bool = False) -> Iterator[Transaction]:
        """
        Lazily yield transactions matching `predicate`.

        With `recent=True` results come newest first by `occurred_at`;
        otherwise in insertion order.
        """
        entries = list(self._entries.values())
        if recent:
            entries.sort(key=lambda t: t.occurred_at, reverse=True)
        for tx in entries:
            if predicate is None or predicate(tx):
                yield tx

    def _new_id(self) -> str:
        while True:
            candidate = uuid.uuid4().hex[:_ID_LENGTH]
            if candidate not in self._entries:
                return candidate
