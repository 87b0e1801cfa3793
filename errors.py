"""
errors.py
---------
Named exception types raised by the savings engine and its facade.
Handlers catch `MoneyPetError` and turn it into a reply for the user.
"""


class MoneyPetError(Exception):
    """Base class for every error the engine raises on purpose."""


class ValidationError(MoneyPetError):
    """Bad input: non-positive amount, negative target or award, malformed date."""


class NotFoundError(MoneyPetError):
    """A referenced record (e.g. a transaction id) does not exist."""


class ComputationError(MoneyPetError):
    """Decimal arithmetic overflowed or lost precision."""
