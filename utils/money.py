"""
utils/money.py
--------------
Fixed-point helpers for currency amounts.
Every amount is a Decimal quantized to cents; floats never enter a sum.
"""

from decimal import (
    ROUND_HALF_UP,
    Context,
    Decimal,
    DivisionByZero,
    InvalidOperation,
    Overflow,
    localcontext,
)
from typing import Iterable

from errors import ComputationError, ValidationError

CENTS = Decimal("0.01")
ZERO = Decimal("0.00")

# Wide enough for any realistic ledger; overflow or inexact ops raise instead of rounding silently.
_CONTEXT = Context(prec=28, traps=[InvalidOperation, DivisionByZero, Overflow])


def to_decimal(value, field: str = "amount") -> Decimal:
    """
    Parse a user-supplied amount into a cent-quantized Decimal.

    Accepts Decimal, int, str and float (floats go through `str` so 0.1 stays 0.1).

    Raises:
        ValidationError: The value is not a finite number or has more than two decimals.
    """
    if isinstance(value, bool):
        raise ValidationError(f"{field} must be a number, got {value!r}")
    if isinstance(value, float):
        value = str(value)
    if isinstance(value, str):
        value = value.strip().replace(",", "")
    try:
        amount = Decimal(value)
    except (InvalidOperation, TypeError, ValueError):
        raise ValidationError(f"{field} must be a number, got {value!r}") from None
    if not amount.is_finite():
        raise ValidationError(f"{field} must be finite, got {value!r}")
    try:
        with localcontext(_CONTEXT):
            quantized = amount.quantize(CENTS)
    except (InvalidOperation, Overflow):
        raise ValidationError(f"{field} is out of range: {value!r}") from None
    if quantized != amount:
        raise ValidationError(f"{field} has more than two decimal places: {value!r}")
    return quantized


def add_all(amounts: Iterable[Decimal]) -> Decimal:
    """Sum amounts exactly, starting from zero so an empty input is 0.00."""
    try:
        with localcontext(_CONTEXT):
            total = ZERO
            for amount in amounts:
                total += amount
            return total.quantize(CENTS)
    except (InvalidOperation, Overflow) as e:
        raise ComputationError(f"Amount sum failed: {e!r}") from e


def subtract(a: Decimal, b: Decimal) -> Decimal:
    """Return `a - b` at cent precision."""
    try:
        with localcontext(_CONTEXT):
            return (a - b).quantize(CENTS)
    except (InvalidOperation, Overflow) as e:
        raise ComputationError(f"Subtraction failed: {e!r}") from e


def divide(amount: Decimal, parts: int) -> Decimal:
    """Split `amount` into `parts`, rounded half-up to cents."""
    try:
        with localcontext(_CONTEXT):
            return (amount / Decimal(parts)).quantize(CENTS, rounding=ROUND_HALF_UP)
    except (InvalidOperation, DivisionByZero, Overflow) as e:
        raise ComputationError(f"Division of {amount} by {parts} failed: {e!r}") from e


def format_amount(amount: Decimal, currency: str) -> str:
    """Render an amount for chat messages, e.g. `35,000 KRW` or `12.50 EUR`."""
    if amount == amount.to_integral_value():
        return f"{amount:,.0f} {currency}"
    return f"{amount:,.2f} {currency}"
