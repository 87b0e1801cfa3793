from decimal import Decimal

import pytest

from errors import ComputationError, ValidationError
from utils.money import add_all, divide, format_amount, to_decimal


def test_to_decimal_avoids_float_error():
    assert to_decimal(0.1) + to_decimal(0.2) == Decimal("0.30")
    assert to_decimal("1,250.50") == Decimal("1250.50")


@pytest.mark.parametrize("value", ["NaN", "Infinity", "12.345", True, "", object()])
def test_to_decimal_rejects(value):
    with pytest.raises(ValidationError):
        to_decimal(value)


def test_add_all_empty_is_zero():
    assert add_all([]) == Decimal("0.00")


def test_add_all_overflow_is_computation_error():
    huge = Decimal("9e999999")
    with pytest.raises(ComputationError):
        add_all([huge, huge])


def test_divide_rounds_half_up():
    assert divide(Decimal("100.00"), 7) == Decimal("14.29")
    assert divide(Decimal("70000"), 7) == Decimal("10000.00")


def test_format_amount():
    assert format_amount(Decimal("35000.00"), "KRW") == "35,000 KRW"
    assert format_amount(Decimal("12.50"), "EUR") == "12.50 EUR"
