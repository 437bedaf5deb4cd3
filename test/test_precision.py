"""Test the derivation of the decimal precision."""

import math
import decimal
from decimal import Decimal

import pytest
from assertionlib import assertion

from basissculpt.precision import DEFAULT_DIGITS, PrecisionContext


@pytest.mark.parametrize("tolerance,digits", [
    (None, DEFAULT_DIGITS),
    ("1e-8", 8),
    (1e-8, 8),
    ("0.00001", 5),
    ("1.5e-8", 9),
    ("0.5", 1),
    ("1", 2),
    ("2.5", 4),
    ("3.4", 4),
    (Decimal("1E-12"), 12),
], ids=str)
def test_from_tolerance(tolerance: "None | str | float | Decimal", digits: int) -> None:
    """Check the number of digits derived from a tolerance."""
    precision = PrecisionContext.from_tolerance(tolerance)
    assertion.eq(precision.digits, digits)


def test_invalid_digits() -> None:
    with pytest.raises(ValueError):
        PrecisionContext(0)


def test_context() -> None:
    """Check the rounding of the decimal context."""
    precision = PrecisionContext(3)
    assertion.eq(precision.context.rounding, decimal.ROUND_HALF_UP)
    assertion.eq(precision.to_decimal("1.235"), Decimal("1.24"))
    assertion.eq(precision.to_decimal("1.23456789"), Decimal("1.23"))
    with precision.local():
        assertion.eq(Decimal(1) / Decimal(3), Decimal("0.333"))


def test_pi() -> None:
    """Check that π is the double precision value rounded to the context."""
    precision = PrecisionContext(10)
    assertion.eq(precision.pi, Decimal("3.141592654"))
    assertion.eq(float(precision.four_pi), pytest.approx(4 * math.pi, rel=1e-9))

    precision = PrecisionContext(60)
    assertion.eq(precision.pi, Decimal(math.pi))


def test_immutable() -> None:
    precision = PrecisionContext(10)
    with pytest.raises(AttributeError):
        precision.digits = 5
