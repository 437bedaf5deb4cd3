"""Arbitrary-precision configuration shared by every numerical component.

Index
-----
.. currentmodule:: basissculpt.precision
.. autosummary::
    PrecisionContext
    DEFAULT_DIGITS

API
---
.. autoclass:: PrecisionContext
.. autodata:: DEFAULT_DIGITS

"""

from __future__ import annotations

__all__ = ["PrecisionContext", "DEFAULT_DIGITS", "DEFAULT_PRECISION"]

import math
import decimal
import dataclasses
from decimal import Decimal
from functools import cached_property
from typing import ContextManager, Union

#: Number of significant digits used when no tolerance is available.
DEFAULT_DIGITS = 42

DecimalLike = Union[Decimal, str, int, float]


@dataclasses.dataclass(frozen=True)
class PrecisionContext:
    """Immutable digit count and rounding rule of the decimal arithmetic.

    Instances are created once per run, usually with
    :meth:`PrecisionContext.from_tolerance`, and handed to every
    primitive, contracted set, analyzer and normalizer.

    Attributes
    ----------
    digits : int
        Number of significant decimal digits.
    rounding : str
        One of the :mod:`decimal` rounding constants.

    """

    digits: int = DEFAULT_DIGITS
    rounding: str = decimal.ROUND_HALF_UP

    def __post_init__(self) -> None:
        if self.digits < 1:
            raise ValueError(f"digits must be a positive integer; observed value: {self.digits}")

    @classmethod
    def from_tolerance(cls, tolerance: None | DecimalLike) -> PrecisionContext:
        """Derive the number of digits from a user tolerance.

        * ``None`` gives :data:`DEFAULT_DIGITS`.
        * A tolerance below one gives its decimal scale, e.g. ``1e-8`` gives 8.
        * Otherwise the tolerance, rounded half-up, plus one.

        """
        if tolerance is None:
            return cls()
        if isinstance(tolerance, float):
            tolerance = repr(tolerance)
        value = Decimal(tolerance)
        if value < 1:
            scale = -value.as_tuple().exponent
            return cls(max(1, scale))
        return cls(int(value.to_integral_value(rounding=decimal.ROUND_HALF_UP)) + 1)

    @cached_property
    def context(self) -> decimal.Context:
        """The :class:`decimal.Context` matching these settings."""
        return decimal.Context(prec=self.digits, rounding=self.rounding)

    def local(self) -> ContextManager[decimal.Context]:
        """Return a context manager that activates :attr:`context` for the enclosed block."""
        return decimal.localcontext(self.context)

    def to_decimal(self, value: DecimalLike) -> Decimal:
        """Convert ``value`` into a decimal rounded to this context."""
        if isinstance(value, float):
            return self.context.create_decimal_from_float(value)
        return self.context.create_decimal(value)

    @cached_property
    def pi(self) -> Decimal:
        """Double-precision π rounded to this context."""
        return self.context.create_decimal_from_float(math.pi)

    @cached_property
    def four_pi(self) -> Decimal:
        """Double-precision 4π rounded to this context."""
        return self.context.create_decimal_from_float(4 * math.pi)


#: Context used when a component is constructed without an explicit one.
DEFAULT_PRECISION = PrecisionContext()
