"""Primitive Gaussian functions.

Index
-----
.. currentmodule:: basissculpt.basis.primitive
.. autosummary::
    Primitive
    normalization_constant

API
---
.. autoclass:: Primitive
.. autofunction:: normalization_constant

"""

from __future__ import annotations

__all__ = ["Primitive", "normalization_constant"]

import math
import dataclasses
from decimal import Decimal
from typing import Sequence, TYPE_CHECKING

import numpy as np

from ..precision import DEFAULT_PRECISION, PrecisionContext

if TYPE_CHECKING:
    from numpy.typing import NDArray
    from numpy import float64 as f8

_THREE_QUARTERS = Decimal("0.75")


def normalization_constant(alpha: Decimal, precision: PrecisionContext) -> Decimal:
    """Compute the radial normalization constant of an s-type Gaussian.

    N = (2α/π)^(3/4)

    """
    with precision.local():
        ratio = 2 * alpha / precision.pi
        return ratio ** _THREE_QUARTERS


def _from_double(value: float) -> Decimal:
    """Convert a double into a decimal through its shortest representation."""
    return Decimal(repr(value))


@dataclasses.dataclass(frozen=True)
class Primitive:
    """A single Gaussian term c·N·exp(-α·r²).

    Instances are immutable: :meth:`scaled` returns a new primitive.

    Attributes
    ----------
    alpha : Decimal
        Positive exponent.
    coefficient : Decimal
        Signed contraction coefficient.
    precision : PrecisionContext
        Decimal context used for every operation on this primitive.
    position : int, optional
        Position of the primitive in the block it was read from.
    norm_constant : Decimal
        (2α/π)^(3/4), derived from ``alpha`` on construction.

    """

    alpha: Decimal
    coefficient: Decimal
    precision: PrecisionContext = dataclasses.field(
        default=DEFAULT_PRECISION, repr=False, compare=False)
    position: None | int = None
    norm_constant: Decimal = dataclasses.field(init=False, repr=False, compare=False)
    amplitude: Decimal = dataclasses.field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        norm = normalization_constant(self.alpha, self.precision)
        object.__setattr__(self, "norm_constant", norm)
        object.__setattr__(self, "amplitude", self.precision.context.multiply(self.coefficient, norm))

    def value(self, r: Decimal) -> Decimal:
        """Evaluate the primitive at radius ``r``.

        Mixed precision: the exponent -α·r² is formed in the decimal
        context, exponentiated in double precision and converted back
        through its shortest repr, while the prefactor c·N keeps the full
        decimal precision. Do not replace the exponential by a decimal one;
        the quadrature results depend on this split.

        """
        with self.precision.local():
            exponent = -(self.alpha * (r * r))
            return self.amplitude * _from_double(math.exp(float(exponent)))

    def values(self, radii: Sequence[Decimal]) -> list[Decimal]:
        """Evaluate the primitive on a grid of radii; see :meth:`value`."""
        with self.precision.local():
            exponents: NDArray[f8] = np.fromiter(
                (float(-(self.alpha * (r * r))) for r in radii),
                dtype=np.float64, count=len(radii),
            )
            amplitude = self.amplitude
            return [amplitude * _from_double(x) for x in np.exp(exponents).tolist()]

    def scaled(self, factor: Decimal) -> Primitive:
        """Return a copy with the coefficient multiplied by ``factor``."""
        coefficient = self.precision.context.multiply(self.coefficient, factor)
        return Primitive(self.alpha, coefficient, self.precision, self.position)
