"""Contracted Gaussian functions and their radial quadrature.

Index
-----
.. currentmodule:: basissculpt.basis.contracted
.. autosummary::
    ContractedSet

API
---
.. autoclass:: ContractedSet
    :members:

"""

from __future__ import annotations

__all__ = ["ContractedSet"]

from decimal import Decimal
from typing import Iterable, Iterator, Sequence, overload

from ..precision import DEFAULT_PRECISION, DecimalLike, PrecisionContext
from .primitive import Primitive

_MATCH_TOLERANCE = Decimal("1e-12")


class ContractedSet(Sequence[Primitive]):
    """An ordered, immutable linear combination of primitives.

    Every transformation returns a new instance; the primitives keep their
    ``position`` tag so that the input order can always be restored with
    :meth:`in_original_order`.

    Parameters
    ----------
    primitives : Iterable[Primitive]
        The primitive Gaussians.
    precision : PrecisionContext
        Decimal context of all quadratures.

    """

    __slots__ = ("_primitives", "precision")

    def __init__(
        self,
        primitives: Iterable[Primitive],
        precision: PrecisionContext = DEFAULT_PRECISION,
    ) -> None:
        self._primitives: tuple[Primitive, ...] = tuple(primitives)
        self.precision = precision

    @classmethod
    def from_pairs(
        cls,
        pairs: Iterable[tuple[DecimalLike, DecimalLike]],
        precision: PrecisionContext = DEFAULT_PRECISION,
    ) -> ContractedSet:
        """Construct a set from (exponent, coefficient) pairs, tagging their positions."""
        primitives = (
            Primitive(precision.to_decimal(alpha), precision.to_decimal(c), precision, i)
            for i, (alpha, c) in enumerate(pairs)
        )
        return cls(primitives, precision)

    def __repr__(self) -> str:
        pairs = ", ".join(f"({p.alpha}, {p.coefficient})" for p in self._primitives)
        return f"{type(self).__name__}([{pairs}], digits={self.precision.digits})"

    def __len__(self) -> int:
        return len(self._primitives)

    def __iter__(self) -> Iterator[Primitive]:
        return iter(self._primitives)

    @overload
    def __getitem__(self, index: int) -> Primitive: ...
    @overload
    def __getitem__(self, index: slice) -> ContractedSet: ...

    def __getitem__(self, index: int | slice) -> Primitive | ContractedSet:
        if isinstance(index, slice):
            return ContractedSet(self._primitives[index], self.precision)
        return self._primitives[index]

    @property
    def primitives(self) -> tuple[Primitive, ...]:
        """The primitives in their current order."""
        return self._primitives

    @property
    def exponents(self) -> list[Decimal]:
        return [p.alpha for p in self._primitives]

    @property
    def coefficients(self) -> list[Decimal]:
        return [p.coefficient for p in self._primitives]

    @property
    def original_order(self) -> list[Decimal]:
        """The exponents in the order the primitives were read."""
        return self.in_original_order().exponents

    def as_pairs(self) -> list[tuple[Decimal, Decimal]]:
        """Return the (exponent, coefficient) pairs in the current order."""
        return [(p.alpha, p.coefficient) for p in self._primitives]

    # Evaluation

    def phi(self, r: Decimal) -> Decimal:
        """Evaluate the contracted function at radius ``r``."""
        with self.precision.local():
            return sum((p.value(r) for p in self._primitives), Decimal(0))

    def _phi_on_grid(self, radii: Sequence[Decimal]) -> list[Decimal]:
        with self.precision.local():
            total = [Decimal(0)] * len(radii)
            for p in self._primitives:
                total = [x + y for x, y in zip(total, p.values(radii))]
            return total

    def _grid(self, r_min: Decimal, r_max: Decimal, steps: int) -> tuple[Decimal, list[Decimal]]:
        if steps < 1:
            raise ValueError(f"the number of quadrature steps must be positive; observed value: {steps}")
        with self.precision.local():
            dr = (r_max - r_min) / steps
            return dr, [r_min + dr * i for i in range(steps + 1)]

    def _integrate(self, products: Iterable[Decimal], radii: Sequence[Decimal], dr: Decimal) -> Decimal:
        """Accumulate 4π·r²·f(r)·Δr over all ``steps + 1`` samples."""
        four_pi = self.precision.four_pi
        with self.precision.local():
            total = Decimal(0)
            for f, r in zip(products, radii):
                total += f * four_pi * (r * r) * dr
            return total

    def norm(self, r_min: DecimalLike, r_max: DecimalLike, steps: int) -> Decimal:
        """Compute ⟨φ|φ⟩ = ∫4πr²φ(r)²dr on ``[r_min, r_max]``.

        The rule samples all ``steps + 1`` points of the grid and gives each
        of them the full weight Δr = (r_max - r_min) / steps. It is neither
        the left-point nor the trapezoidal rule; with ``r_min = 0`` the first
        sample vanishes and it coincides with the trapezoidal rule up to the
        (negligible) last sample.

        """
        dr, radii = self._grid(self.precision.to_decimal(r_min), self.precision.to_decimal(r_max), steps)
        phi = self._phi_on_grid(radii)
        with self.precision.local():
            return self._integrate((x * x for x in phi), radii, dr)

    def overlap_with(
        self, other: ContractedSet, r_min: DecimalLike, r_max: DecimalLike, steps: int,
    ) -> Decimal:
        """Compute ⟨φ|χ⟩ = ∫4πr²φ(r)χ(r)dr with the same rule as :meth:`norm`."""
        dr, radii = self._grid(self.precision.to_decimal(r_min), self.precision.to_decimal(r_max), steps)
        phi = self._phi_on_grid(radii)
        chi = other._phi_on_grid(radii)
        with self.precision.local():
            return self._integrate((x * y for x, y in zip(phi, chi)), radii, dr)

    # Transformations

    def scaled(self, factor: Decimal) -> ContractedSet:
        """Multiply every coefficient by ``factor``."""
        return ContractedSet((p.scaled(factor) for p in self._primitives), self.precision)

    def without(self, index: int) -> ContractedSet:
        """Return the set with the primitive at ``index`` removed."""
        if not 0 <= index < len(self):
            raise ValueError(f"Invalid index to ignore: {index}")
        return ContractedSet(
            (p for i, p in enumerate(self._primitives) if i != index), self.precision)

    def partition_by_sign(self) -> tuple[ContractedSet, ContractedSet]:
        """Split into the primitives with ``c >= 0`` and those with ``c < 0``."""
        plus = [p for p in self._primitives if p.coefficient >= 0]
        minus = [p for p in self._primitives if p.coefficient < 0]
        return ContractedSet(plus, self.precision), ContractedSet(minus, self.precision)

    def merged_with(self, other: ContractedSet) -> ContractedSet:
        """Concatenate two sets, ``self`` first."""
        return ContractedSet(self._primitives + other._primitives, self.precision)

    def in_original_order(self) -> ContractedSet:
        """Restore the input order using the position tags.

        Untagged primitives follow the tagged ones in their current order.

        """
        tagged = sorted((p for p in self._primitives if p.position is not None),
                        key=lambda p: p.position)
        untagged = [p for p in self._primitives if p.position is None]
        return ContractedSet(tagged + untagged, self.precision)

    def reorder_by_exponents(
        self,
        alpha_order: Iterable[Decimal],
        tolerance: Decimal = _MATCH_TOLERANCE,
    ) -> ContractedSet:
        """Reorder the primitives following a sequence of exponents.

        Each exponent picks the first primitive whose exponent differs by
        less than ``tolerance``. Exponents without a match are skipped and
        duplicated exponents pick the same primitive; prefer
        :meth:`in_original_order`.

        """
        ordered = []
        with self.precision.local():
            for alpha in alpha_order:
                for p in self._primitives:
                    if abs(p.alpha - alpha) < tolerance:
                        ordered.append(p)
                        break
        return ContractedSet(ordered, self.precision)
