"""Renormalization of contracted sets to unit norm.

Sets without negative coefficients are rescaled uniformly. Mixed-sign sets
are split into their positive (P) and negative (M) parts and the negative
part is rescaled by ``s2`` such that ⟨P + s2·M|P + s2·M⟩ = 1, i.e.

.. math::

    B s_2^2 + 2 C s_2 + (A - 1) = 0

with :math:`A = ⟨P|P⟩`, :math:`B = ⟨M|M⟩` and :math:`C = ⟨P|M⟩`.
A golden-section search over ``s2`` is used when this quadratic has no
real root.

Index
-----
.. currentmodule:: basissculpt.normalization.normalizer
.. autosummary::
    Normalizer
    NormalizationResult
    Strategy

API
---
.. autoclass:: Normalizer
    :members:
.. autoclass:: NormalizationResult
.. autoclass:: Strategy

"""

from __future__ import annotations

__all__ = ["Normalizer", "NormalizationResult", "Strategy"]

import enum
from decimal import Decimal
from typing import NamedTuple

from ..basis.contracted import ContractedSet
from ..basis.quadrature import QuadratureDomain
from ..messages import get_msg
from ..precision import DecimalLike
from .golden_section import golden_section_search


class Strategy(enum.Enum):
    """The path taken by :meth:`Normalizer.normalize`."""

    #: No negative coefficients; scaled by 1/√norm.
    UNIFORM = "uniform"

    #: Negative part rescaled by a real root of the norm quadratic.
    PROJECTION = "projection"

    #: Negative discriminant; ``s2`` found by golden-section search.
    GOLDEN_SECTION = "golden_section"

    #: Only one sign group present; returned unchanged.
    SKIPPED = "skipped"


class NormalizationResult(NamedTuple):
    """The outcome of :meth:`Normalizer.normalize`."""

    #: The normalized set in its original order.
    contracted: ContractedSet

    #: The norm of :attr:`contracted` on the domain used for normalizing.
    norm: Decimal

    strategy: Strategy

    #: Scale factor of the negative group, if any.
    s2: None | Decimal = None

    #: |norm(P + s2·M) - 1| at the golden-section optimum.
    residual: None | Decimal = None

    warnings: tuple[str, ...] = ()


class Normalizer:
    """Rescale contracted sets to unit norm.

    Parameters
    ----------
    cleanup_threshold : Decimal
        A final uniform rescale is applied when the norm of a mixed-sign
        set deviates from one by more than this value.
    bracket : tuple[Decimal, Decimal]
        Initial ``s2`` bracket of the golden-section search.
    tolerance : Decimal
        Bracket width at which the golden-section search stops.
    max_iterations : int
        Maximum number of golden-section iterations.

    """

    __slots__ = ("cleanup_threshold", "bracket", "tolerance", "max_iterations")

    def __init__(
        self,
        cleanup_threshold: DecimalLike = Decimal("1e-10"),
        bracket: tuple[DecimalLike, DecimalLike] = (Decimal(-10), Decimal(10)),
        tolerance: DecimalLike = Decimal("1e-6"),
        max_iterations: int = 100,
    ) -> None:
        self.cleanup_threshold = Decimal(cleanup_threshold)
        self.bracket = (Decimal(bracket[0]), Decimal(bracket[1]))
        self.tolerance = Decimal(tolerance)
        self.max_iterations = max_iterations

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(cleanup_threshold={self.cleanup_threshold}, "
            f"bracket={self.bracket}, tolerance={self.tolerance}, "
            f"max_iterations={self.max_iterations})"
        )

    def normalize(self, contracted: ContractedSet, domain: QuadratureDomain) -> NormalizationResult:
        """Normalize ``contracted`` on ``domain``.

        Raises
        ------
        ValueError
            If a norm that has to be rescaled is not positive.

        """
        if all(p.coefficient >= 0 for p in contracted):
            return self._normalize_uniform(contracted, domain)
        return self._normalize_projection(contracted, domain)

    @staticmethod
    def _rescaled(contracted: ContractedSet, norm: Decimal) -> ContractedSet:
        if norm <= 0:
            raise ValueError(f"Cannot normalize a set with a non-positive norm: {norm}")
        context = contracted.precision.context
        scale = context.divide(1, context.sqrt(norm))
        return contracted.scaled(scale)

    def _normalize_uniform(
        self, contracted: ContractedSet, domain: QuadratureDomain,
    ) -> NormalizationResult:
        ret = self._rescaled(contracted, contracted.norm(*domain)).in_original_order()
        return NormalizationResult(ret, ret.norm(*domain), Strategy.UNIFORM)

    def _normalize_projection(
        self, contracted: ContractedSet, domain: QuadratureDomain,
    ) -> NormalizationResult:
        plus, minus = contracted.partition_by_sign()
        if not len(plus) or not len(minus):
            msg = get_msg("WARN_SINGLE_SIGN_GROUP")
            return NormalizationResult(
                contracted, contracted.norm(*domain), Strategy.SKIPPED, warnings=(msg,),
            )

        context = contracted.precision.context
        A = plus.norm(*domain)
        B = minus.norm(*domain)
        C = plus.overlap_with(minus, *domain)
        if B <= 0:
            raise ValueError(f"Cannot normalize a set whose negative part has a non-positive norm: {B}")

        with contracted.precision.local():
            a = B
            b = 2 * C
            c = A - 1
            discriminant = b * b - 4 * a * c

            residual = None
            warnings: tuple[str, ...] = ()
            if discriminant < 0:
                strategy = Strategy.GOLDEN_SECTION
                warnings = (get_msg("WARN_PROJECTION_FAILED"),)
                s2, residual = self._minimize_s2(plus, minus, domain)
            else:
                strategy = Strategy.PROJECTION
                sqrt_d = context.sqrt(discriminant)
                s2_a = (-b + sqrt_d) / (2 * a)
                s2_b = (-b - sqrt_d) / (2 * a)
                s2 = s2_a if abs(s2_a) < abs(s2_b) else s2_b

        merged = plus.merged_with(minus.scaled(s2))
        norm = merged.norm(*domain)
        if abs(context.subtract(norm, 1)) > self.cleanup_threshold:
            merged = self._rescaled(merged, norm)

        ret = merged.in_original_order()
        return NormalizationResult(ret, ret.norm(*domain), strategy, s2, residual, warnings)

    def _minimize_s2(
        self, plus: ContractedSet, minus: ContractedSet, domain: QuadratureDomain,
    ) -> tuple[Decimal, Decimal]:
        """Minimize |norm(P + s2·M) - 1| over ``s2``."""
        context = plus.precision.context

        def deviation(s2: Decimal) -> Decimal:
            norm = plus.merged_with(minus.scaled(s2)).norm(*domain)
            return abs(context.subtract(norm, 1))

        lower, upper = self.bracket
        result = golden_section_search(
            deviation, lower, upper, self.tolerance, self.max_iterations, plus.precision,
        )
        return result.x, result.fx
