"""Leave-one-out analysis of the primitives of a contracted function.

Index
-----
.. currentmodule:: basissculpt.analysis.contributions
.. autosummary::
    NormContributionAnalyzer
    PrimitiveContribution
    ContributionReport

API
---
.. autoclass:: NormContributionAnalyzer
    :members:
.. autoclass:: PrimitiveContribution
.. autoclass:: ContributionReport

"""

from __future__ import annotations

__all__ = ["NormContributionAnalyzer", "PrimitiveContribution", "ContributionReport"]

from decimal import Decimal
from typing import Callable, NamedTuple

from ..basis.contracted import ContractedSet
from ..basis.quadrature import QuadratureDomain, suggest_domain

#: Full norms below this value give a loss of zero.
NEGLIGIBLE_NORM = 1e-12

_HUNDRED = Decimal(100)


class PrimitiveContribution(NamedTuple):
    """Diagnostics of removing a single primitive."""

    #: 1-based position of the removed primitive.
    index: int
    alpha: Decimal
    partial_norm: Decimal
    loss_percent: Decimal
    contribution_percent: Decimal


class ContributionReport(NamedTuple):
    """The outcome of :meth:`NormContributionAnalyzer.all_partial_norms`."""

    full_norm: None | Decimal
    records: tuple[PrimitiveContribution, ...]

    @property
    def reducible(self) -> bool:
        """Whether the set held more than one primitive."""
        return self.full_norm is not None


class NormContributionAnalyzer:
    """Rank the primitives of a contracted set by the norm lost when removing them.

    Parameters
    ----------
    contracted : ContractedSet
        The set to analyze.
    domain_for : Callable[[ContractedSet], QuadratureDomain]
        Maps a (reduced) set to its quadrature domain; every reduced set
        gets its own domain.

    """

    __slots__ = ("contracted", "domain_for")

    def __init__(
        self,
        contracted: ContractedSet,
        domain_for: Callable[[ContractedSet], QuadratureDomain] = suggest_domain,
    ) -> None:
        self.contracted = contracted
        self.domain_for = domain_for

    def _norm(self, contracted: ContractedSet) -> Decimal:
        return contracted.norm(*self.domain_for(contracted))

    def full_norm(self) -> Decimal:
        """Compute the norm of the complete set."""
        return self._norm(self.contracted)

    def partial_norm_excluding(self, index: int) -> Decimal:
        """Compute the norm of the set without the primitive at ``index`` (0-based)."""
        return self._norm(self.contracted.without(index))

    def contributions(self) -> list[Decimal]:
        """Return |c·N| of every primitive as a percentage of their sum."""
        context = self.contracted.precision.context
        amplitudes = [context.abs(p.amplitude) for p in self.contracted]
        total = sum(amplitudes, Decimal(0))
        if total.is_zero():
            return [Decimal(0)] * len(amplitudes)
        return [context.multiply(context.divide(a, total), _HUNDRED) for a in amplitudes]

    def _loss(self, full: Decimal, partial: Decimal) -> Decimal:
        if full <= NEGLIGIBLE_NORM:
            return Decimal(0)
        context = self.contracted.precision.context
        return context.multiply(context.divide(context.subtract(full, partial), full), _HUNDRED)

    def all_partial_norms(self) -> ContributionReport:
        """Remove every primitive in turn and measure the loss of norm.

        Sets with a single primitive are not integrated at all and give a
        report without full norm nor records.

        """
        if len(self.contracted) <= 1:
            return ContributionReport(None, ())

        full = self.full_norm()
        contributions = self.contributions()
        records = []
        for i, primitive in enumerate(self.contracted):
            partial = self.partial_norm_excluding(i)
            records.append(PrimitiveContribution(
                i + 1, primitive.alpha, partial, self._loss(full, partial), contributions[i],
            ))
        return ContributionReport(full, tuple(records))
