"""Radial integration domains and the heuristics choosing them.

Index
-----
.. currentmodule:: basissculpt.basis.quadrature
.. autosummary::
    QuadratureDomain
    suggest_r_max
    suggest_steps
    suggest_domain

API
---
.. autoclass:: QuadratureDomain
.. autofunction:: suggest_r_max
.. autofunction:: suggest_steps
.. autofunction:: suggest_domain

"""

from __future__ import annotations

__all__ = ["QuadratureDomain", "suggest_r_max", "suggest_steps", "suggest_domain"]

import math
from decimal import Decimal
from typing import NamedTuple, TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from .contracted import ContractedSet

#: Relative size of the neglected tail of φ².
DEFAULT_TAIL_TOLERANCE = 1e-16

#: Number of samples per Gaussian width 1/√(2α).
DEFAULT_POINTS_PER_WIDTH = 8

#: Lower bound on the number of quadrature intervals.
DEFAULT_MIN_STEPS = 200


class QuadratureDomain(NamedTuple):
    """The radial interval and number of intervals of a quadrature."""

    r_min: Decimal
    r_max: Decimal
    steps: int


def _exponent_range(contracted: ContractedSet) -> tuple[float, float]:
    if not len(contracted):
        raise ValueError("Cannot build a quadrature domain for an empty contracted set")
    alphas = np.array([float(a) for a in contracted.exponents], dtype=np.float64)
    if (alphas <= 0).any():
        raise ValueError(f"Exponents must be positive; observed values: {alphas.tolist()}")
    return float(alphas.min()), float(alphas.max())


def suggest_r_max(
    contracted: ContractedSet,
    tail_tolerance: float = DEFAULT_TAIL_TOLERANCE,
) -> Decimal:
    """Return the radius beyond which exp(-2·α_min·r²) drops below ``tail_tolerance``."""
    alpha_min, _ = _exponent_range(contracted)
    r_max = math.sqrt(math.log(1 / tail_tolerance) / (2 * alpha_min))
    return contracted.precision.to_decimal(r_max)


def suggest_steps(
    contracted: ContractedSet,
    r_max: Decimal,
    points_per_width: int = DEFAULT_POINTS_PER_WIDTH,
    min_steps: int = DEFAULT_MIN_STEPS,
) -> int:
    """Return enough intervals to sample the tightest primitive ``points_per_width`` times per width."""
    _, alpha_max = _exponent_range(contracted)
    steps = math.ceil(float(r_max) * math.sqrt(2 * alpha_max) * points_per_width)
    return max(min_steps, steps)


def suggest_domain(
    contracted: ContractedSet,
    tail_tolerance: float = DEFAULT_TAIL_TOLERANCE,
    points_per_width: int = DEFAULT_POINTS_PER_WIDTH,
    min_steps: int = DEFAULT_MIN_STEPS,
) -> QuadratureDomain:
    """Construct a :class:`QuadratureDomain` starting at the origin for ``contracted``.

    Parameters
    ----------
    contracted : ContractedSet
        A non-empty contracted set with positive exponents.
    tail_tolerance : float
        Tail cut-off of the most diffuse primitive.
    points_per_width : int
        Samples per width of the tightest primitive.
    min_steps : int
        Lower bound on the number of intervals.

    Returns
    -------
    QuadratureDomain
        The suggested domain.

    """
    r_max = suggest_r_max(contracted, tail_tolerance)
    steps = suggest_steps(contracted, r_max, points_per_width, min_steps)
    return QuadratureDomain(Decimal(0), r_max, steps)
