"""Golden-section minimization of a unimodal function in decimal arithmetic."""

from __future__ import annotations

__all__ = ["GoldenSectionResult", "golden_section_search"]

from decimal import Decimal
from typing import Callable, NamedTuple

from ..precision import DEFAULT_PRECISION, DecimalLike, PrecisionContext


class GoldenSectionResult(NamedTuple):
    """The best evaluated point of a golden-section search."""

    x: Decimal
    fx: Decimal
    iterations: int


def golden_section_search(
    func: Callable[[Decimal], Decimal],
    lower: DecimalLike,
    upper: DecimalLike,
    tolerance: DecimalLike = Decimal("1e-6"),
    max_iterations: int = 100,
    precision: PrecisionContext = DEFAULT_PRECISION,
) -> GoldenSectionResult:
    """Minimize ``func`` on ``[lower, upper]``.

    Every iteration shrinks the bracket by the golden ratio (√5 - 1)/2 and
    evaluates ``func`` once. The search stops when the bracket is narrower
    than ``tolerance`` or after ``max_iterations`` iterations.

    Parameters
    ----------
    func : Callable[[Decimal], Decimal]
        The function to minimize.
    lower, upper : Decimal
        The initial bracket.
    tolerance : Decimal
        Minimum width of the bracket.
    max_iterations : int
        Maximum number of bracket reductions.
    precision : PrecisionContext
        Decimal context of the bracket arithmetic.

    Returns
    -------
    GoldenSectionResult
        The interior point with the lowest function value among all the
        evaluated ones, that value and the number of iterations performed.

    """
    a = precision.to_decimal(lower)
    b = precision.to_decimal(upper)
    tol = precision.to_decimal(tolerance)
    if a >= b:
        raise ValueError(f"Invalid bracket: [{a}, {b}]")

    with precision.local():
        ratio = (Decimal(5).sqrt() - 1) / 2
        x1 = b - ratio * (b - a)
        x2 = a + ratio * (b - a)
        f1 = func(x1)
        f2 = func(x2)
        best_x, best_f = (x1, f1) if f1 < f2 else (x2, f2)

        iterations = 0
        while iterations < max_iterations and abs(b - a) >= tol:
            iterations += 1
            if f1 < f2:
                b, x2, f2 = x2, x1, f1
                x1 = b - ratio * (b - a)
                f1 = func(x1)
                x, fx = x1, f1
            else:
                a, x1, f1 = x1, x2, f2
                x2 = a + ratio * (b - a)
                f2 = func(x2)
                x, fx = x2, f2
            if fx < best_f:
                best_x, best_f = x, fx

    return GoldenSectionResult(best_x, best_f, iterations)
