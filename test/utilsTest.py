"""Functions use for testing."""

from __future__ import annotations

from decimal import Decimal
from pathlib import Path
from typing import Iterable

from basissculpt import ContractedSet, PrecisionContext, QuadratureDomain

__all__ = [
    "PATH_TEST",
    "make_contracted",
    "fixed_domain",
]

# Environment data
ROOT = Path(__file__).resolve().parent.parent
PATH_TEST = ROOT / "test" / "test_files"


def make_contracted(
    alphas: Iterable[str | float],
    coefficients: Iterable[str | float],
    digits: int = 30,
) -> ContractedSet:
    """Create a contracted set from exponents and coefficients."""
    precision = PrecisionContext(digits)
    return ContractedSet.from_pairs(zip(map(str, alphas), map(str, coefficients)), precision)


def fixed_domain(r_max: str | int, steps: int):
    """Create a ``domain_for`` callable always returning the same domain."""
    domain = QuadratureDomain(Decimal(0), Decimal(r_max), steps)

    def domain_for(contracted: ContractedSet) -> QuadratureDomain:
        return domain
    return domain_for
