"""Test the heuristics of the quadrature domain."""

import math
from decimal import Decimal

import pytest
from assertionlib import assertion

from basissculpt.basis import (
    ContractedSet, QuadratureDomain, suggest_domain, suggest_r_max, suggest_steps,
)

from .utilsTest import make_contracted


def test_r_max() -> None:
    """Check that exp(-2·α_min·r_max²) equals the tail tolerance."""
    contracted = make_contracted([10, 0.5, 2], [1, 1, 1])
    r_max = suggest_r_max(contracted, tail_tolerance=1e-16)
    assertion.isclose(float(r_max), math.sqrt(math.log(1e16)), rel_tol=1e-12)
    assertion.isclose(math.exp(-2 * 0.5 * float(r_max) ** 2), 1e-16, rel_tol=1e-8)


def test_steps() -> None:
    contracted = make_contracted([100, 0.1], [1, 1])
    r_max = Decimal(10)
    ref = math.ceil(10 * math.sqrt(200) * 8)
    assertion.eq(suggest_steps(contracted, r_max), ref)
    assertion.eq(suggest_steps(contracted, r_max, points_per_width=4), math.ceil(10 * math.sqrt(200) * 4))
    assertion.eq(suggest_steps(contracted, r_max, min_steps=10_000), 10_000)


def test_min_steps() -> None:
    contracted = make_contracted([0.5], [1])
    assertion.eq(suggest_steps(contracted, Decimal(5)), 200)


def test_domain() -> None:
    contracted = make_contracted([0.5, 0.1], [0.6, 0.4])
    domain = suggest_domain(contracted)
    assertion.isinstance(domain, QuadratureDomain)
    assertion.eq(domain.r_min, 0)
    assertion.eq(domain.r_max, suggest_r_max(contracted))
    assertion.eq(domain.steps, suggest_steps(contracted, domain.r_max))


def test_domain_converges() -> None:
    """Check that the suggested domain integrates a normalized set to one."""
    contracted = make_contracted([71.61683735, 13.04509632, 3.53051216], [1, 0, 0])
    norm = contracted.norm(*suggest_domain(contracted))
    assertion.lt(abs(norm - 1), Decimal("1e-12"))


def test_invalid() -> None:
    with pytest.raises(ValueError):
        suggest_domain(ContractedSet([]))
    with pytest.raises(ValueError):
        suggest_domain(make_contracted([-1], [1]))


@pytest.mark.parametrize("alpha", ["0.01", "0.1", "1", "71.61683735", "1e4"])
def test_single_primitive_converges(alpha: str) -> None:
    """Check that a normalized primitive integrates to one over its suggested domain."""
    contracted = make_contracted([alpha], [1])
    domain = suggest_domain(contracted)
    norm = contracted.norm(*domain)
    assertion.lt(abs(norm - 1), Decimal("1e-12"))
