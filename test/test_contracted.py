"""Test the contracted sets and their radial quadrature."""

import math
from decimal import Decimal

import pytest
from assertionlib import assertion

from basissculpt.basis import ContractedSet, Primitive
from basissculpt.precision import PrecisionContext

from .utilsTest import make_contracted


def overlap_ref(a1: float, a2: float) -> float:
    """Overlap of two normalized s-type Gaussians."""
    return (2 * math.sqrt(a1 * a2) / (a1 + a2)) ** 1.5


def domain_args(alpha_min: float, steps: int = 400) -> "tuple[Decimal, Decimal, int]":
    """An integration range ending where exp(-2·α_min·r²) = exp(-80)."""
    return Decimal(0), Decimal(math.sqrt(40 / alpha_min)), steps


@pytest.mark.parametrize("alpha", [0.01, 0.1, 0.5, 1.0, 10.0, 1e4])
def test_norm_single_primitive(alpha: float) -> None:
    """Check that a normalized primitive has a unit norm."""
    contracted = make_contracted([alpha], [1])
    norm = contracted.norm(*domain_args(alpha))
    assertion.lt(abs(norm - 1), Decimal("1e-10"))


def test_norm_two_primitives() -> None:
    """Check the norm against the closed form c1² + c2² + 2·c1·c2·S12."""
    contracted = make_contracted([0.5, 0.1], [0.6, 0.4])
    norm = contracted.norm(*domain_args(0.1))
    ref = 0.36 + 0.16 + 2 * 0.24 * overlap_ref(0.5, 0.1)
    assertion.isclose(float(norm), ref, rel_tol=1e-10)


def test_overlap() -> None:
    c1 = make_contracted([0.5], [1])
    c2 = make_contracted([0.1], [1])
    args = domain_args(0.1)
    assertion.isclose(float(c1.overlap_with(c2, *args)), overlap_ref(0.5, 0.1), rel_tol=1e-10)
    assertion.eq(c1.overlap_with(c1, *args), c1.norm(*args))


def test_norm_invalid_steps() -> None:
    contracted = make_contracted([0.5], [1])
    with pytest.raises(ValueError):
        contracted.norm(0, 10, 0)


def test_phi() -> None:
    contracted = make_contracted([0.5, 0.1], [0.6, -0.4])
    r = Decimal("0.7")
    ref = contracted[0].value(r) + contracted[1].value(r)
    assertion.lt(abs(contracted.phi(r) - ref), Decimal("1e-25"))


def test_from_pairs() -> None:
    """Check the conversion and position tags of the pairs."""
    contracted = make_contracted(["3.42525091", "0.62391373"], ["0.15432897", "-0.53532814"])
    assertion.len_eq(contracted, 2)
    assertion.eq([p.position for p in contracted], [0, 1])
    assertion.eq(contracted.exponents, [Decimal("3.42525091"), Decimal("0.62391373")])
    assertion.eq(contracted.coefficients, [Decimal("0.15432897"), Decimal("-0.53532814")])
    assertion.eq(contracted.as_pairs(), list(zip(contracted.exponents, contracted.coefficients)))


def test_from_pairs_rounding() -> None:
    contracted = ContractedSet.from_pairs([("1.23456", "0.5")], PrecisionContext(3))
    assertion.eq(contracted.exponents, [Decimal("1.23")])


def test_getitem() -> None:
    contracted = make_contracted([3, 2, 1], [0.1, 0.2, 0.3])
    assertion.isinstance(contracted[0], Primitive)
    assertion.isinstance(contracted[1:], ContractedSet)
    assertion.eq(contracted[1:].exponents, [Decimal(2), Decimal(1)])


def test_without() -> None:
    contracted = make_contracted([3, 2, 1], [0.1, 0.2, 0.3])
    reduced = contracted.without(1)
    assertion.eq(reduced.exponents, [Decimal(3), Decimal(1)])
    assertion.len_eq(contracted, 3)

    for i in (-1, 3):
        with pytest.raises(ValueError):
            contracted.without(i)


def test_scaled() -> None:
    contracted = make_contracted([0.5, 0.1], [0.6, -0.4])
    args = domain_args(0.1, steps=200)
    norm = contracted.norm(*args)
    norm2 = contracted.scaled(Decimal(2)).norm(*args)
    assertion.lt(abs(norm2 - 4 * norm), Decimal("1e-25"))


def test_partition_and_merge() -> None:
    """Check that the sign partition can be undone with the position tags."""
    contracted = make_contracted([4, 3, 2, 1], [0.1, -0.2, 0.0, -0.3])
    plus, minus = contracted.partition_by_sign()
    assertion.eq(plus.coefficients, [Decimal("0.1"), Decimal("0.0")])
    assertion.eq(minus.coefficients, [Decimal("-0.2"), Decimal("-0.3")])

    merged = plus.merged_with(minus)
    assertion.eq(merged.exponents, [Decimal(4), Decimal(2), Decimal(3), Decimal(1)])
    assertion.eq(merged.in_original_order().exponents, contracted.exponents)
    assertion.eq(merged.original_order, contracted.exponents)


def test_in_original_order_duplicates() -> None:
    """Duplicated exponents keep their own coefficients."""
    contracted = make_contracted([1, 1, 2], [0.5, -0.5, 0.25])
    plus, minus = contracted.partition_by_sign()
    ordered = minus.merged_with(plus).in_original_order()
    assertion.eq(ordered.coefficients, contracted.coefficients)


def test_reorder_by_exponents() -> None:
    contracted = make_contracted([3, 2, 1], [0.1, 0.2, 0.3])
    reordered = contracted.reorder_by_exponents([Decimal(1), Decimal(3), Decimal(5)])
    assertion.eq(reordered.exponents, [Decimal(1), Decimal(3)])
    assertion.eq(reordered.coefficients, [Decimal("0.3"), Decimal("0.1")])
