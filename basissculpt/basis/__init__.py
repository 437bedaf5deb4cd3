"""Primitive and contracted Gaussian functions."""

from .primitive import Primitive, normalization_constant
from .contracted import ContractedSet
from .quadrature import QuadratureDomain, suggest_domain, suggest_r_max, suggest_steps

__all__ = [
    "ContractedSet", "Primitive", "QuadratureDomain", "normalization_constant",
    "suggest_domain", "suggest_r_max", "suggest_steps",
]
