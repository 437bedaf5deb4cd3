"""Schemas to valid user input.

Index
-----
.. currentmodule:: basissculpt.workflows.schemas
.. autosummary::
    schema_sculpt
    any_lambda
    yes_no

API
---
.. autodata:: schema_sculpt
.. autofunction:: any_lambda
.. autofunction:: yes_no

"""
__all__ = ['schema_sculpt', 'any_lambda', 'yes_no']

import os
from decimal import Decimal, InvalidOperation
from numbers import Real
from typing import Iterable

from schema import And, Optional, Or, Schema, Use

from ..messages import get_msg


def any_lambda(array: Iterable[str]) -> And:
    """Create an schema checking that the keyword matches one of the expected values."""
    return And(
        str, Use(str.lower), lambda s: s in array)


def yes_no() -> Or:
    """Create an schema accepting either a boolean or a ``yes``/``no`` string."""
    return Or(bool, And(any_lambda(("yes", "no")), Use(lambda s: s == "yes")))


def _to_decimal(value: "str | Real") -> Decimal:
    """Convert a user tolerance into a decimal, preserving its written digits."""
    if isinstance(value, bool):
        raise TypeError(type(value).__name__)
    if isinstance(value, float):
        value = repr(value)
    try:
        return Decimal(str(value).strip())
    except InvalidOperation as ex:
        raise ValueError(f"Invalid number: {value!r}") from ex


#: Schema to validate the input of a BasisSculpt run
schema_sculpt = Schema({

    # Basis set file in the GBS format
    "input": And(
        Use(os.fspath), os.path.isfile,
        error=get_msg("ERROR_FILE_NOT_FOUND", "the 'input' file")),

    # Maximum allowed deviation from the norm; it also sets the decimal precision
    "threshold": And(
        Or(str, Real), Use(_to_decimal), lambda d: d > 0,
        error=get_msg("ERROR_THRESHOLD_REQUIRED")),

    # Renormalize the shells and write the resulting basis set
    Optional("normalize", default=False): bool,

    # File to write the resulting basis set to; stdout if null
    Optional("output", default=None): Or(None, And(Use(os.fspath), str)),

    # Print the '-' prefix of the GBS atom headers
    Optional("output_gbs_format", default=True): yes_no(),

    # Write the resulting values as 0.xxxD+ee with as many decimals as this threshold
    Optional("output_threshold", default=None): Or(None, And(Use(float), lambda x: x > 0)),

    # Detailed log file
    Optional("log", default=None): Or(None, And(Use(os.fspath), str)),

    # Summary report with the norm loss and contribution of every primitive
    Optional("report", default=None): Or(None, And(Use(os.fspath), str)),

    # Label of the analysis
    Optional("version_tag", default=""): Use(str),

    # Name of the basis set
    Optional("fixed_basis_name", default=""): Use(str),

    # Log every normalized value with full precision
    Optional("verbose", default=False): bool,

    # Tail of the most diffuse primitive neglected by the radial quadrature
    Optional("tail_tolerance", default=1e-16): And(Use(float), lambda x: 0 < x < 1),

    # Quadrature points per width of the tightest primitive
    Optional("points_per_width", default=8): And(int, lambda n: n > 0),

    # Minimum number of quadrature intervals
    Optional("min_steps", default=200): And(int, lambda n: n > 0),
})
