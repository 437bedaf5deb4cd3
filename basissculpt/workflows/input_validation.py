"""Functionality to check that the input provided by the user is valid.

Index
-----
.. currentmodule:: basissculpt.workflows.input_validation
.. autosummary::
    process_input
    validate_input
    read_input

API
---
.. autofunction:: process_input
.. autofunction:: validate_input
.. autofunction:: read_input

"""

from __future__ import annotations

__all__ = ['process_input', 'validate_input', 'read_input']

from typing import Any, Mapping

import yaml
from schema import SchemaError

from .._data import SculptSettings
from .._logger import logger
from ..common import DictConfig, PathLike, UniqueSafeLoader
from .schemas import schema_sculpt


def read_input(input_file: PathLike) -> DictConfig:
    """Read the YAML ``input_file``, rejecting duplicate keys."""
    with open(input_file, 'r') as f:
        dict_input = yaml.load(f.read(), Loader=UniqueSafeLoader)
    if dict_input is None:
        return DictConfig()
    if not isinstance(dict_input, dict):
        raise SchemaError(f"Expected a mapping in {input_file!r}; observed type: {type(dict_input).__name__!r}")
    return DictConfig(dict_input)


def validate_input(dict_input: Mapping[str, Any]) -> SculptSettings:
    """Validate ``dict_input`` and convert it into the settings of a run.

    Raises
    ------
    SchemaError
        If the input is not valid

    """
    try:
        d = schema_sculpt.validate(dict(dict_input))
    except SchemaError as e:
        msg = f"There was an error in the input provided:\n{e}"
        logger.warning(msg)
        raise
    return SculptSettings(**d)


def process_input(
    input_file: PathLike,
    overrides: None | Mapping[str, Any] = None,
) -> SculptSettings:
    """Read the `input_file` in YAML format and validate it.

    Parameters
    ----------
    input_file
        path to the input
    overrides
        Options taking precedence over those of the input file,
        e.g. the command line flags.

    Returns
    -------
    SculptSettings
        Configuration of the run

    Raises
    ------
    SchemaError
        If the input is not valid

    """
    dict_input = read_input(input_file)
    if overrides is not None:
        dict_input.update(overrides)
    return validate_input(dict_input)
