"""Catalog of the user facing messages.

Index
-----
.. currentmodule:: basissculpt.messages
.. autosummary::
    MESSAGES
    get_msg

API
---
.. autodata:: MESSAGES
.. autofunction:: get_msg

"""

from __future__ import annotations

__all__ = ["MESSAGES", "get_msg"]

import types
from typing import Mapping

#: ``%``-style templates of every logged, reported or raised message.
MESSAGES: Mapping[str, str] = types.MappingProxyType({
    "ERROR_FILE_ARGUMENT": "ERROR: --input <file> argument is required.",
    "ERROR_FILE_NOT_FOUND": "ERROR: Input file not found or not readable: %s",
    "ERROR_THRESHOLD_REQUIRED": "ERROR: --threshold <float> argument is required (e.g., 1e-5).",
    "ERROR_OUTPUT_FILE": "ERROR: Cannot open output file: %s",
    "ERROR_LOG_FILE": "ERROR: Cannot open log file: %s",
    "ERROR_REPORT_FILE": "ERROR: Cannot open report file: %s",
    "ERROR_INPUT_FILE_ATOMS": "ERROR: Atoms not found in input file: %s",
    "INFO_FULL_NORM": "Full norm: %.10f",
    "INFO_PARTIAL_NORM": "Partial norm without primitive #%d: %.10f",
    "INFO_NO_REDUCTION_POSSIBLE": "Only one primitive - nothing to reduce.",
    "INFO_REMOVE_ENTRY": (
        "Removed #%2d (alfa = %.10f): norm = %.10f, loss = %.4f%%, contribution = %.4f%%"
    ),
    "INFO_REMOVE_HEADER_REPORT": "Rem. \t alfa \t\t\t norm \t\t\tloss,% \t contr.,%",
    "INFO_REMOVE_ENTRY_REPORT": "#%2d \t %.10f \t %.10f \t%.4f \t\t %.4f",
    "INFO_SEPARATOR": "-----------------",
    "INFO_VERSION_TAG": "Version tag: %s",
    "INFO_FIXED_BASIS_NAME": "Fixed basis name: %s",
    "INFO_NORMALIZATION_SEPARATOR": "----------------------",
    "INFO_FULL_NORMALIZED_NORM": "Full norm after normalization: %.10f",
    "INFO_VERBOSE_NORMALIZATION": "Full numbers:",
    "INFO_MATH_CONTEXT_PRECISION": "Selected math precision: %d digits",
    "INFO_ATOM": "Atom: %s",
    "INFO_SHELL": "  Block type: %s",
    "INFO_SHELL_HEADER": "  Header: %s",
    "INFO_SUBSHELL": "    Subblock: %s",
    "INFO_JOINED_ANALYSIS": "Joined analysis of all the primitives of %s",
    "WARN_PROJECTION_FAILED": (
        "!! Projection normalization failed: negative discriminant. Solving numerically..."
    ),
    "INFO_OPTIMIZED_S2": "Optimized s2 = %.8f (error = %.2e)",
    "WARN_SINGLE_SIGN_GROUP": "!! Cannot project-normalize: only one sign group present.",
    "WARN_NON_GBS_INPUT": (
        "WARNING: the input does not fit the GBS format! "
        "Ignoring and attempting to parse. Check results!"
    ),
})


def get_msg(key: str, *args: object) -> str:
    """Return the message ``key`` formatted with ``args``.

    Unknown keys give ``???key???``.

    Examples
    --------
    .. code:: python

        >>> from basissculpt.messages import get_msg
        >>> get_msg("INFO_FULL_NORM", 0.5)
        'Full norm: 0.5000000000'

    """
    template = MESSAGES.get(key)
    if template is None:
        return f"???{key}???"
    if not args:
        return template
    return template % args
