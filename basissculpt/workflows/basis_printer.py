"""Writing of (renormalized) basis sets in the GBS format.

Index
-----
.. currentmodule:: basissculpt.workflows.basis_printer
.. autosummary::
    BasisPrinter
    format_d
    format_always_zero_d
    decimals_from_threshold

API
---
.. autoclass:: BasisPrinter
    :members:
.. autofunction:: format_d
.. autofunction:: format_always_zero_d
.. autofunction:: decimals_from_threshold

"""

from __future__ import annotations

__all__ = ["BasisPrinter", "format_d", "format_always_zero_d", "decimals_from_threshold"]

import math
from typing import IO, Sequence, SupportsFloat

from ..basis import ContractedSet

#: Largest number of decimals that a double can reliably represent
MAX_DECIMALS = 15

_ATOM_TERMINATOR = "****"


def format_d(value: SupportsFloat) -> str:
    """Format ``value`` in scientific notation with a Fortran ``D`` exponent.

    Examples
    --------
    .. code:: python

        >>> from basissculpt.workflows.basis_printer import format_d
        >>> format_d(13.0)
        '1.300000D+01'

    """
    return f"{float(value):.6E}".replace("E", "D")


def format_always_zero_d(value: SupportsFloat, decimals: int) -> str:
    """Format ``value`` as ``0.xxxxD±ee``, the mantissa always starting with ``0.``.

    At most :data:`MAX_DECIMALS` decimals are printed.

    Examples
    --------
    .. code:: python

        >>> from basissculpt.workflows.basis_printer import format_always_zero_d
        >>> format_always_zero_d(13.0, 6)
        '0.130000D+02'

    """
    decimals = min(decimals, MAX_DECIMALS)
    value = float(value)
    if value == 0:
        return f"0.{'0' * decimals}D+00"

    exponent = math.floor(math.log10(abs(value))) + 1
    mantissa = value / math.pow(10, exponent)
    return f"{mantissa:.{decimals}f}D{exponent:+03d}"


def decimals_from_threshold(threshold: float) -> int:
    """Return the number of decimals matching ``threshold``, e.g. 8 for ``1e-8``."""
    return abs(math.floor(math.log10(threshold) + 0.5))


class BasisPrinter:
    """Collect the lines of a GBS basis set file.

    Parameters
    ----------
    gbs_format : bool
        Whether to prefix the atom headers with ``-``.
    output_threshold : float, optional
        If not ``None``, write all values with :func:`format_always_zero_d`
        using the decimals of this threshold rather than with :func:`format_d`.

    """

    __slots__ = ("gbs_format", "decimals", "lines")

    def __init__(self, gbs_format: bool = True, output_threshold: None | float = None) -> None:
        self.gbs_format = gbs_format
        if output_threshold is None:
            self.decimals: None | int = None
        else:
            self.decimals = decimals_from_threshold(output_threshold)
        self.lines: list[str] = []

    def __str__(self) -> str:
        return "".join(f"{line}\n" for line in self.lines)

    def add_title(self, basis_name: str, version_tag: str) -> None:
        """Add the ``! <name> <tag>`` comment line."""
        self.lines.append(f"! {basis_name} {version_tag}")

    def add_atom(self, label: str) -> None:
        self.lines.append(f"-{label}" if self.gbs_format else label)

    def add_shell(self, shell_type: str, header: str) -> None:
        self.lines.append(f"{shell_type} {header}")

    def end_atom(self) -> None:
        self.lines.append(_ATOM_TERMINATOR)

    def _format_row(self, alpha: float, coefficients: Sequence[float]) -> str:
        if self.decimals is None:
            return "".join("%16s" % format_d(x) for x in (alpha, *coefficients))
        return "   ".join(format_always_zero_d(x, self.decimals) for x in (alpha, *coefficients))

    def add_rows(self, subshells: Sequence[ContractedSet]) -> None:
        """Add the rows of a shell, one coefficient column per subshell.

        The exponents are taken from the first subshell.

        """
        if not subshells:
            return
        first, *_ = subshells
        for i, primitive in enumerate(first):
            coefficients = [float(contracted[i].coefficient) for contracted in subshells]
            self.lines.append(self._format_row(float(primitive.alpha), coefficients))

    def write(self, stream: IO[str]) -> None:
        """Write the collected lines to ``stream``."""
        stream.write(str(self))
