"""Reader of Gaussian basis set (``.gbs``) files.

A file is a sequence of atom sections::

    -H 0
    S   3   1.00
          0.3425250914D+01       0.1543289673D+00
          0.6239137298D+00       0.5353281423D+00
          0.1688554040D+00       0.4446345422D+00
    ****

The leading ``-`` of the atom header is optional (Gaussian ``GEN`` input),
in which case any line starting with a letter right after a ``****`` (or
at the top of the file) opens a new atom.

Index
-----
.. currentmodule:: basissculpt.parsers.gbs
.. autosummary::
    AtomSection
    ShellBlock
    parse_basis
    parse_basis_file
    expand_block
    fortran_number

API
---
.. autoclass:: AtomSection
.. autoclass:: ShellBlock
.. autofunction:: parse_basis
.. autofunction:: parse_basis_file
.. autofunction:: expand_block
.. autofunction:: fortran_number

"""

from __future__ import annotations

__all__ = [
    "AtomSection", "ShellBlock", "parse_basis", "parse_basis_file",
    "expand_block", "fortran_number",
]

import os
from typing import NamedTuple

import pyparsing as pa

from .._logger import logger
from ..common import PathLike
from ..messages import get_msg

#: A real number, optionally with a Fortran ``D`` exponent
real_number = pa.Regex(r"[-+]?(?:\d+\.?\d*|\.\d+)(?:[EeDd][-+]?\d+)?")

#: A row of real numbers spanning a complete line
numeric_row = pa.OneOrMore(real_number) + pa.StringEnd()

#: A shell type followed by its (free format) header
shell_header = pa.Regex(r"[A-Za-z]\S*")("shell_type") + pa.restOfLine("header")

_TERMINATOR = "****"


class ShellBlock(NamedTuple):
    """A shell of an atom section, e.g. ``S``, ``P`` or the combined ``SP``."""

    shell_type: str
    header: str
    #: The numerical rows as ``(exponent, coefficient, ...)`` strings.
    rows: list[tuple[str, ...]]

    def __str__(self) -> str:
        lines = [f"{self.shell_type} {self.header}"]
        lines += ["    ".join(row) for row in self.rows]
        return "\n".join(lines)


class AtomSection(NamedTuple):
    """All the shells of a single atom."""

    label: str
    #: Whether the header used the ``-`` prefix of the GBS format.
    dashed: bool
    blocks: list[ShellBlock]
    #: 1-based line number of the atom header.
    line_number: int = 0


def fortran_number(token: str) -> str:
    """Replace the Fortran ``D`` exponent marker of ``token`` by ``E``."""
    return token.replace("D", "E").replace("d", "e")


def parse_basis(text: str, source: str = "<string>") -> list[AtomSection]:
    """Parse the content of a GBS file.

    Parameters
    ----------
    text : str
        The file content.
    source : str
        Name of the parsed file, used in error messages.

    Returns
    -------
    list[AtomSection]
        The atoms in file order.

    Raises
    ------
    RuntimeError
        If the text holds no atom section.

    """
    atoms: list[AtomSection] = []
    atom: None | AtomSection = None
    block: None | ShellBlock = None
    end_of_atom = True

    for line_number, raw_line in enumerate(text.splitlines(), start=1):
        line = raw_line.strip()
        if not line or line.startswith("!"):
            continue

        if line.startswith("-") or (end_of_atom and line[0].isalpha()):
            dashed = line.startswith("-")
            label = line[1:].strip() if dashed else line
            atom = AtomSection(label, dashed, [], line_number)
            atoms.append(atom)
            block = None
            end_of_atom = False
        elif line == _TERMINATOR:
            block = None
            end_of_atom = True
        elif line[0].isalpha():
            result = shell_header.parseString(line)
            block = ShellBlock(result["shell_type"], result["header"].strip(), [])
            if atom is not None:
                atom.blocks.append(block)
        elif block is not None:
            try:
                row = numeric_row.parseString(line)
            except pa.ParseException:
                logger.warning(f"{source}:{line_number}: skipping non-numeric row {line!r}")
            else:
                block.rows.append(tuple(row))

    if not atoms:
        raise RuntimeError(get_msg("ERROR_INPUT_FILE_ATOMS", source))
    return atoms


def parse_basis_file(path: PathLike) -> list[AtomSection]:
    """Read and parse the GBS file at ``path``; see :func:`parse_basis`."""
    with open(path, "r") as f:
        text = f.read()
    return parse_basis(text, os.fsdecode(path))


def expand_block(block: ShellBlock) -> dict[str, list[tuple[str, str]]]:
    """Split a shell into one list of ``(exponent, coefficient)`` pairs per letter.

    A combined shell such as ``SP`` has one coefficient column per letter;
    rows with any other number of columns are skipped. Single letter shells
    use the first two columns of every row holding at least two.

    Examples
    --------
    .. code:: python

        >>> from basissculpt.parsers.gbs import ShellBlock, expand_block
        >>> block = ShellBlock("SP", "1 1.00", [("0.5", "0.1", "0.2")])
        >>> expand_block(block)
        {'S': [('0.5', '0.1')], 'P': [('0.5', '0.2')]}

    """
    letters = list(block.shell_type)
    ret: dict[str, list[tuple[str, str]]] = {letter: [] for letter in letters}
    if len(letters) == 1:
        (letter,) = letters
        ret[letter] = [(row[0], row[1]) for row in block.rows if len(row) >= 2]
        return ret

    for row in block.rows:
        if len(row) != len(letters) + 1:
            continue
        exponent, *coefficients = row
        for letter, c in zip(letters, coefficients):
            ret[letter].append((exponent, c))
    return ret
