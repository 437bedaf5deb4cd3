"""Basis set file parsers."""

from .gbs import (
    AtomSection, ShellBlock, expand_block, fortran_number, parse_basis, parse_basis_file,
)

__all__ = [
    "AtomSection", "ShellBlock", "expand_block", "fortran_number",
    "parse_basis", "parse_basis_file",
]
