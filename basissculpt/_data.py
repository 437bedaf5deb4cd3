"""Dataclasses used for storing BasisSculpt settings and results."""

from __future__ import annotations

import os
import textwrap
import pprint
import functools
import dataclasses
from decimal import Decimal
from typing import Any, TYPE_CHECKING

from .precision import PrecisionContext

if TYPE_CHECKING:
    from dataclasses import dataclass
    from .analysis import ContributionReport
    from .basis import ContractedSet
    from .normalization import NormalizationResult
else:
    dataclass = functools.partial(dataclasses.dataclass, repr=False, kw_only=True, slots=True)

pformat = functools.partial(pprint.pformat, compact=True, sort_dicts=False)

__all__ = [
    "SculptSettings",
    "SubshellResult",
    "BlockResult",
    "AtomResult",
]


@dataclass
class _DataConfig:
    """BasisSculpt dataclass baseclass with a number of preset methods."""

    def __repr__(self) -> str:
        """Implement ``repr(self)``."""
        cls = type(self)
        data = ""
        field_iter = ((field.name, getattr(self, field.name)) for field in dataclasses.fields(self))
        for name, field in field_iter:
            width = 94 - len(name)
            offset = 100 - width
            data += f"    {name}: "
            data += textwrap.indent(pformat(field, width=width), offset * " ")[offset:]
            data += ",\n"
        return f"{cls.__name__}(\n{data})"

    def asdict(self) -> dict[str, Any]:
        """Convert this instance into a yaml-safe dictionary."""
        return {
            field.name: self._recursive_traverse(getattr(self, field.name))
            for field in dataclasses.fields(self)
        }

    @classmethod
    def _recursive_traverse(cls, val: object) -> Any:
        """Transform decimals, paths and nested dataclasses into yaml-safe objects."""
        if isinstance(val, dict):
            return {k: cls._recursive_traverse(v) for k, v in val.items()}
        elif isinstance(val, (tuple, list)):
            return [cls._recursive_traverse(v) for v in val]
        elif isinstance(val, Decimal):
            return str(val)
        elif isinstance(val, os.PathLike):
            return os.fspath(val)
        elif isinstance(val, _DataConfig):
            return val.asdict()
        else:
            return val


@dataclass
class SculptSettings(_DataConfig):
    """Dataclass with the options of a BasisSculpt run."""

    input: str | os.PathLike[str]
    threshold: Decimal
    normalize: bool = False
    output: None | str | os.PathLike[str] = None
    output_gbs_format: bool = True
    output_threshold: None | float = None
    log: None | str | os.PathLike[str] = None
    report: None | str | os.PathLike[str] = None
    version_tag: str = ""
    fixed_basis_name: str = ""
    verbose: bool = False
    tail_tolerance: float = 1e-16
    points_per_width: int = 8
    min_steps: int = 200

    @property
    def precision(self) -> PrecisionContext:
        """The decimal precision derived from :attr:`threshold`."""
        return PrecisionContext.from_tolerance(self.threshold)


@dataclass
class SubshellResult(_DataConfig):
    """Dataclass with the analysis of a single angular momentum of a shell."""

    letter: str
    contracted: ContractedSet
    contributions: ContributionReport
    normalization: None | NormalizationResult = None


@dataclass
class BlockResult(_DataConfig):
    """Dataclass with the analysis of a (possibly combined) shell."""

    shell_type: str
    header: str
    subshells: list[SubshellResult]


@dataclass
class AtomResult(_DataConfig):
    """Dataclass with the analysis of all the shells of an atom."""

    label: str
    blocks: list[BlockResult]
    joined: ContributionReport
