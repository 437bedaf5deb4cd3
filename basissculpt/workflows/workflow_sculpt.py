"""Workflow analyzing and renormalizing every shell of a GBS basis set.

Index
-----
.. currentmodule:: basissculpt.workflows.workflow_sculpt
.. autosummary::
    workflow_sculpt

API
---
.. autofunction:: workflow_sculpt

"""

from __future__ import annotations

import os
import sys
import functools
import contextlib
from typing import Callable, Iterable, TYPE_CHECKING

import yaml

from .._data import AtomResult, BlockResult, SubshellResult
from .._logger import EnableFileHandler, EnableReportHandler, logger, report_logger
from ..analysis import ContributionReport, NormContributionAnalyzer
from ..basis import ContractedSet, QuadratureDomain, suggest_domain
from ..common import PathLike
from ..messages import get_msg
from ..normalization import NormalizationResult, Normalizer, Strategy
from ..parsers import AtomSection, expand_block, fortran_number, parse_basis_file
from .basis_printer import BasisPrinter, format_d

if TYPE_CHECKING:
    from .._data import SculptSettings
    from ..precision import PrecisionContext

__all__ = ['workflow_sculpt']

_DomainFunc = Callable[[ContractedSet], QuadratureDomain]


def workflow_sculpt(settings: SculptSettings) -> list[AtomResult]:
    """Analyze (and optionally renormalize) all the shells of ``settings.input``.

    The diagnostics are logged, the per-primitive table written to the
    report and, if ``settings.normalize`` is set, the renormalized basis set
    written to ``settings.output`` (stdout if ``None``).

    Parameters
    ----------
    settings
        Input to run the workflow.

    Returns
    -------
    list[AtomResult]
        The analysis of every atom in the file.

    """
    with contextlib.ExitStack() as stack:
        if settings.log is not None:
            stack.enter_context(_open_handler(EnableFileHandler, settings.log, "ERROR_LOG_FILE"))
        if settings.report is not None:
            stack.enter_context(_open_handler(EnableReportHandler, settings.report, "ERROR_REPORT_FILE"))
        return _Sculptor(settings).run()


def _open_handler(
    cls: type[EnableFileHandler], path: PathLike, error_key: str,
) -> EnableFileHandler:
    """Construct a file handler context manager, logging the path if it cannot be opened."""
    try:
        return cls(path)
    except OSError:
        logger.error(get_msg(error_key, os.fsdecode(path)))
        raise


def _log_and_report(msg: str) -> None:
    logger.info(msg)
    report_logger.info(msg)


class _Sculptor:
    """Run the analysis of a single basis set file."""

    def __init__(self, settings: SculptSettings) -> None:
        self.settings = settings
        self.precision: PrecisionContext = settings.precision
        self.domain_for: _DomainFunc = functools.partial(
            suggest_domain,
            tail_tolerance=settings.tail_tolerance,
            points_per_width=settings.points_per_width,
            min_steps=settings.min_steps,
        )
        self.normalizer = Normalizer()
        self.printer = BasisPrinter(settings.output_gbs_format, settings.output_threshold)

    def run(self) -> list[AtomResult]:
        settings = self.settings
        if settings.verbose:
            logger.info(f"Settings:\n{yaml.safe_dump(settings.asdict(), sort_keys=False)}")
        if settings.version_tag:
            _log_and_report(get_msg("INFO_VERSION_TAG", settings.version_tag))
        if settings.fixed_basis_name:
            _log_and_report(get_msg("INFO_FIXED_BASIS_NAME", settings.fixed_basis_name))
        logger.info(get_msg("INFO_MATH_CONTEXT_PRECISION", self.precision.digits))

        atoms = parse_basis_file(settings.input)
        self.printer.add_title(settings.fixed_basis_name, settings.version_tag)
        results = [self.sculpt_atom(atom) for atom in atoms]

        if settings.normalize:
            self.write_output()
        return results

    def write_output(self) -> None:
        if self.settings.output is None:
            self.printer.write(sys.stdout)
            return
        try:
            f = open(self.settings.output, "w")
        except OSError:
            logger.error(get_msg("ERROR_OUTPUT_FILE", os.fsdecode(self.settings.output)))
            raise
        with f:
            self.printer.write(f)
        logger.info(f"Basis set written to {self.settings.output}")

    def contracted(self, pairs: Iterable[tuple[str, str]]) -> ContractedSet:
        converted = ((fortran_number(alpha), fortran_number(c)) for alpha, c in pairs)
        return ContractedSet.from_pairs(converted, self.precision)

    def sculpt_atom(self, atom: AtomSection) -> AtomResult:
        if self.settings.verbose and not atom.dashed:
            logger.warning(get_msg("WARN_NON_GBS_INPUT"))
            logger.warning(f"Line {atom.line_number}> {atom.label}")

        _log_and_report(get_msg("INFO_SEPARATOR"))
        _log_and_report(get_msg("INFO_ATOM", atom.label))
        _log_and_report(get_msg("INFO_SEPARATOR"))
        self.printer.add_atom(atom.label)

        joined_pairs: list[tuple[str, str]] = []
        blocks = []
        for block in atom.blocks:
            _log_and_report(get_msg("INFO_SHELL", block.shell_type))
            logger.info(get_msg("INFO_SHELL_HEADER", block.header))
            self.printer.add_shell(block.shell_type, block.header)

            expanded = expand_block(block)
            subshells = []
            for letter, pairs in expanded.items():
                if len(expanded) > 1:
                    logger.info(get_msg("INFO_SUBSHELL", letter))
                for alpha, c in pairs:
                    logger.info(f"      {alpha} {c}")
                joined_pairs += pairs
                subshells.append(self.sculpt_subshell(letter, self.contracted(pairs)))

            if self.settings.normalize:
                self.printer.add_rows([
                    s.contracted if s.normalization is None else s.normalization.contracted
                    for s in subshells
                ])
            blocks.append(BlockResult(
                shell_type=block.shell_type, header=block.header, subshells=subshells,
            ))

        logger.info(get_msg("INFO_JOINED_ANALYSIS", atom.label))
        joined = self.analyze(self.contracted(joined_pairs))
        logger.info(get_msg("INFO_SEPARATOR"))
        self.printer.end_atom()
        return AtomResult(label=atom.label, blocks=blocks, joined=joined)

    def sculpt_subshell(self, letter: str, contracted: ContractedSet) -> SubshellResult:
        contributions = self.analyze(contracted)
        normalization = None
        if self.settings.normalize and len(contracted):
            normalization = self.normalize(contracted)
        return SubshellResult(
            letter=letter,
            contracted=contracted,
            contributions=contributions,
            normalization=normalization,
        )

    def analyze(self, contracted: ContractedSet) -> ContributionReport:
        """Run the leave-one-out analysis of ``contracted`` and log its outcome."""
        report = NormContributionAnalyzer(contracted, self.domain_for).all_partial_norms()
        if not report.reducible:
            logger.info(get_msg("INFO_NO_REDUCTION_POSSIBLE"))
            return report

        _log_and_report(get_msg("INFO_FULL_NORM", report.full_norm))
        report_logger.info(get_msg("INFO_REMOVE_HEADER_REPORT"))
        for record in report.records:
            args = (
                record.index, record.alpha, record.partial_norm,
                record.loss_percent, record.contribution_percent,
            )
            logger.debug(get_msg("INFO_PARTIAL_NORM", record.index, record.partial_norm))
            logger.info(get_msg("INFO_REMOVE_ENTRY", *args))
            report_logger.info(get_msg("INFO_REMOVE_ENTRY_REPORT", *args))
        return report

    def normalize(self, contracted: ContractedSet) -> NormalizationResult:
        """Normalize ``contracted`` and log the resulting primitives."""
        logger.info(get_msg("INFO_NORMALIZATION_SEPARATOR"))
        result = self.normalizer.normalize(contracted, self.domain_for(contracted))
        for msg in result.warnings:
            logger.warning(msg)
        if result.strategy is Strategy.GOLDEN_SECTION:
            logger.info(get_msg("INFO_OPTIMIZED_S2", result.s2, result.residual))
        logger.info(get_msg("INFO_FULL_NORMALIZED_NORM", result.norm))

        for p in result.contracted:
            line = f"      {format_d(p.alpha)}          {format_d(p.coefficient)}"
            if p.coefficient >= 0:
                line = line.replace("          ", "           ")
            logger.info(line)

        if self.settings.verbose:
            logger.info(get_msg("INFO_VERBOSE_NORMALIZATION"))
            for p in result.contracted:
                logger.info(f"Alfa: {p.alpha}")
                logger.info(f"C: {p.coefficient}")

        logger.info(get_msg("INFO_NORMALIZATION_SEPARATOR"))
        return result
