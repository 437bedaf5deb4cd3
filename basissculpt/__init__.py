"""BasisSculpt is a python library for analyzing the norm of contracted Gaussian basis \
functions, ranking the contribution of their primitives and renormalizing them, \
including contractions with negative coefficients."""

from ._version import __version__ as __version__
from ._version_info import version_info as version_info
from ._logger import logger as logger

from .precision import PrecisionContext

from .basis import ContractedSet, Primitive, QuadratureDomain, suggest_domain

from .analysis import ContributionReport, NormContributionAnalyzer, PrimitiveContribution

from .normalization import NormalizationResult, Normalizer, Strategy, golden_section_search

from .parsers import parse_basis, parse_basis_file

from .workflows import workflow_sculpt

__all__ = [
    'ContractedSet', 'ContributionReport', 'NormContributionAnalyzer',
    'NormalizationResult', 'Normalizer', 'PrecisionContext', 'Primitive',
    'PrimitiveContribution', 'QuadratureDomain', 'Strategy',
    'golden_section_search', 'parse_basis', 'parse_basis_file',
    'suggest_domain', 'workflow_sculpt']
