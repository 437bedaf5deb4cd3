"""Renormalization of contracted basis functions."""

from .golden_section import GoldenSectionResult, golden_section_search
from .normalizer import NormalizationResult, Normalizer, Strategy

__all__ = [
    "GoldenSectionResult", "NormalizationResult", "Normalizer", "Strategy",
    "golden_section_search",
]
