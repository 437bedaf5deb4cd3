"""Norm analysis of contracted basis functions."""

from .contributions import ContributionReport, NormContributionAnalyzer, PrimitiveContribution

__all__ = ["ContributionReport", "NormContributionAnalyzer", "PrimitiveContribution"]
