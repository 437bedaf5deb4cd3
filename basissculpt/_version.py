"""The BasisSculpt version."""

__version__ = "2025.4.1"
