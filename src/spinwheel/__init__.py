"""Weighted-probability spin wheel."""

__version__ = "0.1.0"
