"""Histogram viewing, masking and conversion of entropy sample data."""

__version__ = "0.1.0"