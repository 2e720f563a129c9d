"""Tariff Search: fuzzy search over indexed documents with PDF downloads."""

__version__ = "1.0.0"
