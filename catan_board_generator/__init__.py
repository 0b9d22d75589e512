"""Randomized Catan-style board layouts under soft placement constraints."""

__version__ = "0.1.0"
