"""Furniture cabinet configuration and quoting."""

__version__ = "0.1.0"
