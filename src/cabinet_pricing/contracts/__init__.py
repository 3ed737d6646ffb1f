"""Contracts module - protocols for cross-layer communication."""

from .protocols import CatalogReaderProtocol as CatalogReaderProtocol

__all__ = ["CatalogReaderProtocol"]
