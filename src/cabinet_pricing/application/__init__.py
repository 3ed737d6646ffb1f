"""Application layer - use cases and orchestration."""

from .commands import (
    CatalogQuoteService,
    ProjectNotFoundError,
    QuoteCabinetCommand,
    QuoteProjectCommand,
)
from .dtos import CabinetLine, CabinetQuote, ProjectQuote

__all__ = [
    "CabinetLine",
    "CabinetQuote",
    "CatalogQuoteService",
    "ProjectNotFoundError",
    "ProjectQuote",
    "QuoteCabinetCommand",
    "QuoteProjectCommand",
]
