"""Infrastructure layer: catalog store and quote output."""

from .formatters import (
    CabinetQuoteFormatter,
    JsonQuoteExporter,
    ProjectQuoteFormatter,
    format_currency,
)
from .storage import (
    InMemoryStore,
    JsonFileStore,
    KeyValueStore,
    StorageError,
    StorageKey,
)

__all__ = [
    "CabinetQuoteFormatter",
    "InMemoryStore",
    "JsonFileStore",
    "JsonQuoteExporter",
    "KeyValueStore",
    "ProjectQuoteFormatter",
    "StorageError",
    "StorageKey",
    "format_currency",
]
