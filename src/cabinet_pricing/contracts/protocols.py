"""Service protocols for dependency injection.

The pricing core never reads a store directly. Application commands depend on
the narrow read interface below, and the infrastructure store implements it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from cabinet_pricing.domain.value_objects import PricingSettings
    from cabinet_pricing.infrastructure.storage import StorageKey


@runtime_checkable
class CatalogReaderProtocol(Protocol):
    """Read-only view of the catalog and settings store.

    Example:
        ```python
        class InMemoryCatalog:
            def get_all(self, key):
                return self.records.get(key, [])

            def get_settings(self):
                return PricingSettings()
        ```
    """

    def get_all(self, key: "StorageKey") -> list[dict[str, Any]]:
        """Return every record of a collection, or an empty list."""
        ...

    def get_settings(self) -> "PricingSettings":
        """Return the current pricing settings."""
        ...
