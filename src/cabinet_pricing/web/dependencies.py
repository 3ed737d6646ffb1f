"""FastAPI dependency injection for pricing services."""

import os
from functools import lru_cache
from pathlib import Path
from typing import Annotated

from fastapi import Depends

from cabinet_pricing.application.commands import CatalogQuoteService
from cabinet_pricing.application.factory import ServiceFactory, get_factory
from cabinet_pricing.infrastructure.storage import InMemoryStore, JsonFileStore, KeyValueStore

# Path of a JSON store file; an empty in-memory store is used when unset
STORE_ENV_VAR = "CABINET_PRICING_STORE"


@lru_cache(maxsize=1)
def get_store() -> KeyValueStore:
    """Get the cached catalog store."""
    path = os.environ.get(STORE_ENV_VAR)
    if path:
        return JsonFileStore(Path(path))
    return InMemoryStore()


@lru_cache(maxsize=1)
def get_service_factory() -> ServiceFactory:
    """Get cached ServiceFactory instance."""
    return get_factory()


def get_catalog_service(
    factory: Annotated[ServiceFactory, Depends(get_service_factory)],
    store: Annotated[KeyValueStore, Depends(get_store)],
) -> CatalogQuoteService:
    """Dependency for CatalogQuoteService."""
    return factory.create_catalog_service(store)


# Type aliases for cleaner endpoint signatures
ServiceFactoryDep = Annotated[ServiceFactory, Depends(get_service_factory)]
CatalogServiceDep = Annotated[CatalogQuoteService, Depends(get_catalog_service)]
