"""Service factory for dependency injection."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from cabinet_pricing.domain.services import CabinetCostComposer
from cabinet_pricing.domain.services.constants import DEFAULT_HINGE_PRICE

if TYPE_CHECKING:
    from cabinet_pricing.application.commands import (
        CatalogQuoteService,
        QuoteCabinetCommand,
        QuoteProjectCommand,
    )
    from cabinet_pricing.contracts import CatalogReaderProtocol


@dataclass
class ServiceFactory:
    """Factory for creating service instances.

    Centralizes service instantiation so tests and the API can swap the
    hinge price or the store without touching the commands.

    Attributes:
        hinge_price: Unit price of a hinge used by the cost composer.
    """

    hinge_price: float = DEFAULT_HINGE_PRICE
    _composer: CabinetCostComposer | None = field(default=None, init=False, repr=False)

    def get_cost_composer(self) -> CabinetCostComposer:
        """Get or create the cabinet cost composer."""
        if self._composer is None:
            self._composer = CabinetCostComposer.with_hinge_price(self.hinge_price)
        return self._composer

    def create_cabinet_command(self) -> "QuoteCabinetCommand":
        from cabinet_pricing.application.commands import QuoteCabinetCommand

        return QuoteCabinetCommand(composer=self.get_cost_composer())

    def create_project_command(self) -> "QuoteProjectCommand":
        from cabinet_pricing.application.commands import QuoteProjectCommand

        return QuoteProjectCommand()

    def create_catalog_service(self, reader: "CatalogReaderProtocol") -> "CatalogQuoteService":
        from cabinet_pricing.application.commands import CatalogQuoteService

        return CatalogQuoteService(
            reader,
            cabinet_command=self.create_cabinet_command(),
            project_command=self.create_project_command(),
        )


_default_factory: ServiceFactory | None = None


def get_factory() -> ServiceFactory:
    """Get the default service factory."""
    global _default_factory
    if _default_factory is None:
        _default_factory = ServiceFactory()
    return _default_factory


def set_factory(factory: ServiceFactory | None) -> None:
    """Set a custom factory (for testing)."""
    global _default_factory
    _default_factory = factory


def reset_factory() -> None:
    """Reset the factory to default (for testing cleanup)."""
    global _default_factory
    _default_factory = None
