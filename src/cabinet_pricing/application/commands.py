"""Application commands (use cases) for cabinet and project quoting."""

from __future__ import annotations

import copy
import logging
from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any

from cabinet_pricing.domain import (
    AccessoryItem,
    Cabinet,
    CabinetCostComposer,
    MaterialItem,
    PricingSettings,
    Project,
    normalize_cabinet,
    normalize_cabinets,
    normalize_project,
    project_total,
)
from cabinet_pricing.domain.services import (
    cabinet_accessory_cost,
    cabinet_material_cost,
)
from cabinet_pricing.infrastructure.storage import StorageKey

from .dtos import CabinetLine, CabinetQuote, ProjectQuote

if TYPE_CHECKING:
    from cabinet_pricing.contracts import CatalogReaderProtocol

logger = logging.getLogger(__name__)


class ProjectNotFoundError(Exception):
    """Raised when a project id is not present in the store."""

    def __init__(self, project_id: str) -> None:
        self.project_id = project_id
        super().__init__(f"Project not found: {project_id}")


class QuoteCabinetCommand:
    """Command to price a single cabinet.

    The cabinet is normalized first, priced by the cost composer, and the
    pricing settings are applied on top of its material and
    accessory-plus-hinge costs.
    """

    def __init__(self, composer: CabinetCostComposer | None = None) -> None:
        self.composer = composer or CabinetCostComposer()

    def execute(
        self,
        cabinet: "Mapping[str, Any] | Cabinet | None",
        materials: Iterable[MaterialItem],
        settings: PricingSettings | None = None,
        selected_material_id: str | None = None,
        include_tva: bool = True,
    ) -> CabinetQuote:
        """Execute the cabinet quote.

        Args:
            cabinet: Raw cabinet record, Cabinet or None for a default cabinet.
            materials: Material catalog snapshot.
            settings: Pricing settings; defaults apply when None.
            selected_material_id: Material for the six-panel estimate of a
                cabinet without explicit materials.
            include_tva: Whether to add VAT.

        Returns:
            CabinetQuote with the priced cabinet and its breakdown.
        """
        settings = settings or PricingSettings()
        catalog = list(materials)
        normalized = normalize_cabinet(cabinet, catalog)
        priced, cost = self.composer.price_cabinet(normalized, catalog, selected_material_id)
        breakdown = project_total(
            cost.material_cost,
            cost.accessory_cost + cost.hinges.cost,
            settings,
            include_tva,
        )
        if cost.has_unresolved:
            logger.warning(
                f"Cabinet {priced.id} has {len(cost.unresolved)} unresolved catalog reference(s)"
            )
        return CabinetQuote(
            cabinet=priced,
            cost=cost,
            breakdown=breakdown,
            settings=settings,
            include_tva=include_tva,
        )


class QuoteProjectCommand:
    """Command to compute the totals of a project.

    Material and accessory totals are aggregated over the cabinets (preferring
    precomputed per-cabinet costs), then labor, transport, markup and VAT are
    applied. The stored project total is never trusted; the returned project
    carries the re-derived total.
    """

    def execute(
        self,
        project: "Mapping[str, Any] | Project",
        settings: PricingSettings | None = None,
        include_tva: bool = True,
    ) -> ProjectQuote:
        settings = settings or PricingSettings()
        normalized = normalize_project(project)

        lines = [
            CabinetLine(
                cabinet_id=cabinet.id,
                name=cabinet.name,
                material_cost=cabinet_material_cost(cabinet),
                accessory_cost=cabinet_accessory_cost(cabinet),
            )
            for cabinet in normalized.cabinets
        ]
        material_total = sum((line.material_cost for line in lines), 0)
        accessory_total = sum((line.accessory_cost for line in lines), 0)
        breakdown = project_total(material_total, accessory_total, settings, include_tva)

        quoted = copy.deepcopy(normalized)
        quoted.total = breakdown.total
        logger.debug(
            f"Project {quoted.id}: {len(lines)} cabinet(s), "
            f"base={breakdown.base_cost:.2f} total={breakdown.total:.2f}"
        )
        return ProjectQuote(
            project=quoted,
            lines=lines,
            breakdown=breakdown,
            settings=settings,
            include_tva=include_tva,
        )


class CatalogQuoteService:
    """Quotes against a catalog store through its narrow read interface.

    Example:
        ```python
        service = CatalogQuoteService(JsonFileStore(Path("store.json")))
        quote = service.quote_project("proj_1")
        print(quote.breakdown.total)
        ```
    """

    def __init__(
        self,
        reader: "CatalogReaderProtocol",
        cabinet_command: QuoteCabinetCommand | None = None,
        project_command: QuoteProjectCommand | None = None,
    ) -> None:
        self.reader = reader
        self.cabinet_command = cabinet_command or QuoteCabinetCommand()
        self.project_command = project_command or QuoteProjectCommand()

    def materials(self) -> list[MaterialItem]:
        return [MaterialItem.from_dict(m) for m in self.reader.get_all(StorageKey.MATERIALS)]

    def accessories(self) -> list[AccessoryItem]:
        return [AccessoryItem.from_dict(a) for a in self.reader.get_all(StorageKey.ACCESSORIES)]

    def cabinets(self) -> list[Cabinet]:
        """Every stored cabinet, normalized."""
        return normalize_cabinets(self.reader.get_all(StorageKey.CABINETS), self.materials())

    def presets(self) -> list[Cabinet]:
        return [c for c in self.cabinets() if c.is_preset]

    def get_project(self, project_id: str) -> Project:
        for record in self.reader.get_all(StorageKey.PROJECTS):
            if record.get("id") == project_id:
                return normalize_project(record, self.materials())
        raise ProjectNotFoundError(project_id)

    def quote_cabinet(
        self,
        cabinet: "Mapping[str, Any] | Cabinet | None",
        selected_material_id: str | None = None,
        include_tva: bool = True,
    ) -> CabinetQuote:
        return self.cabinet_command.execute(
            cabinet,
            self.materials(),
            self.reader.get_settings(),
            selected_material_id=selected_material_id,
            include_tva=include_tva,
        )

    def quote_project(self, project_id: str, include_tva: bool = True) -> ProjectQuote:
        """Quote a stored project.

        Raises:
            ProjectNotFoundError: If no project has the given id.
        """
        project = self.get_project(project_id)
        return self.project_command.execute(project, self.reader.get_settings(), include_tva)
