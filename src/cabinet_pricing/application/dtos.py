"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from cabinet_pricing.domain import (
    Cabinet,
    CabinetCost,
    PriceBreakdown,
    PricingSettings,
    Project,
    UnresolvedReference,
)


def _reference_warning(ref: UnresolvedReference) -> str:
    label = f"{ref.id} ({ref.name})" if ref.name else ref.id
    return f"Unknown {ref.kind.value} '{label}' priced at 0"


@dataclass
class CabinetQuote:
    """Output DTO for a single-cabinet quote.

    Attributes:
        cabinet: Normalized cabinet with ``total_cost`` recomputed.
        cost: Material, accessory and hinge costs.
        breakdown: Labor, transport, markup and VAT applied to the cabinet.
            Hinges count with the accessories.
        settings: Settings the breakdown was computed with.
    """

    cabinet: Cabinet
    cost: CabinetCost
    breakdown: PriceBreakdown
    settings: PricingSettings
    include_tva: bool = True

    @property
    def warnings(self) -> list[str]:
        return [_reference_warning(ref) for ref in self.cost.unresolved]

    def to_dict(self) -> dict[str, Any]:
        return {
            "cabinet": self.cabinet.to_dict(),
            "materialCost": self.cost.material_cost,
            "accessoryCost": self.cost.accessory_cost,
            "hinges": {
                "quantity": self.cost.hinges.quantity,
                "cost": self.cost.hinges.cost,
            },
            "totalCost": self.cost.total,
            "breakdown": self.breakdown.to_dict(),
            "currency": self.settings.currency,
            "includeTva": self.include_tva,
            "warnings": self.warnings,
        }


@dataclass
class CabinetLine:
    """One cabinet's contribution to a project total."""

    cabinet_id: str
    name: str
    material_cost: float
    accessory_cost: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.cabinet_id,
            "name": self.name,
            "materialCost": self.material_cost,
            "accessoryCost": self.accessory_cost,
        }


@dataclass
class ProjectQuote:
    """Output DTO for a project quote.

    Attributes:
        project: The project with ``total`` re-derived from its cabinets.
        lines: Per-cabinet material and accessory costs.
        breakdown: Project totals with labor, transport, markup and VAT.
        settings: Settings the breakdown was computed with.
        include_tva: Whether VAT was applied.
    """

    project: Project
    lines: list[CabinetLine]
    breakdown: PriceBreakdown
    settings: PricingSettings
    include_tva: bool = True

    @property
    def material_total(self) -> float:
        return self.breakdown.material_cost

    @property
    def accessory_total(self) -> float:
        return self.breakdown.accessory_cost

    def to_dict(self) -> dict[str, Any]:
        return {
            "project": {
                "id": self.project.id,
                "name": self.project.name,
                "client": self.project.client,
                "date": self.project.date,
                "status": self.project.status,
                "total": self.project.total,
            },
            "cabinets": [line.to_dict() for line in self.lines],
            "breakdown": self.breakdown.to_dict(),
            "currency": self.settings.currency,
            "includeTva": self.include_tva,
        }
