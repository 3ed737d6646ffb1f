"""Domain layer - pricing rules and cabinet entities."""

from .entities import Cabinet, CabinetAccessory, CabinetMaterial, Project
from .services import (
    CabinetCostComposer,
    HingeCalculator,
    accessory_cost,
    area_of,
    cabinet_piece_costs,
    clone_cabinet,
    hinge_cost,
    normalize_cabinet,
    normalize_cabinets,
    normalize_project,
    piece_cost,
    project_accessory_total,
    project_material_total,
    project_total,
)
from .value_objects import (
    AccessoryItem,
    CabinetCost,
    Dimensions,
    HingeEstimate,
    MaterialItem,
    PieceConfig,
    PriceBreakdown,
    PricingSettings,
    ReferenceKind,
    UnresolvedReference,
)

__all__ = [
    "AccessoryItem",
    "Cabinet",
    "CabinetAccessory",
    "CabinetCost",
    "CabinetCostComposer",
    "CabinetMaterial",
    "Dimensions",
    "HingeCalculator",
    "HingeEstimate",
    "MaterialItem",
    "PieceConfig",
    "PriceBreakdown",
    "PricingSettings",
    "Project",
    "ReferenceKind",
    "UnresolvedReference",
    "accessory_cost",
    "area_of",
    "cabinet_piece_costs",
    "clone_cabinet",
    "hinge_cost",
    "normalize_cabinet",
    "normalize_cabinets",
    "normalize_project",
    "piece_cost",
    "project_accessory_total",
    "project_material_total",
    "project_total",
]
