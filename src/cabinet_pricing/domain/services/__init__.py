"""Domain services for cabinet pricing.

This package provides:
- Area conversion and material piece pricing
- Hinge and accessory costs
- Single-cabinet cost composition
- Project totals with labor, transport, markup and VAT
- Cabinet normalization
"""

from .accessory_cost import accessory_cost
from .cabinet_cost import CabinetCostComposer, box_material_cost
from .geometry import area_of
from .hardware_calculator import HingeCalculator, hinge_cost
from .material_cost import cabinet_piece_costs, piece_cost
from .normalizer import (
    clone_cabinet,
    generate_id,
    normalize_cabinet,
    normalize_cabinets,
    normalize_project,
)
from .project_totals import (
    cabinet_accessory_cost,
    cabinet_material_cost,
    project_accessory_total,
    project_material_total,
    project_total,
)

__all__ = [
    "CabinetCostComposer",
    "HingeCalculator",
    "accessory_cost",
    "area_of",
    "box_material_cost",
    "cabinet_accessory_cost",
    "cabinet_material_cost",
    "cabinet_piece_costs",
    "clone_cabinet",
    "generate_id",
    "hinge_cost",
    "normalize_cabinet",
    "normalize_cabinets",
    "normalize_project",
    "piece_cost",
    "project_accessory_total",
    "project_material_total",
    "project_total",
]
