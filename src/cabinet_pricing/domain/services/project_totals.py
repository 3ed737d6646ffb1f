"""Project-level totals.

Aggregates material and accessory costs across the cabinets of a project and
applies labor, transport, markup and VAT percentages.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from ..value_objects import PriceBreakdown
from .accessory_cost import accessory_cost
from .material_cost import cabinet_piece_costs

if TYPE_CHECKING:
    from ..entities import Cabinet
    from ..value_objects import PricingSettings

__all__ = [
    "cabinet_accessory_cost",
    "cabinet_material_cost",
    "project_accessory_total",
    "project_material_total",
    "project_total",
]


def cabinet_material_cost(cabinet: "Cabinet") -> float:
    """Material cost of one cabinet as counted in project totals.

    A precomputed ``material_cost`` wins; otherwise the cabinet's pieces are
    priced; otherwise 0.
    """
    if cabinet.material_cost is not None:
        return cabinet.material_cost
    if cabinet.pieces:
        return cabinet_piece_costs(cabinet.pieces)
    return 0


def cabinet_accessory_cost(cabinet: "Cabinet") -> float:
    """Accessory cost of one cabinet as counted in project totals."""
    if cabinet.accessory_cost is not None:
        return cabinet.accessory_cost
    if cabinet.accessories:
        return accessory_cost(cabinet.accessories)
    return 0


def project_material_total(cabinets: "Iterable[Cabinet] | None") -> float:
    """Sum of the material cost of every cabinet."""
    if not cabinets:
        return 0
    return sum((cabinet_material_cost(c) for c in cabinets), 0)


def project_accessory_total(cabinets: "Iterable[Cabinet] | None") -> float:
    """Sum of the accessory cost of every cabinet."""
    if not cabinets:
        return 0
    return sum((cabinet_accessory_cost(c) for c in cabinets), 0)


def project_total(
    material_cost: float,
    accessory_cost: float,
    settings: "PricingSettings",
    include_tva: bool = True,
) -> PriceBreakdown:
    """Apply labor, transport, markup and VAT to a material + accessory base.

    Labor (manopera), transport and markup (adaos) are each a percentage of
    the same base and do not compound on each other. VAT (tva) applies to the
    subtotal.

    Args:
        material_cost: Raw material cost.
        accessory_cost: Raw accessory cost.
        settings: Percentages as whole numbers (19 means 19%).
        include_tva: Whether to add VAT.

    Returns:
        PriceBreakdown with every intermediate figure.

    Example:
        >>> from cabinet_pricing.domain.value_objects import PricingSettings
        >>> project_total(1000, 0, PricingSettings()).subtotal
        1300.0
    """
    base = material_cost + accessory_cost

    manopera_cost = base * (settings.manopera / 100)
    transport_cost = base * (settings.transport / 100)
    adaos_cost = base * (settings.adaos / 100)

    subtotal = base + manopera_cost + transport_cost + adaos_cost
    tva_cost = subtotal * (settings.tva / 100) if include_tva else 0
    total = subtotal + tva_cost

    return PriceBreakdown(
        material_cost=material_cost,
        accessory_cost=accessory_cost,
        manopera_cost=manopera_cost,
        transport_cost=transport_cost,
        adaos_cost=adaos_cost,
        tva_cost=tva_cost,
        subtotal=subtotal,
        total=total,
    )
