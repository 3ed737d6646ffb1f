"""Cabinet cost composition.

Combines material, accessory and hinge costs into a single cabinet total.
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

from ..value_objects import CabinetCost, ReferenceKind, UnresolvedReference
from .accessory_cost import accessory_cost
from .constants import DEFAULT_HINGE_PRICE
from .hardware_calculator import HingeCalculator
from .material_cost import piece_cost

if TYPE_CHECKING:
    from ..entities import Cabinet
    from ..value_objects import MaterialItem

__all__ = ["CabinetCostComposer", "box_material_cost"]

logger = logging.getLogger(__name__)


def box_material_cost(
    material: "MaterialItem | None",
    width: float,
    height: float,
    depth: float,
) -> float:
    """Six-panel box estimate with a single material.

    Bottom and top are width x depth, the two sides depth x height and the
    back width x height. There is no front panel.
    """
    if material is None:
        return 0
    cost: float = 0
    cost += piece_cost(material, (width, depth), 1)  # bottom
    cost += piece_cost(material, (width, depth), 1)  # top
    cost += piece_cost(material, (depth, height), 2)  # sides
    cost += piece_cost(material, (width, height), 1)  # back
    return cost


class CabinetCostComposer:
    """Prices a single cabinet against a material catalog.

    When the cabinet lists its materials explicitly, every listed material is
    priced over a generic width x depth panel times its quantity. When it
    lists none, a six-panel box of the selected material is priced instead.
    Accessories and hinges are added in both cases.

    Example:
        ```python
        composer = CabinetCostComposer()
        cost = composer.compose(cabinet, catalog_materials)
        print(cost.total)
        ```
    """

    def __init__(self, hinge_calculator: HingeCalculator | None = None) -> None:
        self.hinge_calculator = hinge_calculator or HingeCalculator()

    @classmethod
    def with_hinge_price(cls, hinge_price: float = DEFAULT_HINGE_PRICE) -> "CabinetCostComposer":
        return cls(HingeCalculator(unit_price=hinge_price))

    def compose(
        self,
        cabinet: "Cabinet",
        materials_catalog: "Iterable[MaterialItem]",
        selected_material_id: str | None = None,
    ) -> CabinetCost:
        """Compute the cost of ``cabinet``.

        Args:
            cabinet: A normalized cabinet.
            materials_catalog: Catalog materials to resolve ids against.
            selected_material_id: Material used for the six-panel estimate when
                the cabinet lists no materials. Defaults to the first catalog
                material.

        Returns:
            CabinetCost whose ``total`` is the cabinet's ``total_cost``.
        """
        catalog = {m.id: m for m in materials_catalog}
        unresolved: list[UnresolvedReference] = []

        if cabinet.materials:
            material_cost = self._listed_material_cost(cabinet, catalog, unresolved)
        else:
            material_cost = self._fallback_material_cost(
                cabinet, list(catalog.values()), selected_material_id, unresolved
            )

        accessories_cost = accessory_cost(cabinet.accessories)
        hinges = self.hinge_calculator.calculate(cabinet.dimensions.width)

        result = CabinetCost(
            material_cost=material_cost,
            accessory_cost=accessories_cost,
            hinges=hinges,
            unresolved=tuple(unresolved),
        )
        logger.debug(
            f"Cabinet {cabinet.id}: materials={material_cost:.2f} "
            f"accessories={accessories_cost:.2f} hinges={hinges.quantity}x "
            f"total={result.total:.2f}"
        )
        return result

    def price_cabinet(
        self,
        cabinet: "Cabinet",
        materials_catalog: "Iterable[MaterialItem]",
        selected_material_id: str | None = None,
    ) -> "tuple[Cabinet, CabinetCost]":
        """Return a copy of ``cabinet`` with ``total_cost`` recomputed.

        The operator-set ``price`` is left untouched.
        """
        cost = self.compose(cabinet, materials_catalog, selected_material_id)
        priced = copy.deepcopy(cabinet)
        priced.total_cost = cost.total
        return priced, cost

    def _listed_material_cost(
        self,
        cabinet: "Cabinet",
        catalog: "dict[str, MaterialItem]",
        unresolved: list[UnresolvedReference],
    ) -> float:
        total: float = 0
        for line in cabinet.materials:
            material = catalog.get(line.id)
            if material is None:
                logger.warning(
                    f"Material '{line.id}' of cabinet {cabinet.id} not found in catalog"
                )
                unresolved.append(
                    UnresolvedReference(kind=ReferenceKind.MATERIAL, id=line.id, name=line.name)
                )
                continue
            total += piece_cost(material, (cabinet.width, cabinet.depth), line.quantity)
        return total

    def _fallback_material_cost(
        self,
        cabinet: "Cabinet",
        catalog: "list[MaterialItem]",
        selected_material_id: str | None,
        unresolved: list[UnresolvedReference],
    ) -> float:
        if selected_material_id is None:
            material = catalog[0] if catalog else None
        else:
            material = next((m for m in catalog if m.id == selected_material_id), None)
            if material is None:
                logger.warning(f"Selected material '{selected_material_id}' not found in catalog")
                unresolved.append(
                    UnresolvedReference(kind=ReferenceKind.MATERIAL, id=selected_material_id)
                )
        return box_material_cost(material, cabinet.width, cabinet.height, cabinet.depth)
