"""Domain entities for cabinet quoting."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any

from .value_objects import Dimensions, PieceConfig


@dataclass
class CabinetMaterial:
    """A material line of a cabinet, referencing the catalog by id."""

    id: str
    name: str = ""
    quantity: float = 1

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "name": self.name, "quantity": self.quantity}


@dataclass
class CabinetAccessory:
    """An accessory chosen for a cabinet, with its own quantity and unit price."""

    id: str
    name: str = ""
    quantity: float = 1
    price: float = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "quantity": self.quantity,
            "price": self.price,
        }


@dataclass
class Cabinet:
    """A single furniture unit being configured and priced.

    Geometry is stored once in ``dimensions``. The top-level ``width``,
    ``height`` and ``depth`` are views over it, so both access patterns always
    agree; serialized records carry both shapes.

    Attributes:
        id: Identifier, stable for the cabinet's lifetime.
        name: Display name.
        category: Taxonomy category id.
        subcategory: Taxonomy subcategory id.
        dimensions: Width, height and depth in millimetres.
        materials: Material lines resolved against the catalog when priced.
        accessories: Chosen accessories with quantity and unit price.
        pieces: Flattened panel list from legacy or preset data.
        price: Operator-set sale price. Independent of ``total_cost``.
        total_cost: Computed material + accessory + hinge cost.
        material_cost: Precomputed material cost, if a caller stored one.
        accessory_cost: Precomputed accessory cost, if a caller stored one.
        image: Optional image reference.
        is_preset: Whether this record is a catalog preset.
        extra: Unknown keys of the source record, written back unchanged.
    """

    id: str
    name: str = "Unnamed Cabinet"
    category: str = ""
    subcategory: str = ""
    dimensions: Dimensions = field(default_factory=lambda: Dimensions(0, 0, 0))
    materials: list[CabinetMaterial] = field(default_factory=list)
    accessories: list[CabinetAccessory] = field(default_factory=list)
    pieces: list[PieceConfig] = field(default_factory=list)
    price: float = 0
    total_cost: float = 0
    material_cost: float | None = None
    accessory_cost: float | None = None
    image: str | None = None
    is_preset: bool = False
    extra: dict[str, Any] = field(default_factory=dict)

    @property
    def width(self) -> float:
        return self.dimensions.width

    @width.setter
    def width(self, value: float) -> None:
        self.dimensions = replace(self.dimensions, width=value)

    @property
    def height(self) -> float:
        return self.dimensions.height

    @height.setter
    def height(self, value: float) -> None:
        self.dimensions = replace(self.dimensions, height=value)

    @property
    def depth(self) -> float:
        return self.dimensions.depth

    @depth.setter
    def depth(self, value: float) -> None:
        self.dimensions = replace(self.dimensions, depth=value)

    def resize(
        self,
        width: float | None = None,
        height: float | None = None,
        depth: float | None = None,
    ) -> None:
        """Change one or more dimensions at once."""
        self.dimensions = Dimensions(
            width=self.width if width is None else width,
            height=self.height if height is None else height,
            depth=self.depth if depth is None else depth,
        )

    def set_material(self, material_id: str, name: str = "", quantity: float = 1) -> None:
        """Add a material line, or update the quantity of an existing one."""
        for line in self.materials:
            if line.id == material_id:
                line.quantity = quantity
                if name:
                    line.name = name
                return
        self.materials.append(CabinetMaterial(id=material_id, name=name, quantity=quantity))

    def remove_material(self, material_id: str) -> None:
        self.materials = [m for m in self.materials if m.id != material_id]

    def set_accessory(
        self,
        accessory_id: str,
        name: str = "",
        quantity: float = 1,
        price: float = 0,
    ) -> None:
        """Select an accessory, or update quantity and price if already selected."""
        for line in self.accessories:
            if line.id == accessory_id:
                line.quantity = quantity
                line.price = price
                if name:
                    line.name = name
                return
        self.accessories.append(
            CabinetAccessory(id=accessory_id, name=name, quantity=quantity, price=price)
        )

    def remove_accessory(self, accessory_id: str) -> None:
        self.accessories = [a for a in self.accessories if a.id != accessory_id]

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the stored record shape (camelCase keys, both geometry shapes)."""
        data: dict[str, Any] = dict(self.extra)
        data.update(
            {
                "id": self.id,
                "name": self.name,
                "category": self.category,
                "subcategory": self.subcategory,
                "width": self.width,
                "height": self.height,
                "depth": self.depth,
                "dimensions": self.dimensions.to_dict(),
                "materials": [m.to_dict() for m in self.materials],
                "accessories": [a.to_dict() for a in self.accessories],
                "pieces": [p.to_dict() for p in self.pieces],
                "price": self.price,
                "totalCost": self.total_cost,
                "image": self.image,
                "isPreset": self.is_preset,
            }
        )
        if self.material_cost is not None:
            data["materialCost"] = self.material_cost
        if self.accessory_cost is not None:
            data["accessoryCost"] = self.accessory_cost
        return data


@dataclass
class Project:
    """A named collection of cabinets for a client.

    ``total`` is whatever was last stored; it is not kept in sync with the
    cabinets and must be re-derived before use.
    """

    id: str
    name: str = ""
    client: str = ""
    date: str = ""
    status: str = "draft"
    total: float = 0
    cabinets: list[Cabinet] = field(default_factory=list)
    extra: dict[str, Any] = field(default_factory=dict)

    def add_cabinet(self, cabinet: Cabinet) -> None:
        self.cabinets.append(cabinet)

    def update_cabinet(self, cabinet_id: str, cabinet: Cabinet) -> bool:
        """Replace the cabinet with the given id. Returns False if absent."""
        for index, existing in enumerate(self.cabinets):
            if existing.id == cabinet_id:
                self.cabinets[index] = cabinet
                return True
        return False

    def remove_cabinet(self, cabinet_id: str) -> bool:
        """Remove the whole cabinet record. Returns False if absent."""
        remaining = [c for c in self.cabinets if c.id != cabinet_id]
        removed = len(remaining) != len(self.cabinets)
        self.cabinets = remaining
        return removed

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = dict(self.extra)
        data.update(
            {
                "id": self.id,
                "name": self.name,
                "client": self.client,
                "date": self.date,
                "status": self.status,
                "total": self.total,
                "cabinets": [c.to_dict() for c in self.cabinets],
            }
        )
        return data
