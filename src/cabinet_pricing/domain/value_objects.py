"""Value objects for the pricing domain.

All measurements are in millimetres and all prices are in the currency of the
active PricingSettings. Reference data (materials, accessories, settings) is
immutable; cost results are plain frozen records.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ReferenceKind(str, Enum):
    """Kinds of catalog references a cabinet can hold."""

    MATERIAL = "material"
    ACCESSORY = "accessory"


@dataclass(frozen=True)
class Dimensions:
    """Immutable cabinet dimensions in millimetres.

    No sign or range validation is applied; UI layers may restrict ranges but
    the pricing functions must not assume they did.
    """

    width: float
    height: float
    depth: float

    @property
    def volume(self) -> float:
        """Volume in cubic millimetres."""
        return self.width * self.height * self.depth

    def to_dict(self) -> dict[str, float]:
        return {"width": self.width, "height": self.height, "depth": self.depth}


@dataclass(frozen=True)
class MaterialItem:
    """A catalog material priced per square metre.

    Attributes:
        id: Catalog identifier.
        name: Display name.
        price: Price per m².
        thickness: Optional board thickness in millimetres.
    """

    id: str
    name: str
    price: float
    thickness: float | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "MaterialItem":
        """Build a material from a catalog record."""
        return cls(
            id=str(data.get("id", "")),
            name=str(data.get("name", "")),
            price=data.get("price", 0),
            thickness=data.get("thickness"),
        )

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"id": self.id, "name": self.name, "price": self.price}
        if self.thickness is not None:
            data["thickness"] = self.thickness
        return data


@dataclass(frozen=True)
class AccessoryItem:
    """A catalog accessory priced per unit.

    Inside a cabinet, ``quantity`` is the amount chosen for that cabinet, not
    catalog stock.
    """

    id: str
    name: str
    price: float
    quantity: float = 1

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "AccessoryItem":
        """Build an accessory from a catalog record."""
        return cls(
            id=str(data.get("id", "")),
            name=str(data.get("name", "")),
            price=data.get("price", 0),
            quantity=data.get("quantity", 1),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "price": self.price,
            "quantity": self.quantity,
        }


@dataclass(frozen=True)
class PieceConfig:
    """A named flat panel of a legacy or preset cabinet.

    Attributes:
        material: Resolved material, or None when the piece has none.
        width: Piece width in millimetres.
        height: Piece height in millimetres.
        quantity: Number of identical pieces. Zero or None counts as one.
        name: Optional label such as "Side" or "Back".
    """

    material: MaterialItem | None
    width: float
    height: float
    quantity: float | None = 1
    name: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "material": self.material.to_dict() if self.material else None,
            "width": self.width,
            "height": self.height,
            "quantity": self.quantity,
        }


@dataclass(frozen=True)
class PricingSettings:
    """Process-wide pricing configuration.

    All percentages are whole numbers (19 means 19%).

    Attributes:
        tva: VAT percentage.
        manopera: Labor percentage.
        transport: Transport percentage.
        adaos: Markup percentage.
        currency: Currency label used for display.
        pdf_footer: Free text printed at the bottom of quotes.
    """

    tva: float = 19
    manopera: float = 15
    transport: float = 5
    adaos: float = 10
    currency: str = "RON"
    pdf_footer: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PricingSettings":
        """Build settings from a stored record, keeping defaults for missing keys."""
        known = {k: data[k] for k in cls.__dataclass_fields__ if k in data}
        if "pdfFooter" in data and "pdf_footer" not in known:
            known["pdf_footer"] = data["pdfFooter"]
        return cls(**known)

    def to_dict(self) -> dict[str, Any]:
        return {
            "tva": self.tva,
            "manopera": self.manopera,
            "transport": self.transport,
            "adaos": self.adaos,
            "currency": self.currency,
            "pdfFooter": self.pdf_footer,
        }


@dataclass(frozen=True)
class HingeEstimate:
    """Hinge count and cost for one cabinet."""

    quantity: int
    cost: float


@dataclass(frozen=True)
class UnresolvedReference:
    """A catalog id a cabinet refers to that the catalog does not contain.

    Unresolved references still contribute 0 to every total; they are reported
    so callers can warn the user.
    """

    kind: ReferenceKind
    id: str
    name: str = ""


@dataclass(frozen=True)
class PriceBreakdown:
    """Full price breakdown of a project or single cabinet quote.

    ``manopera_cost``, ``transport_cost`` and ``adaos_cost`` are each a
    percentage of the same base (material + accessories); they never compound.
    """

    material_cost: float
    accessory_cost: float
    manopera_cost: float
    transport_cost: float
    adaos_cost: float
    tva_cost: float
    subtotal: float
    total: float

    @property
    def base_cost(self) -> float:
        return self.material_cost + self.accessory_cost

    def to_dict(self) -> dict[str, float]:
        return {
            "materialCost": self.material_cost,
            "accessoryCost": self.accessory_cost,
            "manoperaCost": self.manopera_cost,
            "transportCost": self.transport_cost,
            "adaosCost": self.adaos_cost,
            "tvaCost": self.tva_cost,
            "subtotal": self.subtotal,
            "total": self.total,
        }


@dataclass(frozen=True)
class CabinetCost:
    """Cost of a single cabinet as produced by the cost composer.

    Attributes:
        material_cost: Panel material cost.
        accessory_cost: Sum of price x quantity over the cabinet's accessories.
        hinges: Hinge count and cost derived from the cabinet width.
        unresolved: Catalog references that could not be resolved.
    """

    material_cost: float
    accessory_cost: float
    hinges: HingeEstimate
    unresolved: tuple[UnresolvedReference, ...] = field(default_factory=tuple)

    @property
    def total(self) -> float:
        """Material + accessories + hinges; the cabinet's ``total_cost``."""
        return self.material_cost + self.accessory_cost + self.hinges.cost

    @property
    def has_unresolved(self) -> bool:
        return len(self.unresolved) > 0
