"""Cabinet normalization.

Every cabinet that crosses a boundary (created, edited, cloned, loaded from a
store or a file, received over HTTP) goes through ``normalize_cabinet`` so the
cost functions always see a fully-populated record. Normalization never
raises: missing or malformed fields are replaced by defaults.
"""

from __future__ import annotations

import copy
import math
import numbers
import time
import uuid
from collections.abc import Iterable, Mapping
from decimal import Decimal
from typing import Any

from ..entities import Cabinet, CabinetAccessory, CabinetMaterial, Project
from ..value_objects import Dimensions, MaterialItem, PieceConfig
from .constants import (
    CABINET_ID_PREFIX,
    DEFAULT_CABINET_DEPTH,
    DEFAULT_CABINET_HEIGHT,
    DEFAULT_CABINET_NAME,
    DEFAULT_CABINET_WIDTH,
)

__all__ = [
    "clone_cabinet",
    "generate_id",
    "normalize_cabinet",
    "normalize_cabinets",
    "normalize_project",
]

PROJECT_ID_PREFIX = "proj_"

# Keys mapped onto Cabinet fields; everything else is kept in Cabinet.extra
_CABINET_KEYS = frozenset(
    {
        "id",
        "name",
        "category",
        "subcategory",
        "width",
        "height",
        "depth",
        "dimensions",
        "materials",
        "accessories",
        "pieces",
        "price",
        "totalCost",
        "materialCost",
        "accessoryCost",
        "image",
        "isPreset",
    }
)

_PROJECT_KEYS = frozenset({"id", "name", "client", "date", "status", "total", "cabinets"})


def generate_id(prefix: str = CABINET_ID_PREFIX) -> str:
    """Fresh identifier from the current time in milliseconds.

    A short random suffix keeps ids distinct when several are generated
    within the same millisecond.
    """
    millis = time.time_ns() // 1_000_000
    return f"{prefix}{millis}_{uuid.uuid4().hex[:6]}"


def _number(value: Any) -> float | None:
    """Coerce a stored value to a number, or None if it is not one."""
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, (int, float)):
        result = value
    elif isinstance(value, (numbers.Real, Decimal)):
        try:
            result = float(value)
        except (ValueError, OverflowError):
            return None
    elif isinstance(value, str):
        try:
            result = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    if isinstance(result, float) and math.isnan(result):
        return None
    return result


def _dimension(value: Any) -> float | None:
    """A usable dimension: numeric and non-zero."""
    number = _number(value)
    if not number:
        return None
    return number


def _extra(data: Mapping[str, Any], known: frozenset[str]) -> dict[str, Any]:
    """Unknown keys of a record, deep-copied where the value allows it."""
    extra: dict[str, Any] = {}
    for key, value in data.items():
        if key in known:
            continue
        try:
            extra[key] = copy.deepcopy(value)
        except (TypeError, copy.Error):
            extra[key] = value
    return extra


def _text(value: Any, default: str = "") -> str:
    if isinstance(value, str) and value:
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return default


def _resolve_dimensions(data: Mapping[str, Any]) -> Dimensions:
    nested = data.get("dimensions")
    if not isinstance(nested, Mapping):
        nested = {}

    def resolve(key: str) -> float:
        top = _dimension(data.get(key))
        if top is not None:
            return top
        inner = _dimension(nested.get(key))
        if inner is not None:
            return inner
        return 0

    return Dimensions(width=resolve("width"), height=resolve("height"), depth=resolve("depth"))


def _materials(value: Any) -> list[CabinetMaterial]:
    if not isinstance(value, list):
        return []
    lines: list[CabinetMaterial] = []
    for entry in value:
        if isinstance(entry, CabinetMaterial):
            lines.append(copy.copy(entry))
            continue
        if not isinstance(entry, Mapping) or not _text(entry.get("id")):
            continue
        quantity = _number(entry.get("quantity"))
        lines.append(
            CabinetMaterial(
                id=_text(entry.get("id")),
                name=_text(entry.get("name")),
                quantity=1 if quantity is None else quantity,
            )
        )
    return lines


def _accessories(value: Any) -> list[CabinetAccessory]:
    if not isinstance(value, list):
        return []
    lines: list[CabinetAccessory] = []
    for entry in value:
        if isinstance(entry, CabinetAccessory):
            lines.append(copy.copy(entry))
            continue
        if not isinstance(entry, Mapping) or not _text(entry.get("id")):
            continue
        quantity = _number(entry.get("quantity"))
        lines.append(
            CabinetAccessory(
                id=_text(entry.get("id")),
                name=_text(entry.get("name")),
                quantity=1 if quantity is None else quantity,
                price=_number(entry.get("price")) or 0,
            )
        )
    return lines


def _piece_material(
    value: Any, catalog: Mapping[str, MaterialItem]
) -> MaterialItem | None:
    if isinstance(value, MaterialItem):
        return value
    if isinstance(value, Mapping):
        return MaterialItem(
            id=_text(value.get("id")),
            name=_text(value.get("name")),
            price=_number(value.get("price")) or 0,
            thickness=_number(value.get("thickness")),
        )
    if isinstance(value, str):
        return catalog.get(value)
    return None


def _pieces(value: Any, catalog: Mapping[str, MaterialItem]) -> list[PieceConfig]:
    if not isinstance(value, list):
        return []
    pieces: list[PieceConfig] = []
    for entry in value:
        if isinstance(entry, PieceConfig):
            pieces.append(entry)
            continue
        if not isinstance(entry, Mapping):
            continue
        pieces.append(
            PieceConfig(
                material=_piece_material(entry.get("material"), catalog),
                width=_number(entry.get("width")) or 0,
                height=_number(entry.get("height")) or 0,
                quantity=_number(entry.get("quantity")),
                name=_text(entry.get("name")),
            )
        )
    return pieces


def _default_cabinet() -> Cabinet:
    return Cabinet(
        id=generate_id(),
        name=DEFAULT_CABINET_NAME,
        dimensions=Dimensions(
            width=DEFAULT_CABINET_WIDTH,
            height=DEFAULT_CABINET_HEIGHT,
            depth=DEFAULT_CABINET_DEPTH,
        ),
    )


def normalize_cabinet(
    partial: "Mapping[str, Any] | Cabinet | None",
    materials_catalog: "Iterable[MaterialItem] | None" = None,
) -> Cabinet:
    """Build a canonical, fully-populated Cabinet from partial input.

    Args:
        partial: A stored cabinet record, a Cabinet, or None. Anything else is
            treated as an empty record.
        materials_catalog: Optional catalog used to resolve pieces whose
            material is given as a bare id.

    Returns:
        A Cabinet whose nested and top-level dimensions agree and whose
        collections are lists. ``None`` gives a default 600 x 720 x 560 cabinet.

    Width, height and depth prefer the top-level value, then the nested
    ``dimensions`` value, then 0; zero counts as missing. Existing ids are
    preserved. Applying the function twice gives an equal result.
    """
    if partial is None:
        return _default_cabinet()
    if isinstance(partial, Cabinet):
        data: Mapping[str, Any] = partial.to_dict()
    elif isinstance(partial, Mapping):
        data = partial
    else:
        data = {}

    catalog = {m.id: m for m in materials_catalog or ()}
    material_cost = _number(data.get("materialCost"))
    accessory_cost = _number(data.get("accessoryCost"))
    image = data.get("image")

    return Cabinet(
        id=_text(data.get("id")) or generate_id(),
        name=_text(data.get("name"), DEFAULT_CABINET_NAME),
        category=_text(data.get("category")),
        subcategory=_text(data.get("subcategory")),
        dimensions=_resolve_dimensions(data),
        materials=_materials(data.get("materials")),
        accessories=_accessories(data.get("accessories")),
        pieces=_pieces(data.get("pieces"), catalog),
        price=_number(data.get("price")) or 0,
        total_cost=_number(data.get("totalCost")) or 0,
        material_cost=material_cost,
        accessory_cost=accessory_cost,
        image=image if isinstance(image, str) and image else None,
        is_preset=data.get("isPreset") is True,
        extra=_extra(data, _CABINET_KEYS),
    )


def normalize_cabinets(
    items: Any,
    materials_catalog: "Iterable[MaterialItem] | None" = None,
) -> list[Cabinet]:
    """Normalize a list of cabinet records. Non-list input gives an empty list."""
    if not isinstance(items, (list, tuple)):
        return []
    catalog = list(materials_catalog or ())
    return [normalize_cabinet(item, catalog) for item in items]


def clone_cabinet(cabinet: "Mapping[str, Any] | Cabinet") -> Cabinet:
    """Copy of a cabinet with every field kept except a freshly generated id."""
    cloned = normalize_cabinet(cabinet)
    cloned.id = generate_id()
    return cloned


def normalize_project(
    partial: "Mapping[str, Any] | Project | None",
    materials_catalog: "Iterable[MaterialItem] | None" = None,
) -> Project:
    """Build a Project with normalized cabinets from a stored record."""
    if isinstance(partial, Project):
        data: Mapping[str, Any] = partial.to_dict()
    elif isinstance(partial, Mapping):
        data = partial
    else:
        data = {}

    return Project(
        id=_text(data.get("id")) or generate_id(PROJECT_ID_PREFIX),
        name=_text(data.get("name")),
        client=_text(data.get("client")),
        date=_text(data.get("date")),
        status=_text(data.get("status"), "draft"),
        total=_number(data.get("total")) or 0,
        cabinets=normalize_cabinets(data.get("cabinets"), materials_catalog),
        extra=_extra(data, _PROJECT_KEYS),
    )
