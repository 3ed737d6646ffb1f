"""Material cost calculation.

Prices rectangular pieces of sheet material from a per-m² rate. Missing
materials or dimensions price at zero rather than raising.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any

from .geometry import area_of

if TYPE_CHECKING:
    from ..value_objects import MaterialItem, PieceConfig

__all__ = ["cabinet_piece_costs", "piece_cost"]


def _width_height(dimensions: Any) -> tuple[float, float] | None:
    """Extract (width, height) from a Dimensions-like object, mapping or pair."""
    if dimensions is None:
        return None
    if isinstance(dimensions, Mapping):
        if "width" not in dimensions or "height" not in dimensions:
            return None
        return dimensions["width"], dimensions["height"]
    if isinstance(dimensions, tuple):
        if len(dimensions) != 2:
            return None
        return dimensions[0], dimensions[1]
    width = getattr(dimensions, "width", None)
    height = getattr(dimensions, "height", None)
    if width is None or height is None:
        return None
    return width, height


def piece_cost(
    material: "MaterialItem | None",
    dimensions: Any,
    quantity: float = 1,
) -> float:
    """Cost of ``quantity`` pieces of ``material`` cut to ``dimensions``.

    Args:
        material: Catalog material priced per m², or None.
        dimensions: Piece size in millimetres. A Dimensions, any object with
            ``width``/``height`` attributes, a mapping with those keys, or a
            ``(width, height)`` tuple.
        quantity: Number of identical pieces.

    Returns:
        ``material.price * area_of(width, height) * quantity``, or 0 when the
        material or the dimensions are missing.
    """
    if material is None:
        return 0
    size = _width_height(dimensions)
    if size is None:
        return 0
    width, height = size
    return material.price * area_of(width, height) * quantity


def cabinet_piece_costs(pieces: "Iterable[PieceConfig] | None") -> float:
    """Sum the cost of a cabinet's pieces.

    A piece whose quantity is missing or zero counts once.
    """
    if not pieces:
        return 0
    total: float = 0
    for piece in pieces:
        quantity = piece.quantity or 1
        total += piece_cost(piece.material, (piece.width, piece.height), quantity)
    return total
