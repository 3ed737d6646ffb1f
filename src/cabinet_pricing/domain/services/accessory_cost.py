"""Accessory cost aggregation."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol

__all__ = ["PricedLine", "accessory_cost"]


class PricedLine(Protocol):
    """Anything carrying a unit price and a quantity."""

    price: float
    quantity: float


def accessory_cost(accessories: "Iterable[PricedLine] | None") -> float:
    """Sum ``price * quantity`` over the accessories. Empty or None gives 0."""
    if not accessories:
        return 0
    return sum((a.price * a.quantity for a in accessories), 0)
