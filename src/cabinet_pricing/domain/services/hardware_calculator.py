"""Hinge calculation service.

This module provides HingeCalculator, which derives the hinge count and
hinge cost of a cabinet from its width using a step rule.
"""

from __future__ import annotations

import math

from ..value_objects import HingeEstimate
from .constants import BASE_HINGE_COUNT, DEFAULT_HINGE_PRICE, HINGE_WIDTH_STEP

__all__ = ["HingeCalculator", "hinge_cost"]


class HingeCalculator:
    """Service for calculating hinge requirements.

    A baseline of ``base_count`` hinges covers cabinets up to one
    ``width_step`` wide; every additional full step of width adds one hinge.
    Widths below one step still get the baseline.
    """

    def __init__(
        self,
        unit_price: float = DEFAULT_HINGE_PRICE,
        base_count: int = BASE_HINGE_COUNT,
        width_step: float = HINGE_WIDTH_STEP,
    ) -> None:
        if width_step <= 0:
            raise ValueError("width_step must be positive")
        self.unit_price = unit_price
        self.base_count = base_count
        self.width_step = width_step

    def hinge_count(self, width: float) -> int:
        """Number of hinges for a cabinet of the given width in millimetres."""
        additional = math.floor((width - self.width_step) / self.width_step)
        return self.base_count + max(0, additional)

    def calculate(self, width: float) -> HingeEstimate:
        """Hinge count and total hinge cost for a cabinet width."""
        quantity = self.hinge_count(width)
        return HingeEstimate(quantity=quantity, cost=quantity * self.unit_price)


def hinge_cost(width: float, unit_price: float = DEFAULT_HINGE_PRICE) -> HingeEstimate:
    """Hinge count and cost for ``width`` using the standard step rule.

    Examples:
        >>> hinge_cost(600)
        HingeEstimate(quantity=2, cost=30.0)
        >>> hinge_cost(1200).quantity
        3
    """
    return HingeCalculator(unit_price=unit_price).calculate(width)
