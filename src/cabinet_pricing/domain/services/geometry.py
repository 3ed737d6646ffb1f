"""Dimension and area helpers."""

from __future__ import annotations

from .constants import MM_PER_M

__all__ = ["area_of"]


def area_of(width_mm: float, height_mm: float) -> float:
    """Convert a width x height in millimetres to square metres.

    Signs are not checked: zero or negative inputs give a zero or negative
    area.
    """
    return (width_mm / MM_PER_M) * (height_mm / MM_PER_M)
