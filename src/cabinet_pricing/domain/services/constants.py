"""Pricing constants.

This module provides:
- The hinge step rule (base hinge count, width step, default unit price)
- Defaults for a freshly created cabinet
"""

from __future__ import annotations


# --- Hinges ---

# Hinges fitted to any cabinet, covering widths up to one full step
BASE_HINGE_COUNT: int = 2

# Each additional full step of width adds one hinge (mm)
HINGE_WIDTH_STEP: float = 600.0

# Default price per hinge
DEFAULT_HINGE_PRICE: float = 15.0


# --- New cabinet defaults (mm) ---

DEFAULT_CABINET_WIDTH: float = 600.0
DEFAULT_CABINET_HEIGHT: float = 720.0
DEFAULT_CABINET_DEPTH: float = 560.0
DEFAULT_CABINET_NAME = "Unnamed Cabinet"
CABINET_ID_PREFIX = "cab_"


# --- Units ---

MM_PER_M: float = 1000.0
