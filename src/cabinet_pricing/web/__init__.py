"""FastAPI REST API for cabinet pricing.

This module provides a REST API for quoting single cabinets and whole
projects, and for normalizing cabinet records.

Usage:
    uvicorn cabinet_pricing.web:app --reload
"""

from cabinet_pricing.web.app import app, create_app

__all__ = ["app", "create_app"]
