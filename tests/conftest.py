"""Pytest configuration and shared fixtures for pricing tests."""

from __future__ import annotations

from typing import Any

import pytest

from cabinet_pricing.application.factory import reset_factory
from cabinet_pricing.domain import MaterialItem, PricingSettings


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "integration: end-to-end tests through the CLI or API")


@pytest.fixture(autouse=True)
def _reset_service_factory():
    """Keep the module-level service factory from leaking between tests."""
    yield
    reset_factory()


# =============================================================================
# Catalog fixtures
# =============================================================================


@pytest.fixture
def pal() -> MaterialItem:
    """Chipboard priced at 100 per m²."""
    return MaterialItem(id="pal_alb", name="PAL Alb 18mm", price=100, thickness=18)


@pytest.fixture
def mdf() -> MaterialItem:
    """MDF priced at 200 per m²."""
    return MaterialItem(id="mdf_18", name="MDF 18mm", price=200, thickness=18)


@pytest.fixture
def materials(pal: MaterialItem, mdf: MaterialItem) -> list[MaterialItem]:
    return [pal, mdf]


@pytest.fixture
def settings() -> PricingSettings:
    """Default settings: 19% VAT, 15% labor, 5% transport, 10% markup."""
    return PricingSettings()


@pytest.fixture
def base_cabinet_record() -> dict[str, Any]:
    """A 900 x 720 x 560 base cabinet with no explicit materials."""
    return {
        "id": "cab_base_900",
        "name": "Base 900",
        "category": "kitchen",
        "subcategory": "base",
        "width": 900,
        "height": 720,
        "depth": 560,
    }


@pytest.fixture
def store_document(pal: MaterialItem, mdf: MaterialItem) -> dict[str, Any]:
    """A store document with a catalog, settings and one project."""
    return {
        "materials": [pal.to_dict(), mdf.to_dict()],
        "accessories": [
            {"id": "handle_1", "name": "Handle", "price": 12, "quantity": 1},
        ],
        "cabinets": [
            {"id": "preset_1", "name": "Preset Base", "width": 600, "isPreset": True},
            {"id": "custom_1", "name": "Custom", "width": 800},
        ],
        "projects": [
            {
                "id": "proj_kitchen",
                "name": "Kitchen",
                "client": "Ion Popescu",
                "date": "2024-03-01",
                "status": "draft",
                "total": 99999,
                "cabinets": [
                    {"id": "c1", "name": "Sink base", "materialCost": 600, "accessoryCost": 100},
                    {"id": "c2", "name": "Drawer base", "materialCost": 300},
                ],
            }
        ],
        "settings": PricingSettings().to_dict(),
    }
