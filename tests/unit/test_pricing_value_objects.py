"""Unit tests for pricing value objects.

These tests verify:
- Immutability of reference data
- Settings defaults and stored-record round trips
- Cost records and their derived totals
"""

import pytest

from cabinet_pricing.domain.value_objects import (
    AccessoryItem,
    CabinetCost,
    Dimensions,
    HingeEstimate,
    MaterialItem,
    PriceBreakdown,
    PricingSettings,
    ReferenceKind,
    UnresolvedReference,
)


class TestDimensions:
    """Tests for Dimensions value object."""

    def test_dimensions_are_frozen(self) -> None:
        dims = Dimensions(width=600, height=720, depth=560)
        with pytest.raises(AttributeError):
            dims.width = 900  # type: ignore

    def test_volume(self) -> None:
        assert Dimensions(width=100, height=200, depth=300).volume == 6_000_000

    def test_negative_values_are_allowed(self) -> None:
        """No sign validation happens in the core."""
        dims = Dimensions(width=-10, height=0, depth=5)
        assert dims.width == -10

    def test_to_dict(self) -> None:
        assert Dimensions(1, 2, 3).to_dict() == {"width": 1, "height": 2, "depth": 3}


class TestMaterialItem:
    """Tests for MaterialItem."""

    def test_from_dict(self) -> None:
        material = MaterialItem.from_dict({"id": "m1", "name": "PAL", "price": 85.5, "thickness": 18})
        assert material == MaterialItem(id="m1", name="PAL", price=85.5, thickness=18)

    def test_from_dict_defaults(self) -> None:
        material = MaterialItem.from_dict({"id": "m1"})
        assert material.name == ""
        assert material.price == 0
        assert material.thickness is None

    def test_to_dict_omits_missing_thickness(self) -> None:
        assert "thickness" not in MaterialItem(id="m1", name="", price=1).to_dict()


class TestAccessoryItem:
    """Tests for AccessoryItem."""

    def test_quantity_defaults_to_one(self) -> None:
        assert AccessoryItem.from_dict({"id": "a1", "price": 10}).quantity == 1

    def test_to_dict(self) -> None:
        item = AccessoryItem(id="a1", name="Hinge", price=15, quantity=4)
        assert item.to_dict() == {"id": "a1", "name": "Hinge", "price": 15, "quantity": 4}


class TestPricingSettings:
    """Tests for PricingSettings."""

    def test_defaults(self) -> None:
        settings = PricingSettings()
        assert (settings.tva, settings.manopera, settings.transport, settings.adaos) == (19, 15, 5, 10)
        assert settings.currency == "RON"

    def test_from_dict_keeps_defaults_for_missing_keys(self) -> None:
        settings = PricingSettings.from_dict({"tva": 9, "currency": "EUR"})
        assert settings.tva == 9
        assert settings.currency == "EUR"
        assert settings.manopera == 15

    def test_from_dict_ignores_unknown_keys(self) -> None:
        settings = PricingSettings.from_dict({"adaos": 20, "theme": "dark"})
        assert settings.adaos == 20

    def test_pdf_footer_uses_stored_key(self) -> None:
        settings = PricingSettings.from_dict({"pdfFooter": "Thank you"})
        assert settings.pdf_footer == "Thank you"
        assert settings.to_dict()["pdfFooter"] == "Thank you"

    def test_round_trip(self) -> None:
        settings = PricingSettings(tva=24, manopera=20, transport=0, adaos=5, currency="EUR")
        assert PricingSettings.from_dict(settings.to_dict()) == settings


class TestPriceBreakdown:
    """Tests for PriceBreakdown."""

    def test_base_cost(self) -> None:
        breakdown = PriceBreakdown(700, 300, 0, 0, 0, 0, 1000, 1000)
        assert breakdown.base_cost == 1000

    def test_to_dict_uses_stored_keys(self) -> None:
        data = PriceBreakdown(1, 2, 3, 4, 5, 6, 7, 8).to_dict()
        assert data == {
            "materialCost": 1,
            "accessoryCost": 2,
            "manoperaCost": 3,
            "transportCost": 4,
            "adaosCost": 5,
            "tvaCost": 6,
            "subtotal": 7,
            "total": 8,
        }


class TestCabinetCost:
    """Tests for CabinetCost."""

    def test_total_includes_hinges(self) -> None:
        cost = CabinetCost(
            material_cost=246.24,
            accessory_cost=10,
            hinges=HingeEstimate(quantity=2, cost=30),
        )
        assert cost.total == pytest.approx(286.24)
        assert not cost.has_unresolved

    def test_has_unresolved(self) -> None:
        cost = CabinetCost(
            material_cost=0,
            accessory_cost=0,
            hinges=HingeEstimate(quantity=2, cost=30),
            unresolved=(UnresolvedReference(kind=ReferenceKind.MATERIAL, id="gone"),),
        )
        assert cost.has_unresolved
