"""Unit tests for the cabinet cost composer.

These tests verify:
- The six-panel estimate for cabinets without explicit materials
- Width x depth pricing of explicitly listed materials
- Accessories and hinges added on top
- Unresolved catalog references priced at zero and reported
"""

import pytest

from cabinet_pricing.domain.entities import Cabinet, CabinetAccessory, CabinetMaterial
from cabinet_pricing.domain.services import CabinetCostComposer, box_material_cost
from cabinet_pricing.domain.value_objects import (
    Dimensions,
    MaterialItem,
    ReferenceKind,
    UnresolvedReference,
)


def make_cabinet(
    width: float = 900,
    height: float = 720,
    depth: float = 560,
    **kwargs,
) -> Cabinet:
    return Cabinet(id="cab_test", dimensions=Dimensions(width, height, depth), **kwargs)


@pytest.fixture
def composer() -> CabinetCostComposer:
    return CabinetCostComposer()


class TestBoxMaterialCost:
    """Tests for the six-panel estimate."""

    def test_panels(self, pal: MaterialItem) -> None:
        # bottom + top 0.504 each, sides 0.4032 each, back 0.648
        assert box_material_cost(pal, 900, 720, 560) == pytest.approx(246.24)

    def test_no_material(self) -> None:
        assert box_material_cost(None, 900, 720, 560) == 0


class TestFallbackComposition:
    """Tests for cabinets with no explicit materials."""

    def test_reference_scenario(self, composer: CabinetCostComposer, pal: MaterialItem) -> None:
        cost = composer.compose(make_cabinet(), [pal], "pal_alb")

        assert cost.material_cost == pytest.approx(246.24)
        assert cost.accessory_cost == 0
        assert cost.hinges.quantity == 2
        assert cost.hinges.cost == pytest.approx(30)
        assert cost.total == pytest.approx(276.24)
        assert not cost.has_unresolved

    def test_defaults_to_first_catalog_material(
        self, composer: CabinetCostComposer, materials: list[MaterialItem]
    ) -> None:
        cost = composer.compose(make_cabinet(), materials)
        assert cost.material_cost == pytest.approx(246.24)

    def test_selected_material(
        self, composer: CabinetCostComposer, materials: list[MaterialItem]
    ) -> None:
        cost = composer.compose(make_cabinet(), materials, "mdf_18")
        assert cost.material_cost == pytest.approx(492.48)

    def test_empty_catalog(self, composer: CabinetCostComposer) -> None:
        cost = composer.compose(make_cabinet(), [])
        assert cost.material_cost == 0
        assert cost.total == pytest.approx(30)

    def test_unknown_selected_material(
        self, composer: CabinetCostComposer, pal: MaterialItem
    ) -> None:
        cost = composer.compose(make_cabinet(), [pal], "walnut")
        assert cost.material_cost == 0
        assert cost.unresolved == (UnresolvedReference(kind=ReferenceKind.MATERIAL, id="walnut"),)


class TestListedMaterials:
    """Tests for cabinets that list their materials."""

    def test_width_by_depth_per_material(
        self, composer: CabinetCostComposer, materials: list[MaterialItem]
    ) -> None:
        cabinet = make_cabinet(
            width=1000,
            depth=500,
            materials=[CabinetMaterial(id="pal_alb", quantity=2), CabinetMaterial(id="mdf_18")],
        )
        cost = composer.compose(cabinet, materials)
        # 0.5 m² each: PAL 100 x 0.5 x 2, MDF 200 x 0.5 x 1
        assert cost.material_cost == pytest.approx(200)

    def test_unresolved_material_is_reported(
        self, composer: CabinetCostComposer, pal: MaterialItem
    ) -> None:
        cabinet = make_cabinet(
            materials=[CabinetMaterial(id="pal_alb"), CabinetMaterial(id="oak", name="Oak")]
        )
        cost = composer.compose(cabinet, [pal])

        assert cost.material_cost == pytest.approx(100 * 0.9 * 0.56)
        assert cost.unresolved == (
            UnresolvedReference(kind=ReferenceKind.MATERIAL, id="oak", name="Oak"),
        )

    def test_selected_material_is_ignored(
        self, composer: CabinetCostComposer, materials: list[MaterialItem]
    ) -> None:
        cabinet = make_cabinet(materials=[CabinetMaterial(id="pal_alb")])
        with_selection = composer.compose(cabinet, materials, "mdf_18")
        without = composer.compose(cabinet, materials)
        assert with_selection.material_cost == pytest.approx(without.material_cost)


class TestAccessoriesAndHinges:
    """Tests for the accessory and hinge parts of the total."""

    def test_accessories_added(self, composer: CabinetCostComposer, pal: MaterialItem) -> None:
        cabinet = make_cabinet(accessories=[CabinetAccessory(id="handle", quantity=2, price=25)])
        cost = composer.compose(cabinet, [pal])
        assert cost.accessory_cost == pytest.approx(50)
        assert cost.total == pytest.approx(246.24 + 50 + 30)

    def test_wide_cabinet_gets_more_hinges(self, composer: CabinetCostComposer) -> None:
        cost = composer.compose(make_cabinet(width=1800), [])
        assert cost.hinges.quantity == 4
        assert cost.total == pytest.approx(60)

    def test_custom_hinge_price(self) -> None:
        composer = CabinetCostComposer.with_hinge_price(20)
        cost = composer.compose(make_cabinet(), [])
        assert cost.hinges.cost == pytest.approx(40)


class TestPriceCabinet:
    """Tests for price_cabinet."""

    def test_sets_total_cost_on_a_copy(
        self, composer: CabinetCostComposer, pal: MaterialItem
    ) -> None:
        cabinet = make_cabinet(price=1200)
        priced, cost = composer.price_cabinet(cabinet, [pal])

        assert priced.total_cost == pytest.approx(276.24)
        assert priced.price == 1200
        assert cabinet.total_cost == 0
        assert priced is not cabinet
        assert cost.total == pytest.approx(priced.total_cost)
