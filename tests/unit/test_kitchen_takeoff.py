"""Unit tests for the kitchen materials take-off."""

from dataclasses import replace

import pytest

from planner.application.templates import TemplateManager
from planner.domain.catalog import get_catalog_item
from planner.domain.entities import ConfigurationModel, PlacedItem
from planner.domain.services.takeoff import calculate_materials, countertop_area
from planner.domain.value_objects import CabinetFinish, CountertopMaterial


@pytest.fixture
def l_shape() -> ConfigurationModel:
    return TemplateManager().load_template("kitchen-l-shape")


def _line(bom, description):
    return next(line for line in bom if line.description == description)


class TestLShapeKitchen:
    """Take-off of the bundled L-shaped kitchen."""

    def test_categories(self, l_shape: ConfigurationModel) -> None:
        assert calculate_materials(l_shape).categories == [
            "Base Cabinets",
            "Wall Cabinets",
            "Tall Cabinets",
            "Countertops",
            "Appliances",
            "Hardware",
            "Installation",
        ]

    def test_identical_cabinets_share_a_line(self, l_shape: ConfigurationModel) -> None:
        line = _line(calculate_materials(l_shape), 'Base Cabinet 24" - White Finish')
        assert line.quantity == 3
        assert line.unit == "ea"
        assert line.unit_price is None

    def test_countertops(self, l_shape: ConfigurationModel) -> None:
        bom = calculate_materials(l_shape)
        assert countertop_area(l_shape) == pytest.approx(138 * 25 / 144)
        assert _line(bom, "Granite Countertop").quantity == 24
        assert _line(bom, "Countertop Edge Finishing").quantity == 18
        assert _line(bom, "Tile Backsplash (Ceramic)").quantity == 13

    def test_appliances_are_priced(self, l_shape: ConfigurationModel) -> None:
        appliances = calculate_materials(l_shape).by_category()["Appliances"]
        assert len(appliances) == 4
        assert sum(line.total_price for line in appliances) == 2900

    def test_hardware(self, l_shape: ConfigurationModel) -> None:
        bom = calculate_materials(l_shape)
        assert _line(bom, "Cabinet Knobs/Pulls").quantity == 16
        assert _line(bom, "Cabinet Hinges").quantity == 32
        assert not [line for line in bom if line.description == "Drawer Slides"]

    def test_installation(self, l_shape: ConfigurationModel) -> None:
        bom = calculate_materials(l_shape)
        assert _line(bom, "Cabinet Installation Labor").quantity == 8
        assert _line(bom, "Countertop Installation Labor").quantity == 2

    def test_total_cost_counts_priced_lines_only(self, l_shape: ConfigurationModel) -> None:
        assert calculate_materials(l_shape).total_cost == 2900


class TestKitchenOptions:
    def test_empty_kitchen_has_no_lines(self, kitchen_model: ConfigurationModel) -> None:
        assert calculate_materials(kitchen_model).is_empty

    def test_finish_override_splits_lines(self, kitchen_model: ConfigurationModel) -> None:
        base = get_catalog_item("base-24")
        kitchen_model.items.append(PlacedItem("a", base))
        kitchen_model.items.append(PlacedItem("b", base, x=24, finish=CabinetFinish.WALNUT))
        descriptions = [line.description for line in calculate_materials(kitchen_model)
                        if line.category == "Base Cabinets"]
        assert descriptions == [
            'Base Cabinet 24" - White Finish',
            'Base Cabinet 24" - Walnut Finish',
        ]

    def test_countertop_material(self, kitchen_model: ConfigurationModel) -> None:
        kitchen_model.features = replace(
            kitchen_model.features, countertop_material=CountertopMaterial.QUARTZ
        )
        kitchen_model.items.append(PlacedItem("a", get_catalog_item("base-24")))
        assert _line(calculate_materials(kitchen_model), "Quartz Countertop").quantity == 5

    def test_island_uses_deeper_counter(self, kitchen_model: ConfigurationModel) -> None:
        kitchen_model.items.append(PlacedItem("i", get_catalog_item("island-48x36")))
        assert countertop_area(kitchen_model) == pytest.approx(48 * 36 / 144)

    def test_backsplash_can_be_turned_off(self, kitchen_model: ConfigurationModel) -> None:
        kitchen_model.features = replace(kitchen_model.features, has_backsplash=False)
        kitchen_model.items.append(PlacedItem("a", get_catalog_item("base-24")))
        bom = calculate_materials(kitchen_model)
        assert not [line for line in bom if "Backsplash" in line.description]

    def test_drawer_slides(self, kitchen_model: ConfigurationModel) -> None:
        kitchen_model.items.append(PlacedItem("a", get_catalog_item("base-12")))
        assert _line(calculate_materials(kitchen_model), "Drawer Slides").quantity == 3

    def test_price_book_overrides(self, kitchen_model: ConfigurationModel) -> None:
        kitchen_model.items.append(PlacedItem("a", get_catalog_item("base-24")))
        kitchen_model.items.append(PlacedItem("f", get_catalog_item("fridge-36"), x=40))
        bom = calculate_materials(
            kitchen_model,
            {'Base Cabinet 24" - White Finish': 250.0, 'Refrigerator 36"': 999.0},
        )
        assert _line(bom, 'Base Cabinet 24" - White Finish').total_price == 250
        assert _line(bom, 'Refrigerator 36"').unit_price == 999
        assert bom.total_cost == 1249
