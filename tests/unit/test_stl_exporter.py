"""Unit tests for the STL exporter."""

from pathlib import Path

import numpy as np
import pytest
from stl import mesh

from planner.domain.catalog import get_catalog_item
from planner.domain.entities import PlacedItem
from planner.domain.services.projection import project_scene
from planner.infrastructure.exporters import StlExporter, StlMeshBuilder


class TestStlMeshBuilder:
    def test_solid_has_twelve_triangles(self, kitchen_model) -> None:
        kitchen_model.items.append(PlacedItem("cab-1", get_catalog_item("base-24")))
        solid = project_scene(kitchen_model).tagged("cab-1")[0]
        solid_mesh = StlMeshBuilder().build_solid_mesh(solid)
        assert len(solid_mesh.vectors) == 12

    def test_solid_volume(self, kitchen_model) -> None:
        """Outward winding gives a positive volume equal to the box's."""
        kitchen_model.items.append(PlacedItem("cab-1", get_catalog_item("base-24")))
        solid = project_scene(kitchen_model).tagged("cab-1")[0]
        volume, _, _ = StlMeshBuilder().build_solid_mesh(solid).get_mass_properties()
        w, h, d = solid.size
        assert volume == pytest.approx(w * h * d, rel=1e-4)

    def test_combine_empty(self) -> None:
        assert len(StlMeshBuilder().combine_meshes([]).vectors) == 0


class TestStlExporter:
    """Tests for StlExporter."""

    def test_triangle_count_matches_scene(self, garage_model) -> None:
        built = StlExporter().build_mesh(garage_model)
        assert len(built.vectors) == project_scene(garage_model).triangle_count

    def test_items_only(self, kitchen_model) -> None:
        kitchen_model.items.append(PlacedItem("cab-1", get_catalog_item("base-24")))
        built = StlExporter(include_structure=False).build_mesh(kitchen_model)
        assert len(built.vectors) == 12

    def test_export_round_trip(self, tmp_path: Path, garage_model) -> None:
        path = tmp_path / "garage.stl"
        StlExporter().export(garage_model, path)
        loaded = mesh.Mesh.from_file(str(path))
        assert len(loaded.vectors) == project_scene(garage_model).triangle_count
        assert np.isfinite(loaded.vectors).all()
