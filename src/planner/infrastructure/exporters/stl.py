"""STL exporter for the 3D scene using numpy-stl.

Scene coordinates are already Y-up metres, which is what most STL viewers
expect, so vertices are written unchanged.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

import numpy as np
from stl import mesh

from planner.domain.services.projection import Prism, SceneConfig, Solid, project_scene
from planner.infrastructure.exporters.base import ExporterRegistry

if TYPE_CHECKING:
    from planner.domain.entities import ConfigurationModel

# Outward-facing triangles over Solid.vertices() (bottom 0-3, top 4-7).
BOX_TRIANGLES: tuple[tuple[int, int, int], ...] = (
    (0, 1, 2), (0, 2, 3),  # bottom
    (4, 6, 5), (4, 7, 6),  # top
    (0, 5, 1), (0, 4, 5),  # -z
    (1, 6, 2), (1, 5, 6),  # +x
    (2, 7, 3), (2, 6, 7),  # +z
    (3, 4, 0), (3, 7, 4),  # -x
)


class StlMeshBuilder:
    """Turns scene solids and prisms into numpy-stl meshes."""

    def build_solid_mesh(self, solid: Solid) -> mesh.Mesh:
        vertices = np.array([v.as_tuple() for v in solid.vertices()])
        solid_mesh = mesh.Mesh(np.zeros(len(BOX_TRIANGLES), dtype=mesh.Mesh.dtype))
        for i, (v0, v1, v2) in enumerate(BOX_TRIANGLES):
            solid_mesh.vectors[i] = [vertices[v0], vertices[v1], vertices[v2]]
        return solid_mesh

    def build_prism_mesh(self, prism: Prism) -> mesh.Mesh:
        vertices = np.array([v.as_tuple() for v in prism.vertices])
        prism_mesh = mesh.Mesh(np.zeros(len(prism.faces), dtype=mesh.Mesh.dtype))
        for i, (v0, v1, v2) in enumerate(prism.faces):
            prism_mesh.vectors[i] = [vertices[v0], vertices[v1], vertices[v2]]
        return prism_mesh

    def combine_meshes(self, meshes: list[mesh.Mesh]) -> mesh.Mesh:
        if not meshes:
            return mesh.Mesh(np.zeros(0, dtype=mesh.Mesh.dtype))
        combined = mesh.Mesh(np.concatenate([m.data for m in meshes]))
        combined.update_normals()
        return combined


@ExporterRegistry.register("stl")
class StlExporter:
    """3D scene as a binary STL mesh in metres.

    Attributes:
        format_name: "stl"
        file_extension: "stl"
    """

    format_name: ClassVar[str] = "stl"
    file_extension: ClassVar[str] = "stl"

    def __init__(
        self,
        include_structure: bool = True,
        include_roof: bool = True,
        mesh_builder: StlMeshBuilder | None = None,
    ) -> None:
        self.config = SceneConfig(include_structure=include_structure, include_roof=include_roof)
        self.mesh_builder = mesh_builder or StlMeshBuilder()

    def build_mesh(self, model: ConfigurationModel) -> mesh.Mesh:
        scene = project_scene(model, self.config)
        meshes = [self.mesh_builder.build_solid_mesh(solid) for solid in scene.solids]
        meshes.extend(self.mesh_builder.build_prism_mesh(prism) for prism in scene.prisms)
        return self.mesh_builder.combine_meshes(meshes)

    def export(self, model: ConfigurationModel, path: Path) -> None:
        self.build_mesh(model).save(str(path))

    def export_string(self, model: ConfigurationModel) -> str:
        raise NotImplementedError(
            "STL format does not support string export. Use export() to write to a file."
        )
