"""Domain services for the structure planner.

This package provides:
- Shared geometry (units, rotation, anchor heights, roof profiles)
- The placement engine and gesture state machine
- Plan, elevation and 3D projections
- Materials take-off and design warnings
"""

from .interaction import (
    Dragging,
    GestureState,
    Idle,
    Rotating,
    pointer_down,
    pointer_leave,
    pointer_move,
    pointer_up,
)
from .placement import PlacementEngine, default_id_factory
from .projection import (
    DisplayList,
    ElevationViewConfig,
    OrbitCamera,
    PlanViewConfig,
    Scene,
    SceneConfig,
    plan_view,
    project_elevation,
    project_plan,
    project_scene,
)
from .takeoff import BillOfMaterials, MaterialLineItem, calculate_materials
from .validation import design_warnings

__all__ = [
    "BillOfMaterials",
    "DisplayList",
    "Dragging",
    "ElevationViewConfig",
    "GestureState",
    "Idle",
    "MaterialLineItem",
    "OrbitCamera",
    "PlacementEngine",
    "PlanViewConfig",
    "Rotating",
    "Scene",
    "SceneConfig",
    "calculate_materials",
    "default_id_factory",
    "design_warnings",
    "plan_view",
    "pointer_down",
    "pointer_leave",
    "pointer_move",
    "pointer_up",
    "project_elevation",
    "project_plan",
    "project_scene",
]
