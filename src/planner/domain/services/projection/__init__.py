"""Read-only projections of a configuration model.

Each view is a pure function of the model plus its own view configuration:
- ``project_plan``: top-down plan as a DisplayList
- ``project_elevation``: front/back/side elevation as a DisplayList
- ``project_scene``: 3D solids in metres
"""

from .camera import OrbitCamera
from .display_list import Circle, DisplayList, Line, Polygon, Primitive, Rect, Text
from .elevation import ElevationViewConfig, project_elevation
from .plan import PlanView, PlanViewConfig, plan_view, project_plan
from .scene import Prism, Scene, SceneConfig, Solid, item_center, project_scene

__all__ = [
    "Circle",
    "DisplayList",
    "ElevationViewConfig",
    "Line",
    "OrbitCamera",
    "PlanView",
    "PlanViewConfig",
    "Polygon",
    "Primitive",
    "Prism",
    "Rect",
    "Scene",
    "SceneConfig",
    "Solid",
    "Text",
    "item_center",
    "plan_view",
    "project_elevation",
    "project_plan",
    "project_scene",
]
