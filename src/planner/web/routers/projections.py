"""Plan, elevation and 3D scene endpoints."""

from fastapi import APIRouter
from fastapi.responses import Response

from planner.domain.services.projection import (
    ElevationViewConfig,
    OrbitCamera,
    PlanViewConfig,
    SceneConfig,
    project_elevation,
    project_plan,
    project_scene,
)
from planner.infrastructure.exporters import render_svg
from planner.web.dependencies import design_from_payload
from planner.web.schemas.requests import ElevationRequest, PlanRequest, SceneRequest
from planner.web.schemas.responses import (
    CameraSchema,
    PrismSchema,
    SceneSchema,
    SolidSchema,
)

router = APIRouter(prefix="/projections", tags=["projections"])

SVG_MEDIA_TYPE = "image/svg+xml"


@router.post("/plan")
async def plan_svg(request: PlanRequest) -> Response:
    """Top-down plan as SVG."""
    model = design_from_payload(request.config)
    display = project_plan(
        model,
        PlanViewConfig(
            show_grid=request.show_grid,
            pixels_per_inch=request.pixels_per_inch,
            selected_id=request.selected_id,
        ),
    )
    return Response(content=render_svg(display), media_type=SVG_MEDIA_TYPE)


@router.post("/elevation")
async def elevation_svg(request: ElevationRequest) -> Response:
    """One wall's elevation as SVG."""
    model = design_from_payload(request.config)
    display = project_elevation(model, ElevationViewConfig(wall=request.wall))
    return Response(content=render_svg(display), media_type=SVG_MEDIA_TYPE)


@router.post("/scene", response_model=SceneSchema)
async def scene(request: SceneRequest) -> SceneSchema:
    """3D scene description in metres, Y up, for a browser viewer."""
    model = design_from_payload(request.config)
    result = project_scene(
        model,
        SceneConfig(
            include_structure=request.include_structure,
            include_roof=request.include_roof,
        ),
    )
    camera = OrbitCamera.for_planner(model.planner_type)
    return SceneSchema(
        solids=[
            SolidSchema(
                name=solid.name,
                center=solid.center.as_tuple(),
                size=solid.size,
                rotation_y=solid.rotation_y,
                color=solid.color,
                tag=solid.tag,
            )
            for solid in result.solids
        ],
        prisms=[
            PrismSchema(
                name=prism.name,
                vertices=[v.as_tuple() for v in prism.vertices],
                faces=list(prism.faces),
                color=prism.color,
            )
            for prism in result.prisms
        ],
        bounds=result.bounds,
        camera=CameraSchema(
            theta=camera.theta,
            phi=camera.phi,
            distance=camera.distance,
            min_distance=camera.min_distance,
            max_distance=camera.max_distance,
            position=camera.position().as_tuple(),
        ),
    )
