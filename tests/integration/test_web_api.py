"""Integration tests for the REST API."""

import json

import pytest
from fastapi.testclient import TestClient

from planner.application.templates import TemplateManager
from planner.web.app import create_app


@pytest.fixture
def client() -> TestClient:
    return TestClient(create_app())


@pytest.fixture
def kitchen_config() -> dict:
    return json.loads(TemplateManager().get_template("kitchen-l-shape"))


@pytest.fixture
def garage_config() -> dict:
    return json.loads(TemplateManager().get_template("garage-standard-double"))


class TestHealth:
    def test_health(self, client: TestClient) -> None:
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}


class TestValidateEndpoint:
    """POST /api/v1/validate reports problems in the body instead of failing."""

    def test_valid_design(self, client: TestClient, kitchen_config: dict) -> None:
        response = client.post("/api/v1/validate", json={"config": kitchen_config})

        assert response.status_code == 200
        assert response.json() == {"is_valid": True, "errors": [], "warnings": []}

    def test_warnings(self, client: TestClient, kitchen_config: dict) -> None:
        kitchen_config["items"].append(
            {"id": "extra", "catalog_id": "base-24", "x": 36, "y": 0}
        )

        response = client.post("/api/v1/validate", json={"config": kitchen_config})

        body = response.json()
        assert response.status_code == 200
        assert body["is_valid"] is True
        assert any("overlap" in warning for warning in body["warnings"])

    def test_schema_errors(self, client: TestClient, kitchen_config: dict) -> None:
        kitchen_config["room"]["width"] = 0

        response = client.post("/api/v1/validate", json={"config": kitchen_config})

        body = response.json()
        assert response.status_code == 200
        assert body["is_valid"] is False
        assert body["errors"][0]["path"] == "room.width"


class TestMaterialsEndpoints:
    """Tests for the take-off endpoints."""

    def test_garage_take_off(self, client: TestClient, garage_config: dict) -> None:
        response = client.post("/api/v1/materials", json={"config": garage_config})

        body = response.json()
        assert response.status_code == 200
        assert body["line_items"][0]["category"] == "Foundation"
        assert list(body["category_totals"])[:2] == ["Foundation", "Framing"]
        assert body["total_cost"] == pytest.approx(sum(body["category_totals"].values()))

    def test_price_book(self, client: TestClient, kitchen_config: dict) -> None:
        response = client.post(
            "/api/v1/materials",
            json={"config": kitchen_config, "price_book": {"Cabinet Hinges": 4}},
        )

        hinges = next(
            line for line in response.json()["line_items"]
            if line["description"] == "Cabinet Hinges"
        )
        assert hinges["quantity"] == 32
        assert hinges["total_price"] == 128

    @pytest.mark.parametrize("path", ["/api/v1/materials", "/api/v1/materials/quote"])
    def test_negative_price_rejected(
        self, client: TestClient, garage_config: dict, path: str
    ) -> None:
        response = client.post(
            path,
            json={"config": garage_config, "price_book": {'4" Concrete Slab': -10}},
        )

        assert response.status_code == 422

    def test_invalid_design(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/materials", json={"config": {"schema_version": "1.0"}}
        )

        body = response.json()
        assert response.status_code == 422
        assert body["error_type"] == "validation"
        paths = {detail["path"] for detail in body["details"]}
        assert {"planner_type", "room"} <= paths

    def test_quote_payload(self, client: TestClient, kitchen_config: dict) -> None:
        response = client.post("/api/v1/materials/quote", json={"config": kitchen_config})

        body = response.json()
        assert response.status_code == 200
        assert body["config"]["planner_type"] == "kitchen"
        assert len(body["config"]["items"]) == 12
        assert body["config"]["items"][0]["item"]["kind"] == "cabinet"
        assert body["line_items"]


class TestProjectionEndpoints:
    """Tests for plan, elevation and scene endpoints."""

    def test_plan_svg(self, client: TestClient, kitchen_config: dict) -> None:
        response = client.post(
            "/api/v1/projections/plan",
            json={"config": kitchen_config, "pixels_per_inch": 2, "selected_id": "cab-2"},
        )

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("image/svg+xml")
        assert response.text.startswith('<svg width="328" height="376"')

    def test_plan_scale_bounds(self, client: TestClient, kitchen_config: dict) -> None:
        response = client.post(
            "/api/v1/projections/plan",
            json={"config": kitchen_config, "pixels_per_inch": 0},
        )

        assert response.status_code == 422

    def test_elevation_svg(self, client: TestClient, garage_config: dict) -> None:
        response = client.post(
            "/api/v1/projections/elevation",
            json={"config": garage_config, "wall": "back"},
        )

        assert response.status_code == 200
        assert "<title>Back Elevation</title>" in response.text

    def test_scene(self, client: TestClient, garage_config: dict) -> None:
        response = client.post("/api/v1/projections/scene", json={"config": garage_config})

        body = response.json()
        assert response.status_code == 200
        assert body["prisms"]
        assert body["camera"]["min_distance"] < body["camera"]["distance"]
        assert len(body["bounds"]) == 3

    def test_scene_without_structure(self, client: TestClient, kitchen_config: dict) -> None:
        response = client.post(
            "/api/v1/projections/scene",
            json={"config": kitchen_config, "include_structure": False},
        )

        body = response.json()
        assert body["prisms"] == []
        assert len(body["solids"]) == 12


class TestTemplateEndpoints:
    """Tests for the template endpoints."""

    def test_list(self, client: TestClient) -> None:
        response = client.get("/api/v1/templates")

        names = [t["name"] for t in response.json()["templates"]]
        assert response.status_code == 200
        assert len(names) == 6

    def test_list_by_type(self, client: TestClient) -> None:
        response = client.get("/api/v1/templates", params={"planner_type": "garage"})

        names = [t["name"] for t in response.json()["templates"]]
        assert all(name.startswith("garage-") for name in names)
        assert len(names) == 4

    def test_get(self, client: TestClient) -> None:
        response = client.get("/api/v1/templates/kitchen-blank")

        body = response.json()
        assert response.status_code == 200
        assert body["description"] == "Empty 12x14 kitchen"
        assert body["content"]["room"]["width"] == 12

    def test_get_unknown(self, client: TestClient) -> None:
        response = client.get("/api/v1/templates/barn")

        assert response.status_code == 404
        assert response.json()["error_type"] == "not_found"


class TestExportEndpoints:
    """Tests for the export endpoints."""

    def test_formats(self, client: TestClient) -> None:
        response = client.get("/api/v1/export/formats")

        assert response.json() == {"formats": ["bom", "dxf", "json", "stl", "svg"]}

    @pytest.mark.parametrize(
        "format_name,filename",
        [
            ("bom", "design.txt"),
            ("dxf", "design.dxf"),
            ("json", "design.json"),
            ("stl", "design.stl"),
            ("svg", "design.svg"),
        ],
    )
    def test_export(
        self, client: TestClient, garage_config: dict, format_name: str, filename: str
    ) -> None:
        response = client.post(f"/api/v1/export/{format_name}", json={"config": garage_config})

        assert response.status_code == 200
        assert response.headers["content-disposition"] == f"attachment; filename={filename}"
        assert response.content

    def test_unsupported_format(self, client: TestClient, garage_config: dict) -> None:
        response = client.post("/api/v1/export/obj", json={"config": garage_config})

        body = response.json()
        assert response.status_code == 400
        assert body["error_type"] == "unsupported_format"
        assert body["details"]["format"] == "obj"
