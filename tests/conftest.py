"""Pytest configuration and shared fixtures for planner tests."""

from __future__ import annotations

import itertools

import pytest

from planner.domain.entities import ConfigurationModel, Features, Opening, RoomSpec
from planner.domain.value_objects import OpeningType, PlannerType, StructureWall


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "integration: end-to-end tests through the CLI or the REST API"
    )
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


# =============================================================================
# Shared model fixtures
# =============================================================================


@pytest.fixture
def id_factory():
    """Deterministic id factory: cabinet-1, appliance-2, ..."""
    counter = itertools.count(1)
    return lambda prefix: f"{prefix}-{next(counter)}"


@pytest.fixture
def kitchen_model() -> ConfigurationModel:
    """Empty 12x14 kitchen with snapping off."""
    return ConfigurationModel(
        planner_type=PlannerType.KITCHEN,
        room=RoomSpec(width=12, length=14, height=8),
        name="Test Kitchen",
    )


@pytest.fixture
def garage_model() -> ConfigurationModel:
    """20x20 gable garage with one 16' overhead door and no optional features."""
    return ConfigurationModel(
        planner_type=PlannerType.GARAGE,
        room=RoomSpec(width=20, length=20, height=9, bays=2),
        features=Features(),
        openings=[
            Opening(
                id="door-1",
                opening_type=OpeningType.OVERHEAD_DOOR,
                width=16,
                height=7,
                wall=StructureWall.FRONT,
                offset_from_left=2,
            )
        ],
        name="Test Garage",
    )
