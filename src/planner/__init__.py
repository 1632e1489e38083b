"""Parametric garage and kitchen planner: layout, projections and take-off."""

__version__ = "0.1.0"
