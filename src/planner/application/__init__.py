"""Application layer - design files, templates and the planner session."""
