"""Bundled design templates (JSON package data)."""
