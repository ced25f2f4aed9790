"""Packaged scan profile presets."""
