"""Textured raycasting maze explorer that plays .cub scene files."""

__version__ = "0.1.0"