"""Geometry helpers used by the ellipse operations."""

from .geometry import TORAD, LinearMap, as_linear_map, rotate_vector

__all__ = ["TORAD", "LinearMap", "as_linear_map", "rotate_vector"]
