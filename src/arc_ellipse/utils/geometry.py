"""Geometry helpers shared by the ellipse operations."""

import math
from typing import Sequence, Tuple, Union

import numpy as np

TORAD = math.pi / 180.0

LinearMap = Tuple[float, float, float, float]


def rotate_vector(x: float, y: float, angle_deg: float) -> Tuple[float, float]:
    """Rotate the vector ``(x, y)`` about the origin by ``angle_deg`` degrees."""
    theta = angle_deg * TORAD
    cos_t = math.cos(theta)
    sin_t = math.sin(theta)
    return x * cos_t - y * sin_t, x * sin_t + y * cos_t


def as_linear_map(m: Union[Sequence[float], np.ndarray]) -> LinearMap:
    """Return ``m`` as a flat column-major ``(m0, m1, m2, m3)`` tuple.

    ``m`` is either four numbers in column-major order or a ``(2, 2)`` array
    laid out as ``[[m0, m2], [m1, m3]]``.
    """
    arr = np.asarray(m, dtype=np.float64)
    if arr.shape == (2, 2):
        return (
            float(arr[0, 0]),
            float(arr[1, 0]),
            float(arr[0, 1]),
            float(arr[1, 1]),
        )
    if arr.shape == (4,):
        return float(arr[0]), float(arr[1]), float(arr[2]), float(arr[3])
    raise ValueError(
        f"Expected 4 column-major values or a 2x2 matrix, got shape {arr.shape}."
    )


__all__ = ["TORAD", "LinearMap", "rotate_vector", "as_linear_map"]
