"""Projection term helpers."""

from __future__ import annotations
import numpy as np


def compute_aspect_ratio(width: int, height: int) -> np.float32:
    """
    Viewport aspect ratio (width / height) in single precision.

    A zero height is not rejected: the result is inf (or nan for 0/0).
    """
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        return np.float32(width) / np.float32(height)


def compute_fov_scale(fov: float) -> np.float32:
    """
    Cotangent of half the field of view.

    For a full-angle fov in degrees:
        fov_scale = 1 / tan(fov/2 * pi/180)

    Args:
        fov: Field of view (degrees)

    Returns:
        fov_scale as float32
    """
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        half_fov_rad = np.float32(fov) * np.float32(0.5) * np.float32(np.pi / 180.0)
        return np.float32(1.0) / np.tan(half_fov_rad)
