"""Projection parameter validation."""

from __future__ import annotations


FOV_MIN = 0.0
FOV_MAX = 360.0


class ProjectionError(ValueError):
    """Base class for invalid projection parameters."""


class InvalidFieldOfViewError(ProjectionError):
    """Field of view outside the open interval (0, 360) degrees."""


class InvalidClipRangeError(ProjectionError):
    """Far clip closer than near clip."""


class InvalidParameterError(ProjectionError):
    """Parameter that cannot be read as a number."""


def validate_fov(fov: float) -> float:
    """
    Check a field of view in degrees.

    Args:
        fov: Full-angle field of view (degrees)

    Returns:
        The value, unchanged

    Raises:
        InvalidFieldOfViewError: If fov is not strictly between 0 and 360
    """
    if not (FOV_MIN < fov < FOV_MAX):
        raise InvalidFieldOfViewError(
            f"The field of view must be a positive value between {FOV_MIN} and {FOV_MAX}, got {fov}"
        )
    return fov


def validate_clip_range(near: float, far: float):
    """
    Check that the viewing volume has non-negative depth.

    Raises:
        InvalidClipRangeError: If far < near
    """
    if far < near:
        raise InvalidClipRangeError(
            f"far clip ({far}) must be greater than or equal to near clip ({near})"
        )
