"""Fluent builder for perspective projection matrices."""

from __future__ import annotations
from typing import Dict, Any, Optional
from dataclasses import dataclass, replace
import numpy as np

from .projection import (
    DEFAULT_NEAR,
    DEFAULT_FAR,
    DEFAULT_FOV,
    DEFAULT_WIDTH,
    DEFAULT_HEIGHT,
    build_perspective_matrix,
)
from ..utils.validation import validate_fov, InvalidParameterError


def _read_number(cfg: Dict[str, Any], key: str, default, kind=float):
    value = cfg.get(key, default)
    try:
        return kind(value)
    except (TypeError, ValueError) as e:
        raise InvalidParameterError(
            f"{key} must be {kind.__name__}, got {value!r}"
        ) from e


@dataclass(frozen=True)
class ProjectionConfig:
    """
    Projection parameters.

    Attributes:
        near: Near clip distance on the z axis
        far: Far clip distance on the z axis (checked against near at build time)
        fov: Full-angle field of view in degrees, in (0, 360)
        width: Viewport width (pixels)
        height: Viewport height (pixels)
    """
    near: float = DEFAULT_NEAR
    far: float = DEFAULT_FAR
    fov: float = DEFAULT_FOV
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT

    @classmethod
    def from_dict(cls, cfg: Dict[str, Any]) -> 'ProjectionConfig':
        """
        Create ProjectionConfig from dictionary, validating the field of view.

        Raises:
            InvalidParameterError: If a value is not a number (e.g. null or "abc")
            InvalidFieldOfViewError: If fov is not in (0, 360)
        """
        return cls(
            near=_read_number(cfg, 'near', DEFAULT_NEAR),
            far=_read_number(cfg, 'far', DEFAULT_FAR),
            fov=validate_fov(_read_number(cfg, 'fov', DEFAULT_FOV)),
            width=_read_number(cfg, 'width', DEFAULT_WIDTH, int),
            height=_read_number(cfg, 'height', DEFAULT_HEIGHT, int),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            'near': self.near,
            'far': self.far,
            'fov': self.fov,
            'width': self.width,
            'height': self.height,
        }


class ProjectionMatrixBuilder:
    """
    Builder to construct perspective projection matrices.

    Setters return the builder so calls can be chained; ``build`` leaves the
    configuration in place, so the builder can be adjusted and rebuilt.

    Example:
        >>> proj = (ProjectionMatrixBuilder()
        ...         .set_fov(60.0)
        ...         .set_far(500.0)
        ...         .build())
    """

    def __init__(self, config: Optional[ProjectionConfig] = None):
        self._config = config if config is not None else ProjectionConfig()

    @property
    def config(self) -> ProjectionConfig:
        return self._config

    def set_near(self, near: float) -> 'ProjectionMatrixBuilder':
        """Sets the near clip distance on the z axis."""
        self._config = replace(self._config, near=float(near))
        return self

    def set_far(self, far: float) -> 'ProjectionMatrixBuilder':
        """Sets the far clip distance on the z axis."""
        self._config = replace(self._config, far=float(far))
        return self

    # Names used by the original ferrux builder
    set_screen_position = set_near
    set_view_limit = set_far

    def set_fov(self, fov: float) -> 'ProjectionMatrixBuilder':
        """
        Sets the field of view in degrees.

        Raises:
            InvalidFieldOfViewError: If fov is not within the (0, 360) range
        """
        validate_fov(fov)
        self._config = replace(self._config, fov=float(fov))
        return self

    def set_width(self, width: int) -> 'ProjectionMatrixBuilder':
        """Sets the viewport width in pixels."""
        self._config = replace(self._config, width=int(width))
        return self

    def set_height(self, height: int) -> 'ProjectionMatrixBuilder':
        """Sets the viewport height in pixels."""
        self._config = replace(self._config, height=int(height))
        return self

    def copy(self) -> 'ProjectionMatrixBuilder':
        """Independent builder with the same configuration."""
        return ProjectionMatrixBuilder(self._config)

    def build(self) -> np.ndarray:
        """
        Builds the projection matrix from the current parameters.

        Returns:
            4x4 projection matrix (row-major, float32)

        Raises:
            InvalidClipRangeError: If far < near
        """
        cfg = self._config
        return build_perspective_matrix(cfg.near, cfg.far, cfg.fov, cfg.width, cfg.height)

    def __repr__(self) -> str:
        cfg = self._config
        return (f"ProjectionMatrixBuilder(near={cfg.near}, far={cfg.far}, fov={cfg.fov}, "
                f"width={cfg.width}, height={cfg.height})")
