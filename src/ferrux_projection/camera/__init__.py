"""Camera projection system."""

from .utils import (
    compute_aspect_ratio,
    compute_fov_scale,
)
from .projection import (
    assemble_projection_matrix,
    build_perspective_matrix,
)
from .builder import ProjectionConfig, ProjectionMatrixBuilder
from .config import make_projection_from_yaml, load_projection_config

__all__ = [
    "compute_aspect_ratio",
    "compute_fov_scale",
    "assemble_projection_matrix",
    "build_perspective_matrix",
    "ProjectionConfig",
    "ProjectionMatrixBuilder",
    "make_projection_from_yaml",
    "load_projection_config",
]
