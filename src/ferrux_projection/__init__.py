"""
ferrux_projection - Perspective projection matrices

Builds the 4x4 matrix a renderer uses to take view-space coordinates
into clip space.

Components:
    - Camera: Projection builder, matrix assembly and config loading
    - Utils: Validation, conversion and debug helpers

Example:
    >>> from ferrux_projection import ProjectionMatrixBuilder
    >>>
    >>> proj = (ProjectionMatrixBuilder()
    ...         .set_width(1920)
    ...         .set_height(1080)
    ...         .set_fov(100.0)
    ...         .set_near(5.0)
    ...         .set_far(500.0)
    ...         .build())
    >>> proj.shape
    (4, 4)
"""

__version__ = "0.1.0"

# Camera
from .camera import (
    ProjectionConfig,
    ProjectionMatrixBuilder,
    build_perspective_matrix,
    assemble_projection_matrix,
    compute_aspect_ratio,
    compute_fov_scale,
    make_projection_from_yaml,
    load_projection_config,
)

# Utils
from .utils import (
    ProjectionError,
    InvalidFieldOfViewError,
    InvalidClipRangeError,
    InvalidParameterError,
    ensure_4x4_matrix,
    to_torch_tensor,
    to_numpy_array,
    debug_print,
    is_debug_enabled,
)

__all__ = [
    "__version__",

    # Camera
    "ProjectionConfig",
    "ProjectionMatrixBuilder",
    "build_perspective_matrix",
    "assemble_projection_matrix",
    "compute_aspect_ratio",
    "compute_fov_scale",
    "make_projection_from_yaml",
    "load_projection_config",

    # Utils
    "ProjectionError",
    "InvalidFieldOfViewError",
    "InvalidClipRangeError",
    "InvalidParameterError",
    "ensure_4x4_matrix",
    "to_torch_tensor",
    "to_numpy_array",
    "debug_print",
    "is_debug_enabled",
]
