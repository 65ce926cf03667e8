"""Common utilities for projection matrices."""

from .conversion import (
    ensure_4x4_matrix,
    to_torch_tensor,
    to_numpy_array,
)
from .validation import (
    ProjectionError,
    InvalidFieldOfViewError,
    InvalidClipRangeError,
    InvalidParameterError,
    validate_fov,
    validate_clip_range,
)
from .debug import (
    is_debug_enabled,
    debug_print,
    debug_matrix_info,
    get_matrix_stats,
)

__all__ = [
    # Conversion
    "ensure_4x4_matrix",
    "to_torch_tensor",
    "to_numpy_array",

    # Validation
    "ProjectionError",
    "InvalidFieldOfViewError",
    "InvalidClipRangeError",
    "InvalidParameterError",
    "validate_fov",
    "validate_clip_range",

    # Debug
    "is_debug_enabled",
    "debug_print",
    "debug_matrix_info",
    "get_matrix_stats",
]
