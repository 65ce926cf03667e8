"""Debug utilities."""

from __future__ import annotations
from typing import Tuple
import os

import numpy as np

DEBUG_ENV_VAR = "FERRUX_DEBUG"


def is_debug_enabled() -> bool:
    """Check if debug mode is enabled via environment variable."""
    return os.environ.get(DEBUG_ENV_VAR, "0").lower() not in ("0", "", "false")


def debug_print(*args, **kwargs):
    """Print debug message if debug mode is enabled."""
    if is_debug_enabled():
        print(*args, **kwargs)


def get_matrix_stats(matrix: np.ndarray) -> Tuple[int, int]:
    """
    Count non-zero and non-finite entries of a matrix.

    Returns:
        (nonzero, nonfinite)
    """
    m = np.asarray(matrix)
    return int(np.count_nonzero(m)), int(m.size - np.count_nonzero(np.isfinite(m)))


def debug_matrix_info(name: str, matrix: np.ndarray):
    """Print debug information about a matrix."""
    if is_debug_enabled():
        nonzero, nonfinite = get_matrix_stats(matrix)
        print(f"[{name}] shape={tuple(matrix.shape)} dtype={matrix.dtype} "
              f"nonzero={nonzero} nonfinite={nonfinite}")
        if nonfinite:
            print(f"[{name}] warning: matrix contains NaN or Inf")
