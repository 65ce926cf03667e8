"""Projection configuration parser."""

from __future__ import annotations
from typing import Tuple, Dict, Any, Union
from pathlib import Path
import numpy as np
from omegaconf import OmegaConf, DictConfig

from .builder import ProjectionConfig, ProjectionMatrixBuilder

# Keys used by the original ferrux builder
KEY_ALIASES = {
    "near": "screen_position",
    "far": "view_limit",
}


def _normalize_keys(cfg: Dict[str, Any]) -> Dict[str, Any]:
    out = dict(cfg)
    for key, alias in KEY_ALIASES.items():
        if alias in out:
            value = out.pop(alias)
            out.setdefault(key, value)
    return out


def make_projection_from_yaml(
    projection_cfg: Union[Dict[str, Any], DictConfig, None]
) -> Tuple[ProjectionConfig, np.ndarray]:
    """
    Build a projection matrix from a configuration mapping.

    This is the main entry point for creating projection matrices from
    parameters loaded from a YAML config file.

    Args:
        projection_cfg: Mapping with optional keys:
            - near, far: Clip distances (float, default: 0.0, 1000.0)
              'screen_position' / 'view_limit' are accepted as aliases;
              the primary key wins if both are given
            - fov: Field of view in degrees (float, default: 90.0)
            - width, height: Viewport size in pixels (int, default: 1280, 720)

    Returns:
        Tuple of:
            - config (ProjectionConfig): The resolved parameters
            - proj_matrix (4x4 float32): Row-major projection matrix

    Raises:
        InvalidFieldOfViewError: If fov is not in (0, 360)
        InvalidClipRangeError: If far < near

    Example:
        >>> config = {"fov": 60.0, "near": 0.1, "far": 100.0,
        ...           "width": 1920, "height": 1080}
        >>> cfg, proj = make_projection_from_yaml(config)
    """
    if projection_cfg is None:
        projection_cfg = {}
    if isinstance(projection_cfg, DictConfig):
        projection_cfg = OmegaConf.to_container(projection_cfg, resolve=True)

    config = ProjectionConfig.from_dict(_normalize_keys(projection_cfg))
    proj = ProjectionMatrixBuilder(config).build()

    return config, proj


def load_projection_config(path: Union[str, Path]) -> DictConfig:
    """
    Load projection parameters from a YAML file.

    If the file has a top-level 'projection' section, only that section
    is returned; otherwise the whole file is treated as the parameters.
    """
    cfg = OmegaConf.load(str(path))
    if "projection" in cfg:
        return cfg.projection
    return cfg
