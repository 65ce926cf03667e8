"""
Command-line entry point for ferrux_projection

Builds a perspective projection matrix and prints it:
1. Load parameters from YAML (optional)
2. Apply command-line overrides
3. Validate and assemble the matrix
4. Print it row by row

Usage:
    python run.py
    python run.py --config configs/projection.yaml
    python run.py --config configs/projection.yaml --fov 60 --transpose
"""

import argparse
import sys
from pathlib import Path
from typing import Dict, Optional, List

import numpy as np
from omegaconf import OmegaConf

# Add project paths
PROJECT_ROOT = Path(__file__).parent
SRC_DIR = str(PROJECT_ROOT / "src")
if SRC_DIR not in sys.path:
    sys.path.insert(0, SRC_DIR)

from ferrux_projection import (
    ProjectionError,
    load_projection_config,
    make_projection_from_yaml,
)


# ============================================================================
# Configuration & Setup
# ============================================================================

def parse_args(argv: Optional[List[str]] = None):
    """Parse command line arguments"""
    parser = argparse.ArgumentParser(
        description="Perspective projection matrix builder",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run.py --fov 60 --width 1920 --height 1080
  python run.py --config configs/projection.yaml
  python run.py --config configs/projection.yaml --far 500 --transpose
        """
    )

    parser.add_argument(
        "--config", "-c",
        type=str,
        default=None,
        help="Path to YAML configuration file"
    )
    parser.add_argument("--near", type=float, default=None, help="Near clip distance")
    parser.add_argument("--far", type=float, default=None, help="Far clip distance")
    parser.add_argument("--fov", type=float, default=None, help="Field of view in degrees")
    parser.add_argument("--width", type=int, default=None, help="Viewport width in pixels")
    parser.add_argument("--height", type=int, default=None, help="Viewport height in pixels")
    parser.add_argument(
        "--transpose",
        action="store_true",
        help="Print the column-major (transposed) matrix"
    )

    return parser, parser.parse_args(argv)


def resolve_params(args) -> Dict:
    """Merge YAML parameters with command-line overrides"""
    if args.config is not None:
        cfg = load_projection_config(args.config)
    else:
        cfg = OmegaConf.create({})

    overrides = {
        key: getattr(args, key)
        for key in ("near", "far", "fov", "width", "height")
        if getattr(args, key) is not None
    }
    cfg = OmegaConf.merge(cfg, OmegaConf.create(overrides))

    return OmegaConf.to_container(cfg, resolve=True)


def format_matrix(matrix: np.ndarray) -> str:
    return "\n".join(
        "[" + ", ".join(f"{v: .6g}" for v in row) + "]"
        for row in matrix
    )


# ============================================================================
# Main
# ============================================================================

def main(argv: Optional[List[str]] = None) -> int:
    parser, args = parse_args(argv)
    params = resolve_params(args)

    try:
        config, proj = make_projection_from_yaml(params)
    except ProjectionError as e:
        parser.error(str(e))

    if args.transpose:
        proj = proj.T

    print(f"near={config.near} far={config.far} fov={config.fov} "
          f"size={config.width}x{config.height}")
    print(format_matrix(proj))
    return 0


if __name__ == "__main__":
    sys.exit(main())
