"""Type conversion utilities."""

from __future__ import annotations
from typing import Union
import numpy as np


def to_numpy_array(
    x: Union[np.ndarray, "torch.Tensor", list],
    dtype: np.dtype = np.float32
) -> np.ndarray:
    """
    Convert input to NumPy array.

    Args:
        x: Input (numpy array, torch tensor, or nested list)
        dtype: Target dtype

    Returns:
        NumPy array
    """
    if hasattr(x, 'detach'):  # torch.Tensor
        return x.detach().cpu().numpy().astype(dtype)
    else:
        return np.asarray(x, dtype=dtype)


def ensure_4x4_matrix(m) -> np.ndarray:
    """
    Coerce a projection matrix to a (4, 4) float32 array.

    Flat input of 16 values is read in row-major order, so
    ``ensure_4x4_matrix(P.ravel())`` gives back ``P``.

    Args:
        m: 4x4 array, nested list, torch tensor, or 16 flat values

    Returns:
        (4, 4) float32 array

    Raises:
        ValueError: If input does not hold exactly 4x4 values
    """
    M = to_numpy_array(m)

    if M.shape == (16,):
        M = M.reshape(4, 4)
    elif M.shape != (4, 4):
        raise ValueError(
            f"Projection matrix must be 4x4 or 16 flat values, got shape {M.shape}"
        )

    return M


def to_torch_tensor(
    x: Union[np.ndarray, "torch.Tensor", list],
    device: str = "cpu",
    dtype: "torch.dtype" = None,
    transpose: bool = False
):
    """
    Convert a projection matrix to a PyTorch tensor.

    Args:
        x: Input (numpy array, torch tensor, nested list, or 16 flat values)
        device: Target device
        dtype: Target dtype (default: torch.float32)
        transpose: Return the column-major layout expected by most rasterizers

    Returns:
        (4, 4) PyTorch tensor on specified device

    Raises:
        ValueError: If input does not hold exactly 4x4 values
    """
    import torch

    if dtype is None:
        dtype = torch.float32

    if isinstance(x, torch.Tensor) and x.shape == (4, 4):
        tensor = x.to(dtype)
    else:
        tensor = torch.as_tensor(ensure_4x4_matrix(x), dtype=dtype)

    if transpose:
        tensor = tensor.transpose(0, 1).contiguous()

    if device and tensor.device != torch.device(device):
        tensor = tensor.to(device)

    return tensor
