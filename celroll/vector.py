"""Operations on homogeneous 4-component vectors."""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np

__all__ = ["norm", "normalize", "cross_product", "dot_product"]


def _as_vec4(v: Sequence[float]) -> np.ndarray:
    arr = np.asarray(v, dtype=float)
    if arr.shape != (4,):
        raise ValueError(f"expected a 4-component vector, got shape {arr.shape}")
    return arr


def norm(v: Sequence[float]) -> float:
    """Euclidean length of the x, y, z part."""
    x, y, z, _ = _as_vec4(v)
    return math.sqrt(x * x + y * y + z * z)


def normalize(v: Sequence[float]) -> np.ndarray:
    arr = _as_vec4(v)
    return arr / norm(arr)


def cross_product(u: Sequence[float], v: Sequence[float]) -> np.ndarray:
    """Cross product of the x, y, z parts, returned as a direction (w = 0)."""
    a, b = _as_vec4(u), _as_vec4(v)
    return np.array(
        [
            a[1] * b[2] - a[2] * b[1],
            a[2] * b[0] - a[0] * b[2],
            a[0] * b[1] - a[1] * b[0],
            0.0,
        ]
    )


def dot_product(u: Sequence[float], v: Sequence[float]) -> float:
    """Scalar product of two directions; points (w != 0) are rejected."""
    a, b = _as_vec4(u), _as_vec4(v)
    if a[3] != 0.0 or b[3] != 0.0:
        raise ValueError("scalar product is not defined for points")
    return float(a[0] * b[0] + a[1] * b[1] + a[2] * b[2])