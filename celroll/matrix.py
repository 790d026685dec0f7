"""4x4 homogeneous transformation matrices.

Matrices are ``numpy`` arrays indexed as ``m[row, column]``.
"""

from __future__ import annotations

import math

import numpy as np

__all__ = [
    "matrix",
    "identity_matrix",
    "translate_matrix",
    "scale_matrix",
    "rotate_x_matrix",
    "rotate_y_matrix",
    "rotate_z_matrix",
    "transpose_homogeneous",
    "orthographic_matrix",
    "perspective_matrix",
]


def matrix(*args: float) -> np.ndarray:
    """Build a 4x4 matrix from 16 values given row by row."""
    if len(args) != 16:
        raise ValueError(f"a 4x4 matrix needs 16 values, got {len(args)}")
    return np.array(args, dtype=float).reshape(4, 4)


def identity_matrix() -> np.ndarray:
    return matrix(
        1.0, 0.0, 0.0, 0.0,
        0.0, 1.0, 0.0, 0.0,
        0.0, 0.0, 1.0, 0.0,
        0.0, 0.0, 0.0, 1.0,
    )


def translate_matrix(tx: float, ty: float, tz: float) -> np.ndarray:
    return matrix(
        1.0, 0.0, 0.0, tx,
        0.0, 1.0, 0.0, ty,
        0.0, 0.0, 1.0, tz,
        0.0, 0.0, 0.0, 1.0,
    )


def scale_matrix(sx: float, sy: float, sz: float) -> np.ndarray:
    return matrix(
        sx, 0.0, 0.0, 0.0,
        0.0, sy, 0.0, 0.0,
        0.0, 0.0, sz, 0.0,
        0.0, 0.0, 0.0, 1.0,
    )


def rotate_x_matrix(angle: float) -> np.ndarray:
    c, s = math.cos(angle), math.sin(angle)
    return matrix(
        1.0, 0.0, 0.0, 0.0,
        0.0, c, -s, 0.0,
        0.0, s, c, 0.0,
        0.0, 0.0, 0.0, 1.0,
    )


def rotate_y_matrix(angle: float) -> np.ndarray:
    c, s = math.cos(angle), math.sin(angle)
    return matrix(
        c, 0.0, s, 0.0,
        0.0, 1.0, 0.0, 0.0,
        -s, 0.0, c, 0.0,
        0.0, 0.0, 0.0, 1.0,
    )


def rotate_z_matrix(angle: float) -> np.ndarray:
    c, s = math.cos(angle), math.sin(angle)
    return matrix(
        c, -s, 0.0, 0.0,
        s, c, 0.0, 0.0,
        0.0, 0.0, 1.0, 0.0,
        0.0, 0.0, 0.0, 1.0,
    )


def transpose_homogeneous(m: np.ndarray) -> np.ndarray:
    """Transpose only the upper-left 3x3 block of ``m``."""
    source = np.asarray(m, dtype=float)
    result = source.copy()
    result[:3, :3] = source[:3, :3].T
    return result


def orthographic_matrix(
    left: float, right: float, bottom: float, top: float, z_near: float, z_far: float
) -> np.ndarray:
    return matrix(
        2.0 / (right - left), 0.0, 0.0, -(right + left) / (right - left),
        0.0, 2.0 / (top - bottom), 0.0, -(top + bottom) / (top - bottom),
        0.0, 0.0, 2.0 / (z_far - z_near), -(z_far + z_near) / (z_far - z_near),
        0.0, 0.0, 0.0, 1.0,
    )


def perspective_matrix(
    field_of_view: float, aspect: float, z_near: float, z_far: float
) -> np.ndarray:
    """Perspective projection for a camera looking down -z (negative near/far)."""
    t = abs(z_near) * math.tan(field_of_view / 2.0)
    b = -t
    r = t * aspect
    l = -r

    projection = matrix(
        z_near, 0.0, 0.0, 0.0,
        0.0, z_near, 0.0, 0.0,
        0.0, 0.0, z_near + z_far, -z_far * z_near,
        0.0, 0.0, 1.0, 0.0,
    )
    ortho = orthographic_matrix(l, r, b, t, z_near, z_far)
    return -ortho @ projection