"""Quaternions and the render-time interpolation of a transform."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Sequence

import numpy as np

from celroll.matrix import scale_matrix, translate_matrix

__all__ = ["Quaternion", "slerp", "InterpolatedTransform"]

_FLOAT_EPSILON = 1.1920929e-07


@dataclass(frozen=True)
class Quaternion:
    """Rotation quaternion ``w + xi + yj + zk``; the default is the identity."""

    w: float = 1.0
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @staticmethod
    def identity() -> Quaternion:
        return Quaternion()

    @staticmethod
    def from_angle_axis(angle: float, axis: Sequence[float]) -> Quaternion:
        """Rotation by ``angle`` radians about ``axis`` (expected to be unit length)."""
        ax, ay, az = (float(c) for c in list(axis)[:3])
        s = math.sin(angle / 2.0)
        return Quaternion(math.cos(angle / 2.0), ax * s, ay * s, az * s)

    def __mul__(self, other: Quaternion) -> Quaternion:
        if not isinstance(other, Quaternion):
            return NotImplemented
        w1, x1, y1, z1 = self.w, self.x, self.y, self.z
        w2, x2, y2, z2 = other.w, other.x, other.y, other.z
        return Quaternion(
            w1 * w2 - x1 * x2 - y1 * y2 - z1 * z2,
            w1 * x2 + x1 * w2 + y1 * z2 - z1 * y2,
            w1 * y2 - x1 * z2 + y1 * w2 + z1 * x2,
            w1 * z2 + x1 * y2 - y1 * x2 + z1 * w2,
        )

    def __neg__(self) -> Quaternion:
        return Quaternion(-self.w, -self.x, -self.y, -self.z)

    def dot(self, other: Quaternion) -> float:
        return self.w * other.w + self.x * other.x + self.y * other.y + self.z * other.z

    def length(self) -> float:
        return math.sqrt(self.dot(self))

    def normalized(self) -> Quaternion:
        length = self.length()
        if length <= 0.0:
            return Quaternion()
        return Quaternion(self.w / length, self.x / length, self.y / length, self.z / length)

    def rotate(self, v: Sequence[float]) -> np.ndarray:
        """Rotate the x, y, z part of ``v``; a fourth component passes through."""
        arr = np.asarray(v, dtype=float)
        if arr.shape not in ((3,), (4,)):
            raise ValueError(f"expected 3 or 4 components, got shape {arr.shape}")
        vec = arr[:3]
        u = np.array([self.x, self.y, self.z])
        uv = np.cross(u, vec)
        uuv = np.cross(u, uv)
        rotated = vec + 2.0 * (self.w * uv + uuv)
        if arr.shape == (4,):
            return np.append(rotated, arr[3])
        return rotated

    def to_matrix(self) -> np.ndarray:
        """The 4x4 homogeneous rotation matrix of this quaternion."""
        w, x, y, z = self.w, self.x, self.y, self.z
        return np.array(
            [
                [1 - 2 * (y * y + z * z), 2 * (x * y - w * z), 2 * (x * z + w * y), 0.0],
                [2 * (x * y + w * z), 1 - 2 * (x * x + z * z), 2 * (y * z - w * x), 0.0],
                [2 * (x * z - w * y), 2 * (y * z + w * x), 1 - 2 * (x * x + y * y), 0.0],
                [0.0, 0.0, 0.0, 1.0],
            ]
        )


def _blend(a: float, q1: Quaternion, b: float, q2: Quaternion) -> Quaternion:
    return Quaternion(
        a * q1.w + b * q2.w,
        a * q1.x + b * q2.x,
        a * q1.y + b * q2.y,
        a * q1.z + b * q2.z,
    )


def slerp(q1: Quaternion, q2: Quaternion, alpha: float) -> Quaternion:
    """Spherical interpolation along the shortest arc from ``q1`` to ``q2``."""
    cos_theta = q1.dot(q2)
    target = q2
    if cos_theta < 0.0:
        target = -q2
        cos_theta = -cos_theta

    if cos_theta > 1.0 - _FLOAT_EPSILON:
        return _blend(1.0 - alpha, q1, alpha, target)

    angle = math.acos(cos_theta)
    sin_angle = math.sin(angle)
    return _blend(
        math.sin((1.0 - alpha) * angle) / sin_angle,
        q1,
        math.sin(alpha * angle) / sin_angle,
        target,
    )


class InterpolatedTransform:
    """A transform blended between its previous and current physics states.

    The base transform must provide ``previous_position``, ``position``,
    ``previous_scale``, ``previous_rotation`` and ``rotation``.
    """

    def __init__(self, base_transform: Any) -> None:
        self.base_transform = base_transform
        self.interpolated_position = np.zeros(3)
        self.interpolated_scale = np.zeros(3)
        self.interpolated_rotation = Quaternion()

    def position(self) -> np.ndarray:
        return np.append(self.interpolated_position, 1.0)

    def calculate_interpolation(self, alpha: float) -> None:
        base = self.base_transform
        previous = np.asarray(base.previous_position, dtype=float)[:3]
        current = np.asarray(base.position, dtype=float)[:3]
        self.interpolated_position = previous * (1.0 - alpha) + current * alpha
        self.interpolated_scale = np.array(base.previous_scale, dtype=float)[:3]
        self.interpolated_rotation = slerp(base.previous_rotation, base.rotation, alpha)

    def model_matrix(self) -> np.ndarray:
        px, py, pz = self.interpolated_position
        sx, sy, sz = self.interpolated_scale
        return (
            translate_matrix(px, py, pz)
            @ self.interpolated_rotation.to_matrix()
            @ scale_matrix(sx, sy, sz)
        )