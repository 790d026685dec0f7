"""A camera that either flies freely or orbits a target."""

from __future__ import annotations

import math
from typing import Any, Protocol, Sequence

import numpy as np

from celroll.components import GameObject, ObjectType
from celroll.input import Action, InputObserver
from celroll.matrix import matrix
from celroll.renderer import Renderer
from celroll.rotation import Quaternion
from celroll.vector import cross_product, dot_product, normalize

__all__ = ["CameraTarget", "Camera"]

_PITCH_LIMIT = math.radians(89.0)
_DEFAULT_FRONT = np.array([0.0, 0.0, -1.0, 0.0])
_ORIGIN = np.array([0.0, 0.0, 0.0, 1.0])
_RENDER_OFFSET = 1.0


class CameraTarget(Protocol):
    def position(self) -> np.ndarray: ...


class Camera(GameObject, InputObserver):
    """A camera driven by yaw and pitch angles.

    ``transform`` is the transform component the camera moves; its
    ``position`` is a homogeneous point. When ``mesh`` is given the camera
    is also drawn, one unit behind where it looks.
    """

    def __init__(
        self,
        transform: Any,
        yaw: float = 0.0,
        pitch: float = 0.0,
        *,
        mesh: Any = None,
        material: Any = None,
    ) -> None:
        super().__init__()
        self.input_enabled = True
        self.yaw = math.radians(yaw)
        self.pitch = math.radians(pitch)
        self.front = _DEFAULT_FRONT.copy()
        self.right = np.zeros(4)
        self.distance = 0.0
        self.movement_speed = 4.5
        self.mouse_sensitivity = 0.5
        self.is_free_cam = True
        self.target: CameraTarget | None = None

        self.transform = transform
        self.add_component(transform)
        if mesh is not None:
            self.add_component(
                Renderer(mesh, material, _RENDER_OFFSET, lambda: self.front)
            )

        self.update_camera_vectors()

    @staticmethod
    def world_up() -> np.ndarray:
        return np.array([0.0, 1.0, 0.0, 0.0])

    def set_target(self, target: CameraTarget, distance: float) -> None:
        """Orbit ``target`` at ``distance`` instead of flying freely."""
        self.target = target
        self.transform.position = target.position() - normalize(self.front) * distance
        self.distance = distance
        self.is_free_cam = False
        self.update_camera_vectors()

    def position(self) -> np.ndarray:
        return np.array(self.transform.position, dtype=float)

    def view_matrix(self) -> np.ndarray:
        w = -self.front
        u = cross_product(self.world_up(), w)
        w = normalize(w)
        u = normalize(u)
        v = cross_product(w, u)
        offset = self.position() - _ORIGIN
        return matrix(
            u[0], u[1], u[2], dot_product(-u, offset),
            v[0], v[1], v[2], dot_product(-v, offset),
            w[0], w[1], w[2], dot_product(-w, offset),
            0.0, 0.0, 0.0, 1.0,
        )

    def process_keyboard(self, action: Action, delta_time: float) -> None:
        if not self.is_free_cam:
            self.update_camera_vectors()
            return

        velocity = self.movement_speed * delta_time
        movement = {
            Action.FORWARD: self.front * velocity,
            Action.BACKWARD: -self.front * velocity,
            Action.LEFT: -self.right * velocity,
            Action.RIGHT: self.right * velocity,
        }.get(action)
        if movement is not None:
            self.transform.position = self.position() + movement

    def process_mouse_movement(self, dx: float, dy: float) -> None:
        self.yaw -= 0.01 * dx * self.mouse_sensitivity
        self.pitch += 0.01 * dy * self.mouse_sensitivity
        self.pitch = min(max(self.pitch, -_PITCH_LIMIT), _PITCH_LIMIT)
        self.update_camera_vectors()

    def update_camera_vectors(self) -> None:
        """Recompute orientation, front and right (and position when orbiting)."""
        pitch_quat = Quaternion.from_angle_axis(self.pitch, (1.0, 0.0, 0.0))
        yaw_quat = Quaternion.from_angle_axis(self.yaw, (0.0, 1.0, 0.0))
        orientation = yaw_quat * pitch_quat
        self.transform.rotation = orientation

        front = orientation.rotate(_DEFAULT_FRONT)

        if self.is_free_cam or self.target is None:
            self.front = front
        else:
            target_position = np.asarray(self.target.position(), dtype=float)
            self.transform.position = target_position - self.distance * front
            self.front = normalize(target_position - self.position())
        self.right = normalize(cross_product(self.front, self.world_up()))

    def object_type(self) -> ObjectType:
        return ObjectType.CAMERA