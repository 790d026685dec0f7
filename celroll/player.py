"""The rolling ball the player controls."""

from __future__ import annotations

import logging
import math
from typing import Any, Callable, Iterable, Sequence

import numpy as np

from celroll.camera import Camera
from celroll.components import Component, ComponentType, GameObject, ObjectType
from celroll.input import Action, InputObserver
from celroll.platform import PlatformType
from celroll.renderer import Renderer
from celroll.rotation import Quaternion
from celroll.vector import cross_product, dot_product, norm, normalize

__all__ = ["PLAYER_SPAWN_POINT", "RespawnAnimation", "Player"]

logger = logging.getLogger(__name__)

PLAYER_SPAWN_POINT = np.zeros(3)

_CAMERA_DISTANCE = 10.0
_JUMP_STRENGTH = 10.0
_JUMP_LIFT = 0.1
_ROTATION_SPEED_FACTOR = 10.0
_ICE_SLIDE_FACTOR = 0.2
_RESPAWN_DURATION = 5.0

RespawnAnimation = Callable[[list, float, Callable[[], None]], Component]


class Player(GameObject, InputObserver):
    """The player's ball, steered relative to the camera.

    ``rigid_body`` must provide ``velocity``, ``is_grounded``,
    ``add_input_force(force, delta_time)``, ``init_values()`` and
    ``add_gravitational_source(source)``. ``respawn_animation(points,
    duration, on_end)`` builds the animation component that carries the
    ball back to the spawn point; without it the ball is placed there at once.
    """

    def __init__(
        self,
        camera: Camera,
        transform: Any,
        rigid_body: Component,
        gravity: Component,
        *,
        mesh: Any = None,
        material: Any = None,
        extra_components: Iterable[Component] = (),
        respawn_animation: RespawnAnimation | None = None,
    ) -> None:
        super().__init__()
        self.input_enabled = True
        self.camera = camera
        self.transform = transform
        self.rigid_body = rigid_body
        self.gravity = gravity
        self.current_surface_normal = np.zeros(4)
        self.is_on_death_routine = False
        self.movement_speed = 2.0
        self._respawn_animation = respawn_animation

        self.add_component(transform)
        self.renderer = Renderer(mesh, material)
        self.add_component(self.renderer)
        camera.set_target(self.renderer.interpolated_transform, _CAMERA_DISTANCE)

        rigid_body.disable()
        self.add_component(rigid_body)
        gravity.disable()
        self.add_component(gravity)
        for component in extra_components:
            self.add_component(component)

    def process_keyboard(self, action: Action, delta_time: float) -> None:
        if not self.input_enabled:
            return

        self.gravity.enable()
        self.rigid_body.enable()

        front, right = self.camera.front, self.camera.right
        front_xz = normalize([front[0], 0.0, front[2], 0.0])
        right_xz = normalize([right[0], 0.0, right[2], 0.0])
        input_force = self.movement_speed * 10.0

        direction = {
            Action.FORWARD: front_xz,
            Action.BACKWARD: -front_xz,
            Action.LEFT: -right_xz,
            Action.RIGHT: right_xz,
        }.get(action)
        force = np.zeros(4) if direction is None else direction * input_force

        if self.rigid_body.is_grounded:
            normal = self.current_surface_normal
            if action == Action.JUMP:
                self.transform.position = self.position() + normal * _JUMP_LIFT
                self.rigid_body.velocity = normal * _JUMP_STRENGTH
            adjusted = force - normal * float(np.dot(force, normal))
            force = np.array([adjusted[0], 0.0, adjusted[2], force[3]])

        self.rigid_body.add_input_force(force, delta_time)

    def render(self, alpha: float) -> None:
        super().render(alpha)
        self.camera.update_camera_vectors()

    def position(self) -> np.ndarray:
        return np.array(self.transform.position, dtype=float)

    def set_position(self, position: Sequence[float]) -> None:
        self.transform.position = np.append(np.asarray(position, dtype=float)[:3], 1.0)

    def handle_collision(
        self,
        other: GameObject,
        collision_normal: Sequence[float],
        penetration_depth: float,
        delta_time: float,
    ) -> None:
        """Bounce, slide or die on contact with ``other``."""
        if self.is_on_death_routine:
            return

        kind = other.object_type()
        if kind in (ObjectType.DEATH_BOX, ObjectType.STAR):
            self._death_routine()
            return

        other_transform = other.get_component(ComponentType.TRANSFORM)
        surface = other.get_component(ComponentType.PHYSICS_MATERIAL)
        if other_transform is None or surface is None:
            return

        normal = np.asarray(collision_normal, dtype=float)
        velocity = np.asarray(self.rigid_body.velocity, dtype=float)
        normal_component = dot_product(velocity, normal) * normal
        tangential_component = velocity - normal_component

        bounce_velocity = -normal_component * surface.bounciness
        friction_velocity = tangential_component * (1.0 - surface.friction)

        if kind == ObjectType.PLATFORM:
            self.rigid_body.velocity = bounce_velocity + friction_velocity
            if self.rigid_body.is_grounded and normal[1] > 0.7:
                self.current_surface_normal = normal.copy()
                self.update_rotation(delta_time, other.platform_type() == PlatformType.ICE)
        else:
            self.rigid_body.velocity = velocity - 2.0 * normal_component

        self.transform.position = self.position() + normal * (penetration_depth / 2.0)

    def set_grounded(self, is_grounded: bool) -> None:
        self.rigid_body.is_grounded = is_grounded

    def object_type(self) -> ObjectType:
        return ObjectType.PLAYER

    def update_rotation(self, delta_time: float, is_ice: bool = False) -> None:
        """Spin the ball to match how far it rolled this step."""
        velocity = np.asarray(self.rigid_body.velocity, dtype=float)
        speed = float(np.linalg.norm(velocity))
        if speed == 0.0:
            return
        axis = cross_product(velocity / speed, Camera.world_up())
        if norm(axis) <= 0.0:
            return

        distance = float(np.linalg.norm(velocity[:3])) * delta_time
        radius = float(np.asarray(self.transform.scale, dtype=float)[0])
        angle = -distance / (2.0 * math.pi * radius) * _ROTATION_SPEED_FACTOR
        if is_ice:
            angle *= _ICE_SLIDE_FACTOR

        delta = Quaternion.from_angle_axis(angle, axis[:3])
        self.transform.rotation = (delta * self.transform.rotation).normalized()

    def add_gravitational_source(self, source: Any) -> None:
        self.rigid_body.add_gravitational_source(source)

    def _death_routine(self) -> None:
        self.is_on_death_routine = True
        self.rigid_body.disable()
        self.gravity.disable()
        self.input_enabled = False

        if self._respawn_animation is None:
            self.set_position(PLAYER_SPAWN_POINT)
            self._finish_respawn()
            return

        relative_end = PLAYER_SPAWN_POINT - self.position()[:3]
        points = [
            np.array([0.0, 0.0, 0.0]),
            np.array([0.0, 10.0, 0.0]),
            np.array([0.0, 30.0, 0.0]),
            relative_end,
        ]
        animation = self._respawn_animation(points, _RESPAWN_DURATION, self._finish_respawn)
        self.add_component(animation)

    def _finish_respawn(self) -> None:
        self.is_on_death_routine = False
        self.input_enabled = True
        self.rigid_body.init_values()
        self.remove_component(ComponentType.ANIMATION)
        logger.info("Player respawned")