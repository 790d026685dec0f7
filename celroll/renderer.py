"""The component that draws a game object's mesh."""

from __future__ import annotations

from typing import Any, Callable, Sequence

import numpy as np

from celroll.components import Component, ComponentType
from celroll.rotation import InterpolatedTransform

__all__ = ["Renderer"]


class Renderer(Component):
    """Draws ``mesh`` with ``material`` at the interpolated transform.

    ``material.shader`` must provide ``set_mat4``, ``set_float`` and
    ``set_vec3``; ``mesh.draw(material)`` issues the draw. When
    ``offset_orientation`` is given it is called each frame and the drawn
    position is moved ``offset`` units against the direction it returns.
    """

    component_type = ComponentType.RENDERER

    def __init__(
        self,
        mesh: Any,
        material: Any,
        offset: float = 0.0,
        offset_orientation: Callable[[], Sequence[float]] | None = None,
    ) -> None:
        super().__init__()
        self.mesh = mesh
        self.material = material
        self.offset = offset
        self.offset_orientation = offset_orientation
        self.interpolated_transform: InterpolatedTransform | None = None
        self.float_properties: dict[str, float] = {}
        self.vec3_properties: dict[str, np.ndarray] = {}

    def initialize(self) -> None:
        transform = (
            self.game_object.get_component(ComponentType.TRANSFORM)
            if self.game_object is not None
            else None
        )
        if transform is None:
            raise ValueError("Renderer requires a Transform component")
        self.interpolated_transform = InterpolatedTransform(transform)

    def update(self, alpha: float) -> None:
        if self.mesh is None or self.interpolated_transform is None:
            raise RuntimeError("Renderer component is not properly initialized")

        interpolated = self.interpolated_transform
        interpolated.calculate_interpolation(alpha)

        if self.offset_orientation is not None:
            direction = np.asarray(self.offset_orientation(), dtype=float)[:3]
            interpolated.interpolated_position = (
                interpolated.interpolated_position - self.offset * direction
            )

        self.material.shader.set_mat4("model", interpolated.model_matrix())
        self.apply_custom_properties()
        self.mesh.draw(self.material)

    def apply_custom_properties(self) -> None:
        shader = self.material.shader
        for name, value in self.float_properties.items():
            shader.set_float(name, value)
        for name, value in self.vec3_properties.items():
            shader.set_vec3(name, value)

    def set_custom_float_property(self, name: str, value: float) -> None:
        self.float_properties[name] = float(value)

    def set_custom_vec3_property(self, name: str, value: Sequence[float]) -> None:
        self.vec3_properties[name] = np.array(value, dtype=float)[:3]