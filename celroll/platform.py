"""Platforms the player rolls on."""

from __future__ import annotations

from enum import Enum, auto
from typing import Any

import numpy as np

from celroll.components import Component, ComponentType, GameObject, ObjectType
from celroll.renderer import Renderer
from celroll.rotation import Quaternion

__all__ = ["DEFAULT_SIZE", "PlatformType", "Platform", "IcePlatform", "JumpPlatform"]

DEFAULT_SIZE = np.array([10.0, 1.0, 5.0])


class PlatformType(Enum):
    NORMAL = auto()
    ICE = auto()
    JUMP = auto()


class _PhysicsMaterial(Component):
    component_type = ComponentType.PHYSICS_MATERIAL

    def __init__(self, friction: float, bounciness: float) -> None:
        super().__init__()
        self.friction = friction
        self.bounciness = bounciness


class Platform(GameObject):
    """A box-shaped surface with friction and bounciness.

    The collision box spans ``half_extents`` on each side of the centre;
    it is axis aligned when the transform carries no rotation.
    """

    def __init__(
        self,
        transform: Any,
        material_name: str = "default",
        bounciness: float = 0.0,
        friction: float = 0.1,
        is_opaque: bool = True,
        *,
        mesh: Any = None,
        material: Any = None,
    ) -> None:
        super().__init__()
        self.transform = transform
        self.material_name = material_name
        self.bounciness = bounciness
        self.friction = friction
        self.is_opaque = is_opaque

        self.add_component(transform)
        if mesh is not None:
            self.add_component(Renderer(mesh, material))

        scale = np.asarray(transform.scale, dtype=float)[:3]
        self.half_extents = DEFAULT_SIZE * scale
        self.axis_aligned = transform.rotation == Quaternion()

        self.add_component(_PhysicsMaterial(friction, bounciness))

    def object_type(self) -> ObjectType:
        return ObjectType.PLATFORM

    def platform_type(self) -> PlatformType:
        return PlatformType.NORMAL


class IcePlatform(Platform):
    """A slippery platform."""

    def __init__(self, transform: Any, *, mesh: Any = None, material: Any = None) -> None:
        super().__init__(transform, "ice", 0.0, 0.001, False, mesh=mesh, material=material)

    def platform_type(self) -> PlatformType:
        return PlatformType.ICE


class JumpPlatform(Platform):
    """A bouncy platform."""

    def __init__(self, transform: Any, *, mesh: Any = None, material: Any = None) -> None:
        super().__init__(transform, "tiles", 0.8, 0.1, mesh=mesh, material=material)

    def platform_type(self) -> PlatformType:
        return PlatformType.JUMP