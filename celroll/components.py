"""Components and the game objects that own them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum, IntEnum, auto
from typing import ClassVar

__all__ = [
    "ComponentType",
    "PHYSICS_COMPONENT_TYPES",
    "ObjectType",
    "Component",
    "GameObject",
]


class ComponentType(IntEnum):
    """Kinds of component; the order is the order in which they are updated."""

    TRANSFORM = 0
    COLLIDER = 1
    PHYSICS_MATERIAL = 2
    LIGHT_EMITTER = 3
    GRAVITY = 4
    RIGID_BODY = 5
    ANIMATION = 6
    RENDERER = 7


PHYSICS_COMPONENT_TYPES = frozenset(
    {ComponentType.GRAVITY, ComponentType.RIGID_BODY, ComponentType.ANIMATION}
)


class ObjectType(Enum):
    PLAYER = auto()
    PLATFORM = auto()
    DEATH_BOX = auto()
    STAR = auto()
    LIGHT = auto()
    CAMERA = auto()
    OTHER = auto()


class Component:
    """A piece of behaviour attached to a game object.

    Subclasses set ``component_type``; an object holds at most one component
    of each type.
    """

    component_type: ClassVar[ComponentType | None] = None

    def __init__(self) -> None:
        self.game_object: GameObject | None = None
        self.enabled = True

    def enable(self) -> None:
        self.enabled = True

    def disable(self) -> None:
        self.enabled = False

    def initialize(self) -> None:
        """Called once the component is attached to its game object."""

    def update(self, delta_time: float) -> None:
        """Advance the component by ``delta_time`` seconds."""


class GameObject(ABC):
    """An entity made of components, one per component type."""

    def __init__(self) -> None:
        self._components: dict[ComponentType, Component] = {}
        self._physics_components: list[Component] = []

    @property
    def components(self) -> list[Component]:
        """Attached components in component-type order."""
        return [self._components[ctype] for ctype in sorted(self._components)]

    def add_component(self, component: Component) -> None:
        ctype = component.component_type
        if ctype is None:
            raise TypeError(f"{type(component).__name__} declares no component type")
        self._components[ctype] = component
        component.game_object = self
        component.initialize()
        if ctype in PHYSICS_COMPONENT_TYPES:
            self._physics_components.append(component)

    def remove_component(self, component_type: ComponentType) -> None:
        """Detach the component of ``component_type``, if there is one."""
        component = self._components.pop(component_type, None)
        if component is None:
            return
        if component_type in PHYSICS_COMPONENT_TYPES:
            position = next(
                (
                    index
                    for index, candidate in enumerate(self._physics_components)
                    if candidate is component
                ),
                None,
            )
            if position is not None:
                del self._physics_components[position]
        component.game_object = None

    def get_component(self, component_type: ComponentType) -> Component | None:
        return self._components.get(component_type)

    def update_physics(self, delta_time: float) -> None:
        """Save the transform state, then step every enabled physics component."""
        transform = self.get_component(ComponentType.TRANSFORM)
        if transform is None:
            raise LookupError("game object has no transform component")
        transform.save_state()
        for component in list(self._physics_components):
            if component.enabled:
                component.update(delta_time)

    def render(self, alpha: float) -> None:
        renderer = self.get_component(ComponentType.RENDERER)
        if renderer is not None:
            renderer.update(alpha)

    @abstractmethod
    def object_type(self) -> ObjectType:
        """The kind of object this is."""