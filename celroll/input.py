"""Keyboard and mouse input dispatch to observers."""

from __future__ import annotations

from enum import Enum, IntEnum, auto
from typing import Callable

__all__ = [
    "Action",
    "Key",
    "KeyAction",
    "MouseButton",
    "InputObserver",
    "InputHandler",
]


class Action(Enum):
    FORWARD = auto()
    BACKWARD = auto()
    LEFT = auto()
    RIGHT = auto()
    JUMP = auto()
    PAUSE = auto()
    EAGLE_VIEW = auto()


class Key(IntEnum):
    """Key codes as reported by the windowing layer."""

    SPACE = 32
    A = 65
    D = 68
    E = 69
    P = 80
    S = 83
    W = 87


class KeyAction(IntEnum):
    RELEASE = 0
    PRESS = 1
    REPEAT = 2


class MouseButton(IntEnum):
    LEFT = 0
    RIGHT = 1
    MIDDLE = 2


class InputObserver:
    """Receiver of input events; subclasses override the handlers they need."""

    input_enabled: bool = True
    last_mouse_movement: tuple[float, float] | None = None
    last_mouse_button: tuple[int, int] | None = None

    def process_keyboard(self, action: Action, delta_time: float) -> None:
        """Handle a keyboard action; does nothing unless overridden."""

    def process_mouse_movement(self, dx: float, dy: float) -> None:
        """Remember the latest mouse drag; override to react to it."""
        self.last_mouse_movement = (dx, dy)

    def process_mouse_button(self, button: int, action: int) -> None:
        """Remember the latest mouse button event; override to react to it."""
        self.last_mouse_button = (button, action)


class InputHandler:
    """Tracks key and mouse state and forwards it to enabled observers."""

    _MOVEMENT_KEYS = {
        Key.W: Action.FORWARD,
        Key.A: Action.LEFT,
        Key.S: Action.BACKWARD,
        Key.D: Action.RIGHT,
    }
    _TRIGGER_KEYS = {
        Key.SPACE: Action.JUMP,
        Key.P: Action.PAUSE,
        Key.E: Action.EAGLE_VIEW,
    }

    def __init__(self) -> None:
        self.observers: list[InputObserver] = []
        self._held: set[int] = set()
        self._left_button_pressed = False
        self._last_cursor = (0.0, 0.0)

    def add_observer(self, observer: InputObserver) -> None:
        self.observers.append(observer)

    def process_input(self, delta_time: float) -> None:
        """Report every held movement key for this frame."""
        for key, action in self._MOVEMENT_KEYS.items():
            if key in self._held:
                self._notify_keyboard(action, delta_time)

    def key_callback(self, key: int, action: int) -> None:
        if key in self._MOVEMENT_KEYS:
            if action != KeyAction.RELEASE:
                self._held.add(int(key))
            else:
                self._held.discard(int(key))

        trigger = self._TRIGGER_KEYS.get(key)
        if trigger is not None and action == KeyAction.PRESS:
            self._notify_keyboard(trigger)

    def cursor_pos_callback(self, xpos: float, ypos: float) -> None:
        if not self._left_button_pressed:
            return
        last_x, last_y = self._last_cursor
        self._notify_mouse_movement(xpos - last_x, ypos - last_y)
        self._last_cursor = (xpos, ypos)

    def mouse_button_callback(
        self,
        button: int,
        action: int,
        get_cursor_pos: Callable[[], tuple[float, float]],
    ) -> None:
        """Start or stop drag tracking; ``get_cursor_pos`` returns the cursor position."""
        if button != MouseButton.LEFT:
            return
        if action == KeyAction.PRESS:
            x, y = get_cursor_pos()
            self._last_cursor = (float(x), float(y))
            self._left_button_pressed = True
        elif action == KeyAction.RELEASE:
            self._left_button_pressed = False

    def _enabled_observers(self):
        return (observer for observer in self.observers if observer.input_enabled)

    def _notify_keyboard(self, action: Action, delta_time: float = 0.0) -> None:
        for observer in self._enabled_observers():
            observer.process_keyboard(action, delta_time)

    def _notify_mouse_movement(self, dx: float, dy: float) -> None:
        for observer in self._enabled_observers():
            observer.process_mouse_movement(dx, dy)