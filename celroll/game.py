"""The main loop: fixed-step physics with interpolated rendering."""

from __future__ import annotations

import time
from typing import Callable, Protocol

from celroll.input import InputHandler, InputObserver

__all__ = ["TARGET_FRAME_TIME", "PHYSICS_TIME_STEP", "SceneLike", "Game"]

TARGET_FRAME_TIME = 1.0 / 240.0
PHYSICS_TIME_STEP = 1.0 / 60.0


class SceneLike(Protocol):
    player: InputObserver
    free_cam: InputObserver
    player_cam: InputObserver
    game_state: InputObserver

    def init(self) -> None: ...

    def update_physics(self, delta_time: float) -> None: ...

    def render(self, alpha: float, view_ratio: float) -> None: ...


class Game:
    """Drives a scene: input each frame, physics in fixed steps, then rendering."""

    def __init__(
        self,
        scene: SceneLike,
        initial_width: float,
        initial_height: float,
        clock: Callable[[], float] = time.perf_counter,
    ) -> None:
        self.scene = scene
        self.view_ratio = initial_width / initial_height
        self.input_handler = InputHandler()
        self._clock = clock
        self._last_frame_time: float | None = None
        self._accumulated_time = 0.0

        scene.init()
        for observer in (scene.player, scene.free_cam, scene.player_cam, scene.game_state):
            self.input_handler.add_observer(observer)

    def tick(self) -> None:
        frame_time = self._update_delta_time()
        self.input_handler.process_input(frame_time)
        accumulated = self.process_physics(frame_time)
        self.render_scene(accumulated)

    def process_physics(self, frame_time: float) -> float:
        """Run as many whole physics steps as time allows; return the leftover."""
        self._accumulated_time += frame_time
        while self._accumulated_time >= PHYSICS_TIME_STEP:
            self.scene.update_physics(PHYSICS_TIME_STEP)
            self._accumulated_time -= PHYSICS_TIME_STEP
        return self._accumulated_time

    def render_scene(self, accumulated_time: float) -> None:
        alpha = accumulated_time / PHYSICS_TIME_STEP
        self.scene.render(alpha, self.view_ratio)

    def set_view_ratio(self, width: int, height: int) -> None:
        self.view_ratio = float(width) / float(height)

    def _update_delta_time(self) -> float:
        now = self._clock()
        last = self._last_frame_time if self._last_frame_time is not None else now
        self._last_frame_time = now
        return now - last