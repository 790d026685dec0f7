"""Pause and camera-view state of the running game."""

from __future__ import annotations

from celroll.input import Action, InputObserver

__all__ = ["GameState"]


class GameState(InputObserver):
    """Routes input to the player or the free camera depending on the view."""

    def __init__(
        self, free_cam: InputObserver, player_cam: InputObserver, player: InputObserver
    ) -> None:
        self.free_cam = free_cam
        self.player_cam = player_cam
        self.player = player
        self._is_paused = False
        self._is_eagle_view = False
        self._enable_player_view()

    @property
    def is_paused(self) -> bool:
        return self._is_paused

    @property
    def is_eagle_view(self) -> bool:
        return self._is_eagle_view

    def process_keyboard(self, action: Action, delta_time: float) -> None:
        if action == Action.PAUSE:
            self._is_paused = not self._is_paused
            if self._is_paused:
                self._disable_controls()
            else:
                self._apply_view()
        elif action == Action.EAGLE_VIEW:
            self._is_eagle_view = not self._is_eagle_view
            self._apply_view()

    def _apply_view(self) -> None:
        if self._is_eagle_view:
            self._enable_eagle_view()
        else:
            self._enable_player_view()

    def _set_controls(self, free_cam: bool, player_cam: bool, player: bool) -> None:
        self.free_cam.input_enabled = free_cam
        self.player_cam.input_enabled = player_cam
        self.player.input_enabled = player

    def _disable_controls(self) -> None:
        self._set_controls(False, False, False)

    def _enable_eagle_view(self) -> None:
        self._set_controls(True, False, False)

    def _enable_player_view(self) -> None:
        self._set_controls(False, True, True)