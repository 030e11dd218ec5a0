"""The playing screen for one level."""

from __future__ import annotations

from .player import MAX_HEALTH
from .states import State, Transition


class GameState(State):
    """Runs a level until the player runs out of lives or clears every dot."""

    def __init__(self, game_map, win_state=Transition.WIN, music=None):
        super().__init__()
        self.game_map = game_map
        self.win_state = win_state
        self.music = music
        self.final_score = 0
        self._channel = None

    @property
    def player(self):
        return self.game_map.player

    def _keep_music_playing(self) -> None:
        if self.music is None:
            return
        if self._channel is None or not self._channel.get_busy():
            self._channel = self.music.play()

    def tick(self) -> None:
        self._keep_music_playing()
        self.game_map.tick()
        if self.player.health == 0:
            self.finish(Transition.OVER)
            self.player.health = MAX_HEALTH
            self.final_score = self.player.score
            self.player.score = 0
        if self.game_map.dots_remaining() == 0:
            self.finish(self.win_state)
            self.final_score = self.player.score

    def render(self, surface) -> None:
        self.game_map.render(surface)

    def key_pressed(self, key) -> None:
        """Keys go to the level; ``p`` pauses and ``y`` skips straight to the win screen."""
        self.game_map.key_pressed(key)
        if key == "p":
            self.finish(Transition.PAUSE)
        if key == "y":
            self.finish(self.win_state)
            self.final_score = self.player.score

    def mouse_pressed(self, x, y, button) -> None:
        self.game_map.mouse_pressed(x, y, button)

    def key_released(self, key) -> None:
        self.game_map.key_released(key)

    def reset(self) -> None:
        super().reset()