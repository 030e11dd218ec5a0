"""Frame-based sprite animation."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


class Animation:
    """Cycles through a list of frames, advancing one frame every ``speed + 1`` ticks."""

    def __init__(self, speed: int, frames: Iterable[Any]) -> None:
        self.frames = list(frames)
        if not self.frames:
            raise ValueError("an animation needs at least one frame")
        self.speed = speed
        self.index = 0
        self.timer = 0

    def tick(self) -> None:
        """Advance the animation clock by one game tick."""
        self.timer += 1
        if self.timer > self.speed:
            self.timer = 0
            self.index = (self.index + 1) % len(self.frames)

    def current_frame(self) -> Any:
        """Return the frame currently shown."""
        return self.frames[self.index]