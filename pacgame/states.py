"""Screens of the game: the menus, the pause screen and the end-of-level screens."""

from __future__ import annotations

import abc
import enum
import functools

import pygame

from .animation import Animation
from .button import Button

BACKGROUND = (0, 0, 0)
TITLE = "Pacman Project"
PAUSE_TITLE = "Little Breather"
FRAME_SIZE = 100

_TEXT_COLOR = (255, 255, 255)
_CHAR_WIDTH = 8
_FRAME_SPEED = 10


class Transition(str, enum.Enum):
    """Names of the screens a state can hand over to."""

    MENU = "Menu"
    CHOOSE = "Choose"
    GAME = "Game"
    BONUS_GAME = "GameStateBono"
    OVER = "over"
    PAUSE = "pause"
    WIN = "Win"
    WIN_BONUS = "WinBono"
    NEW_GAME = "NewGame"


@functools.lru_cache(maxsize=None)
def _font(size: int):
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.Font(None, size)


def draw_text(surface, text, x, baseline, color=_TEXT_COLOR) -> None:
    """Draw a line of text whose baseline sits at ``baseline``."""
    font = _font(16)
    surface.blit(font.render(text, False, color), (x, baseline - font.get_ascent()))


def draw_frame(surface, frame, x, y, size=FRAME_SIZE) -> None:
    """Draw an animation frame scaled to a square; missing frames are skipped."""
    if frame is None:
        return
    surface.blit(pygame.transform.scale(frame, (size, size)), (x, y))


def _centred_x(width, text) -> int:
    return width // 2 - (_CHAR_WIDTH // 2) * len(text)


class State(abc.ABC):
    """One screen of the game; it finishes by naming the screen that follows."""

    def __init__(self):
        self.finished = False
        self.next_state = None

    def finish(self, next_state) -> None:
        self.next_state = next_state
        self.finished = True

    def reset(self) -> None:
        self.finished = False
        self.next_state = None

    @abc.abstractmethod
    def tick(self) -> None:
        """Advance the screen by one frame."""

    @abc.abstractmethod
    def render(self, surface) -> None:
        """Draw the screen."""

    def key_pressed(self, key) -> None:
        """Keys do nothing unless a screen says otherwise."""

    def key_released(self, key) -> None:
        """Key releases do nothing unless a screen says otherwise."""

    def mouse_pressed(self, x, y, button) -> None:
        """Clicks do nothing unless a screen says otherwise."""


class _ButtonScreen(State):
    """A screen whose buttons each lead to another screen."""

    def __init__(self, screen_size, links):
        super().__init__()
        self.width, self.height = screen_size
        self.links = list(links)

    @property
    def buttons(self):
        return [button for button, _ in self.links]

    def tick(self) -> None:
        for button in self.buttons:
            button.tick()
        for button, target in self.links:
            if button.was_pressed():
                self.finish(target)

    def render(self, surface) -> None:
        for button in self.buttons:
            button.render(surface)

    def mouse_pressed(self, x, y, button) -> None:
        for item in self.buttons:
            item.mouse_pressed(x, y)

    def reset(self) -> None:
        super().reset()
        for button in self.buttons:
            button.reset()


class MenuState(_ButtonScreen):
    """The title screen with a single start button."""

    def __init__(self, screen_size, frames):
        width, height = screen_size
        self.start_button = Button(width // 2 - 32, height // 2, 64, 50, "Start")
        super().__init__(screen_size, [(self.start_button, Transition.CHOOSE)])
        self.animation = Animation(_FRAME_SPEED, frames)

    def tick(self) -> None:
        self.animation.tick()
        super().tick()

    def render(self, surface) -> None:
        surface.fill(BACKGROUND)
        draw_text(surface, TITLE, _centred_x(self.width, TITLE), self.height // 2 - 300)
        draw_frame(
            surface,
            self.animation.current_frame(),
            self.width // 2 - 50,
            self.height // 2 - 100,
        )
        super().render(surface)

    def mouse_pressed(self, x, y, button) -> None:
        super().mouse_pressed(x, y, button)

    def reset(self) -> None:
        super().reset()


class ChoosePlayerState(_ButtonScreen):
    """Lets the player pick the yellow or the green character."""

    def __init__(self, screen_size, yellow_frames, green_frames):
        width, height = screen_size
        self.yellow_button = Button(width // 2 + 200, height // 2, 64, 50, "Yellow Pacman")
        self.green_button = Button(width // 2 - 200, height // 2, 64, 50, "Green Pacman")
        super().__init__(
            screen_size,
            [(self.yellow_button, Transition.GAME), (self.green_button, Transition.GAME)],
        )
        self.yellow_animation = Animation(_FRAME_SPEED, yellow_frames)
        self.green_animation = Animation(_FRAME_SPEED, green_frames)
        self.yellow = True

    def tick(self) -> None:
        self.yellow_animation.tick()
        self.green_animation.tick()
        super().tick()
        if self.green_button.was_pressed():
            self.yellow = False
        elif self.yellow_button.was_pressed():
            self.yellow = True

    def render(self, surface) -> None:
        surface.fill(BACKGROUND)
        draw_text(surface, TITLE, _centred_x(self.width, TITLE), self.height // 2 - 300)
        top = self.height // 2 - 100
        draw_frame(surface, self.yellow_animation.current_frame(), self.width // 2 + 200, top)
        draw_frame(surface, self.green_animation.current_frame(), self.width // 2 - 200, top)
        super().render(surface)

    def mouse_pressed(self, x, y, button) -> None:
        super().mouse_pressed(x, y, button)

    def reset(self) -> None:
        super().reset()


class GameOverState(_ButtonScreen):
    """Shows the final score and offers to play again."""

    def __init__(self, screen_size, frames):
        width, height = screen_size
        self.start_button = Button(width // 2, height // 2, 64, 50, "Start")
        super().__init__(screen_size, [(self.start_button, Transition.GAME)])
        self.animation = Animation(_FRAME_SPEED, frames)
        self.score = 0

    def tick(self) -> None:
        self.animation.tick()
        super().tick()

    def render(self, surface) -> None:
        surface.fill(BACKGROUND)
        draw_text(surface, f"Score: {self.score}", self.width // 2, self.height // 2 - 300)
        draw_frame(
            surface, self.animation.current_frame(), self.width // 2, self.height // 2 - 100
        )
        super().render(surface)

    def mouse_pressed(self, x, y, button) -> None:
        super().mouse_pressed(x, y, button)

    def reset(self) -> None:
        super().reset()


class PauseState(_ButtonScreen):
    """Offers to resume the game or to quit to the menu."""

    def __init__(self, screen_size):
        width, height = screen_size
        self.resume_button = Button(width // 2 - 32, height // 2, 64, 50, "resume")
        self.quit_button = Button(width // 2 - 32, height // 2 - 170, 60, 50, "quit")
        super().__init__(
            screen_size,
            [(self.resume_button, Transition.GAME), (self.quit_button, Transition.MENU)],
        )

    def tick(self) -> None:
        super().tick()

    def render(self, surface) -> None:
        surface.fill(BACKGROUND)
        draw_text(
            surface, PAUSE_TITLE, _centred_x(self.width, PAUSE_TITLE), self.height // 2 - 300
        )
        super().render(surface)

    def mouse_pressed(self, x, y, button) -> None:
        super().mouse_pressed(x, y, button)

    def reset(self) -> None:
        super().reset()


class WinState(_ButtonScreen):
    """Shown after clearing the first level."""

    def __init__(self, screen_size):
        width, height = screen_size
        self.play_again_button = Button(width // 2 - 32, height // 2, 64, 50, "Play again")
        self.quit_button = Button(width // 2 - 32, height // 2 - 170, 60, 50, "quit")
        self.next_level_button = Button(width // 2 - 32, height // 2 + 170, 60, 50, "NextLevel")
        super().__init__(
            screen_size,
            [
                (self.play_again_button, Transition.NEW_GAME),
                (self.quit_button, Transition.MENU),
                (self.next_level_button, Transition.BONUS_GAME),
            ],
        )
        self.score = 0

    def tick(self) -> None:
        super().tick()

    def render(self, surface) -> None:
        surface.fill(BACKGROUND)
        draw_text(surface, f"Score: {self.score}", self.width // 2, self.height // 2 - 300)
        super().render(surface)

    def mouse_pressed(self, x, y, button) -> None:
        super().mouse_pressed(x, y, button)

    def reset(self) -> None:
        super().reset()


class WinStateBono(_ButtonScreen):
    """Shown after clearing the bonus level."""

    def __init__(self, screen_size):
        width, height = screen_size
        self.play_again_button = Button(
            width // 2 - 32, height // 2, 64, 50, "Play again from level 1"
        )
        self.quit_button = Button(width // 2 - 32, height // 2 - 170, 60, 50, "quit")
        super().__init__(
            screen_size,
            [(self.play_again_button, Transition.GAME), (self.quit_button, Transition.MENU)],
        )
        self.score = 0

    def tick(self) -> None:
        super().tick()

    def render(self, surface) -> None:
        surface.fill(BACKGROUND)
        draw_text(surface, f"Score: {self.score}", self.width // 2, self.height // 2 - 300)
        super().render(surface)

    def mouse_pressed(self, x, y, button) -> None:
        super().mouse_pressed(x, y, button)

    def reset(self) -> None:
        super().reset()