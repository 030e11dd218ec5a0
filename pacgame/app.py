"""The application: switches between screens and runs the main loop."""

from __future__ import annotations

import argparse
from pathlib import Path

import pygame

from .entities import crop_sprite
from .entity_manager import FRAME_RATE
from .game_state import GameState
from .map_builder import MapBuilder, load_map_pixels
from .states import (
    ChoosePlayerState,
    GameOverState,
    MenuState,
    PauseState,
    Transition,
    WinState,
    WinStateBono,
)

SCREEN_SIZE = (1024, 768)
WINDOW_TITLE = "Game Box"


class App:
    """Owns every screen and moves between them as each one finishes."""

    def __init__(self, states, new_game, new_bonus_game):
        self.states = dict(states)
        self.new_game = new_game
        self.game = new_game()
        self.bonus_game = new_bonus_game()
        self.volume = 1.0
        self.current = self.states[Transition.MENU]

    def update(self) -> None:
        self.current.tick()
        if not self.current.finished:
            return
        target = self.current.next_state
        if target is Transition.MENU:
            self.game = self.new_game()
            self.current = self.states[Transition.MENU]
        elif target is Transition.CHOOSE:
            self.current = self.states[Transition.CHOOSE]
        elif target is Transition.GAME:
            self.current = self.game
        elif target is Transition.BONUS_GAME:
            self.current = self.bonus_game
        elif target is Transition.OVER:
            self.states[Transition.OVER].score = self.game.final_score
            self.current = self.states[Transition.OVER]
        elif target is Transition.PAUSE:
            self.current = self.states[Transition.PAUSE]
        elif target is Transition.WIN:
            self.states[Transition.WIN].score = self.game.final_score
            self.current = self.states[Transition.WIN]
        elif target is Transition.WIN_BONUS:
            self.states[Transition.WIN].score = self.game.final_score
            self.current = self.states[Transition.WIN_BONUS]
        elif target is Transition.NEW_GAME:
            self.game = self.new_game()
            self.current = self.game
        self.current.reset()

    def draw(self, surface) -> None:
        self.current.render(surface)

    def key_pressed(self, key) -> None:
        """Keys go to the current screen; ``-`` mutes and ``=`` restores the sound."""
        self.current.key_pressed(key)
        if key == "-":
            self.volume = 0.0
        if key == "=":
            self.volume = 1.0

    def key_released(self, key) -> None:
        self.current.key_released(key)

    def mouse_pressed(self, x, y, button) -> None:
        self.current.mouse_pressed(x, y, button)


def _walk_frames(sheet):
    return [crop_sprite(sheet, i * 16, 0, 16, 16) for i in range(3)]


def main(argv=None):
    """Open the game window and run until it is closed."""
    parser = argparse.ArgumentParser(prog="pacgame", description="Play the maze game.")
    parser.add_argument(
        "--assets",
        type=Path,
        default=Path("."),
        help="directory holding the images/ and music/ folders",
    )
    args = parser.parse_args(argv)
    images = args.assets / "images"

    pygame.init()
    try:
        screen = pygame.display.set_mode(SCREEN_SIZE)
        pygame.display.set_caption(WINDOW_TITLE)
        sheet = pygame.image.load(str(images / "CustomSheet.png")).convert_alpha()
        yellow = pygame.image.load(str(images / "pacman.png")).convert_alpha()
        green = pygame.image.load(str(images / "Custompacman.png")).convert_alpha()
        chomp = None
        if pygame.mixer.get_init():
            chomp = pygame.mixer.Sound(str(args.assets / "music" / "pacman_chomp.wav"))

        builder = MapBuilder(sheet, green, SCREEN_SIZE)
        first_level = load_map_pixels(images / "map2.png")
        bonus_level = load_map_pixels(images / "CustomMap.png")

        def new_game():
            return GameState(builder.create_map(first_level), Transition.WIN, chomp)

        def new_bonus_game():
            return GameState(builder.create_map(bonus_level), Transition.WIN_BONUS, chomp)

        states = {
            Transition.MENU: MenuState(SCREEN_SIZE, _walk_frames(yellow)),
            Transition.CHOOSE: ChoosePlayerState(
                SCREEN_SIZE, _walk_frames(yellow), _walk_frames(green)
            ),
            Transition.OVER: GameOverState(SCREEN_SIZE, _walk_frames(yellow)),
            Transition.PAUSE: PauseState(SCREEN_SIZE),
            Transition.WIN: WinState(SCREEN_SIZE),
            Transition.WIN_BONUS: WinStateBono(SCREEN_SIZE),
        }
        app = App(states, new_game, new_bonus_game)

        clock = pygame.time.Clock()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    app.key_pressed(pygame.key.name(event.key))
                elif event.type == pygame.KEYUP:
                    app.key_released(pygame.key.name(event.key))
                elif event.type == pygame.MOUSEBUTTONDOWN:
                    x, y = event.pos
                    app.mouse_pressed(x, y, event.button)
            if chomp is not None:
                chomp.set_volume(app.volume)
            app.update()
            app.draw(screen)
            pygame.display.flip()
            clock.tick(FRAME_RATE)
    finally:
        pygame.quit()
    return 0