import pygame
import pytest

from pacgame.states import (
    BACKGROUND,
    ChoosePlayerState,
    GameOverState,
    MenuState,
    PauseState,
    State,
    Transition,
    WinState,
    WinStateBono,
)

SIZE = (1024, 768)
FRAMES = [None, None, None]
CENTRE_CLICK = (500, 400)
UPPER_CLICK = (500, 230)
LOWER_CLICK = (500, 570)


def click(state, pos):
    state.mouse_pressed(pos[0], pos[1], 1)
    state.tick()


def test_state_is_abstract():
    with pytest.raises(TypeError):
        State()


@pytest.mark.parametrize(
    "pos, name",
    [(CENTRE_CLICK, "NewGame"), (LOWER_CLICK, "GameStateBono")],
)
def test_win_transition_names_match_screen_names(pos, name):
    win = WinState(SIZE)
    click(win, pos)
    assert win.next_state.value == name


def test_menu_start_leads_to_choose():
    menu = MenuState(SIZE, FRAMES)
    click(menu, CENTRE_CLICK)
    assert menu.finished is True
    assert menu.next_state is Transition.CHOOSE


def test_menu_click_outside_does_nothing():
    menu = MenuState(SIZE, FRAMES)
    click(menu, (5, 5))
    assert menu.finished is False
    assert menu.next_state is None


def test_menu_keys_do_nothing():
    menu = MenuState(SIZE, FRAMES)
    menu.key_pressed("p")
    menu.tick()
    assert menu.finished is False


def test_reset_clears_finish_and_button():
    menu = MenuState(SIZE, FRAMES)
    click(menu, CENTRE_CLICK)
    menu.reset()
    assert menu.finished is False
    assert menu.next_state is None
    menu.tick()
    assert menu.finished is False


def test_choose_yellow():
    choose = ChoosePlayerState(SIZE, FRAMES, FRAMES)
    choose.yellow = False
    click(choose, (730, 400))
    assert choose.yellow is True
    assert choose.next_state is Transition.GAME
    assert choose.finished is True


def test_choose_green():
    choose = ChoosePlayerState(SIZE, FRAMES, FRAMES)
    click(choose, (330, 400))
    assert choose.yellow is False
    assert choose.next_state is Transition.GAME


def test_game_over_start_leads_to_game():
    over = GameOverState(SIZE, FRAMES)
    over.score = 120
    click(over, (530, 400))
    assert over.next_state is Transition.GAME
    assert over.score == 120


def test_pause_resume_and_quit():
    pause = PauseState(SIZE)
    click(pause, CENTRE_CLICK)
    assert pause.next_state is Transition.GAME
    pause.reset()
    click(pause, UPPER_CLICK)
    assert pause.next_state is Transition.MENU


@pytest.mark.parametrize(
    "pos, expected",
    [
        (CENTRE_CLICK, Transition.NEW_GAME),
        (UPPER_CLICK, Transition.MENU),
        (LOWER_CLICK, Transition.BONUS_GAME),
    ],
)
def test_win_buttons(pos, expected):
    win = WinState(SIZE)
    click(win, pos)
    assert win.finished is True
    assert win.next_state is expected


@pytest.mark.parametrize(
    "pos, expected",
    [(CENTRE_CLICK, Transition.GAME), (UPPER_CLICK, Transition.MENU)],
)
def test_win_bono_buttons(pos, expected):
    win = WinStateBono(SIZE)
    click(win, pos)
    assert win.next_state is expected


def test_win_bono_has_no_next_level_button():
    win = WinStateBono(SIZE)
    click(win, LOWER_CLICK)
    assert win.finished is False


def test_menu_render_clears_background():
    surface = pygame.Surface(SIZE)
    surface.fill((10, 10, 10))
    MenuState(SIZE, FRAMES).render(surface)
    assert tuple(surface.get_at((0, 0)))[:3] == BACKGROUND