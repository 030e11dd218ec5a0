from pacgame.entities import Dot
from pacgame.entity_manager import EntityManager
from pacgame.game_map import GameMap
from pacgame.game_state import GameState
from pacgame.player import MAX_HEALTH, PICKUP_POINTS, Player
from pacgame.states import Transition


def build_map(dot_positions=((500, 500),)):
    manager = EntityManager()
    game_map = GameMap(manager)
    game_map.player = Player(100, 100, 16, 16, manager, None)
    for x, y in dot_positions:
        game_map.add_entity(Dot(x, y, 16, 16, None))
    return game_map


class FakeChannel:
    def __init__(self):
        self.busy = True

    def get_busy(self):
        return self.busy


class FakeSound:
    def __init__(self):
        self.plays = 0
        self.channel = FakeChannel()

    def play(self):
        self.plays += 1
        return self.channel


def test_running_level_does_not_finish():
    state = GameState(build_map())
    state.tick()
    assert state.finished is False
    assert state.next_state is None


def test_clearing_all_dots_wins():
    state = GameState(build_map(dot_positions=()))
    state.game_map.player.score = 40
    state.tick()
    assert state.finished is True
    assert state.next_state is Transition.WIN
    assert state.final_score == 40


def test_bonus_level_uses_its_win_state():
    state = GameState(build_map(dot_positions=()), Transition.WIN_BONUS)
    state.tick()
    assert state.next_state is Transition.WIN_BONUS


def test_eating_last_dot_wins_with_its_points():
    state = GameState(build_map(dot_positions=((100, 100),)))
    state.tick()
    assert state.finished is False
    state.tick()
    assert state.next_state is Transition.WIN
    assert state.final_score == PICKUP_POINTS


def test_running_out_of_lives_ends_the_game():
    state = GameState(build_map())
    player = state.game_map.player
    player.health = 0
    player.score = 70
    state.tick()
    assert state.next_state is Transition.OVER
    assert state.final_score == 70
    assert player.health == MAX_HEALTH
    assert player.score == 0


def test_pause_key():
    state = GameState(build_map())
    state.key_pressed("p")
    assert state.finished is True
    assert state.next_state is Transition.PAUSE


def test_skip_key_wins_with_current_score():
    state = GameState(build_map(), Transition.WIN_BONUS)
    state.game_map.player.score = 30
    state.key_pressed("y")
    assert state.next_state is Transition.WIN_BONUS
    assert state.final_score == 30


def test_keys_reach_the_player():
    state = GameState(build_map())
    state.key_pressed("n")
    assert state.game_map.player.health == MAX_HEALTH - 1
    assert state.finished is False


def test_reset_clears_finish():
    state = GameState(build_map())
    state.key_pressed("p")
    state.reset()
    assert state.finished is False
    assert state.next_state is None


def test_music_restarts_only_when_silent():
    sound = FakeSound()
    state = GameState(build_map(), Transition.WIN, sound)
    state.tick()
    state.tick()
    assert sound.plays == 1
    sound.channel.busy = False
    state.tick()
    assert sound.plays == 2