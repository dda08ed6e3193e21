import os
import random

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pytest  # noqa: E402

from sathi_snake.grid import Cell  # noqa: E402
from sathi_snake.session import GameSession  # noqa: E402
from sathi_snake.snake import SnakeState  # noqa: E402


class RecordingListener:
    def __init__(self):
        self.events = []

    def on_eat(self):
        self.events.append(("eat",))

    def on_game_over(self):
        self.events.append(("game_over",))

    def on_score(self, score):
        self.events.append(("score", score))

    def on_phase(self, phase):
        self.events.append(("phase", phase))


@pytest.fixture
def state():
    snake = SnakeState(tile_count=13, rng=random.Random(7))
    snake.reset()
    # Park the food in a corner so straight moves never eat it by accident.
    snake.food = Cell(12, 0)
    return snake


@pytest.fixture
def listener():
    return RecordingListener()


@pytest.fixture
def session(listener):
    game = GameSession(
        tile_count=13, steps_per_second=5, rng=random.Random(3), listeners=[listener]
    )
    game.start()
    game.state.food = Cell(12, 0)
    listener.events.clear()
    return game
