import random

import pygame
import pytest

from sathi_snake import game as game_module
from sathi_snake.config import GAME_OVER_TEXT, START_TEXT
from sathi_snake.controls import Intent
from sathi_snake.grid import Cell, Direction
from sathi_snake.session import GameSession
from sathi_snake.snake import Phase


@pytest.fixture
def app(monkeypatch):
    monkeypatch.setattr(game_module, "AUDIO_MUTED", True)
    window = game_module.SathiSnake()
    # Seeded session so food placement is repeatable.
    window.session = GameSession(
        tile_count=13, rng=random.Random(5), listeners=(window.audio, window)
    )
    yield window
    pygame.quit()


def test_opens_on_the_start_overlay(app):
    assert app.session.phase is Phase.NOT_STARTED
    assert app.overlay_lines == START_TEXT
    assert app.board_rect.width == app.board_rect.height


def test_direction_while_idle_starts_round_and_queues_turn(app):
    app._apply_intent(Intent.UP)
    assert app.session.phase is Phase.RUNNING
    assert app.overlay_lines == ()
    assert app.session.next_direction is Direction.UP


def test_reversing_key_while_idle_starts_but_is_dropped(app):
    app._apply_intent(Intent.LEFT)
    assert app.session.phase is Phase.RUNNING
    assert app.session.next_direction is Direction.RIGHT


def test_start_is_ignored_while_running(app):
    app._apply_intent(Intent.START)
    app.session.state.food = Cell(12, 0)
    app.session.tick(400)
    head = app.session.state.head
    app._apply_intent(Intent.START)
    assert app.session.phase is Phase.RUNNING
    assert app.session.state.head == head


def test_start_restarts_after_game_over(app):
    app._apply_intent(Intent.START)
    app.session.state.food = Cell(12, 0)
    app.session.tick(200 * 20)
    assert app.session.phase is Phase.GAME_OVER
    assert app.overlay_lines == GAME_OVER_TEXT

    app._apply_intent(Intent.START)
    assert app.session.phase is Phase.RUNNING
    assert app.session.score == 0
    assert app.overlay_lines == ()
    assert app.score_text == "0"


def test_score_hud_follows_eating(app):
    app._apply_intent(Intent.START)
    app.session.state.food = Cell(4, 6)
    app.session.tick(200)
    assert app.score_text == "1"


def test_draw_survives_every_phase(app):
    app.draw(0.0)
    app._apply_intent(Intent.START)
    app.session.tick(100)
    app.draw(app.session.fraction)
    app.session.tick(200 * 20)
    app.draw(app.session.fraction)
