import pygame
import pytest

from sathi_snake.controls import InputTranslator, Intent, swipe_intent
from sathi_snake.grid import Direction


def key(code):
    return pygame.event.Event(pygame.KEYDOWN, key=code)


@pytest.mark.parametrize(
    "code, intent",
    [
        (pygame.K_UP, Intent.UP),
        (pygame.K_w, Intent.UP),
        (pygame.K_s, Intent.DOWN),
        (pygame.K_LEFT, Intent.LEFT),
        (pygame.K_d, Intent.RIGHT),
        (pygame.K_RETURN, Intent.START),
        (pygame.K_r, Intent.START),
    ],
)
def test_keys_map_to_intents(code, intent):
    assert InputTranslator((400, 400)).translate(key(code)) is intent


def test_unmapped_key_is_ignored():
    assert InputTranslator((400, 400)).translate(key(pygame.K_x)) is None


def test_intent_direction():
    assert Intent.LEFT.direction is Direction.LEFT
    assert Intent.START.direction is None


@pytest.mark.parametrize(
    "dx, dy, intent",
    [
        (80, 10, Intent.RIGHT),
        (-80, 30, Intent.LEFT),
        (5, 90, Intent.DOWN),
        (-20, -60, Intent.UP),
        (3, -4, Intent.START),
    ],
)
def test_swipe_dominant_axis(dx, dy, intent):
    assert swipe_intent(dx, dy) is intent


def test_finger_swipe_uses_window_scale():
    controls = InputTranslator((400, 400))
    down = pygame.event.Event(pygame.FINGERDOWN, x=0.5, y=0.5, finger_id=0)
    up = pygame.event.Event(pygame.FINGERUP, x=0.5, y=0.2, finger_id=0)
    assert controls.translate(down) is None
    assert controls.translate(up) is Intent.UP


def test_mouse_drag_and_click():
    controls = InputTranslator((400, 400))
    press = pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=(100, 100), button=1)
    release = pygame.event.Event(pygame.MOUSEBUTTONUP, pos=(200, 110), button=1)
    controls.translate(press)
    assert controls.translate(release) is Intent.RIGHT

    controls.translate(press)
    click = pygame.event.Event(pygame.MOUSEBUTTONUP, pos=(102, 101), button=1)
    assert controls.translate(click) is Intent.START


def test_release_without_press_does_nothing():
    controls = InputTranslator((400, 400))
    release = pygame.event.Event(pygame.MOUSEBUTTONUP, pos=(200, 110), button=1)
    assert controls.translate(release) is None


def test_touch_synthesised_mouse_events_are_skipped():
    controls = InputTranslator((400, 400))
    press = pygame.event.Event(
        pygame.MOUSEBUTTONDOWN, pos=(100, 100), button=1, touch=True
    )
    assert controls.translate(press) is None
    release = pygame.event.Event(pygame.MOUSEBUTTONUP, pos=(300, 100), button=1)
    assert controls.translate(release) is None
