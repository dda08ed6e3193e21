"""Translate keyboard, touch and pointer events into game intents."""

from __future__ import annotations

from enum import Enum

import pygame

from .config import KEY_TO_DIRECTION, RESTART_KEYS, SWIPE_THRESHOLD
from .grid import Direction


class Intent(Enum):
    UP = "UP"
    DOWN = "DOWN"
    LEFT = "LEFT"
    RIGHT = "RIGHT"
    START = "START"

    @property
    def direction(self) -> Direction | None:
        if self is Intent.START:
            return None
        return Direction(self.value)


def swipe_intent(dx: float, dy: float, threshold: float = SWIPE_THRESHOLD) -> Intent:
    """Dominant axis wins; a short drag is a tap and means START."""
    if max(abs(dx), abs(dy)) < threshold:
        return Intent.START
    if abs(dx) > abs(dy):
        return Intent.RIGHT if dx > 0 else Intent.LEFT
    return Intent.DOWN if dy > 0 else Intent.UP


class InputTranslator:
    """Stateful event mapper; remembers where a touch or drag began."""

    def __init__(self, window_size: tuple[int, int]) -> None:
        self.window_size = window_size
        self._press_start: tuple[float, float] | None = None

    def _finger_pos(self, event: pygame.event.Event) -> tuple[float, float]:
        # Finger coordinates are normalised to the window.
        width, height = self.window_size
        return event.x * width, event.y * height

    def _begin(self, pos: tuple[float, float]) -> None:
        self._press_start = pos

    def _end(self, pos: tuple[float, float]) -> Intent | None:
        if self._press_start is None:
            return None
        sx, sy = self._press_start
        self._press_start = None
        return swipe_intent(pos[0] - sx, pos[1] - sy)

    def translate(self, event: pygame.event.Event) -> Intent | None:
        if event.type == pygame.KEYDOWN:
            if event.key in RESTART_KEYS:
                return Intent.START
            name = KEY_TO_DIRECTION.get(event.key)
            return Intent(name) if name else None

        if event.type == pygame.FINGERDOWN:
            self._begin(self._finger_pos(event))
        elif event.type == pygame.FINGERUP:
            return self._end(self._finger_pos(event))
        elif getattr(event, "touch", False):
            # Mouse events synthesised from touches are already handled above.
            return None
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self._begin(event.pos)
        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            return self._end(event.pos)
        return None
