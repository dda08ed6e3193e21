"""Centralized configuration and palette definitions for Sathi Snake."""

from __future__ import annotations

import logging
import os

import pygame

logger = logging.getLogger(__name__)


def _env_int(name: str, default: int, minimum: int = 1) -> int:
    """Read a positive integer override from the environment."""

    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r: not an integer", name, raw)
        return default
    if value < minimum:
        logger.warning("Ignoring %s=%r: must be >= %d", name, raw, minimum)
        return default
    return value


def _env_flag(name: str) -> bool:
    return (os.getenv(name) or "").strip().lower() in {"1", "true", "yes", "on"}


def _env_log_level(name: str, default: int = logging.WARNING) -> int:
    """Resolve a level name such as ``INFO``; anything else keeps the default."""

    raw = (os.getenv(name) or "").strip().upper()
    if not raw:
        return default
    level = logging.getLevelName(raw)
    if not isinstance(level, int):
        logger.warning("Ignoring %s=%r: not a logging level", name, raw)
        return default
    return level


TILE_COUNT: int = _env_int("SATHI_SNAKE_TILE_COUNT", 13, minimum=4)
MOVES_PER_SECOND: int = _env_int("SATHI_SNAKE_SPEED", 5)
WINDOW_SIZE: int = _env_int("SATHI_SNAKE_WINDOW_SIZE", 560, minimum=200)
AUDIO_MUTED: bool = _env_flag("SATHI_SNAKE_MUTE")
LOG_LEVEL: int = _env_log_level("SATHI_SNAKE_LOG_LEVEL")

FPS: int = 120
MIN_BOARD: int = 260
BOARD_PADDING: int = 8
FONT_NAME: str = "consolas"
FONT_SIZE: int = 24
SMALL_FONT_SIZE: int = 18

BITE_DURATION_MS: float = 200.0
SWIPE_THRESHOLD: int = 24  # px before a drag counts as a swipe

BODY_WIDTH: float = 0.8  # fractions of a tile
HEAD_LENGTH: float = 1.0
HEAD_WIDTH: float = 0.9
NECK_SHRINK: float = 0.15
SHADOW_OFFSET: float = 0.08

PALETTE = {
    "board_light": pygame.Color(177, 221, 102),
    "board_dark": pygame.Color(163, 209, 89),
    "backdrop": pygame.Color(38, 54, 28),
    "body": pygame.Color(255, 79, 160),
    "head": pygame.Color(255, 130, 192),
    "head_outline": pygame.Color(0, 0, 0, 20),
    "shadow": pygame.Color(0, 0, 0, 76),
    "eye": pygame.Color(255, 255, 255),
    "pupil": pygame.Color(51, 51, 51),
    "apple_light": pygame.Color(255, 182, 182),
    "apple": pygame.Color(255, 59, 48),
    "apple_dark": pygame.Color(176, 18, 18),
    "leaf": pygame.Color(59, 91, 26),
    "text": pygame.Color(255, 255, 255),
    "hud": pygame.Color(20, 32, 12, 150),
    "overlay": pygame.Color(10, 18, 6, 160),
}

KEY_TO_DIRECTION = {
    pygame.K_UP: "UP",
    pygame.K_w: "UP",
    pygame.K_DOWN: "DOWN",
    pygame.K_s: "DOWN",
    pygame.K_LEFT: "LEFT",
    pygame.K_a: "LEFT",
    pygame.K_RIGHT: "RIGHT",
    pygame.K_d: "RIGHT",
}
RESTART_KEYS = (pygame.K_RETURN, pygame.K_SPACE, pygame.K_r)

TITLE = "Sathi Snake"
START_TEXT = (
    "Sathi Snake",
    "Swipe or use arrow keys to move",
    "the pink snake and eat the apples.",
)
GAME_OVER_TEXT = (
    "Game over",
    "Sathi's snake crashed.",
    "Tap or press Enter to play again.",
)
