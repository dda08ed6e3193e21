"""Discrete snake rules: one grid cell per step, walls and self are fatal."""

from __future__ import annotations

import logging
import random
from enum import Enum

from .config import BITE_DURATION_MS, TILE_COUNT
from .food import place_food
from .grid import Cell, Direction, in_bounds

logger = logging.getLogger(__name__)


class StepResult(Enum):
    CONTINUED = "continued"
    ATE = "ate"
    COLLIDED = "collided"


class Phase(Enum):
    NOT_STARTED = "not_started"
    RUNNING = "running"
    GAME_OVER = "game_over"


class SnakeState:
    """Owns the snake body, heading, food, score, phase and bite timer."""

    def __init__(
        self, tile_count: int = TILE_COUNT, rng: random.Random | None = None
    ) -> None:
        self.tile_count = tile_count
        self.rng = rng if rng is not None else random.Random()
        self.phase = Phase.NOT_STARTED
        self._layout()

    def _layout(self) -> None:
        """Lay out a fresh three-segment snake heading right."""
        start_x = self.tile_count // 4
        start_y = self.tile_count // 2
        self.body: list[Cell] = [
            Cell(start_x, start_y),
            Cell(start_x - 1, start_y),
            Cell(start_x - 2, start_y),
        ]
        self.previous: list[Cell] = list(self.body)
        self.direction = Direction.RIGHT
        self.score = 0
        self.bite_ms = 0.0
        self.food = place_food(self.body, self.tile_count, self.rng)

    def reset(self) -> None:
        """Reinitialise everything and enter the running phase."""
        self._layout()
        self.phase = Phase.RUNNING

    @property
    def head(self) -> Cell:
        return self.body[0]

    def resolve_direction(self, requested: Direction) -> Direction:
        """Apply the reversal guard against the current heading."""
        if requested.reverses(self.direction):
            return self.direction
        return requested

    def step(self, requested: Direction) -> StepResult:
        """Advance exactly one cell towards ``requested``."""
        if self.phase is not Phase.RUNNING:
            raise RuntimeError(f"cannot step while {self.phase.value}")

        self.previous = list(self.body)
        self.direction = self.resolve_direction(requested)
        new_head = self.head.shifted(self.direction)

        # The tail has not moved yet, so it still blocks the new head.
        if not in_bounds(new_head, self.tile_count) or new_head in self.body:
            self.phase = Phase.GAME_OVER
            self.bite_ms = 0.0
            logger.info("Snake crashed at %s with score %d", new_head, self.score)
            return StepResult.COLLIDED

        self.body.insert(0, new_head)
        if new_head == self.food:
            self.score += 1
            self.bite_ms = BITE_DURATION_MS
            self.food = place_food(self.body, self.tile_count, self.rng)
            return StepResult.ATE

        self.body.pop()
        return StepResult.CONTINUED

    def decay_bite(self, elapsed_ms: float) -> None:
        """Count the mouth-open timer down; it never grows back."""
        if self.bite_ms > 0 and elapsed_ms > 0:
            self.bite_ms = max(0.0, self.bite_ms - elapsed_ms)
