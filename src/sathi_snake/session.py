"""Game session: fixed-step driver around the snake rules."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Protocol, Sequence

from .clock import SimulationClock
from .config import MOVES_PER_SECOND, TILE_COUNT
from .grid import Cell, Direction
from .snake import Phase, SnakeState, StepResult

logger = logging.getLogger(__name__)


class SessionListener(Protocol):
    """Side-effect hooks; none of them can feed back into the simulation."""

    def on_eat(self) -> None: ...

    def on_game_over(self) -> None: ...

    def on_score(self, score: int) -> None: ...

    def on_phase(self, phase: Phase) -> None: ...


@dataclass(frozen=True, slots=True)
class Snapshot:
    """Read-only view of the last two discrete states for the renderer."""

    previous: tuple[Cell, ...]
    current: tuple[Cell, ...]
    food: Cell | None
    direction: Direction
    bite_ms: float
    tile_count: int


class GameSession:
    """Single owner of all mutable game state.

    Input writes only :attr:`next_direction`; :meth:`tick` is the one place
    that moves the simulation forward.
    """

    def __init__(
        self,
        tile_count: int = TILE_COUNT,
        steps_per_second: float = MOVES_PER_SECOND,
        rng: random.Random | None = None,
        listeners: Sequence[SessionListener] = (),
    ) -> None:
        self.state = SnakeState(tile_count, rng)
        self.clock = SimulationClock(steps_per_second)
        self.next_direction = self.state.direction
        self.fraction: float = 0.0
        self.listeners: list[SessionListener] = list(listeners)

    # --- Read-only accessors -------------------------------------------

    @property
    def phase(self) -> Phase:
        return self.state.phase

    @property
    def score(self) -> int:
        return self.state.score

    @property
    def running(self) -> bool:
        return self.state.phase is Phase.RUNNING

    def snapshot(self) -> Snapshot:
        state = self.state
        return Snapshot(
            previous=tuple(state.previous),
            current=tuple(state.body),
            food=state.food,
            direction=state.direction,
            bite_ms=state.bite_ms,
            tile_count=state.tile_count,
        )

    # --- Lifecycle -----------------------------------------------------

    def start(self) -> None:
        """Begin a fresh round (also used for restart after game over)."""
        self.state.reset()
        self.next_direction = self.state.direction
        self.clock.reset()
        self.fraction = 0.0
        size = self.state.tile_count
        logger.info("New round started on a %dx%d grid", size, size)
        self._notify("on_score", self.state.score)
        self._notify("on_phase", self.state.phase)

    def request_direction(self, direction: Direction) -> bool:
        """Queue a heading for the next step; last valid request wins.

        A request that would reverse the current heading is dropped so an
        earlier valid request stays queued.
        """
        if direction.reverses(self.state.direction):
            return False
        self.next_direction = direction
        return True

    # --- Frame entry point ---------------------------------------------

    def tick(self, elapsed_ms: float) -> list[StepResult]:
        """Run every step due after ``elapsed_ms`` and decay the bite timer."""
        if not self.running:
            return []

        self.clock.add(elapsed_ms)
        results: list[StepResult] = []
        while self.clock.take_step():
            result = self.state.step(self.next_direction)
            results.append(result)
            if result is StepResult.ATE:
                self._notify("on_score", self.state.score)
                self._notify("on_eat")
            elif result is StepResult.COLLIDED:
                self._notify("on_phase", self.state.phase)
                self._notify("on_game_over")
                break

        self.state.decay_bite(elapsed_ms)
        self.fraction = self.clock.fraction
        return results

    def _notify(self, hook: str, *args: object) -> None:
        for listener in self.listeners:
            callback = getattr(listener, hook, None)
            if callback is None:
                continue
            try:
                callback(*args)
            except Exception:
                logger.exception("Listener %r failed in %s", listener, hook)
