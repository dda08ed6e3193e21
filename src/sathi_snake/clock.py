"""Fixed-step accumulator that turns frame time into discrete moves."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ClockAdvance:
    steps: int
    fraction: float


class SimulationClock:
    """Accumulate wall-clock milliseconds and release whole move intervals.

    The render rate never changes how many moves happen: a long frame (for
    example after the window was minimised) releases every interval it
    covers, and the remainder carries over to the next frame.
    """

    def __init__(self, steps_per_second: float) -> None:
        if steps_per_second <= 0:
            raise ValueError("steps_per_second must be positive")
        self.interval_ms: float = 1000.0 / steps_per_second
        self.accumulator: float = 0.0

    def reset(self) -> None:
        self.accumulator = 0.0

    def add(self, elapsed_ms: float) -> None:
        """Bank elapsed frame time; negative deltas are ignored."""
        if elapsed_ms > 0:
            self.accumulator += elapsed_ms

    def take_step(self) -> bool:
        """Consume one interval if a whole one is banked."""
        if self.accumulator < self.interval_ms:
            return False
        self.accumulator -= self.interval_ms
        return True

    @property
    def fraction(self) -> float:
        """Progress towards the next move, clamped to [0, 1]."""
        return min(1.0, self.accumulator / self.interval_ms)

    def advance(self, elapsed_ms: float) -> ClockAdvance:
        """Add ``elapsed_ms`` and drain every due step at once."""
        self.add(elapsed_ms)
        steps = 0
        while self.take_step():
            steps += 1
        return ClockAdvance(steps=steps, fraction=self.fraction)
