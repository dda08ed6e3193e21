"""Discrete grid primitives: cells, headings and bounds."""

from __future__ import annotations

from enum import Enum
from typing import NamedTuple


class Cell(NamedTuple):
    """Integer grid coordinate; (0, 0) is the top-left tile."""

    x: int
    y: int

    def shifted(self, direction: Direction) -> Cell:
        dx, dy = direction.delta
        return Cell(self.x + dx, self.y + dy)


class Direction(str, Enum):
    UP = "UP"
    DOWN = "DOWN"
    LEFT = "LEFT"
    RIGHT = "RIGHT"

    @property
    def delta(self) -> tuple[int, int]:
        return DELTAS[self]

    @property
    def opposite(self) -> Direction:
        return OPPOSITE[self]

    def reverses(self, other: Direction) -> bool:
        """True when turning from ``other`` to this heading is a 180° flip."""
        return OPPOSITE[other] is self


DELTAS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}
OPPOSITE: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


def in_bounds(cell: Cell, tile_count: int) -> bool:
    return 0 <= cell.x < tile_count and 0 <= cell.y < tile_count
