"""Food placement on free grid cells."""

from __future__ import annotations

import logging
import random
from typing import Collection

from .grid import Cell

logger = logging.getLogger(__name__)


def place_food(
    occupied: Collection[Cell],
    tile_count: int,
    rng: random.Random | None = None,
) -> Cell:
    """Return a uniformly random cell that is not in ``occupied``.

    Uses reject-and-resample; the caller guarantees at least one free cell.
    """
    if rng is None:
        rng = random.Random()
    blocked = set(occupied)
    attempts = 0
    while True:
        attempts += 1
        cell = Cell(rng.randrange(tile_count), rng.randrange(tile_count))
        if cell not in blocked:
            logger.debug("Placed food at %s after %d attempt(s)", cell, attempts)
            return cell
