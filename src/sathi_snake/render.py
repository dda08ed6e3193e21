"""Interpolated drawing of the board, apple and snake."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Sequence

import pygame

from .config import (
    BITE_DURATION_MS,
    BODY_WIDTH,
    HEAD_LENGTH,
    HEAD_WIDTH,
    NECK_SHRINK,
    PALETTE,
    SHADOW_OFFSET,
)
from .grid import Cell, Direction
from .session import Snapshot

logger = logging.getLogger(__name__)

Point = tuple[float, float]

CURVE_SEGMENTS = 10
MOUTH_ARC_SEGMENTS = 8
MOUTH_HALF_ANGLE = math.pi / 4


@dataclass(frozen=True, slots=True)
class SnakeShapes:
    """Pixel geometry for one frame of the snake, head first."""

    centers: tuple[Point, ...]
    body_width: float
    head_outline: tuple[Point, ...]
    mouth: tuple[Point, ...] | None
    eyes: tuple[Point, Point]
    eye_radius: float
    pupil_radius: float


def lerp(a: Point, b: Point, t: float) -> Point:
    return (a[0] + (b[0] - a[0]) * t, a[1] + (b[1] - a[1]) * t)


def interpolate_cells(
    previous: Sequence[Cell], current: Sequence[Cell], fraction: float
) -> list[Point]:
    """Blend each segment from its previous cell to its current one.

    A segment with no previous entry (the tail added by growth) stays put.
    """
    points: list[Point] = []
    for idx, cur in enumerate(current):
        prev = previous[idx] if idx < len(previous) else cur
        points.append(lerp(prev, cur, fraction))
    return points


def cell_center(pos: Point, tile_size: float) -> Point:
    return ((pos[0] + 0.5) * tile_size, (pos[1] + 0.5) * tile_size)


def quadratic_curve(
    start: Point, control: Point, end: Point, segments: int = CURVE_SEGMENTS
) -> list[Point]:
    """Sample a quadratic Bézier, endpoints included."""
    points = []
    for i in range(segments + 1):
        t = i / segments
        inv = 1.0 - t
        points.append(
            (
                inv * inv * start[0] + 2 * inv * t * control[0] + t * t * end[0],
                inv * inv * start[1] + 2 * inv * t * control[1] + t * t * end[1],
            )
        )
    return points


def _head_frame(center: Point, direction: Direction):
    """Map (forward, sideways) offsets onto the screen for a heading."""
    fx, fy = direction.delta
    sx, sy = abs(fy), abs(fx)

    def to_screen(forward: float, side: float) -> Point:
        return (
            center[0] + forward * fx + side * sx,
            center[1] + forward * fy + side * sy,
        )

    return to_screen


def head_outline(center: Point, direction: Direction, tile_size: float) -> list[Point]:
    """Closed capsule outline: flat narrowed neck, two curves into the snout."""
    length = tile_size * HEAD_LENGTH
    width = tile_size * HEAD_WIDTH
    neck = tile_size * NECK_SHRINK
    half_neck = width / 2 - neck
    bulge = width / 2 + neck * 0.2
    at = _head_frame(center, direction)

    neck_a = at(-length / 2, -half_neck)
    neck_b = at(-length / 2, half_neck)
    snout = at(length / 2, 0.0)
    outline = [neck_a, neck_b]
    outline += quadratic_curve(neck_b, at(0.0, bulge), snout)[1:]
    outline += quadratic_curve(snout, at(0.0, -bulge), neck_a)[1:-1]
    return outline


def mouth_wedge(
    center: Point, direction: Direction, tile_size: float, bite_ms: float
) -> list[Point] | None:
    """Pie slice cut into the snout while the bite timer runs."""
    if bite_ms <= 0:
        return None
    t = min(1.0, bite_ms / BITE_DURATION_MS)
    radius = tile_size * (0.25 + 0.15 * t)
    mx, my = _head_frame(center, direction)(tile_size * HEAD_LENGTH * 0.45, 0.0)
    fx, fy = direction.delta
    heading = math.atan2(fy, fx)
    wedge = [(mx, my)]
    for i in range(MOUTH_ARC_SEGMENTS + 1):
        angle = heading + MOUTH_HALF_ANGLE * (2 * i / MOUTH_ARC_SEGMENTS - 1)
        wedge.append((mx + radius * math.cos(angle), my + radius * math.sin(angle)))
    return wedge


def eye_positions(
    center: Point, direction: Direction, tile_size: float
) -> tuple[Point, Point]:
    fx, fy = direction.delta
    ox = fx * tile_size * 0.18
    oy = fy * tile_size * 0.18
    y = center[1] - tile_size * 0.1 + oy
    return (
        (center[0] - tile_size * 0.12 + ox, y),
        (center[0] + tile_size * 0.12 + ox, y),
    )


def compose_snake(
    previous: Sequence[Cell],
    current: Sequence[Cell],
    fraction: float,
    direction: Direction,
    bite_ms: float,
    tile_size: float,
) -> SnakeShapes:
    """Turn two discrete snapshots plus frame progress into pixel shapes."""
    fraction = max(0.0, min(1.0, fraction))
    centers = tuple(
        cell_center(pos, tile_size)
        for pos in interpolate_cells(previous, current, fraction)
    )
    head = centers[0]
    wedge = mouth_wedge(head, direction, tile_size, bite_ms)
    return SnakeShapes(
        centers=centers,
        body_width=tile_size * BODY_WIDTH,
        head_outline=tuple(head_outline(head, direction, tile_size)),
        mouth=tuple(wedge) if wedge else None,
        eyes=eye_positions(head, direction, tile_size),
        eye_radius=tile_size * 0.14,
        pupil_radius=tile_size * 0.07,
    )


def _offset(points: Sequence[Point], dy: float) -> list[Point]:
    return [(x, y + dy) for x, y in points]


class Renderer:
    """Paints a :class:`Snapshot`; never touches the session itself."""

    def __init__(self, tile_count: int) -> None:
        self.tile_count = tile_count
        self.board_size = 0
        self.tile_size = 0.0
        self.scene: pygame.Surface | None = None
        self.background: pygame.Surface | None = None
        self.layer: pygame.Surface | None = None

    def layout(self, board_size: int) -> None:
        """Recompute tile size and cached surfaces for a square board."""
        board_size = max(1, int(board_size))
        if board_size == self.board_size and self.scene is not None:
            return
        self.board_size = board_size
        self.tile_size = board_size / self.tile_count
        self.scene = pygame.Surface((board_size, board_size), pygame.SRCALPHA)
        self.layer = pygame.Surface((board_size, board_size), pygame.SRCALPHA)
        self.background = self._build_background()
        logger.debug(
            "Board laid out at %dpx, %.2fpx per tile", board_size, self.tile_size
        )

    def _build_background(self) -> pygame.Surface:
        """Checkerboard drawn once per layout to keep draw() light."""
        surface = pygame.Surface((self.board_size, self.board_size))
        tile = self.tile_size
        for y in range(self.tile_count):
            for x in range(self.tile_count):
                light = (x + y) % 2 == 0
                color = PALETTE["board_light"] if light else PALETTE["board_dark"]
                left = int(round(x * tile))
                top = int(round(y * tile))
                rect = pygame.Rect(
                    left,
                    top,
                    int(round((x + 1) * tile)) - left,
                    int(round((y + 1) * tile)) - top,
                )
                surface.fill(color, rect)
        return surface

    # --- Draw ----------------------------------------------------------

    def draw(
        self,
        target: pygame.Surface,
        snapshot: Snapshot,
        fraction: float,
        topleft: tuple[int, int] = (0, 0),
    ) -> SnakeShapes:
        """Render the board at ``topleft`` on ``target`` and return the shapes used."""
        if self.scene is None or self.background is None or self.layer is None:
            raise RuntimeError("Renderer.layout() must run before draw()")

        self.scene.blit(self.background, (0, 0))
        if snapshot.food is not None:
            self._draw_apple(snapshot.food)
        shapes = compose_snake(
            snapshot.previous,
            snapshot.current,
            fraction,
            snapshot.direction,
            snapshot.bite_ms,
            self.tile_size,
        )
        self._draw_snake(shapes)
        target.blit(self.scene, topleft)
        return shapes

    def _clear_layer(self) -> pygame.Surface:
        """Reuse the translucent scratch layer for shadows and outlines."""
        self.layer.fill((0, 0, 0, 0))
        return self.layer

    def _draw_apple(self, food: Cell) -> None:
        tile = self.tile_size
        cx, cy = cell_center(food, tile)
        radius = tile * 0.35
        shadow_dy = tile * SHADOW_OFFSET

        shadow = self._clear_layer()
        pygame.draw.circle(shadow, PALETTE["shadow"], (cx, cy + shadow_dy), radius)
        self.scene.blit(shadow, (0, 0))

        # Stacked discs fake the radial gradient, lit from the top-left.
        rings = 6
        for i in range(rings):
            t = i / (rings - 1)
            if t < 0.5:
                color = PALETTE["apple_dark"].lerp(PALETTE["apple"], t * 2)
            else:
                color = PALETTE["apple"].lerp(PALETTE["apple_light"], (t - 0.5) * 2)
            ring_r = radius * (1.0 - 0.8 * t)
            shift = radius * 0.3 * t
            pygame.draw.circle(self.scene, color, (cx - shift, cy - shift), ring_r)

        leaf_w = max(2, int(radius * 0.5))
        leaf_h = max(2, int(radius * 0.3))
        leaf = pygame.Surface((leaf_w, leaf_h), pygame.SRCALPHA)
        pygame.draw.ellipse(leaf, PALETTE["leaf"], leaf.get_rect())
        leaf = pygame.transform.rotate(leaf, math.degrees(0.7))
        self.scene.blit(
            leaf, leaf.get_rect(center=(cx + radius * 0.3, cy - radius * 0.9))
        )
        pygame.draw.line(
            self.scene,
            PALETTE["leaf"],
            (cx, cy - radius * 0.9),
            (cx + radius * 0.2, cy - radius * 1.2),
            max(2, int(tile * 0.05)),
        )

    def _stroke_tube(
        self, surface: pygame.Surface, centers: Sequence[Point], width: float, color
    ) -> None:
        """Thick polyline with round caps and joins."""
        line_width = max(1, int(round(width)))
        radius = width / 2
        if len(centers) > 1:
            tail_to_head = list(reversed(centers))
            for start, end in zip(tail_to_head, tail_to_head[1:]):
                pygame.draw.line(surface, color, start, end, line_width)
        for point in centers:
            pygame.draw.circle(surface, color, point, radius)

    def _draw_snake(self, shapes: SnakeShapes) -> None:
        dy = self.tile_size * SHADOW_OFFSET

        shadow = self._clear_layer()
        self._stroke_tube(
            shadow, _offset(shapes.centers, dy), shapes.body_width, PALETTE["shadow"]
        )
        pygame.draw.polygon(shadow, PALETTE["shadow"], _offset(shapes.head_outline, dy))
        self.scene.blit(shadow, (0, 0))

        self._stroke_tube(self.scene, shapes.centers, shapes.body_width, PALETTE["body"])

        pygame.draw.polygon(self.scene, PALETTE["head"], shapes.head_outline)
        outline = self._clear_layer()
        pygame.draw.polygon(
            outline,
            PALETTE["head_outline"],
            shapes.head_outline,
            max(1, int(self.tile_size * 0.05)),
        )
        self.scene.blit(outline, (0, 0))

        if shapes.mouth:
            pygame.draw.polygon(self.scene, PALETTE["board_light"], shapes.mouth)

        for eye in shapes.eyes:
            pygame.draw.circle(self.scene, PALETTE["eye"], eye, shapes.eye_radius)
        for eye in shapes.eyes:
            pygame.draw.circle(self.scene, PALETTE["pupil"], eye, shapes.pupil_radius)
