"""Isometric transforms between grid cells and screen pixels."""
from __future__ import annotations

import math
from typing import Iterator

from goblin.constants import TILE_HEIGHT, TILE_WIDTH
from goblin.terrain import Grid, Tile

HALF_WIDTH = TILE_WIDTH / 2
HALF_HEIGHT = TILE_HEIGHT / 2


def project(
    grid_x: float, grid_y: float, origin_x: float = 0, origin_y: float = 0
) -> tuple[float, float]:
    """Return the screen position of the centre of a grid cell."""

    screen_x = (grid_x - grid_y) * HALF_WIDTH + origin_x
    screen_y = (grid_x + grid_y) * HALF_HEIGHT + origin_y
    return screen_x, screen_y


def unproject(
    screen_x: float, screen_y: float, origin_x: float = 0, origin_y: float = 0
) -> tuple[float, float]:
    """Invert :func:`project`, returning fractional grid coordinates."""

    u = (screen_x - origin_x) / HALF_WIDTH  # grid_x - grid_y
    v = (screen_y - origin_y) / HALF_HEIGHT  # grid_x + grid_y
    return (u + v) / 2, (v - u) / 2


def pick_cell(
    screen_x: float, screen_y: float, origin_x: float = 0, origin_y: float = 0
) -> tuple[int, int]:
    """Return the cell whose diamond contains the given screen point."""

    grid_x, grid_y = unproject(screen_x, screen_y, origin_x, origin_y)
    return math.floor(grid_x + 0.5), math.floor(grid_y + 0.5)


def diamond_points(centre_x: float, centre_y: float) -> list[tuple[float, float]]:
    """Corners of a tile diamond: top, right, bottom, left."""

    return [
        (centre_x, centre_y - HALF_HEIGHT),
        (centre_x + HALF_WIDTH, centre_y),
        (centre_x, centre_y + HALF_HEIGHT),
        (centre_x - HALF_WIDTH, centre_y),
    ]


def draw_order(grid: Grid) -> Iterator[Tile]:
    # Row-major traversal is a valid painter's order because diamonds
    # never overlap beyond their own footprint.
    return grid.iter_tiles()


def default_origin(surface_width: int, surface_height: int) -> tuple[float, float]:
    """Anchor the map horizontally centred and a quarter down the surface."""

    return surface_width / 2, surface_height / 4
