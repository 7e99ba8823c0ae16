"""Isometric drawing of the map and the player onto a drawing surface.

The drawing surface is anything exposing ``width``/``height`` and the
pygame-flavoured primitives below. :class:`goblin.graphics_pygame.PygameSurface`
is the real implementation; tests use a recorder.
"""
from __future__ import annotations

from typing import Protocol, Sequence

from gamedata.terrain import OUTLINE_COLOUR, PLAYER_STYLE, get_terrain_style
from goblin.constants import TILE_WIDTH
from goblin.isometric import default_origin, diamond_points, draw_order, project
from goblin.terrain import GrassDetails, Grid, SwampDetails, Tile, WaterDetails

Colour = tuple[int, int, int]
Point = tuple[float, float]

# Water wave lines start 30% of a tile width left of centre.
WAVE_STEP = TILE_WIDTH * 0.3
PUDDLE_SQUASH = 0.7


class DrawingSurface(Protocol):
    width: int
    height: int

    def fill(self, colour: Colour) -> None: ...

    def polygon(self, colour: Colour, points: Sequence[Point], width: int = 0) -> None: ...

    def lines(self, colour: Colour, points: Sequence[Point], width: int = 1) -> None: ...

    def ellipse(self, colour: Colour, rect: tuple[float, float, float, float]) -> None: ...

    def rect(self, colour: Colour, rect: tuple[float, float, float, float], width: int = 0) -> None: ...

    def text(self, text: str, colour: Colour, centre: Point) -> None: ...


def _resolve_origin(surface, origin_x, origin_y) -> tuple[float, float]:
    default_x, default_y = default_origin(surface.width, surface.height)
    return (
        default_x if origin_x is None else origin_x,
        default_y if origin_y is None else origin_y,
    )


def _draw_grass(surface, x: float, y: float, details: GrassDetails, colour: Colour) -> None:
    for blade in details.blades:
        base = (x + blade.offset_x, y + blade.offset_y)
        tip = (base[0] + blade.angle_offset, base[1] - blade.height)
        surface.lines(colour, [base, tip], 1)


def _draw_swamp(surface, x: float, y: float, details: SwampDetails, colour: Colour) -> None:
    for puddle in details.puddles:
        rx = puddle.radius
        ry = puddle.radius * PUDDLE_SQUASH
        surface.ellipse(
            colour,
            (x + puddle.offset_x - rx, y + puddle.offset_y - ry, rx * 2, ry * 2),
        )


def _draw_water(surface, x: float, y: float, details: WaterDetails, colour: Colour) -> None:
    start_x = x - WAVE_STEP
    for wave in details.waves:
        points = [(start_x, y + wave.offset_y)]
        for index, amplitude in enumerate(wave.amplitudes):
            points.append((start_x + index * WAVE_STEP, y + wave.offset_y + amplitude))
        surface.lines(colour, points, 1)


_DETAIL_PAINTERS = {
    GrassDetails: _draw_grass,
    SwampDetails: _draw_swamp,
    WaterDetails: _draw_water,
}


def draw_tile(surface, tile: Tile, origin_x: float, origin_y: float) -> None:
    """Draw one diamond with its outline and pre-generated decoration."""

    x, y = project(tile.x, tile.y, origin_x, origin_y)
    style = get_terrain_style(tile.kind.name)
    corners = diamond_points(x, y)
    surface.polygon(style.fill, corners)
    surface.polygon(OUTLINE_COLOUR, corners, 1)
    _DETAIL_PAINTERS[type(tile.details)](surface, x, y, tile.details, style.detail)


def render_map(surface, grid: Grid, origin_x: float | None = None, origin_y: float | None = None) -> None:
    """Draw every tile of ``grid`` back to front."""

    origin_x, origin_y = _resolve_origin(surface, origin_x, origin_y)
    for tile in draw_order(grid):
        draw_tile(surface, tile, origin_x, origin_y)


def render_player(surface, player, origin_x: float | None = None, origin_y: float | None = None) -> None:
    """Draw the player marker standing on its tile, with the name above it."""

    origin_x, origin_y = _resolve_origin(surface, origin_x, origin_y)
    x, y = project(player.render_x, player.render_y, origin_x, origin_y)
    size = PLAYER_STYLE.size
    body = (x - size / 2, y - size, size, size)
    surface.rect(PLAYER_STYLE.fill, body)
    surface.rect(PLAYER_STYLE.outline, body, 2)
    surface.text(player.name, PLAYER_STYLE.label, (x, y - size - 5))
