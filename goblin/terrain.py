"""Terrain kinds, tiles and the grid container."""
from __future__ import annotations

import random
from collections import Counter
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Union

from goblin.constants import TILE_HEIGHT, TILE_WIDTH
from goblin.errors import InvalidDimensions


class TerrainKind(Enum):
    GRASS = 0
    SWAMP = 1
    WATER = 2

    @property
    def walkable(self) -> bool:
        return TERRAIN_PROPERTIES[self][0]

    @property
    def speed_multiplier(self) -> float:
        return TERRAIN_PROPERTIES[self][1]


# kind -> (walkable, speed multiplier); 0.0 means impassable.
TERRAIN_PROPERTIES: dict[TerrainKind, tuple[bool, float]] = {
    TerrainKind.GRASS: (True, 1.0),
    TerrainKind.SWAMP: (True, 0.5),
    TerrainKind.WATER: (False, 0.0),
}


@dataclass(frozen=True)
class GrassBlade:
    offset_x: float
    offset_y: float
    height: float
    angle_offset: float


@dataclass(frozen=True)
class GrassDetails:
    blades: tuple[GrassBlade, ...]


@dataclass(frozen=True)
class Puddle:
    offset_x: float
    offset_y: float
    radius: float


@dataclass(frozen=True)
class SwampDetails:
    puddles: tuple[Puddle, ...]


@dataclass(frozen=True)
class Wave:
    offset_y: float
    amplitudes: tuple[float, ...]


@dataclass(frozen=True)
class WaterDetails:
    waves: tuple[Wave, ...]


TileDetails = Union[GrassDetails, SwampDetails, WaterDetails]

GRASS_BLADE_COUNT = 5
WAVE_COUNT = 3
WAVE_POINTS = 3
# Decorations stay within the inner 60% of the diamond.
DETAIL_SPREAD = 0.6


def _spread(rng: random.Random, extent: float) -> float:
    return (rng.random() - 0.5) * (extent * DETAIL_SPREAD)


def _grass_details(rng: random.Random) -> GrassDetails:
    blades = tuple(
        GrassBlade(
            offset_x=_spread(rng, TILE_WIDTH),
            offset_y=_spread(rng, TILE_HEIGHT),
            height=3 + rng.random() * 5,
            angle_offset=(rng.random() - 0.5) * 3,
        )
        for _ in range(GRASS_BLADE_COUNT)
    )
    return GrassDetails(blades=blades)


def _swamp_details(rng: random.Random) -> SwampDetails:
    count = 2 + int(rng.random() * 2)
    puddles = tuple(
        Puddle(
            offset_x=_spread(rng, TILE_WIDTH),
            offset_y=_spread(rng, TILE_HEIGHT),
            radius=2 + rng.random() * 4,
        )
        for _ in range(count)
    )
    return SwampDetails(puddles=puddles)


def _water_details(_rng: random.Random) -> WaterDetails:
    waves = tuple(
        Wave(
            offset_y=(index - 1) * 5,
            amplitudes=tuple(2 if point % 2 == 0 else -2 for point in range(WAVE_POINTS)),
        )
        for index in range(WAVE_COUNT)
    )
    return WaterDetails(waves=waves)


_DETAIL_FACTORIES = {
    TerrainKind.GRASS: _grass_details,
    TerrainKind.SWAMP: _swamp_details,
    TerrainKind.WATER: _water_details,
}


def create_details(kind: TerrainKind, rng: random.Random) -> TileDetails:
    """Build the render-only decoration payload for a freshly created tile."""

    return _DETAIL_FACTORIES[kind](rng)


@dataclass(frozen=True)
class Tile:
    kind: TerrainKind
    x: int
    y: int
    walkable: bool
    speed_multiplier: float
    details: TileDetails


def create_tile(kind: TerrainKind, x: int, y: int, rng: random.Random) -> Tile:
    """Create a tile whose traversal attributes come from the kind table."""

    walkable, speed = TERRAIN_PROPERTIES[kind]
    return Tile(
        kind=kind,
        x=x,
        y=y,
        walkable=walkable,
        speed_multiplier=speed,
        details=create_details(kind, rng),
    )


@dataclass(frozen=True)
class Grid:
    """Immutable row-major terrain grid indexed ``tiles[y][x]``."""

    width: int
    height: int
    tiles: tuple[tuple[Tile, ...], ...]
    seed: int | None = None
    generation_params: object | None = None

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            raise InvalidDimensions(self.width, self.height)
        if len(self.tiles) != self.height:
            raise ValueError(
                f"Expected {self.height} rows of tiles, got {len(self.tiles)}."
            )
        for y, row in enumerate(self.tiles):
            if len(row) != self.width:
                raise ValueError(f"Row {y} has {len(row)} tiles, expected {self.width}.")
            for x, tile in enumerate(row):
                if tile.x != x or tile.y != y:
                    raise ValueError(
                        f"Tile at ({x}, {y}) reports coordinates ({tile.x}, {tile.y})."
                    )

    @classmethod
    def from_rows(
        cls,
        rows,
        *,
        seed: int | None = None,
        generation_params: object | None = None,
    ) -> "Grid":
        frozen = tuple(tuple(row) for row in rows)
        width = len(frozen[0]) if frozen else 0
        return cls(
            width=width,
            height=len(frozen),
            tiles=frozen,
            seed=seed,
            generation_params=generation_params,
        )

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def tile_at(self, x: int, y: int) -> Tile:
        if not self.in_bounds(x, y):
            raise IndexError(f"({x}, {y}) is outside a {self.width}×{self.height} grid")
        return self.tiles[y][x]

    def iter_tiles(self) -> Iterator[Tile]:
        """Yield tiles row by row, top row first."""

        for row in self.tiles:
            yield from row

    def neighbours(self, x: int, y: int) -> Iterator[Tile]:
        """Yield the Moore neighbourhood of a cell, clamped at the edges."""

        for ny in range(max(0, y - 1), min(self.height - 1, y + 1) + 1):
            for nx in range(max(0, x - 1), min(self.width - 1, x + 1) + 1):
                if nx == x and ny == y:
                    continue
                yield self.tiles[ny][nx]

    def count_kinds(self) -> Counter:
        return Counter(tile.kind for tile in self.iter_tiles())

    def walkable_count(self) -> int:
        return sum(1 for tile in self.iter_tiles() if tile.walkable)
