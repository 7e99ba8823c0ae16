"""Map generation: weighted random placement followed by neighbourhood smoothing."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass

from goblin.constants import (
    GRASS_RECLAIM_NEIGHBOURS,
    MAP_HEIGHT,
    MAP_WIDTH,
    NOISE_FRACTION,
    SEED_RANGE,
    SHORE_SWAMP_NEIGHBOURS,
    SMOOTHING_PASSES,
    SWAMP_FRACTION,
    WATER_FRACTION,
    WATER_GROWTH_NEIGHBOURS,
)
from goblin.errors import InvalidDimensions, InvalidGenerationParams
from goblin.terrain import Grid, TerrainKind, create_tile

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GenerationParams:
    """Fractions of the map touched by each scatter stage, plus smoothing."""

    water_fraction: float = WATER_FRACTION
    swamp_fraction: float = SWAMP_FRACTION
    noise_fraction: float = NOISE_FRACTION
    smoothing_passes: int = SMOOTHING_PASSES

    def __post_init__(self) -> None:
        for name in ("water_fraction", "swamp_fraction", "noise_fraction"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise InvalidGenerationParams(f"{name} must be within [0, 1], got {value}")
        if self.smoothing_passes < 0:
            raise InvalidGenerationParams(
                f"smoothing_passes must be non-negative, got {self.smoothing_passes}"
            )


DEFAULT_GENERATION_PARAMS = GenerationParams()

_KINDS = tuple(TerrainKind)


def create_empty_grid(width: int, height: int, rng: random.Random) -> list[list]:
    """Return a mutable ``height × width`` board filled with grass tiles."""

    if width < 1 or height < 1:
        raise InvalidDimensions(width, height)
    return [
        [create_tile(TerrainKind.GRASS, x, y, rng) for x in range(width)]
        for y in range(height)
    ]


def _pick_cell(rng: random.Random, width: int, height: int) -> tuple[int, int]:
    return rng.randrange(width), rng.randrange(height)


def _scatter(
    board: list[list],
    count: int,
    rng: random.Random,
    kind: TerrainKind | None,
    *,
    only_on: TerrainKind | None = None,
) -> None:
    height = len(board)
    width = len(board[0])
    for _ in range(count):
        x, y = _pick_cell(rng, width, height)
        if only_on is not None and board[y][x].kind is not only_on:
            continue
        chosen = kind if kind is not None else rng.choice(_KINDS)
        board[y][x] = create_tile(chosen, x, y, rng)


def _smoothed_kind(grid: Grid, x: int, y: int) -> TerrainKind:
    water = 0
    grass = 0
    for neighbour in grid.neighbours(x, y):
        if neighbour.kind is TerrainKind.WATER:
            water += 1
        elif neighbour.kind is TerrainKind.GRASS:
            grass += 1

    current = grid.tiles[y][x].kind
    if water >= WATER_GROWTH_NEIGHBOURS:
        return TerrainKind.WATER
    if current is TerrainKind.GRASS and water >= SHORE_SWAMP_NEIGHBOURS:
        return TerrainKind.SWAMP
    if current is not TerrainKind.GRASS and grass >= GRASS_RECLAIM_NEIGHBOURS:
        return TerrainKind.GRASS
    return current


def smooth_grid(grid: Grid, rng: random.Random) -> Grid:
    """Apply one smoothing pass and return a new grid.

    Every decision reads the incoming grid only, so the result does not
    depend on the order in which cells are visited. Unchanged tiles keep
    their decoration; changed tiles get a fresh one.
    """

    rows = []
    for y in range(grid.height):
        row = []
        for x in range(grid.width):
            tile = grid.tiles[y][x]
            kind = _smoothed_kind(grid, x, y)
            row.append(tile if kind is tile.kind else create_tile(kind, x, y, rng))
        rows.append(row)
    return Grid.from_rows(
        rows, seed=grid.seed, generation_params=grid.generation_params
    )


def generate_map(
    width: int = MAP_WIDTH,
    height: int = MAP_HEIGHT,
    params: GenerationParams | None = None,
    *,
    seed: int | None = None,
) -> Grid:
    """Create a random terrain grid.

    The same ``(width, height, params, seed)`` always yields the same grid.
    When ``seed`` is omitted one is drawn and recorded on the result.
    """

    if width < 1 or height < 1:
        raise InvalidDimensions(width, height)
    params = params or DEFAULT_GENERATION_PARAMS
    if seed is None:
        seed = random.randrange(SEED_RANGE)
    rng = random.Random(seed)

    board = create_empty_grid(width, height, rng)
    area = width * height

    _scatter(board, int(area * params.water_fraction), rng, TerrainKind.WATER)
    _scatter(
        board,
        int(area * params.swamp_fraction),
        rng,
        TerrainKind.SWAMP,
        only_on=TerrainKind.GRASS,
    )
    _scatter(board, int(area * params.noise_fraction), rng, None)

    grid = Grid.from_rows(board, seed=seed, generation_params=params)
    for _ in range(params.smoothing_passes):
        grid = smooth_grid(grid, rng)

    if logger.isEnabledFor(logging.DEBUG):
        counts = grid.count_kinds()
        logger.debug(
            "Generated %dx%d map (seed=%d): grass=%d swamp=%d water=%d",
            width,
            height,
            seed,
            counts[TerrainKind.GRASS],
            counts[TerrainKind.SWAMP],
            counts[TerrainKind.WATER],
        )
    return grid
