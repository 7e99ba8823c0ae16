# goblin/player.py
from __future__ import annotations

import logging
import random
import uuid

from goblin.constants import BASE_MOVEMENT_SPEED
from goblin.errors import NoWalkableTile
from goblin.movement import Direction
from goblin.terrain import Grid, TerrainKind

logger = logging.getLogger(__name__)

NAME_PREFIXES = ("Brave", "Swift", "Mighty", "Noble", "Fierce")
NAME_NOUNS = ("Warrior", "Knight", "Hunter", "Explorer", "Adventurer")

MAX_RING_RADIUS = 100


def generate_player_name(rng: random.Random | None = None) -> str:
    rng = rng or random
    return f"{rng.choice(NAME_PREFIXES)} {rng.choice(NAME_NOUNS)}"


class Player:
    def __init__(
        self,
        grid_x: int,
        grid_y: int,
        *,
        name: str | None = None,
        base_speed: float = BASE_MOVEMENT_SPEED,
        current_kind: TerrainKind = TerrainKind.GRASS,
        player_id: str | None = None,
    ):
        if base_speed <= 0:
            raise ValueError(f"base_speed must be positive, got {base_speed}")
        self.id = player_id or str(uuid.uuid4())
        self.name = name or generate_player_name()
        self.grid_x = grid_x
        self.grid_y = grid_y
        self.render_x = float(grid_x)
        self.render_y = float(grid_y)
        self.facing = Direction.NONE
        self.is_stepping = False
        self.last_step_time = 0.0
        self.base_speed = base_speed
        self.current_kind = current_kind

    def position(self) -> tuple[int, int]:
        return self.grid_x, self.grid_y

    def set_position(self, grid_x: int, grid_y: int) -> None:
        """Move to a cell; the render position snaps to it immediately."""

        self.grid_x = grid_x
        self.grid_y = grid_y
        self.render_x = float(grid_x)
        self.render_y = float(grid_y)

    def relocate(self, grid: Grid) -> None:
        """Place the player on a walkable tile of a freshly swapped grid."""

        x, y = find_start_position(grid)
        self.set_position(x, y)
        self.current_kind = grid.tiles[y][x].kind
        self.is_stepping = False

    def __repr__(self) -> str:
        return f"Player({self.name!r}, grid=({self.grid_x}, {self.grid_y}), facing={self.facing.value})"


def _ring_cells(cx: int, cy: int, ring: int):
    for x in range(cx - ring, cx + ring + 1):
        yield x, cy - ring
        yield x, cy + ring
    for y in range(cy - ring + 1, cy + ring):
        yield cx - ring, y
        yield cx + ring, y


def find_start_position(grid: Grid) -> tuple[int, int]:
    """Find a walkable tile near the centre of the map.

    Checks the centre, then square rings of growing radius, then falls back
    to a full row-major scan. Raises :class:`NoWalkableTile` when the grid
    has nowhere to stand.
    """

    cx, cy = grid.width // 2, grid.height // 2
    if grid.tiles[cy][cx].walkable:
        return cx, cy

    max_radius = min(MAX_RING_RADIUS, max(grid.width, grid.height))
    for ring in range(1, max_radius):
        for x, y in _ring_cells(cx, cy, ring):
            if grid.in_bounds(x, y) and grid.tiles[y][x].walkable:
                return x, y

    logger.warning("Ring search failed, falling back to a full map scan")
    for tile in grid.iter_tiles():
        if tile.walkable:
            return tile.x, tile.y

    raise NoWalkableTile(f"{grid.width}×{grid.height} map contains no walkable tiles")


def create_player(
    grid: Grid,
    name: str | None = None,
    *,
    base_speed: float = BASE_MOVEMENT_SPEED,
) -> Player:
    x, y = find_start_position(grid)
    player = Player(
        x,
        y,
        name=name,
        base_speed=base_speed,
        current_kind=grid.tiles[y][x].kind,
    )
    logger.info("Spawned %s at (%d, %d)", player.name, x, y)
    return player
