"""Ownership of the active map and the player bound to it."""
from __future__ import annotations

import logging

from goblin.constants import BASE_MOVEMENT_SPEED, MAP_HEIGHT, MAP_WIDTH
from goblin.mapgen import DEFAULT_GENERATION_PARAMS, GenerationParams, generate_map
from goblin.movement import InputState, update_movement
from goblin.player import Player, create_player, find_start_position
from goblin.terrain import Grid

logger = logging.getLogger(__name__)


class MapSystem:
    """Single owner of the authoritative grid.

    Consumers read :attr:`grid` every tick instead of keeping their own
    reference, so a regeneration is picked up on the next frame.
    """

    def __init__(
        self,
        width: int = MAP_WIDTH,
        height: int = MAP_HEIGHT,
        params: GenerationParams | None = None,
        *,
        seed: int | None = None,
        player_name: str | None = None,
        base_speed: float = BASE_MOVEMENT_SPEED,
    ) -> None:
        params = params or DEFAULT_GENERATION_PARAMS
        grid = generate_map(width, height, params, seed=seed)
        self._bind(grid, params, create_player(grid, player_name, base_speed=base_speed))

    @classmethod
    def from_grid(cls, grid: Grid, player: Player | None = None) -> "MapSystem":
        """Wrap an existing grid, e.g. a hand-built one."""

        system = cls.__new__(cls)
        system._bind(
            grid,
            grid.generation_params or DEFAULT_GENERATION_PARAMS,
            player or create_player(grid),
        )
        return system

    def _bind(self, grid: Grid, params: GenerationParams, player: Player) -> None:
        # Both constructors end here; all instance state is set in this method.
        self.params = params
        self._grid = grid
        self.player = player
        self.generation = 1

    @property
    def grid(self) -> Grid:
        return self._grid

    @property
    def width(self) -> int:
        return self._grid.width

    @property
    def height(self) -> int:
        return self._grid.height

    def update(self, input_state: InputState, now: float) -> bool:
        return update_movement(self.player, input_state, self._grid, now)

    def regenerate(
        self, params: GenerationParams | None = None, *, seed: int | None = None
    ) -> Grid:
        """Replace the grid with a new one of the same size.

        The player's new position is found before the swap, so a failure
        leaves both the old grid and the player untouched.
        """

        params = params or self.params
        grid = generate_map(self._grid.width, self._grid.height, params, seed=seed)
        find_start_position(grid)

        self._grid = grid
        self.params = params
        self.generation += 1
        self.player.relocate(grid)
        logger.info(
            "Regenerated map #%d (seed=%s); player moved to (%d, %d)",
            self.generation,
            grid.seed,
            self.player.grid_x,
            self.player.grid_y,
        )
        return grid
