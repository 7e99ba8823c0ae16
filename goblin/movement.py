"""Discrete, tile-aligned movement gated by terrain delay and a settle interval."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from goblin.constants import SETTLE_INTERVAL_MS
from goblin.terrain import Grid, TerrainKind

if TYPE_CHECKING:  # pragma: no cover - import cycle guard for type checking
    from goblin.player import Player

logger = logging.getLogger(__name__)


class Direction(Enum):
    NONE = "none"
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def delta(self) -> tuple[int, int]:
        return _DELTAS[self]


_DELTAS = {
    Direction.NONE: (0, 0),
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}


@dataclass(frozen=True)
class InputState:
    """Snapshot of the four directional flags for a single tick."""

    up: bool = False
    down: bool = False
    left: bool = False
    right: bool = False


def resolve_direction(input_state: InputState) -> Direction:
    """Pick one axis-aligned direction; Up beats Down beats Left beats Right."""

    if input_state.up:
        return Direction.UP
    if input_state.down:
        return Direction.DOWN
    if input_state.left:
        return Direction.LEFT
    if input_state.right:
        return Direction.RIGHT
    return Direction.NONE


def terrain_speed_factor(kind: TerrainKind) -> float:
    """Time cost of leaving a tile, the inverse of its speed multiplier."""

    if kind is TerrainKind.SWAMP:
        return 2.0
    return 1.0


def movement_delay(kind: TerrainKind, base_speed: float) -> float:
    """Milliseconds that must pass before stepping off a tile of ``kind``."""

    return (1000.0 / base_speed) * terrain_speed_factor(kind)


def settle(player: "Player", now: float) -> bool:
    """Leave the stepping state once the settle interval has elapsed.

    Returns ``True`` while the player is still settling.
    """

    if not player.is_stepping:
        return False
    if now - player.last_step_time < SETTLE_INTERVAL_MS:
        return True
    player.is_stepping = False
    return False


def update_movement(player: "Player", input_state: InputState, grid: Grid, now: float) -> bool:
    """Advance the player by at most one tile.

    Rejected moves (settling, out of bounds, unwalkable target, cooldown)
    leave the position untouched and are not errors. Returns ``True`` when
    a step was taken. The player must stand on ``grid``: a position left
    over from another grid raises :class:`IndexError` once a step is tried.
    """

    if settle(player, now):
        return False

    direction = resolve_direction(input_state)
    player.facing = direction
    if direction is Direction.NONE:
        return False

    dx, dy = direction.delta
    target_x = player.grid_x + dx
    target_y = player.grid_y + dy
    if not grid.in_bounds(target_x, target_y):
        logger.debug("Step %s from (%d, %d) leaves the map", direction.value, player.grid_x, player.grid_y)
        return False

    target = grid.tile_at(target_x, target_y)
    if not target.walkable:
        logger.debug("Step %s blocked by %s", direction.value, target.kind.name.lower())
        return False

    current = grid.tile_at(player.grid_x, player.grid_y)
    if now - player.last_step_time < movement_delay(current.kind, player.base_speed):
        return False

    player.is_stepping = True
    player.last_step_time = now
    player.set_position(target_x, target_y)
    player.current_kind = target.kind
    return True
