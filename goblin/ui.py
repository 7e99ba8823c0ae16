# goblin/ui.py
from __future__ import annotations

from gamedata.terrain import PLAYER_STYLE, get_terrain_style
from goblin.terrain import Grid


def draw_map(grid: Grid, player=None) -> list[str]:
    """Top-down glyph view of the grid, one string per row."""

    rows = []
    for row in grid.tiles:
        rows.append("".join(get_terrain_style(tile.kind.name).char for tile in row))
    if player is not None and grid.in_bounds(player.grid_x, player.grid_y):
        line = rows[player.grid_y]
        rows[player.grid_y] = line[: player.grid_x] + PLAYER_STYLE.char + line[player.grid_x + 1 :]
    return rows


def map_legend(grid: Grid) -> list[str]:
    counts = grid.count_kinds()
    lines = [f"Map {grid.width}×{grid.height}, seed {grid.seed}"]
    for kind, count in sorted(counts.items(), key=lambda item: item[0].value):
        style = get_terrain_style(kind.name)
        lines.append(f"{style.char} {style.name}: {count}")
    lines.append(f"Walkable: {grid.walkable_count()}/{grid.width * grid.height}")
    return lines
