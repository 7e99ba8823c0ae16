"""Tests for isometric drawing against a recording surface."""

from gamedata.terrain import OUTLINE_COLOUR, PLAYER_STYLE, get_terrain_style
from goblin.isometric import diamond_points, project
from goblin.mapgen import generate_map
from goblin.player import Player
from goblin.renderer import render_map, render_player

from conftest import RecordingSurface, grid_from_layout


def _diamond_fills(surface):
    return [call for call in surface.calls if call[0] == "polygon" and call[3] == 0]


def test_rerender_is_identical():
    grid = generate_map(8, 8, seed=21)
    first = RecordingSurface()
    second = RecordingSurface()
    render_map(first, grid, 400, 100)
    render_map(second, grid, 400, 100)
    assert first.calls
    assert first.calls == second.calls


def test_tiles_drawn_row_major(cross_grid, recording_surface):
    render_map(recording_surface, cross_grid, 0, 0)
    fills = _diamond_fills(recording_surface)
    assert len(fills) == 25
    expected = [
        tuple(diamond_points(*project(x, y, 0, 0)))
        for y in range(5)
        for x in range(5)
    ]
    assert [call[2] for call in fills] == expected


def test_tile_colours_and_outline():
    grid = grid_from_layout(["GSW"])
    surface = RecordingSurface()
    render_map(surface, grid, 0, 0)
    fills = _diamond_fills(surface)
    assert [call[1] for call in fills] == [
        get_terrain_style("grass").fill,
        get_terrain_style("swamp").fill,
        get_terrain_style("water").fill,
    ]
    outlines = [call for call in surface.calls if call[0] == "polygon" and call[3] == 1]
    assert len(outlines) == 3
    assert all(call[1] == OUTLINE_COLOUR for call in outlines)


def test_decorations_follow_kind():
    grid = grid_from_layout(["G"])
    surface = RecordingSurface()
    render_map(surface, grid, 0, 0)
    blades = [call for call in surface.calls if call[0] == "lines"]
    assert len(blades) == 5

    grid = grid_from_layout(["W"])
    surface = RecordingSurface()
    render_map(surface, grid, 0, 0)
    waves = [call for call in surface.calls if call[0] == "lines"]
    assert len(waves) == 3
    # Start point plus one point per amplitude.
    assert all(len(call[2]) == 4 for call in waves)
    assert waves[1][2][0] == (-64 * 0.3, 0)

    grid = grid_from_layout(["S"])
    surface = RecordingSurface()
    render_map(surface, grid, 0, 0)
    assert len([call for call in surface.calls if call[0] == "ellipse"]) in (2, 3)


def test_default_origin_uses_surface_size():
    grid = grid_from_layout(["G"])
    surface = RecordingSurface(800, 600)
    render_map(surface, grid)
    top = _diamond_fills(surface)[0][2][0]
    assert top == (400, 150 - 16)


def test_player_drawn_on_projected_tile(recording_surface):
    player = Player(3, 1, name="Gob")
    render_player(recording_surface, player, 100, 50)
    x, y = project(3, 1, 100, 50)
    size = PLAYER_STYLE.size
    kinds = [call[0] for call in recording_surface.calls]
    assert kinds == ["rect", "rect", "text"]
    body, outline, label = recording_surface.calls
    assert body[2] == (x - size / 2, y - size, size, size)
    assert outline[3] == 2
    assert label[1] == "Gob"
    assert label[3] == (x, y - size - 5)
