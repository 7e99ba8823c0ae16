"""Tests for the pygame drawing-surface adapter, run off-screen."""

import pygame
import pytest

from gamedata.terrain import BACKGROUND_COLOUR
from goblin.graphics_pygame import PygameRenderer, PygameSurface
from goblin.isometric import default_origin, project
from goblin.renderer import render_map

from conftest import grid_from_layout


@pytest.fixture
def surface():
    return PygameSurface(pygame.Surface((200, 120)))


def test_size(surface):
    assert (surface.width, surface.height) == (200, 120)


def test_polygon_and_rect_paint_pixels(surface):
    surface.fill((0, 0, 0))
    surface.polygon((255, 0, 0), [(10, 10), (30, 10), (30, 30), (10, 30)])
    assert surface.surface.get_at((20, 20))[:3] == (255, 0, 0)

    surface.rect((0, 255, 0), (50.4, 50.6, 10, 10))
    assert surface.surface.get_at((55, 55))[:3] == (0, 255, 0)


def test_single_point_lines_are_skipped(surface):
    surface.fill((0, 0, 0))
    surface.lines((255, 255, 255), [(5, 5)])
    assert surface.surface.get_at((5, 5))[:3] == (0, 0, 0)


def test_text_without_font_is_a_no_op(surface):
    surface.text("Gob", (255, 255, 255), (10, 10))


def test_render_map_paints_tile_centre(surface):
    grid = grid_from_layout(["W"])
    surface.fill((0, 0, 0))
    render_map(surface, grid, 100, 60)
    x, y = project(0, 0, 100, 60)
    # Wave lines run across the centre row; sample just above it.
    assert surface.surface.get_at((int(x) + 12, int(y) - 8))[:3] == (25, 118, 210)


@pytest.fixture
def window(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    renderer = PygameRenderer()
    yield renderer
    renderer.close()


def test_clear_goes_through_the_drawing_surface(window, recording_surface):
    window.surface = recording_surface
    window.clear()
    assert recording_surface.calls == [("fill", BACKGROUND_COLOUR)]


def test_window_to_canvas_undoes_letterboxing(window):
    window.window_size = (window.width // 2, window.height)
    scaled_height = window.height // 2
    top = (window.height - scaled_height) // 2

    assert window.window_to_canvas((window.width // 4, top + scaled_height // 2)) == (
        window.width / 2,
        window.height / 2,
    )
    assert window.window_to_canvas((10, top - 1)) is None


def test_cell_under_picks_the_tile_beneath_the_cursor(window):
    grid = grid_from_layout(["GG", "GG"])
    window.window_size = (window.width, window.height)
    origin_x, origin_y = default_origin(window.width, window.height)

    assert window.cell_under((round(origin_x), round(origin_y)), grid) == (0, 0)
    x, y = project(1, 1, origin_x, origin_y)
    assert window.cell_under((round(x), round(y)), grid) == (1, 1)
    assert window.cell_under((5, 5), grid) is None
