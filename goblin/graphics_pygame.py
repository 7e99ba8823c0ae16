"""Window renderer built on pygame."""
from __future__ import annotations

from typing import Sequence

import pygame

from gamedata.terrain import BACKGROUND_COLOUR
from goblin.constants import FPS, WINDOW_HEIGHT, WINDOW_WIDTH
from goblin.isometric import default_origin, pick_cell
from goblin.renderer import render_map, render_player

DEFAULT_TEXT_COLOR = (240, 240, 240)


def _int_rect(rect) -> pygame.Rect:
    left, top, width, height = rect
    return pygame.Rect(round(left), round(top), max(1, round(width)), max(1, round(height)))


class PygameSurface:
    """Drawing-surface adapter that forwards primitives to ``pygame.draw``."""

    def __init__(self, surface: pygame.Surface, font: "pygame.font.Font | None" = None) -> None:
        self.surface = surface
        self.font = font

    @property
    def width(self) -> int:
        return self.surface.get_width()

    @property
    def height(self) -> int:
        return self.surface.get_height()

    def fill(self, colour) -> None:
        self.surface.fill(colour)

    def polygon(self, colour, points, width: int = 0) -> None:
        pygame.draw.polygon(self.surface, colour, points, width)

    def lines(self, colour, points, width: int = 1) -> None:
        if len(points) < 2:
            return
        pygame.draw.lines(self.surface, colour, False, points, width)

    def ellipse(self, colour, rect) -> None:
        pygame.draw.ellipse(self.surface, colour, _int_rect(rect))

    def rect(self, colour, rect, width: int = 0) -> None:
        pygame.draw.rect(self.surface, colour, _int_rect(rect), width)

    def text(self, text: str, colour, centre) -> None:
        if self.font is None:
            return
        rendered = self.font.render(text, True, colour)
        self.surface.blit(rendered, rendered.get_rect(center=(round(centre[0]), round(centre[1]))))


class PygameRenderer:
    """Small helper that owns the window and draws frames onto it."""

    def __init__(self, title: str = "Goblin Chase") -> None:
        pygame.init()
        pygame.font.init()
        self.width = WINDOW_WIDTH
        self.height = WINDOW_HEIGHT
        self._display_flags = pygame.RESIZABLE
        self.display = pygame.display.set_mode((self.width, self.height), self._display_flags)
        pygame.display.set_caption(title)
        self.canvas = pygame.Surface((self.width, self.height)).convert()
        self.window_size = self.display.get_size()
        self._saved_window_size = self.window_size
        self.fullscreen = False
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont("Consolas", 16)
        self.label_font = pygame.font.SysFont("Arial", 12)
        self.surface = PygameSurface(self.canvas, self.label_font)

    def close(self) -> None:
        pygame.quit()

    def clear(self) -> None:
        self.surface.fill(BACKGROUND_COLOUR)

    def _scaled_size(self) -> tuple[int, int]:
        target_width, target_height = self.window_size
        scale = min(target_width / self.width, target_height / self.height)
        return max(1, int(self.width * scale)), max(1, int(self.height * scale))

    def window_to_canvas(self, position: tuple[int, int]) -> tuple[float, float] | None:
        """Map a window pixel to canvas pixels, or ``None`` over the letterbox."""

        target_width, target_height = self.window_size
        if target_width <= 0 or target_height <= 0:
            return None

        scaled_width, scaled_height = self._scaled_size()
        x = position[0] - (target_width - scaled_width) // 2
        y = position[1] - (target_height - scaled_height) // 2
        if not (0 <= x < scaled_width and 0 <= y < scaled_height):
            return None
        return x * self.width / scaled_width, y * self.height / scaled_height

    def cell_under(self, position: tuple[int, int], grid) -> tuple[int, int] | None:
        """Grid cell drawn under a window pixel, if any."""

        canvas_position = self.window_to_canvas(position)
        if canvas_position is None:
            return None
        origin_x, origin_y = default_origin(self.width, self.height)
        cell = pick_cell(canvas_position[0], canvas_position[1], origin_x, origin_y)
        return cell if grid.in_bounds(*cell) else None

    def present(self) -> None:
        if not self.display:
            return

        target_width, target_height = self.window_size
        if target_width <= 0 or target_height <= 0:
            return

        base_width, base_height = self.width, self.height
        scaled_width, scaled_height = self._scaled_size()

        if scaled_width == base_width and scaled_height == base_height:
            scaled_surface = self.canvas
        else:
            scaled_surface = pygame.transform.smoothscale(
                self.canvas, (scaled_width, scaled_height)
            )

        self.display.fill((0, 0, 0))
        offset_x = (target_width - scaled_width) // 2
        offset_y = (target_height - scaled_height) // 2
        self.display.blit(scaled_surface, (offset_x, offset_y))
        pygame.display.flip()

    def set_window_size(self, size: tuple[int, int]) -> None:
        if self.fullscreen:
            return

        width = max(1, size[0])
        height = max(1, size[1])
        self.display = pygame.display.set_mode((width, height), self._display_flags)
        self.window_size = self.display.get_size()
        self._saved_window_size = self.window_size

    def toggle_fullscreen(self) -> None:
        if self.fullscreen:
            self.display = pygame.display.set_mode(
                self._saved_window_size, self._display_flags
            )
            self.fullscreen = False
        else:
            self._saved_window_size = self.window_size
            self.display = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
            self.fullscreen = True
        self.window_size = self.display.get_size()

    def tick(self, fps: int = FPS) -> int:
        """Wait for the next frame and return the elapsed milliseconds."""

        return self.clock.tick(fps)

    def draw_scene(self, grid, player) -> None:
        render_map(self.surface, grid)
        render_player(self.surface, player)

    def draw_text_panel(
        self,
        lines: Sequence[str | tuple[str, tuple[int, int, int]]],
        *,
        anchor: str = "top-left",
    ) -> None:
        if not lines:
            return

        prepared: list[tuple[str, tuple[int, int, int]]] = []
        for entry in lines:
            if isinstance(entry, tuple):
                prepared.append(entry)
            else:
                prepared.append((entry, DEFAULT_TEXT_COLOR))

        padding = 10
        max_width = max(self.font.size(text)[0] for text, _ in prepared)
        line_height = int(self.font.get_height() * 1.2)
        panel_width = max_width + padding * 2
        panel_height = len(prepared) * line_height + padding * 2
        panel = pygame.Surface((panel_width, panel_height), pygame.SRCALPHA)
        panel.fill((0, 0, 0, 180))

        for index, (text, color) in enumerate(prepared):
            rendered = self.font.render(text, True, color)
            panel.blit(rendered, (padding, padding + index * line_height))

        if anchor == "top-right":
            pos = (self.width - panel_width, 0)
        elif anchor == "bottom-left":
            pos = (0, self.height - panel_height)
        elif anchor == "bottom-right":
            pos = (self.width - panel_width, self.height - panel_height)
        else:
            pos = (0, 0)
        self.canvas.blit(panel, pos)

    def draw_overlay(self, overlay) -> None:
        if overlay.enabled:
            self.draw_text_panel(overlay.lines(), anchor=overlay.position)
