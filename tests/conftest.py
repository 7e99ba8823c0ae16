import os
import random

import pytest

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

from goblin.terrain import Grid, TerrainKind, create_tile  # noqa: E402

KIND_CODES = {
    "G": TerrainKind.GRASS,
    "S": TerrainKind.SWAMP,
    "W": TerrainKind.WATER,
}


def grid_from_layout(layout, seed=0):
    """Build a grid from rows of G/S/W letters."""

    rng = random.Random(seed)
    rows = [
        [create_tile(KIND_CODES[code], x, y, rng) for x, code in enumerate(line)]
        for y, line in enumerate(layout)
    ]
    return Grid.from_rows(rows)


def layout_of(grid):
    codes = {kind: code for code, kind in KIND_CODES.items()}
    return ["".join(codes[tile.kind] for tile in row) for row in grid.tiles]


class RecordingSurface:
    """Drawing surface that records every call instead of drawing."""

    def __init__(self, width=800, height=600):
        self.width = width
        self.height = height
        self.calls = []

    def fill(self, colour):
        self.calls.append(("fill", colour))

    def polygon(self, colour, points, width=0):
        self.calls.append(("polygon", colour, tuple(points), width))

    def lines(self, colour, points, width=1):
        self.calls.append(("lines", colour, tuple(points), width))

    def ellipse(self, colour, rect):
        self.calls.append(("ellipse", colour, tuple(rect)))

    def rect(self, colour, rect, width=0):
        self.calls.append(("rect", colour, tuple(rect), width))

    def text(self, text, colour, centre):
        self.calls.append(("text", text, colour, tuple(centre)))


@pytest.fixture
def cross_grid():
    # Grass centre ringed by swamp, water at the middle of each edge.
    return grid_from_layout(
        [
            "GGWGG",
            "GSSSG",
            "WSGSW",
            "GSSSG",
            "GGWGG",
        ]
    )


@pytest.fixture
def recording_surface():
    return RecordingSurface()
