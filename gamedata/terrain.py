"""Display palette for terrain kinds and the player marker."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

from gamedata.loader import load_game_data

Colour = tuple[int, int, int]


@dataclass(frozen=True)
class TerrainStyle:
    """How a terrain kind is drawn in the window and in the text view."""

    name: str
    fill: Colour
    detail: Colour
    char: str


@dataclass(frozen=True)
class PlayerStyle:
    char: str
    fill: Colour
    outline: Colour
    label: Colour
    size: int


def _colour_tuple(value, default: Colour = (255, 0, 255)) -> Colour:
    if isinstance(value, (list, tuple)) and len(value) >= 3:
        return tuple(max(0, min(255, int(component))) for component in value[:3])
    return default


def _normalise_style(key: str, raw: Mapping[str, object]) -> TerrainStyle:
    char = str(raw.get("char", "?")) or "?"
    return TerrainStyle(
        name=str(raw.get("name", key.title())),
        fill=_colour_tuple(raw.get("fill")),
        detail=_colour_tuple(raw.get("detail")),
        char=char[0],
    )


def _normalise_palette(data: Mapping[str, object]) -> dict[str, TerrainStyle]:
    raw_terrain = data.get("terrain", {})
    if not isinstance(raw_terrain, Mapping):
        return {}
    return {
        str(key).lower(): _normalise_style(str(key), value)
        for key, value in raw_terrain.items()
        if isinstance(value, Mapping)
    }


def _normalise_player(raw) -> PlayerStyle:
    if not isinstance(raw, Mapping):
        raw = {}
    char = str(raw.get("char", "@")) or "@"
    try:
        size = int(raw.get("size", 20))
    except (TypeError, ValueError):
        size = 20
    return PlayerStyle(
        char=char[0],
        fill=_colour_tuple(raw.get("fill"), (229, 57, 53)),
        outline=_colour_tuple(raw.get("outline"), (0, 0, 0)),
        label=_colour_tuple(raw.get("label"), (255, 255, 255)),
        size=max(1, size),
    )


def _load_palette():
    data = load_game_data()
    return (
        _normalise_palette(data),
        _colour_tuple(data.get("outline"), (51, 51, 51)),
        _colour_tuple(data.get("background"), (34, 34, 34)),
        _normalise_player(data.get("player")),
    )


TERRAIN_STYLES, OUTLINE_COLOUR, BACKGROUND_COLOUR, PLAYER_STYLE = _load_palette()

_FALLBACK_STYLE = TerrainStyle(
    name="Unknown",
    fill=(255, 0, 255),
    detail=(255, 255, 255),
    char="?",
)


def get_terrain_style(key: str) -> TerrainStyle:
    """Return the style for a terrain key such as ``"grass"``."""

    return TERRAIN_STYLES.get(key.lower(), _FALLBACK_STYLE)
