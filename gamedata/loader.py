"""Utility helpers to load structured game data."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any

_DATA_FILE = Path(__file__).with_name("game_data.json")


def load_game_data(path: Path | None = None) -> dict[str, Any]:
    """Load the shared data file that holds the terrain palette."""

    data_file = path or _DATA_FILE
    if not data_file.exists():
        raise FileNotFoundError(
            f"Game data file not found. Expected {data_file}."
        )
    with data_file.open(encoding="utf-8") as fh:
        return json.load(fh)
