"""Centralized configuration constants for the map, projection and movement."""

import os


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if value > 0 else default


# Map size in tiles (width × height).
MAP_WIDTH = _env_int("GOBLIN_MAP_WIDTH", 20)
MAP_HEIGHT = _env_int("GOBLIN_MAP_HEIGHT", 20)

# Isometric tile footprint in pixels. A tile is drawn as a diamond
# TILE_WIDTH wide and TILE_HEIGHT tall.
TILE_WIDTH = 64
TILE_HEIGHT = 32

# Default generation parameters.
WATER_FRACTION = 0.2
SWAMP_FRACTION = 0.3
NOISE_FRACTION = 0.6
SMOOTHING_PASSES = 2

# Smoothing thresholds (8-connected neighbourhood).
WATER_GROWTH_NEIGHBOURS = 5
SHORE_SWAMP_NEIGHBOURS = 2
GRASS_RECLAIM_NEIGHBOURS = 6

SEED_RANGE = 1_000_000

# Movement parameters.
BASE_MOVEMENT_SPEED = 4.0  # tiles per second
SETTLE_INTERVAL_MS = 50  # minimum pause after an accepted step

# Window parameters.
WINDOW_WIDTH = 1280
WINDOW_HEIGHT = 720
FPS = 60

DEBUG_OVERLAY_UPDATE_INTERVAL_MS = 500

LOG_LEVEL = os.environ.get("GOBLIN_LOG_LEVEL", "INFO").upper()
