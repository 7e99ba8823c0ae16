"""Exceptions raised by map generation and player placement."""


class GoblinError(Exception):
    """Base class for errors raised by the game core."""


class InvalidDimensions(GoblinError, ValueError):
    """A grid was requested with a non-positive width or height."""

    def __init__(self, width: int, height: int) -> None:
        super().__init__(
            f"Grid dimensions must be at least 1×1, got {width}×{height}."
        )
        self.width = width
        self.height = height


class InvalidGenerationParams(GoblinError, ValueError):
    """Generation parameters are outside their allowed ranges."""


class NoWalkableTile(GoblinError):
    """A position search ran over a grid without a single walkable tile."""
