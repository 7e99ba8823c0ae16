"""Held-key tracking that produces the per-tick input snapshot."""
from __future__ import annotations

from typing import Hashable, Mapping

from goblin.movement import Direction, InputState


class HeldKeys:
    """Remember which movement keys are down between key events.

    ``mapping`` translates backend key codes to directions;
    several keys may share a direction, e.g. ``W`` and the up arrow.
    """

    def __init__(self, mapping: Mapping[Hashable, Direction]) -> None:
        self.mapping = dict(mapping)
        self._held: set[Hashable] = set()

    def press(self, key: Hashable) -> bool:
        if key not in self.mapping:
            return False
        self._held.add(key)
        return True

    def release(self, key: Hashable) -> bool:
        if key not in self.mapping:
            return False
        self._held.discard(key)
        return True

    def clear(self) -> None:
        """Forget every held key, e.g. when the window loses focus."""

        self._held.clear()

    def snapshot(self) -> InputState:
        held = {self.mapping[key] for key in self._held}
        return InputState(
            up=Direction.UP in held,
            down=Direction.DOWN in held,
            left=Direction.LEFT in held,
            right=Direction.RIGHT in held,
        )


def pygame_movement_keys() -> dict[int, Direction]:
    import pygame

    return {
        pygame.K_w: Direction.UP,
        pygame.K_UP: Direction.UP,
        pygame.K_s: Direction.DOWN,
        pygame.K_DOWN: Direction.DOWN,
        pygame.K_a: Direction.LEFT,
        pygame.K_LEFT: Direction.LEFT,
        pygame.K_d: Direction.RIGHT,
        pygame.K_RIGHT: Direction.RIGHT,
    }

