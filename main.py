# main.py
from __future__ import annotations

import argparse
import logging

from goblin.constants import BASE_MOVEMENT_SPEED, LOG_LEVEL, MAP_HEIGHT, MAP_WIDTH
from goblin.debug_overlay import DebugOverlay
from goblin.errors import GoblinError
from goblin.mapgen import GenerationParams
from goblin.ui import draw_map, map_legend
from goblin.world import MapSystem

logger = logging.getLogger("goblin")


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value}")
    return number


def _fraction(value: str) -> float:
    number = float(value)
    if not 0.0 <= number <= 1.0:
        raise argparse.ArgumentTypeError(f"expected a value in [0, 1], got {value}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="goblin-chase",
        description="Explore a generated isometric map of grass, swamp and water.",
    )
    parser.add_argument("--width", type=_positive_int, default=MAP_WIDTH)
    parser.add_argument("--height", type=_positive_int, default=MAP_HEIGHT)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--speed", type=float, default=BASE_MOVEMENT_SPEED, help="tiles per second")
    parser.add_argument("--water", type=_fraction, default=GenerationParams.water_fraction)
    parser.add_argument("--swamp", type=_fraction, default=GenerationParams.swamp_fraction)
    parser.add_argument("--noise", type=_fraction, default=GenerationParams.noise_fraction)
    parser.add_argument("--smoothing", type=int, default=GenerationParams.smoothing_passes)
    parser.add_argument("--name", default=None, help="player name")
    parser.add_argument(
        "--dump",
        action="store_true",
        help="print the generated map as text and exit instead of opening a window",
    )
    return parser


def _status_lines(system: MapSystem) -> dict[str, str]:
    player = system.player
    return {
        "Player": player.name,
        "Tile": f"({player.grid_x}, {player.grid_y}) {player.current_kind.name.title()}",
        "Facing": player.facing.value,
        "Map": f"#{system.generation} seed {system.grid.seed}",
    }


def dump_map(system: MapSystem) -> None:
    for row in draw_map(system.grid, system.player):
        print(row)
    print()
    for line in map_legend(system.grid):
        print(line)


def _handle_event(event, system: MapSystem, renderer, held, overlay) -> bool:
    """Apply one pygame event; return ``False`` when the game should quit."""

    import pygame

    if event.type == pygame.QUIT:
        return False
    if event.type == pygame.VIDEORESIZE:
        # WINDOWRESIZED arrives alongside and only carries x/y.
        renderer.set_window_size((event.w, event.h))
        return True
    if event.type == pygame.WINDOWFOCUSLOST:
        held.clear()
        return True
    if event.type == pygame.KEYUP:
        held.release(event.key)
        return True
    if event.type != pygame.KEYDOWN:
        return True

    key = event.key
    if key == pygame.K_ESCAPE:
        return False
    if key == pygame.K_F11:
        renderer.toggle_fullscreen()
    elif key == pygame.K_F3:
        overlay.toggle()
    elif key == pygame.K_r:
        try:
            system.regenerate(seed=None)
        except GoblinError as exc:
            logger.error("Map regeneration failed, keeping the current map: %s", exc)
    else:
        held.press(key)
    return True


def run_pygame(system: MapSystem) -> None:
    from goblin.controls import HeldKeys, pygame_movement_keys
    from goblin.graphics_pygame import PygameRenderer
    import pygame

    renderer = PygameRenderer()
    try:
        held = HeldKeys(pygame_movement_keys())
        overlay = DebugOverlay()

        while True:
            delta = renderer.tick()
            now = pygame.time.get_ticks()

            for event in pygame.event.get():
                if not _handle_event(event, system, renderer, held, overlay):
                    return

            system.update(held.snapshot(), now)

            overlay.update(now, delta)
            for metric, value in _status_lines(system).items():
                overlay.set_metric(metric, value)
            hovered = renderer.cell_under(pygame.mouse.get_pos(), system.grid)
            overlay.set_metric("Hover", "-" if hovered is None else f"{hovered[0]}, {hovered[1]}")

            renderer.clear()
            renderer.draw_scene(system.grid, system.player)
            renderer.draw_overlay(overlay)
            renderer.present()
    finally:
        renderer.close()


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, LOG_LEVEL, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        params = GenerationParams(
            water_fraction=args.water,
            swamp_fraction=args.swamp,
            noise_fraction=args.noise,
            smoothing_passes=args.smoothing,
        )
        system = MapSystem(
            args.width,
            args.height,
            params,
            seed=args.seed,
            player_name=args.name,
            base_speed=args.speed,
        )
    except (GoblinError, ValueError) as exc:
        logger.error("Could not create the map: %s", exc)
        return 1

    if args.dump:
        dump_map(system)
        return 0

    run_pygame(system)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
