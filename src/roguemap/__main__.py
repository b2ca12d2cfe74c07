from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace

from . import __version__
from .app import run_auto, run_gui, run_headless
from .config import Settings, load_settings
from .engine.world import World
from .exceptions import ConfigError, GridError
from .logging_config import configure_logging
from .rendering import AsciiRenderer, render_world
from .rng import parse_seed

logger = logging.getLogger("roguemap")


def _dump(settings: Settings) -> int:
    world = World.create(settings)
    renderer = AsciiRenderer(world.grid.width, world.grid.height)
    render_world(world, renderer)
    print(renderer)
    print(f"rooms={len(world.rooms)} player={world.player.pos} seed={world.seed_hex}")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="roguemap",
        description="Generate a dungeon and explore it",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--config", default=None, help="YAML settings file")
    parser.add_argument("--seed", default=None, help="Master seed (int or string); random if omitted")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--gui", action="store_true", help="Force GUI mode (Arcade)")
    mode.add_argument("--headless", action="store_true", help="Force headless mode (console)")
    mode.add_argument("--dump", action="store_true", help="Print the generated map and exit")
    parser.add_argument("--max-turns", type=int, default=None, help="Stop console play after N turns (also applies when the GUI falls back to the console)")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Increase log verbosity (-v, -vv)")

    args = parser.parse_args(argv)
    level = logging.WARNING
    if args.verbose == 1:
        level = logging.INFO
    elif args.verbose >= 2:
        level = logging.DEBUG
    configure_logging(level)

    try:
        settings = load_settings(args.config)
        if args.seed is not None:
            settings = replace(settings, seed=parse_seed(args.seed))

        if args.dump:
            return _dump(settings)
        if args.headless:
            return run_headless(settings, max_turns=args.max_turns)
        if args.gui:
            return run_gui(settings, max_turns=args.max_turns)
        return run_auto(settings, max_turns=args.max_turns)
    except (ConfigError, GridError) as exc:
        logger.error("Invalid configuration: %s", exc)
        return 2


if __name__ == "__main__":
    sys.exit(main())
