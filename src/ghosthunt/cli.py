from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional

from .engine.session import GameSession
from .exceptions import GhostHuntError
from .level.generator import LevelGenerator
from .render.ascii import AsciiRenderer, format_frame
from .settings import Settings, load_settings

logger = logging.getLogger(__name__)


def _settings(args: argparse.Namespace) -> Settings:
    settings = load_settings(args.config)
    if args.seed is not None:
        settings = settings.replace(seed=args.seed)
    return settings


def _cmd_play(args: argparse.Namespace) -> int:  # pragma: no cover - needs a display
    from .render import arcade_view

    arcade_view.run(GameSession(_settings(args)))
    return 0


def _cmd_run(args: argparse.Namespace) -> int:
    renderer = AsciiRenderer(stream=sys.stdout, echo=args.verbose)
    session = GameSession(_settings(args), renderer=renderer)
    session.start()
    completed = session.play_script(args.moves)
    # Frames are drawn before the turn counter advances and before a level change.
    final = session.engine.snapshot()
    if not args.verbose or renderer.last != final:
        print(format_frame(final))
    print(f"Levels completed: {completed}")
    return 0


def _cmd_show(args: argparse.Namespace) -> int:
    settings = _settings(args)
    grid = LevelGenerator(settings.width, settings.height).generate()
    print(grid)
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="ghosthunt", description="Turn-based ghost hunting on a tile grid")
    p.add_argument("--config", help="YAML settings file", default=None)
    p.add_argument("--seed", type=int, default=None, help="Seed for the ghost random walk")
    p.add_argument(
        "--log-level",
        default="WARNING",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    play = sub.add_parser("play", help="Open the game window")
    play.set_defaults(func=_cmd_play)

    run = sub.add_parser("run", help="Play a move script headlessly and print the final board")
    run.add_argument("moves", help="Moves as U/D/L/R characters, e.g. 'LLUUR'")
    run.add_argument("-v", "--verbose", action="store_true", help="Print the board after every turn")
    run.set_defaults(func=_cmd_run)

    show = sub.add_parser("show", help="Print the generated level layout")
    show.set_defaults(func=_cmd_show)

    return p


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    try:
        return args.func(args)
    except (GhostHuntError, ValueError) as exc:
        logger.error("%s", exc)
        return 1


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
