import argparse
import logging
import sys
from dataclasses import replace

from pathgame.core.config import ConfigError, GameConfig, load_config, validate
from pathgame.core.engine import Game, GameStatus
from pathgame.agents.routing import UnreachableGoalError
from pathgame.rendering.text_renderer import TextRenderer


def parse_rc(s: str):
    try:
        r, c = s.split(",")
        return (int(r), int(c))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected row,col but got {s!r}") from None


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Grid A* pathfinding with a barrier-clearing powerup")
    ap.add_argument("mode", nargs="?", default="auto", choices=("auto", "direct", "play"),
                    help="auto: route via powerup when possible; direct: ignore the powerup; play: move by hand")
    ap.add_argument("--config", help="JSON file with config overrides")
    ap.add_argument("--size", type=int, help="grid dimension N; barriers, powerup and hazard outside it are dropped, start and goal must fit")
    ap.add_argument("--start", type=parse_rc, help="start row,col")
    ap.add_argument("--goal", type=parse_rc, help="destination row,col")
    ap.add_argument("--barrier", type=parse_rc, action="append", help="barrier row,col (repeatable)")
    ap.add_argument("--no-barriers", action="store_true", help="start with an empty board")
    ap.add_argument("--powerup", type=parse_rc, help="powerup row,col")
    ap.add_argument("--no-powerup", action="store_true", help="remove the powerup")
    ap.add_argument("--hazard", type=parse_rc, help="hazard row,col")
    ap.add_argument("--delay", type=float, help="seconds between playback steps")
    ap.add_argument("--window", action="store_true", help="draw in a pygame window instead of the terminal")
    ap.add_argument("--log-level", default="WARNING", help="logging level (DEBUG, INFO, ...)")
    return ap


def config_from_args(args) -> GameConfig:
    config = load_config(args.config) if args.config else GameConfig()

    overrides = {}
    if args.size is not None:
        overrides["GRID_SIZE"] = args.size
        overrides["BARRIERS"] = tuple(
            (r, c) for r, c in config.BARRIERS if r < args.size and c < args.size
        )
        for name in ("POWERUP", "HAZARD"):
            cell = getattr(config, name)
            if cell is not None and max(cell) >= args.size:
                overrides[name] = None
    if args.start is not None:
        overrides["START"] = args.start
    if args.goal is not None:
        overrides["DESTINATION"] = args.goal
    if args.no_barriers:
        overrides["BARRIERS"] = ()
    if args.barrier:
        overrides["BARRIERS"] = tuple(args.barrier)
    if args.no_powerup:
        overrides["POWERUP"] = None
    elif args.powerup is not None:
        overrides["POWERUP"] = args.powerup
    if args.hazard is not None:
        overrides["HAZARD"] = args.hazard
    if args.delay is not None:
        overrides["STEP_DELAY"] = args.delay

    config = replace(config, **overrides)
    validate(config)
    return config


def make_renderer(args, config):
    if args.window:
        from pathgame.rendering.renderer import GameRenderer
        return GameRenderer(config)
    return TextRenderer()


def hold_window(game: Game) -> None:
    """Keep the window open until it is closed."""
    while game.status is not GameStatus.QUIT:
        game.handle_input()
        game.render()
        game.renderer.tick(game.config.FPS)


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    numeric_level = getattr(logging, str(args.log_level).upper(), logging.WARNING)
    logging.basicConfig(level=numeric_level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    try:
        config = config_from_args(args)
    except ConfigError as e:
        print(f"Config error: {e}", file=sys.stderr)
        return 1

    renderer = make_renderer(args, config)
    game = Game(config, renderer=renderer)

    try:
        if args.mode == "play":
            status = game.run_interactive()
        else:
            try:
                game.plan_route(use_powerup=args.mode == "auto")
            except UnreachableGoalError as e:
                print(f"Unreachable goal: {e}", file=sys.stderr)
                return 1
            status = game.play()

        for line in game.summary():
            print(line)

        if args.window and status is not GameStatus.QUIT:
            hold_window(game)
    finally:
        if args.window:
            renderer.quit()

    return 0 if status is not GameStatus.LOST else 2


if __name__ == "__main__":
    sys.exit(main())
