"""
teafortwo CLI - Command-line interface for the game.

Usage:
    teafortwo play [--seed N]                         Play interactively
    teafortwo solve [--strategy S] [--runs N] [--seed N] [--json]
                                                      Batch AI run
    teafortwo demo                                    Shift a fixed position
"""

import argparse
import logging
import os
import sys
import time

from pydantic import ValidationError

# Environment configuration
TEAFORTWO_STRATEGY = os.getenv("TEAFORTWO_STRATEGY", "hungry")
TEAFORTWO_RUNS = os.getenv("TEAFORTWO_RUNS", "100")
TEAFORTWO_LOG_LEVEL = os.getenv("TEAFORTWO_LOG_LEVEL", "WARNING")

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

logger = logging.getLogger(__name__)


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="teafortwo - 2048 in the terminal",
        prog="teafortwo",
    )
    parser.add_argument(
        "--log-level",
        default=TEAFORTWO_LOG_LEVEL,
        help="Logging level (" + ", ".join(LOG_LEVELS) + ")",
    )
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Play command
    play_parser = subparsers.add_parser("play", help="Play interactively")
    play_parser.add_argument("--seed", type=int, default=None, help="Game seed")

    # Solve command
    solve_parser = subparsers.add_parser("solve", help="Run a strategy over seeded games")
    solve_parser.add_argument("--strategy", default=TEAFORTWO_STRATEGY, help="hungry or naive")
    solve_parser.add_argument("--runs", default=TEAFORTWO_RUNS, help="Number of games")
    solve_parser.add_argument("--seed", type=int, default=0, help="Seed of the first game")
    solve_parser.add_argument("--json", action="store_true", help="Print a JSON report")

    # Demo command
    subparsers.add_parser("demo", help="Shift a fixed position left, up and left")

    args = parser.parse_args(argv)

    log_level = args.log_level.strip().upper()
    if log_level not in LOG_LEVELS:
        choices = ", ".join(LOG_LEVELS)
        parser.error(f"invalid log level: {args.log_level!r} (choose from {choices})")

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    from .engine_core import GameError

    try:
        if args.command == "play":
            cmd_play(args)
        elif args.command == "solve":
            cmd_solve(args, parser)
        elif args.command == "demo":
            cmd_demo(args)
        else:
            parser.print_help()
            sys.exit(1)
    except GameError as e:
        logger.debug("command %s failed", args.command, exc_info=True)
        print(f"Error: {e}")
        sys.exit(1)


def cmd_play(args, read_line=input):
    """Interactive play, one key per line."""
    from .session import Session, GameLoop, LoopState
    from .reporting import render_grid, render_status

    seed = args.seed if args.seed is not None else time.time_ns()
    session = Session(seed)
    loop = GameLoop(session)

    print(f"Seed: {seed}")
    print("Keys: w/a/s/d, h/j/k/l or up/down/left/right; r restarts, q quits")
    print(render_grid(session.grid))
    print(render_status(session))

    while loop.state != LoopState.QUIT:
        try:
            key = read_line("> ")
        except EOFError:
            break

        result = loop.handle_key(key)
        if result.loop_state == LoopState.QUIT:
            break
        if result.success:
            print(render_grid(session.grid))
            print(render_status(session))
        if result.message:
            print(result.message)


def cmd_solve(args, parser):
    """Batch mode: solve seeded games and report the best one."""
    from .reporting import BatchConfig, BatchReport, render_grid, render_status
    from .session import SessionManager

    try:
        config = BatchConfig(strategy=args.strategy, runs=args.runs, base_seed=args.seed)
    except ValidationError as e:
        parser.error(str(e))

    manager = SessionManager()
    outcome = manager.run_batch(config.strategy, config.runs, config.base_seed)
    best = outcome.best

    if args.json:
        print(BatchReport.from_outcome(outcome).model_dump_json(indent=2))
        return

    print(f"Strategy: {config.strategy}")
    print(f"Games: {outcome.runs} (seeds {config.base_seed}..{config.base_seed + outcome.runs - 1})")
    print(f"Mean score: {outcome.mean_score:.1f}")
    print(f"Wins: {outcome.win_count}")
    print(f"\nBest game (seed {best.seed}):")
    print(render_grid(best.grid))
    print(render_status(best))


def cmd_demo(args):
    """Shift the fixed demonstration position, printing each step."""
    from .engine_core import Direction, Grid, shift_grid
    from .reporting import render_grid

    grid = Grid()
    grid.set(0, 0, 512)
    grid.set(1, 0, 16)
    grid.set(2, 0, 16)
    grid.set(3, 0, 32)
    grid.set(2, 2, 8)
    grid.set(3, 1, 512)

    print(render_grid(grid))
    for direction in (Direction.LEFT, Direction.UP, Direction.LEFT):
        result = shift_grid(grid, direction)
        print(f"\n{direction}: +{result.score_gained}")
        print(render_grid(grid))


if __name__ == "__main__":
    main()
