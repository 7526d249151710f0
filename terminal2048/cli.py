# -*- coding: utf-8 -*-
"""
Command line entry point: create or load a board, play a list of moves and print the result.
"""
import argparse
import logging
from pathlib import Path

from terminal2048.config import DEFAULT_COLUMNS, DEFAULT_ROWS, GameConfig
from terminal2048.core import Direction
from terminal2048.session import GameSession

logger = logging.getLogger(__name__)


def parse_moves(value: str) -> list[Direction]:
    """Parse a comma separated list of directions, such as ``up,left,left``."""
    try:
        return [Direction.parse(name) for name in value.split(",") if name.strip()]
    except ValueError as error:
        raise argparse.ArgumentTypeError(str(error)) from error


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="terminal2048", description="Play 2048 from the command line.")
    parser.add_argument("--rows", help="Number of rows of a new board", type=int, default=DEFAULT_ROWS)
    parser.add_argument("--columns", help="Number of columns of a new board", type=int, default=DEFAULT_COLUMNS)
    parser.add_argument("--seed", help="Seed of the random generator", type=int, default=None)
    parser.add_argument("--load", help="Board file to start from", type=Path, default=None)
    parser.add_argument("--save", help="Board file to write at the end", type=Path, default=None)
    parser.add_argument("--moves", help="Comma separated moves to play", type=parse_moves, default=[])
    parser.add_argument("--auto-chain", help="Rearrange the board along its serpentine path", action="store_true")
    parser.add_argument("--verbose", help="Log every move and spawn", action="store_true")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = GameConfig(rows=args.rows, columns=args.columns, seed=args.seed)
    except ValueError as error:
        logger.error("Invalid configuration: %s", error)
        return 2

    session = GameSession(config)
    if args.load is not None:
        try:
            session.load(args.load)
        except (OSError, ValueError):
            return 1

    # ##: Play the moves until the board is stuck.
    for direction in args.moves:
        if session.move(direction) is not None:
            break

    if args.auto_chain:
        session.auto_chain()
    if args.save is not None:
        try:
            session.save(args.save)
        except OSError:
            return 1

    print(session.render(), end="")
    return 0
