"""Command-line options for the ``lightsout`` entry point."""
from __future__ import annotations

import argparse
from typing import Sequence

from lightsout.config import BoardConfig
from lightsout.constants import (
    DEFAULT_CHANCE_LIGHT_STARTS_ON,
    DEFAULT_COLS,
    DEFAULT_ROWS,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="lightsout", description="Play Lights Out: light every cell to win.")
    parser.add_argument("--rows", type=int, default=DEFAULT_ROWS, help="number of rows (default: %(default)s)")
    parser.add_argument("--cols", type=int, default=DEFAULT_COLS, help="number of columns (default: %(default)s)")
    parser.add_argument(
        "--chance",
        type=float,
        default=DEFAULT_CHANCE_LIGHT_STARTS_ON,
        help="probability each light starts on, 0..1 (default: %(default)s)",
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for a reproducible starting board")
    parser.add_argument("--width", type=int, default=WINDOW_WIDTH, help="window width in pixels")
    parser.add_argument("--height", type=int, default=WINDOW_HEIGHT, help="window height in pixels")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="logging verbosity (default: %(default)s)",
    )
    return parser


def parse_config(argv: Sequence[str] | None = None) -> tuple[argparse.Namespace, BoardConfig]:
    """Parse ``argv`` and build the board configuration; bad values exit via ``parser.error``."""
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        config = BoardConfig(nrows=args.rows, ncols=args.cols, chance_light_starts_on=args.chance)
    except ValueError as exc:
        parser.error(str(exc))
    return args, config
