#!/usr/bin/env python3
"""
Minesweeper - command line entry point.

Usage:
    minesweeper [--seed N] [--no-color] [--debug] [--log-file PATH]
"""
import argparse
import logging
from typing import List, Optional

from .console import GameSession, Prompter


def configure_logging(args: argparse.Namespace) -> None:
    """Set up logging from command line options."""
    level = logging.DEBUG if args.debug else logging.WARNING
    logging.basicConfig(
        level=level,
        filename=args.log_file,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        description="Minesweeper - play in your terminal"
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="Seed for the mine layouts of the session"
    )
    parser.add_argument(
        "--no-color", action="store_true", help="Draw the board without colours"
    )
    parser.add_argument(
        "--debug", action="store_true", help="Log debug messages"
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Write log records to this file instead of stderr",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Parse arguments and start a game session."""
    args = build_parser().parse_args(argv)
    configure_logging(args)

    session = GameSession(Prompter(), seed=args.seed, color=not args.no_color)
    session.run()


if __name__ == "__main__":
    main()
