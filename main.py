#!/usr/bin/env python3
"""
Minesweeper - Main entry point.

Usage:
    python main.py play [--difficulty {beginner,intermediate,expert}]
    python main.py play --width W --height H --mines M [--seed N]
    python main.py preview [--seed N]
"""
import argparse
import logging
import random

from src.minesweeper.board import (
    Board,
    BoardConfig,
    ConfigurationError,
    DIFFICULTIES,
    get_preset,
)
from src.minesweeper.console import ConsoleGame
from src.minesweeper.render import render_text


def build_config(
    args: argparse.Namespace, parser: argparse.ArgumentParser
) -> BoardConfig:
    """Turn command-line options into a board configuration."""
    custom = (args.width, args.height, args.mines)
    try:
        if any(value is not None for value in custom):
            if any(value is None for value in custom):
                parser.error("--width, --height and --mines must be given together")
            return BoardConfig(args.width, args.height, args.mines)
        return get_preset(args.difficulty)
    except ConfigurationError as exc:
        parser.error(str(exc))


def play(args: argparse.Namespace, config: BoardConfig) -> None:
    """Play interactively in the terminal."""
    game = ConsoleGame(config, rng=random.Random(args.seed))
    game.play_session()


def preview(args: argparse.Namespace, config: BoardConfig) -> None:
    """Print a fully revealed board."""
    board = Board(config, seed=args.seed)
    board.reveal_all()
    print(f"Board: {config.width}x{config.height} with {config.num_mines} mines")
    print(render_text(board))


def main() -> None:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(description="Minesweeper in the terminal")
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    for name, help_text in (
        ("play", "Play a game"),
        ("preview", "Show a revealed board"),
    ):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument(
            "--difficulty",
            choices=list(DIFFICULTIES),
            default="beginner",
            help="Preset board size",
        )
        sub.add_argument("--width", type=int, help="Custom number of columns")
        sub.add_argument("--height", type=int, help="Custom number of rows")
        sub.add_argument("--mines", type=int, help="Custom number of mines")
        sub.add_argument("--seed", type=int, help="Seed for mine placement")
        sub.add_argument(
            "--log-level",
            default="WARNING",
            choices=["DEBUG", "INFO", "WARNING", "ERROR"],
            help="Logging verbosity",
        )

    args = parser.parse_args()
    if args.command is None:
        parser.print_help()
        return

    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )
    config = build_config(args, parser)

    if args.command == "play":
        play(args, config)
    elif args.command == "preview":
        preview(args, config)


if __name__ == "__main__":
    main()
