"""
Minesweeper - command-line entry point.

Usage:
    minesweeper [--size N] [--mines N] [--difficulty LEVEL] [--seed N]
    python -m minesweeper

Board size and mine count not given on the command line are asked for
interactively.
"""
import argparse
import logging
import sys
from typing import List, Optional

from rich.console import Console
from rich.logging import RichHandler

from .board import BEGINNER, EXPERT, INTERMEDIATE, Board, BoardConfig
from .terminal import TerminalGame, prompt_int

DIFFICULTIES = {
    "beginner": BEGINNER,
    "intermediate": INTERMEDIATE,
    "expert": EXPERT,
}


def _non_negative_int(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"{value} is negative")
    return number


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"{value} is not positive")
    return number


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="minesweeper",
        description="Minesweeper in the terminal. Move with arrows or WASD, "
        "open with space/enter, flag with f, quit with q/escape.",
    )
    parser.add_argument(
        "--size", type=_positive_int, help="Board side length (NxN)"
    )
    parser.add_argument(
        "--mines", type=_non_negative_int, help="Number of mines"
    )
    parser.add_argument(
        "--difficulty",
        choices=sorted(DIFFICULTIES),
        help="Preset size and mine count (--size/--mines override it)",
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="Random seed for mine placement"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    return parser


def configure_logging(verbose: bool, console: Console) -> None:
    """Route log records through rich."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
    )


def resolve_config(
    args: argparse.Namespace, console: Console
) -> BoardConfig:
    """
    Build the board configuration from arguments and prompts.

    A preset supplies defaults; anything still missing is prompted for.
    """
    preset = DIFFICULTIES.get(args.difficulty)
    size = args.size
    mines = args.mines
    if preset is not None:
        size = preset.size if size is None else size
        mines = preset.num_mines if mines is None else mines

    if size is None:
        size = prompt_int("Please enter game field size", 1, console)
        console.print(f"Game field size is {size}")
    if mines is None:
        mines = prompt_int("Please enter mines count", 0, console)
        console.print(f"Mines count is {mines}")

    return BoardConfig(size, mines)


def main(argv: Optional[List[str]] = None) -> int:
    """Parse arguments and play one game."""
    args = build_parser().parse_args(argv)
    console = Console()
    configure_logging(args.verbose, console)

    if not sys.stdin.isatty():
        console.print("[red]Minesweeper needs an interactive terminal")
        return 1

    try:
        config = resolve_config(args, console)
        game = TerminalGame(Board(config, rng=args.seed), console=console)
        game.play()
    except KeyboardInterrupt:
        console.print()
    return 0
