"""
Minesweeper package.

Provides the board engine, cell state, text rendering and the
console front end.
"""
from .cell import Cell, CellState, CellDisplay, DisplayKind
from .board import (
    Board,
    BoardConfig,
    ConfigurationError,
    GameState,
    BEGINNER,
    INTERMEDIATE,
    EXPERT,
    DIFFICULTIES,
    get_preset,
)
from .render import render_text, cell_label
from .console import Command, CommandError, ConsoleGame, parse_command

__all__ = [
    "Cell",
    "CellState",
    "CellDisplay",
    "DisplayKind",
    "Board",
    "BoardConfig",
    "ConfigurationError",
    "GameState",
    "BEGINNER",
    "INTERMEDIATE",
    "EXPERT",
    "DIFFICULTIES",
    "get_preset",
    "render_text",
    "cell_label",
    "Command",
    "CommandError",
    "ConsoleGame",
    "parse_command",
]
