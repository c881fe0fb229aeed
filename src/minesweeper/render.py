"""
Text rendering for Minesweeper boards.

Turns the board's display classification into console text and
per-cell button labels. Holds no game rules.
"""
from typing import Dict, List

from .board import Board
from .cell import CellDisplay, DisplayKind


CONSOLE_GLYPHS: Dict[DisplayKind, str] = {
    DisplayKind.HIDDEN: "#",
    DisplayKind.FLAGGED: "F",
    DisplayKind.MINE: "*",
    DisplayKind.EMPTY: " ",
}

BUTTON_GLYPHS: Dict[DisplayKind, str] = {
    DisplayKind.HIDDEN: "■",
    DisplayKind.FLAGGED: "🚩",
    DisplayKind.MINE: "💣",
    DisplayKind.EMPTY: " ",
}


def glyph(display: CellDisplay, glyphs: Dict[DisplayKind, str]) -> str:
    """Pick the character for a cell; numbered cells show their count."""
    if display.kind == DisplayKind.NUMBERED:
        return str(display.count)
    return glyphs[display.kind]


def cell_label(board: Board, x: int, y: int) -> str:
    """Label for the cell's button in a graphical grid."""
    return glyph(board.cell_display(x, y), BUTTON_GLYPHS)


def render_text(board: Board) -> str:
    """
    Render the board as console text.

    The first line holds column indices; every following line starts
    with its row index.
    """
    header = "   " + "".join(f"{x:2} " for x in range(board.width))
    lines: List[str] = [header.rstrip()]
    for y in range(board.height):
        cells = "".join(
            f" {glyph(board.cell_display(x, y), CONSOLE_GLYPHS)} "
            for x in range(board.width)
        )
        lines.append(f"{y:2} {cells}")
    return "\n".join(lines)


def render_status(board: Board) -> str:
    """One-line summary of mines, flags and outcome."""
    status = f"Mines: {board.mine_count}  Flags: {board.flag_count}"
    if board.game_over:
        status += "  You win!" if board.win else "  You hit a mine!"
    return status
