"""
Cell module for Minesweeper.

Represents individual grid positions with their visual state
(hidden/revealed/flagged) and content (mine/neighbor count).
"""
from enum import Enum, auto
from dataclasses import dataclass


# ============================================================================
# Constants
# ============================================================================

class CellState(Enum):
    """Possible visual states of a cell."""

    HIDDEN = auto()
    REVEALED = auto()
    FLAGGED = auto()


class DisplayKind(Enum):
    """What a renderer should draw for a cell."""

    HIDDEN = auto()
    FLAGGED = auto()
    EMPTY = auto()
    NUMBERED = auto()
    MINE = auto()


@dataclass(frozen=True)
class CellDisplay:
    """
    Display classification of a cell.

    Attributes:
        kind: Which glyph class to draw.
        count: Neighbor mine count (1-8) for NUMBERED cells, else 0.
    """

    kind: DisplayKind
    count: int = 0


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    A single position in the Minesweeper grid.

    Attributes:
        is_mine: Whether this cell contains a mine.
        neighbor_mines: Count of mines in neighboring cells (0-8).
            Always 0 for mine cells.
        state: Current visual state (hidden, revealed, or flagged).
    """

    is_mine: bool = False
    neighbor_mines: int = 0
    state: CellState = CellState.HIDDEN

    def reveal(self) -> bool:
        """
        Reveal this cell.

        Returns:
            True if the cell was revealed, False if it was already
            revealed or is flagged.
        """
        if self.state != CellState.HIDDEN:
            return False
        self.state = CellState.REVEALED
        return True

    def uncover(self) -> None:
        """Reveal unconditionally, dropping any flag."""
        self.state = CellState.REVEALED

    def toggle_flag(self) -> bool:
        """
        Toggle flag on this cell.

        Returns:
            True if flag was toggled, False if cell is revealed.
        """
        if self.state == CellState.REVEALED:
            return False
        if self.state == CellState.HIDDEN:
            self.state = CellState.FLAGGED
        else:
            self.state = CellState.HIDDEN
        return True

    @property
    def is_hidden(self) -> bool:
        """Check if cell is hidden and unflagged."""
        return self.state == CellState.HIDDEN

    @property
    def is_revealed(self) -> bool:
        """Check if cell is revealed."""
        return self.state == CellState.REVEALED

    @property
    def is_flagged(self) -> bool:
        """Check if cell is flagged."""
        return self.state == CellState.FLAGGED

    def display(self) -> CellDisplay:
        """Classify the cell for a renderer."""
        if self.state == CellState.FLAGGED:
            return CellDisplay(DisplayKind.FLAGGED)
        if self.state == CellState.HIDDEN:
            return CellDisplay(DisplayKind.HIDDEN)
        if self.is_mine:
            return CellDisplay(DisplayKind.MINE)
        if self.neighbor_mines == 0:
            return CellDisplay(DisplayKind.EMPTY)
        return CellDisplay(DisplayKind.NUMBERED, self.neighbor_mines)

    def to_observation(self) -> int:
        """
        Convert cell to a numeric observation value.

        Returns:
            -1: Hidden cell
            -2: Flagged cell
            0-8: Revealed cell with neighbor mine count
            9: Revealed mine
        """
        if self.state == CellState.HIDDEN:
            return -1
        if self.state == CellState.FLAGGED:
            return -2
        if self.is_mine:
            return 9
        return self.neighbor_mines
