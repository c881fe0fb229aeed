"""
Board module for Minesweeper.

Implements the game board with mine placement, cell revealing,
flagging and win/lose detection.
"""
import logging
import random
from collections import deque
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

import numpy as np

from .cell import Cell, CellDisplay


logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

class GameState(Enum):
    """Possible states of the game."""

    PLAYING = auto()
    WON = auto()
    LOST = auto()


NEIGHBOR_OFFSETS = (
    (-1, -1), (0, -1), (1, -1),
    (-1, 0),           (1, 0),
    (-1, 1),  (0, 1),  (1, 1),
)


class ConfigurationError(ValueError):
    """Raised when board parameters cannot produce a playable board."""


@dataclass
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        num_mines: Total mines to place.
    """

    width: int = 9
    height: int = 9
    num_mines: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.width < 1 or self.height < 1:
            raise ConfigurationError("Board dimensions must be positive")
        if self.num_mines < 0:
            raise ConfigurationError("Number of mines cannot be negative")
        max_mines = self.width * self.height - 1
        if self.num_mines > max_mines:
            raise ConfigurationError(f"Too many mines (max {max_mines})")

    @property
    def total_cells(self) -> int:
        """Number of cells on the board."""
        return self.width * self.height


# Preset difficulty levels
BEGINNER = BoardConfig(9, 9, 10)
INTERMEDIATE = BoardConfig(16, 16, 40)
EXPERT = BoardConfig(25, 25, 99)

DIFFICULTIES: Dict[str, BoardConfig] = {
    "beginner": BEGINNER,
    "intermediate": INTERMEDIATE,
    "expert": EXPERT,
}


def get_preset(name: str) -> BoardConfig:
    """Look up a difficulty preset by name (case-insensitive)."""
    try:
        return DIFFICULTIES[name.strip().lower()]
    except KeyError:
        choices = ", ".join(DIFFICULTIES)
        raise ConfigurationError(
            f"Unknown difficulty '{name}' (choose from {choices})"
        ) from None


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minesweeper game board.

    Owns a flat grid of ``width * height`` cells indexed ``y * width + x``.
    Mines are placed and neighbor counts computed during construction, so
    the board is ready to play as soon as it exists. Start a new game by
    building a new Board.

    Mine placement draws from ``rng`` when given, otherwise from a
    ``random.Random`` seeded with ``seed`` (unseeded if None).
    """

    config: BoardConfig = field(default_factory=BoardConfig)
    seed: Optional[int] = None
    rng: Optional[random.Random] = field(default=None, repr=False)
    mine_indices: Optional[Sequence[int]] = field(default=None, repr=False)
    _cells: List[Cell] = field(default_factory=list, init=False, repr=False)
    _game_state: GameState = field(default=GameState.PLAYING, init=False)
    _safe_remaining: int = field(default=0, init=False, repr=False)

    def __post_init__(self) -> None:
        """Build the grid, place mines and compute neighbor counts."""
        if self.rng is None:
            self.rng = random.Random(self.seed)
        self._cells = [Cell() for _ in range(self.config.total_cells)]
        self._place_mines()
        self._calculate_neighbor_mines()
        self._safe_remaining = self.config.total_cells - self.config.num_mines
        logger.debug(
            "Created %dx%d board with %d mines",
            self.config.width, self.config.height, self.config.num_mines,
        )

    @classmethod
    def from_layout(cls, rows: Sequence[str]) -> "Board":
        """
        Build a board with mines at fixed positions.

        Args:
            rows: One string per row, top to bottom. ``*`` marks a mine,
                any other character a safe cell. All rows must have the
                same length.

        Returns:
            A new Board in the playing state.

        Raises:
            ConfigurationError: If the layout is empty, ragged or has no
                safe cell.
        """
        if not rows or not rows[0]:
            raise ConfigurationError("Layout must have at least one cell")
        width = len(rows[0])
        if any(len(row) != width for row in rows):
            raise ConfigurationError("Layout rows must all be the same length")
        mines = [
            y * width + x
            for y, row in enumerate(rows)
            for x, char in enumerate(row)
            if char == "*"
        ]
        config = BoardConfig(width, len(rows), len(mines))
        return cls(config, mine_indices=mines)

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def _place_mines(self) -> None:
        """Mark ``num_mines`` distinct cells as mines."""
        if self.mine_indices is None:
            indices = self.rng.sample(
                range(self.config.total_cells), self.config.num_mines
            )
        else:
            indices = list(self.mine_indices)
            if len(set(indices)) != self.config.num_mines:
                raise ConfigurationError(
                    f"Expected {self.config.num_mines} distinct mine positions"
                )
        for index in indices:
            if not 0 <= index < self.config.total_cells:
                raise ConfigurationError(f"Mine position {index} is off the board")
            self._cells[index].is_mine = True

    def _calculate_neighbor_mines(self) -> None:
        """Calculate neighbor mine counts for all safe cells."""
        for y in range(self.config.height):
            for x in range(self.config.width):
                cell = self._cell_at(x, y)
                if cell.is_mine:
                    cell.neighbor_mines = 0
                    continue
                cell.neighbor_mines = sum(
                    1 for nx, ny in self._neighbors(x, y)
                    if self._cell_at(nx, ny).is_mine
                )

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def _index(self, x: int, y: int) -> int:
        return y * self.config.width + x

    def _cell_at(self, x: int, y: int) -> Cell:
        return self._cells[self._index(x, y)]

    def _neighbors(self, x: int, y: int) -> Iterator[Tuple[int, int]]:
        """Yield in-bounds Moore neighbors of (x, y)."""
        for dx, dy in NEIGHBOR_OFFSETS:
            nx, ny = x + dx, y + dy
            if self.in_bounds(nx, ny):
                yield nx, ny

    def in_bounds(self, x: int, y: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= x < self.config.width and 0 <= y < self.config.height

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def reveal(self, x: int, y: int) -> bool:
        """
        Reveal the cell at column ``x``, row ``y``.

        Out-of-bounds positions, revealed or flagged cells and any call
        after the game has ended are ignored. Revealing a mine loses the
        game. Revealing a cell with no neighboring mines opens its whole
        empty region. The game is won once every safe cell is revealed.

        Returns:
            True if the board changed, False if the call was ignored.
        """
        if not self._can_reveal(x, y):
            return False

        cell = self._cell_at(x, y)
        cell.reveal()

        if cell.is_mine:
            self._finish(GameState.LOST)
            return True

        self._safe_remaining -= 1
        if cell.neighbor_mines == 0:
            self._flood_reveal(x, y)

        if self._safe_remaining == 0:
            self._finish(GameState.WON)
        return True

    def _can_reveal(self, x: int, y: int) -> bool:
        """Check if a cell can be revealed."""
        if self._game_state != GameState.PLAYING:
            return False
        if not self.in_bounds(x, y):
            return False
        return self._cell_at(x, y).is_hidden

    def _flood_reveal(self, x: int, y: int) -> None:
        """Open the empty region around (x, y) and its numbered border."""
        pending = deque([(x, y)])
        while pending:
            cx, cy = pending.pop()
            for nx, ny in self._neighbors(cx, cy):
                neighbor = self._cell_at(nx, ny)
                # flags block the flood
                if not neighbor.reveal():
                    continue
                assert not neighbor.is_mine, "flood reveal reached a mine"
                self._safe_remaining -= 1
                if neighbor.neighbor_mines == 0:
                    pending.append((nx, ny))

    def _finish(self, state: GameState) -> None:
        self._game_state = state
        logger.info("Game over: %s", state.name)

    def toggle_flag(self, x: int, y: int) -> bool:
        """
        Toggle flag on a cell.

        Returns:
            True if flag was toggled, False otherwise.
        """
        if self._game_state != GameState.PLAYING:
            return False
        if not self.in_bounds(x, y):
            return False
        return self._cell_at(x, y).toggle_flag()

    def reveal_all(self) -> None:
        """Reveal every cell, flags and mines included, for a final display."""
        for cell in self._cells:
            cell.uncover()
        self._safe_remaining = 0

    def check_win(self) -> bool:
        """Check if all non-mine cells are revealed."""
        return all(cell.is_revealed for cell in self._cells if not cell.is_mine)

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def width(self) -> int:
        return self.config.width

    @property
    def height(self) -> int:
        return self.config.height

    @property
    def mine_count(self) -> int:
        return self.config.num_mines

    @property
    def game_state(self) -> GameState:
        """Get current game state."""
        return self._game_state

    @property
    def game_over(self) -> bool:
        """Check if the game has ended, won or lost."""
        return self._game_state != GameState.PLAYING

    @property
    def win(self) -> bool:
        """Check if the game ended in a win."""
        return self._game_state == GameState.WON

    @property
    def is_playing(self) -> bool:
        """Check if game is still in progress."""
        return self._game_state == GameState.PLAYING

    @property
    def is_won(self) -> bool:
        return self._game_state == GameState.WON

    @property
    def is_lost(self) -> bool:
        return self._game_state == GameState.LOST

    def is_game_over(self) -> bool:
        return self.game_over

    def did_win(self) -> bool:
        return self.win

    @property
    def flag_count(self) -> int:
        """Number of cells currently flagged."""
        return sum(1 for cell in self._cells if cell.is_flagged)

    def get_cell(self, x: int, y: int) -> Optional[Cell]:
        """Get cell at position, or None if invalid."""
        if not self.in_bounds(x, y):
            return None
        return self._cell_at(x, y)

    def cell_display(self, x: int, y: int) -> CellDisplay:
        """
        Classify the cell at (x, y) for a renderer.

        Raises:
            IndexError: If the position is off the board.
        """
        if not self.in_bounds(x, y):
            raise IndexError(f"({x}, {y}) is outside the board")
        return self._cell_at(x, y).display()

    def get_observation(self) -> np.ndarray:
        """
        Get board state as a numpy array.

        Returns:
            2D int8 array of shape (height, width) where:
                -1 = hidden
                -2 = flagged
                0-8 = revealed with neighbor count
                9 = revealed mine
        """
        obs = np.fromiter(
            (cell.to_observation() for cell in self._cells),
            dtype=np.int8,
            count=len(self._cells),
        )
        return obs.reshape(self.config.height, self.config.width)

    def hidden_positions(self) -> List[Tuple[int, int]]:
        """
        List cells that can still be revealed.

        Returns:
            (x, y) positions of hidden, unflagged cells.
        """
        return [
            (index % self.config.width, index // self.config.width)
            for index, cell in enumerate(self._cells)
            if cell.is_hidden
        ]
