"""
Pytest configuration and shared fixtures.
"""
import random
import sys
from pathlib import Path

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minesweeper import Board, BoardConfig, Cell


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def default_board() -> Board:
    """Create a seeded 9x9 board with 10 mines."""
    return Board(seed=1234)


@pytest.fixture
def empty_board() -> Board:
    """Create a board with no mines for flood testing."""
    return Board(BoardConfig(5, 5, 0))


@pytest.fixture
def corner_mine_board() -> Board:
    """
    4x4 board with one mine in the bottom-right corner.

    Counts:
        0 0 0 0
        0 0 0 0
        0 0 1 1
        0 0 1 *
    """
    return Board.from_layout([
        "....",
        "....",
        "....",
        "...*",
    ])


@pytest.fixture
def split_board() -> Board:
    """
    5x3 board whose column of mines splits it into two regions.

    Counts:
        0 2 * 2 0
        0 3 * 3 0
        0 2 * 2 0
    """
    return Board.from_layout([
        "..*..",
        "..*..",
        "..*..",
    ])


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source for reproducible layouts."""
    return random.Random(42)


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(is_mine=True)


@pytest.fixture
def numbered_cell() -> Cell:
    """Create a revealed cell with neighboring mines."""
    cell = Cell(neighbor_mines=3)
    cell.reveal()
    return cell


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> BoardConfig:
    """Create a valid board configuration."""
    return BoardConfig(9, 9, 10)
