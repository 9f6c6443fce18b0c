"""
Pytest configuration and shared fixtures.
"""
import io
import sys
from pathlib import Path
from typing import Callable, Iterable, List

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minesweeper.console import Prompter
from minesweeper.game import Board, BoardConfig, GameStatus, Tile


# ============================================================================
# Board Fixtures
# ============================================================================

def board_from_layout(layout: List[str]) -> Board:
    """
    Build a board with mines at fixed positions.

    Each string is a row; "*" marks a mine, anything else is safe.
    """
    rows = len(layout)
    cols = len(layout[0])
    mines = sum(row.count("*") for row in layout)
    board = Board(BoardConfig(rows, cols, mines))
    for y, row in enumerate(layout):
        for x, char in enumerate(row):
            if char == "*":
                board.get_tile(x, y).has_mine = True
    return board


@pytest.fixture
def make_board() -> Callable[[List[str]], Board]:
    """Factory for boards with a known mine layout."""
    return board_from_layout


@pytest.fixture
def default_board() -> Board:
    """Create a default 9x9 board with 10 mines placed."""
    board = Board(seed=1234)
    board.generate_mines()
    return board


@pytest.fixture
def empty_board() -> Board:
    """Create a board with no mines for flood testing."""
    return Board(BoardConfig(5, 5, 0))


@pytest.fixture
def corner_mine_board() -> Board:
    """3x3 board with a single mine in the top-left corner, first pick done."""
    board = board_from_layout(["*..", "...", "..."])
    board.status.picked_tile = True
    return board


# ============================================================================
# Tile / Status Fixtures
# ============================================================================

@pytest.fixture
def hidden_tile() -> Tile:
    """Create a hidden tile."""
    return Tile()


@pytest.fixture
def mine_tile() -> Tile:
    """Create a tile containing a mine."""
    return Tile(has_mine=True)


@pytest.fixture
def status() -> GameStatus:
    """Create a fresh round status."""
    return GameStatus()


# ============================================================================
# Console Fixtures
# ============================================================================

def scripted_input(lines: Iterable[str]) -> Callable[[], str]:
    """Return a read_line function that replays lines, then hits EOF."""
    feed = iter(lines)

    def read_line() -> str:
        try:
            return next(feed)
        except StopIteration:
            raise EOFError from None

    return read_line


@pytest.fixture
def make_prompter() -> Callable[[Iterable[str]], Prompter]:
    """Factory for prompters fed from a list of lines into a StringIO."""
    def factory(lines: Iterable[str]) -> Prompter:
        return Prompter(read_line=scripted_input(lines), stream=io.StringIO())

    return factory
