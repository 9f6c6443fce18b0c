"""
Minesweeper - terminal Minesweeper with first-click safety and flood reveal.
"""
from .game import Board, BoardConfig, GameState, GameStatus, Tile

__version__ = "0.1.0"

__all__ = [
    "Board",
    "BoardConfig",
    "GameState",
    "GameStatus",
    "Tile",
    "__version__",
]
