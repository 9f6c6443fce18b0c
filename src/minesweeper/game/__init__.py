"""
Minesweeper game module.

Provides core game logic including board management, tile state and
round status.
"""
from .tile import Tile
from .status import GameState, GameStatus
from .config import BoardConfig, BEGINNER, INTERMEDIATE, EXPERT, PRESETS
from .board import Board, BoardInvariantError, InvalidPosition

__all__ = [
    "Tile",
    "GameState",
    "GameStatus",
    "BoardConfig",
    "BEGINNER",
    "INTERMEDIATE",
    "EXPERT",
    "PRESETS",
    "Board",
    "BoardInvariantError",
    "InvalidPosition",
]
