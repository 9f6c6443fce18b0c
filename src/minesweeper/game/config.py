"""
Board configuration and difficulty presets.
"""
from dataclasses import dataclass


# Winmine's smallest custom board
MIN_CUSTOM_SIDE = 8
MIN_CUSTOM_MINES = 10


@dataclass
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        rows: Number of rows (board height).
        cols: Number of columns (board width).
        mines: Total mines to place.
    """

    rows: int = 9
    cols: int = 9
    mines: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.rows < 1 or self.cols < 1:
            raise ValueError("Board dimensions must be positive")
        if self.mines < 0:
            raise ValueError("Number of mines cannot be negative")
        max_mines = self.rows * self.cols
        if self.mines > max_mines:
            raise ValueError(f"Too many mines (max {max_mines})")

    @classmethod
    def custom(cls, cols: int, rows: int, mines: int) -> "BoardConfig":
        """
        Build a user-defined board, clamped to the classic limits.

        Width and height are raised to at least 8 and the mine count to at
        least 10, then the mine count is capped at (rows - 1) * (cols - 1).

        Args:
            cols: Requested board width.
            rows: Requested board height.
            mines: Requested number of mines.

        Returns:
            A valid configuration.
        """
        cols = max(cols, MIN_CUSTOM_SIDE)
        rows = max(rows, MIN_CUSTOM_SIDE)
        mines = max(mines, MIN_CUSTOM_MINES)
        mines = min(mines, (rows - 1) * (cols - 1))
        return cls(rows=rows, cols=cols, mines=mines)

    def label(self) -> str:
        """Describe the board for the selection menu."""
        return f"{self.rows:02}x{self.cols:02} {self.mines:02}"


# Preset difficulty levels
BEGINNER = BoardConfig(9, 9, 10)
INTERMEDIATE = BoardConfig(16, 16, 40)
EXPERT = BoardConfig(16, 30, 99)

PRESETS = (BEGINNER, INTERMEDIATE, EXPERT)
