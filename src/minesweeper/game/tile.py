"""
Tile module for Minesweeper game.

Represents individual tiles on the game board with their state
(revealed/flagged) and content (mine or not).
"""
from dataclasses import dataclass


# ============================================================================
# Tile Data Class
# ============================================================================

@dataclass
class Tile:
    """
    Represents a single tile in the Minesweeper grid.

    Attributes:
        revealed: Whether the player has uncovered this tile.
        has_mine: Whether this tile contains a mine.
        has_flag: Whether the player has marked this tile with a flag.
    """

    revealed: bool = False
    has_mine: bool = False
    has_flag: bool = False

    def reveal(self) -> bool:
        """
        Reveal this tile.

        A mined tile is left untouched so the board can still tell which
        mines were flagged when it draws the final state.

        Returns:
            True if the tile held a mine, False otherwise.
        """
        if self.has_mine:
            return True
        self.has_flag = False
        self.revealed = True
        return False

    def flag(self) -> None:
        """Toggle the flag on this tile."""
        self.has_flag = not self.has_flag

    @property
    def is_hidden(self) -> bool:
        """Check if tile is neither revealed nor flagged."""
        return not self.revealed and not self.has_flag
