"""
Board module for Minesweeper game.

Implements the game board with mine placement, tile revealing,
flagging and terminal rendering.

Coordinates are (x, y) pairs: x is the column, y is the row.
"""
import logging
import random
import sys
from dataclasses import dataclass, field
from typing import List, Optional, TextIO, Tuple

import numpy as np

from .ansi import (
    FATAL_MINE,
    FLAGGED_MINE,
    NUMBER_COLORS,
    WRONG_FLAG,
    paint,
)
from .config import BoardConfig
from .status import GameStatus
from .tile import Tile

logger = logging.getLogger(__name__)


# ============================================================================
# Errors
# ============================================================================

class InvalidPosition(IndexError):
    """Raised when a coordinate lies outside the board."""

    def __init__(self, x: int, y: int, cols: int, rows: int) -> None:
        super().__init__(
            f"Position ({x}, {y}) is outside the {cols}x{rows} board"
        )
        self.x = x
        self.y = y


class BoardInvariantError(RuntimeError):
    """Raised when the board reaches a state that indicates a logic bug."""


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minesweeper game board.

    Owns a row-major list of tiles and reports the first pick and mine
    hits into the GameStatus it was given.
    """

    config: BoardConfig = field(default_factory=BoardConfig)
    status: Optional[GameStatus] = None
    seed: Optional[int] = None
    tiles: List[Tile] = field(init=False, repr=False)
    _rng: random.Random = field(init=False, repr=False)
    _mines_generated: bool = field(default=False, init=False, repr=False)

    def __post_init__(self) -> None:
        """Allocate the tiles after dataclass creation."""
        if self.status is None:
            self.status = GameStatus()
        self.tiles = [Tile() for _ in range(self.rows * self.cols)]
        self._rng = random.Random(self.seed)

    @property
    def rows(self) -> int:
        return self.config.rows

    @property
    def cols(self) -> int:
        return self.config.cols

    @property
    def mines_count(self) -> int:
        return self.config.mines

    # ========================================================================
    # Position Utilities (Low-level)
    # ========================================================================

    def _is_valid_position(self, x: int, y: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= x < self.cols and 0 <= y < self.rows

    def _index(self, x: int, y: int) -> int:
        """Convert a position to an index into the tile list."""
        if not self._is_valid_position(x, y):
            raise InvalidPosition(x, y, self.cols, self.rows)
        return y * self.cols + x

    def get_tile(self, x: int, y: int) -> Tile:
        """Get tile at position, raising InvalidPosition if out of range."""
        return self.tiles[self._index(x, y)]

    def get_neighboring_tiles(self, x: int, y: int) -> List[Tuple[int, int]]:
        """
        Get valid neighboring tile positions.

        Args:
            x: Column of the center tile.
            y: Row of the center tile.

        Returns:
            (x, y) tuples in row-major order, excluding the center and
            anything off the board.
        """
        self._index(x, y)
        neighbors = []
        for delta_y in (-1, 0, 1):
            for delta_x in (-1, 0, 1):
                if delta_x == 0 and delta_y == 0:
                    continue
                new_x = x + delta_x
                new_y = y + delta_y
                if self._is_valid_position(new_x, new_y):
                    neighbors.append((new_x, new_y))
        return neighbors

    def count_adjacent_mines(self, x: int, y: int) -> int:
        """Count mines adjacent to a specific tile."""
        return sum(
            1 for nx, ny in self.get_neighboring_tiles(x, y)
            if self.tiles[ny * self.cols + nx].has_mine
        )

    def adjacent_mine_counts(self) -> np.ndarray:
        """
        Count adjacent mines for every tile at once.

        Returns:
            int8 array of shape (rows, cols), indexed [y, x].
        """
        mines = np.array(
            [tile.has_mine for tile in self.tiles], dtype=np.int8
        ).reshape(self.rows, self.cols)
        padded = np.pad(mines, 1)
        counts = np.zeros_like(mines)
        for delta_y in (-1, 0, 1):
            for delta_x in (-1, 0, 1):
                if delta_x == 0 and delta_y == 0:
                    continue
                counts += padded[
                    1 + delta_y:1 + delta_y + self.rows,
                    1 + delta_x:1 + delta_x + self.cols,
                ]
        return counts

    # ========================================================================
    # Mine Placement (Low-level)
    # ========================================================================

    def _random_free_position(self) -> Tuple[int, int]:
        """Pick a uniformly random unmined position by rejection sampling."""
        if all(tile.has_mine for tile in self.tiles):
            raise BoardInvariantError("No unmined tile left on the board")
        while True:
            x = self._rng.randrange(self.cols)
            y = self._rng.randrange(self.rows)
            if not self.tiles[y * self.cols + x].has_mine:
                return x, y

    def generate_mines(self) -> None:
        """
        Place exactly mines_count mines at distinct random positions.

        Must be called once, before the first reveal.
        """
        if self._mines_generated:
            raise BoardInvariantError("Mines have already been generated")
        for _ in range(self.mines_count):
            x, y = self._random_free_position()
            self.tiles[y * self.cols + x].has_mine = True
        self._mines_generated = True
        logger.debug(
            "Placed %d mines on a %dx%d board",
            self.mines_count, self.cols, self.rows,
        )

    def mine_positions(self) -> List[Tuple[int, int]]:
        """Get (x, y) positions of every mine."""
        return [
            (index % self.cols, index // self.cols)
            for index, tile in enumerate(self.tiles)
            if tile.has_mine
        ]

    def _protect_first_pick(self, x: int, y: int) -> None:
        """Move a mine away from the first picked tile."""
        index = self._index(x, y)
        if not self.tiles[index].has_mine:
            return
        if all(tile.has_mine for tile in self.tiles):
            logger.warning("Every tile is mined, first pick cannot be made safe")
            return

        new_x, new_y = self._random_free_position()
        while (new_x, new_y) == (x, y):
            new_x, new_y = self._random_free_position()

        new_index = new_y * self.cols + new_x
        self.tiles[index], self.tiles[new_index] = (
            self.tiles[new_index], self.tiles[index]
        )
        logger.debug(
            "First pick at (%d, %d) was mined, moved mine to (%d, %d)",
            x, y, new_x, new_y,
        )

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def reveal(self, x: int, y: int) -> None:
        """
        Reveal the tile at the given position.

        The first reveal of a round never hits a mine. Tiles with no
        adjacent mines flood outwards until the region is bordered by
        numbered tiles. Revealing a mine ends the game and records the
        fatal tile in the status. Once the game has ended, a reveal only
        records its position as the ending tile and leaves the tiles alone.

        Args:
            x: Column to reveal.
            y: Row to reveal.

        Raises:
            InvalidPosition: If (x, y) is off the board.
        """
        index = self._index(x, y)
        if self.status.game_ended:
            self.status.game_ending_tile = (x, y)
            return

        if not self.status.picked_tile:
            self._protect_first_pick(x, y)
            self.status.picked_tile = True

        tile = self.tiles[index]
        if tile.revealed:
            return

        if tile.reveal():
            self.status.game_ended = True
            self.status.game_ending_tile = (x, y)
            logger.info("Mine hit at (%d, %d)", x, y)
            return

        self._flood_reveal(x, y)

    def _flood_reveal(self, x: int, y: int) -> None:
        """Reveal outwards from an already revealed tile."""
        stack = [(x, y)]
        while stack:
            current_x, current_y = stack.pop()
            neighbors = self.get_neighboring_tiles(current_x, current_y)
            if any(
                self.tiles[ny * self.cols + nx].has_mine
                for nx, ny in neighbors
            ):
                continue

            for neighbor_x, neighbor_y in neighbors:
                neighbor = self.tiles[neighbor_y * self.cols + neighbor_x]
                if neighbor.revealed:
                    continue
                # Neighbors of a zero tile are never mined
                neighbor.reveal()
                stack.append((neighbor_x, neighbor_y))

    def flag(self, x: int, y: int) -> bool:
        """
        Toggle flag on a tile.

        Args:
            x: Column.
            y: Row.

        Returns:
            True if flag was toggled, False if the tile is already revealed.

        Raises:
            InvalidPosition: If (x, y) is off the board.
        """
        tile = self.get_tile(x, y)
        if tile.revealed:
            return False
        tile.flag()
        return True

    def flag_all_remaining_tiles(self) -> None:
        """
        Flag every tile that is neither revealed nor flagged.

        Only valid once the unrevealed tiles are exactly the mines.

        Raises:
            BoardInvariantError: If remaining and flagged tiles do not add
                up to the mine count.
        """
        remaining = self.remaining_tiles()
        flagged = self.flagged_tiles()
        if remaining + flagged != self.mines_count:
            raise BoardInvariantError(
                f"Auto win with {remaining} remaining and {flagged} flagged "
                f"tiles, but only {self.mines_count} mines"
            )
        for tile in self.tiles:
            if tile.is_hidden:
                tile.flag()

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    def remaining_tiles(self) -> int:
        """Count tiles that are neither revealed nor flagged."""
        return sum(1 for tile in self.tiles if tile.is_hidden)

    def flagged_tiles(self) -> int:
        """Count flagged tiles."""
        return sum(1 for tile in self.tiles if tile.has_flag)

    def revealed_tiles(self) -> int:
        """Count revealed tiles."""
        return sum(1 for tile in self.tiles if tile.revealed)

    # ========================================================================
    # Rendering
    # ========================================================================

    def _glyph(self, x: int, y: int, count: int, color: bool) -> str:
        """Render a single tile."""
        tile = self.tiles[y * self.cols + x]

        if self.status.game_ended and tile.has_mine:
            if tile.has_flag:
                return paint("*", FLAGGED_MINE, color)
            if self.status.game_ending_tile == (x, y):
                return paint("*", FATAL_MINE, color)
            return "*"

        if tile.revealed:
            if count not in NUMBER_COLORS and count != 0:
                raise BoardInvariantError(
                    f"Tile ({x}, {y}) has {count} neighboring mines"
                )
            if count == 0:
                return " "
            return paint(str(count), NUMBER_COLORS[count], color)

        if tile.has_flag:
            if self.status.game_ended:
                return paint("^", WRONG_FLAG, color)
            return "^"

        return "#"

    def render(self, color: bool = True) -> str:
        """
        Render the board as fixed-width text.

        Args:
            color: Emit ANSI colour codes.

        Returns:
            The framed grid with the remaining mine count on top. The frame
            widens past the grid when the count does not fit.
        """
        counts = self.adjacent_mine_counts()
        counter = str(self.mines_count - self.flagged_tiles())
        label_width = max(2, len(str(self.rows - 1)))
        margin = " " * (label_width + 1)
        width = max(self.cols, len(counter) + 1)
        rule = "─" * width
        padding = " " * (width - self.cols)

        lines = [
            f"{margin}┌{rule}┐",
            f"{margin}│{counter.rjust(width - 1)} │",
            f"{margin}├{rule}┤",
        ]
        for y in range(self.rows):
            cells = "".join(
                self._glyph(x, y, int(counts[y, x]), color)
                for x in range(self.cols)
            )
            lines.append(f"{y:0{label_width}} │{cells}{padding}│")
        lines.append(f"{margin}└{rule}┘")
        return "\n".join(lines)

    def draw(self, stream: Optional[TextIO] = None, color: bool = True) -> None:
        """Write the rendered board to a stream (stdout by default)."""
        stream = stream if stream is not None else sys.stdout
        stream.write(self.render(color=color) + "\n")
