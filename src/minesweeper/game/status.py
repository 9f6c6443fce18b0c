"""
Game status tracking.

The session owns one GameStatus per round and hands it to the board,
which reports the first pick and mine hits into it.
"""
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Tuple


class GameState(Enum):
    """Possible states of the game."""

    PLAYING = auto()
    WON = auto()
    LOST = auto()


@dataclass
class GameStatus:
    """
    Mutable flags describing the progress of a single round.

    Attributes:
        picked_tile: The first reveal of the round has happened.
        game_ended: A mine was revealed.
        game_won: The win condition was met.
        game_ending_tile: (x, y) of the mine that ended the game.
    """

    picked_tile: bool = False
    game_ended: bool = False
    game_won: bool = False
    game_ending_tile: Optional[Tuple[int, int]] = None

    def reset(self) -> None:
        """Restore the defaults for a new round."""
        self.picked_tile = False
        self.game_ended = False
        self.game_won = False
        self.game_ending_tile = None

    @property
    def state(self) -> GameState:
        """Get current game state."""
        if self.game_ended:
            return GameState.LOST
        if self.game_won:
            return GameState.WON
        return GameState.PLAYING

    @property
    def is_playing(self) -> bool:
        """Check if game is still in progress."""
        return self.state == GameState.PLAYING
