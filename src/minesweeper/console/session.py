"""
Interactive game session.

Drives the board selection menu, the per-turn input/act/render cycle
and restarts once a round is over.
"""
import logging
import random
from typing import Optional

from ..game.board import Board
from ..game.config import BoardConfig, PRESETS
from ..game.status import GameStatus
from .prompt import Action, Prompter

logger = logging.getLogger(__name__)

BANNER = "Starting Minesweeper..."


def update_win_state(board: Board, status: GameStatus) -> bool:
    """
    Check whether the round has been won.

    The round is won when nothing is left to reveal, or when the tiles
    still covered are exactly the mines, in which case the unflagged
    ones get flagged automatically.

    Args:
        board: Board being played.
        status: Status of the round, updated in place.

    Returns:
        True if the round is won.
    """
    if status.game_ended or status.game_won:
        return status.game_won

    remaining = board.remaining_tiles()
    flagged = board.flagged_tiles()

    if remaining == 0:
        status.game_won = True
    elif remaining + flagged == board.mines_count:
        board.flag_all_remaining_tiles()
        status.game_won = True

    if status.game_won:
        logger.info("Round won on a %dx%d board", board.cols, board.rows)
    return status.game_won


class GameSession:
    """
    Plays rounds of Minesweeper in the terminal until input runs out.

    Args:
        prompter: Input/output front end.
        seed: Seed for the sequence of rounds. Each round gets its own
            layout drawn from it, so a seeded session is reproducible
            without repeating the same board.
        color: Draw the board with ANSI colours.
    """

    def __init__(
        self,
        prompter: Optional[Prompter] = None,
        seed: Optional[int] = None,
        color: bool = True,
    ) -> None:
        self.prompter = prompter or Prompter()
        self.seed = seed
        self.color = color
        self.status = GameStatus()
        self._rng = random.Random(seed)

    def next_round_seed(self) -> Optional[int]:
        """Seed for the next board, or None for an unseeded session."""
        if self.seed is None:
            return None
        return self._rng.getrandbits(32)

    def run(self) -> None:
        """Play rounds until input ends or the user interrupts."""
        self.prompter.clear()
        self.prompter.message(BANNER)
        try:
            while True:
                self.play_round()
        except (EOFError, KeyboardInterrupt):
            logger.debug("Input closed, leaving session")
            self.prompter.message("")

    # ========================================================================
    # Board Selection
    # ========================================================================

    def _choose_config(self) -> Optional[BoardConfig]:
        """Show the board menu and return the chosen configuration."""
        options = [config.label() for config in PRESETS]
        options.append("Custom board")
        choice = self.prompter.read_number("Please select board size", options)

        if choice.is_cancel:
            return None
        if choice.is_invalid:
            self.prompter.message("Selected board is invalid!")
            return None

        if choice.number == len(options):
            return self._custom_config()
        return PRESETS[choice.number - 1]

    def _custom_config(self) -> Optional[BoardConfig]:
        """Ask for the size of a custom board."""
        values = []
        for message in ("Board width", "Board height", "Number of mines"):
            entry = self.prompter.read_number(message)
            if entry.is_cancel:
                return None
            if entry.is_invalid:
                self.prompter.message("Invalid custom board!")
                return None
            values.append(entry.number)

        cols, rows, mines = values
        return BoardConfig.custom(cols=cols, rows=rows, mines=mines)

    # ========================================================================
    # Round Loop
    # ========================================================================

    def play_round(self) -> Optional[Board]:
        """
        Play one round from board selection to win or loss.

        Returns:
            The finished board, or None if no board was chosen.
        """
        self.status.reset()

        config = self._choose_config()
        if config is None:
            return None

        board = Board(config, status=self.status, seed=self.next_round_seed())
        board.generate_mines()
        logger.info("New %s round", config.label())

        while True:
            self.prompter.clear()
            update_win_state(board, self.status)
            board.draw(self.prompter.stream, color=self.color)

            if self.status.game_won:
                self.prompter.message("You won!")
                self.prompter.pause()
                return board

            if self.status.game_ended:
                self.prompter.message("Game over!")
                self.prompter.pause()
                return board

            self._play_turn(board)

    def _play_turn(self, board: Board) -> None:
        """Read one coordinate and action and apply it."""
        x = self.prompter.read_number("Select an X position")
        if x.is_cancel or x.is_invalid:
            return
        if x.number >= board.cols:
            self.prompter.message("X position is invalid!")
            self.prompter.pause()
            return

        y = self.prompter.read_number("Select a Y position")
        if y.is_cancel or y.is_invalid:
            return
        if y.number >= board.rows:
            self.prompter.message("Y position is invalid!")
            self.prompter.pause()
            return

        choice = self.prompter.read_number(
            "What would you like to do", [action.label for action in Action]
        )
        if choice.is_cancel or choice.is_invalid:
            return
        action = Action(choice.number)

        logger.debug("User action: %s at (%d, %d)", action.name, x.number, y.number)
        if action == Action.REVEAL:
            board.reveal(x.number, y.number)
        else:
            board.flag(x.number, y.number)
