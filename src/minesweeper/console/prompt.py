"""
Line-based terminal input.

Reads one line at a time and turns it into a number, a cancel request
or an invalid entry. Nothing here ever raises on bad user input.
"""
import logging
import sys
from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable, Optional, Sequence, TextIO

from ..game.ansi import CLEAR_SCREEN

logger = logging.getLogger(__name__)


class InputKind(Enum):
    """What the user typed."""

    NUMBER = auto()
    CANCEL = auto()
    INVALID = auto()


@dataclass(frozen=True)
class Input:
    """A single parsed line of user input."""

    kind: InputKind
    value: Optional[int] = None

    @property
    def is_cancel(self) -> bool:
        return self.kind == InputKind.CANCEL

    @property
    def is_invalid(self) -> bool:
        return self.kind == InputKind.INVALID

    @property
    def number(self) -> int:
        """Get the entered number, raising ValueError for anything else."""
        if self.kind != InputKind.NUMBER or self.value is None:
            raise ValueError(f"Input is {self.kind.name}, not a number")
        return self.value


class Action(Enum):
    """Things a player can do to a tile, numbered as in the menu."""

    REVEAL = 1
    FLAG = 2

    @property
    def label(self) -> str:
        return _ACTION_LABELS[self]


_ACTION_LABELS = {
    Action.REVEAL: "Reveal the tile",
    Action.FLAG: "Place or remove a flag",
}


def parse_input(line: str, option_count: Optional[int] = None) -> Input:
    """
    Interpret a raw input line.

    Args:
        line: Text as read from the terminal.
        option_count: Number of menu choices, if the prompt had a menu.

    Returns:
        CANCEL for lines starting with "c", NUMBER for a non-negative
        integer (1..option_count when a menu is given), INVALID otherwise.
    """
    if line.startswith("c"):
        return Input(InputKind.CANCEL)
    try:
        value = int(line.strip())
    except ValueError:
        return Input(InputKind.INVALID)
    if value < 0:
        return Input(InputKind.INVALID)
    if option_count is not None and not 1 <= value <= option_count:
        return Input(InputKind.INVALID)
    return Input(InputKind.NUMBER, value)


class Prompter:
    """
    Terminal front end for the session loop.

    Args:
        read_line: Function returning the next line of input; raises
            EOFError when input is exhausted.
        stream: Where prompts and messages are written.
    """

    def __init__(
        self,
        read_line: Callable[[], str] = input,
        stream: Optional[TextIO] = None,
    ) -> None:
        self._read_line = read_line
        self.stream = stream if stream is not None else sys.stdout

    def message(self, text: str) -> None:
        self.stream.write(text + "\n")

    def clear(self) -> None:
        self.stream.write(CLEAR_SCREEN)

    def read_number(
        self, message: str, options: Optional[Sequence[str]] = None
    ) -> Input:
        """
        Ask for a number, optionally from a numbered menu.

        Args:
            message: Prompt text.
            options: Menu labels, shown as "[1]: label" and so on.

        Returns:
            The parsed input.
        """
        self.message(f"{message} (c to cancel):")
        if options:
            for number, option in enumerate(options, start=1):
                self.message(f"[{number}]: {option}")

        line = self._read_line()
        result = parse_input(line, len(options) if options else None)
        if result.is_invalid:
            logger.debug("Rejected input %r for %r", line, message)
        return result

    def pause(self) -> None:
        """Wait for the user to press Return."""
        self.message("Press Return to continue!")
        self._read_line()
