"""
Terminal front end for Minesweeper.

Provides line-based prompting and the interactive session loop.
"""
from .prompt import Action, Input, InputKind, Prompter, parse_input
from .session import GameSession, update_win_state

__all__ = [
    "Action",
    "Input",
    "InputKind",
    "Prompter",
    "parse_input",
    "GameSession",
    "update_win_state",
]
