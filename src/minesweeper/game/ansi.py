"""ANSI escape sequences used by the terminal renderer."""

CLEAR_SCREEN = "\x1b[2J\x1b[1;1H"
RESET = "\x1b[0m"

FLAGGED_MINE = "\x1b[92m"
FATAL_MINE = "\x1b[91m"
WRONG_FLAG = "\x1b[91m"

# Foreground colour for each adjacent mine count
NUMBER_COLORS = {
    1: "\x1b[32m",
    2: "\x1b[37m",
    3: "\x1b[96m",
    4: "\x1b[33m",
    5: "\x1b[34m",
    6: "\x1b[35m",
    7: "\x1b[31m",
    8: "\x1b[97m",
}


def paint(text: str, color: str, enabled: bool = True) -> str:
    """Wrap text in a colour code followed by a reset."""
    if not enabled:
        return text
    return f"{color}{text}{RESET}"
