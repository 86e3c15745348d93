"""ANSI escape sequences and a helper that wraps text in them."""

from typing import Final


class Color:
    """Namespace of ANSI colour and style escape sequences."""

    BLACK: Final = "\033[30m"
    RED: Final = "\033[31m"
    GREEN: Final = "\033[32m"
    YELLOW: Final = "\033[33m"
    BLUE: Final = "\033[34m"
    MAGENTA: Final = "\033[35m"
    CYAN: Final = "\033[36m"
    WHITE: Final = "\033[37m"

    BG_BLACK: Final = "\033[40m"
    BG_RED: Final = "\033[41m"
    BG_GREEN: Final = "\033[42m"
    BG_YELLOW: Final = "\033[43m"
    BG_BLUE: Final = "\033[44m"
    BG_MAGENTA: Final = "\033[45m"
    BG_CYAN: Final = "\033[46m"
    BG_WHITE: Final = "\033[47m"

    RESET: Final = "\033[0m"
    BOLD: Final = "\033[1m"
    UNDERLINE: Final = "\033[4m"
    INVERSE: Final = "\033[7m"


def colorize(text: str, fg_color: str, style: str = "") -> str:
    """Return ``text`` prefixed by ``style`` and ``fg_color`` and followed by a reset."""
    return f"{style}{fg_color}{text}{Color.RESET}"