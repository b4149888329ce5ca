"""Greeting formatting.

Everything here is pure: the caller decides whether the destination is a
terminal and gets back the exact bytes to write.
"""

from .config import (
    BORDER_WIDTH,
    BOXED_TEXT,
    BRIGHT_CYAN,
    DOWN_LEFT,
    DOWN_RIGHT,
    ENCODING,
    HORIZONTAL,
    PAD_LEFT,
    PAD_RIGHT,
    PLAIN_TEXT,
    RESET,
    UP_LEFT,
    UP_RIGHT,
    VERTICAL,
)


def colorize(text: str) -> str:
    """Wrap text in the bright-cyan escape and a reset."""
    return f"{BRIGHT_CYAN}{text}{RESET}"


def border_line(left: str, right: str) -> str:
    """Build a colored border line from its two corner glyphs."""
    return colorize(left + HORIZONTAL * BORDER_WIDTH + right)


def content_line(text: str) -> str:
    """Build the middle line: text between two individually colored verticals.

    The text itself stays in the terminal's default color.
    """
    edge = colorize(VERTICAL)
    return f"{edge}{' ' * PAD_LEFT}{text}{' ' * PAD_RIGHT}{edge}"


def box_lines(text: str = BOXED_TEXT) -> list[str]:
    """Return the three lines of the boxed greeting, without newlines."""
    return [
        border_line(DOWN_RIGHT, DOWN_LEFT),
        content_line(text),
        border_line(UP_RIGHT, UP_LEFT),
    ]


def format_greeting(is_terminal: bool) -> bytes:
    """Format the greeting for a destination.

    Args:
        is_terminal: Whether the destination is an interactive terminal.

    Returns:
        The boxed, colored greeting for a terminal, otherwise the plain
        ``Hello World`` line. Always newline-terminated UTF-8.
    """
    if is_terminal:
        lines = box_lines()
    else:
        lines = [PLAIN_TEXT]
    return "".join(f"{line}\n" for line in lines).encode(ENCODING)
