"""Terminal detection for output streams."""

import sys
from typing import Optional, TextIO


def stdout_is_terminal(stream: Optional[TextIO] = None) -> bool:
    """Check whether a stream is attached to an interactive terminal.

    Args:
        stream: Stream to inspect. Defaults to ``sys.stdout`` at call time,
            so replaced streams (test runners, redirections) are honored.

    Returns:
        True if the OS reports the stream as a TTY, False otherwise.
    """
    if stream is None:
        stream = sys.stdout
    if stream is None:
        # Interpreters started without a console have no stdout at all
        return False
    try:
        return stream.isatty()
    except (AttributeError, ValueError):
        # No isatty(), or the underlying file is already closed
        return False
