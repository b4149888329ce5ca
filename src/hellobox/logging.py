"""Package logging for Hellobox.

Records go to the ``hellobox`` logger, which carries a ``NullHandler`` so
that nothing reaches stderr unless the host application configures logging.
"""

import logging
from typing import Optional

from .config import LOGGER_NAME

_configured = False


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get the package logger or one of its children.

    Args:
        name: Child name (e.g. "cli"). Defaults to the package logger itself.

    Returns:
        Logger under the ``hellobox`` namespace.
    """
    global _configured
    root = logging.getLogger(LOGGER_NAME)
    if not _configured:
        root.addHandler(logging.NullHandler())
        _configured = True
    if name is None:
        return root
    return root.getChild(name)
