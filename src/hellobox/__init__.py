"""Hellobox - a greeting that knows where it is printed.

On an interactive terminal the greeting is drawn inside a bright-cyan box;
when output is piped or redirected it degrades to a single plain line.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
