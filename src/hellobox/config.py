"""Constants for Hellobox output."""

# Logger name shared by every module in the package
LOGGER_NAME = "hellobox"

# ANSI escape sequences
BRIGHT_CYAN = "\x1b[1;36m"
RESET = "\x1b[0m"

# Box-drawing glyphs
DOWN_RIGHT = "\u250c"  # ┌
DOWN_LEFT = "\u2510"  # ┐
UP_RIGHT = "\u2514"  # └
UP_LEFT = "\u2518"  # ┘
HORIZONTAL = "\u2500"  # ─
VERTICAL = "\u2502"  # │

# Number of horizontal glyphs between the corners of a border line
BORDER_WIDTH = 15

# Padding around the boxed greeting. The content line ends up two columns
# wider than the borders; that is the established look.
PAD_LEFT = 2
PAD_RIGHT = 3

BOXED_TEXT = "Hello World!"
PLAIN_TEXT = "Hello World"

ENCODING = "utf-8"
