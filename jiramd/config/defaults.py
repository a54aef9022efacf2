"""Default configuration values and constants for jiramd."""

import types

ANSI_RESET = "\033[0m"

# Named colors accepted in {color:...} tags, mapped to ANSI codes.
NAMED_COLORS = types.MappingProxyType(
    {
        "black": "\033[30m",
        "red": "\033[31m",
        "green": "\033[32m",
        "yellow": "\033[33m",
        "blue": "\033[34m",
        "magenta": "\033[35m",
        "purple": "\033[35m",
        "cyan": "\033[36m",
        "white": "\033[37m",
        "orange": "\033[38;5;208m",
        "pink": "\033[38;5;213m",
        "brown": "\033[38;5;130m",
        "gray": "\033[90m",
        "grey": "\033[90m",
    }
)

MARKER_PREFIX = "CLRM"
MARKER_BYTE_LEN = 8

HEX_COLOR_LEN = 6
SHORT_HEX_COLOR_LEN = 3

LOG_LEVELS = {
    "DEBUG": "cyan",
    "INFO": "green",
    "WARNING": "yellow",
    "ERROR": "red",
    "SUCCESS": "blue",
}

MIN_TERMINAL_WIDTH = 80
MAX_TERMINAL_WIDTH = 130
CODE_THEME = "github-dark"

VERBOSE_ENV = "JIRAMD_VERBOSE"
CODE_THEME_ENV = "JIRAMD_CODE_THEME"
