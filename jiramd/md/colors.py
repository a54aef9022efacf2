"""Resolve Jira color specifications to ANSI escape codes."""

import re

from jiramd.config import defaults

HEX_COLOR_RE = re.compile(r"#?([0-9a-fA-F]{6}|[0-9a-fA-F]{3})")


def color_to_ansi(color_spec: str) -> str:
    """Convert a normalized color spec to an ANSI escape code.

    Named colors win over hex parsing. Returns an empty string when the spec
    is neither a known name nor a 3 or 6 digit hex color.
    """
    code = defaults.NAMED_COLORS.get(color_spec)
    if code:
        return code

    if HEX_COLOR_RE.fullmatch(color_spec):
        return hex_to_ansi(color_spec)

    return ""


def hex_to_ansi(hex_color: str) -> str:
    """Convert a hex color like #de350b or #f00 to a 24-bit ANSI sequence."""
    hex_color = hex_color.removeprefix("#")

    # f00 -> ff0000
    if len(hex_color) == defaults.SHORT_HEX_COLOR_LEN:
        hex_color = "".join(c * 2 for c in hex_color)

    if len(hex_color) != defaults.HEX_COLOR_LEN:
        return ""

    try:
        red, green, blue = (int(hex_color[i : i + 2], 16) for i in (0, 2, 4))
    except ValueError:
        return ""

    return f"\033[38;2;{red};{green};{blue}m"
