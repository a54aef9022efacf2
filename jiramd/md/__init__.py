"""Jira flavored markdown conversion with ANSI color preservation."""

from .colors import color_to_ansi, hex_to_ansi
from .convert import (
    fix_escaped_markup,
    from_jira,
    from_jira_with_colors,
    normalize_line_endings,
    strip_color_tags,
    to_jira,
)
from .jira_renderer import JiraRenderer
from .placeholders import ColorPlaceholders

__all__ = [
    "ColorPlaceholders",
    "JiraRenderer",
    "color_to_ansi",
    "fix_escaped_markup",
    "from_jira",
    "from_jira_with_colors",
    "hex_to_ansi",
    "normalize_line_endings",
    "strip_color_tags",
    "to_jira",
]
