"""Render Jira flavored markdown for the terminal with rich."""

import os
import shutil

from rich.console import Console
from rich.markdown import Markdown

from jiramd.config import defaults, get_config
from jiramd.md import from_jira_with_colors


def get_terminal_width() -> int:
    terminal_width = None
    try:
        # Prefer FZF_PREVIEW_COLUMNS if set
        terminal_width = int(os.getenv("FZF_PREVIEW_COLUMNS", os.getenv("COLUMNS", "")))
    except (TypeError, ValueError):
        terminal_width = None

    if terminal_width is None:
        try:
            terminal_width = shutil.get_terminal_size(
                (defaults.MIN_TERMINAL_WIDTH, 20)
            ).columns
        except OSError:
            terminal_width = defaults.MIN_TERMINAL_WIDTH

    return max(
        defaults.MIN_TERMINAL_WIDTH, min(terminal_width, defaults.MAX_TERMINAL_WIDTH)
    )


def render_markdown(text, width=None, code_theme=None) -> str:
    """Render CommonMark to an ANSI styled string."""
    console = Console(
        color_system="truecolor",
        force_terminal=True,
        width=width or get_terminal_width(),
    )
    md = Markdown(
        text,
        code_theme=code_theme or get_config()["code_theme"],
        justify="left",
    )
    with console.capture() as capture:
        console.print(md)
    return capture.get()


def render_jira(text, width=None) -> str:
    """Render Jira markup for the terminal, keeping {color} tags as ANSI colors."""
    if not text:
        return ""

    markdown, placeholders = from_jira_with_colors(text)
    return placeholders.expand(render_markdown(markdown, width=width))
