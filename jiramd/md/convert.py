"""Translate between CommonMark and Jira flavored markdown."""

from typing import Tuple

import jira2markdown
from markdown_it import MarkdownIt

from jiramd import utils
from jiramd.config import get_config

from .jira_renderer import JiraRenderer
from .placeholders import COLOR_TAG_RE, ColorPlaceholders


def to_jira(markdown: str) -> str:
    """Translate CommonMark to Jira flavored markdown."""
    if not markdown:
        return ""

    renderer = JiraRenderer(escape_macros=False, verbose=get_config()["verbose"])
    parser = MarkdownIt("commonmark").enable(["table", "strikethrough"])
    return renderer.render(parser.parse(markdown))


def normalize_line_endings(text: str) -> str:
    """Convert Windows-style \\r\\n to \\n, jira2markdown tables need it."""
    return text.replace("\r\n", "\n")


def fix_escaped_markup(text: str) -> str:
    """Turn the {*}bold{*} and {_}italic{_} forms into plain Jira markup."""
    return text.replace("{*}", "*").replace("{_}", "_")


def strip_color_tags(text: str) -> str:
    """Remove {color:xxx}...{color} tags, keeping only the content."""
    return COLOR_TAG_RE.sub(lambda match: match.group(2), text)


def _prepare(jfm: str) -> str:
    return fix_escaped_markup(normalize_line_endings(jfm))


def from_jira(jfm: str) -> str:
    """Translate Jira flavored markdown to CommonMark, dropping colors."""
    return jira2markdown.convert(strip_color_tags(_prepare(jfm)))


def from_jira_with_colors(jfm: str) -> Tuple[str, ColorPlaceholders]:
    """Translate Jira flavored markdown to CommonMark, keeping colors.

    Color regions become placeholder markers in the returned markdown. Run the
    markdown through a renderer, then pass the result to the returned table's
    expand() to get ANSI colored output.
    """
    verbose = get_config()["verbose"]
    placeholders = ColorPlaceholders(verbose=verbose)
    text = placeholders.process_color_tags(_prepare(jfm))
    utils.log(
        f"Preserved {len(placeholders)} color region(s)",
        level="DEBUG",
        verbose_only=True,
        verbose=verbose,
    )
    return jira2markdown.convert(text), placeholders
