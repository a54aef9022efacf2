from .render import get_terminal_width, render_jira, render_markdown

__all__ = ["get_terminal_width", "render_jira", "render_markdown"]
