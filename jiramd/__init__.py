"""Convert between CommonMark and Jira flavored markdown."""

from jiramd.md import (
    ColorPlaceholders,
    from_jira,
    from_jira_with_colors,
    to_jira,
)

__all__ = ["ColorPlaceholders", "from_jira", "from_jira_with_colors", "to_jira"]
