"""Small helpers shared across jiramd."""

import sys

import click

from jiramd.config import defaults


def log(message, level="INFO", verbose_only=False, verbose=False, file=sys.stderr):
    """
    Log a message with color-coded level prefix.

    Args:
        message (str): The message to log.
        level (str): The log level (e.g., INFO, WARNING, ERROR).
        verbose_only (bool): Only log if verbose mode is enabled.
        verbose (bool): Whether verbose mode is enabled.
        file (file): The file to write to.
    """
    if verbose_only and not verbose:
        return

    color = defaults.LOG_LEVELS.get(level, "reset")
    prefix = f"[{level}] " if level else ""

    if file == sys.stdout:
        click.secho(f"{prefix}{message}", fg=color.lower())
    else:
        click.secho(f"{prefix}{message}", fg=color.lower(), err=True)
