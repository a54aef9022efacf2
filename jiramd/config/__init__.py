"""Configuration utilities for jiramd."""

import os

from . import defaults


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").strip().lower() in ("1", "true", "yes", "on")


def get_config() -> dict:
    """Return runtime settings resolved from the environment."""
    return {
        "verbose": _env_flag(defaults.VERBOSE_ENV),
        "code_theme": os.getenv(defaults.CODE_THEME_ENV) or defaults.CODE_THEME,
    }
