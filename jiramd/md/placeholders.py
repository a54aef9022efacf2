"""Carry Jira color tags through a markdown renderer as inert placeholders."""

import re
import secrets
import threading
from typing import Dict, Optional

from jiramd import utils
from jiramd.config import defaults

from .colors import color_to_ansi

# {color:xxx}...{color}, the spec part is optional
COLOR_TAG_RE = re.compile(r"\{color(?::([^}]+))?\}([\s\S]*?)\{color\}")


def generate_marker() -> str:
    """Create a random marker that will not appear in normal text."""
    return defaults.MARKER_PREFIX + secrets.token_hex(defaults.MARKER_BYTE_LEN)


class ColorPlaceholders:
    """Mapping from placeholder markers to ANSI codes for one conversion.

    Markers are random tokens that markdown renderers treat as plain text, so
    they survive rendering and can be swapped for escape codes afterwards.
    Access to the mapping is serialized with a lock.
    """

    def __init__(self, verbose: bool = False):
        self.verbose = verbose
        self._lock = threading.Lock()
        self._placeholders: Dict[str, str] = {}
        self.reset_marker = generate_marker()

    def __len__(self) -> int:
        with self._lock:
            return len(self._placeholders)

    def get(self, placeholder: str) -> Optional[str]:
        """Return the ANSI code recorded for a placeholder, if any."""
        with self._lock:
            return self._placeholders.get(placeholder)

    def _unique_marker(self, text: str) -> str:
        """Create a marker that does not occur in text or in this table."""
        marker = generate_marker()
        while (
            marker in text
            or marker in self._placeholders
            or marker == self.reset_marker
        ):
            marker = generate_marker()
        return marker

    def process_color_tags(self, text: str) -> str:
        """Replace {color:xxx}...{color} regions with placeholder pairs.

        Regions whose color does not resolve keep their content only.
        """

        def replace(match):
            color_spec = (match.group(1) or "").strip().lower()
            content = match.group(2)

            ansi_code = color_to_ansi(color_spec)
            if not ansi_code:
                if color_spec:
                    utils.log(
                        f"Ignoring unknown color {color_spec!r}",
                        level="WARNING",
                        verbose_only=True,
                        verbose=self.verbose,
                    )
                return content

            with self._lock:
                placeholder = self._unique_marker(text)
                self._placeholders[placeholder] = ansi_code

            return placeholder + content + self.reset_marker

        return COLOR_TAG_RE.sub(replace, text)

    def expand(self, rendered: str) -> str:
        """Replace placeholders in rendered output with ANSI codes.

        Placeholders the renderer dropped are skipped and their color is lost.
        Expanding text that did not come from this table's conversion leaves
        that text's markers in place; nothing detects the mismatch.
        """
        with self._lock:
            result = rendered
            missing = 0
            for placeholder, ansi_code in self._placeholders.items():
                if placeholder not in result:
                    missing += 1
                    continue
                result = result.replace(placeholder, ansi_code)
            result = result.replace(self.reset_marker, defaults.ANSI_RESET)

        if missing:
            utils.log(
                f"{missing} color placeholder(s) not found in rendered output",
                level="DEBUG",
                verbose_only=True,
                verbose=self.verbose,
            )
        return result
