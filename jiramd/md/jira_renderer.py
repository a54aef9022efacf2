"""
Renders a markdown-it token stream as JIRA markup language.
Handles headings, formatting, lists, links, code, blockquotes, tables, images, etc.
"""

import re

from markdown_it.tree import SyntaxTreeNode

from jiramd import utils

MACRO_CHARS_RE = re.compile(r"([{}])")


class JiraRenderer:
    """Emit Jira wiki markup from parsed CommonMark.

    With escape_macros enabled, braces in plain text are backslash escaped so
    Jira does not read them as macros. Code is never escaped.
    """

    def __init__(self, escape_macros: bool = True, verbose: bool = False):
        self.escape_macros = escape_macros
        self.verbose = verbose
        self._list_markers = []

    def render(self, tokens) -> str:
        self._list_markers = []
        output = self._blocks(SyntaxTreeNode(tokens).children)
        return output + "\n" if output else ""

    def _render(self, node) -> str:
        method = getattr(self, f"_render_{node.type}", None)
        if method is not None:
            return method(node)

        utils.log(
            f"No Jira rendering for markdown node {node.type!r}",
            level="DEBUG",
            verbose_only=True,
            verbose=self.verbose,
        )
        if node.children:
            return self._join(node)
        return self._escape(node.content)

    def _blocks(self, nodes, separator="\n\n") -> str:
        rendered = (self._render(node) for node in nodes)
        return separator.join(block for block in rendered if block)

    def _join(self, node) -> str:
        return "".join(self._render(child) for child in node.children)

    def _escape(self, text: str) -> str:
        if not self.escape_macros:
            return text
        return MACRO_CHARS_RE.sub(r"\\\1", text)

    # --- Blocks ---

    def _render_heading(self, node):
        return f"h{node.tag[1:]}. {self._join(node)}"

    _render_paragraph = _join
    _render_inline = _join

    def _render_blockquote(self, node):
        return "{quote}\n" + self._blocks(node.children) + "\n{quote}"

    def _render_fence(self, node):
        info = node.info.strip()
        lang = info.split()[0] if info else ""
        return self._code(node.content, lang)

    def _render_code_block(self, node):
        return self._code(node.content)

    def _code(self, content, lang=""):
        if not content.endswith("\n"):
            content += "\n"
        header = f"{{code:{lang}}}" if lang else "{code}"
        return f"{header}\n{content}{{code}}"

    def _render_hr(self, node):
        return "----"

    def _render_html_block(self, node):
        return node.content.rstrip("\n")

    # --- Lists ---

    def _render_bullet_list(self, node):
        return self._list(node, "*")

    def _render_ordered_list(self, node):
        return self._list(node, "#")

    def _list(self, node, marker):
        self._list_markers.append(marker)
        try:
            return self._blocks(node.children, "\n")
        finally:
            self._list_markers.pop()

    def _render_list_item(self, node):
        prefix = "".join(self._list_markers)
        body = self._blocks(node.children, "\n")
        return f"{prefix} {body}"

    # --- Tables ---

    def _render_table(self, node):
        return self._blocks(node.children, "\n")

    _render_thead = _render_table
    _render_tbody = _render_table

    def _render_tr(self, node):
        header = all(cell.type == "th" for cell in node.children)
        separator = "||" if header else "|"
        cells = [self._join(cell).strip() for cell in node.children]
        return separator + separator.join(cells) + separator

    # --- Inline ---

    def _render_text(self, node):
        return self._escape(node.content)

    def _render_softbreak(self, node):
        return "\n"

    def _render_hardbreak(self, node):
        return "\\\\\n"

    def _render_code_inline(self, node):
        return "{{" + node.content + "}}"

    def _render_strong(self, node):
        return f"*{self._join(node)}*"

    def _render_em(self, node):
        return f"_{self._join(node)}_"

    def _render_s(self, node):
        return f"-{self._join(node)}-"

    def _render_link(self, node):
        href = node.attrs.get("href", "")
        text = self._join(node)
        if not text or text == href:
            return f"[{href}]"
        return f"[{text}|{href}]"

    def _render_image(self, node):
        return f"!{node.attrs.get('src', '')}!"

    def _render_html_inline(self, node):
        return node.content
