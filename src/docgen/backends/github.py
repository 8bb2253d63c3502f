"""GitHub-flavored markdown printer."""

from __future__ import annotations

import html
from typing import TYPE_CHECKING

from docgen.backends.markdown import BaseMarkdownPrinter

if TYPE_CHECKING:
    from docgen.backends.base import CodeSnippet


class GithubMarkdownPrinter(BaseMarkdownPrinter):
    """Printer for markdown rendered on github.com.

    GitHub does not allow custom heading ids, so anchored headings are preceded
    by a named HTML anchor. Code is emitted as an HTML ``<pre>`` block so that
    referenced types can be linked from inside the snippet.
    """

    index_file_name = "README.md"

    def header(self, level: int, text: str, anchor: str | None = None) -> None:
        if anchor:
            self.lines.append(f'<a name="{html.escape(anchor)}"></a>')
            self.lines.append("")
        self.lines.append(f"{'#' * level} {text}")
        self.lines.append("")

    def code(self, snippet: CodeSnippet) -> None:
        self.lines.append(f"<pre>{self._highlight(snippet)}</pre>")
        self.lines.append("")

    def _highlight(self, snippet: CodeSnippet) -> str:
        """Escape the snippet and wrap each linked span in an anchor tag."""
        text = snippet.text
        spans = sorted(
            (link.location, link.path)
            for link in snippet.links
            if link.location is not None and link.path
        )

        parts: list[str] = []
        pos = 0
        for (start, end), path in spans:
            # Skip spans that overlap a previous one or fall outside the text
            if start < pos or end > len(text) or start >= end:
                continue
            parts.append(html.escape(text[pos:start]))
            parts.append(f'<a href="#{html.escape(path)}">{html.escape(text[start:end])}</a>')
            pos = end
        parts.append(html.escape(text[pos:]))
        return "".join(parts)
