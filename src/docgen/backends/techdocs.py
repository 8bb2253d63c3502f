"""TechDocs (MkDocs) markdown printer."""

from __future__ import annotations

from typing import TYPE_CHECKING

from docgen.backends.markdown import BaseMarkdownPrinter

if TYPE_CHECKING:
    from docgen.backends.base import CodeSnippet


class TechdocsMarkdownPrinter(BaseMarkdownPrinter):
    """Printer for MkDocs-based TechDocs sites.

    Heading anchors use the attr_list extension syntax and code is emitted as a
    fenced block, which MkDocs highlights itself.
    """

    index_file_name = "index.md"

    def __init__(self, source_base_url: str | None = None, code_language: str = "ts"):
        super().__init__(source_base_url)
        self.code_language = code_language

    def header(self, level: int, text: str, anchor: str | None = None) -> None:
        suffix = f" {{#{anchor}}}" if anchor else ""
        self.lines.append(f"{'#' * level} {text}{suffix}")
        self.lines.append("")

    def code(self, snippet: CodeSnippet) -> None:
        self.lines.append(f"```{self.code_language}")
        self.lines.extend(snippet.text.splitlines())
        self.lines.append("```")
        self.lines.append("")
