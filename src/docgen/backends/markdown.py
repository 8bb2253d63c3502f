"""Shared markdown printer behavior."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from docgen.backends.base import CodeSnippet, SourceRef


def make_anchor_from_text(text: str) -> str:
    """Create a GitHub-style heading anchor from any text."""
    # Lowercase, replace spaces with hyphens
    anchor = text.lower().replace(" ", "-")
    # Remove characters that aren't alphanumeric, hyphens or underscores
    anchor = "".join(c for c in anchor if c.isalnum() or c in "-_")
    while "--" in anchor:
        anchor = anchor.replace("--", "-")
    return anchor.strip("-")


class BaseMarkdownPrinter:
    """Line-buffered markdown printer.

    Subclasses provide the dialect-specific pieces: heading anchors, page file
    names and code block rendering.
    """

    index_file_name = "README.md"

    def __init__(self, source_base_url: str | None = None):
        """Initialize an empty document.

        Args:
            source_base_url: Prefix joined with a declaration's file path to build
                source links, e.g. "https://github.com/org/repo/blob/master/"
        """
        self.source_base_url = source_base_url
        self.lines: list[str] = []

    def page_file_name(self, name: str) -> str:
        return f"{name}.md"

    def header(self, level: int, text: str, anchor: str | None = None) -> None:
        raise NotImplementedError

    def code(self, snippet: CodeSnippet) -> None:
        raise NotImplementedError

    def header_link(self, header: str, anchor: str | None = None) -> str:
        return f"#{anchor or make_anchor_from_text(header)}"

    def paragraph(self, *fragments: str) -> None:
        self.lines.append("".join(fragments))
        self.lines.append("")

    def text(self, line: str) -> None:
        self.lines.append(line)

    def src_link(self, location: SourceRef, text: str | None = None) -> str:
        label = text or f"{location.file}:{location.line_in_file}"
        base = self.source_base_url or ""
        return f"[{label}]({base}{location.file}#L{location.line_in_file})"

    def page_link(self, name: str) -> str:
        return f"./{self.page_file_name(name)}"

    def index_link(self) -> str:
        return f"./{self.index_file_name}"

    def finalize(self) -> bytes:
        """Join all lines into a UTF-8 document ending in a single newline."""
        content = "\n".join(self.lines).rstrip("\n")
        return f"{content}\n".encode()
