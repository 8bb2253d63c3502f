"""Base abstractions for markdown output surfaces."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Protocol

from docgen.models import TypeLink


class SourceRef(Protocol):
    """Anything that knows where it is declared."""

    @property
    def file(self) -> str: ...

    @property
    def line_in_file(self) -> int: ...


class CodeSnippet(Protocol):
    """A member or type that carries a code snippet with type links."""

    @property
    def text(self) -> str: ...

    @property
    def links(self) -> Sequence[TypeLink]: ...


class MarkdownPrinter(Protocol):
    """Protocol for markdown output surfaces.

    A printer accumulates a single document. The ApiDocPrinter obtains a fresh
    printer for every page and delegates all format-specific syntax to it
    (headings, anchors, link targets, code highlighting).
    """

    index_file_name: str

    def page_file_name(self, name: str) -> str:
        """File name of the page documenting the named type."""
        ...

    def header(self, level: int, text: str, anchor: str | None = None) -> None:
        """Add a heading.

        Args:
            level: Heading level (1=title, 2=section, 3=entry)
            text: Heading text
            anchor: Optional stable anchor key to link to this heading
        """
        ...

    def paragraph(self, *fragments: str) -> None:
        """Add a paragraph made of concatenated text fragments."""
        ...

    def text(self, line: str) -> None:
        """Add a raw text line (list items, documentation lines)."""
        ...

    def code(self, snippet: CodeSnippet) -> None:
        """Add a code block for a member or type snippet."""
        ...

    def src_link(self, location: SourceRef, text: str | None = None) -> str:
        """Format a link to a declaration in the source repository.

        Args:
            location: Object with file and line_in_file
            text: Optional link label, defaults to file:line
        """
        ...

    def page_link(self, name: str) -> str:
        """Link target of the page documenting the named type."""
        ...

    def header_link(self, header: str, anchor: str | None = None) -> str:
        """Link fragment pointing at a heading.

        Args:
            header: Heading text
            anchor: Anchor key the heading was emitted with, if any
        """
        ...

    def index_link(self) -> str:
        """Link target of the index page."""
        ...

    def finalize(self) -> bytes:
        """Finalize and return the document as UTF-8 bytes."""
        ...


PrinterFactory = Callable[[], MarkdownPrinter]
"""Type for printer factories: called once per document"""
