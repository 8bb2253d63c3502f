"""Markdown output surfaces."""

from docgen.backends.base import (
    CodeSnippet,
    MarkdownPrinter,
    PrinterFactory,
    SourceRef,
)
from docgen.backends.factory import create_printer_factory
from docgen.backends.github import GithubMarkdownPrinter
from docgen.backends.markdown import BaseMarkdownPrinter, make_anchor_from_text
from docgen.backends.techdocs import TechdocsMarkdownPrinter

__all__ = [
    "BaseMarkdownPrinter",
    "CodeSnippet",
    "GithubMarkdownPrinter",
    "MarkdownPrinter",
    "PrinterFactory",
    "SourceRef",
    "TechdocsMarkdownPrinter",
    "create_printer_factory",
    "make_anchor_from_text",
]
